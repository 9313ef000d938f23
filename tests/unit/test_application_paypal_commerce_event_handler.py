"""Unit tests for PayPalCommerceEventHandler.

Tests cover:
- Customer deletion delegates payment token deletion
- Payment methods grid excludes the plugin's own row
- Customer navigation gets the payment tokens entry after "Orders"
- Shipment carrier is saved for existing shipments, stashed for new ones
- Stashed carrier is saved when the shipment is created
- Tracking numbers are pushed to the provider
- System warning is appended when the merchant ID is missing
- Guard clauses (not connected, tracking disabled, inactive provider)

Test Strategy:
- Mock protocols (service manager, generic attributes, localization,
  shipments, logger)
- Real RequestContext (it is a plain value object)
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from paypal_commerce.application.event_handlers import PayPalCommerceEventHandler
from paypal_commerce.core.constants import PayPalCommerceDefaults
from paypal_commerce.core.enums import ErrorCode
from paypal_commerce.core.result import Failure, Success
from paypal_commerce.domain.entities import (
    PaymentToken,
    Shipment,
    SystemWarning,
    SystemWarningLevel,
)
from paypal_commerce.domain.errors import ProviderUnavailableError
from paypal_commerce.domain.events import (
    CustomerPermanentlyDeleted,
    ModelPrepared,
    ModelReceived,
    ShipmentCreated,
    ShipmentTrackingNumberSet,
    SystemWarningCreated,
)
from paypal_commerce.domain.models import (
    CustomerNavigationItem,
    CustomerNavigationModel,
    CustomerNavigationTab,
    OtherModel,
    PaymentMethodListModel,
    PaymentMethodModel,
    ShipmentModel,
)
from paypal_commerce.domain.value_objects import RequestContext
from tests.conftest import create_plugin_settings, create_service_manager

CARRIER_KEY = PayPalCommerceDefaults.SHIPMENT_CARRIER_ATTRIBUTE


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def service_manager():
    """Create mock PaymentProviderServiceProtocol."""
    return create_service_manager()


@pytest.fixture
def generic_attributes():
    """Create mock GenericAttributeProtocol."""
    attributes = MagicMock()
    attributes.save_attribute = AsyncMock(return_value=None)
    return attributes


@pytest.fixture
def localization():
    """Create mock LocalizationProtocol."""
    service = MagicMock()
    service.get_resource = AsyncMock(return_value="Payment methods")
    return service


@pytest.fixture
def shipments():
    """Create mock ShipmentRepositoryProtocol (no shipment found by default)."""
    repository = MagicMock()
    repository.get_shipment_by_id = AsyncMock(return_value=None)
    return repository


@pytest.fixture
def make_handler(service_manager, generic_attributes, localization, shipments, mock_logger):
    """Factory building the handler with given settings overrides."""

    def _make(**settings_overrides) -> PayPalCommerceEventHandler:
        return PayPalCommerceEventHandler(
            service_manager=service_manager,
            settings=create_plugin_settings(**settings_overrides),
            generic_attributes=generic_attributes,
            localization=localization,
            shipments=shipments,
            logger=mock_logger,
        )

    return _make


def _navigation() -> CustomerNavigationModel:
    return CustomerNavigationModel(
        items=[
            CustomerNavigationItem(
                route_name="CustomerInfo", title="Customer info", tab=CustomerNavigationTab.INFO
            ),
            CustomerNavigationItem(
                route_name="CustomerAddresses",
                title="Addresses",
                tab=CustomerNavigationTab.ADDRESSES,
            ),
            CustomerNavigationItem(
                route_name="CustomerOrders", title="Orders", tab=CustomerNavigationTab.ORDERS
            ),
            CustomerNavigationItem(
                route_name="CustomerChangePassword",
                title="Change password",
                tab=CustomerNavigationTab.CHANGE_PASSWORD,
            ),
        ]
    )


def _token() -> PaymentToken:
    return PaymentToken(
        id=1,
        customer_id=7,
        vault_id="8kk8451t",
        vault_customer_id="customer_4029352050",
        title="Visa *1111",
    )


def _provider_failure() -> Failure:
    return Failure(
        error=ProviderUnavailableError(
            code=ErrorCode.PROVIDER_UNAVAILABLE,
            message="PayPal API is unavailable",
            provider_name=PayPalCommerceDefaults.PROVIDER_NAME,
        )
    )


# =============================================================================
# Customer deletion
# =============================================================================


@pytest.mark.unit
class TestHandleCustomerPermanentlyDeleted:
    """Test payment token deletion on customer removal."""

    @pytest.mark.asyncio
    async def test_deletes_customer_payment_tokens(self, make_handler, service_manager):
        handler = make_handler()

        await handler.handle_customer_permanently_deleted(
            CustomerPermanentlyDeleted(customer_id=42)
        )

        service_manager.delete_payment_tokens.assert_awaited_once_with(
            handler._settings, 42
        )

    @pytest.mark.asyncio
    async def test_deletes_even_when_not_connected(self, make_handler, service_manager):
        """No guard: the service manager decides what deletion means."""
        handler = make_handler(client_id="", secret_key="")

        await handler.handle_customer_permanently_deleted(
            CustomerPermanentlyDeleted(customer_id=42)
        )

        service_manager.delete_payment_tokens.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_logs_provider_failure(self, make_handler, service_manager, mock_logger):
        service_manager.delete_payment_tokens.return_value = _provider_failure()
        handler = make_handler()

        await handler.handle_customer_permanently_deleted(
            CustomerPermanentlyDeleted(customer_id=42)
        )

        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args[0][0] == "payment_tokens_deletion_failed"
        assert mock_logger.warning.call_args[1]["customer_id"] == 42

    @pytest.mark.asyncio
    async def test_collaborator_exception_propagates(self, make_handler, service_manager):
        service_manager.delete_payment_tokens.side_effect = RuntimeError("boom")
        handler = make_handler()

        with pytest.raises(RuntimeError, match="boom"):
            await handler.handle_customer_permanently_deleted(
                CustomerPermanentlyDeleted(customer_id=42)
            )


# =============================================================================
# Model prepared - payment methods grid
# =============================================================================


@pytest.mark.unit
class TestHandleModelPreparedPaymentMethods:
    """Test the plugin row is hidden from the payment methods grid."""

    @pytest.mark.asyncio
    async def test_excludes_plugin_row_and_preserves_order(self, make_handler):
        model = PaymentMethodListModel(
            data=[
                PaymentMethodModel(system_name="Payments.CheckMoneyOrder"),
                PaymentMethodModel(system_name=PayPalCommerceDefaults.SYSTEM_NAME),
                PaymentMethodModel(system_name="Payments.Manual"),
                PaymentMethodModel(system_name="Payments.PurchaseOrder"),
            ]
        )

        await make_handler().handle_model_prepared(ModelPrepared(model=model))

        assert [method.system_name for method in model.data] == [
            "Payments.CheckMoneyOrder",
            "Payments.Manual",
            "Payments.PurchaseOrder",
        ]

    @pytest.mark.asyncio
    async def test_name_match_is_exact(self, make_handler):
        model = PaymentMethodListModel(
            data=[
                PaymentMethodModel(system_name="payments.paypalcommerce"),
                PaymentMethodModel(system_name="Payments.PayPalCommerce.Legacy"),
            ]
        )

        await make_handler().handle_model_prepared(ModelPrepared(model=model))

        assert len(model.data) == 2

    @pytest.mark.asyncio
    async def test_does_not_query_provider(self, make_handler, service_manager):
        model = PaymentMethodListModel(data=[])

        await make_handler().handle_model_prepared(ModelPrepared(model=model))

        service_manager.is_active.assert_not_called()


# =============================================================================
# Model prepared - customer navigation
# =============================================================================


@pytest.mark.unit
class TestHandleModelPreparedCustomerNavigation:
    """Test the payment tokens entry in the customer navigation."""

    @pytest.mark.asyncio
    async def test_inserts_item_right_after_orders(self, make_handler):
        navigation = _navigation()
        orders_index = navigation.index_of_tab(CustomerNavigationTab.ORDERS)
        length = len(navigation.items)

        await make_handler(use_vault=True).handle_model_prepared(
            ModelPrepared(model=navigation)
        )

        assert len(navigation.items) == length + 1
        item = navigation.items[orders_index + 1]
        assert item.route_name == PayPalCommerceDefaults.PAYMENT_TOKENS_ROUTE
        assert item.tab == PayPalCommerceDefaults.PAYMENT_TOKENS_MENU_TAB
        assert item.item_class == "paypal-payment-tokens"
        assert item.title == "Payment methods"

    @pytest.mark.asyncio
    async def test_title_is_localized(self, make_handler, localization):
        await make_handler(use_vault=True).handle_model_prepared(
            ModelPrepared(model=_navigation())
        )

        localization.get_resource.assert_awaited_once_with(
            PayPalCommerceDefaults.PAYMENT_TOKENS_RESOURCE
        )

    @pytest.mark.asyncio
    async def test_inserts_at_front_when_orders_missing(self, make_handler, mock_logger):
        navigation = CustomerNavigationModel(
            items=[
                CustomerNavigationItem(
                    route_name="CustomerInfo", title="Info", tab=CustomerNavigationTab.INFO
                )
            ]
        )

        await make_handler(use_vault=True).handle_model_prepared(
            ModelPrepared(model=navigation)
        )

        assert navigation.items[0].route_name == PayPalCommerceDefaults.PAYMENT_TOKENS_ROUTE
        assert len(navigation.items) == 2
        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args[0][0] == "customer_navigation_orders_item_missing"

    @pytest.mark.asyncio
    async def test_not_active_leaves_model_unchanged_twice(
        self, make_handler, service_manager, localization
    ):
        service_manager.is_active.return_value = Success(value=False)
        navigation = _navigation()
        before = list(navigation.items)
        handler = make_handler(use_vault=True)

        await handler.handle_model_prepared(ModelPrepared(model=navigation))
        assert navigation.items == before

        await handler.handle_model_prepared(ModelPrepared(model=navigation))
        assert navigation.items == before

        localization.get_resource.assert_not_called()

    @pytest.mark.asyncio
    async def test_status_failure_treated_as_not_active(
        self, make_handler, service_manager, mock_logger
    ):
        service_manager.is_active.return_value = _provider_failure()
        navigation = _navigation()

        await make_handler(use_vault=True).handle_model_prepared(
            ModelPrepared(model=navigation)
        )

        assert len(navigation.items) == 4
        assert mock_logger.warning.call_args[0][0] == "payment_provider_status_unavailable"

    @pytest.mark.asyncio
    async def test_no_vault_and_no_tokens_skips_item(self, make_handler, service_manager):
        navigation = _navigation()

        await make_handler(use_vault=False).handle_model_prepared(
            ModelPrepared(model=navigation)
        )

        assert len(navigation.items) == 4
        service_manager.get_payment_tokens.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_no_vault_but_stored_tokens_adds_item(self, make_handler, service_manager):
        service_manager.get_payment_tokens.return_value = Success(value=[_token()])
        navigation = _navigation()

        await make_handler(use_vault=False).handle_model_prepared(
            ModelPrepared(model=navigation, request=RequestContext(customer_id=7))
        )

        assert len(navigation.items) == 5
        service_manager.get_payment_tokens.assert_awaited_once()
        assert service_manager.get_payment_tokens.call_args.kwargs["customer_id"] == 7

    @pytest.mark.asyncio
    async def test_vault_enabled_does_not_list_tokens(self, make_handler, service_manager):
        await make_handler(use_vault=True).handle_model_prepared(
            ModelPrepared(model=_navigation())
        )

        service_manager.get_payment_tokens.assert_not_called()

    @pytest.mark.asyncio
    async def test_token_listing_failure_skips_item(
        self, make_handler, service_manager, mock_logger
    ):
        service_manager.get_payment_tokens.return_value = _provider_failure()
        navigation = _navigation()

        await make_handler(use_vault=False).handle_model_prepared(
            ModelPrepared(model=navigation)
        )

        assert len(navigation.items) == 4
        assert mock_logger.warning.call_args[0][0] == "payment_tokens_unavailable"


@pytest.mark.unit
class TestHandleModelPreparedOtherModels:
    """Test unrelated models are left alone."""

    @pytest.mark.asyncio
    async def test_other_model_is_ignored(self, make_handler, service_manager):
        await make_handler().handle_model_prepared(
            ModelPrepared(model=OtherModel(name="ProductModel"))
        )

        service_manager.is_active.assert_not_called()

    @pytest.mark.asyncio
    async def test_shipment_model_is_ignored_on_prepare(self, make_handler, shipments):
        await make_handler().handle_model_prepared(ModelPrepared(model=ShipmentModel(id=5)))

        shipments.get_shipment_by_id.assert_not_called()


# =============================================================================
# Model received - shipment carrier
# =============================================================================


@pytest.mark.unit
class TestHandleModelReceivedShipment:
    """Test carrier capture from the shipment form."""

    @pytest.mark.asyncio
    async def test_existing_shipment_saves_carrier_without_stashing(
        self, make_handler, shipments, generic_attributes
    ):
        shipment = Shipment(id=5, order_id=1)
        shipments.get_shipment_by_id.return_value = shipment
        request = RequestContext(form={CARRIER_KEY: "UPS"})

        await make_handler().handle_model_received(
            ModelReceived(model=ShipmentModel(id=5, order_id=1), request=request)
        )

        shipments.get_shipment_by_id.assert_awaited_once_with(5)
        generic_attributes.save_attribute.assert_awaited_once_with(
            shipment, CARRIER_KEY, "UPS"
        )
        assert request.peek(CARRIER_KEY) is None

    @pytest.mark.asyncio
    async def test_existing_shipment_saves_empty_carrier(
        self, make_handler, shipments, generic_attributes
    ):
        """An emptied carrier field clears the attribute on existing shipments."""
        shipment = Shipment(id=5, order_id=1)
        shipments.get_shipment_by_id.return_value = shipment

        await make_handler().handle_model_received(
            ModelReceived(
                model=ShipmentModel(id=5), request=RequestContext(form={CARRIER_KEY: ""})
            )
        )

        generic_attributes.save_attribute.assert_awaited_once_with(shipment, CARRIER_KEY, "")

    @pytest.mark.asyncio
    async def test_new_shipment_stashes_carrier_without_saving(
        self, make_handler, generic_attributes
    ):
        request = RequestContext(form={CARRIER_KEY: "DHL"})

        await make_handler().handle_model_received(
            ModelReceived(model=ShipmentModel(order_id=1), request=request)
        )

        generic_attributes.save_attribute.assert_not_called()
        assert request.peek(CARRIER_KEY) == "DHL"

    @pytest.mark.asyncio
    async def test_new_shipment_with_empty_carrier_stashes_nothing(
        self, make_handler, generic_attributes
    ):
        request = RequestContext(form={CARRIER_KEY: ""})

        await make_handler().handle_model_received(
            ModelReceived(model=ShipmentModel(order_id=1), request=request)
        )

        generic_attributes.save_attribute.assert_not_called()
        assert request.peek(CARRIER_KEY) is None

    @pytest.mark.asyncio
    async def test_missing_form_field_does_nothing(self, make_handler, shipments):
        await make_handler().handle_model_received(
            ModelReceived(model=ShipmentModel(id=5), request=RequestContext(form={}))
        )

        shipments.get_shipment_by_id.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides",
        [
            {"client_id": "", "secret_key": ""},
            {"secret_key": ""},
            {"use_shipment_tracking": False},
        ],
    )
    async def test_guards_short_circuit(self, make_handler, shipments, overrides):
        request = RequestContext(form={CARRIER_KEY: "UPS"})

        await make_handler(**overrides).handle_model_received(
            ModelReceived(model=ShipmentModel(id=5), request=request)
        )

        shipments.get_shipment_by_id.assert_not_called()
        assert request.peek(CARRIER_KEY) is None

    @pytest.mark.asyncio
    async def test_other_model_is_ignored(self, make_handler, shipments):
        await make_handler().handle_model_received(
            ModelReceived(
                model=OtherModel(name="OrderModel"),
                request=RequestContext(form={CARRIER_KEY: "UPS"}),
            )
        )

        shipments.get_shipment_by_id.assert_not_called()


# =============================================================================
# Shipment created
# =============================================================================


@pytest.mark.unit
class TestHandleShipmentCreated:
    """Test stashed carrier is moved onto the new shipment."""

    @pytest.mark.asyncio
    async def test_saves_and_consumes_stashed_carrier(self, make_handler, generic_attributes):
        shipment = Shipment(id=9, order_id=1)
        request = RequestContext()
        request.stash(CARRIER_KEY, "FedEx")

        await make_handler().handle_shipment_created(
            ShipmentCreated(shipment=shipment, request=request)
        )

        generic_attributes.save_attribute.assert_awaited_once_with(
            shipment, CARRIER_KEY, "FedEx"
        )
        assert request.peek(CARRIER_KEY) is None

    @pytest.mark.asyncio
    async def test_nothing_stashed_saves_nothing(self, make_handler, generic_attributes):
        await make_handler().handle_shipment_created(
            ShipmentCreated(shipment=Shipment(id=9, order_id=1), request=RequestContext())
        )

        generic_attributes.save_attribute.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_shipment_keeps_stash(self, make_handler, generic_attributes):
        request = RequestContext()
        request.stash(CARRIER_KEY, "FedEx")

        await make_handler().handle_shipment_created(
            ShipmentCreated(shipment=None, request=request)
        )

        generic_attributes.save_attribute.assert_not_called()
        assert request.peek(CARRIER_KEY) == "FedEx"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides",
        [{"client_id": ""}, {"use_shipment_tracking": False}],
    )
    async def test_guards_short_circuit(self, make_handler, generic_attributes, overrides):
        request = RequestContext()
        request.stash(CARRIER_KEY, "FedEx")

        await make_handler(**overrides).handle_shipment_created(
            ShipmentCreated(shipment=Shipment(id=9, order_id=1), request=request)
        )

        generic_attributes.save_attribute.assert_not_called()


# =============================================================================
# Shipment tracking number set
# =============================================================================


@pytest.mark.unit
class TestHandleShipmentTrackingNumberSet:
    """Test tracking info is pushed to the provider."""

    @pytest.mark.asyncio
    async def test_sets_tracking(self, make_handler, service_manager):
        shipment = Shipment(id=9, order_id=1, tracking_number="1Z999")
        handler = make_handler()

        await handler.handle_shipment_tracking_number_set(
            ShipmentTrackingNumberSet(shipment=shipment, tracking_number="1Z999")
        )

        service_manager.set_tracking.assert_awaited_once_with(handler._settings, shipment)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides",
        [{"client_id": "", "secret_key": ""}, {"use_shipment_tracking": False}],
    )
    async def test_guards_short_circuit(self, make_handler, service_manager, overrides):
        await make_handler(**overrides).handle_shipment_tracking_number_set(
            ShipmentTrackingNumberSet(
                shipment=Shipment(id=9, order_id=1), tracking_number="1Z999"
            )
        )

        service_manager.set_tracking.assert_not_called()

    @pytest.mark.asyncio
    async def test_logs_provider_failure(self, make_handler, service_manager, mock_logger):
        service_manager.set_tracking.return_value = _provider_failure()

        await make_handler().handle_shipment_tracking_number_set(
            ShipmentTrackingNumberSet(
                shipment=Shipment(id=9, order_id=1), tracking_number="1Z999"
            )
        )

        assert mock_logger.warning.call_args[0][0] == "shipment_tracking_failed"
        assert mock_logger.warning.call_args[1]["shipment_id"] == 9


# =============================================================================
# System warning created
# =============================================================================


@pytest.mark.unit
class TestHandleSystemWarningCreated:
    """Test the merchant ID configuration warning."""

    @pytest.mark.asyncio
    async def test_manual_credentials_warning(self, make_handler):
        event = SystemWarningCreated()

        await make_handler(
            merchant_id_required=True, set_credentials_manually=True
        ).handle_system_warning_created(event)

        assert event.system_warnings == [
            SystemWarning(
                level=SystemWarningLevel.WARNING,
                text=PayPalCommerceDefaults.MERCHANT_ID_REQUIRED_WARNING,
                dont_encode=False,
            )
        ]

    @pytest.mark.asyncio
    async def test_onboarding_warning(self, make_handler):
        event = SystemWarningCreated()

        await make_handler(
            merchant_id_required=True, set_credentials_manually=False
        ).handle_system_warning_created(event)

        assert len(event.system_warnings) == 1
        assert event.system_warnings[0].text == PayPalCommerceDefaults.MERCHANT_ID_NOT_SET_WARNING

    @pytest.mark.asyncio
    async def test_texts_differ_by_credentials_mode(self, make_handler):
        manual = SystemWarningCreated()
        onboarding = SystemWarningCreated()

        await make_handler(
            merchant_id_required=True, set_credentials_manually=True
        ).handle_system_warning_created(manual)
        await make_handler(
            merchant_id_required=True, set_credentials_manually=False
        ).handle_system_warning_created(onboarding)

        assert manual.system_warnings[0].text != onboarding.system_warnings[0].text

    @pytest.mark.asyncio
    async def test_appends_after_existing_warnings(self, make_handler):
        existing = SystemWarning(level=SystemWarningLevel.PASS, text="Store URL is valid")
        event = SystemWarningCreated(system_warnings=[existing])

        await make_handler(merchant_id_required=True).handle_system_warning_created(event)

        assert event.system_warnings[0] is existing
        assert len(event.system_warnings) == 2

    @pytest.mark.asyncio
    async def test_merchant_id_not_required_appends_nothing(self, make_handler):
        event = SystemWarningCreated()

        await make_handler(merchant_id_required=False).handle_system_warning_created(event)

        assert event.system_warnings == []

    @pytest.mark.asyncio
    async def test_not_connected_appends_nothing(self, make_handler):
        event = SystemWarningCreated()

        await make_handler(
            client_id="", merchant_id_required=True
        ).handle_system_warning_created(event)

        assert event.system_warnings == []
