"""PayPal Commerce event handler (the plugin's event consumer).

Reacts to six platform events and performs small side effects through
injected ports.

Architecture:
    - Application layer (guards + delegation, no business rules of its own)
    - App-scoped singleton (created once at startup)
    - Subscribed by the container from EVENT_REGISTRY (handle_<workflow>)

Handlers:
    - handle_customer_permanently_deleted: delete the customer's vaulted tokens
    - handle_model_prepared: hide the plugin from the payment methods grid,
      add the "payment tokens" entry to the customer navigation
    - handle_model_received: capture the carrier chosen on the shipment form
    - handle_shipment_created: move a stashed carrier onto the new shipment
    - handle_shipment_tracking_number_set: push tracking info to PayPal
    - handle_system_warning_created: warn when the merchant ID is missing

Error handling:
    Exceptions raised by collaborators propagate unchanged; the event bus logs
    them. Provider calls return Result and a Failure is logged and treated as
    "no data" (not active, no tokens).
"""

from paypal_commerce.core.config import PayPalCommerceSettings
from paypal_commerce.core.constants import PayPalCommerceDefaults
from paypal_commerce.core.result import Failure
from paypal_commerce.domain.entities import SystemWarning, SystemWarningLevel
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
    PaymentMethodListModel,
    ShipmentModel,
)
from paypal_commerce.domain.protocols import (
    GenericAttributeProtocol,
    LocalizationProtocol,
    LoggerProtocol,
    PaymentProviderServiceProtocol,
    ShipmentRepositoryProtocol,
)
from paypal_commerce.domain.value_objects import RequestContext


class PayPalCommerceEventHandler:
    """Event consumer of the PayPal Commerce plugin.

    Each handler applies its guard clauses in order and then performs at most
    one delegated side effect. Handlers share no state; data that has to
    travel between two handlers of the same request goes through the
    RequestContext carried by the events.

    Attributes:
        _service_manager: Payment provider service manager.
        _settings: Plugin settings.
        _generic_attributes: Generic attribute storage.
        _localization: Localized resources.
        _shipments: Shipment lookup.
        _logger: Structured logger.

    Example:
        >>> handler = PayPalCommerceEventHandler(
        ...     service_manager=service_manager,
        ...     settings=get_plugin_settings(),
        ...     generic_attributes=get_generic_attributes(),
        ...     localization=get_localization(),
        ...     shipments=get_shipment_repository(),
        ...     logger=get_logger(),
        ... )
        >>> event_bus.subscribe(ShipmentCreated, handler.handle_shipment_created)
    """

    def __init__(
        self,
        *,
        service_manager: PaymentProviderServiceProtocol,
        settings: PayPalCommerceSettings,
        generic_attributes: GenericAttributeProtocol,
        localization: LocalizationProtocol,
        shipments: ShipmentRepositoryProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            service_manager: Payment provider service manager.
            settings: Plugin settings (read on every event, so changes made by
                the administrator apply immediately).
            generic_attributes: Storage for the shipment carrier attribute.
            localization: Resource lookup for the navigation item title.
            shipments: Lookup used to tell new shipments from existing ones.
            logger: Logger protocol implementation from container.
        """
        self._service_manager = service_manager
        self._settings = settings
        self._generic_attributes = generic_attributes
        self._localization = localization
        self._shipments = shipments
        self._logger = logger

    # =========================================================================
    # Customer
    # =========================================================================

    async def handle_customer_permanently_deleted(
        self, event: CustomerPermanentlyDeleted
    ) -> None:
        """Delete the deleted customer's vaulted payment tokens.

        Args:
            event: CustomerPermanentlyDeleted event with customer_id.
        """
        result = await self._service_manager.delete_payment_tokens(
            self._settings, event.customer_id
        )
        if isinstance(result, Failure):
            self._logger.warning(
                "payment_tokens_deletion_failed",
                event_id=str(event.event_id),
                customer_id=event.customer_id,
                error=str(result.error),
            )
            return

        self._logger.info(
            "payment_tokens_deleted",
            event_id=str(event.event_id),
            customer_id=event.customer_id,
        )

    # =========================================================================
    # View models
    # =========================================================================

    async def handle_model_prepared(self, event: ModelPrepared) -> None:
        """Adjust prepared view models.

        - Payment methods grid: the plugin is configured on its own page, so
          its row is removed from the grid.
        - Customer navigation: add the "payment tokens" entry right after
          "Orders" when the customer can have stored payment methods.

        Args:
            event: ModelPrepared event with the model to adjust.
        """
        match event.model:
            case PaymentMethodListModel() as payment_methods:
                self._exclude_plugin_payment_method(payment_methods)
            case CustomerNavigationModel() as navigation:
                await self._add_payment_tokens_item(navigation, event.request)
            case _:
                return

    async def handle_model_received(self, event: ModelReceived) -> None:
        """Capture the shipment carrier selected on the shipment form.

        Args:
            event: ModelReceived event with the posted model and request.
        """
        match event.model:
            case ShipmentModel(id=shipment_id):
                await self._save_shipment_carrier(shipment_id, event.request)
            case _:
                return

    # =========================================================================
    # Shipping
    # =========================================================================

    async def handle_shipment_created(self, event: ShipmentCreated) -> None:
        """Persist the carrier stashed while the shipment did not exist yet.

        Args:
            event: ShipmentCreated event with the new shipment and request.
        """
        if not self._settings.is_connected:
            return

        if not self._settings.use_shipment_tracking or event.shipment is None:
            return

        carrier = event.request.take(PayPalCommerceDefaults.SHIPMENT_CARRIER_ATTRIBUTE)
        if carrier is None:
            return

        await self._generic_attributes.save_attribute(
            event.shipment, PayPalCommerceDefaults.SHIPMENT_CARRIER_ATTRIBUTE, carrier
        )
        self._logger.debug(
            "shipment_carrier_saved",
            correlation_id=event.request.correlation_id,
            shipment_id=event.shipment.id,
            source="request_context",
        )

    async def handle_shipment_tracking_number_set(
        self, event: ShipmentTrackingNumberSet
    ) -> None:
        """Send the shipment's tracking info to PayPal.

        Args:
            event: ShipmentTrackingNumberSet event with the shipment.
        """
        if not self._settings.is_connected:
            return

        if not self._settings.use_shipment_tracking:
            return

        result = await self._service_manager.set_tracking(self._settings, event.shipment)
        if isinstance(result, Failure):
            self._logger.warning(
                "shipment_tracking_failed",
                event_id=str(event.event_id),
                shipment_id=event.shipment.id,
                error=str(result.error),
            )

    # =========================================================================
    # System
    # =========================================================================

    async def handle_system_warning_created(self, event: SystemWarningCreated) -> None:
        """Warn the administrator when the merchant ID is missing.

        Args:
            event: SystemWarningCreated event with the warnings collected so far.
        """
        if not self._settings.is_connected:
            return

        if not self._settings.merchant_id_required:
            return

        text = (
            PayPalCommerceDefaults.MERCHANT_ID_REQUIRED_WARNING
            if self._settings.set_credentials_manually
            else PayPalCommerceDefaults.MERCHANT_ID_NOT_SET_WARNING
        )
        event.system_warnings.append(
            SystemWarning(level=SystemWarningLevel.WARNING, text=text, dont_encode=False)
        )

    # =========================================================================
    # Helpers
    # =========================================================================

    def _exclude_plugin_payment_method(self, model: PaymentMethodListModel) -> None:
        model.data = [
            method
            for method in model.data
            if method.system_name != PayPalCommerceDefaults.SYSTEM_NAME
        ]

    async def _add_payment_tokens_item(
        self,
        navigation: CustomerNavigationModel,
        request: RequestContext | None,
    ) -> None:
        active = await self._service_manager.is_active(self._settings)
        if isinstance(active, Failure):
            self._logger.warning(
                "payment_provider_status_unavailable",
                error=str(active.error),
            )
            return
        if not active.value:
            return

        if not self._settings.use_vault:
            customer_id = request.customer_id if request is not None else None
            tokens = await self._service_manager.get_payment_tokens(
                self._settings, customer_id=customer_id
            )
            if isinstance(tokens, Failure):
                self._logger.warning(
                    "payment_tokens_unavailable",
                    customer_id=customer_id,
                    error=str(tokens.error),
                )
                return
            if not tokens.value:
                return

        title = await self._localization.get_resource(
            PayPalCommerceDefaults.PAYMENT_TOKENS_RESOURCE
        )

        # Right after "Orders"; front of the menu when there is no Orders entry
        position = navigation.index_of_tab(CustomerNavigationTab.ORDERS) + 1
        if position == 0:
            self._logger.warning(
                "customer_navigation_orders_item_missing",
                inserted_at=position,
            )

        navigation.items.insert(
            position,
            CustomerNavigationItem(
                route_name=PayPalCommerceDefaults.PAYMENT_TOKENS_ROUTE,
                title=title,
                tab=PayPalCommerceDefaults.PAYMENT_TOKENS_MENU_TAB,
                item_class=PayPalCommerceDefaults.PAYMENT_TOKENS_ITEM_CLASS,
            ),
        )

    async def _save_shipment_carrier(
        self, shipment_id: int, request: RequestContext
    ) -> None:
        if not self._settings.is_connected:
            return

        if not self._settings.use_shipment_tracking:
            return

        key = PayPalCommerceDefaults.SHIPMENT_CARRIER_ATTRIBUTE
        if key not in request.form:
            return
        carrier = request.form[key]

        shipment = await self._shipments.get_shipment_by_id(shipment_id)
        if shipment is not None:
            await self._generic_attributes.save_attribute(shipment, key, carrier)
            self._logger.debug(
                "shipment_carrier_saved",
                correlation_id=request.correlation_id,
                shipment_id=shipment.id,
                source="form",
            )
        elif carrier:
            # New shipment has no ID yet; ShipmentCreated picks this up later
            # in the same request.
            request.stash(key, carrier)
            self._logger.debug(
                "shipment_carrier_stashed",
                correlation_id=request.correlation_id,
            )
