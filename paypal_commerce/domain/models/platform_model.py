"""Admin UI model variants and the PlatformModel tagged union."""

from dataclasses import dataclass, field
from typing import Literal, TypeAlias

from paypal_commerce.domain.models.customer_navigation import CustomerNavigationModel
from paypal_commerce.domain.models.model_kind import ModelKind


@dataclass(kw_only=True)
class PaymentMethodModel:
    """Row of the admin payment methods grid.

    Attributes:
        system_name: Payment plugin system name.
        friendly_name: Display name.
        is_active: Method is enabled for the store.
        display_order: Sort order in the grid.
    """

    system_name: str
    friendly_name: str = ""
    is_active: bool = False
    display_order: int = 0


@dataclass(kw_only=True)
class PaymentMethodListModel:
    """Admin payment methods grid (rows are replaced in place by handlers)."""

    data: list[PaymentMethodModel] = field(default_factory=list)
    kind: Literal[ModelKind.PAYMENT_METHOD_LIST] = field(
        default=ModelKind.PAYMENT_METHOD_LIST, init=False
    )


@dataclass(kw_only=True)
class ShipmentModel:
    """Admin shipment form.

    Attributes:
        id: Shipment identifier; 0 while a new shipment is being added.
        order_id: Order the shipment belongs to.
        tracking_number: Tracking number entered on the form.
    """

    id: int = 0
    order_id: int = 0
    tracking_number: str | None = None
    kind: Literal[ModelKind.SHIPMENT] = field(default=ModelKind.SHIPMENT, init=False)


@dataclass(kw_only=True)
class OtherModel:
    """Any view model the plugin does not handle.

    Attributes:
        name: Model type name, for logging.
    """

    name: str
    kind: Literal[ModelKind.OTHER] = field(default=ModelKind.OTHER, init=False)


PlatformModel: TypeAlias = (
    PaymentMethodListModel | CustomerNavigationModel | ShipmentModel | OtherModel
)
