"""UI model variants delivered with model lifecycle events.

The host platform raises ModelPrepared/ModelReceived events for every view
model. The plugin only cares about a few shapes; everything else arrives as
OtherModel. Handlers pattern-match on the variant:

    match event.model:
        case PaymentMethodListModel():
            ...
        case CustomerNavigationModel():
            ...

Usage:
    from paypal_commerce.domain.models import PlatformModel, ShipmentModel
"""

from paypal_commerce.domain.models.customer_navigation import (
    CustomerNavigationItem,
    CustomerNavigationModel,
    CustomerNavigationTab,
)
from paypal_commerce.domain.models.platform_model import (
    ModelKind,
    OtherModel,
    PaymentMethodListModel,
    PaymentMethodModel,
    PlatformModel,
    ShipmentModel,
)

__all__ = [
    "CustomerNavigationItem",
    "CustomerNavigationModel",
    "CustomerNavigationTab",
    "ModelKind",
    "OtherModel",
    "PaymentMethodListModel",
    "PaymentMethodModel",
    "PlatformModel",
    "ShipmentModel",
]
