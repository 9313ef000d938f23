"""Platform events consumed by the PayPal Commerce plugin.

Events:
1. CustomerPermanentlyDeleted - GDPR removal of a customer
2. ModelPrepared - a view model is about to be rendered
3. ModelReceived - a view model was posted back by a form
4. ShipmentCreated - a new shipment was stored
5. ShipmentTrackingNumberSet - a tracking number was assigned to a shipment
6. SystemWarningCreated - the admin system warnings page is being built

Handlers:
- PayPalCommerceEventHandler: ALL events

Events that belong to an HTTP request carry the RequestContext of that
request so related handlers can share data explicitly.
"""

from dataclasses import dataclass, field

from paypal_commerce.domain.entities import Shipment, SystemWarning
from paypal_commerce.domain.events.base_event import DomainEvent
from paypal_commerce.domain.models import PlatformModel
from paypal_commerce.domain.value_objects import RequestContext


# ═══════════════════════════════════════════════════════════════
# Customer
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class CustomerPermanentlyDeleted(DomainEvent):
    """Customer data was permanently removed.

    Triggers:
    - PayPalCommerceEventHandler: delete the customer's vaulted payment tokens

    Attributes:
        customer_id: Deleted customer.
        email: Email the customer had, if known.
    """

    customer_id: int
    email: str | None = None


# ═══════════════════════════════════════════════════════════════
# View model lifecycle
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class ModelPrepared(DomainEvent):
    """A view model was prepared and is about to be rendered.

    Triggers:
    - PayPalCommerceEventHandler: hide the plugin from the payment methods
      grid, add the payment tokens entry to the customer navigation

    Attributes:
        model: The prepared model (handlers may edit it in place).
        request: Context of the current request, when rendered for one.
    """

    model: PlatformModel
    request: RequestContext | None = None


@dataclass(frozen=True, kw_only=True)
class ModelReceived(DomainEvent):
    """A view model was received from a submitted form.

    Triggers:
    - PayPalCommerceEventHandler: capture the shipment carrier

    Attributes:
        model: The received model.
        request: Context of the request that submitted the form.
    """

    model: PlatformModel
    request: RequestContext


# ═══════════════════════════════════════════════════════════════
# Shipping
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class ShipmentCreated(DomainEvent):
    """A shipment was inserted.

    Triggers:
    - PayPalCommerceEventHandler: move a stashed carrier onto the shipment

    Attributes:
        shipment: The new shipment (None if the platform could not supply it).
        request: Context of the request that created the shipment.
    """

    shipment: Shipment | None
    request: RequestContext


@dataclass(frozen=True, kw_only=True)
class ShipmentTrackingNumberSet(DomainEvent):
    """A tracking number was assigned to a shipment.

    Triggers:
    - PayPalCommerceEventHandler: send tracking info to PayPal

    Attributes:
        shipment: The shipment.
        tracking_number: The assigned tracking number.
    """

    shipment: Shipment
    tracking_number: str


# ═══════════════════════════════════════════════════════════════
# System
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class SystemWarningCreated(DomainEvent):
    """The admin system warnings list is being built.

    Triggers:
    - PayPalCommerceEventHandler: append a configuration warning

    Attributes:
        system_warnings: Warnings collected so far (handlers append to it).
    """

    system_warnings: list[SystemWarning] = field(default_factory=list)
