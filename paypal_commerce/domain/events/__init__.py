"""Platform events module.

Usage:
    >>> from paypal_commerce.domain.events import ShipmentCreated
    >>> await event_bus.publish(ShipmentCreated(shipment=shipment, request=context))
"""

from paypal_commerce.domain.events.base_event import DomainEvent
from paypal_commerce.domain.events.platform_events import (
    CustomerPermanentlyDeleted,
    ModelPrepared,
    ModelReceived,
    ShipmentCreated,
    ShipmentTrackingNumberSet,
    SystemWarningCreated,
)
from paypal_commerce.domain.events.registry import (
    EVENT_REGISTRY,
    EventCategory,
    EventMetadata,
)

__all__ = [
    "DomainEvent",
    "CustomerPermanentlyDeleted",
    "ModelPrepared",
    "ModelReceived",
    "ShipmentCreated",
    "ShipmentTrackingNumberSet",
    "SystemWarningCreated",
    "EVENT_REGISTRY",
    "EventCategory",
    "EventMetadata",
]
