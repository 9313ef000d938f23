"""Infrastructure event implementations.

Usage:
    >>> from paypal_commerce.infrastructure.events import InMemoryEventBus
    >>> event_bus = InMemoryEventBus(logger=logger)
    >>> event_bus.subscribe(ShipmentCreated, handler.handle_shipment_created)
"""

from paypal_commerce.infrastructure.events.in_memory_event_bus import InMemoryEventBus

__all__ = [
    "InMemoryEventBus",
]
