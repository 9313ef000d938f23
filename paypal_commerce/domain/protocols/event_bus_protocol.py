"""Event bus protocol (port) for platform events.

The host platform publishes events; the plugin subscribes handlers. Any
object with matching `subscribe`/`publish` signatures satisfies the protocol
(structural typing, no inheritance).

Implementations:
    - InMemoryEventBus: paypal_commerce/infrastructure/events/in_memory_event_bus.py

Usage:
    >>> event_bus = get_event_bus()
    >>> event_bus.subscribe(ShipmentCreated, handler.handle_shipment_created)
    >>> await event_bus.publish(ShipmentCreated(shipment=shipment, request=context))
"""

from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from paypal_commerce.domain.events.base_event import DomainEvent

# Handlers accept a specific event subclass; Any keeps them assignable.
EventHandler = Callable[[Any], Awaitable[None]]
"""Type alias for async event handler functions.

Event handlers must:
    - Accept a single event parameter
    - Return None (side-effects only)
    - Be async (async def)
"""


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. **Fail-open behavior**: one handler failure must NOT prevent other
           handlers from executing. Log errors but continue.
        2. **Async support**: handlers are coroutines.
        3. **Exact type routing**: handlers registered for an event type only
           receive events of exactly that type.
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for a specific event type.

        Args:
            event_type: Class of event to handle. No inheritance matching.
            handler: Async function called with the event.
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Handler exceptions are logged, not propagated to the publisher. No
        registered handlers is a no-op.

        Args:
            event: Event to publish.
        """
        ...
