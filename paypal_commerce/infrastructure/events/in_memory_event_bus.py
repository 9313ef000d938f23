"""In-memory event bus implementation.

Implements EventBusProtocol with a dictionary-based registry. Events are
dispatched inside the request that raised them, which is what the plugin
needs: handlers of one request share that request's RequestContext.

Architecture:
    - Dictionary-based handler registry (event_type -> list of handlers)
    - Fail-open behavior (one handler failure doesn't break others)
    - Concurrent handler execution (asyncio.gather)
    - Handler failures logged at WARNING with the event ID
"""

import asyncio
from collections import defaultdict

from paypal_commerce.domain.events.base_event import DomainEvent
from paypal_commerce.domain.protocols.event_bus_protocol import EventHandler
from paypal_commerce.domain.protocols.logger_protocol import LoggerProtocol


def _handler_name(handler: EventHandler) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)


class InMemoryEventBus:
    """In-memory event bus with fail-open behavior.

    Thread Safety:
        NOT thread-safe (single-threaded async design).

    Attributes:
        _handlers: Event class -> list of async handlers.
        _logger: Logger for publishing and handler failures.

    Example:
        >>> bus = InMemoryEventBus(logger=logger)
        >>> bus.subscribe(ModelPrepared, handler.handle_model_prepared)
        >>> await bus.publish(ModelPrepared(model=navigation_model))
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize event bus with logger.

        Args:
            logger: Logger for handler failures (warning) and event
                publishing (debug).
        """
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)
        self._logger = logger

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for a specific event type.

        Args:
            event_type: Class of event to handle. Only exact type matches.
            handler: Async function called with the event.

        Notes:
            - No duplicate detection (same handler can be registered twice)
        """
        self._handlers[event_type].append(handler)

    def handlers_for(self, event_type: type[DomainEvent]) -> list[EventHandler]:
        """Return a copy of the handlers registered for an event type."""
        return list(self._handlers.get(event_type, []))

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Flow:
            1. Look up handlers for type(event)
            2. If no handlers, return immediately (no-op)
            3. Execute all handlers with asyncio.gather(return_exceptions=True)
            4. Log any handler exceptions (warning level)

        Args:
            event: Event to publish.

        Notes:
            NEVER raises handler exceptions (fail-open guarantee).
        """
        event_type = type(event)
        handlers = self._handlers.get(event_type, [])

        if not handlers:
            return

        self._logger.debug(
            "event_publishing",
            event_type=event_type.__name__,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )

        results = await asyncio.gather(
            *(handler(event) for handler in handlers),
            return_exceptions=True,
        )

        for handler, result in zip(handlers, results):
            if isinstance(result, Exception):
                self._logger.warning(
                    "event_handler_failed",
                    event_type=event_type.__name__,
                    event_id=str(event.event_id),
                    handler_name=_handler_name(handler),
                    error_type=type(result).__name__,
                    error_message=str(result),
                    exc_info=result,
                )
