"""Event bus dependency factory and handler wiring.

The event bus is an application-scoped singleton. The PayPal Commerce handler
needs a payment provider service manager, which the host platform supplies,
so wiring happens in wire_paypal_commerce_handler() instead of inside
get_event_bus().

Wiring is registry-driven: for every EVENT_REGISTRY entry the handler's
``handle_<workflow_name>`` method is subscribed to the event class.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from paypal_commerce.core.config import get_plugin_settings, get_settings
from paypal_commerce.core.container.infrastructure import (
    get_generic_attributes,
    get_localization,
    get_logger,
    get_shipment_repository,
)

if TYPE_CHECKING:
    from paypal_commerce.application.event_handlers import PayPalCommerceEventHandler
    from paypal_commerce.domain.protocols import (
        EventBusProtocol,
        PaymentProviderServiceProtocol,
    )


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Returns the adapter selected by Settings.event_bus_type:
        - 'in-memory': InMemoryEventBus

    Raises:
        ValueError: If the configured bus type is unsupported.

    Returns:
        Event bus implementing EventBusProtocol.
    """
    from paypal_commerce.infrastructure.events.in_memory_event_bus import (
        InMemoryEventBus,
    )

    event_bus_type = get_settings().event_bus_type

    if event_bus_type == "in-memory":
        return InMemoryEventBus(logger=get_logger())

    raise ValueError(
        f"Unsupported EVENT_BUS_TYPE: {event_bus_type}. Supported: 'in-memory'"
    )


def get_paypal_commerce_handler(
    service_manager: "PaymentProviderServiceProtocol",
) -> "PayPalCommerceEventHandler":
    """Build the PayPal Commerce handler from container singletons.

    Args:
        service_manager: Payment provider service manager supplied by the host.

    Returns:
        PayPalCommerceEventHandler: Handler ready to be subscribed.
    """
    from paypal_commerce.application.event_handlers import PayPalCommerceEventHandler

    return PayPalCommerceEventHandler(
        service_manager=service_manager,
        settings=get_plugin_settings(),
        generic_attributes=get_generic_attributes(),
        localization=get_localization(),
        shipments=get_shipment_repository(),
        logger=get_logger(),
    )


def subscribe_handler(
    event_bus: "EventBusProtocol",
    handler: object,
    *,
    strict: bool,
) -> int:
    """Subscribe a handler's methods to every event in EVENT_REGISTRY.

    Args:
        event_bus: Bus to subscribe on.
        handler: Object exposing ``handle_<workflow_name>`` methods.
        strict: Raise when a method is missing instead of skipping it.

    Returns:
        int: Number of subscriptions made.

    Raises:
        RuntimeError: In strict mode, when a registry entry has no handler method.
    """
    from paypal_commerce.domain.events.registry import EVENT_REGISTRY

    logger = get_logger()
    subscribed = 0

    for metadata in EVENT_REGISTRY:
        method_name = metadata.handler_method_name
        handler_method = getattr(handler, method_name, None)
        if handler_method is None:
            if strict:
                raise RuntimeError(
                    f"EVENTS_STRICT_MODE: Missing required handler\n"
                    f"Event: {metadata.event_class.__name__}\n"
                    f"Expected method: {type(handler).__name__}.{method_name}\n\n"
                    f"Or disable strict mode: Set EVENTS_STRICT_MODE=false"
                )
            logger.warning(
                "Missing event handler (graceful mode)",
                event_class=metadata.event_class.__name__,
                handler_method=method_name,
            )
            continue

        event_bus.subscribe(metadata.event_class, handler_method)
        subscribed += 1

    return subscribed


def wire_paypal_commerce_handler(
    service_manager: "PaymentProviderServiceProtocol",
) -> "EventBusProtocol":
    """Create the handler and subscribe it to the app event bus.

    Call once at startup.

    Args:
        service_manager: Payment provider service manager supplied by the host.

    Returns:
        EventBusProtocol: The app event bus, with subscriptions in place.

    Example:
        >>> event_bus = wire_paypal_commerce_handler(service_manager)
        >>> await event_bus.publish(SystemWarningCreated(system_warnings=warnings))
    """
    event_bus = get_event_bus()
    handler = get_paypal_commerce_handler(service_manager)
    count = subscribe_handler(
        event_bus, handler, strict=get_settings().events_strict_mode
    )
    get_logger().info("paypal_commerce_handler_wired", subscriptions=count)
    return event_bus
