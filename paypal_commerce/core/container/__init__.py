"""Container module - centralized dependency injection.

Re-exports all factory functions so callers can import from one place:

    from paypal_commerce.core.container import get_event_bus, get_logger

Modules:
- infrastructure: logger, generic attributes, shipments, localization
- events: event bus and handler wiring
"""

from paypal_commerce.core.container.events import (
    get_event_bus,
    get_paypal_commerce_handler,
    subscribe_handler,
    wire_paypal_commerce_handler,
)
from paypal_commerce.core.container.infrastructure import (
    get_generic_attributes,
    get_localization,
    get_logger,
    get_plugin_settings,
    get_settings,
    get_shipment_repository,
)

__all__ = [
    "get_event_bus",
    "get_generic_attributes",
    "get_localization",
    "get_logger",
    "get_paypal_commerce_handler",
    "get_plugin_settings",
    "get_settings",
    "get_shipment_repository",
    "subscribe_handler",
    "wire_paypal_commerce_handler",
]
