"""Application event handlers.

The PayPal Commerce handler is registry-wired: every EVENT_REGISTRY entry
maps to a ``handle_<workflow_name>`` method on it.
"""

from paypal_commerce.application.event_handlers.paypal_commerce_event_handler import (
    PayPalCommerceEventHandler,
)

__all__ = ["PayPalCommerceEventHandler"]
