"""Logging adapters."""

from paypal_commerce.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
