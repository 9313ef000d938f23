"""Pytest configuration shared by unit and integration tests.

Provides:
1. Marker registration (unit, integration)
2. Automatic asyncio marker for coroutine tests
3. Helpers to build plugin settings and mocked collaborators
"""

import inspect
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from paypal_commerce.core.config import PayPalCommerceSettings
from paypal_commerce.core.result import Success


def create_plugin_settings(**overrides: Any) -> PayPalCommerceSettings:
    """Helper to create connected PayPalCommerceSettings for testing.

    Args:
        **overrides: Field values replacing the defaults below.

    Returns:
        PayPalCommerceSettings with credentials set (is_connected is True)
        and shipment tracking enabled, unless overridden.

    Usage:
        settings = create_plugin_settings()
        disconnected = create_plugin_settings(client_id="", secret_key="")
    """
    values: dict[str, Any] = {
        "client_id": "test-client-id",
        "secret_key": "test-secret",
        "merchant_id": "MERCHANT123",
        "use_sandbox": True,
        "set_credentials_manually": False,
        "merchant_id_required": False,
        "use_vault": False,
        "use_shipment_tracking": True,
    }
    values.update(overrides)
    return PayPalCommerceSettings(**values)


def create_service_manager() -> MagicMock:
    """Helper to create a mocked PaymentProviderServiceProtocol.

    Defaults: active, no stored tokens, every call succeeds.
    """
    service_manager = MagicMock()
    service_manager.is_active = AsyncMock(return_value=Success(value=True))
    service_manager.get_payment_tokens = AsyncMock(return_value=Success(value=[]))
    service_manager.delete_payment_tokens = AsyncMock(return_value=Success(value=None))
    service_manager.set_tracking = AsyncMock(return_value=Success(value=None))
    return service_manager


@pytest.fixture
def mock_logger():
    """Create mock LoggerProtocol."""
    logger = MagicMock()
    logger.debug = MagicMock()
    logger.info = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    return logger


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests through the FastAPI stack"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)
