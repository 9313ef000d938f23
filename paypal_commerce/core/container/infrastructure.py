"""Infrastructure dependency factories.

Application-scoped singletons:
- Logging (structlog console adapter)
- Generic attribute storage (in-memory)
- Shipment lookup (in-memory)
- Localization (resource tables)

Usage:
    # Application layer (direct use)
    logger = get_logger()

    # Presentation layer (FastAPI Depends)
    logger: LoggerProtocol = Depends(get_logger)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from paypal_commerce.core.config import get_plugin_settings, get_settings

if TYPE_CHECKING:
    from paypal_commerce.domain.protocols import (
        GenericAttributeProtocol,
        LocalizationProtocol,
        LoggerProtocol,
    )
    from paypal_commerce.infrastructure.persistence import InMemoryShipmentRepository


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from paypal_commerce.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    level = "DEBUG" if settings.debug else settings.log_level

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=level,
        app=settings.app_name,
    )


@lru_cache()
def get_generic_attributes() -> "GenericAttributeProtocol":
    """Get generic attribute store singleton (app-scoped)."""
    from paypal_commerce.infrastructure.persistence import (
        InMemoryGenericAttributeStore,
    )

    return InMemoryGenericAttributeStore(logger=get_logger())


@lru_cache()
def get_shipment_repository() -> "InMemoryShipmentRepository":
    """Get shipment repository singleton (app-scoped)."""
    from paypal_commerce.infrastructure.persistence import InMemoryShipmentRepository

    return InMemoryShipmentRepository()


@lru_cache()
def get_localization() -> "LocalizationProtocol":
    """Get localization service singleton (app-scoped)."""
    from paypal_commerce.infrastructure.localization import (
        ResourceLocalizationService,
    )

    return ResourceLocalizationService(logger=get_logger())


__all__ = [
    "get_generic_attributes",
    "get_localization",
    "get_logger",
    "get_plugin_settings",
    "get_settings",
    "get_shipment_repository",
]
