"""Localization adapters."""

from paypal_commerce.infrastructure.localization.resource_localization_service import (
    DEFAULT_RESOURCES,
    ResourceLocalizationService,
)

__all__ = ["DEFAULT_RESOURCES", "ResourceLocalizationService"]
