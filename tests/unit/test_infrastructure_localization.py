"""Unit tests for ResourceLocalizationService."""

import pytest

from paypal_commerce.core.constants import PayPalCommerceDefaults
from paypal_commerce.infrastructure.localization import ResourceLocalizationService


@pytest.mark.unit
class TestResourceLocalizationService:
    """Test resource lookup."""

    @pytest.mark.asyncio
    async def test_default_resources(self, mock_logger):
        service = ResourceLocalizationService(logger=mock_logger)

        title = await service.get_resource(PayPalCommerceDefaults.PAYMENT_TOKENS_RESOURCE)

        assert title == "Payment methods"

    @pytest.mark.asyncio
    async def test_lookup_is_case_insensitive(self, mock_logger):
        service = ResourceLocalizationService(logger=mock_logger)

        title = await service.get_resource(
            PayPalCommerceDefaults.PAYMENT_TOKENS_RESOURCE.upper()
        )

        assert title == "Payment methods"

    @pytest.mark.asyncio
    async def test_missing_resource_returns_key(self, mock_logger):
        service = ResourceLocalizationService(logger=mock_logger)

        assert await service.get_resource("Plugins.Unknown") == "Plugins.Unknown"
        assert mock_logger.debug.call_args[0][0] == "localization_resource_missing"

    @pytest.mark.asyncio
    async def test_language_selection(self, mock_logger):
        service = ResourceLocalizationService(
            logger=mock_logger,
            resources={1: {"Greeting": "Hello"}, 2: {"Greeting": "Hallo"}},
        )

        assert await service.get_resource("Greeting") == "Hello"
        assert await service.get_resource("Greeting", language_id=2) == "Hallo"
        assert await service.get_resource("Greeting", language_id=3) == "Greeting"
