"""Resource-table localization service.

Implements LocalizationProtocol over in-memory resource tables, one per
language. Lookups are case-insensitive and fall back to the resource key.
"""

from collections.abc import Mapping

from paypal_commerce.core.constants import PayPalCommerceDefaults
from paypal_commerce.domain.protocols.logger_protocol import LoggerProtocol

DEFAULT_LANGUAGE_ID = 1

DEFAULT_RESOURCES: Mapping[str, str] = {
    PayPalCommerceDefaults.PAYMENT_TOKENS_RESOURCE: "Payment methods",
}
"""Plugin resources in the default language."""


class ResourceLocalizationService:
    """Localized resources keyed by language.

    Example:
        >>> service = ResourceLocalizationService(logger=logger)
        >>> await service.get_resource("Plugins.Payments.PayPalCommerce.PaymentTokens")
        'Payment methods'
    """

    def __init__(
        self,
        logger: LoggerProtocol,
        resources: Mapping[int, Mapping[str, str]] | None = None,
        default_language_id: int = DEFAULT_LANGUAGE_ID,
    ) -> None:
        """Initialize the service.

        Args:
            logger: Logger for missing resources.
            resources: language_id -> (resource key -> text). Defaults to the
                plugin's resources in the default language.
            default_language_id: Language used when none is requested.
        """
        tables = resources if resources is not None else {default_language_id: DEFAULT_RESOURCES}
        self._resources = {
            language_id: {key.lower(): value for key, value in table.items()}
            for language_id, table in tables.items()
        }
        self._default_language_id = default_language_id
        self._logger = logger

    async def get_resource(
        self, resource_key: str, language_id: int | None = None
    ) -> str:
        """Return the localized text, or the key itself when not found."""
        language = language_id if language_id is not None else self._default_language_id
        value = self._resources.get(language, {}).get(resource_key.lower())
        if value is None:
            self._logger.debug(
                "localization_resource_missing",
                resource_key=resource_key,
                language_id=language,
            )
            return resource_key
        return value
