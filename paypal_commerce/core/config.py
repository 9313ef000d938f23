"""
Configuration management using Pydantic Settings.

Two settings objects are loaded from environment variables:

- Settings: application-level configuration (environment, logging, event bus).
- PayPalCommerceSettings: the plugin's own settings (credentials, feature
  switches), read from variables prefixed with PAYPAL_COMMERCE_.

Usage:
    from paypal_commerce.core.config import get_plugin_settings, settings

    if settings.is_development:
        ...

    plugin_settings = get_plugin_settings()
    if plugin_settings.is_connected and plugin_settings.use_shipment_tracking:
        ...
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from paypal_commerce.core.enums import Environment

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values

    Returns:
        Settings: Application configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="PayPal Commerce",
        description="Application name, bound to every log record",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # Event bus
    event_bus_type: str = Field(
        default="in-memory",
        description="Event bus adapter (only 'in-memory' is supported)",
    )
    events_strict_mode: bool = Field(
        default=False,
        description="Fail at startup when a registered event has no handler method",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Log level name (any case).

        Returns:
            str: Upper-cased log level name.

        Raises:
            ValueError: If the level is not one of the five standard levels.
        """
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(sorted(_LOG_LEVELS))}"
            )
        return level

    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """
        Check if running in testing environment.

        Returns:
            bool: True if environment is TESTING, False otherwise.
        """
        return self.environment == Environment.TESTING

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION


class PayPalCommerceSettings(BaseSettings):
    """
    PayPal Commerce plugin settings.

    Mirrors the settings the store administrator edits on the plugin
    configuration page. Loaded from PAYPAL_COMMERCE_* environment variables.

    Attributes:
        client_id: REST API client ID.
        secret_key: REST API secret.
        merchant_id: PayPal account ID of the merchant.
        use_sandbox: Use the sandbox environment.
        set_credentials_manually: Credentials were typed in rather than
            obtained through onboarding.
        merchant_id_required: The merchant ID is missing and must be set.
        use_vault: Customers may save payment methods in the vault.
        use_shipment_tracking: Push shipment tracking info to PayPal.
    """

    client_id: str = Field(default="", description="REST API client ID")
    secret_key: str = Field(default="", description="REST API secret")
    merchant_id: str = Field(default="", description="PayPal merchant account ID")
    use_sandbox: bool = Field(default=True, description="Use the PayPal sandbox")
    set_credentials_manually: bool = Field(
        default=False,
        description="Credentials were entered manually instead of via onboarding",
    )
    merchant_id_required: bool = Field(
        default=False,
        description="Merchant ID is missing and must be specified",
    )
    use_vault: bool = Field(
        default=False,
        description="Allow customers to save payment methods in the vault",
    )
    use_shipment_tracking: bool = Field(
        default=False,
        description="Send shipment carrier and tracking numbers to PayPal",
    )

    model_config = SettingsConfigDict(
        env_prefix="PAYPAL_COMMERCE_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("client_id", "secret_key", "merchant_id")
    @classmethod
    def strip_credentials(cls, v: str) -> str:
        """Strip surrounding whitespace from credential values."""
        return v.strip()

    @property
    def is_connected(self) -> bool:
        """
        Check whether API credentials are configured.

        Pure function of the settings: both client ID and secret are set.

        Returns:
            bool: True if the plugin can talk to PayPal, False otherwise.
        """
        return bool(self.client_id) and bool(self.secret_key)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


@lru_cache
def get_plugin_settings() -> PayPalCommerceSettings:
    """
    Get cached plugin settings instance.

    Returns:
        PayPalCommerceSettings: Cached plugin settings instance.
    """
    return PayPalCommerceSettings()


# Global settings instance (singleton pattern)
settings = get_settings()
