"""Plugin constants (PayPal Commerce defaults).

Fixed identifiers the plugin shares with the host platform: its system name,
route names, localization resource keys and the generic-attribute key used
for the shipment carrier. These are NOT environment-specific configuration;
for that use `paypal_commerce/core/config.py`.

Example:
    >>> from paypal_commerce.core.constants import PayPalCommerceDefaults
    >>> PayPalCommerceDefaults.SYSTEM_NAME
    'Payments.PayPalCommerce'
"""

from typing import Final


class PayPalCommerceDefaults:
    """Namespace for the plugin's fixed identifiers."""

    # =========================================================================
    # Identity
    # =========================================================================

    SYSTEM_NAME: Final[str] = "Payments.PayPalCommerce"
    """Plugin system name, as listed among the platform's payment methods."""

    PROVIDER_NAME: Final[str] = "paypal_commerce"
    """Provider name attached to ProviderError values and log records."""

    # =========================================================================
    # Customer navigation
    # =========================================================================

    PAYMENT_TOKENS_ROUTE: Final[str] = "Plugin.Payments.PayPalCommerce.PaymentTokens"
    """Route name of the customer's stored payment methods page."""

    PAYMENT_TOKENS_MENU_TAB: Final[int] = 355
    """Navigation tab number of the payment tokens menu item."""

    PAYMENT_TOKENS_ITEM_CLASS: Final[str] = "paypal-payment-tokens"
    """CSS class of the payment tokens menu item."""

    PAYMENT_TOKENS_RESOURCE: Final[str] = "Plugins.Payments.PayPalCommerce.PaymentTokens"
    """Localization resource key of the payment tokens menu item title."""

    # =========================================================================
    # Shipment tracking
    # =========================================================================

    SHIPMENT_CARRIER_ATTRIBUTE: Final[str] = "PayPalCommerce.ShipmentCarrier"
    """Form field name and generic-attribute key of the shipment carrier."""

    # =========================================================================
    # System warnings
    # =========================================================================

    MERCHANT_ID_REQUIRED_WARNING: Final[str] = (
        "PayPal Commerce plugin. Merchant ID is required for payments, "
        "please specify it on the plugin configuration page"
    )
    """Warning shown when credentials were entered manually without a merchant ID."""

    MERCHANT_ID_NOT_SET_WARNING: Final[str] = (
        "PayPal Commerce plugin. PayPal account ID of the merchant was not set "
        "correctly when updating the plugin. You should either complete "
        "onboarding process again on the plugin configuration page or set the "
        "ID yourself on the All Settings page (you can find this ID in your "
        "PayPal account)"
    )
    """Warning shown when onboarding left the merchant ID unset."""
