"""PaymentProviderServiceProtocol - port to the payment provider.

All calls to the external payment provider (PayPal) go through a service
manager. Its implementation (OAuth, vault, orders API) lives outside this
package; the plugin only relies on the operations below.

Methods return Result types:
    - Success(value=...) on success
    - Failure(error=ProviderError(...)) when the provider call failed

`is_connected` is not part of the port: it is a pure function of the
settings, exposed as PayPalCommerceSettings.is_connected.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from paypal_commerce.core.config import PayPalCommerceSettings
    from paypal_commerce.core.result import Result
    from paypal_commerce.domain.entities import PaymentToken, Shipment
    from paypal_commerce.domain.errors import ProviderError


class PaymentProviderServiceProtocol(Protocol):
    """Protocol for the payment provider service manager."""

    async def is_active(
        self, settings: "PayPalCommerceSettings"
    ) -> "Result[bool, ProviderError]":
        """Check whether the plugin is enabled and configured for the store.

        Args:
            settings: Plugin settings.

        Returns:
            Result[bool, ProviderError]: Success(True) when payments can be
                accepted.
        """
        ...

    async def get_payment_tokens(
        self,
        settings: "PayPalCommerceSettings",
        customer_id: int | None = None,
    ) -> "Result[list[PaymentToken], ProviderError]":
        """List the vaulted payment tokens of a customer.

        Args:
            settings: Plugin settings.
            customer_id: Customer whose tokens to list; None means the
                customer of the current request as the manager knows it.

        Returns:
            Result[list[PaymentToken], ProviderError]: Stored tokens (may be empty).
        """
        ...

    async def delete_payment_tokens(
        self, settings: "PayPalCommerceSettings", customer_id: int
    ) -> "Result[None, ProviderError]":
        """Delete all vaulted payment tokens of a customer.

        Args:
            settings: Plugin settings.
            customer_id: Customer whose tokens to delete.
        """
        ...

    async def set_tracking(
        self, settings: "PayPalCommerceSettings", shipment: "Shipment"
    ) -> "Result[None, ProviderError]":
        """Send the shipment's carrier and tracking number to the provider.

        Args:
            settings: Plugin settings.
            shipment: Shipment with a tracking number.
        """
        ...
