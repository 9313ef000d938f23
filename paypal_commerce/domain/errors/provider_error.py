"""Provider error types for the payment provider protocol contract.

These errors define the failure cases that a payment provider service manager
returns inside Failure results.

Usage:
    from paypal_commerce.core.enums import ErrorCode
    from paypal_commerce.core.result import Failure
    from paypal_commerce.domain.errors import ProviderUnavailableError

    return Failure(
        error=ProviderUnavailableError(
            code=ErrorCode.PROVIDER_UNAVAILABLE,
            message="PayPal API is unavailable",
            provider_name="paypal_commerce",
        )
    )
"""

from dataclasses import dataclass

from paypal_commerce.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ProviderError(DomainError):
    """Base payment provider API error.

    Attributes:
        code: Domain ErrorCode.
        message: Human-readable message.
        provider_name: Name of the provider.
        details: Additional context (API error name, debug id).
    """

    provider_name: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ProviderAuthenticationError(ProviderError):
    """Provider rejected the configured credentials.

    Returned when:
    - Client ID or secret is wrong
    - Access token could not be obtained
    """


@dataclass(frozen=True, slots=True, kw_only=True)
class ProviderUnavailableError(ProviderError):
    """Provider API could not be reached or answered with a server error."""
