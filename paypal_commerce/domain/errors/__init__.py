"""Domain errors package.

Usage:
    from paypal_commerce.domain.errors import ProviderError
"""

from paypal_commerce.domain.errors.provider_error import (
    ProviderAuthenticationError,
    ProviderError,
    ProviderUnavailableError,
)

__all__ = [
    "ProviderAuthenticationError",
    "ProviderError",
    "ProviderUnavailableError",
]
