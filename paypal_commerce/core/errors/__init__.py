"""Core errors package.

Usage:
    from paypal_commerce.core.errors import DomainError
"""

from paypal_commerce.core.errors.domain_error import DomainError

__all__ = ["DomainError"]
