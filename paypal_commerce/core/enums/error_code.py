"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention and travel inside
DomainError values carried by Failure results.
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    SHIPMENT_NOT_FOUND = "shipment_not_found"
    PAYMENT_TOKEN_NOT_FOUND = "payment_token_not_found"

    # Provider errors
    PROVIDER_NOT_CONFIGURED = "provider_not_configured"
    PROVIDER_AUTHENTICATION_FAILED = "provider_authentication_failed"
    PROVIDER_UNAVAILABLE = "provider_unavailable"
    PROVIDER_REQUEST_FAILED = "provider_request_failed"
