"""Core shared kernel.

Result types, the base error class, enums, configuration and the dependency
container. Nothing in here depends on the other layers except the container,
which is the composition root.
"""

from paypal_commerce.core.enums import ErrorCode
from paypal_commerce.core.errors import DomainError
from paypal_commerce.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "ErrorCode",
    "Failure",
    "Result",
    "Success",
]
