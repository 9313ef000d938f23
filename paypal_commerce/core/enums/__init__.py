"""Core enums package.

Usage:
    from paypal_commerce.core.enums import ErrorCode, Environment
"""

from paypal_commerce.core.enums.environment import Environment
from paypal_commerce.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
