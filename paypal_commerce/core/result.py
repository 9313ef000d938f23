"""Result types for railway-oriented programming.

Provider calls return Result instead of raising, so callers decide whether a
failure matters. Most event handlers treat a Failure as "no data" and log it.

Usage:
    result = await service_manager.get_payment_tokens(settings, customer_id=1)
    match result:
        case Success(value=tokens):
            print(len(tokens))
        case Failure(error=error):
            print(f"Error: {error}")
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
Result: TypeAlias = Success[T] | Failure[E]
