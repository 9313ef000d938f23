"""Request-scoped context threaded through platform events.

A single HTTP request can raise several related events. When an admin adds a
shipment, ModelReceived fires while the shipment does not exist yet, and
ShipmentCreated fires later in the same request once it has an identifier.
The carrier chosen on the form has to travel from the first handler to the
second, so both events carry the same RequestContext.

Lifecycle:
    - Created once per request (see presentation.dependencies)
    - Items are written at most once and consumed at most once
    - Anything left unconsumed is discarded with the context

Example:
    >>> context = RequestContext(form={"carrier": "UPS"})
    >>> context.stash("carrier", "UPS")
    True
    >>> context.stash("carrier", "DHL")  # already stashed
    False
    >>> context.take("carrier")
    'UPS'
    >>> context.take("carrier") is None
    True
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

from uuid_extensions import uuid7


def _new_correlation_id() -> str:
    return str(uuid7())


@dataclass(kw_only=True, slots=True)
class RequestContext:
    """Per-request form values and item store.

    Attributes:
        form: Submitted form fields (string values only).
        customer_id: Current customer, when the request is authenticated.
        correlation_id: Request correlation ID, bound to log records.
    """

    form: Mapping[str, str] = field(default_factory=dict)
    customer_id: int | None = None
    correlation_id: str = field(default_factory=_new_correlation_id)
    _items: dict[str, str] = field(default_factory=dict, init=False, repr=False)

    def stash(self, key: str, value: str) -> bool:
        """Store a value for a later handler in the same request.

        Args:
            key: Item key.
            value: Item value.

        Returns:
            bool: True if stored, False if the key was already stashed (the
                first value wins).
        """
        if key in self._items:
            return False
        self._items[key] = value
        return True

    def peek(self, key: str) -> str | None:
        """Return a stashed value without consuming it."""
        return self._items.get(key)

    def take(self, key: str) -> str | None:
        """Consume a stashed value.

        Returns:
            str | None: The value, or None if nothing was stashed (or it was
                already consumed).
        """
        return self._items.pop(key, None)
