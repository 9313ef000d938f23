"""Base domain event class.

Platform events represent "things that happened" in the host platform and are
always named in past tense (CustomerPermanentlyDeleted, ShipmentCreated).

Architecture:
    - Frozen dataclass (the event record itself is immutable)
    - Auto-generated event_id (UUIDv7, time-ordered) for tracking
    - occurred_at timestamp (UTC)

Note:
    Frozen means the event's fields cannot be reassigned. Some payloads are
    mutable on purpose (a view model, a list of warnings) because handlers
    are expected to edit them in place.

Usage:
    >>> @dataclass(frozen=True, kw_only=True)
    >>> class ShipmentCreated(DomainEvent):
    ...     shipment: Shipment | None
    >>>
    >>> event = ShipmentCreated(shipment=shipment)
    >>> print(event.event_id)  # Auto-generated UUID
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all platform events.

    Attributes:
        event_id: Unique identifier for this event instance. Auto-generated
            UUIDv7 if not provided.
        occurred_at: Timestamp when the event occurred (UTC). Auto-generated
            if not provided.
    """

    event_id: UUID = field(default_factory=uuid7)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
