"""Platform Events Registry - Single Source of Truth.

Catalogs every event the plugin consumes with its metadata. Used for:
- Container wiring (automated subscription)
- Validation tests (every event has a handler method)

Adding new events:
1. Define the event dataclass in platform_events.py
2. Add an entry to EVENT_REGISTRY below
3. Implement PayPalCommerceEventHandler.handle_<workflow_name>
"""

from dataclasses import dataclass
from enum import Enum

from paypal_commerce.domain.events.base_event import DomainEvent
from paypal_commerce.domain.events.platform_events import (
    CustomerPermanentlyDeleted,
    ModelPrepared,
    ModelReceived,
    ShipmentCreated,
    ShipmentTrackingNumberSet,
    SystemWarningCreated,
)


class EventCategory(Enum):
    """Event categories for organization and filtering."""

    CUSTOMER = "customer"
    VIEW_MODEL = "view_model"
    SHIPPING = "shipping"
    SYSTEM = "system"


@dataclass(frozen=True)
class EventMetadata:
    """Metadata for a platform event.

    Attributes:
        event_class: The event dataclass.
        category: Event category.
        workflow_name: Handler suffix; the container subscribes
            ``handle_<workflow_name>``.
        request_scoped: Event carries a RequestContext.
    """

    event_class: type[DomainEvent]
    category: EventCategory
    workflow_name: str
    request_scoped: bool = False

    @property
    def handler_method_name(self) -> str:
        """Name of the consumer method subscribed to this event."""
        return f"handle_{self.workflow_name}"


EVENT_REGISTRY: list[EventMetadata] = [
    EventMetadata(
        event_class=CustomerPermanentlyDeleted,
        category=EventCategory.CUSTOMER,
        workflow_name="customer_permanently_deleted",
    ),
    EventMetadata(
        event_class=ModelPrepared,
        category=EventCategory.VIEW_MODEL,
        workflow_name="model_prepared",
        request_scoped=True,
    ),
    EventMetadata(
        event_class=ModelReceived,
        category=EventCategory.VIEW_MODEL,
        workflow_name="model_received",
        request_scoped=True,
    ),
    EventMetadata(
        event_class=ShipmentCreated,
        category=EventCategory.SHIPPING,
        workflow_name="shipment_created",
        request_scoped=True,
    ),
    EventMetadata(
        event_class=ShipmentTrackingNumberSet,
        category=EventCategory.SHIPPING,
        workflow_name="shipment_tracking_number_set",
    ),
    EventMetadata(
        event_class=SystemWarningCreated,
        category=EventCategory.SYSTEM,
        workflow_name="system_warning_created",
    ),
]


def get_events_by_category(category: EventCategory) -> list[EventMetadata]:
    """Return registry entries of one category."""
    return [metadata for metadata in EVENT_REGISTRY if metadata.category == category]
