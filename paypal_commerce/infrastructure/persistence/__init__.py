"""In-memory persistence adapters.

Usage:
    from paypal_commerce.infrastructure.persistence import (
        InMemoryGenericAttributeStore,
        InMemoryShipmentRepository,
    )
"""

from paypal_commerce.infrastructure.persistence.generic_attribute_store import (
    InMemoryGenericAttributeStore,
)
from paypal_commerce.infrastructure.persistence.shipment_repository import (
    InMemoryShipmentRepository,
)

__all__ = ["InMemoryGenericAttributeStore", "InMemoryShipmentRepository"]
