"""GenericAttributeProtocol - schemaless key/value storage on entities.

A generic attribute is addressed by (entity key group, entity id, key,
store id). Saving an empty or None value removes the attribute.
"""

from typing import Protocol

from paypal_commerce.domain.entities import BaseEntity


class GenericAttributeProtocol(Protocol):
    """Protocol for generic attribute storage."""

    async def save_attribute(
        self,
        entity: BaseEntity,
        key: str,
        value: str | None,
        store_id: int = 0,
    ) -> None:
        """Create, update or (for empty values) delete an attribute.

        Args:
            entity: Persisted entity the attribute belongs to.
            key: Attribute key.
            value: Attribute value; empty or None deletes the attribute.
            store_id: Store scope (0 = all stores).
        """
        ...

    async def get_attribute(
        self,
        entity: BaseEntity,
        key: str,
        store_id: int = 0,
    ) -> str | None:
        """Return the attribute value, or None if it is not set."""
        ...
