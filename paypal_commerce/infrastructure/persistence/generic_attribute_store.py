"""In-memory generic attribute store.

Implements GenericAttributeProtocol with a dictionary keyed by
(key_group, entity_id, key, store_id). Keys are case-insensitive, as they are
on the platform.
"""

from typing import TypeAlias

from paypal_commerce.domain.entities import BaseEntity
from paypal_commerce.domain.protocols.logger_protocol import LoggerProtocol

AttributeKey: TypeAlias = tuple[str, int, str, int]


class InMemoryGenericAttributeStore:
    """Process-local generic attribute storage.

    Example:
        >>> store = InMemoryGenericAttributeStore(logger=logger)
        >>> await store.save_attribute(shipment, "PayPalCommerce.ShipmentCarrier", "UPS")
        >>> await store.get_attribute(shipment, "PayPalCommerce.ShipmentCarrier")
        'UPS'
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._attributes: dict[AttributeKey, str] = {}
        self._logger = logger

    async def save_attribute(
        self,
        entity: BaseEntity,
        key: str,
        value: str | None,
        store_id: int = 0,
    ) -> None:
        """Create, update or delete an attribute.

        Raises:
            ValueError: If the entity has not been persisted yet.
        """
        if not entity.is_persisted:
            raise ValueError(
                f"Cannot save attribute {key!r} on unsaved {entity.key_group}"
            )

        attribute_key = self._key(entity, key, store_id)
        if not value:
            if self._attributes.pop(attribute_key, None) is not None:
                self._logger.debug(
                    "generic_attribute_deleted",
                    key_group=entity.key_group,
                    entity_id=entity.id,
                    key=key,
                )
            return

        self._attributes[attribute_key] = value
        self._logger.debug(
            "generic_attribute_saved",
            key_group=entity.key_group,
            entity_id=entity.id,
            key=key,
            store_id=store_id,
        )

    async def get_attribute(
        self,
        entity: BaseEntity,
        key: str,
        store_id: int = 0,
    ) -> str | None:
        """Return the attribute value, or None if it is not set."""
        return self._attributes.get(self._key(entity, key, store_id))

    def _key(self, entity: BaseEntity, key: str, store_id: int) -> AttributeKey:
        return (entity.key_group, entity.id, key.lower(), store_id)
