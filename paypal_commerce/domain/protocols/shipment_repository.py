"""ShipmentRepositoryProtocol - shipment lookup."""

from typing import Protocol

from paypal_commerce.domain.entities import Shipment


class ShipmentRepositoryProtocol(Protocol):
    """Protocol for shipment lookup."""

    async def get_shipment_by_id(self, shipment_id: int) -> Shipment | None:
        """Return the shipment, or None for unknown or non-positive IDs."""
        ...
