"""In-memory shipment repository.

Implements ShipmentRepositoryProtocol and lets callers add shipments, which
assigns the next identifier the way a database insert would.
"""

from itertools import count

from paypal_commerce.domain.entities import Shipment


class InMemoryShipmentRepository:
    """Process-local shipment storage."""

    def __init__(self) -> None:
        self._shipments: dict[int, Shipment] = {}
        self._ids = count(1)

    async def get_shipment_by_id(self, shipment_id: int) -> Shipment | None:
        """Return the shipment, or None for unknown or non-positive IDs."""
        if shipment_id <= 0:
            return None
        return self._shipments.get(shipment_id)

    async def add(self, shipment: Shipment) -> Shipment:
        """Store a new shipment and assign its identifier.

        Raises:
            ValueError: If the shipment already has an identifier.
        """
        if shipment.is_persisted:
            raise ValueError(f"Shipment {shipment.id} is already stored")
        shipment.id = next(self._ids)
        self._shipments[shipment.id] = shipment
        return shipment
