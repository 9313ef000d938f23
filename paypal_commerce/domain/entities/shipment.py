"""Shipment entity."""

from dataclasses import dataclass

from paypal_commerce.domain.entities.base_entity import BaseEntity


@dataclass(kw_only=True)
class Shipment(BaseEntity):
    """Shipment of (part of) an order.

    Attributes:
        order_id: Order the shipment belongs to.
        tracking_number: Carrier tracking number, once known.
    """

    order_id: int
    tracking_number: str | None = None
