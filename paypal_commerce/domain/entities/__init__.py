"""Domain entities.

Usage:
    from paypal_commerce.domain.entities import Shipment, PaymentToken
"""

from paypal_commerce.domain.entities.base_entity import BaseEntity
from paypal_commerce.domain.entities.payment_token import PaymentToken
from paypal_commerce.domain.entities.shipment import Shipment
from paypal_commerce.domain.entities.system_warning import (
    SystemWarning,
    SystemWarningLevel,
)

__all__ = [
    "BaseEntity",
    "PaymentToken",
    "Shipment",
    "SystemWarning",
    "SystemWarningLevel",
]
