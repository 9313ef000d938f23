"""Domain protocols (ports) package.

Infrastructure adapters (or the host platform) implement these protocols
without inheritance.

Usage:
    from paypal_commerce.domain.protocols import (
        GenericAttributeProtocol,
        PaymentProviderServiceProtocol,
    )
"""

from paypal_commerce.domain.protocols.event_bus_protocol import (
    EventBusProtocol,
    EventHandler,
)
from paypal_commerce.domain.protocols.generic_attribute_protocol import (
    GenericAttributeProtocol,
)
from paypal_commerce.domain.protocols.localization_protocol import (
    LocalizationProtocol,
)
from paypal_commerce.domain.protocols.logger_protocol import LoggerProtocol
from paypal_commerce.domain.protocols.payment_provider_protocol import (
    PaymentProviderServiceProtocol,
)
from paypal_commerce.domain.protocols.shipment_repository import (
    ShipmentRepositoryProtocol,
)

__all__ = [
    "EventBusProtocol",
    "EventHandler",
    "GenericAttributeProtocol",
    "LocalizationProtocol",
    "LoggerProtocol",
    "PaymentProviderServiceProtocol",
    "ShipmentRepositoryProtocol",
]
