"""Discriminant of the UI model variants."""

from enum import Enum


class ModelKind(Enum):
    """Explicit tag carried by every PlatformModel variant."""

    PAYMENT_METHOD_LIST = "payment_method_list"
    CUSTOMER_NAVIGATION = "customer_navigation"
    SHIPMENT = "shipment"
    OTHER = "other"
