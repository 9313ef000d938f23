"""Domain value objects."""

from paypal_commerce.domain.value_objects.request_context import RequestContext

__all__ = ["RequestContext"]
