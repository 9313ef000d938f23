"""Presentation layer - FastAPI integration.

Exposes the dependency that builds the per-request RequestContext the
plugin's request-scoped events carry.
"""

from paypal_commerce.presentation.dependencies import get_request_context

__all__ = ["get_request_context"]
