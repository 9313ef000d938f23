"""FastAPI dependencies.

get_request_context() builds the RequestContext for the current request the
first time it is asked for and caches it on request.state, so every event
raised while handling the request shares the same context.

Usage:
    @router.post("/admin/orders/{order_id}/shipments")
    async def add_shipment(
        order_id: int,
        context: RequestContext = Depends(get_request_context),
        event_bus: EventBusProtocol = Depends(get_event_bus),
    ):
        await event_bus.publish(ModelReceived(model=ShipmentModel(order_id=order_id), request=context))
        ...
"""

from starlette.requests import Request

from paypal_commerce.domain.value_objects import RequestContext

REQUEST_CONTEXT_STATE_KEY = "paypal_commerce_context"
"""Attribute name of the cached context on request.state."""

TRACE_ID_HEADER = "X-Trace-Id"

_FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def get_request_context(request: Request) -> RequestContext:
    """Return the RequestContext of the current request.

    Form fields are read from url-encoded and multipart bodies (file uploads
    are skipped). The customer comes from request.state.customer_id when an
    authentication layer has set it.

    Args:
        request: Incoming request.

    Returns:
        RequestContext: The request's context (same instance on every call).
    """
    cached = getattr(request.state, REQUEST_CONTEXT_STATE_KEY, None)
    if cached is not None:
        return cached

    form: dict[str, str] = {}
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(_FORM_CONTENT_TYPES):
        form_data = await request.form()
        form = {key: value for key, value in form_data.items() if isinstance(value, str)}

    context = RequestContext(
        form=form,
        customer_id=getattr(request.state, "customer_id", None),
    )
    if trace_id := request.headers.get(TRACE_ID_HEADER):
        context.correlation_id = trace_id

    setattr(request.state, REQUEST_CONTEXT_STATE_KEY, context)
    return context
