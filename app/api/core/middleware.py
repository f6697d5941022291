"""
Request context middleware.

Assigns every request an ID for log correlation and logs its outcome and duration.
"""

import logging
import time
import uuid
from fastapi import Request

from app.api.utils.handlers import unhandled_exception_handler

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
SLOW_REQUEST_THRESHOLD_MS = 1000
VERY_SLOW_REQUEST_THRESHOLD_MS = 3000


async def request_context_middleware(request: Request, call_next):
    """
    Attach a request ID and log the completed request.

    An ``X-Request-ID`` supplied by an upstream service is reused; otherwise
    a new UUID is generated. The ID is stored on ``request.state.request_id``
    and echoed back in the response headers.

    Exceptions that escape the route are turned into a 500 error body here,
    so the header and the completion log line are present on those as well.

    Args:
        request (Request): Incoming request
        call_next: Next ASGI handler in the chain

    Returns:
        Response: Downstream response with the request ID header set
    """
    upstream_id = request.headers.get(REQUEST_ID_HEADER)
    request_id = upstream_id or str(uuid.uuid4())
    request.state.request_id = request_id
    logger.debug(f"Request ID assigned: {request_id} (from upstream: {bool(upstream_id)})")

    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception as exc:
        response = await unhandled_exception_handler(request, exc)
    duration_ms = int((time.perf_counter() - start) * 1000)

    response.headers[REQUEST_ID_HEADER] = request_id

    summary = (
        f"{request.method} {request.url.path} -> {response.status_code} "
        f"in {duration_ms}ms [{request_id}]"
    )
    if response.status_code >= 500:
        logger.error(f"Request completed with server error: {summary}")
    elif response.status_code >= 400:
        logger.warning(f"Request completed with client error: {summary}")
    elif duration_ms > VERY_SLOW_REQUEST_THRESHOLD_MS:
        logger.warning(f"Request completed - VERY SLOW: {summary}")
    elif duration_ms > SLOW_REQUEST_THRESHOLD_MS:
        logger.warning(f"Request completed - SLOW: {summary}")
    else:
        logger.info(f"Request completed: {summary}")

    return response
