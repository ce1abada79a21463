"""Request id propagation and access logging."""

import logging
import time
import uuid

logger = logging.getLogger("boxoffice.access")

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIdMiddleware:
    """Attach ``request.request_id`` and echo it in the response header.

    The id comes from the incoming ``X-Request-ID`` header when present.
    One access line is logged per request.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        started = time.monotonic()
        response = self.get_response(request)
        response[REQUEST_ID_HEADER] = request.request_id
        logger.info(
            "%s %s %s %.1fms [%s]",
            request.method,
            request.get_full_path(),
            response.status_code,
            (time.monotonic() - started) * 1000,
            request.request_id,
        )
        return response
