"""Admin token check for destructive operations."""

import hmac

from django.conf import settings
from rest_framework.request import Request

from boxoffice.domain.errors import ForbiddenError, UnauthorizedError

ADMIN_TOKEN_HEADER = "X-Admin-Token"


def require_admin(request: Request) -> None:
    """Reject the request unless it carries the configured admin token.

    Does nothing when no admin token is configured.
    """
    expected = settings.BOXOFFICE.get("ADMIN_TOKEN")
    if not expected:
        return
    supplied = request.headers.get(ADMIN_TOKEN_HEADER)
    if not supplied:
        raise UnauthorizedError()
    if not hmac.compare_digest(supplied.encode(), expected.encode()):
        raise ForbiddenError()
