"""Error envelope rendering for every API failure.

All errors leave the API as
``{type, message, code, timestamp, requestId[, details]}``.
"""

import logging

from django.db import DatabaseError
from django.utils import timezone
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from boxoffice.domain.errors import DomainError, ErrorCode

logger = logging.getLogger(__name__)

STATUS_FOR_CODE = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.METHOD_NOT_ALLOWED: status.HTTP_405_METHOD_NOT_ALLOWED,
    ErrorCode.NOT_ACCEPTABLE: status.HTTP_406_NOT_ACCEPTABLE,
    ErrorCode.UNSUPPORTED_MEDIA_TYPE: status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
    ErrorCode.RATE_LIMITED: status.HTTP_429_TOO_MANY_REQUESTS,
    ErrorCode.DATABASE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

CODE_FOR_STATUS = {
    status.HTTP_400_BAD_REQUEST: ErrorCode.VALIDATION_ERROR,
    status.HTTP_401_UNAUTHORIZED: ErrorCode.UNAUTHORIZED,
    status.HTTP_403_FORBIDDEN: ErrorCode.FORBIDDEN,
    status.HTTP_404_NOT_FOUND: ErrorCode.NOT_FOUND,
    status.HTTP_405_METHOD_NOT_ALLOWED: ErrorCode.METHOD_NOT_ALLOWED,
    status.HTTP_406_NOT_ACCEPTABLE: ErrorCode.NOT_ACCEPTABLE,
    status.HTTP_409_CONFLICT: ErrorCode.CONFLICT,
    status.HTTP_415_UNSUPPORTED_MEDIA_TYPE: ErrorCode.UNSUPPORTED_MEDIA_TYPE,
    status.HTTP_429_TOO_MANY_REQUESTS: ErrorCode.RATE_LIMITED,
}


def error_envelope(code: ErrorCode, message: str, http_status: int, request_id=None, details=None) -> dict:
    body = {
        "type": code.value,
        "message": message,
        "code": http_status,
        "timestamp": timezone.now().isoformat(),
        "requestId": request_id,
    }
    if details is not None:
        body["details"] = details
    return body


def boxoffice_exception_handler(exc, context):
    """DRF EXCEPTION_HANDLER mapping domain, DRF and storage errors."""
    request = context.get("request")
    request_id = getattr(request, "request_id", None)

    if isinstance(exc, DomainError):
        http_status = STATUS_FOR_CODE[exc.code]
        if http_status >= 500:
            logger.error("%s [%s]", exc, request_id, exc_info=exc)
        return Response(
            error_envelope(exc.code, exc.message, http_status, request_id, exc.details),
            status=http_status,
        )

    response = exception_handler(exc, context)
    if response is not None:
        code = CODE_FOR_STATUS.get(response.status_code)
        if code is None:
            code = ErrorCode.INTERNAL_ERROR if response.status_code >= 500 else ErrorCode.VALIDATION_ERROR
        if isinstance(exc, exceptions.ValidationError):
            message, details = "Invalid request data", response.data
        else:
            message, details = str(getattr(exc, "detail", exc)), None
        response.data = error_envelope(code, message, response.status_code, request_id, details)
        return response

    if isinstance(exc, DatabaseError):
        logger.error("Unhandled database error [%s]", request_id, exc_info=exc)
        code, message = ErrorCode.DATABASE_ERROR, "Database operation failed"
    else:
        logger.error("Unhandled error [%s]", request_id, exc_info=exc)
        code, message = ErrorCode.INTERNAL_ERROR, "Internal server error"
    return Response(
        error_envelope(code, message, status.HTTP_500_INTERNAL_SERVER_ERROR, request_id),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
