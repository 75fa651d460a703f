"""DRF exception handler that maps the domain taxonomy to HTTP responses."""

from __future__ import annotations

import logging

from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler  # type: ignore

from shared.domain.exceptions import DomainError

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."


def domain_exception_handler(exc, context):  # type: ignore
    if isinstance(exc, DomainError):
        return Response({"message": exc.message, "code": exc.code}, status=exc.status_code)

    response = exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get("view")
    request = context.get("request")
    logger.error(
        f"Unhandled error in {view.__class__.__name__ if view else 'unknown view'} "
        f"({getattr(request, 'method', '?')} {getattr(request, 'path', '?')}): {exc}",
        exc_info=exc,
    )
    return Response(
        {"message": GENERIC_ERROR_MESSAGE, "code": "Internal"},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
