"""API error taxonomy and the DRF exception handler that renders it."""

import logging

from django.core.exceptions import PermissionDenied
from django.db import IntegrityError
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class AuthenticationRequired(exceptions.NotAuthenticated):
    default_detail = "Authentication required."
    default_code = "authentication_required"


class AuthorizationDenied(exceptions.PermissionDenied):
    default_detail = "You do not have permission to perform this action."
    default_code = "authorization_denied"


class NotFound(exceptions.NotFound):
    default_detail = "Not found."
    default_code = "not_found"


class Conflict(exceptions.APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "The request conflicts with the current state."
    default_code = "conflict"


class InternalError(exceptions.APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Something went wrong."
    default_code = "internal_error"


def _message_from(detail):
    if isinstance(detail, dict):
        for key in ("message", "detail"):
            if key in detail:
                return _message_from(detail[key])
        for field, errors in detail.items():
            return f"{field}: {_message_from(errors)}"
        return "Invalid input."
    if isinstance(detail, list):
        return _message_from(detail[0]) if detail else "Invalid input."
    return str(detail)


def api_exception_handler(exc, context):
    """
    Render every failure as {"message": ..., "errors": ...}.

    DRF's own handler already covers APIException, Http404 and Django's
    PermissionDenied. Integrity errors from racing inserts become 409; any
    other exception is logged and reported as a 500.
    """
    if isinstance(exc, IntegrityError):
        logger.info("Integrity error surfaced as conflict: %s", exc)
        exc = Conflict()
    elif not isinstance(exc, (exceptions.APIException, Http404, PermissionDenied)):
        view = context.get("view")
        logger.exception("Unhandled error in %s", type(view).__name__ if view else "view")
        exc = InternalError()

    response = exception_handler(exc, context)
    if response is None:
        return Response({"message": InternalError.default_detail}, status=500)

    body = {"message": _message_from(response.data)}
    if isinstance(exc, exceptions.ValidationError) and isinstance(response.data, dict):
        body["errors"] = response.data
    response.data = body
    return response
