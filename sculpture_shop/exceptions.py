# Standard Library
import logging

# Django REST Framework
from rest_framework import exceptions
from rest_framework.views import exception_handler

# Local Imports
from .utilities import _first_error, _server_error

logger = logging.getLogger(__name__)

NO_TOKEN_MESSAGE = "Access denied. No token provided."
BAD_TOKEN_MESSAGE = "Invalid or expired token"


def shop_exception_handler(exc, context):
    """Render every error raised out of a view as a `{success, message}` envelope."""
    response = exception_handler(exc, context)
    if response is None:
        view = context.get("view")
        logger.exception("Unhandled error in %s", type(view).__name__ if view else "view")
        return _server_error(exc, "Internal server error")

    if isinstance(exc, exceptions.NotAuthenticated):
        message = NO_TOKEN_MESSAGE
    elif isinstance(exc, exceptions.AuthenticationFailed):
        message = BAD_TOKEN_MESSAGE
    elif isinstance(exc, exceptions.ValidationError):
        message = _first_error(exc.detail)
    else:
        message = _first_error(response.data)

    response.data = {"success": False, "message": message}
    return response
