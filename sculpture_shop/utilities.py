# Standard Library
import logging
import traceback

# Django
from django.conf import settings
from django.utils import timezone
from django.utils.text import slugify

# Django REST Framework
from rest_framework import status
from rest_framework.response import Response

# Local Imports
from .catalog import _to_int, clamp_page

logger = logging.getLogger(__name__)


def format_slug(name):
    return slugify(name or "")


def generate_unique_slug(model, base_slug, instance=None, fallback="item"):
    """
    First free slug among base, base-1, base-2, ... for `model`.
    `instance` is excluded so re-saving a row keeps its own slug.
    """
    base_slug = base_slug or fallback
    slug = base_slug
    counter = 1
    qs = model.objects.all()
    if instance is not None and instance.pk:
        qs = qs.exclude(pk=instance.pk)
    while qs.filter(slug=slug).exists():
        slug = f"{base_slug}-{counter}"
        counter += 1
    return slug


def _now():
    return timezone.now()


def _require_int(params, key):
    """Integer value of `params[key]`, or None when missing or unparsable."""
    return _to_int(params.get(key))


def _page_params(params, default_limit):
    return clamp_page(params.get("limit"), params.get("offset"), default_limit, settings.SHOP_MAX_PAGE_SIZE)


def _first_error(errors):
    """Flatten a serializer error dict to its first human-readable message."""
    if isinstance(errors, dict):
        for value in errors.values():
            return _first_error(value)
        return "Invalid request"
    if isinstance(errors, (list, tuple)):
        return _first_error(errors[0]) if errors else "Invalid request"
    return str(errors)


# -----------------------
# Response envelope
# -----------------------

def _ok(message, data=None, status_code=status.HTTP_200_OK):
    body = {"success": True, "message": message}
    if data is not None:
        body["data"] = data
    return Response(body, status=status_code)


def _fail(message, status_code=status.HTTP_400_BAD_REQUEST):
    return Response({"success": False, "message": message}, status=status_code)


def _server_error(exc, fallback):
    """500 envelope carrying the raw error message; traceback only in DEBUG."""
    body = {"success": False, "message": str(exc) or fallback}
    if settings.DEBUG:
        body["stack"] = traceback.format_exc()
    return Response(body, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
