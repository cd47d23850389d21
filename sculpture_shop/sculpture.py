# Standard Library
import logging
from decimal import Decimal

# Django
from django.conf import settings

# Django REST Framework
from rest_framework import status
from rest_framework.views import APIView

# Local Imports
from .catalog import DEFAULT_LIMIT, clamp_page, parse_filters
from .permissions import AdminAPIView
from .procedures import call_procedure
from .serializers import (
    SculptureCreateSerializer,
    SculptureDetailSerializer,
    SculptureImageCreateSerializer,
    SculptureImageSerializer,
    SculptureSerializer,
    SculptureUpdateSerializer,
)
from .utilities import _fail, _ok, _require_int, _server_error

logger = logging.getLogger(__name__)

FEATURED_LIMIT = 10
RELATED_LIMIT = 4


# -----------------------
# Public reads
# -----------------------

class SculptureListAPIView(APIView):
    def get(self, request):
        filters = parse_filters(request.query_params, DEFAULT_LIMIT, settings.SHOP_MAX_PAGE_SIZE)
        try:
            rows = call_procedure("sp_get_sculptures", *filters.predicate_params(), filters.limit, filters.offset)
            data = SculptureSerializer(rows, many=True).data
        except Exception as e:
            logger.exception("Error getting sculptures")
            return _server_error(e, "Failed to retrieve sculptures")
        return _ok("Sculptures retrieved successfully", data)


class SculptureCountAPIView(APIView):
    def get(self, request):
        filters = parse_filters(request.query_params)
        try:
            result = call_procedure("sp_get_sculptures_count", *filters.predicate_params())
        except Exception as e:
            logger.exception("Error getting sculptures count")
            return _server_error(e, "Failed to retrieve count")
        return _ok("Count retrieved successfully", result)


class SculptureByIdAPIView(APIView):
    def get(self, request):
        sculpture_id = _require_int(request.query_params, "id")
        if sculpture_id is None:
            return _fail("Sculpture ID is required")
        try:
            sculpture = call_procedure("sp_get_sculpture_by_id", sculpture_id)
            if sculpture is None:
                return _fail("Sculpture not found", status.HTTP_404_NOT_FOUND)
            data = SculptureDetailSerializer(sculpture).data
        except Exception as e:
            logger.exception("Error getting sculpture by ID")
            return _server_error(e, "Failed to retrieve sculpture")
        return _ok("Sculpture retrieved successfully", data)


class SculptureBySlugAPIView(APIView):
    def get(self, request):
        slug = (request.query_params.get("slug") or "").strip()
        if not slug:
            return _fail("Sculpture slug is required")
        try:
            sculpture = call_procedure("sp_get_sculpture_by_slug", slug)
            if sculpture is None:
                return _fail("Sculpture not found", status.HTTP_404_NOT_FOUND)
            data = SculptureDetailSerializer(sculpture).data
        except Exception as e:
            logger.exception("Error getting sculpture by slug")
            return _server_error(e, "Failed to retrieve sculpture")
        return _ok("Sculpture retrieved successfully", data)


class SculptureImagesAPIView(APIView):
    def get(self, request):
        sculpture_id = _require_int(request.query_params, "sculpture_id")
        if sculpture_id is None:
            return _fail("Sculpture ID is required")
        try:
            images = call_procedure("sp_get_sculpture_images", sculpture_id)
            data = SculptureImageSerializer(images, many=True).data
        except Exception as e:
            logger.exception("Error getting sculpture images")
            return _server_error(e, "Failed to retrieve images")
        return _ok("Images retrieved successfully", data)


class FeaturedSculpturesAPIView(APIView):
    def get(self, request):
        limit, _offset = clamp_page(request.query_params.get("limit"), 0, FEATURED_LIMIT,
                                    settings.SHOP_MAX_PAGE_SIZE)
        try:
            rows = call_procedure("sp_get_featured_sculptures", limit)
            data = SculptureSerializer(rows, many=True).data
        except Exception as e:
            logger.exception("Error getting featured sculptures")
            return _server_error(e, "Failed to retrieve featured sculptures")
        return _ok("Featured sculptures retrieved successfully", data)


class RelatedSculpturesAPIView(APIView):
    def get(self, request):
        sculpture_id = _require_int(request.query_params, "sculpture_id")
        if sculpture_id is None:
            return _fail("Sculpture ID is required")
        limit, _offset = clamp_page(request.query_params.get("limit"), 0, RELATED_LIMIT,
                                    settings.SHOP_MAX_PAGE_SIZE)
        try:
            rows = call_procedure("sp_get_related_sculptures", sculpture_id, limit)
            data = SculptureSerializer(rows, many=True).data
        except Exception as e:
            logger.exception("Error getting related sculptures")
            return _server_error(e, "Failed to retrieve related sculptures")
        return _ok("Related sculptures retrieved successfully", data)


# -----------------------
# Admin writes
# -----------------------

class AddSculptureAPIView(AdminAPIView):
    def post(self, request):
        serializer = SculptureCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        d = serializer.validated_data
        try:
            sculpture = call_procedure(
                "sp_add_sculpture",
                d["name"],
                d.get("slug") or None,
                d.get("category_id"),
                d.get("material_id"),
                d.get("description"),
                d.get("dimensions"),
                d.get("height_cm"),
                d.get("width_cm"),
                d.get("depth_cm"),
                d.get("weight_kg"),
                d.get("price") or Decimal("0"),
                d["is_featured"],
                d["is_available"],
            )
            data = SculptureSerializer(sculpture).data
        except Exception as e:
            logger.exception("Error adding sculpture")
            return _server_error(e, "Failed to add sculpture")
        return _ok("Sculpture added successfully", data)


class UpdateSculptureAPIView(AdminAPIView):
    def post(self, request):
        serializer = SculptureUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        d = serializer.validated_data
        try:
            sculpture = call_procedure(
                "sp_update_sculpture",
                d["id"],
                d.get("name") or None,
                d.get("category_id"),
                d.get("material_id"),
                d.get("description"),
                d.get("dimensions"),
                d.get("height_cm"),
                d.get("width_cm"),
                d.get("depth_cm"),
                d.get("weight_kg"),
                d.get("price"),
                d.get("is_featured"),
                d.get("is_available"),
                d.get("slug") or None,
            )
            if sculpture is None:
                return _fail("Sculpture not found", status.HTTP_404_NOT_FOUND)
            data = SculptureSerializer(sculpture).data
        except Exception as e:
            logger.exception("Error updating sculpture")
            return _server_error(e, "Failed to update sculpture")
        return _ok("Sculpture updated successfully", data)


class DeleteSculptureAPIView(AdminAPIView):
    def post(self, request):
        sculpture_id = _require_int(request.data, "id")
        if sculpture_id is None:
            return _fail("Sculpture ID is required")
        try:
            result = call_procedure("sp_delete_sculpture", sculpture_id)
        except Exception as e:
            logger.exception("Error deleting sculpture")
            return _server_error(e, "Failed to delete sculpture")
        if not result["affected_rows"]:
            return _fail("Sculpture not found", status.HTTP_404_NOT_FOUND)
        return _ok("Sculpture deleted successfully", result)


class AddSculptureImageAPIView(AdminAPIView):
    def post(self, request):
        serializer = SculptureImageCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        d = serializer.validated_data
        try:
            image = call_procedure(
                "sp_add_sculpture_image",
                d["sculpture_id"],
                d["image_url"],
                d.get("alt_text"),
                d["is_primary"],
                d.get("display_order") or 0,
            )
            if image is None:
                return _fail("Sculpture not found", status.HTTP_404_NOT_FOUND)
            data = SculptureImageSerializer(image).data
        except Exception as e:
            logger.exception("Error adding sculpture image")
            return _server_error(e, "Failed to add image")
        return _ok("Image added successfully", data)


class SetPrimaryImageAPIView(AdminAPIView):
    def post(self, request):
        image_id = _require_int(request.data, "id")
        if image_id is None:
            return _fail("Image ID is required")
        try:
            image = call_procedure("sp_set_primary_image", image_id)
            if image is None:
                return _fail("Image not found", status.HTTP_404_NOT_FOUND)
            data = SculptureImageSerializer(image).data
        except Exception as e:
            logger.exception("Error setting primary image")
            return _server_error(e, "Failed to set primary image")
        return _ok("Primary image updated successfully", data)


class DeleteSculptureImageAPIView(AdminAPIView):
    def post(self, request):
        image_id = _require_int(request.data, "id")
        if image_id is None:
            return _fail("Image ID is required")
        try:
            result = call_procedure("sp_delete_sculpture_image", image_id)
        except Exception as e:
            logger.exception("Error deleting sculpture image")
            return _server_error(e, "Failed to delete image")
        if result is None:
            return _fail("Image not found", status.HTTP_404_NOT_FOUND)
        return _ok("Image deleted successfully", result)
