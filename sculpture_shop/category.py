# Standard Library
import logging

# Django REST Framework
from rest_framework import status
from rest_framework.views import APIView

# Local Imports
from .permissions import AdminAPIView
from .procedures import ProcedureError, call_procedure
from .serializers import (
    CategoryCreateSerializer,
    CategorySerializer,
    CategoryUpdateSerializer,
    CategoryWithCountSerializer,
    MaterialCreateSerializer,
    MaterialSerializer,
    MaterialUpdateSerializer,
)
from .utilities import _fail, _ok, _require_int, _server_error

logger = logging.getLogger(__name__)


# -----------------------
# Categories
# -----------------------

class CategoryListAPIView(APIView):
    def get(self, request):
        try:
            data = CategorySerializer(call_procedure("sp_get_all_categories"), many=True).data
        except Exception as e:
            logger.exception("Error getting categories")
            return _server_error(e, "Failed to retrieve categories")
        return _ok("Categories retrieved successfully", data)


class CategoryByIdAPIView(APIView):
    def get(self, request):
        category_id = _require_int(request.query_params, "id")
        if category_id is None:
            return _fail("Category ID is required")
        try:
            category = call_procedure("sp_get_category_by_id", category_id)
            if category is None:
                return _fail("Category not found", status.HTTP_404_NOT_FOUND)
            data = CategorySerializer(category).data
        except Exception as e:
            logger.exception("Error getting category by ID")
            return _server_error(e, "Failed to retrieve category")
        return _ok("Category retrieved successfully", data)


class CategoryBySlugAPIView(APIView):
    def get(self, request):
        slug = (request.query_params.get("slug") or "").strip()
        if not slug:
            return _fail("Category slug is required")
        try:
            category = call_procedure("sp_get_category_by_slug", slug)
            if category is None:
                return _fail("Category not found", status.HTTP_404_NOT_FOUND)
            data = CategorySerializer(category).data
        except Exception as e:
            logger.exception("Error getting category by slug")
            return _server_error(e, "Failed to retrieve category")
        return _ok("Category retrieved successfully", data)


class CategoriesWithCountAPIView(APIView):
    def get(self, request):
        try:
            rows = call_procedure("sp_get_categories_with_count")
            data = CategoryWithCountSerializer(rows, many=True).data
        except Exception as e:
            logger.exception("Error getting categories with count")
            return _server_error(e, "Failed to retrieve categories")
        return _ok("Categories with count retrieved successfully", data)


class AddCategoryAPIView(AdminAPIView):
    def post(self, request):
        serializer = CategoryCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        d = serializer.validated_data
        try:
            category = call_procedure(
                "sp_add_category",
                d["name"],
                d.get("description"),
                d.get("image_url"),
                d.get("display_order") or 0,
            )
            data = CategorySerializer(category).data
        except Exception as e:
            logger.exception("Error adding category")
            return _server_error(e, "Failed to add category")
        return _ok("Category added successfully", data)


class UpdateCategoryAPIView(AdminAPIView):
    def post(self, request):
        serializer = CategoryUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        d = serializer.validated_data
        try:
            category = call_procedure(
                "sp_update_category",
                d["id"],
                d.get("name") or None,
                d.get("description"),
                d.get("image_url"),
                d.get("display_order"),
                d.get("is_active"),
            )
            if category is None:
                return _fail("Category not found", status.HTTP_404_NOT_FOUND)
            data = CategorySerializer(category).data
        except ProcedureError as e:
            return _fail(str(e))
        except Exception as e:
            logger.exception("Error updating category")
            return _server_error(e, "Failed to update category")
        return _ok("Category updated successfully", data)


class DeleteCategoryAPIView(AdminAPIView):
    def post(self, request):
        category_id = _require_int(request.data, "id")
        if category_id is None:
            return _fail("Category ID is required")
        try:
            result = call_procedure("sp_delete_category", category_id)
        except ProcedureError as e:
            return _fail(str(e))
        except Exception as e:
            logger.exception("Error deleting category")
            return _server_error(e, "Failed to delete category")
        if result is None:
            return _fail("Category not found", status.HTTP_404_NOT_FOUND)
        return _ok("Category deleted successfully", result)


# -----------------------
# Materials
# -----------------------

class MaterialListAPIView(APIView):
    def get(self, request):
        try:
            data = MaterialSerializer(call_procedure("sp_get_all_materials"), many=True).data
        except Exception as e:
            logger.exception("Error getting materials")
            return _server_error(e, "Failed to retrieve materials")
        return _ok("Materials retrieved successfully", data)


class MaterialByIdAPIView(APIView):
    def get(self, request):
        material_id = _require_int(request.query_params, "id")
        if material_id is None:
            return _fail("Material ID is required")
        try:
            material = call_procedure("sp_get_material_by_id", material_id)
            if material is None:
                return _fail("Material not found", status.HTTP_404_NOT_FOUND)
            data = MaterialSerializer(material).data
        except Exception as e:
            logger.exception("Error getting material by ID")
            return _server_error(e, "Failed to retrieve material")
        return _ok("Material retrieved successfully", data)


class AddMaterialAPIView(AdminAPIView):
    def post(self, request):
        serializer = MaterialCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        d = serializer.validated_data
        try:
            material = call_procedure("sp_add_material", d["name"], d.get("description"))
            data = MaterialSerializer(material).data
        except ProcedureError as e:
            return _fail(str(e))
        except Exception as e:
            logger.exception("Error adding material")
            return _server_error(e, "Failed to add material")
        return _ok("Material added successfully", data)


class UpdateMaterialAPIView(AdminAPIView):
    def post(self, request):
        serializer = MaterialUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        d = serializer.validated_data
        try:
            material = call_procedure(
                "sp_update_material",
                d["id"],
                d.get("name") or None,
                d.get("description"),
                d.get("is_active"),
            )
            if material is None:
                return _fail("Material not found", status.HTTP_404_NOT_FOUND)
            data = MaterialSerializer(material).data
        except ProcedureError as e:
            return _fail(str(e))
        except Exception as e:
            logger.exception("Error updating material")
            return _server_error(e, "Failed to update material")
        return _ok("Material updated successfully", data)


class DeleteMaterialAPIView(AdminAPIView):
    def post(self, request):
        material_id = _require_int(request.data, "id")
        if material_id is None:
            return _fail("Material ID is required")
        try:
            result = call_procedure("sp_delete_material", material_id)
        except Exception as e:
            logger.exception("Error deleting material")
            return _server_error(e, "Failed to delete material")
        if result is None:
            return _fail("Material not found", status.HTTP_404_NOT_FOUND)
        return _ok("Material deleted successfully", result)
