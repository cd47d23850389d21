# Standard Library
import logging

# Django REST Framework
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework.views import APIView

# Local Imports
from .authentication import AdminJWTAuthentication, authenticate_admin, hash_password, issue_token
from .permissions import AdminAPIView, IsShopAdminOrBootstrap
from .procedures import ProcedureError, call_procedure
from .serializers import (
    AdminCreateSerializer,
    AdminLoginSerializer,
    AdminUserSerializer,
    SiteSettingSerializer,
    SiteSettingUpdateSerializer,
)
from .utilities import _fail, _now, _ok, _server_error

logger = logging.getLogger(__name__)


# -----------------------
# Admin auth
# -----------------------

class AdminLoginAPIView(APIView):
    def post(self, request):
        serializer = AdminLoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        d = serializer.validated_data
        try:
            admin = authenticate_admin(d["username"], d["password"])
            if admin is None:
                return _fail("Invalid credentials", status.HTTP_401_UNAUTHORIZED)
            token = issue_token(admin)
        except Exception as e:
            logger.exception("Error during admin login")
            return _server_error(e, "Login failed")
        return _ok("Login successful", {
            "id": admin.id,
            "username": admin.username,
            "full_name": admin.full_name,
            "token": token,
        })


class VerifyTokenAPIView(AdminAPIView):
    def get(self, request):
        return _ok("Token is valid", request.user.as_dict())


class CreateAdminAPIView(APIView):
    authentication_classes = [AdminJWTAuthentication]
    permission_classes = [IsShopAdminOrBootstrap]

    def post(self, request):
        serializer = AdminCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        d = serializer.validated_data
        try:
            admin = call_procedure(
                "sp_create_admin",
                d["username"],
                hash_password(d["password"]),
                d.get("full_name"),
            )
            data = AdminUserSerializer(admin).data
        except ProcedureError as e:
            return _fail(str(e))
        except Exception as e:
            logger.exception("Error creating admin")
            return _server_error(e, "Failed to create admin")
        logger.info("Admin user %s created", admin.username)
        return _ok("Admin user created successfully", data)


class DashboardStatsAPIView(AdminAPIView):
    def get(self, request):
        try:
            stats = call_procedure("sp_get_dashboard_stats")
        except Exception as e:
            logger.exception("Error getting dashboard stats")
            return _server_error(e, "Failed to retrieve dashboard stats")
        return _ok("Dashboard stats retrieved successfully", stats)


# -----------------------
# Site settings
# -----------------------

class SiteSettingsAPIView(APIView):
    def get(self, request):
        try:
            settings_ = {row.setting_key: row.typed_value for row in call_procedure("sp_get_site_settings")}
        except Exception as e:
            logger.exception("Error getting site settings")
            return _server_error(e, "Failed to retrieve site settings")
        return _ok("Site settings retrieved successfully", settings_)


class UpdateSiteSettingAPIView(AdminAPIView):
    def post(self, request):
        serializer = SiteSettingUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        d = serializer.validated_data
        try:
            setting = call_procedure(
                "sp_update_site_setting",
                d["setting_key"],
                d.get("setting_value") or "",
                d.get("setting_type"),
                d.get("description"),
            )
            data = SiteSettingSerializer(setting).data
        except Exception as e:
            logger.exception("Error updating site setting")
            return _server_error(e, "Failed to update setting")
        return _ok("Setting updated successfully", data)


# -----------------------
# Service routes
# -----------------------

@api_view(["GET"])
def health(request):
    return Response({
        "success": True,
        "message": "Sculpture Shop API is running",
        "timestamp": _now().isoformat(),
    })


@api_view(["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"])
def route_not_found(request):
    return _fail(f"Route {request.method} {request.get_full_path()} not found", status.HTTP_404_NOT_FOUND)
