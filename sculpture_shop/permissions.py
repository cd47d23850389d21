from rest_framework.permissions import BasePermission
from rest_framework.views import APIView

from .authentication import AdminJWTAuthentication, TokenAdmin
from .models import AdminUser


class IsShopAdmin(BasePermission):
    def has_permission(self, request, view):
        return isinstance(request.user, TokenAdmin)


class IsShopAdminOrBootstrap(IsShopAdmin):
    """Open while no admin account exists, so the first one can be created."""

    def has_permission(self, request, view):
        if super().has_permission(request, view):
            return True
        return not AdminUser.objects.exists()


class AdminAPIView(APIView):
    """Base for endpoints that need a valid admin bearer token."""
    authentication_classes = [AdminJWTAuthentication]
    permission_classes = [IsShopAdmin]
