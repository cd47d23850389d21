# Standard Library
import logging

# Django REST Framework
from rest_framework import status
from rest_framework.views import APIView

# Local Imports
from .permissions import AdminAPIView
from .procedures import ProcedureError, call_procedure
from .serializers import (
    ContactRequestCreateSerializer,
    ContactRequestSerializer,
    ContactStatusUpdateSerializer,
    CustomRequestCreateSerializer,
    CustomRequestSerializer,
    CustomRequestUpdateSerializer,
)
from .utilities import _fail, _ok, _page_params, _require_int, _server_error

logger = logging.getLogger(__name__)

LEADS_LIMIT = 50


def _status_filter(params):
    return (params.get("status") or "").strip() or None


# -----------------------
# Contact requests
# -----------------------

class CreateContactRequestAPIView(APIView):
    def post(self, request):
        serializer = ContactRequestCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        d = serializer.validated_data
        try:
            contact = call_procedure(
                "sp_create_contact_request",
                d["customer_name"],
                d["mobile_number"],
                d.get("email") or None,
                d.get("message"),
                d["selected_sculpture_ids"],
                d["request_type"],
            )
            data = ContactRequestSerializer(contact).data
        except Exception as e:
            logger.exception("Error creating contact request")
            return _server_error(e, "Failed to submit contact request")
        return _ok("Contact request submitted successfully", data)


class ContactRequestListAPIView(AdminAPIView):
    def get(self, request):
        limit, offset = _page_params(request.query_params, LEADS_LIMIT)
        try:
            rows = call_procedure("sp_get_contact_requests", _status_filter(request.query_params), limit, offset)
            data = ContactRequestSerializer(rows, many=True).data
        except Exception as e:
            logger.exception("Error getting contact requests")
            return _server_error(e, "Failed to retrieve contact requests")
        return _ok("Contact requests retrieved successfully", data)


class ContactRequestByIdAPIView(AdminAPIView):
    def get(self, request):
        request_id = _require_int(request.query_params, "id")
        if request_id is None:
            return _fail("Request ID is required")
        try:
            contact = call_procedure("sp_get_contact_request_by_id", request_id)
            if contact is None:
                return _fail("Contact request not found", status.HTTP_404_NOT_FOUND)
            data = ContactRequestSerializer(contact).data
        except Exception as e:
            logger.exception("Error getting contact request")
            return _server_error(e, "Failed to retrieve contact request")
        return _ok("Contact request retrieved successfully", data)


class UpdateContactRequestStatusAPIView(AdminAPIView):
    def post(self, request):
        serializer = ContactStatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        d = serializer.validated_data
        try:
            contact = call_procedure(
                "sp_update_contact_request_status",
                d["id"],
                d["status"],
                d.get("admin_notes"),
            )
            if contact is None:
                return _fail("Contact request not found", status.HTTP_404_NOT_FOUND)
            data = ContactRequestSerializer(contact).data
        except ProcedureError as e:
            return _fail(str(e))
        except Exception as e:
            logger.exception("Error updating contact request status")
            return _server_error(e, "Failed to update status")
        return _ok("Status updated successfully", data)


# -----------------------
# Custom requests
# -----------------------

class CreateCustomRequestAPIView(APIView):
    def post(self, request):
        serializer = CustomRequestCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        d = serializer.validated_data
        try:
            custom = call_procedure(
                "sp_create_custom_request",
                d["customer_name"],
                d["mobile_number"],
                d.get("email") or None,
                d.get("reference_image_url"),
                d.get("sculpture_type"),
                d.get("preferred_material"),
                d.get("expected_height"),
                d.get("expected_width"),
                d.get("expected_depth"),
                d.get("expected_price"),
                d.get("description"),
                d.get("special_requirements"),
            )
            data = CustomRequestSerializer(custom).data
        except Exception as e:
            logger.exception("Error creating custom request")
            return _server_error(e, "Failed to submit custom request")
        return _ok("Custom request submitted successfully", data)


class CustomRequestListAPIView(AdminAPIView):
    def get(self, request):
        limit, offset = _page_params(request.query_params, LEADS_LIMIT)
        try:
            rows = call_procedure("sp_get_custom_requests", _status_filter(request.query_params), limit, offset)
            data = CustomRequestSerializer(rows, many=True).data
        except Exception as e:
            logger.exception("Error getting custom requests")
            return _server_error(e, "Failed to retrieve custom requests")
        return _ok("Custom requests retrieved successfully", data)


class CustomRequestByIdAPIView(AdminAPIView):
    def get(self, request):
        request_id = _require_int(request.query_params, "id")
        if request_id is None:
            return _fail("Request ID is required")
        try:
            custom = call_procedure("sp_get_custom_request_by_id", request_id)
            if custom is None:
                return _fail("Custom request not found", status.HTTP_404_NOT_FOUND)
            data = CustomRequestSerializer(custom).data
        except Exception as e:
            logger.exception("Error getting custom request")
            return _server_error(e, "Failed to retrieve custom request")
        return _ok("Custom request retrieved successfully", data)


class UpdateCustomRequestAPIView(AdminAPIView):
    def post(self, request):
        serializer = CustomRequestUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        d = serializer.validated_data
        try:
            custom = call_procedure(
                "sp_update_custom_request",
                d["id"],
                d.get("status") or None,
                d.get("quoted_price"),
                d.get("estimated_days"),
                d.get("admin_notes"),
            )
            if custom is None:
                return _fail("Custom request not found", status.HTTP_404_NOT_FOUND)
            data = CustomRequestSerializer(custom).data
        except ProcedureError as e:
            return _fail(str(e))
        except Exception as e:
            logger.exception("Error updating custom request")
            return _server_error(e, "Failed to update custom request")
        return _ok("Custom request updated successfully", data)
