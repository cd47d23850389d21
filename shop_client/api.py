# Standard Library
import json
import logging
import os

# Third Party
import requests

# Local Imports
from .storage import MemoryStorage
from .stores import TOKEN_KEY

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000/api/method"
DEFAULT_TIMEOUT = 30
OPERATION_PREFIX = "sculpture_shop.api."


class ApiError(Exception):
    def __init__(self, message, status=None, data=None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.data = data


def _query(params):
    query = {}
    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        query[key] = value
    return query


class ApiClient:
    """
    One method per server operation. Successful calls return the envelope's
    `data`; anything else raises ApiError carrying the server's message.
    A 401 response drops the stored bearer token.
    """

    def __init__(self, base_url=None, storage=None, timeout=DEFAULT_TIMEOUT, session=None):
        self.base_url = (base_url or os.environ.get("SHOP_API_URL") or DEFAULT_BASE_URL).rstrip("/")
        self.storage = storage if storage is not None else MemoryStorage()
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "Content-Type": "application/json",
            "Accept": "application/json",
        })

    def _auth_headers(self):
        token = self.storage.get_item(TOKEN_KEY)
        return {"Authorization": f"Bearer {token}"} if token else {}

    def _request(self, method, operation, params=None, payload=None):
        url = f"{self.base_url}/{OPERATION_PREFIX}{operation}"
        body = json.dumps(payload, default=str) if payload is not None else None
        try:
            response = self.session.request(
                method,
                url,
                params=_query(params),
                data=body,
                headers=self._auth_headers(),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error("API request %s failed: %s", operation, e)
            raise ApiError(f"Network error: {e}") from e

        try:
            envelope = response.json()
        except ValueError:
            envelope = None

        if response.status_code == 401:
            self.storage.remove_item(TOKEN_KEY)

        if not response.ok or not isinstance(envelope, dict) or not envelope.get("success"):
            message = envelope.get("message") if isinstance(envelope, dict) else None
            message = message or f"Request failed with status {response.status_code}"
            logger.error("API error on %s (%s): %s", operation, response.status_code, message)
            raise ApiError(message, response.status_code, envelope)
        return envelope.get("data")

    def _get(self, operation, **params):
        return self._request("GET", operation, params=params)

    def _post(self, operation, payload):
        return self._request("POST", operation, payload=payload)

    # Sculptures

    def get_sculptures(self, filters=None, **params):
        if filters is not None:
            params = {**filters.as_dict(include_page=True), **params}
        return self._get("get_sculptures", **params)

    def get_sculptures_count(self, filters=None, **params):
        if filters is not None:
            params = {**filters.as_dict(), **params}
        return self._get("get_sculptures_count", **params)["total_count"]

    def get_sculpture_by_id(self, sculpture_id):
        return self._get("get_sculpture_by_id", id=sculpture_id)

    def get_sculpture_by_slug(self, slug):
        return self._get("get_sculpture_by_slug", slug=slug)

    def get_sculpture_images(self, sculpture_id):
        return self._get("get_sculpture_images", sculpture_id=sculpture_id)

    def get_featured_sculptures(self, limit=10):
        return self._get("get_featured_sculptures", limit=limit)

    def get_related_sculptures(self, sculpture_id, limit=4):
        return self._get("get_related_sculptures", sculpture_id=sculpture_id, limit=limit)

    def add_sculpture(self, data):
        return self._post("add_sculpture", data)

    def update_sculpture(self, data):
        return self._post("update_sculpture", data)

    def delete_sculpture(self, sculpture_id):
        return self._post("delete_sculpture", {"id": sculpture_id})

    def add_sculpture_image(self, data):
        return self._post("add_sculpture_image", data)

    def set_primary_image(self, image_id):
        return self._post("set_primary_image", {"id": image_id})

    def delete_sculpture_image(self, image_id):
        return self._post("delete_sculpture_image", {"id": image_id})

    # Categories & materials

    def get_categories(self):
        return self._get("get_categories")

    def get_category_by_id(self, category_id):
        return self._get("get_category_by_id", id=category_id)

    def get_category_by_slug(self, slug):
        return self._get("get_category_by_slug", slug=slug)

    def get_categories_with_count(self):
        return self._get("get_categories_with_count")

    def add_category(self, data):
        return self._post("add_category", data)

    def update_category(self, data):
        return self._post("update_category", data)

    def delete_category(self, category_id):
        return self._post("delete_category", {"id": category_id})

    def get_materials(self):
        return self._get("get_materials")

    def get_material_by_id(self, material_id):
        return self._get("get_material_by_id", id=material_id)

    def add_material(self, data):
        return self._post("add_material", data)

    def update_material(self, data):
        return self._post("update_material", data)

    def delete_material(self, material_id):
        return self._post("delete_material", {"id": material_id})

    # Leads

    def create_contact_request(self, data):
        return self._post("create_contact_request", data)

    def get_contact_requests(self, status=None, limit=50, offset=0):
        return self._get("get_contact_requests", status=status, limit=limit, offset=offset)

    def get_contact_request_by_id(self, request_id):
        return self._get("get_contact_request_by_id", id=request_id)

    def update_contact_request_status(self, request_id, status, admin_notes=None):
        payload = {"id": request_id, "status": status}
        if admin_notes is not None:
            payload["admin_notes"] = admin_notes
        return self._post("update_contact_request_status", payload)

    def create_custom_request(self, data):
        return self._post("create_custom_request", data)

    def get_custom_requests(self, status=None, limit=50, offset=0):
        return self._get("get_custom_requests", status=status, limit=limit, offset=offset)

    def get_custom_request_by_id(self, request_id):
        return self._get("get_custom_request_by_id", id=request_id)

    def update_custom_request(self, data):
        return self._post("update_custom_request", data)

    # Admin

    def admin_login(self, username, password):
        data = self._post("admin_login", {"username": username, "password": password})
        self.storage.set_item(TOKEN_KEY, data["token"])
        return data

    def verify_token(self):
        return self._get("verify_token")

    def create_admin(self, username, password, full_name=None):
        return self._post("create_admin", {"username": username, "password": password, "full_name": full_name})

    def get_dashboard_stats(self):
        return self._get("get_dashboard_stats")

    def get_site_settings(self):
        return self._get("get_site_settings")

    def update_site_setting(self, setting_key, setting_value, setting_type=None):
        payload = {"setting_key": setting_key, "setting_value": setting_value}
        if setting_type:
            payload["setting_type"] = setting_type
        return self._post("update_site_setting", payload)

    # Payment

    def get_payment_info(self):
        return self._get("get_payment_info")
