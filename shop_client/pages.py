"""
Page models: the state behind the storefront and admin screens.

Each page keeps its rows in memory and records user-facing notifications in
`toasts` as `(level, message)` pairs. A page built without an ApiClient works
purely on the rows it was given.
"""
# Standard Library
import logging
import math

# Local Imports
from sculpture_shop.catalog import (
    DEFAULT_MAX_LIMIT,
    SORT_NEWEST,
    SculptureFilters,
    _to_decimal,
    _to_int,
    filter_sculptures,
    paginate,
    sort_sculptures,
)

from .api import ApiError
from .helpers import (
    Debouncer,
    custom_request_message,
    format_price,
    generate_slug,
    get_whatsapp_url,
    sculpture_inquiry_message,
    validate_email,
    validate_mobile_number,
)

logger = logging.getLogger(__name__)

PAGE_SIZE = 12
SEARCH_DELAY = 0.3

LOGIN_PATH = "/admin/login"
DASHBOARD_PATH = "/admin"

ADMIN_NAV_LINKS = [
    (DASHBOARD_PATH, "Dashboard"),
    ("/admin/sculptures", "Sculptures"),
    ("/admin/categories", "Categories"),
    ("/admin/inquiries", "Inquiries"),
    ("/admin/custom-requests", "Custom Requests"),
    ("/admin/settings", "Settings"),
]

SCULPTURE_TYPES = [
    ("god_statue", "God Statue / Deity"),
    ("memorial", "Memorial / Bust"),
    ("portrait", "Portrait Sculpture"),
    ("garden", "Garden Sculpture"),
    ("temple", "Temple Sculpture"),
    ("decorative", "Decorative Art"),
    ("other", "Other"),
]

MATERIAL_OPTIONS = [
    ("granite", "Granite"),
    ("marble", "Marble"),
    ("sandstone", "Sandstone"),
    ("bronze", "Bronze"),
    ("fiber", "Fiber"),
    ("cement", "Cement"),
    ("wood", "Wood"),
    ("not_sure", "Not Sure - Need Suggestion"),
]

MAX_EXPECTED_PRICE = 99999999


def _label(options, value):
    for option_value, label in options:
        if option_value == value:
            return label
    return value


def _text(values, name):
    return str(values.get(name) or "").strip()


def _check_length(errors, values, name, limit, message):
    if len(values.get(name) or "") > limit:
        errors[name] = message


def _validate_customer(values):
    """Name, mobile and email checks shared by the public lead forms."""
    errors = {}
    name = _text(values, "customer_name")
    if not name:
        errors["customer_name"] = "Name is required"
    elif len(name) < 2:
        errors["customer_name"] = "Name must be at least 2 characters"
    elif len(name) > 100:
        errors["customer_name"] = "Name must be less than 100 characters"

    mobile = _text(values, "mobile_number")
    if not mobile:
        errors["mobile_number"] = "Mobile number is required"
    elif not validate_mobile_number(mobile):
        errors["mobile_number"] = "Please enter a valid 10-digit mobile number"

    email = _text(values, "email")
    if email and not validate_email(email):
        errors["email"] = "Please enter a valid email address"
    return errors


class ShopContactMixin:
    """
    WhatsApp number for the shop: the one given to the page, else the
    `whatsapp_number` site setting.
    """

    def _init_contact(self, api, whatsapp_number):
        self.api = api
        self._whatsapp_number = whatsapp_number

    @property
    def whatsapp_number(self):
        if self._whatsapp_number is not None:
            return self._whatsapp_number
        if self.api is None:
            return ""
        try:
            settings = self.api.get_site_settings() or {}
        except ApiError as e:
            logger.warning("Could not load site settings: %s", e.message)
            return ""
        self._whatsapp_number = str(settings.get("whatsapp_number") or "")
        return self._whatsapp_number


class EditableRowsMixin:
    """
    Optimistic edits on `self.rows`: the in-memory list changes first and is
    restored if the server rejects the change.
    """
    not_found_message = "Not found"

    def _index(self, row_id):
        for i, row in enumerate(self.rows):
            if row["id"] == row_id:
                return i
        return None

    def _row(self, row_id):
        index = self._index(row_id)
        return self.rows[index] if index is not None else None

    _temp_ids = 0

    def _next_temp_id(self):
        # Negative ids mark rows the server has not confirmed yet
        self._temp_ids -= 1
        return self._temp_ids

    def _update_row(self, row_id, changes, send, success_message):
        index = self._index(row_id)
        if index is None:
            self.toasts.append(("error", self.not_found_message))
            return None
        previous = self.rows[index]
        updated = {**previous, **changes}
        self.rows[index] = updated
        if self.api is not None:
            try:
                saved = send()
            except ApiError as e:
                rollback = self._index(row_id)
                if rollback is not None:
                    self.rows[rollback] = previous
                self.toasts.append(("error", e.message))
                return None
            updated = {**updated, **(saved or {})}
            self.rows[self._index(row_id)] = updated
        self.toasts.append(("success", success_message))
        return updated

    def _remove_row(self, row_id, send, success_message):
        index = self._index(row_id)
        if index is None:
            self.toasts.append(("error", self.not_found_message))
            return False
        removed = self.rows.pop(index)
        if self.api is not None:
            try:
                send()
            except ApiError as e:
                self.rows.insert(index, removed)
                self.toasts.append(("error", e.message))
                return False
        self.toasts.append(("success", success_message))
        return True

    def _add_row(self, row, send, success_message):
        temp_id = self._next_temp_id()
        row["id"] = temp_id
        self.rows.append(row)
        if self.api is not None:
            try:
                saved = send()
            except ApiError as e:
                self.rows = [r for r in self.rows if r["id"] != temp_id]
                self.toasts.append(("error", e.message))
                return None
            row = {**row, **saved}
            self.rows[self._index(temp_id)] = row
        self.toasts.append(("success", success_message))
        return row


# -----------------------
# Storefront
# -----------------------

class SculptureBrowser:
    """
    Catalog listing. Rows are fetched once; search, filters, sort and paging
    are re-derived locally on every read.
    """

    def __init__(self, api=None, rows=None, page_size=PAGE_SIZE, search_delay=SEARCH_DELAY):
        self.api = api
        self.rows = list(rows or [])
        self.filters = SculptureFilters()
        self.sort_by = SORT_NEWEST
        self.page = 1
        self.page_size = page_size
        self.loading = False
        self.toasts = []
        self.search = Debouncer(self._apply_search, search_delay)

    def load(self):
        if self.api is None:
            return self.rows
        self.loading = True
        try:
            self.rows = self.api.get_sculptures(limit=DEFAULT_MAX_LIMIT)
        except ApiError as e:
            self.rows = []
            self.toasts.append(("error", e.message))
        finally:
            self.loading = False
        return self.rows

    def _apply_search(self, text):
        self.filters.search_term = (text or "").strip() or None
        self.page = 1

    def set_filter(self, **changes):
        self.filters.update(**changes)
        self.page = 1

    def set_price_range(self, min_price=None, max_price=None):
        self.set_filter(min_price=min_price, max_price=max_price)

    def clear_filters(self):
        self.search.cancel()
        self.filters = SculptureFilters()
        self.page = 1

    def set_sort(self, sort_by):
        self.sort_by = sort_by
        self.page = 1

    @property
    def results(self):
        return sort_sculptures(filter_sculptures(self.rows, self.filters), self.sort_by)

    @property
    def total_pages(self):
        return max(1, math.ceil(len(self.results) / self.page_size))

    def go_to_page(self, page):
        self.page = min(max(1, page), self.total_pages)

    @property
    def page_items(self):
        return paginate(self.results, self.page_size, (self.page - 1) * self.page_size)

    @property
    def summary(self):
        if self.loading:
            return "Loading..."
        return f"{len(self.results)} sculptures found"


class SelectionPage(ShopContactMixin):
    """The visitor's selected sculptures, their total and a WhatsApp inquiry link."""

    PRICE_NOTE = "* Prices are indicative. Final price may vary based on customization and delivery location."

    def __init__(self, selection, api=None, whatsapp_number=None):
        self._init_contact(api, whatsapp_number)
        self.selection = selection

    @property
    def sculptures(self):
        return self.selection.sculptures

    @property
    def is_empty(self):
        return self.selection.count() == 0

    @property
    def total_price(self):
        return sum((_to_decimal(s.get("price")) or 0 for s in self.sculptures), 0)

    @property
    def total_display(self):
        return format_price(self.total_price)

    def remove(self, sculpture_id):
        return self.selection.remove(sculpture_id)

    def clear(self):
        self.selection.clear()

    def inquiry_message(self, customer_name="Customer Name", mobile_number="Mobile Number"):
        items = [{"id": s["id"], "name": s["name"], "price": s.get("price")} for s in self.sculptures]
        return sculpture_inquiry_message(customer_name, mobile_number, items)

    def whatsapp_url(self, customer_name="Customer Name", mobile_number="Mobile Number"):
        return get_whatsapp_url(self.whatsapp_number, self.inquiry_message(customer_name, mobile_number))


class ContactForm(ShopContactMixin):
    """Contact form prefilled from, and clearing, the visitor's selection."""

    GREETING = "Hello! I visited your website and have a question."

    def __init__(self, api, selection, whatsapp_number=None):
        self._init_contact(api, whatsapp_number)
        self.selection = selection
        self.errors = {}
        self.submitted = False
        self.toasts = []

    def initial_values(self):
        message = ""
        if self.selection.count():
            lines = "\n".join(f"- {s['name']} ({format_price(s.get('price'))})" for s in self.selection.sculptures)
            message = f"I'm interested in the following sculptures:\n{lines}\n\nPlease provide more details."
        return {"customer_name": "", "mobile_number": "", "email": "", "message": message}

    def validate(self, values):
        errors = _validate_customer(values)
        _check_length(errors, values, "message", 1000, "Message must be less than 1000 characters")
        return errors

    @property
    def whatsapp_url(self):
        if self.selection.count():
            items = [{"id": s["id"], "name": s["name"], "price": s.get("price")} for s in self.selection.sculptures]
            message = sculpture_inquiry_message("Customer", "Mobile", items)
        else:
            message = self.GREETING
        return get_whatsapp_url(self.whatsapp_number, message)

    def submit(self, values):
        self.errors = self.validate(values)
        if self.errors:
            return None
        payload = {
            "customer_name": _text(values, "customer_name"),
            "mobile_number": _text(values, "mobile_number"),
            "email": _text(values, "email") or None,
            "message": values.get("message") or "",
            "selected_sculpture_ids": self.selection.ids(),
            "request_type": "inquiry" if self.selection.count() else "general",
        }
        try:
            created = self.api.create_contact_request(payload)
        except ApiError as e:
            logger.warning("Contact request failed: %s", e.message)
            self.toasts.append(("error", "Failed to send message. Please try again."))
            return None
        self.selection.clear()
        self.submitted = True
        self.toasts.append(("success", "Your message has been sent successfully!"))
        return created


class CustomOrderForm(ShopContactMixin):
    """Request form for a made-to-order sculpture."""

    GREETING = "Hello! I would like to request a custom sculpture. Can you please help me?"
    FIELDS = (
        "customer_name",
        "mobile_number",
        "email",
        "sculpture_type",
        "preferred_material",
        "expected_height",
        "expected_width",
        "expected_depth",
        "expected_price",
        "description",
        "special_requirements",
    )

    def __init__(self, api, whatsapp_number=None):
        self._init_contact(api, whatsapp_number)
        self.errors = {}
        self.submitted = False
        self.toasts = []

    def initial_values(self):
        return {name: "" for name in self.FIELDS}

    def validate(self, values):
        errors = _validate_customer(values)

        sculpture_type = _text(values, "sculpture_type")
        if not sculpture_type:
            errors["sculpture_type"] = "Sculpture type is required"
        elif len(sculpture_type) > 100:
            errors["sculpture_type"] = "Sculpture type must be less than 100 characters"
        _check_length(errors, values, "preferred_material", 100, "Material must be less than 100 characters")
        _check_length(errors, values, "expected_height", 50, "Height must be less than 50 characters")
        _check_length(errors, values, "expected_width", 50, "Width must be less than 50 characters")
        _check_length(errors, values, "expected_depth", 50, "Depth must be less than 50 characters")

        raw_price = values.get("expected_price")
        if raw_price not in (None, ""):
            price = _to_decimal(raw_price)
            if price is None or price <= 0:
                errors["expected_price"] = "Price must be a positive number"
            elif price > MAX_EXPECTED_PRICE:
                errors["expected_price"] = "Price is too high"

        description = _text(values, "description")
        if not description:
            errors["description"] = "Please describe your requirements"
        elif len(description) < 10:
            errors["description"] = "Description must be at least 10 characters"
        elif len(description) > 2000:
            errors["description"] = "Description must be less than 2000 characters"
        _check_length(errors, values, "special_requirements", 1000,
                      "Special requirements must be less than 1000 characters")
        return errors

    def _payload(self, values):
        payload = {name: _text(values, name) or None for name in self.FIELDS}
        # Labels, not option keys
        if payload["sculpture_type"]:
            payload["sculpture_type"] = _label(SCULPTURE_TYPES, payload["sculpture_type"])
        if payload["preferred_material"]:
            payload["preferred_material"] = _label(MATERIAL_OPTIONS, payload["preferred_material"])
        if payload["expected_price"]:
            payload["expected_price"] = str(_to_decimal(payload["expected_price"]))
        return payload

    def submit(self, values):
        self.errors = self.validate(values)
        if self.errors:
            return None
        try:
            created = self.api.create_custom_request(self._payload(values))
        except ApiError as e:
            logger.warning("Custom request failed: %s", e.message)
            self.toasts.append(("error", "Failed to submit request. Please try again."))
            return None
        self.submitted = True
        self.toasts.append(("success", "Your custom order request has been submitted!"))
        return created

    def whatsapp_url(self, values=None):
        """Link to message the shop; with `values`, the message carries the form's details."""
        if values is None:
            return get_whatsapp_url(self.whatsapp_number, self.GREETING)
        price = _text(values, "expected_price")
        message = custom_request_message(
            _text(values, "customer_name") or "Customer",
            _text(values, "mobile_number") or "Mobile",
            _label(SCULPTURE_TYPES, _text(values, "sculpture_type")),
            _label(MATERIAL_OPTIONS, _text(values, "preferred_material")),
            "H: {}, W: {}, D: {}".format(
                _text(values, "expected_height"),
                _text(values, "expected_width"),
                _text(values, "expected_depth"),
            ),
            f"₹{price}" if price else "Not specified",
            _text(values, "description") or "No description provided",
        )
        return get_whatsapp_url(self.whatsapp_number, message)


# -----------------------
# Admin
# -----------------------

class AdminSession:
    """Admin sign-in: the login form, the token check and the admin area guard."""

    def __init__(self, api, store):
        self.api = api
        self.store = store
        self.error = ""
        self.toasts = []

    @property
    def is_authenticated(self):
        return self.store.is_authenticated

    def validate(self, username, password):
        errors = {}
        username = (username or "").strip()
        if not username:
            errors["username"] = "Username is required"
        elif len(username) > 50:
            errors["username"] = "Username must be less than 50 characters"
        if not password:
            errors["password"] = "Password is required"
        elif len(password) < 6:
            errors["password"] = "Password must be at least 6 characters"
        return errors

    def login(self, username, password):
        self.error = ""
        errors = self.validate(username, password)
        if errors:
            self.error = next(iter(errors.values()))
            return False
        try:
            data = self.api.admin_login(username.strip(), password)
        except ApiError as e:
            if e.status == 401:
                self.error = "Invalid username or password"
                self.toasts.append(("error", "Invalid credentials"))
            else:
                logger.warning("Admin login failed: %s", e.message)
                self.error = "An error occurred. Please try again."
                self.toasts.append(("error", "Login failed"))
            return False
        self.store.login(data["id"], data["username"], data.get("full_name"), data["token"])
        self.toasts.append(("success", "Login successful!"))
        return True

    def logout(self):
        self.store.logout()
        return LOGIN_PATH

    def verify(self):
        """False, and signed out, when the server no longer accepts the stored token."""
        if not self.store.is_authenticated:
            return False
        try:
            self.api.verify_token()
        except ApiError as e:
            if e.status != 401:
                logger.warning("Could not verify admin token: %s", e.message)
                return True
            logger.info("Admin token rejected, signing out %s", self.store.username)
            self.store.logout()
            return False
        return True

    def redirect_for(self, path):
        """Path the admin area sends a visitor of `path` to, or None to show it."""
        if path == LOGIN_PATH:
            return DASHBOARD_PATH if self.is_authenticated else None
        in_admin = path == DASHBOARD_PATH or path.startswith(DASHBOARD_PATH + "/")
        if in_admin and not self.is_authenticated:
            return LOGIN_PATH
        return None

    @staticmethod
    def page_title(path):
        for href, label in ADMIN_NAV_LINKS:
            if path == href or (href != DASHBOARD_PATH and path.startswith(href)):
                return label
        return "Dashboard"


class AdminSculptureManager(EditableRowsMixin):
    """Admin sculpture table with optimistic add, edit and delete."""

    not_found_message = "Sculpture not found"

    def __init__(self, api=None, rows=None):
        self.api = api
        self.rows = [dict(row) for row in rows or []]
        self.search_query = ""
        self.category_filter = "all"
        self.toasts = []

    @property
    def sculptures(self):
        return self.rows

    def load(self):
        if self.api is None:
            return self.rows
        try:
            self.rows = self.api.get_sculptures(limit=DEFAULT_MAX_LIMIT)
        except ApiError as e:
            self.toasts.append(("error", e.message))
        return self.rows

    @property
    def visible(self):
        query = self.search_query.strip().lower()
        rows = []
        for s in self.rows:
            if query and query not in (s.get("name") or "").lower() \
                    and query not in (s.get("category_name") or "").lower():
                continue
            if self.category_filter != "all" and s.get("category_name") != self.category_filter:
                continue
            rows.append(s)
        return rows

    @property
    def category_names(self):
        names = []
        for s in self.rows:
            name = s.get("category_name")
            if name and name not in names:
                names.append(name)
        return names

    def add(self, data):
        row = {"is_featured": False, "is_available": True, **data}
        row.setdefault("slug", generate_slug(data.get("name")))
        return self._add_row(row, lambda: self.api.add_sculpture(data), "Sculpture saved successfully!")

    def update(self, sculpture_id, changes, success_message="Sculpture updated successfully"):
        return self._update_row(
            sculpture_id,
            changes,
            lambda: self.api.update_sculpture({"id": sculpture_id, **changes}),
            success_message,
        )

    def delete(self, sculpture_id):
        return self._remove_row(
            sculpture_id,
            lambda: self.api.delete_sculpture(sculpture_id),
            "Sculpture deleted successfully",
        )

    def toggle_featured(self, sculpture_id):
        row = self._row(sculpture_id) or {}
        return self.update(sculpture_id, {"is_featured": not row.get("is_featured")}, "Featured status updated")

    def toggle_available(self, sculpture_id):
        row = self._row(sculpture_id) or {}
        return self.update(sculpture_id, {"is_available": not row.get("is_available")}, "Availability status updated")


class AdminCategoryManager(EditableRowsMixin):
    """Admin category table: add, edit, soft delete and the active toggle."""

    not_found_message = "Category not found"

    def __init__(self, api=None, rows=None):
        self.api = api
        self.rows = [dict(row) for row in rows or []]
        self.search_query = ""
        self.errors = {}
        self.toasts = []

    @property
    def categories(self):
        return self.rows

    def load(self):
        if self.api is None:
            return self.rows
        try:
            self.rows = self.api.get_categories_with_count()
        except ApiError as e:
            self.toasts.append(("error", e.message))
        return self.rows

    @property
    def visible(self):
        query = self.search_query.strip().lower()
        return [c for c in self.rows if query in (c.get("name") or "").lower()]

    @property
    def summary(self):
        visible = self.visible
        active = len([c for c in visible if c.get("is_active")])
        return f"{len(visible)} categories • {active} active"

    def validate(self, values):
        errors = {}
        name = _text(values, "name")
        if not name:
            errors["name"] = "Category name is required"
        elif len(name) < 2:
            errors["name"] = "Name must be at least 2 characters"
        elif len(name) > 100:
            errors["name"] = "Name must be less than 100 characters"
        _check_length(errors, values, "description", 500, "Description must be less than 500 characters")

        raw_order = values.get("display_order")
        if raw_order not in (None, ""):
            order = _to_int(raw_order)
            if order is None or order < 0:
                errors["display_order"] = "Display order must be 0 or greater"
            elif order > 999:
                errors["display_order"] = "Display order is too high"
        return errors

    def save(self, values, category_id=None):
        """Add a category, or edit `category_id`; returns the saved row or None."""
        self.errors = self.validate(values)
        if self.errors:
            return None
        data = {"name": _text(values, "name"), "description": _text(values, "description") or None}
        order = _to_int(values.get("display_order"))
        if order is not None:
            data["display_order"] = order

        if category_id is not None:
            return self._update_row(
                category_id,
                data,
                lambda: self.api.update_category({"id": category_id, **data}),
                "Category updated successfully",
            )
        row = {"slug": generate_slug(data["name"]), "sculpture_count": 0, "is_active": True, **data}
        return self._add_row(row, lambda: self.api.add_category(data), "Category added successfully")

    def delete(self, category_id):
        return self._remove_row(
            category_id,
            lambda: self.api.delete_category(category_id),
            "Category deleted successfully",
        )

    def toggle_active(self, category_id):
        row = self._row(category_id) or {}
        changes = {"is_active": not row.get("is_active")}
        return self._update_row(
            category_id,
            changes,
            lambda: self.api.update_category({"id": category_id, **changes}),
            "Category status updated",
        )


class LeadManager(EditableRowsMixin):
    """
    Admin list of leads: search, a status filter and optimistic status and
    notes edits. Subclasses bind it to one kind of lead.
    """

    STATUS_LABELS = {}
    SEARCH_FIELDS = ("customer_name", "email", "mobile_number")
    not_found_message = "Request not found"

    def __init__(self, api=None, rows=None):
        self.api = api
        self.rows = [dict(row) for row in rows or []]
        self.search_query = ""
        self.status_filter = "all"
        self.toasts = []

    @property
    def requests(self):
        return self.rows

    def _fetch(self):
        raise NotImplementedError

    def _send(self, request_id, changes):
        raise NotImplementedError

    def load(self):
        if self.api is None:
            return self.rows
        try:
            self.rows = self._fetch()
        except ApiError as e:
            self.toasts.append(("error", e.message))
        return self.rows

    @property
    def visible(self):
        query = self.search_query.strip().lower()
        rows = []
        for row in self.rows:
            if self.status_filter != "all" and row.get("status") != self.status_filter:
                continue
            if query and not any(query in str(row.get(field) or "").lower() for field in self.SEARCH_FIELDS):
                continue
            rows.append(row)
        return rows

    @property
    def pending_count(self):
        return len([row for row in self.rows if row.get("status") == "pending"])

    def status_label(self, status):
        return self.STATUS_LABELS.get(status, status)

    def _edit(self, request_id, changes, success_message):
        return self._update_row(request_id, changes, lambda: self._send(request_id, changes), success_message)

    def update_status(self, request_id, status, admin_notes=None):
        if status not in self.STATUS_LABELS:
            self.toasts.append(("error", f"Invalid status '{status}'"))
            return None
        changes = {"status": status}
        if admin_notes is not None:
            changes["admin_notes"] = admin_notes
        return self._edit(request_id, changes, f"Status updated to {self.status_label(status)}")

    def save_notes(self, request_id, notes):
        return self._edit(request_id, {"admin_notes": notes}, "Notes saved")


class ContactRequestManager(LeadManager):
    STATUS_LABELS = {
        "pending": "Pending",
        "contacted": "Contacted",
        "completed": "Completed",
        "cancelled": "Cancelled",
    }

    def _fetch(self):
        return self.api.get_contact_requests(limit=DEFAULT_MAX_LIMIT)

    def _send(self, request_id, changes):
        # The status endpoint requires a status; notes-only edits resend the current one
        status = changes.get("status") or self._row(request_id)["status"]
        return self.api.update_contact_request_status(request_id, status, changes.get("admin_notes"))


class CustomRequestManager(LeadManager):
    STATUS_LABELS = {
        "pending": "Pending",
        "reviewed": "Reviewed",
        "quoted": "Quote Sent",
        "accepted": "Accepted",
        "in_progress": "In Progress",
        "completed": "Completed",
        "cancelled": "Cancelled",
    }
    SEARCH_FIELDS = LeadManager.SEARCH_FIELDS + ("sculpture_type",)

    def _fetch(self):
        return self.api.get_custom_requests(limit=DEFAULT_MAX_LIMIT)

    def _send(self, request_id, changes):
        return self.api.update_custom_request({"id": request_id, **changes})

    def send_quote(self, request_id, quoted_price, estimated_days=None):
        price = _to_decimal(quoted_price)
        if price is None or price <= 0:
            self.toasts.append(("error", "Please enter a valid quoted price"))
            return None
        changes = {"status": "quoted", "quoted_price": str(price)}
        if estimated_days is not None:
            changes["estimated_days"] = estimated_days
        return self._edit(request_id, changes, "Quote sent")
