"""
Named data operations.

Each `sp_*` function takes a fixed positional parameter list and returns a
model instance (or None when the row does not exist), a list of rows, or a
plain dict. Views reach them only through `call_procedure`, so every backing
store failure is logged in one place before it propagates.

For update operations a None argument means "leave the column unchanged".
"""
# Standard Library
import logging
from decimal import Decimal

# Django
from django.db import transaction
from django.db.models import Count, F, Q, Sum

# Local Imports
from .models import (
    AdminUser,
    Category,
    ContactRequest,
    CustomRequest,
    Material,
    PaymentInfo,
    Sculpture,
    SculptureImage,
    SiteSetting,
)
from .utilities import _now, format_slug, generate_unique_slug

logger = logging.getLogger(__name__)

_PROCEDURES = {}

# Widest value the price column (12 digits, 2 decimal places) holds
_PRICE_LIMIT = Decimal("9999999999.99")


class ProcedureError(Exception):
    """A data operation refused its input; the message is safe to show."""


def procedure(func):
    _PROCEDURES[func.__name__] = func
    return func


def call_procedure(name, *params):
    try:
        func = _PROCEDURES[name]
    except KeyError:
        raise LookupError(f"Unknown procedure: {name}")
    try:
        return func(*params)
    except ProcedureError as e:
        logger.info("Procedure %s refused: %s", name, e)
        raise
    except Exception:
        logger.exception("Error calling procedure %s", name)
        raise


def _apply_changes(instance, changes):
    """Set every non-None value; returns the changed field names."""
    changed = []
    for field, value in changes.items():
        if value is not None:
            setattr(instance, field, value)
            changed.append(field)
    return changed


# -----------------------
# Sculptures
# -----------------------

def _sculptures():
    return (
        Sculpture.objects
        .filter(is_active=True)
        .select_related("category", "material")
        .prefetch_related("images")
    )


def _clamp_price(value):
    return max(-_PRICE_LIMIT, min(_PRICE_LIMIT, Decimal(value)))


def _sculpture_filter_q(category_id, material_id, min_price, max_price, search_term, is_featured):
    """Listing predicate; the count operation must use exactly this."""
    q = Q(is_active=True)
    if category_id is not None:
        q &= Q(category_id=category_id)
    if material_id is not None:
        q &= Q(material_id=material_id)
    if min_price is not None:
        q &= Q(price__gte=_clamp_price(min_price))
    if max_price is not None:
        q &= Q(price__lte=_clamp_price(max_price))
    if search_term:
        q &= Q(name__icontains=search_term)
    if is_featured is not None:
        q &= Q(is_featured=is_featured)
    return q


@procedure
def sp_get_sculptures(category_id, material_id, min_price, max_price, search_term, is_featured, limit, offset):
    q = _sculpture_filter_q(category_id, material_id, min_price, max_price, search_term, is_featured)
    return list(_sculptures().filter(q).order_by("id")[offset:offset + limit])


@procedure
def sp_get_sculptures_count(category_id, material_id, min_price, max_price, search_term, is_featured):
    q = _sculpture_filter_q(category_id, material_id, min_price, max_price, search_term, is_featured)
    return {"total_count": Sculpture.objects.filter(q).count()}


@procedure
def sp_get_sculpture_by_id(sculpture_id):
    return _sculptures().filter(pk=sculpture_id).first()


@procedure
def sp_get_sculpture_by_slug(slug):
    updated = Sculpture.objects.filter(slug=slug, is_active=True).update(view_count=F("view_count") + 1)
    if not updated:
        return None
    return _sculptures().filter(slug=slug).first()


@procedure
def sp_get_sculpture_images(sculpture_id):
    return list(SculptureImage.objects.filter(sculpture_id=sculpture_id).order_by("display_order", "id"))


@procedure
def sp_get_featured_sculptures(limit):
    return list(_sculptures().filter(is_featured=True).order_by("-created_at", "-id")[:limit])


@procedure
def sp_get_related_sculptures(sculpture_id, limit):
    base = Sculpture.objects.filter(pk=sculpture_id, is_active=True).only("id", "category_id").first()
    if base is None or base.category_id is None:
        return []
    return list(
        _sculptures()
        .filter(category_id=base.category_id)
        .exclude(pk=base.pk)
        .order_by("-is_featured", "id")[:limit]
    )


@procedure
def sp_add_sculpture(name, slug, category_id, material_id, description, dimensions,
                     height_cm, width_cm, depth_cm, weight_kg, price, is_featured, is_available):
    with transaction.atomic():
        unique_slug = generate_unique_slug(Sculpture, format_slug(slug or name), fallback="sculpture")
        sculpture = Sculpture.objects.create(
            name=name,
            slug=unique_slug,
            category_id=category_id,
            material_id=material_id,
            description=description,
            dimensions=dimensions,
            height_cm=height_cm,
            width_cm=width_cm,
            depth_cm=depth_cm,
            weight_kg=weight_kg,
            price=price,
            is_featured=is_featured,
            is_available=is_available,
        )
    return _sculptures().get(pk=sculpture.pk)


@procedure
def sp_update_sculpture(sculpture_id, name, category_id, material_id, description, dimensions,
                        height_cm, width_cm, depth_cm, weight_kg, price, is_featured, is_available,
                        slug=None):
    with transaction.atomic():
        sculpture = Sculpture.objects.filter(pk=sculpture_id, is_active=True).first()
        if sculpture is None:
            return None
        changed = _apply_changes(sculpture, {
            "name": name,
            "category_id": category_id,
            "material_id": material_id,
            "description": description,
            "dimensions": dimensions,
            "height_cm": height_cm,
            "width_cm": width_cm,
            "depth_cm": depth_cm,
            "weight_kg": weight_kg,
            "price": price,
            "is_featured": is_featured,
            "is_available": is_available,
        })
        # Renaming keeps the published slug; only an explicit slug replaces it.
        if slug:
            sculpture.slug = generate_unique_slug(Sculpture, format_slug(slug), instance=sculpture,
                                                  fallback="sculpture")
            changed.append("slug")
        if changed:
            sculpture.save(update_fields=changed + ["updated_at"])
    return _sculptures().get(pk=sculpture.pk)


@procedure
def sp_delete_sculpture(sculpture_id):
    affected = Sculpture.objects.filter(pk=sculpture_id, is_active=True).update(
        is_active=False, is_available=False, updated_at=_now()
    )
    return {"id": sculpture_id, "affected_rows": affected}


@procedure
def sp_add_sculpture_image(sculpture_id, image_url, alt_text, is_primary, display_order):
    with transaction.atomic():
        sculpture = Sculpture.objects.select_for_update().filter(pk=sculpture_id, is_active=True).first()
        if sculpture is None:
            return None
        siblings = SculptureImage.objects.select_for_update().filter(sculpture=sculpture)
        make_primary = bool(is_primary) or not siblings.filter(is_primary=True).exists()
        if make_primary:
            siblings.update(is_primary=False)
        return SculptureImage.objects.create(
            sculpture=sculpture,
            image_url=image_url,
            alt_text=alt_text or "",
            is_primary=make_primary,
            display_order=display_order,
        )


@procedure
def sp_set_primary_image(image_id):
    with transaction.atomic():
        image = SculptureImage.objects.select_for_update().filter(pk=image_id).first()
        if image is None:
            return None
        SculptureImage.objects.filter(sculpture_id=image.sculpture_id).exclude(pk=image.pk).update(is_primary=False)
        if not image.is_primary:
            image.is_primary = True
            image.save(update_fields=["is_primary"])
    return image


@procedure
def sp_delete_sculpture_image(image_id):
    with transaction.atomic():
        image = SculptureImage.objects.select_for_update().filter(pk=image_id).first()
        if image is None:
            return None
        sculpture_id, was_primary = image.sculpture_id, image.is_primary
        image.delete()
        if was_primary:
            successor = (
                SculptureImage.objects
                .filter(sculpture_id=sculpture_id)
                .order_by("display_order", "id")
                .first()
            )
            if successor:
                successor.is_primary = True
                successor.save(update_fields=["is_primary"])
    return {"id": image_id, "affected_rows": 1}


# -----------------------
# Categories & materials
# -----------------------

@procedure
def sp_get_all_categories():
    return list(Category.objects.filter(is_active=True))


@procedure
def sp_get_category_by_id(category_id):
    return Category.objects.filter(pk=category_id).first()


@procedure
def sp_get_category_by_slug(slug):
    return Category.objects.filter(slug=slug, is_active=True).first()


@procedure
def sp_get_categories_with_count():
    return list(
        Category.objects
        .filter(is_active=True)
        .annotate(sculpture_count=Count("sculptures", filter=Q(sculptures__is_active=True)))
        .order_by("display_order", "name")
    )


@procedure
def sp_add_category(name, description, image_url, display_order):
    with transaction.atomic():
        return Category.objects.create(
            name=name,
            slug=generate_unique_slug(Category, format_slug(name), fallback="category"),
            description=description,
            image_url=image_url,
            display_order=display_order,
        )


def _check_category_unused(category_id):
    in_use = Sculpture.objects.filter(category_id=category_id, is_active=True).count()
    if in_use:
        raise ProcedureError(
            f"Category has {in_use} active sculpture{'s' if in_use != 1 else ''}; "
            "move or delete them first"
        )


@procedure
def sp_update_category(category_id, name, description, image_url, display_order, is_active):
    with transaction.atomic():
        category = Category.objects.select_for_update().filter(pk=category_id).first()
        if category is None:
            return None
        if is_active is False and category.is_active:
            _check_category_unused(category_id)
        changed = _apply_changes(category, {
            "name": name,
            "description": description,
            "image_url": image_url,
            "display_order": display_order,
            "is_active": is_active,
        })
        if changed:
            category.save(update_fields=changed + ["updated_at"])
    return category


@procedure
def sp_delete_category(category_id):
    with transaction.atomic():
        category = Category.objects.select_for_update().filter(pk=category_id).first()
        if category is None:
            return None
        _check_category_unused(category_id)
        if category.is_active:
            category.is_active = False
            category.save(update_fields=["is_active", "updated_at"])
    return {"id": category_id, "affected_rows": 1}


@procedure
def sp_get_all_materials():
    return list(Material.objects.filter(is_active=True))


@procedure
def sp_get_material_by_id(material_id):
    return Material.objects.filter(pk=material_id).first()


@procedure
def sp_add_material(name, description):
    if Material.objects.filter(name__iexact=name).exists():
        raise ProcedureError("Material already exists")
    return Material.objects.create(name=name, description=description)


@procedure
def sp_update_material(material_id, name, description, is_active):
    material = Material.objects.filter(pk=material_id).first()
    if material is None:
        return None
    if name and Material.objects.exclude(pk=material_id).filter(name__iexact=name).exists():
        raise ProcedureError("Material already exists")
    changed = _apply_changes(material, {"name": name, "description": description, "is_active": is_active})
    if changed:
        material.save(update_fields=changed)
    return material


@procedure
def sp_delete_material(material_id):
    affected = Material.objects.filter(pk=material_id).update(is_active=False)
    if not affected:
        return None
    return {"id": material_id, "affected_rows": affected}


# -----------------------
# Contact & custom requests
# -----------------------

def _transition(lead, status):
    try:
        lead.transition_status(status)
    except ValueError as e:
        raise ProcedureError(str(e))


@procedure
def sp_create_contact_request(customer_name, mobile_number, email, message, selected_sculpture_ids, request_type):
    return ContactRequest.objects.create(
        customer_name=customer_name,
        mobile_number=mobile_number,
        email=email,
        message=message,
        selected_sculpture_ids=selected_sculpture_ids,
        request_type=request_type,
    )


@procedure
def sp_get_contact_requests(status, limit, offset):
    qs = ContactRequest.objects.all()
    if status:
        qs = qs.filter(status=status)
    return list(qs.order_by("-created_at", "-id")[offset:offset + limit])


@procedure
def sp_get_contact_request_by_id(request_id):
    return ContactRequest.objects.filter(pk=request_id).first()


@procedure
def sp_update_contact_request_status(request_id, status, admin_notes):
    contact = ContactRequest.objects.filter(pk=request_id).first()
    if contact is None:
        return None
    _transition(contact, status)
    fields = ["status", "updated_at"]
    if admin_notes is not None:
        contact.admin_notes = admin_notes
        fields.append("admin_notes")
    contact.save(update_fields=fields)
    return contact


@procedure
def sp_create_custom_request(customer_name, mobile_number, email, reference_image_url, sculpture_type,
                             preferred_material, expected_height, expected_width, expected_depth,
                             expected_price, description, special_requirements):
    return CustomRequest.objects.create(
        customer_name=customer_name,
        mobile_number=mobile_number,
        email=email,
        reference_image_url=reference_image_url,
        sculpture_type=sculpture_type,
        preferred_material=preferred_material,
        expected_height=expected_height,
        expected_width=expected_width,
        expected_depth=expected_depth,
        expected_price=expected_price,
        description=description,
        special_requirements=special_requirements,
    )


@procedure
def sp_get_custom_requests(status, limit, offset):
    qs = CustomRequest.objects.all()
    if status:
        qs = qs.filter(status=status)
    return list(qs.order_by("-created_at", "-id")[offset:offset + limit])


@procedure
def sp_get_custom_request_by_id(request_id):
    return CustomRequest.objects.filter(pk=request_id).first()


@procedure
def sp_update_custom_request(request_id, status, quoted_price, estimated_days, admin_notes):
    custom = CustomRequest.objects.filter(pk=request_id).first()
    if custom is None:
        return None
    if status is not None:
        _transition(custom, status)
    changed = _apply_changes(custom, {
        "status": status,
        "quoted_price": quoted_price,
        "estimated_days": estimated_days,
        "admin_notes": admin_notes,
    })
    if changed:
        custom.save(update_fields=changed + ["updated_at"])
    return custom


# -----------------------
# Admin, settings, payment
# -----------------------

@procedure
def sp_get_admin_by_username(username):
    return AdminUser.objects.filter(username=username, is_active=True).first()


@procedure
def sp_count_admins():
    return {"total_count": AdminUser.objects.count()}


@procedure
def sp_create_admin(username, password_hash, full_name):
    with transaction.atomic():
        if AdminUser.objects.filter(username=username).exists():
            raise ProcedureError("Username already exists")
        return AdminUser.objects.create(
            username=username,
            password_hash=password_hash,
            full_name=full_name or username,
            is_active=True,
        )


@procedure
def sp_touch_admin_login(admin_id):
    return AdminUser.objects.filter(pk=admin_id).update(last_login=_now())


@procedure
def sp_get_dashboard_stats():
    sculptures = Sculpture.objects.filter(is_active=True).aggregate(
        total_sculptures=Count("id"),
        featured_sculptures=Count("id", filter=Q(is_featured=True)),
        total_views=Sum("view_count"),
    )
    return {
        "total_sculptures": sculptures["total_sculptures"] or 0,
        "featured_sculptures": sculptures["featured_sculptures"] or 0,
        "total_categories": Category.objects.filter(is_active=True).count(),
        "pending_inquiries": ContactRequest.objects.filter(status="pending").count(),
        "pending_custom_requests": CustomRequest.objects.filter(status="pending").count(),
        "total_views": sculptures["total_views"] or 0,
    }


@procedure
def sp_get_site_settings():
    return list(SiteSetting.objects.all())


@procedure
def sp_update_site_setting(setting_key, setting_value, setting_type=None, description=None):
    defaults = {"setting_value": setting_value}
    if setting_type is not None:
        defaults["setting_type"] = setting_type
    if description is not None:
        defaults["description"] = description
    setting, _created = SiteSetting.objects.update_or_create(setting_key=setting_key, defaults=defaults)
    return setting


@procedure
def sp_get_payment_info():
    return list(PaymentInfo.objects.filter(is_active=True).order_by("display_order", "id"))
