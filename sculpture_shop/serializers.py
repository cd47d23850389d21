# Standard Library
import json

# Django REST Framework
from rest_framework import serializers
from rest_framework.fields import empty

# Local Imports
from .catalog import _to_int
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


# Column limits: BigAutoField keys and PositiveIntegerField values
ID_MAX = 2 ** 63 - 1
POSITIVE_INT_MAX = 2 ** 31 - 1


def _required(message):
    return {"required": message, "blank": message, "null": message}


class BlankAsNullMixin:
    """Treat "" (what forms send for an untouched input) as a missing value."""

    def validate_empty_values(self, data):
        if isinstance(data, str) and not data.strip():
            data = None
        return super().validate_empty_values(data)


class OptionalIntegerField(BlankAsNullMixin, serializers.IntegerField):
    def __init__(self, **kwargs):
        kwargs.setdefault("max_value", ID_MAX)
        kwargs.setdefault("required", False)
        kwargs.setdefault("allow_null", True)
        super().__init__(**kwargs)


class IdField(serializers.IntegerField):
    def __init__(self, **kwargs):
        kwargs.setdefault("max_value", ID_MAX)
        super().__init__(**kwargs)


class OptionalDecimalField(BlankAsNullMixin, serializers.DecimalField):
    def __init__(self, max_digits=12, decimal_places=2, **kwargs):
        kwargs.setdefault("required", False)
        kwargs.setdefault("allow_null", True)
        super().__init__(max_digits=max_digits, decimal_places=decimal_places, **kwargs)


class OptionalCharField(serializers.CharField):
    def __init__(self, **kwargs):
        kwargs.setdefault("required", False)
        kwargs.setdefault("allow_null", True)
        kwargs.setdefault("allow_blank", True)
        super().__init__(**kwargs)


class OptionalBooleanField(BlankAsNullMixin, serializers.BooleanField):
    # Form posts omit unchecked boxes; for partial updates that means "unchanged".
    default_empty_html = empty

    def __init__(self, **kwargs):
        kwargs.setdefault("required", False)
        kwargs.setdefault("allow_null", True)
        super().__init__(**kwargs)


class IdListField(serializers.Field):
    """
    Sculpture id list. Accepts a JSON array, a JSON array encoded as a
    string, or "1,2,3". Entries that are not integers are dropped and
    duplicates collapse, first occurrence wins.
    """
    default_error_messages = {"invalid": "Expected a list of sculpture ids."}

    def to_internal_value(self, data):
        if isinstance(data, str):
            text = data.strip()
            if text.startswith("["):
                try:
                    data = json.loads(text)
                except ValueError:
                    self.fail("invalid")
            else:
                data = [part for part in text.split(",") if part.strip()]
        if not isinstance(data, (list, tuple)):
            self.fail("invalid")
        ids = []
        for item in data:
            value = _to_int(item)
            if value is not None and value not in ids:
                ids.append(value)
        return ids

    def to_representation(self, value):
        return list(value or [])


# -----------------------
# Input: sculptures
# -----------------------

class _SculptureFieldsSerializer(serializers.Serializer):
    category_id = OptionalIntegerField()
    material_id = OptionalIntegerField()
    description = OptionalCharField()
    dimensions = OptionalCharField(max_length=100)
    height_cm = OptionalDecimalField(max_digits=8, min_value=0)
    width_cm = OptionalDecimalField(max_digits=8, min_value=0)
    depth_cm = OptionalDecimalField(max_digits=8, min_value=0)
    weight_kg = OptionalDecimalField(max_digits=10, min_value=0)

    def validate_category_id(self, value):
        if value is not None and not Category.objects.filter(pk=value, is_active=True).exists():
            raise serializers.ValidationError("Category not found")
        return value

    def validate_material_id(self, value):
        if value is not None and not Material.objects.filter(pk=value, is_active=True).exists():
            raise serializers.ValidationError("Material not found")
        return value


class SculptureCreateSerializer(_SculptureFieldsSerializer):
    name = serializers.CharField(max_length=255, trim_whitespace=True,
                                 error_messages=_required("Sculpture name is required"))
    slug = OptionalCharField(max_length=280)
    price = OptionalDecimalField(min_value=0)
    is_featured = serializers.BooleanField(required=False, default=False)
    is_available = serializers.BooleanField(required=False, default=True)


class SculptureUpdateSerializer(_SculptureFieldsSerializer):
    id = IdField(error_messages=_required("Sculpture ID is required"))
    name = OptionalCharField(max_length=255)
    slug = OptionalCharField(max_length=280)
    price = OptionalDecimalField(min_value=0)
    is_featured = OptionalBooleanField()
    is_available = OptionalBooleanField()


class SculptureImageCreateSerializer(serializers.Serializer):
    sculpture_id = IdField(error_messages=_required("Sculpture ID and image URL are required"))
    image_url = serializers.CharField(max_length=500,
                                      error_messages=_required("Sculpture ID and image URL are required"))
    alt_text = OptionalCharField(max_length=255)
    is_primary = serializers.BooleanField(required=False, default=False)
    display_order = OptionalIntegerField(min_value=0, max_value=POSITIVE_INT_MAX)


# -----------------------
# Input: categories & materials
# -----------------------

class CategoryCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100, error_messages=_required("Category name is required"))
    description = OptionalCharField()
    image_url = OptionalCharField(max_length=500)
    display_order = OptionalIntegerField(min_value=0, max_value=POSITIVE_INT_MAX)


class CategoryUpdateSerializer(serializers.Serializer):
    id = IdField(error_messages=_required("Category ID is required"))
    name = OptionalCharField(max_length=100)
    description = OptionalCharField()
    image_url = OptionalCharField(max_length=500)
    display_order = OptionalIntegerField(min_value=0, max_value=POSITIVE_INT_MAX)
    is_active = OptionalBooleanField()


class MaterialCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100, error_messages=_required("Material name is required"))
    description = OptionalCharField()


class MaterialUpdateSerializer(serializers.Serializer):
    id = IdField(error_messages=_required("Material ID is required"))
    name = OptionalCharField(max_length=100)
    description = OptionalCharField()
    is_active = OptionalBooleanField()


# -----------------------
# Input: leads
# -----------------------

_CUSTOMER_REQUIRED = _required("Customer name and mobile number are required")


class _LeadCreateSerializer(serializers.Serializer):
    customer_name = serializers.CharField(max_length=100, error_messages=_CUSTOMER_REQUIRED)
    mobile_number = serializers.CharField(max_length=20, error_messages=_CUSTOMER_REQUIRED)
    email = OptionalCharField(max_length=254)


class ContactRequestCreateSerializer(_LeadCreateSerializer):
    message = OptionalCharField()
    selected_sculpture_ids = IdListField(required=False, default=list)
    request_type = serializers.ChoiceField(choices=ContactRequest.REQUEST_TYPE_CHOICES,
                                           required=False, default="inquiry")


class ContactStatusUpdateSerializer(serializers.Serializer):
    id = IdField(error_messages=_required("Request ID and status are required"))
    status = serializers.CharField(max_length=20, error_messages=_required("Request ID and status are required"))
    admin_notes = OptionalCharField()


class CustomRequestCreateSerializer(_LeadCreateSerializer):
    reference_image_url = OptionalCharField(max_length=500)
    sculpture_type = OptionalCharField(max_length=100)
    preferred_material = OptionalCharField(max_length=100)
    expected_height = OptionalCharField(max_length=50)
    expected_width = OptionalCharField(max_length=50)
    expected_depth = OptionalCharField(max_length=50)
    expected_price = OptionalDecimalField(min_value=0)
    description = OptionalCharField()
    special_requirements = OptionalCharField()


class CustomRequestUpdateSerializer(serializers.Serializer):
    id = IdField(error_messages=_required("Request ID is required"))
    status = OptionalCharField(max_length=20)
    quoted_price = OptionalDecimalField(min_value=0)
    estimated_days = OptionalIntegerField(min_value=0, max_value=POSITIVE_INT_MAX)
    admin_notes = OptionalCharField()


# -----------------------
# Input: admin
# -----------------------

_CREDENTIALS_REQUIRED = _required("Username and password are required")


class AdminLoginSerializer(serializers.Serializer):
    username = serializers.CharField(max_length=50, error_messages=_CREDENTIALS_REQUIRED)
    password = serializers.CharField(trim_whitespace=False, error_messages=_CREDENTIALS_REQUIRED)


class AdminCreateSerializer(AdminLoginSerializer):
    full_name = OptionalCharField(max_length=100)


class SiteSettingUpdateSerializer(serializers.Serializer):
    setting_key = serializers.CharField(max_length=100, error_messages=_required("Setting key is required"))
    setting_value = serializers.CharField(required=False, allow_blank=True, allow_null=True,
                                          trim_whitespace=False, default="")
    setting_type = serializers.ChoiceField(choices=SiteSetting.TYPE_CHOICES, required=False)
    description = OptionalCharField(max_length=255)


# -----------------------
# Output
# -----------------------

class CategorySerializer(serializers.ModelSerializer):
    class Meta:
        model = Category
        fields = ["id", "name", "slug", "description", "image_url", "display_order",
                  "is_active", "created_at", "updated_at"]


class CategoryWithCountSerializer(CategorySerializer):
    sculpture_count = serializers.IntegerField(read_only=True)

    class Meta(CategorySerializer.Meta):
        fields = CategorySerializer.Meta.fields + ["sculpture_count"]


class MaterialSerializer(serializers.ModelSerializer):
    class Meta:
        model = Material
        fields = ["id", "name", "description", "is_active", "created_at"]


class SculptureImageSerializer(serializers.ModelSerializer):
    sculpture_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = SculptureImage
        fields = ["id", "sculpture_id", "image_url", "alt_text", "is_primary", "display_order", "created_at"]


class SculptureSerializer(serializers.ModelSerializer):
    category_id = serializers.IntegerField(read_only=True)
    category_name = serializers.SerializerMethodField()
    material_id = serializers.IntegerField(read_only=True)
    material_name = serializers.SerializerMethodField()
    primary_image = serializers.CharField(read_only=True)

    class Meta:
        model = Sculpture
        fields = [
            "id", "name", "slug", "description",
            "category_id", "category_name", "material_id", "material_name",
            "dimensions", "height_cm", "width_cm", "depth_cm", "weight_kg",
            "price", "is_featured", "is_available", "is_active", "view_count",
            "primary_image", "created_at", "updated_at",
        ]

    def get_category_name(self, obj):
        return obj.category.name if obj.category_id else None

    def get_material_name(self, obj):
        return obj.material.name if obj.material_id else None


class SculptureDetailSerializer(SculptureSerializer):
    images = SculptureImageSerializer(many=True, read_only=True)

    class Meta(SculptureSerializer.Meta):
        fields = SculptureSerializer.Meta.fields + ["images"]


class ContactRequestSerializer(serializers.ModelSerializer):
    selected_sculpture_ids = IdListField(read_only=True)

    class Meta:
        model = ContactRequest
        fields = ["id", "customer_name", "mobile_number", "email", "message", "selected_sculpture_ids",
                  "request_type", "status", "admin_notes", "created_at", "updated_at"]


class CustomRequestSerializer(serializers.ModelSerializer):
    class Meta:
        model = CustomRequest
        fields = ["id", "customer_name", "mobile_number", "email", "reference_image_url", "sculpture_type",
                  "preferred_material", "expected_height", "expected_width", "expected_depth",
                  "expected_price", "description", "special_requirements", "status", "quoted_price",
                  "estimated_days", "admin_notes", "created_at", "updated_at"]


class AdminUserSerializer(serializers.ModelSerializer):
    class Meta:
        model = AdminUser
        fields = ["id", "username", "full_name", "is_active", "last_login", "created_at"]


class PaymentInfoSerializer(serializers.ModelSerializer):
    class Meta:
        model = PaymentInfo
        fields = ["id", "payment_type", "display_name", "upi_id", "qr_code_url", "mobile_number",
                  "bank_name", "account_number", "ifsc_code", "account_holder_name", "display_order"]


class SiteSettingSerializer(serializers.ModelSerializer):
    class Meta:
        model = SiteSetting
        fields = ["id", "setting_key", "setting_value", "setting_type", "description", "updated_at"]
