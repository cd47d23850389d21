import json
from decimal import Decimal

from django.db import models
from django.core.validators import MinValueValidator


class Category(models.Model):
    name = models.CharField(max_length=100, db_index=True)
    slug = models.SlugField(max_length=120, unique=True)
    description = models.TextField(blank=True, null=True)
    image_url = models.CharField(max_length=500, blank=True, null=True)
    display_order = models.PositiveIntegerField(default=0)
    is_active = models.BooleanField(default=True, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["display_order", "name"]
        verbose_name_plural = "categories"

    def __str__(self):
        return self.name


class Material(models.Model):
    name = models.CharField(max_length=100, unique=True)
    description = models.TextField(blank=True, null=True)
    is_active = models.BooleanField(default=True, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name


class Sculpture(models.Model):
    name = models.CharField(max_length=255, db_index=True)
    slug = models.SlugField(max_length=280, unique=True)
    description = models.TextField(blank=True, null=True)

    # Categories are only ever soft-deleted, so a live FK must never dangle.
    category = models.ForeignKey(
        Category,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="sculptures",
    )
    material = models.ForeignKey(
        Material,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="sculptures",
    )

    # Either the free-text `dimensions` or the numeric fields (or both)
    dimensions = models.CharField(max_length=100, blank=True, null=True)
    height_cm = models.DecimalField(max_digits=8, decimal_places=2, blank=True, null=True)
    width_cm = models.DecimalField(max_digits=8, decimal_places=2, blank=True, null=True)
    depth_cm = models.DecimalField(max_digits=8, decimal_places=2, blank=True, null=True)
    weight_kg = models.DecimalField(max_digits=10, decimal_places=2, blank=True, null=True)

    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0"),
        validators=[MinValueValidator(Decimal("0"))],
    )
    is_featured = models.BooleanField(default=False, db_index=True)
    is_available = models.BooleanField(default=True)
    is_active = models.BooleanField(default=True, db_index=True)
    view_count = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return self.name

    @property
    def primary_image(self):
        """URL of the primary image, falling back to the first by display order."""
        images = sorted(self.images.all(), key=lambda img: (not img.is_primary, img.display_order, img.id))
        return images[0].image_url if images else None


class SculptureImage(models.Model):
    sculpture = models.ForeignKey(Sculpture, on_delete=models.CASCADE, related_name="images")
    image_url = models.CharField(max_length=500)
    alt_text = models.CharField(max_length=255, blank=True, default="")
    is_primary = models.BooleanField(default=False)
    display_order = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["display_order", "id"]
        indexes = [
            models.Index(fields=["sculpture", "is_primary"], name="sculpture_image_primary_idx"),
        ]

    def __str__(self):
        return f"{self.sculpture_id}: {self.image_url}"


class LeadRequest(models.Model):
    """
    Shared shape of the public lead forms.

    `status` is a flat enum: any value may follow any other. Subclasses set
    STATUS_CHOICES and the default.
    """
    STATUS_CHOICES = ()

    customer_name = models.CharField(max_length=100)
    mobile_number = models.CharField(max_length=20, db_index=True)
    email = models.EmailField(max_length=254, blank=True, null=True)
    admin_notes = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ["-created_at", "-id"]

    @classmethod
    def status_values(cls):
        return [value for value, _label in cls.STATUS_CHOICES]

    @classmethod
    def can_transition(cls, current, new_status):
        # Any-to-any: the only rule is that the target is a known status.
        return new_status in cls.status_values()

    def transition_status(self, new_status):
        if not self.can_transition(self.status, new_status):
            raise ValueError(
                f"Invalid status '{new_status}'. Allowed: {', '.join(self.status_values())}"
            )
        self.status = new_status


class ContactRequest(LeadRequest):
    REQUEST_TYPE_CHOICES = [
        ("general", "General"),
        ("inquiry", "Inquiry"),
        ("quotation", "Quotation"),
    ]
    STATUS_CHOICES = [
        ("pending", "Pending"),
        ("contacted", "Contacted"),
        ("completed", "Completed"),
        ("cancelled", "Cancelled"),
    ]

    message = models.TextField(blank=True, null=True)
    selected_sculpture_ids = models.JSONField(default=list, blank=True)
    request_type = models.CharField(max_length=20, choices=REQUEST_TYPE_CHOICES, default="inquiry")
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default="pending", db_index=True)

    class Meta(LeadRequest.Meta):
        pass

    def __str__(self):
        return f"Contact {self.id} from {self.customer_name} ({self.status})"


class CustomRequest(LeadRequest):
    STATUS_CHOICES = [
        ("pending", "Pending"),
        ("reviewed", "Reviewed"),
        ("quoted", "Quoted"),
        ("accepted", "Accepted"),
        ("in_progress", "In Progress"),
        ("completed", "Completed"),
        ("cancelled", "Cancelled"),
    ]

    reference_image_url = models.CharField(max_length=500, blank=True, null=True)
    sculpture_type = models.CharField(max_length=100, blank=True, null=True)
    preferred_material = models.CharField(max_length=100, blank=True, null=True)
    expected_height = models.CharField(max_length=50, blank=True, null=True)
    expected_width = models.CharField(max_length=50, blank=True, null=True)
    expected_depth = models.CharField(max_length=50, blank=True, null=True)
    expected_price = models.DecimalField(max_digits=12, decimal_places=2, blank=True, null=True)
    description = models.TextField(blank=True, null=True)
    special_requirements = models.TextField(blank=True, null=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default="pending", db_index=True)
    quoted_price = models.DecimalField(max_digits=12, decimal_places=2, blank=True, null=True)
    estimated_days = models.PositiveIntegerField(blank=True, null=True)

    class Meta(LeadRequest.Meta):
        pass

    def __str__(self):
        return f"Custom request {self.id} from {self.customer_name} ({self.status})"


class AdminUser(models.Model):
    username = models.CharField(max_length=50, unique=True)
    password_hash = models.CharField(max_length=255)
    full_name = models.CharField(max_length=100, blank=True, default="")
    is_active = models.BooleanField(default=True)
    last_login = models.DateTimeField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return self.username


class SiteSetting(models.Model):
    TYPE_CHOICES = [
        ("text", "Text"),
        ("number", "Number"),
        ("boolean", "Boolean"),
        ("json", "JSON"),
        ("image", "Image"),
    ]

    setting_key = models.CharField(max_length=100, unique=True)
    setting_value = models.TextField(blank=True, default="")
    setting_type = models.CharField(max_length=20, choices=TYPE_CHOICES, default="text")
    description = models.CharField(max_length=255, blank=True, default="")
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["setting_key"]

    def __str__(self):
        return self.setting_key

    @property
    def typed_value(self):
        """setting_value coerced by setting_type; the raw string if it does not parse."""
        raw = self.setting_value
        try:
            if self.setting_type == "number":
                number = Decimal(raw)
                return int(number) if number == number.to_integral_value() else float(number)
            if self.setting_type == "boolean":
                return raw.strip().lower() in ("1", "true", "yes", "on")
            if self.setting_type == "json":
                return json.loads(raw) if raw else None
        except (ArithmeticError, ValueError):
            return raw
        return raw


class PaymentInfo(models.Model):
    PAYMENT_TYPE_CHOICES = [
        ("upi", "UPI"),
        ("bank", "Bank Transfer"),
        ("gpay", "Google Pay"),
        ("phonepe", "PhonePe"),
        ("paytm", "Paytm"),
    ]

    payment_type = models.CharField(max_length=20, choices=PAYMENT_TYPE_CHOICES, db_index=True)
    display_name = models.CharField(max_length=100)
    upi_id = models.CharField(max_length=100, blank=True, null=True)
    qr_code_url = models.CharField(max_length=500, blank=True, null=True)
    mobile_number = models.CharField(max_length=20, blank=True, null=True)
    bank_name = models.CharField(max_length=100, blank=True, null=True)
    account_number = models.CharField(max_length=50, blank=True, null=True)
    ifsc_code = models.CharField(max_length=20, blank=True, null=True)
    account_holder_name = models.CharField(max_length=100, blank=True, null=True)
    display_order = models.PositiveIntegerField(default=0)
    is_active = models.BooleanField(default=True)

    class Meta:
        ordering = ["display_order", "id"]
        verbose_name_plural = "payment info"

    def __str__(self):
        return self.display_name
