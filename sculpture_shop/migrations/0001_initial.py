from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="AdminUser",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("username", models.CharField(max_length=50, unique=True)),
                ("password_hash", models.CharField(max_length=255)),
                ("full_name", models.CharField(blank=True, default="", max_length=100)),
                ("is_active", models.BooleanField(default=True)),
                ("last_login", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
        ),
        migrations.CreateModel(
            name="Category",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(db_index=True, max_length=100)),
                ("slug", models.SlugField(max_length=120, unique=True)),
                ("description", models.TextField(blank=True, null=True)),
                ("image_url", models.CharField(blank=True, max_length=500, null=True)),
                ("display_order", models.PositiveIntegerField(default=0)),
                ("is_active", models.BooleanField(db_index=True, default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name_plural": "categories",
                "ordering": ["display_order", "name"],
            },
        ),
        migrations.CreateModel(
            name="ContactRequest",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("customer_name", models.CharField(max_length=100)),
                ("mobile_number", models.CharField(db_index=True, max_length=20)),
                ("email", models.EmailField(blank=True, max_length=254, null=True)),
                ("admin_notes", models.TextField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("message", models.TextField(blank=True, null=True)),
                ("selected_sculpture_ids", models.JSONField(blank=True, default=list)),
                ("request_type", models.CharField(
                    choices=[("general", "General"), ("inquiry", "Inquiry"), ("quotation", "Quotation")],
                    default="inquiry",
                    max_length=20,
                )),
                ("status", models.CharField(
                    choices=[
                        ("pending", "Pending"),
                        ("contacted", "Contacted"),
                        ("completed", "Completed"),
                        ("cancelled", "Cancelled"),
                    ],
                    db_index=True,
                    default="pending",
                    max_length=20,
                )),
            ],
            options={
                "ordering": ["-created_at", "-id"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="CustomRequest",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("customer_name", models.CharField(max_length=100)),
                ("mobile_number", models.CharField(db_index=True, max_length=20)),
                ("email", models.EmailField(blank=True, max_length=254, null=True)),
                ("admin_notes", models.TextField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("reference_image_url", models.CharField(blank=True, max_length=500, null=True)),
                ("sculpture_type", models.CharField(blank=True, max_length=100, null=True)),
                ("preferred_material", models.CharField(blank=True, max_length=100, null=True)),
                ("expected_height", models.CharField(blank=True, max_length=50, null=True)),
                ("expected_width", models.CharField(blank=True, max_length=50, null=True)),
                ("expected_depth", models.CharField(blank=True, max_length=50, null=True)),
                ("expected_price", models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ("description", models.TextField(blank=True, null=True)),
                ("special_requirements", models.TextField(blank=True, null=True)),
                ("status", models.CharField(
                    choices=[
                        ("pending", "Pending"),
                        ("reviewed", "Reviewed"),
                        ("quoted", "Quoted"),
                        ("accepted", "Accepted"),
                        ("in_progress", "In Progress"),
                        ("completed", "Completed"),
                        ("cancelled", "Cancelled"),
                    ],
                    db_index=True,
                    default="pending",
                    max_length=20,
                )),
                ("quoted_price", models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ("estimated_days", models.PositiveIntegerField(blank=True, null=True)),
            ],
            options={
                "ordering": ["-created_at", "-id"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="Material",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100, unique=True)),
                ("description", models.TextField(blank=True, null=True)),
                ("is_active", models.BooleanField(db_index=True, default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="PaymentInfo",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("payment_type", models.CharField(
                    choices=[
                        ("upi", "UPI"),
                        ("bank", "Bank Transfer"),
                        ("gpay", "Google Pay"),
                        ("phonepe", "PhonePe"),
                        ("paytm", "Paytm"),
                    ],
                    db_index=True,
                    max_length=20,
                )),
                ("display_name", models.CharField(max_length=100)),
                ("upi_id", models.CharField(blank=True, max_length=100, null=True)),
                ("qr_code_url", models.CharField(blank=True, max_length=500, null=True)),
                ("mobile_number", models.CharField(blank=True, max_length=20, null=True)),
                ("bank_name", models.CharField(blank=True, max_length=100, null=True)),
                ("account_number", models.CharField(blank=True, max_length=50, null=True)),
                ("ifsc_code", models.CharField(blank=True, max_length=20, null=True)),
                ("account_holder_name", models.CharField(blank=True, max_length=100, null=True)),
                ("display_order", models.PositiveIntegerField(default=0)),
                ("is_active", models.BooleanField(default=True)),
            ],
            options={
                "verbose_name_plural": "payment info",
                "ordering": ["display_order", "id"],
            },
        ),
        migrations.CreateModel(
            name="SiteSetting",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("setting_key", models.CharField(max_length=100, unique=True)),
                ("setting_value", models.TextField(blank=True, default="")),
                ("setting_type", models.CharField(
                    choices=[
                        ("text", "Text"),
                        ("number", "Number"),
                        ("boolean", "Boolean"),
                        ("json", "JSON"),
                        ("image", "Image"),
                    ],
                    default="text",
                    max_length=20,
                )),
                ("description", models.CharField(blank=True, default="", max_length=255)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["setting_key"],
            },
        ),
        migrations.CreateModel(
            name="Sculpture",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(db_index=True, max_length=255)),
                ("slug", models.SlugField(max_length=280, unique=True)),
                ("description", models.TextField(blank=True, null=True)),
                ("dimensions", models.CharField(blank=True, max_length=100, null=True)),
                ("height_cm", models.DecimalField(blank=True, decimal_places=2, max_digits=8, null=True)),
                ("width_cm", models.DecimalField(blank=True, decimal_places=2, max_digits=8, null=True)),
                ("depth_cm", models.DecimalField(blank=True, decimal_places=2, max_digits=8, null=True)),
                ("weight_kg", models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ("price", models.DecimalField(
                    decimal_places=2,
                    default=Decimal("0"),
                    max_digits=12,
                    validators=[django.core.validators.MinValueValidator(Decimal("0"))],
                )),
                ("is_featured", models.BooleanField(db_index=True, default=False)),
                ("is_available", models.BooleanField(default=True)),
                ("is_active", models.BooleanField(db_index=True, default=True)),
                ("view_count", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("category", models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name="sculptures",
                    to="sculpture_shop.category",
                )),
                ("material", models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name="sculptures",
                    to="sculpture_shop.material",
                )),
            ],
            options={
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="SculptureImage",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("image_url", models.CharField(max_length=500)),
                ("alt_text", models.CharField(blank=True, default="", max_length=255)),
                ("is_primary", models.BooleanField(default=False)),
                ("display_order", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("sculpture", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="images",
                    to="sculpture_shop.sculpture",
                )),
            ],
            options={
                "ordering": ["display_order", "id"],
                "indexes": [
                    models.Index(fields=["sculpture", "is_primary"], name="sculpture_image_primary_idx"),
                ],
            },
        ),
    ]
