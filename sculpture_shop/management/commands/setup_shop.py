import logging

from django.core.management.base import BaseCommand
from django.db import transaction

from sculpture_shop.authentication import hash_password
from sculpture_shop.models import AdminUser, Category, Material, PaymentInfo, SiteSetting
from sculpture_shop.utilities import format_slug, generate_unique_slug

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = [
    ("God Statues", "Hand-carved idols for homes and temples"),
    ("Custom Sculptures", "Portraits and pieces made to order"),
    ("Memorial Sculptures", "Statues and plaques for memorials"),
    ("Animal Sculptures", "Elephants, lions, cows and other figures"),
    ("Temple Art", "Pillars, panels and architectural carvings"),
]

DEFAULT_MATERIALS = [
    ("Granite", "Hard, weather-resistant stone"),
    ("Black Stone", "Traditional stone for temple idols"),
    ("Marble", "White marble with a polished finish"),
    ("Sandstone", "Soft stone suited to fine detail"),
    ("Bronze", "Cast metal sculptures"),
]

DEFAULT_SETTINGS = [
    ("shop_name", "Sculpture Shop", "text", "Shop display name"),
    ("phone_primary", "", "text", "Primary contact number"),
    ("phone_secondary", "", "text", "Secondary contact number"),
    ("whatsapp_number", "", "text", "WhatsApp number with country code"),
    ("email", "", "text", "Contact email"),
    ("address", "Tamil Nadu, India", "text", "Shop address"),
    ("working_hours", "Monday - Saturday: 9:00 AM - 7:00 PM", "text", "Opening hours"),
    ("items_per_page", "12", "number", "Catalog page size"),
]

DEFAULT_PAYMENT_INFO = [
    {"payment_type": "upi", "display_name": "UPI", "display_order": 1},
    {"payment_type": "bank", "display_name": "Bank Transfer", "display_order": 2},
]


class Command(BaseCommand):
    help = "Create the default admin account and optionally seed catalog reference data."

    def add_arguments(self, parser):
        parser.add_argument("--username", default="admin")
        parser.add_argument("--password", default="admin123")
        parser.add_argument("--full-name", default="Administrator")
        parser.add_argument("--seed", action="store_true", help="Insert default categories, materials, "
                                                                 "payment info and site settings.")

    def handle(self, *args, **options):
        with transaction.atomic():
            self._ensure_admin(options["username"], options["password"], options["full_name"])
            if options["seed"]:
                self._seed()
        self.stdout.write(self.style.SUCCESS("Shop setup completed"))

    def _ensure_admin(self, username, password, full_name):
        if AdminUser.objects.filter(username=username).exists():
            self.stdout.write(f"Admin user {username} already exists")
            return
        AdminUser.objects.create(username=username, password_hash=hash_password(password), full_name=full_name)
        logger.info("Default admin %s created", username)
        self.stdout.write(self.style.SUCCESS(f"Admin user {username} created"))
        self.stdout.write(self.style.WARNING("Change this password after the first login."))

    def _seed(self):
        created = 0
        for order, (name, description) in enumerate(DEFAULT_CATEGORIES, start=1):
            if not Category.objects.filter(name=name).exists():
                Category.objects.create(
                    name=name,
                    slug=generate_unique_slug(Category, format_slug(name), fallback="category"),
                    description=description,
                    display_order=order,
                )
                created += 1

        for name, description in DEFAULT_MATERIALS:
            _material, was_created = Material.objects.get_or_create(name=name, defaults={"description": description})
            created += was_created

        for key, value, setting_type, description in DEFAULT_SETTINGS:
            _setting, was_created = SiteSetting.objects.get_or_create(
                setting_key=key,
                defaults={"setting_value": value, "setting_type": setting_type, "description": description},
            )
            created += was_created

        for row in DEFAULT_PAYMENT_INFO:
            _info, was_created = PaymentInfo.objects.get_or_create(
                payment_type=row["payment_type"],
                display_name=row["display_name"],
                defaults={"display_order": row["display_order"]},
            )
            created += was_created

        self.stdout.write(f"Seeded {created} new rows")
