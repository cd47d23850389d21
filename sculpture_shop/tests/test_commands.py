from io import StringIO

from django.contrib.auth.hashers import check_password
from django.core.management import call_command
from django.test import TestCase, override_settings

from sculpture_shop.models import AdminUser, Category, Material, PaymentInfo, SiteSetting

from .base import FAST_HASHERS


@override_settings(PASSWORD_HASHERS=FAST_HASHERS)
class SetupShopCommandTests(TestCase):
    def run_command(self, *args):
        out = StringIO()
        call_command("setup_shop", *args, stdout=out)
        return out.getvalue()

    def test_creates_hashed_default_admin(self):
        output = self.run_command()

        admin = AdminUser.objects.get(username="admin")
        self.assertNotEqual(admin.password_hash, "admin123")
        self.assertTrue(check_password("admin123", admin.password_hash))
        self.assertIn("Shop setup completed", output)
        self.assertFalse(Category.objects.exists())

    def test_custom_credentials(self):
        self.run_command("--username", "owner", "--password", "s3cret", "--full-name", "Owner")

        admin = AdminUser.objects.get(username="owner")
        self.assertEqual(admin.full_name, "Owner")
        self.assertTrue(check_password("s3cret", admin.password_hash))

    def test_seed_is_idempotent(self):
        self.run_command("--seed")
        counts = (Category.objects.count(), Material.objects.count(),
                  SiteSetting.objects.count(), PaymentInfo.objects.count())

        output = self.run_command("--seed")

        self.assertEqual(counts, (5, 5, 8, 2))
        self.assertEqual((Category.objects.count(), Material.objects.count(),
                          SiteSetting.objects.count(), PaymentInfo.objects.count()), counts)
        self.assertEqual(AdminUser.objects.count(), 1)
        self.assertIn("Admin user admin already exists", output)
        self.assertIn("Seeded 0 new rows", output)


@override_settings(PASSWORD_HASHERS=FAST_HASHERS)
class MigrateLegacyPasswordsCommandTests(TestCase):
    def setUp(self):
        AdminUser.objects.create(username="legacy", password_hash="admin123")
        AdminUser.objects.create(username="empty", password_hash="")
        call_command("setup_shop", "--username", "hashed", "--password", "pw", stdout=StringIO())

    def test_dry_run_changes_nothing(self):
        out = StringIO()
        call_command("migrate_legacy_passwords", "--dry-run", stdout=out)

        self.assertEqual(AdminUser.objects.get(username="legacy").password_hash, "admin123")
        self.assertIn("1 legacy password(s) found", out.getvalue())

    def test_hashes_plaintext_and_skips_empty(self):
        hashed_before = AdminUser.objects.get(username="hashed").password_hash
        out = StringIO()

        call_command("migrate_legacy_passwords", stdout=out)

        legacy = AdminUser.objects.get(username="legacy")
        self.assertTrue(check_password("admin123", legacy.password_hash))
        self.assertEqual(AdminUser.objects.get(username="empty").password_hash, "")
        self.assertEqual(AdminUser.objects.get(username="hashed").password_hash, hashed_before)
        self.assertIn("empty: empty password, skipped", out.getvalue())

    def test_migrated_admin_can_log_in(self):
        call_command("migrate_legacy_passwords", stdout=StringIO())

        response = self.client.post(
            "/api/method/sculpture_shop.api.admin_login",
            {"username": "legacy", "password": "admin123"},
            content_type="application/json",
        )

        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.json()["data"]["token"])


class MigrationStateTests(TestCase):
    def test_models_match_shipped_migrations(self):
        out = StringIO()

        call_command("makemigrations", "sculpture_shop", "--check", "--dry-run", stdout=out)

        self.assertIn("No changes detected", out.getvalue())
