import logging

from django.core.management.base import BaseCommand

from sculpture_shop.authentication import hash_password, is_password_hash
from sculpture_shop.models import AdminUser

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Hash admin passwords that are still stored as plain text."

    def add_arguments(self, parser):
        parser.add_argument("--dry-run", action="store_true", help="Only report the affected accounts.")

    def handle(self, *args, **options):
        migrated = 0
        for admin in AdminUser.objects.order_by("id"):
            if is_password_hash(admin.password_hash):
                continue
            if not admin.password_hash:
                self.stdout.write(self.style.WARNING(f"{admin.username}: empty password, skipped"))
                continue
            if not options["dry_run"]:
                admin.password_hash = hash_password(admin.password_hash)
                admin.save(update_fields=["password_hash"])
                logger.info("Hashed legacy password for admin %s", admin.username)
            migrated += 1
            self.stdout.write(f"{admin.username}: {'would hash' if options['dry_run'] else 'hashed'}")
        self.stdout.write(self.style.SUCCESS(f"{migrated} legacy password(s) {'found' if options['dry_run'] else 'migrated'}"))
