from rest_framework import status

from sculpture_shop.models import AdminUser, ContactRequest, PaymentInfo, SiteSetting

from .base import ShopAPITestCase


class AdminLoginTests(ShopAPITestCase):
    def setUp(self):
        self.admin = self.make_admin("admin", "admin123", "Shop Owner")

    def test_wrong_password(self):
        response = self.post("admin_login", {"username": "admin", "password": "wrong"})

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        body = response.json()
        self.assertFalse(body["success"])
        self.assertEqual(body["message"], "Invalid credentials")
        self.assertNotIn("data", body)

    def test_unknown_user(self):
        response = self.post("admin_login", {"username": "ghost", "password": "admin123"})

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_inactive_admin_cannot_log_in(self):
        AdminUser.objects.filter(pk=self.admin.pk).update(is_active=False)

        response = self.post("admin_login", {"username": "admin", "password": "admin123"})

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_missing_credentials(self):
        response = self.post("admin_login", {"username": "admin"})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()["message"], "Username and password are required")

    def test_login_then_verify_token(self):
        response = self.post("admin_login", {"username": "admin", "password": "admin123"})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = response.json()["data"]
        self.assertEqual(data["id"], self.admin.id)
        self.assertEqual(data["full_name"], "Shop Owner")
        self.admin.refresh_from_db()
        self.assertIsNotNone(self.admin.last_login)

        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {data['token']}")
        verified = self.get("verify_token")

        self.assertEqual(verified.status_code, status.HTTP_200_OK)
        self.assertEqual(verified.json()["message"], "Token is valid")
        self.assertEqual(verified.json()["data"], {"id": self.admin.id, "username": "admin", "full_name": "Shop Owner"})

    def test_plaintext_password_is_refused(self):
        AdminUser.objects.create(username="legacy", password_hash="admin123")

        with self.assertLogs("sculpture_shop.authentication", level="WARNING"):
            response = self.post("admin_login", {"username": "legacy", "password": "admin123"})

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_verify_without_token(self):
        response = self.get("verify_token")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.json(), {"success": False, "message": "Access denied. No token provided."})

    def test_verify_with_bad_token(self):
        self.client.credentials(HTTP_AUTHORIZATION="Bearer not-a-real-token")

        response = self.get("verify_token")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.json(), {"success": False, "message": "Invalid or expired token"})


class CreateAdminTests(ShopAPITestCase):
    def test_first_admin_needs_no_token(self):
        response = self.post("create_admin", {"username": "owner", "password": "s3cret!", "full_name": "Owner"})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()["message"], "Admin user created successfully")
        self.assertNotIn("password_hash", response.json()["data"])
        admin = AdminUser.objects.get(username="owner")
        self.assertNotEqual(admin.password_hash, "s3cret!")

        login = self.post("admin_login", {"username": "owner", "password": "s3cret!"})
        self.assertEqual(login.status_code, status.HTTP_200_OK)

    def test_later_admins_need_token(self):
        self.make_admin()

        response = self.post("create_admin", {"username": "second", "password": "pw123456"})

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertFalse(AdminUser.objects.filter(username="second").exists())

    def test_duplicate_username(self):
        self.authenticate()

        response = self.post("create_admin", {"username": "admin", "password": "another"})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()["message"], "Username already exists")
        self.assertEqual(AdminUser.objects.filter(username="admin").count(), 1)


class DashboardTests(ShopAPITestCase):
    def test_stats(self):
        self.authenticate()
        category = self.make_category("Hindu Gods")
        self.make_sculpture("Lord Ganesha", 45000, category=category, is_featured=True, view_count=5)
        self.make_sculpture("Nandi", 85000, view_count=2)
        self.make_sculpture("Deleted", 1, is_active=False, is_featured=True, view_count=100)
        ContactRequest.objects.create(customer_name="Ravi", mobile_number="9876543210")
        ContactRequest.objects.create(customer_name="Ravi", mobile_number="9876543210", status="completed")

        data = self.get("get_dashboard_stats").json()["data"]

        self.assertEqual(data, {
            "total_sculptures": 2,
            "featured_sculptures": 1,
            "total_categories": 1,
            "pending_inquiries": 1,
            "pending_custom_requests": 0,
            "total_views": 7,
        })

    def test_stats_require_token(self):
        self.assertEqual(self.get("get_dashboard_stats").status_code, status.HTTP_401_UNAUTHORIZED)


class SiteSettingTests(ShopAPITestCase):
    def test_public_settings_are_typed(self):
        SiteSetting.objects.create(setting_key="shop_name", setting_value="Sculpture Shop")
        SiteSetting.objects.create(setting_key="items_per_page", setting_value="12", setting_type="number")
        SiteSetting.objects.create(setting_key="show_prices", setting_value="true", setting_type="boolean")
        SiteSetting.objects.create(setting_key="hours", setting_value='{"open": 9}', setting_type="json")

        data = self.get("get_site_settings").json()["data"]

        self.assertEqual(data, {
            "hours": {"open": 9},
            "items_per_page": 12,
            "shop_name": "Sculpture Shop",
            "show_prices": True,
        })

    def test_update_creates_then_overwrites(self):
        self.authenticate()

        self.post("update_site_setting", {"setting_key": "whatsapp_number", "setting_value": "+91 90000 00000"})
        response = self.post("update_site_setting", {"setting_key": "whatsapp_number", "setting_value": "+91 91111 11111"})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(SiteSetting.objects.filter(setting_key="whatsapp_number").count(), 1)
        self.assertEqual(SiteSetting.objects.get(setting_key="whatsapp_number").setting_value, "+91 91111 11111")

    def test_update_requires_key(self):
        self.authenticate()

        response = self.post("update_site_setting", {"setting_value": "x"})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()["message"], "Setting key is required")


class PaymentInfoTests(ShopAPITestCase):
    def test_active_rows_in_display_order(self):
        PaymentInfo.objects.create(payment_type="bank", display_name="Bank Transfer", display_order=2)
        PaymentInfo.objects.create(payment_type="upi", display_name="UPI", display_order=1, upi_id="shop@upi")
        PaymentInfo.objects.create(payment_type="paytm", display_name="Paytm", is_active=False)

        rows = self.get("get_payment_info").json()["data"]

        self.assertEqual([row["display_name"] for row in rows], ["UPI", "Bank Transfer"])
        self.assertEqual(rows[0]["upi_id"], "shop@upi")


class ServiceRouteTests(ShopAPITestCase):
    def test_health(self):
        response = self.client.get("/api/health")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.json()["success"])
        self.assertEqual(response.json()["message"], "Sculpture Shop API is running")
        self.assertIn("timestamp", response.json())

    def test_unknown_route(self):
        response = self.client.get("/api/nonexistent")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.json(), {"success": False, "message": "Route GET /api/nonexistent not found"})

    def test_unknown_operation(self):
        response = self.client.post("/api/method/sculpture_shop.api.drop_tables", {}, format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
