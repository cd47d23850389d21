from rest_framework import status

from sculpture_shop.models import Category, Material

from .base import ShopAPITestCase


class CategoryAPITests(ShopAPITestCase):
    def setUp(self):
        self.authenticate()

    def test_add_category_derives_slug(self):
        response = self.post("add_category", {"name": "Hindu Gods", "display_order": 2})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = response.json()["data"]
        self.assertEqual(data["slug"], "hindu-gods")
        self.assertEqual(data["display_order"], 2)
        self.assertTrue(data["is_active"])

    def test_add_category_requires_name(self):
        response = self.post("add_category", {"description": "nameless"})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()["message"], "Category name is required")

    def test_public_listing_hides_inactive(self):
        shown = self.make_category("Hindu Gods")
        self.make_category("Retired", is_active=False)

        response = self.get("get_categories")

        self.assertEqual([row["id"] for row in response.json()["data"]], [shown.id])

    def test_get_by_slug(self):
        category = self.make_category("Garden Sculptures")

        response = self.get("get_category_by_slug", {"slug": "garden-sculptures"})

        self.assertEqual(response.json()["data"]["id"], category.id)
        self.assertEqual(self.get("get_category_by_slug", {"slug": "nope"}).status_code, 404)

    def test_categories_with_count_ignore_deleted_sculptures(self):
        gods = self.make_category("Hindu Gods")
        empty = self.make_category("Animals")
        self.make_sculpture("Lord Ganesha", 45000, category=gods)
        self.make_sculpture("Nataraja", 125000, category=gods)
        self.make_sculpture("Old Idol", 1000, category=gods, is_active=False)

        rows = self.get("get_categories_with_count").json()["data"]

        counts = {row["id"]: row["sculpture_count"] for row in rows}
        self.assertEqual(counts, {gods.id: 2, empty.id: 0})

    def test_update_category(self):
        category = self.make_category("Hindu Gods")

        response = self.post("update_category", {"id": category.id, "description": "Idols", "is_active": False})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        category.refresh_from_db()
        self.assertEqual(category.name, "Hindu Gods")
        self.assertEqual(category.description, "Idols")
        self.assertFalse(category.is_active)

    def test_deactivate_refused_while_sculptures_use_it(self):
        category = self.make_category("Hindu Gods")
        self.make_sculpture("Lord Ganesha", 45000, category=category)
        self.make_sculpture("Nandi", 85000, category=category)

        response = self.post("update_category", {"id": category.id, "name": "Deities", "is_active": False})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()["message"], "Category has 2 active sculptures; move or delete them first")
        category.refresh_from_db()
        self.assertTrue(category.is_active)
        self.assertEqual(category.name, "Hindu Gods")

    def test_reactivate_is_not_blocked(self):
        category = self.make_category("Hindu Gods", is_active=False)
        self.make_sculpture("Lord Ganesha", 45000, category=category)

        response = self.post("update_category", {"id": category.id, "is_active": True})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        category.refresh_from_db()
        self.assertTrue(category.is_active)

    def test_update_missing_category(self):
        self.assertEqual(self.post("update_category", {"id": 999, "name": "x"}).status_code, 404)

    def test_delete_refused_while_sculptures_use_it(self):
        category = self.make_category("Hindu Gods")
        self.make_sculpture("Lord Ganesha", 45000, category=category)

        response = self.post("delete_category", {"id": category.id})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()["message"], "Category has 1 active sculpture; move or delete them first")
        category.refresh_from_db()
        self.assertTrue(category.is_active)

    def test_delete_is_soft(self):
        category = self.make_category("Hindu Gods")
        self.make_sculpture("Old Idol", 1000, category=category, is_active=False)

        response = self.post("delete_category", {"id": category.id})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(Category.objects.filter(pk=category.id).exists())
        data = self.get("get_category_by_id", {"id": category.id}).json()["data"]
        self.assertFalse(data["is_active"])
        self.assertEqual(self.get("get_categories").json()["data"], [])

    def test_delete_missing_category(self):
        self.assertEqual(self.post("delete_category", {"id": 999}).status_code, 404)
        self.assertEqual(self.post("delete_category", {}).status_code, 400)

    def test_writes_require_token(self):
        self.client.credentials()

        for operation in ("add_category", "update_category", "delete_category"):
            response = self.post(operation, {"id": 1, "name": "x"})
            self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED, operation)


class MaterialAPITests(ShopAPITestCase):
    def setUp(self):
        self.authenticate()

    def test_add_and_list(self):
        response = self.post("add_material", {"name": "Granite", "description": "Hard stone"})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        names = [row["name"] for row in self.get("get_materials").json()["data"]]
        self.assertEqual(names, ["Granite"])

    def test_duplicate_name_is_rejected(self):
        self.make_material("Granite")

        response = self.post("add_material", {"name": "granite"})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json(), {"success": False, "message": "Material already exists"})

    def test_rename_onto_existing_name_is_rejected(self):
        self.make_material("Granite")
        marble = self.make_material("Marble")

        response = self.post("update_material", {"id": marble.id, "name": "GRANITE"})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        marble.refresh_from_db()
        self.assertEqual(marble.name, "Marble")

    def test_update_material(self):
        marble = self.make_material("Marble")

        response = self.post("update_material", {"id": marble.id, "description": "White"})

        self.assertEqual(response.json()["data"]["description"], "White")

    def test_delete_is_soft(self):
        marble = self.make_material("Marble")

        response = self.post("delete_material", {"id": marble.id})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(Material.objects.get(pk=marble.id).is_active)
        self.assertEqual(self.get("get_materials").json()["data"], [])
        self.assertFalse(self.get("get_material_by_id", {"id": marble.id}).json()["data"]["is_active"])

    def test_missing_material(self):
        self.assertEqual(self.get("get_material_by_id", {"id": 999}).status_code, 404)
        self.assertEqual(self.post("delete_material", {"id": 999}).status_code, 404)

    def test_add_material_requires_name(self):
        response = self.post("add_material", {})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()["message"], "Material name is required")
