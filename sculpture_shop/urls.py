from django.urls import path

from .category import (
    AddCategoryAPIView,
    AddMaterialAPIView,
    CategoriesWithCountAPIView,
    CategoryByIdAPIView,
    CategoryBySlugAPIView,
    CategoryListAPIView,
    DeleteCategoryAPIView,
    DeleteMaterialAPIView,
    MaterialByIdAPIView,
    MaterialListAPIView,
    UpdateCategoryAPIView,
    UpdateMaterialAPIView,
)
from .contact import (
    ContactRequestByIdAPIView,
    ContactRequestListAPIView,
    CreateContactRequestAPIView,
    CreateCustomRequestAPIView,
    CustomRequestByIdAPIView,
    CustomRequestListAPIView,
    UpdateContactRequestStatusAPIView,
    UpdateCustomRequestAPIView,
)
from .payment import PaymentInfoAPIView
from .sculpture import (
    AddSculptureAPIView,
    AddSculptureImageAPIView,
    DeleteSculptureAPIView,
    DeleteSculptureImageAPIView,
    FeaturedSculpturesAPIView,
    RelatedSculpturesAPIView,
    SculptureByIdAPIView,
    SculptureBySlugAPIView,
    SculptureCountAPIView,
    SculptureImagesAPIView,
    SculptureListAPIView,
    SetPrimaryImageAPIView,
    UpdateSculptureAPIView,
)
from .views import (
    AdminLoginAPIView,
    CreateAdminAPIView,
    DashboardStatsAPIView,
    SiteSettingsAPIView,
    UpdateSiteSettingAPIView,
    VerifyTokenAPIView,
)

PREFIX = "sculpture_shop.api."


def op(name, view):
    """Route `/api/method/sculpture_shop.api.<name>`; the operation name doubles as the URL name."""
    return path(PREFIX + name, view.as_view(), name=name)


urlpatterns = [
    # Sculptures
    op("get_sculptures", SculptureListAPIView),
    op("get_sculptures_count", SculptureCountAPIView),
    op("get_sculpture_by_id", SculptureByIdAPIView),
    op("get_sculpture_by_slug", SculptureBySlugAPIView),
    op("get_sculpture_images", SculptureImagesAPIView),
    op("get_featured_sculptures", FeaturedSculpturesAPIView),
    op("get_related_sculptures", RelatedSculpturesAPIView),
    op("add_sculpture", AddSculptureAPIView),
    op("update_sculpture", UpdateSculptureAPIView),
    op("delete_sculpture", DeleteSculptureAPIView),
    op("add_sculpture_image", AddSculptureImageAPIView),
    op("set_primary_image", SetPrimaryImageAPIView),
    op("delete_sculpture_image", DeleteSculptureImageAPIView),

    # Categories & materials
    op("get_categories", CategoryListAPIView),
    op("get_category_by_id", CategoryByIdAPIView),
    op("get_category_by_slug", CategoryBySlugAPIView),
    op("get_categories_with_count", CategoriesWithCountAPIView),
    op("add_category", AddCategoryAPIView),
    op("update_category", UpdateCategoryAPIView),
    op("delete_category", DeleteCategoryAPIView),
    op("get_materials", MaterialListAPIView),
    op("get_material_by_id", MaterialByIdAPIView),
    op("add_material", AddMaterialAPIView),
    op("update_material", UpdateMaterialAPIView),
    op("delete_material", DeleteMaterialAPIView),

    # Leads
    op("create_contact_request", CreateContactRequestAPIView),
    op("get_contact_requests", ContactRequestListAPIView),
    op("get_contact_request_by_id", ContactRequestByIdAPIView),
    op("update_contact_request_status", UpdateContactRequestStatusAPIView),
    op("create_custom_request", CreateCustomRequestAPIView),
    op("get_custom_requests", CustomRequestListAPIView),
    op("get_custom_request_by_id", CustomRequestByIdAPIView),
    op("update_custom_request", UpdateCustomRequestAPIView),

    # Admin & settings
    op("admin_login", AdminLoginAPIView),
    op("verify_token", VerifyTokenAPIView),
    op("create_admin", CreateAdminAPIView),
    op("get_dashboard_stats", DashboardStatsAPIView),
    op("get_site_settings", SiteSettingsAPIView),
    op("update_site_setting", UpdateSiteSettingAPIView),

    # Payment
    op("get_payment_info", PaymentInfoAPIView),
]
