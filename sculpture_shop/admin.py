from django.contrib import admin

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


class SculptureImageInline(admin.TabularInline):
    model = SculptureImage
    extra = 0


@admin.register(Sculpture)
class SculptureAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "slug", "category", "material", "price", "is_featured", "is_available", "is_active")
    list_filter = ("is_featured", "is_available", "is_active", "category", "material")
    search_fields = ("name", "slug", "description")
    inlines = [SculptureImageInline]


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "slug", "display_order", "is_active")
    list_filter = ("is_active",)
    search_fields = ("name", "slug")


@admin.register(ContactRequest)
class ContactRequestAdmin(admin.ModelAdmin):
    list_display = ("id", "customer_name", "mobile_number", "request_type", "status", "created_at")
    list_filter = ("status", "request_type")
    search_fields = ("customer_name", "mobile_number", "email")


@admin.register(CustomRequest)
class CustomRequestAdmin(admin.ModelAdmin):
    list_display = ("id", "customer_name", "mobile_number", "sculpture_type", "status", "quoted_price", "created_at")
    list_filter = ("status",)
    search_fields = ("customer_name", "mobile_number", "email")


@admin.register(AdminUser)
class AdminUserAdmin(admin.ModelAdmin):
    list_display = ("id", "username", "full_name", "is_active", "last_login")
    exclude = ("password_hash",)


admin.site.register(Material)
admin.site.register(SculptureImage)
admin.site.register(SiteSetting)
admin.site.register(PaymentInfo)
