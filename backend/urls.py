"""
URL configuration for backend project.
"""
from django.contrib import admin
from django.urls import include, path, re_path

from sculpture_shop.views import health, route_not_found

urlpatterns = [
    path('admin/', admin.site.urls),

    # One route per shop operation: /api/method/sculpture_shop.api.<operation>
    path('api/method/', include('sculpture_shop.urls')),
    path('api/health', health, name='health'),

    # Anything else under /api/ gets the JSON 404 envelope
    re_path(r'^api/', route_not_found),
]
