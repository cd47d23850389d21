from django.apps import AppConfig


class SculptureShopConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'sculpture_shop'
    verbose_name = 'Sculpture Shop'
