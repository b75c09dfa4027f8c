from django.apps import AppConfig


class ItemsPlanningConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.items_planning"
    label = "items_planning"
    verbose_name = "Items Planning"
