from django.apps import AppConfig


class PluginConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.plugin"
    label = "plugin"
    verbose_name = "Great Belt Plugin"

    def ready(self):
        import apps.plugin.checks  # noqa: F401
