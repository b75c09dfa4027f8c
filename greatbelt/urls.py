"""URL configuration for the Great Belt plugin."""
from django.urls import include, path

from apps.plugin.greate_belt import GreateBeltPlugin
from greatbelt.error_views import permission_denied_view

handler403 = permission_denied_view

_base_url = GreateBeltPlugin.plugin_base_url

urlpatterns = [
    path("i18n/", include("django.conf.urls.i18n")),
    path(f"api/{_base_url}/report/", include("apps.reports.urls")),
    path(f"api/{_base_url}/menu/", include("apps.plugin.urls")),
]
