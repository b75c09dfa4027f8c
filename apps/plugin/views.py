"""Menu endpoints consumed by the host front end."""
from django.http import JsonResponse
from django.views.decorators.http import require_GET

from apps.reports.localization import LocalizationService

from .decorators import api_login_required
from .greate_belt import GreateBeltPlugin


@require_GET
@api_login_required
def navigation_menu(request):
    plugin = GreateBeltPlugin()
    items = [item.to_json() for item in plugin.get_navigation_menu()]
    return JsonResponse({"success": True, "message": "", "model": items})


@require_GET
@api_login_required
def header_menu(request):
    plugin = GreateBeltPlugin()
    menu = plugin.header_menu(LocalizationService())
    return JsonResponse({"success": True, "message": "", "model": menu.to_json()})
