"""
Django system checks for the plugin's wiring.

Check IDs:
    GreateBelt.E001  items_planning database alias not configured
    GreateBelt.E002  ItemsPlanningRouter not installed
    GreateBelt.W001  Danish translation catalog missing
"""

from django.conf import settings
from django.core.checks import Error, Warning, register

from greatbelt.db_router import ITEMS_PLANNING_DB

ROUTER_PATH = "greatbelt.db_router.ItemsPlanningRouter"


@register()
def check_items_planning_database(app_configs, **kwargs):
    errors = []
    if ITEMS_PLANNING_DB not in settings.DATABASES:
        errors.append(Error(
            f"DATABASES has no '{ITEMS_PLANNING_DB}' alias.",
            hint="Set ITEMS_PLANNING_DATABASE_URL, or DATABASE_URL so it can be derived.",
            id="GreateBelt.E001",
        ))
    if ROUTER_PATH not in getattr(settings, "DATABASE_ROUTERS", []):
        errors.append(Error(
            "Items Planning models are not routed to their own database.",
            hint=f"Add '{ROUTER_PATH}' to DATABASE_ROUTERS.",
            id="GreateBelt.E002",
        ))
    return errors


@register()
def check_translation_catalogs(app_configs, **kwargs):
    from apps.reports.localization import catalog_path

    if not catalog_path("da").exists():
        return [
            Warning(
                "Danish translation catalog for the report plugin is missing.",
                hint="Expected at apps/reports/locale/da/LC_MESSAGES/django.po",
                id="GreateBelt.W001",
            )
        ]
    return []
