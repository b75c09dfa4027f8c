"""The Great Belt plugin: identity, database wiring and menus.

This module is imported by the settings, so it must not touch the
Django app registry or settings at import time.
"""
import dj_database_url

from .claims import GreateBeltClaims
from .contract import EformPlugin
from .menu import (
    HeaderMenu,
    HeaderMenuItem,
    LanguageNames,
    LocaleNames,
    MenuItemType,
    MenuTemplate,
    MenuTemplatePermission,
    MenuTranslation,
    PluginMenuItem,
)

ITEMS_PLANNING_PLUGIN_ID = "eform-angular-items-planning-plugin"

# (key, dropdown label, English report title, Danish report title, claim)
_REPORT_SECTIONS = [
    (
        "oresund",
        "Øresund",
        "Øresund: Track system (Inspection and lubrication of rail extraction - 14 days) menu",
        "Øresund: Sporanlæg (Eftersyn og smøring af skinneudtraek - 14 dags) menu",
        GreateBeltClaims.GET_ORESUND_REPORTS,
    ),
    (
        "storebaelt",
        "Greate Belt",
        "Greate Belt: Track system (Inspection and lubrication of rail extraction - 14 days) menu",
        "Greate Belt: Sporanlæg (Eftersyn og smøring af skinneudtraek - 14 dags) menu",
        GreateBeltClaims.GET_GREAT_BELT_REPORTS,
    ),
]


def _translations(english, danish):
    return [
        MenuTranslation(
            locale_name=LocaleNames.ENGLISH, name=english, language=LanguageNames.ENGLISH,
        ),
        MenuTranslation(
            locale_name=LocaleNames.DANISH, name=danish, language=LanguageNames.DANISH,
        ),
    ]


class GreateBeltPlugin(EformPlugin):

    name = "Microting Greate Belt Plugin"
    plugin_id = "eform-angular-greate-belt-plugin"
    plugin_base_url = "greate-belt-pn"

    def report_link(self, section):
        return f"/plugins/{self.plugin_base_url}/report/{section}/14-dags"

    def items_planning_connection_string(self, connection_string):
        """The Items Planning database sits next to ours, named after its plugin."""
        return connection_string.replace(self.plugin_id, ITEMS_PLANNING_PLUGIN_ID)

    def configure_db_context(self, connection_string):
        return dj_database_url.parse(
            self.items_planning_connection_string(connection_string),
            conn_max_age=600,
        )

    def get_navigation_menu(self):
        menu = []
        for position, (key, label, english, danish, claim) in enumerate(_REPORT_SECTIONS):
            link = self.report_link(key)
            report_item = PluginMenuItem(
                name=danish,
                e2e_id=f"{self.plugin_base_url}-report-{key}",
                link=link,
                type=MenuItemType.LINK,
                position=0,
                menu_template=MenuTemplate(
                    name=danish,
                    e2e_id=f"{self.plugin_base_url}-{key}-14-dags",
                    default_link=link,
                    permissions=[
                        MenuTemplatePermission(
                            claim_name=claim,
                            permission_name="Obtain reports",
                            permission_type_name="Reports",
                        ),
                    ],
                    translations=_translations(english, danish),
                ),
                translations=_translations(english, danish),
            )
            menu.append(PluginMenuItem(
                name="Dropdown",
                e2e_id=f"{self.plugin_base_url}-{key}",
                link="",
                type=MenuItemType.DROPDOWN,
                position=position,
                translations=_translations(label, label),
                child_items=[report_item],
            ))
        return menu

    def header_menu(self, localization):
        result = HeaderMenu()
        for key, label, _english, danish, _claim in _REPORT_SECTIONS:
            result.left_menu.append(HeaderMenuItem(
                name=localization.get_string(label),
                e2e_id=f"{self.plugin_base_url}-{key}",
                link="",
                menu_items=[
                    HeaderMenuItem(
                        name=localization.get_string(danish),
                        e2e_id=f"{self.plugin_base_url}-report-{key}",
                        link=self.report_link(key),
                        position=0,
                    ),
                ],
            ))
        return result
