"""The host platform's plugin contract.

The host loads each plugin, asks it for its database configuration and
its menus, and mounts its API under ``plugin_base_url``. Implementations
only describe themselves; the host decides when to call them.
"""
import abc


class EformPlugin(abc.ABC):

    name = ""
    plugin_id = ""
    plugin_base_url = ""

    @abc.abstractmethod
    def configure_db_context(self, connection_string):
        """Return Django database settings for the plugin's data source."""

    @abc.abstractmethod
    def get_navigation_menu(self):
        """Return the list of PluginMenuItem the host adds to its menu editor."""

    @abc.abstractmethod
    def header_menu(self, localization):
        """Return the HeaderMenu shown in the top bar, localized."""

    def seed_database(self, connection_string):
        """Insert default data. Most plugins have none."""

    def get_permissions_manager(self, connection_string):
        return None
