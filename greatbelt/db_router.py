"""Route the Items Planning models to their own database.

The Items Planning tables are owned by a sibling plugin and live in a
separate schema. Everything else (auth, sessions, SDK cases) stays on
"default".
"""

ITEMS_PLANNING_DB = "items_planning"
ITEMS_PLANNING_APP_LABEL = "items_planning"


class ItemsPlanningRouter:

    def db_for_read(self, model, **hints):
        if model._meta.app_label == ITEMS_PLANNING_APP_LABEL:
            return ITEMS_PLANNING_DB
        return None

    def db_for_write(self, model, **hints):
        if model._meta.app_label == ITEMS_PLANNING_APP_LABEL:
            return ITEMS_PLANNING_DB
        return None

    def allow_relation(self, obj1, obj2, **hints):
        labels = {obj1._meta.app_label, obj2._meta.app_label}
        if ITEMS_PLANNING_APP_LABEL in labels:
            # Relations never cross the database boundary.
            return labels == {ITEMS_PLANNING_APP_LABEL}
        return None

    def allow_migrate(self, db, app_label, model_name=None, **hints):
        if app_label == ITEMS_PLANNING_APP_LABEL:
            return db == ITEMS_PLANNING_DB
        if db == ITEMS_PLANNING_DB:
            return False
        return None
