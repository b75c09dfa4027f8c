"""
Apply the Items Planning migrations to the items_planning database.

Usage:
    python manage.py setup_plugin_db
    python manage.py setup_plugin_db --plan     # Show what would run

The host used to run these migrations at plugin start-up. Run this
command once per deployment instead.
"""
import logging

from django.core.management import call_command
from django.core.management.base import BaseCommand, CommandError

from greatbelt.db_router import ITEMS_PLANNING_DB

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Apply migrations to the Items Planning database."

    def add_arguments(self, parser):
        parser.add_argument(
            "--plan",
            action="store_true",
            help="Show the migration plan without applying it.",
        )

    def handle(self, *args, **options):
        self.stdout.write(f"Migrating database '{ITEMS_PLANNING_DB}'...")
        try:
            call_command(
                "migrate",
                database=ITEMS_PLANNING_DB,
                interactive=False,
                plan=options["plan"],
                verbosity=options["verbosity"],
                stdout=self.stdout,
            )
        except Exception as e:
            logger.error("Migrating '%s' failed: %s", ITEMS_PLANNING_DB, e, exc_info=True)
            raise CommandError(f"Migrating '{ITEMS_PLANNING_DB}' failed: {e}") from e
        self.stdout.write(self.style.SUCCESS("Items Planning database is up to date."))
