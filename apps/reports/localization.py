"""String lookup for the plugin's user-facing messages.

Messages are keyed (e.g. "ErrorWhileReadCases") and looked up in the
gettext catalogs shipped under apps/reports/locale. The .po files are
read directly with polib, so no compiled .mo files are needed.
"""
import logging
from functools import lru_cache
from pathlib import Path

import polib
from django.conf import settings
from django.utils import translation

logger = logging.getLogger(__name__)

LOCALE_DIR = Path(__file__).resolve().parent / "locale"
FALLBACK_LANGUAGE = "en"


def catalog_path(language):
    return LOCALE_DIR / language / "LC_MESSAGES" / "django.po"


@lru_cache(maxsize=None)
def load_catalog(language):
    """Return {msgid: msgstr} for a language, or {} if there is no catalog.

    Untranslated, fuzzy and obsolete entries are skipped so that lookup
    falls through to the next language.
    """
    path = catalog_path(language)
    if not path.exists():
        return {}
    try:
        po = polib.pofile(str(path))
    except (OSError, ValueError) as e:
        logger.error("Could not read translation catalog %s: %s", path, e)
        return {}
    return {
        entry.msgid: entry.msgstr
        for entry in po
        if entry.msgstr and not entry.obsolete and "fuzzy" not in entry.flags
    }


class LocalizationService:
    """Translate message keys for one language (default: the active one)."""

    def __init__(self, language=None):
        self.language = language

    def _candidate_languages(self):
        active = (
            self.language
            or translation.get_language()
            or settings.LANGUAGE_CODE
        ).lower().replace("_", "-")
        candidates = [active, active.split("-")[0], FALLBACK_LANGUAGE]
        # dict.fromkeys keeps order while dropping duplicates
        return list(dict.fromkeys(candidates))

    def get_string(self, key):
        for language in self._candidate_languages():
            catalog = load_catalog(language)
            if key in catalog:
                return catalog[key]
        return key
