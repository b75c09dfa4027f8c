"""Safe locale middleware: gracefully handles translation failures.

The host front end sends the user's language in the language cookie or
the Accept-Language header. If activating it fails (unknown code,
broken catalog), fall back to the default language instead of
answering with a 500.
"""
import logging

from django.conf import settings
from django.middleware.locale import LocaleMiddleware
from django.utils import translation

logger = logging.getLogger(__name__)


class SafeLocaleMiddleware(LocaleMiddleware):
    """Django's LocaleMiddleware with a fallback to LANGUAGE_CODE."""

    def process_request(self, request):
        try:
            super().process_request(request)
        except Exception as e:
            logger.error(
                "Translation error for language '%s': %s. Falling back to '%s'.",
                translation.get_language(),
                str(e),
                settings.LANGUAGE_CODE,
            )
            translation.activate(settings.LANGUAGE_CODE)
            request.LANGUAGE_CODE = settings.LANGUAGE_CODE

    def process_response(self, request, response):
        try:
            response = super().process_response(request, response)
        except Exception as e:
            logger.error("Translation error in response processing: %s", str(e))
        return response
