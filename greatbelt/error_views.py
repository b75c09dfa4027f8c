"""Custom error handlers.

The plugin is consumed by the host's Angular front end, so errors are
returned as JSON rather than rendered pages.
"""

from django.http import JsonResponse

# Exception messages that are safe to display to users.
_SAFE_MESSAGE_MAX_LENGTH = 500


def permission_denied_view(request, exception):
    """Custom 403 handler returning the host's failure envelope."""
    message = str(exception) if exception else ""
    if len(message) > _SAFE_MESSAGE_MAX_LENGTH:
        message = ""

    return JsonResponse(
        {"success": False, "message": message or "Forbidden", "model": None},
        status=403,
    )


def csrf_failure(request, reason=""):
    """CSRF_FAILURE_VIEW: same envelope as other 403s."""
    return JsonResponse(
        {"success": False, "message": "CSRF verification failed", "model": None},
        status=403,
    )
