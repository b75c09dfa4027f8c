"""Access decorators for the plugin's JSON API."""
from functools import wraps

from django.http import JsonResponse

from .claims import permission_name


def _failure(message, status):
    return JsonResponse({"success": False, "message": message, "model": None}, status=status)


def api_login_required(view_func):
    """Like login_required, but answers 401 instead of redirecting."""
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        if not request.user.is_authenticated:
            return _failure("Authentication required.", 401)
        return view_func(request, *args, **kwargs)
    return wrapper


def requires_any_claim(*claims):
    """Decorator: the user must hold at least one of the given claims.

    Superusers pass through ``has_perm`` as usual.
    """
    def decorator(view_func):
        @wraps(view_func)
        @api_login_required
        def wrapper(request, *args, **kwargs):
            if not any(request.user.has_perm(permission_name(c)) for c in claims):
                return _failure(
                    "Access denied. You do not have the required claim for this action.",
                    403,
                )
            return view_func(request, *args, **kwargs)
        return wrapper
    return decorator
