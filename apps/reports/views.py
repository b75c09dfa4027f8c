"""JSON API for the inspection report."""
import json
import logging

from django.http import JsonResponse
from django.views.decorators.http import require_POST

from apps.plugin.claims import GreateBeltClaims
from apps.plugin.decorators import requires_any_claim

from .forms import ReportIndexRequestForm
from .report_index import index_report

logger = logging.getLogger(__name__)


def _bad_request(message, errors=None):
    body = {"success": False, "message": message, "model": None}
    if errors is not None:
        body["errors"] = errors
    return JsonResponse(body, status=400)


@require_POST
@requires_any_claim(*GreateBeltClaims.REPORT_CLAIMS)
def report_index(request):
    """Paginated, filtered, sorted list of completed inspection cases.

    Failures inside the query are reported in the body (success=false)
    with status 200, as the host front end expects.
    """
    try:
        payload = json.loads(request.body or b"{}")
    except (ValueError, UnicodeDecodeError):
        return _bad_request("Request body is not valid JSON.")
    if not isinstance(payload, dict):
        return _bad_request("Request body must be a JSON object.")

    form = ReportIndexRequestForm(data=payload)
    if not form.is_valid():
        logger.info("Rejected report index request: %s", form.errors.as_json())
        return _bad_request("Invalid report request.", form.errors.get_json_data())

    result = index_report(form.to_request(), request.user)
    return JsonResponse(result.as_dict())
