"""Claims (permissions) the plugin contributes to the host.

Each claim is a Django permission codename on the ``reports`` app; see
apps.reports.models.ReportAccess.
"""

CLAIMS_APP_LABEL = "reports"


class GreateBeltClaims:
    GET_ORESUND_REPORTS = "greate_belt_pn_oresund_reports_get"
    GET_GREAT_BELT_REPORTS = "greate_belt_pn_greate_belt_reports_get"

    REPORT_CLAIMS = (GET_ORESUND_REPORTS, GET_GREAT_BELT_REPORTS)


def permission_name(claim):
    """Full permission string for ``user.has_perm()``."""
    return f"{CLAIMS_APP_LABEL}.{claim}"
