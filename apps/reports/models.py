from django.db import models

from apps.plugin.claims import GreateBeltClaims


class ReportAccess(models.Model):
    """Holder for the report claims; has no table of its own."""

    class Meta:
        managed = False
        app_label = "reports"
        default_permissions = ()
        permissions = [
            (GreateBeltClaims.GET_ORESUND_REPORTS, "Obtain Øresund reports"),
            (GreateBeltClaims.GET_GREAT_BELT_REPORTS, "Obtain Greate Belt reports"),
        ]
