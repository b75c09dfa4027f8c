"""Items Planning tables (owned by the Items Planning plugin).

Routed to the "items_planning" database by greatbelt.db_router. The
SDK ids stored here are plain integers: they point into another
database, so they cannot be foreign keys.
"""
from django.db import models

from apps.sdk.models import ActiveQuerySet, WorkflowStates

DANISH_LANGUAGE_ID = 1


class Planning(models.Model):
    related_eform_id = models.IntegerField()
    workflow_state = models.CharField(
        max_length=255, choices=WorkflowStates.CHOICES, default=WorkflowStates.CREATED,
    )

    objects = ActiveQuerySet.as_manager()

    class Meta:
        app_label = "items_planning"
        db_table = "Plannings"

    def __str__(self):
        return f"Planning {self.pk} (eForm {self.related_eform_id})"


class PlanningNameTranslation(models.Model):
    planning = models.ForeignKey(
        Planning, on_delete=models.CASCADE, related_name="name_translations",
    )
    language_id = models.IntegerField()
    name = models.CharField(max_length=255, blank=True, default="")

    class Meta:
        app_label = "items_planning"
        db_table = "PlanningNameTranslation"

    def __str__(self):
        return self.name


class PlanningCase(models.Model):
    """Links a planning to the SDK case that fulfilled it."""

    STATUS_COMPLETED = 100

    planning = models.ForeignKey(
        Planning, on_delete=models.CASCADE, related_name="planning_cases",
    )
    microting_sdk_case_id = models.IntegerField()
    microting_sdk_eform_id = models.IntegerField()
    status = models.IntegerField(default=0)
    workflow_state = models.CharField(
        max_length=255, choices=WorkflowStates.CHOICES, default=WorkflowStates.CREATED,
    )

    objects = ActiveQuerySet.as_manager()

    class Meta:
        app_label = "items_planning"
        db_table = "PlanningCases"

    def __str__(self):
        return f"PlanningCase {self.pk} (case {self.microting_sdk_case_id})"
