"""eForm SDK tables read by the report.

Only the columns the plugin uses are modelled. The SDK soft-deletes
rows by setting workflow_state to "removed".
"""
from django.db import models


class WorkflowStates:
    CREATED = "created"
    PROCESSED = "processed"
    RETRACTED = "retracted"
    REMOVED = "removed"

    CHOICES = [
        (CREATED, "Created"),
        (PROCESSED, "Processed"),
        (RETRACTED, "Retracted"),
        (REMOVED, "Removed"),
    ]


class ActiveQuerySet(models.QuerySet):

    def active(self):
        """Rows that have not been soft-deleted."""
        return self.exclude(workflow_state=WorkflowStates.REMOVED)


class Site(models.Model):
    """A device/worker that completes cases."""

    name = models.CharField(max_length=255, blank=True, default="")
    workflow_state = models.CharField(
        max_length=255, choices=WorkflowStates.CHOICES, default=WorkflowStates.CREATED,
    )

    objects = ActiveQuerySet.as_manager()

    class Meta:
        app_label = "sdk"
        db_table = "sites"

    def __str__(self):
        return self.name


class CheckList(models.Model):
    """An eForm template."""

    label = models.CharField(max_length=255, blank=True, default="")
    workflow_state = models.CharField(
        max_length=255, choices=WorkflowStates.CHOICES, default=WorkflowStates.CREATED,
    )

    objects = ActiveQuerySet.as_manager()

    class Meta:
        app_label = "sdk"
        db_table = "check_lists"

    def __str__(self):
        return self.label


class Case(models.Model):
    """One filled-in eForm."""

    check_list = models.ForeignKey(
        CheckList, on_delete=models.CASCADE, null=True, related_name="cases",
    )
    site = models.ForeignKey(
        Site, on_delete=models.SET_NULL, null=True, blank=True, related_name="cases",
    )
    workflow_state = models.CharField(
        max_length=255, choices=WorkflowStates.CHOICES, default=WorkflowStates.CREATED,
    )
    done_at = models.DateTimeField(null=True, blank=True)
    # Completion time as corrected by the user; this is what the report shows.
    done_at_user_modifiable = models.DateTimeField(null=True, blank=True)
    field_value_1 = models.CharField(max_length=255, null=True, blank=True)
    is_archived = models.BooleanField(default=False)

    objects = ActiveQuerySet.as_manager()

    class Meta:
        app_label = "sdk"
        db_table = "cases"

    def __str__(self):
        return f"Case {self.pk}"
