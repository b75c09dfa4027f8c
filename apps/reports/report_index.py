"""Inspection report index: completed cases joined with their plannings.

The cases live in the eForm SDK database and the plannings in the Items
Planning database, so the two sides are queried separately and joined
in Python:

1. completed, non-removed cases for the requested eForm templates;
2. non-removed plannings for the same templates, with their Danish name;
3. completed (status 100) planning-case rows for the cases from step 1;
4. plannings joined to planning-cases on planning id; each case takes
   the name, planning id and template id of its LAST joined row.

The rows are then filtered by free text, counted, paginated and sorted.
By default only the returned page is sorted, which is how the report
has always behaved; GREATBELT_REPORT_SORT_BEFORE_PAGINATE sorts the
whole result instead.
"""
import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import List

from django.conf import settings
from django.db.models import OuterRef, Subquery
from django.utils import timezone

from apps.items_planning.models import (
    DANISH_LANGUAGE_ID,
    Planning,
    PlanningCase,
    PlanningNameTranslation,
)
from apps.sdk.models import Case

from .localization import LocalizationService
from .results import OperationDataResult, Paged, ReportIndexRow

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10

# Sort key sent by the front end -> ReportIndexRow attribute
SORT_COLUMNS = {
    "Name": "done_by",
    "ItemName": "item_name",
    "Id": "id",
    "FieldValue1": "custom_field_1",
    "DoneAtUserModifiable": "done_at_user_editable",
}

# Danish short date/time, the format users type into the search box.
TIMESTAMP_FORMAT = "%d-%m-%Y %H:%M:%S"


@dataclass
class ReportIndexRequest:
    eform_ids: List[int] = field(default_factory=list)
    name_filter: str = ""
    sort: str = ""
    is_sort_dsc: bool = False
    offset: int = 0
    page_size: int = DEFAULT_PAGE_SIZE


def _find_cases(eform_ids):
    return list(
        Case.objects.active()
        .filter(done_at__isnull=False, check_list_id__in=eform_ids)
        .order_by("pk")
        .values(
            "id",
            "field_value_1",
            "done_at_user_modifiable",
            "site__name",
            "is_archived",
        )
    )


def _find_plannings(eform_ids):
    danish_name = (
        PlanningNameTranslation.objects
        .filter(planning=OuterRef("pk"), language_id=DANISH_LANGUAGE_ID)
        .order_by("pk")
        .values("name")[:1]
    )
    return list(
        Planning.objects.active()
        .filter(related_eform_id__in=eform_ids)
        .annotate(danish_name=Subquery(danish_name))
        .order_by("pk")
        .values("id", "related_eform_id", "danish_name")
    )


def _find_planning_cases(case_ids):
    return list(
        PlanningCase.objects.active()
        .filter(
            microting_sdk_case_id__in=case_ids,
            status=PlanningCase.STATUS_COMPLETED,
        )
        .order_by("pk")
        .values("planning_id", "microting_sdk_case_id", "microting_sdk_eform_id")
    )


def _last_planning_per_case(plannings, planning_cases):
    """Inner-join plannings to planning-cases and keep the last match per case.

    Join order is planning order first, then planning-case order, so
    "last" means the latest planning-case of the latest planning.
    """
    by_planning = defaultdict(list)
    for planning_case in planning_cases:
        by_planning[planning_case["planning_id"]].append(planning_case)

    last = {}
    for planning in plannings:
        for planning_case in by_planning.get(planning["id"], ()):
            last[planning_case["microting_sdk_case_id"]] = {
                "name": planning["danish_name"],
                "planning_id": planning_case["planning_id"],
                "eform_id": planning_case["microting_sdk_eform_id"],
            }
    return last


def _build_rows(cases, joined):
    rows = []
    for case in cases:
        match = joined.get(case["id"], {})
        rows.append(ReportIndexRow(
            id=case["id"],
            custom_field_1=case["field_value_1"] or "",
            done_at_user_editable=case["done_at_user_modifiable"],
            done_by=case["site__name"] or "",
            is_archived=case["is_archived"],
            item_name=match.get("name"),
            item_id=match.get("planning_id"),
            template_id=match.get("eform_id"),
        ))
    return rows


def format_timestamp(value):
    if value is None:
        return ""
    if timezone.is_aware(value):
        value = timezone.localtime(value)
    return value.strftime(TIMESTAMP_FORMAT)


def matches_filter(row, name_filter):
    """True if the free-text filter occurs in any searchable column."""
    needle = (name_filter or "").lower()
    if not needle:
        return True
    haystacks = (
        str(row.id),
        row.custom_field_1.lower(),
        format_timestamp(row.done_at_user_editable),
        row.done_by.lower(),
        (row.item_name or "").lower(),
    )
    return any(needle in haystack for haystack in haystacks)


def sort_rows(rows, sort, descending=False):
    """Stable sort by a front-end sort key; unknown keys keep the order.

    Missing values sort first ascending and last descending. Text is
    compared case-insensitively, with the exact value as a tie-break.
    """
    column = SORT_COLUMNS.get(sort)
    if column is None:
        return list(rows)

    def key(row):
        value = getattr(row, column)
        if isinstance(value, str):
            return (True, value.casefold(), value)
        return (value is not None, value, value)

    return sorted(rows, key=key, reverse=descending)


def _user_display(user):
    if user is None or not getattr(user, "is_authenticated", False):
        return "anonymous"
    return user.get_full_name() or user.get_username()


def build_report_page(report_request, sort_before_paginate=False):
    """Run the report query and return a Paged result. Errors propagate."""
    eform_ids = list(report_request.eform_ids)

    cases = _find_cases(eform_ids)
    plannings = _find_plannings(eform_ids)
    planning_cases = _find_planning_cases([case["id"] for case in cases])
    joined = _last_planning_per_case(plannings, planning_cases)

    rows = [
        row for row in _build_rows(cases, joined)
        if matches_filter(row, report_request.name_filter)
    ]
    total = len(rows)

    if sort_before_paginate:
        rows = sort_rows(rows, report_request.sort, report_request.is_sort_dsc)

    start = report_request.offset
    page = rows[start:start + report_request.page_size]

    if not sort_before_paginate:
        page = sort_rows(page, report_request.sort, report_request.is_sort_dsc)

    return Paged(total=total, entities=page)


def index_report(report_request, user, localization=None):
    """Report index as an OperationDataResult.

    Any failure is logged with the requesting user and turned into a
    failure result carrying a localized message.
    """
    localization = localization or LocalizationService()
    sort_before_paginate = getattr(settings, "GREATBELT_REPORT_SORT_BEFORE_PAGINATE", False)
    try:
        page = build_report_page(report_request, sort_before_paginate=sort_before_paginate)
    except Exception:
        logger.exception(
            "User %s logged in from report index (eForms %s)",
            _user_display(user),
            report_request.eform_ids,
        )
        return OperationDataResult(
            success=False,
            message=localization.get_string("ErrorWhileReadCases"),
        )
    return OperationDataResult(success=True, model=page)
