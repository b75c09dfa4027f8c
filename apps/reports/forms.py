"""Validation for the report index request body."""
from django import forms
from django.core.exceptions import ValidationError
from django.utils.translation import gettext_lazy as _

from .report_index import DEFAULT_PAGE_SIZE, ReportIndexRequest


class IntegerListField(forms.Field):
    """A JSON list of integers (a comma-separated string is also accepted)."""

    default_error_messages = {
        "invalid": _("Enter a list of whole numbers."),
    }

    def to_python(self, value):
        if value in self.empty_values:
            return []
        if isinstance(value, str):
            value = [part for part in (p.strip() for p in value.split(",")) if part]
        if not isinstance(value, (list, tuple)):
            raise ValidationError(self.error_messages["invalid"], code="invalid")
        result = []
        for item in value:
            # bool is an int subclass; reject it explicitly
            if isinstance(item, bool):
                raise ValidationError(self.error_messages["invalid"], code="invalid")
            if isinstance(item, float) and not item.is_integer():
                raise ValidationError(self.error_messages["invalid"], code="invalid")
            try:
                result.append(int(item))
            except (TypeError, ValueError):
                raise ValidationError(self.error_messages["invalid"], code="invalid")
        return result


class ReportIndexRequestForm(forms.Form):
    """Field names match the camelCase JSON keys sent by the front end."""

    eformIds = IntegerListField(required=False)
    nameFilter = forms.CharField(required=False, strip=False, max_length=255)
    sort = forms.CharField(required=False, max_length=50)
    isSortDsc = forms.BooleanField(required=False)
    offset = forms.IntegerField(required=False, min_value=0)
    pageSize = forms.IntegerField(required=False, min_value=0)

    def to_request(self):
        data = self.cleaned_data
        return ReportIndexRequest(
            eform_ids=data["eformIds"],
            name_filter=data["nameFilter"] or "",
            sort=data["sort"] or "",
            is_sort_dsc=data["isSortDsc"],
            offset=data["offset"] if data["offset"] is not None else 0,
            page_size=data["pageSize"] if data["pageSize"] is not None else DEFAULT_PAGE_SIZE,
        )
