"""Tests for ReportIndexRequestForm: JSON body validation."""
from django.test import SimpleTestCase

from apps.reports.forms import ReportIndexRequestForm
from apps.reports.report_index import DEFAULT_PAGE_SIZE


class ReportIndexRequestFormTest(SimpleTestCase):

    def test_full_request(self):
        form = ReportIndexRequestForm(data={
            "eformIds": [3, 7],
            "nameFilter": "Spor",
            "sort": "ItemName",
            "isSortDsc": True,
            "offset": 20,
            "pageSize": 10,
        })
        self.assertTrue(form.is_valid(), form.errors)
        request = form.to_request()
        self.assertEqual(request.eform_ids, [3, 7])
        self.assertEqual(request.name_filter, "Spor")
        self.assertEqual(request.sort, "ItemName")
        self.assertTrue(request.is_sort_dsc)
        self.assertEqual(request.offset, 20)
        self.assertEqual(request.page_size, 10)

    def test_defaults(self):
        form = ReportIndexRequestForm(data={})
        self.assertTrue(form.is_valid(), form.errors)
        request = form.to_request()
        self.assertEqual(request.eform_ids, [])
        self.assertEqual(request.name_filter, "")
        self.assertEqual(request.sort, "")
        self.assertFalse(request.is_sort_dsc)
        self.assertEqual(request.offset, 0)
        self.assertEqual(request.page_size, DEFAULT_PAGE_SIZE)

    def test_zero_page_size_allowed(self):
        form = ReportIndexRequestForm(data={"pageSize": 0})
        self.assertTrue(form.is_valid(), form.errors)
        self.assertEqual(form.to_request().page_size, 0)

    def test_comma_separated_ids(self):
        form = ReportIndexRequestForm(data={"eformIds": "1, 2,3"})
        self.assertTrue(form.is_valid(), form.errors)
        self.assertEqual(form.to_request().eform_ids, [1, 2, 3])

    def test_numeric_strings_in_list(self):
        form = ReportIndexRequestForm(data={"eformIds": ["4", 5]})
        self.assertTrue(form.is_valid(), form.errors)
        self.assertEqual(form.to_request().eform_ids, [4, 5])

    def test_non_numeric_ids_rejected(self):
        form = ReportIndexRequestForm(data={"eformIds": [1, "abc"]})
        self.assertFalse(form.is_valid())
        self.assertIn("eformIds", form.errors)

    def test_fractional_ids_rejected(self):
        form = ReportIndexRequestForm(data={"eformIds": [1.9]})
        self.assertFalse(form.is_valid())
        self.assertIn("eformIds", form.errors)

    def test_whole_number_floats_accepted(self):
        form = ReportIndexRequestForm(data={"eformIds": [2.0]})
        self.assertTrue(form.is_valid(), form.errors)
        self.assertEqual(form.to_request().eform_ids, [2])

    def test_boolean_ids_rejected(self):
        form = ReportIndexRequestForm(data={"eformIds": [True]})
        self.assertFalse(form.is_valid())

    def test_object_ids_rejected(self):
        form = ReportIndexRequestForm(data={"eformIds": {"a": 1}})
        self.assertFalse(form.is_valid())

    def test_negative_offset_rejected(self):
        form = ReportIndexRequestForm(data={"offset": -5})
        self.assertFalse(form.is_valid())
        self.assertIn("offset", form.errors)

    def test_sort_direction_as_string(self):
        form = ReportIndexRequestForm(data={"isSortDsc": "false"})
        self.assertTrue(form.is_valid(), form.errors)
        self.assertFalse(form.to_request().is_sort_dsc)

    def test_filter_is_not_stripped(self):
        form = ReportIndexRequestForm(data={"nameFilter": " km "})
        self.assertTrue(form.is_valid(), form.errors)
        self.assertEqual(form.to_request().name_filter, " km ")
