"""Tests for the report index JSON endpoint.

Covers:
- Authentication (401) and claim checks (403)
- Method and body validation (405, 400)
- Successful response shape (camelCase rows, total)
- Failure results carried in the body with a localized message
"""
import json
from datetime import datetime
from unittest.mock import patch

from django.contrib.auth.models import Permission, User
from django.test import TestCase
from django.utils import timezone

from apps.items_planning.models import Planning, PlanningCase, PlanningNameTranslation
from apps.plugin.claims import GreateBeltClaims
from apps.sdk.models import Case, CheckList, Site

URL = "/api/greate-belt-pn/report/index/"


def _claim(codename):
    return Permission.objects.get(content_type__app_label="reports", codename=codename)


class ReportIndexViewTest(TestCase):

    databases = {"default", "items_planning"}

    @classmethod
    def setUpTestData(cls):
        cls.template = CheckList.objects.create(label="Sporanlæg")
        site = Site.objects.create(name="Anna Jensen")
        cls.case = Case.objects.create(
            check_list=cls.template, site=site, done_at=timezone.now(),
            done_at_user_modifiable=timezone.make_aware(datetime(2026, 3, 14, 9, 30)),
            field_value_1="KM 12.4",
        )
        planning = Planning.objects.create(related_eform_id=cls.template.pk)
        PlanningNameTranslation.objects.create(planning=planning, language_id=1, name="Sporskifte 1")
        PlanningCase.objects.create(
            planning=planning, microting_sdk_case_id=cls.case.pk,
            microting_sdk_eform_id=cls.template.pk, status=100,
        )
        cls.planning = planning

        cls.inspector = User.objects.create_user(username="inspector", password="testpass123")
        cls.inspector.user_permissions.add(_claim(GreateBeltClaims.GET_ORESUND_REPORTS))
        cls.great_belt_user = User.objects.create_user(username="gb", password="testpass123")
        cls.great_belt_user.user_permissions.add(_claim(GreateBeltClaims.GET_GREAT_BELT_REPORTS))
        cls.no_claims = User.objects.create_user(username="noclaims", password="testpass123")

    def _post(self, body, **extra):
        data = body if isinstance(body, str) else json.dumps(body)
        return self.client.post(URL, data=data, content_type="application/json", **extra)

    # --- Access ---

    def test_anonymous_gets_401(self):
        resp = self._post({"eformIds": [self.template.pk]})
        self.assertEqual(resp.status_code, 401)
        self.assertFalse(resp.json()["success"])

    def test_user_without_claim_gets_403(self):
        self.client.login(username="noclaims", password="testpass123")
        resp = self._post({"eformIds": [self.template.pk]})
        self.assertEqual(resp.status_code, 403)

    def test_either_report_claim_is_enough(self):
        for username in ("inspector", "gb"):
            self.client.login(username=username, password="testpass123")
            resp = self._post({"eformIds": [self.template.pk]})
            self.assertEqual(resp.status_code, 200, username)

    def test_superuser_is_allowed(self):
        User.objects.create_superuser(username="root", password="testpass123")
        self.client.login(username="root", password="testpass123")
        resp = self._post({"eformIds": [self.template.pk]})
        self.assertEqual(resp.status_code, 200)

    def test_get_not_allowed(self):
        self.client.login(username="inspector", password="testpass123")
        resp = self.client.get(URL)
        self.assertEqual(resp.status_code, 405)

    # --- Validation ---

    def test_invalid_json_rejected(self):
        self.client.login(username="inspector", password="testpass123")
        resp = self._post("{not json")
        self.assertEqual(resp.status_code, 400)

    def test_non_object_body_rejected(self):
        self.client.login(username="inspector", password="testpass123")
        resp = self._post([1, 2, 3])
        self.assertEqual(resp.status_code, 400)

    def test_negative_page_size_rejected(self):
        self.client.login(username="inspector", password="testpass123")
        resp = self._post({"eformIds": [self.template.pk], "pageSize": -1})
        self.assertEqual(resp.status_code, 400)
        self.assertIn("pageSize", resp.json()["errors"])

    # --- Results ---

    def test_success_response_shape(self):
        self.client.login(username="inspector", password="testpass123")
        resp = self._post({
            "eformIds": [self.template.pk],
            "nameFilter": "",
            "sort": "Id",
            "isSortDsc": False,
            "offset": 0,
            "pageSize": 10,
        })
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertTrue(body["success"])
        self.assertEqual(body["model"]["total"], 1)
        row = body["model"]["entities"][0]
        self.assertEqual(row["id"], self.case.pk)
        self.assertEqual(row["customField1"], "KM 12.4")
        self.assertEqual(row["doneBy"], "Anna Jensen")
        self.assertEqual(row["itemName"], "Sporskifte 1")
        self.assertEqual(row["itemId"], self.planning.pk)
        self.assertEqual(row["templateId"], self.template.pk)
        self.assertFalse(row["isArchived"])
        self.assertTrue(row["doneAtUserEditable"].startswith("2026-03-14"))

    def test_filter_passed_through(self):
        self.client.login(username="inspector", password="testpass123")
        resp = self._post({"eformIds": [self.template.pk], "nameFilter": "nothing like it"})
        self.assertEqual(resp.json()["model"], {"total": 0, "entities": []})

    def test_failure_result_is_localized_english(self):
        self.client.login(username="inspector", password="testpass123")
        with patch(
            "apps.reports.report_index.build_report_page",
            side_effect=RuntimeError("boom"),
        ):
            with self.assertLogs("apps.reports.report_index", level="ERROR"):
                resp = self._post({"eformIds": [self.template.pk]}, HTTP_ACCEPT_LANGUAGE="en")
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertFalse(body["success"])
        self.assertIsNone(body["model"])
        self.assertEqual(body["message"], "Error while reading cases")

    def test_failure_result_is_localized_danish(self):
        self.client.login(username="inspector", password="testpass123")
        with patch(
            "apps.reports.report_index.build_report_page",
            side_effect=RuntimeError("boom"),
        ):
            with self.assertLogs("apps.reports.report_index", level="ERROR"):
                resp = self._post({"eformIds": [self.template.pk]}, HTTP_ACCEPT_LANGUAGE="da")
        self.assertEqual(resp.json()["message"], "Fejl ved indlæsning af sager")
