from __future__ import annotations

from unittest import mock

from django.test import Client, TestCase
from rest_framework import exceptions

from bogla.exceptions import NotFound, api_exception_handler, error_payload
from bogla.urls import API_VERSION


class HealthTests(TestCase):
    def test_health(self):
        r = Client().get("/api/health")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json(), {"ok": True, "ver": API_VERSION})


class ErrorEnvelopeTests(TestCase):
    def test_not_found_message(self):
        r = api_exception_handler(NotFound("Order"), {})
        self.assertEqual(r.status_code, 404)
        self.assertEqual(r.data, error_payload("not_found", "Order not found"))

    def test_field_errors_become_details(self):
        r = api_exception_handler(exceptions.ValidationError({"price": ["Price must be positive"]}), {})
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.data["error"]["message"], "Validation error")
        self.assertEqual(r.data["error"]["details"], {"price": ["Price must be positive"]})

    def test_unexpected_error_is_generic_500(self):
        view = mock.Mock()
        with self.assertLogs("bogla", level="ERROR"):
            r = api_exception_handler(RuntimeError("db password is hunter2"), {"view": view})
        self.assertEqual(r.status_code, 500)
        self.assertEqual(r.data["error"]["type"], "upstream_error")
        self.assertNotIn("hunter2", r.data["error"]["message"])
