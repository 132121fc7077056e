from __future__ import annotations

from django.core import signing
from django.test import Client, TestCase, override_settings

from sellers.models import Seller
from sellers.tokens import TOKEN_SALT, InvalidToken, issue_token, read_token

LOGIN_URL = "/api/auth/login"


def make_seller(email="seller@example.com", password="password123"):
    seller = Seller(name="Test Seller", slug="test-seller", email=email)
    seller.set_password(password)
    seller.save()
    return seller


class LoginTests(TestCase):
    def setUp(self):
        self.client = Client()
        self.seller = make_seller()

    def test_login_returns_seller_and_token(self):
        r = self.client.post(LOGIN_URL, {"email": "seller@example.com", "password": "password123"}, content_type="application/json")
        self.assertEqual(r.status_code, 200)
        body = r.json()
        self.assertEqual(body["seller"]["email"], "seller@example.com")
        self.assertNotIn("password", body["seller"])
        self.assertEqual(read_token(body["token"]), str(self.seller.pk))

    def test_email_is_case_insensitive(self):
        r = self.client.post(LOGIN_URL, {"email": "Seller@Example.com", "password": "password123"}, content_type="application/json")
        self.assertEqual(r.status_code, 200)

    def test_wrong_password(self):
        with self.assertLogs("sellers.services.accounts", level="INFO") as logs:
            r = self.client.post(LOGIN_URL, {"email": "seller@example.com", "password": "nope-nope"}, content_type="application/json")
        self.assertEqual(r.status_code, 401)
        self.assertEqual(r.json()["error"]["type"], "unauthorized")
        self.assertNotIn("nope-nope", "\n".join(logs.output))

    def test_unknown_email(self):
        r = self.client.post(LOGIN_URL, {"email": "ghost@example.com", "password": "password123"}, content_type="application/json")
        self.assertEqual(r.status_code, 401)

    def test_malformed_body(self):
        r = self.client.post(LOGIN_URL, {"email": "not-an-email"}, content_type="application/json")
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.json()["error"]["type"], "validation_error")


class TokenTests(TestCase):
    def setUp(self):
        self.client = Client()
        self.seller = make_seller()

    def _get(self, token):
        return self.client.get("/api/checkout-links", HTTP_AUTHORIZATION=f"Bearer {token}")

    def test_valid_token(self):
        self.assertEqual(self._get(issue_token(self.seller)).status_code, 200)

    def test_tampered_token(self):
        token = issue_token(self.seller)
        self.assertEqual(self._get(token[:-2] + "xx").status_code, 401)

    def test_forged_payload_is_rejected(self):
        forged = signing.dumps({"sid": str(self.seller.pk)}, salt="something-else")
        with self.assertRaises(InvalidToken):
            read_token(forged)
        self.assertEqual(self._get(forged).status_code, 401)

    @override_settings(BOGLA_TOKEN_MAX_AGE=-1)
    def test_expired_token(self):
        r = self._get(issue_token(self.seller))
        self.assertEqual(r.status_code, 401)
        self.assertEqual(r.json()["error"]["message"], "Token expired.")

    def test_token_for_deleted_seller(self):
        token = issue_token(self.seller)
        self.seller.delete()
        self.assertEqual(self._get(token).status_code, 401)

    def test_missing_header_challenges_with_bearer(self):
        r = self.client.get("/api/checkout-links")
        self.assertEqual(r.status_code, 401)
        self.assertEqual(r["WWW-Authenticate"], "Bearer")

    def test_salt_is_stable(self):
        payload = signing.loads(issue_token(self.seller), salt=TOKEN_SALT)
        self.assertEqual(payload, {"sid": str(self.seller.pk)})
