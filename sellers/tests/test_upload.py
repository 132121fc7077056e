from __future__ import annotations

from unittest import mock

from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import Client, TestCase, override_settings

from sellers.models import Seller
from sellers.services.media import UPLOAD_TRANSFORMATION
from sellers.tokens import issue_token

UPLOAD_URL = "/api/upload"


@override_settings(BOGLA_UPLOAD_FOLDER="bogla-products", BOGLA_UPLOAD_MAX_BYTES=1024)
class UploadTests(TestCase):
    def setUp(self):
        self.client = Client()
        seller = Seller(name="Test Seller", slug="test-seller", email="seller@example.com")
        seller.set_password("password123")
        seller.save()
        self.headers = {"HTTP_AUTHORIZATION": f"Bearer {issue_token(seller)}"}

    def _image(self, size=100, content_type="image/png", name="hoodie.png"):
        return SimpleUploadedFile(name, b"\x89PNG" + b"0" * (size - 4), content_type=content_type)

    @mock.patch("cloudinary.uploader.upload")
    def test_upload_forwards_to_cdn(self, upload):
        upload.return_value = {"secure_url": "https://res.cloudinary.com/x/hoodie.png", "public_id": "bogla-products/hoodie"}
        r = self.client.post(UPLOAD_URL, {"file": self._image()}, **self.headers)
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json(), {"url": "https://res.cloudinary.com/x/hoodie.png", "publicId": "bogla-products/hoodie"})

        _, kwargs = upload.call_args
        self.assertEqual(kwargs["folder"], "bogla-products")
        self.assertEqual(kwargs["resource_type"], "image")
        self.assertEqual(kwargs["transformation"], UPLOAD_TRANSFORMATION)

    @mock.patch("cloudinary.uploader.upload")
    def test_rejects_missing_file(self, upload):
        r = self.client.post(UPLOAD_URL, {}, **self.headers)
        self.assertEqual(r.status_code, 400)
        self.assertIn("file", r.json()["error"]["details"])
        upload.assert_not_called()

    @mock.patch("cloudinary.uploader.upload")
    def test_rejects_wrong_type(self, upload):
        r = self.client.post(UPLOAD_URL, {"file": self._image(content_type="application/pdf", name="a.pdf")}, **self.headers)
        self.assertEqual(r.status_code, 400)
        upload.assert_not_called()

    @mock.patch("cloudinary.uploader.upload")
    def test_rejects_oversize(self, upload):
        r = self.client.post(UPLOAD_URL, {"file": self._image(size=2048)}, **self.headers)
        self.assertEqual(r.status_code, 400)
        upload.assert_not_called()

    @mock.patch("cloudinary.uploader.upload", side_effect=RuntimeError("cloud down"))
    def test_cdn_failure_is_generic_500(self, upload):
        with self.assertLogs("sellers.services.media", level="ERROR"):
            r = self.client.post(UPLOAD_URL, {"file": self._image()}, **self.headers)
        self.assertEqual(r.status_code, 500)
        body = r.json()
        self.assertEqual(body["error"]["type"], "upstream_error")
        self.assertNotIn("cloud down", body["error"]["message"])

    def test_requires_seller(self):
        r = self.client.post(UPLOAD_URL, {"file": self._image()})
        self.assertEqual(r.status_code, 401)
