from __future__ import annotations

from django.test import Client, TestCase

from commerce.models import Order
from commerce.tests.helpers import auth, make_link, make_seller, order_payload

ORDERS_URL = "/api/orders"


class OrderStatusTests(TestCase):
    def setUp(self):
        self.client = Client()
        self.seller = make_seller()
        self.headers = auth(self.seller)
        link = make_link(self.seller)
        r = self.client.post(ORDERS_URL, order_payload(link, quantity=2), content_type="application/json")
        self.order_id = r.json()["id"]

    def _patch_collection(self, body, **headers):
        return self.client.patch(ORDERS_URL, body, content_type="application/json", **(headers or self.headers))

    def test_payment_only_leaves_delivery(self):
        r = self._patch_collection({"orderId": self.order_id, "paymentStatus": "paid"})
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["paymentStatus"], "paid")
        self.assertEqual(r.json()["deliveryStatus"], "pending")

    def test_delivery_only_leaves_payment(self):
        self._patch_collection({"orderId": self.order_id, "paymentStatus": "paid"})
        r = self._patch_collection({"orderId": self.order_id, "deliveryStatus": "sent"})
        order = Order.objects.get(pk=self.order_id)
        self.assertEqual(r.status_code, 200)
        self.assertEqual((order.payment_status, order.delivery_status), ("paid", "sent"))

    def test_any_transition_allowed(self):
        self._patch_collection({"orderId": self.order_id, "deliveryStatus": "delivered"})
        r = self._patch_collection({"orderId": self.order_id, "deliveryStatus": "pending", "paymentStatus": "cancelled"})
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["deliveryStatus"], "pending")

    def test_detail_patch(self):
        r = self.client.patch(
            f"{ORDERS_URL}/{self.order_id}", {"deliveryStatus": "delivered"},
            content_type="application/json", **self.headers,
        )
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["deliveryStatus"], "delivered")

    def test_neither_field_is_rejected(self):
        r = self._patch_collection({"orderId": self.order_id})
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.json()["error"]["type"], "validation_error")

    def test_unknown_status_value(self):
        r = self._patch_collection({"orderId": self.order_id, "paymentStatus": "refunded"})
        self.assertEqual(r.status_code, 400)

    def test_other_seller_cannot_update(self):
        intruder = make_seller(slug="other", email="other@example.com")
        r = self._patch_collection({"orderId": self.order_id, "paymentStatus": "paid"}, **auth(intruder))
        self.assertEqual(r.status_code, 404)
        self.assertEqual(Order.objects.get(pk=self.order_id).payment_status, "new")

    def test_requires_token(self):
        r = self.client.patch(
            ORDERS_URL, {"orderId": self.order_id, "paymentStatus": "paid"},
            content_type="application/json",
        )
        self.assertEqual(r.status_code, 401)

    def test_frozen_fields_are_not_rewritten(self):
        order = Order.objects.get(pk=self.order_id)
        order.total_price = 1
        order.contact_snapshot = {}
        order.payment_status = "paid"
        order.save()

        order.refresh_from_db()
        self.assertEqual(order.total_price, 300000)
        self.assertEqual(order.contact_snapshot["fullName"], "Aziz Karimov")
        self.assertEqual(order.payment_status, "paid")
