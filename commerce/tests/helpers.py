"""Shared fixtures for the commerce API tests."""
from __future__ import annotations

from commerce.models import CheckoutLink
from sellers.models import Seller
from sellers.tokens import issue_token


def make_seller(slug: str = "test-seller", email: str = "seller@example.com", password: str = "password123") -> Seller:
    seller = Seller(name=slug.replace("-", " ").title(), slug=slug, email=email)
    seller.set_password(password)
    seller.save()
    return seller


def auth(seller) -> dict:
    return {"HTTP_AUTHORIZATION": f"Bearer {issue_token(seller)}"}


def link_payload(**overrides) -> dict:
    payload = {
        "name": "White Oversized Hoodie",
        "price": 150000,
        "currency": "UZS",
        "defaultQty": 1,
        "maxQty": 5,
        "imageUrl": "",
        "sizes": ["S", "M", "L"],
        "deliveryOptions": {"courierCity": True, "pickup": True, "region": False},
        "paymentNote": "Pay via Payme or Uzcard to this card: 8600 1234 5678 9012",
    }
    payload.update(overrides)
    return payload


def make_link(seller, **overrides) -> CheckoutLink:
    fields = {
        "name": "White Oversized Hoodie",
        "slug": "white-hoodie",
        "price": 150000,
        "currency": "UZS",
        "default_qty": 1,
        "max_qty": 5,
        "sizes": ["S", "M", "L"],
        "courier_city": True,
        "pickup": True,
        "region": False,
        "payment_note": "Pay via Payme or Uzcard to this card: 8600 1234 5678 9012",
    }
    fields.update(overrides)
    return CheckoutLink.objects.create(seller=seller, **fields)


def order_payload(link, **overrides) -> dict:
    payload = {
        "checkoutLinkId": str(link.pk),
        "quantity": 1,
        "selectedSize": "M",
        "deliveryMethod": "courierCity",
        "buyer": {
            "fullName": "Aziz Karimov",
            "phone": "+998901234567",
            "city": "Tashkent",
            "address": "Amir Temur 1",
        },
        "saveDetails": False,
    }
    payload.update(overrides)
    return payload
