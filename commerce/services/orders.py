"""
commerce.services.orders

Order Processor + Status Tracker.

submit_order():
  1. resolve the checkout link (404 if unknown)
  2. total_price = link.price * quantity, fixed for the life of the order
  3. copy the buyer contact into contact_snapshot
  4. saveDetails -> upsert Customer on (seller, phone), marketing opt-in on
  5. create the order (payment=new, delivery=pending)

update_order_status():
  payment and delivery status move independently; any value may follow any
  other (sellers correct mistakes by hand).
"""
from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, Optional, Tuple

from django.conf import settings
from django.db import transaction
from django.utils import timezone
from rest_framework import serializers

from commerce.models import CheckoutLink, Customer, Order
from commerce.services.base import fetch_or_404

logger = logging.getLogger(__name__)

SNAPSHOT_FIELDS = (
    ("fullName", "full_name"),
    ("phone", "phone"),
    ("city", "city"),
    ("address", "address"),
    ("username", "username"),
)


def compute_total(price: int, quantity: int) -> int:
    return price * quantity


def build_contact_snapshot(buyer: Dict[str, Any]) -> Dict[str, Any]:
    """Detached copy of the buyer's contact fields, keyed as the buyer form sends them."""
    snapshot = {}
    for wire_key, key in SNAPSHOT_FIELDS:
        value = buyer.get(key)
        if value is None and key == "username":
            continue
        snapshot[wire_key] = value
    return snapshot


def _check_against_link(link: CheckoutLink, quantity: int, selected_size: str, delivery_method: str) -> None:
    errors = {}
    if settings.BOGLA_ENFORCE_MAX_QTY and link.max_qty and quantity > link.max_qty:
        errors["quantity"] = [f"Quantity cannot exceed {link.max_qty}"]
    if link.sizes and selected_size not in link.sizes:
        errors["selectedSize"] = ["Selected size is not offered for this product"]
    if delivery_method not in link.enabled_delivery_methods():
        errors["deliveryMethod"] = ["Delivery method is not available for this product"]
    if errors:
        raise serializers.ValidationError(errors)


def upsert_customer(seller, buyer: Dict[str, Any]) -> Customer:
    """
    One Customer per (seller, phone). Saving details always opts the buyer
    into marketing; there is no separate consent flag.
    """
    defaults = {
        "full_name": buyer["full_name"],
        "city": buyer.get("city") or "",
        "address": buyer.get("address") or "",
        "marketing_opt_in": True,
        "last_used_at": timezone.now(),
    }
    # an omitted username keeps whatever was stored before
    if buyer.get("username") is not None:
        defaults["username"] = buyer["username"]

    customer, created = Customer.objects.update_or_create(
        seller=seller,
        phone=buyer["phone"],
        defaults=defaults,
    )
    logger.info(
        "customer_%s seller=%s customer=%s",
        "created" if created else "refreshed",
        seller.pk,
        customer.pk,
    )
    return customer


def submit_order(data: Dict[str, Any]) -> Order:
    link = fetch_or_404(
        CheckoutLink.objects.select_related("seller"),
        "Checkout link",
        pk=data["checkout_link_id"],
    )
    quantity = data["quantity"]
    _check_against_link(link, quantity, data["selected_size"], data["delivery_method"])

    buyer = data["buyer"]
    snapshot = build_contact_snapshot(buyer)

    with transaction.atomic():
        customer = upsert_customer(link.seller, buyer) if data.get("save_details") else None
        order = Order.objects.create(
            seller=link.seller,
            checkout_link=link,
            customer=customer,
            quantity=quantity,
            total_price=compute_total(link.price, quantity),
            selected_size=data["selected_size"],
            delivery_method=data["delivery_method"],
            contact_snapshot=snapshot,
        )

    logger.info(
        "order_created order=%s seller=%s link=%s qty=%s total=%s customer=%s",
        order.pk, link.seller_id, link.pk, quantity, order.total_price,
        customer.pk if customer else "-",
    )
    return order


def _order_queryset():
    return Order.objects.select_related("seller", "checkout_link", "customer")


def get_public_order(order_id) -> Order:
    return fetch_or_404(_order_queryset(), "Order", pk=order_id)


def get_seller_order(seller, order_id) -> Order:
    return fetch_or_404(_order_queryset().filter(seller=seller), "Order", pk=order_id)


def list_orders(seller, page: int = 1, limit: int = 20, order_id: Optional[str] = None) -> Tuple[list, int]:
    """
    Newest first. With `order_id` the page holds at most that one order; an id
    that is malformed or belongs to another seller yields an empty page.
    """
    qs = _order_queryset().filter(seller=seller).order_by("-created_at")
    if order_id:
        try:
            qs = qs.filter(pk=uuid.UUID(str(order_id)))
        except ValueError:
            return [], 0
    offset = (page - 1) * limit
    return list(qs[offset:offset + limit]), qs.count()


def update_order_status(
    seller,
    order_id,
    payment_status: Optional[str] = None,
    delivery_status: Optional[str] = None,
) -> Order:
    order = get_seller_order(seller, order_id)

    changed = []
    if payment_status is not None:
        logger.info("order_payment_status order=%s %s->%s", order.pk, order.payment_status, payment_status)
        order.payment_status = payment_status
        changed.append("payment_status")
    if delivery_status is not None:
        logger.info("order_delivery_status order=%s %s->%s", order.pk, order.delivery_status, delivery_status)
        order.delivery_status = delivery_status
        changed.append("delivery_status")

    if changed:
        order.save(update_fields=changed + ["updated_at"])
    return order
