"""
commerce.services.catalog

Checkout links: create / update / delete / list / get, scoped to the owning
seller, plus the public buyer-page lookup and visit counter.

Slugs are derived from the product name once, at creation, and are never
changed afterwards so shared links keep working.
"""
from __future__ import annotations

import logging
import re
from typing import Any, Dict

from django.db.models import Count, F
from django.utils import timezone

from commerce.models import CheckoutLink
from commerce.services.base import fetch_or_404
from sellers.models import Seller

logger = logging.getLogger(__name__)

SLUG_MAX_LENGTH = 50
_NON_ALNUM_RUN = re.compile(r"[^a-z0-9]+")

EDITABLE_FIELDS = (
    "name",
    "price",
    "currency",
    "default_qty",
    "max_qty",
    "image_url",
    "sizes",
    "courier_city",
    "pickup",
    "region",
    "payment_note",
)


def _epoch_millis() -> int:
    return int(timezone.now().timestamp() * 1000)


def derive_slug(name: str) -> str:
    """
    "White Oversized Hoodie!" -> "white-oversized-hoodie"
    Names with no latin letters/digits fall back to "product-<millis>".
    """
    slug = _NON_ALNUM_RUN.sub("-", (name or "").lower()).strip("-")[:SLUG_MAX_LENGTH]
    return slug or f"product-{_epoch_millis()}"


def unique_slug(seller, base: str) -> str:
    # single retry with a time suffix; slugs are never reused
    if CheckoutLink.objects.filter(seller=seller, slug=base).exists():
        return f"{base}-{_epoch_millis()}"
    return base


def _assign(link: CheckoutLink, data: Dict[str, Any]) -> None:
    for field in EDITABLE_FIELDS:
        setattr(link, field, data.get(field, getattr(link, field)))
    link.sizes = list(link.sizes or [])
    link.image_url = link.image_url or ""


def _owned(seller):
    return CheckoutLink.objects.filter(seller=seller).annotate(order_count=Count("orders"))


def create_checkout_link(seller, data: Dict[str, Any]) -> CheckoutLink:
    link = CheckoutLink(seller=seller, slug=unique_slug(seller, derive_slug(data["name"])))
    _assign(link, data)
    link.save()
    link.order_count = 0
    logger.info("checkout_link_created seller=%s link=%s slug=%s", seller.pk, link.pk, link.slug)
    return link


def get_checkout_link(seller, link_id) -> CheckoutLink:
    return fetch_or_404(_owned(seller), "Checkout link", pk=link_id)


def list_checkout_links(seller):
    return _owned(seller).order_by("-created_at")


def update_checkout_link(seller, link_id, data: Dict[str, Any]) -> CheckoutLink:
    link = get_checkout_link(seller, link_id)
    _assign(link, data)
    link.save()
    logger.info("checkout_link_updated seller=%s link=%s", seller.pk, link.pk)
    return link


def delete_checkout_link(seller, link_id) -> None:
    link = get_checkout_link(seller, link_id)
    order_count = link.order_count
    link.delete()
    logger.info(
        "checkout_link_deleted seller=%s link=%s cascaded_orders=%s",
        seller.pk, link_id, order_count,
    )


def get_public_checkout_link(seller_slug: str, checkout_slug: str) -> CheckoutLink:
    seller = fetch_or_404(Seller.objects.all(), "Seller", slug=seller_slug)
    link = fetch_or_404(
        CheckoutLink.objects.select_related("seller"),
        "Checkout link",
        seller=seller,
        slug=checkout_slug,
    )
    return link


def record_visit(seller_slug: str, checkout_slug: str) -> bool:
    """
    Bump the visit counter. Never raises: the buyer page fires this and
    moves on, so failures are only logged.
    """
    try:
        updated = CheckoutLink.objects.filter(
            seller__slug=seller_slug,
            slug=checkout_slug,
        ).update(visits=F("visits") + 1)
    except Exception:
        logger.warning("visit_track_failed seller=%s slug=%s", seller_slug, checkout_slug, exc_info=True)
        return False

    if not updated:
        logger.info("visit_track_miss seller=%s slug=%s", seller_slug, checkout_slug)
    return bool(updated)
