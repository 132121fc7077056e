"""
commerce.models.checkout_link
A seller-configured product page addressed by /b/<seller.slug>/<slug>.
"""
from django.db import models

from .base import TimeStampedModel


class DeliveryMethod(models.TextChoices):
    COURIER_CITY = "courierCity", "Courier (city)"
    PICKUP = "pickup", "Pickup"
    REGION = "region", "Region"


class CheckoutLink(TimeStampedModel):
    seller = models.ForeignKey("sellers.Seller", on_delete=models.CASCADE, related_name="checkout_links")

    name = models.CharField(max_length=200)
    slug = models.SlugField(max_length=80, help_text="Unique per seller; never changed after creation.")
    price = models.PositiveIntegerField(help_text="Whole currency units (no minor units).")
    currency = models.CharField(max_length=8, default="UZS")
    default_qty = models.PositiveIntegerField(default=1)
    max_qty = models.PositiveIntegerField(null=True, blank=True)
    image_url = models.URLField(max_length=500, blank=True, default="")

    sizes = models.JSONField(default=list, help_text="Ordered list of size labels")

    # At least one must be enabled (validated on create/update).
    courier_city = models.BooleanField(default=False)
    pickup = models.BooleanField(default=False)
    region = models.BooleanField(default=False)

    payment_note = models.TextField(help_text="Payment instructions shown after the order is placed.")
    visits = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ("-created_at",)
        constraints = [
            models.UniqueConstraint(fields=["seller", "slug"], name="uniq_checkoutlink_seller_slug"),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.slug})"

    @property
    def delivery_options(self) -> dict:
        return {
            DeliveryMethod.COURIER_CITY.value: self.courier_city,
            DeliveryMethod.PICKUP.value: self.pickup,
            DeliveryMethod.REGION.value: self.region,
        }

    def enabled_delivery_methods(self) -> list:
        return [method for method, enabled in self.delivery_options.items() if enabled]
