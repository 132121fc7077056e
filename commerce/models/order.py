"""
commerce.models.order

A buyer's order against a checkout link.

total_price and contact_snapshot are written once at creation. After that
only the status fields (and the customer link) are persisted, so an order
keeps the price and contact details it was placed with.
"""
from django.db import models

from .base import TimeStampedModel
from .checkout_link import DeliveryMethod


class PaymentStatus(models.TextChoices):
    NEW = "new", "New"
    PAID = "paid", "Paid"
    CANCELLED = "cancelled", "Cancelled"


class DeliveryStatus(models.TextChoices):
    PENDING = "pending", "Pending"
    SENT = "sent", "Sent"
    DELIVERED = "delivered", "Delivered"


class Order(TimeStampedModel):
    MUTABLE_FIELDS = ("payment_status", "delivery_status", "customer", "updated_at")

    seller = models.ForeignKey("sellers.Seller", on_delete=models.CASCADE, related_name="orders")
    checkout_link = models.ForeignKey("commerce.CheckoutLink", on_delete=models.CASCADE, related_name="orders")
    customer = models.ForeignKey(
        "commerce.Customer",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="orders",
    )

    quantity = models.PositiveIntegerField()
    total_price = models.PositiveBigIntegerField(help_text="checkout_link.price * quantity at creation time.")
    selected_size = models.CharField(max_length=64)
    delivery_method = models.CharField(max_length=20, choices=DeliveryMethod.choices)

    contact_snapshot = models.JSONField(help_text="Buyer contact fields as submitted with this order.")

    payment_status = models.CharField(
        max_length=16,
        choices=PaymentStatus.choices,
        default=PaymentStatus.NEW,
        db_index=True,
    )
    delivery_status = models.CharField(
        max_length=16,
        choices=DeliveryStatus.choices,
        default=DeliveryStatus.PENDING,
        db_index=True,
    )

    class Meta:
        ordering = ("-created_at",)
        indexes = [
            models.Index(fields=["seller", "created_at"]),
        ]

    def __str__(self) -> str:
        return f"Order({self.pk}) {self.quantity} x {self.checkout_link_id} = {self.total_price}"

    def save(self, *args, **kwargs):
        if not self._state.adding and kwargs.get("update_fields") is None:
            kwargs["update_fields"] = self.MUTABLE_FIELDS
        super().save(*args, **kwargs)
