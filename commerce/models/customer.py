"""
commerce.models.customer

A buyer who chose "save my details" at checkout. One record per
(seller, phone); later orders refresh the stored details.
"""
from django.core.validators import RegexValidator
from django.db import models
from django.utils import timezone

from .base import TimeStampedModel

UZ_PHONE_REGEX = r"^\+998\d{9}$"

uz_phone_validator = RegexValidator(
    regex=UZ_PHONE_REGEX,
    message="Invalid Uzbek phone number format",
)


class Customer(TimeStampedModel):
    seller = models.ForeignKey("sellers.Seller", on_delete=models.CASCADE, related_name="customers")

    full_name = models.CharField(max_length=200)
    phone = models.CharField(max_length=13, validators=[uz_phone_validator])
    city = models.CharField(max_length=120, blank=True, default="")
    address = models.CharField(max_length=500, blank=True, default="")
    username = models.CharField(max_length=120, blank=True, default="")

    marketing_opt_in = models.BooleanField(default=False)
    last_used_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ("-created_at",)
        constraints = [
            models.UniqueConstraint(fields=["seller", "phone"], name="uniq_customer_seller_phone"),
        ]

    def __str__(self) -> str:
        return f"{self.full_name} <{self.phone}>"
