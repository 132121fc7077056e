"""
Aggregate the concrete commerce models.
Django imports this package as `commerce.models`.
"""
from .base import TimeStampedModel  # abstract
from .checkout_link import CheckoutLink, DeliveryMethod
from .customer import Customer
from .order import Order, PaymentStatus, DeliveryStatus

__all__ = [
    # Abstracts
    "TimeStampedModel",
    # Concrete
    "CheckoutLink",
    "Customer",
    "Order",
    # Choices
    "DeliveryMethod",
    "PaymentStatus",
    "DeliveryStatus",
]
