"""
commerce.services.directory
Read-only seller views over customers and orders (no writes here).
"""
from __future__ import annotations

from django.db.models import Count, Max, Prefetch
from django.utils import timezone

from commerce.models import Customer, Order
from commerce.services.base import fetch_or_404

RECENT_ORDERS = 5


def _with_stats(qs):
    return qs.annotate(
        total_orders=Count("orders"),
        last_order_date=Max("orders__created_at"),
    )


def list_customers(seller):
    return _with_stats(Customer.objects.filter(seller=seller)).order_by("-created_at")


def get_customer_detail(seller, customer_id) -> Customer:
    history = (
        Order.objects.select_related("seller", "checkout_link", "customer")
        .order_by("-created_at")
    )
    qs = _with_stats(Customer.objects.filter(seller=seller)).prefetch_related(
        Prefetch("orders", queryset=history)
    )
    return fetch_or_404(qs, "Customer", pk=customer_id)


def dashboard_stats(seller) -> dict:
    start_of_day = timezone.localtime().replace(hour=0, minute=0, second=0, microsecond=0)
    orders = Order.objects.filter(seller=seller)
    recent = (
        orders.select_related("seller", "checkout_link", "customer")
        .order_by("-created_at")[:RECENT_ORDERS]
    )
    return {
        "todayOrders": orders.filter(created_at__gte=start_of_day).count(),
        "totalOrders": orders.count(),
        "totalCustomers": Customer.objects.filter(seller=seller).count(),
        "recentOrders": list(recent),
    }
