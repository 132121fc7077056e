from django.contrib import admin

from .models import CheckoutLink, Customer, Order


@admin.register(CheckoutLink)
class CheckoutLinkAdmin(admin.ModelAdmin):
    list_display = ("name", "seller", "slug", "price", "currency", "visits", "created_at")
    search_fields = ("name", "slug", "seller__slug")
    list_filter = ("currency", "courier_city", "pickup", "region")
    readonly_fields = ("slug", "visits", "created_at", "updated_at")


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ("full_name", "phone", "seller", "city", "marketing_opt_in", "last_used_at")
    search_fields = ("full_name", "phone", "username")
    list_filter = ("marketing_opt_in", "city")


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ("id", "seller", "checkout_link", "quantity", "total_price", "payment_status", "delivery_status", "created_at")
    list_filter = ("payment_status", "delivery_status", "delivery_method")
    search_fields = ("id", "contact_snapshot")
    # Frozen at creation; only the two status fields are editable.
    readonly_fields = (
        "seller", "checkout_link", "customer", "quantity", "total_price",
        "selected_size", "delivery_method", "contact_snapshot", "created_at", "updated_at",
    )
