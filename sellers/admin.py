from django.contrib import admin

from .models import Seller


@admin.register(Seller)
class SellerAdmin(admin.ModelAdmin):
    list_display = ("name", "slug", "email", "created_at")
    search_fields = ("name", "slug", "email")
    readonly_fields = ("created_at",)
    exclude = ("password",)
