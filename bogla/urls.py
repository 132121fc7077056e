# bogla/urls.py
"""
CHANGE LOG
----------
2026-10-18
- ADD: /api/ mounts for seller accounts (login, upload) and commerce (links, orders, customers).
- ADD: Inline /api/health liveness probe placed before the app includes.
"""

from django.contrib import admin
from django.http import JsonResponse
from django.urls import path, include

API_VERSION = "bogla.v1"


def health_view(request):
    """Liveness probe for the checkout API."""
    return JsonResponse({"ok": True, "ver": API_VERSION})


urlpatterns = [
    # Readiness endpoint (placed BEFORE includes to take precedence)
    path("api/health", health_view, name="health"),

    # Admin
    path("admin/", admin.site.urls),

    # Seller accounts: login + media upload
    path("api/", include("sellers.urls")),

    # Checkout links, orders, customers, dashboard
    path("api/", include("commerce.urls")),
]
