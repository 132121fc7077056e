from django.urls import path

from commerce.views.checkout_links import (
    CheckoutLinkDetailView,
    CheckoutLinkListView,
    CheckoutLinkVisitView,
    PublicCheckoutLinkView,
)
from commerce.views.customers import CustomerDetailView, CustomerListView
from commerce.views.dashboard import DashboardView
from commerce.views.orders import OrderCollectionView, OrderDetailView

urlpatterns = [
    path("checkout-links", CheckoutLinkListView.as_view(), name="checkout-link-list"),
    path("checkout-links/<str:pk>", CheckoutLinkDetailView.as_view(), name="checkout-link-detail"),
    path(
        "checkout-links/<slug:seller_slug>/<slug:checkout_slug>",
        PublicCheckoutLinkView.as_view(),
        name="checkout-link-public",
    ),
    path(
        "checkout-links/<slug:seller_slug>/<slug:checkout_slug>/visit",
        CheckoutLinkVisitView.as_view(),
        name="checkout-link-visit",
    ),
    path("orders", OrderCollectionView.as_view(), name="order-collection"),
    path("orders/<str:pk>", OrderDetailView.as_view(), name="order-detail"),
    path("customers", CustomerListView.as_view(), name="customer-list"),
    path("customers/<str:pk>", CustomerDetailView.as_view(), name="customer-detail"),
    path("dashboard", DashboardView.as_view(), name="dashboard"),
]
