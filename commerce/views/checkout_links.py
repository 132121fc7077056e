"""
commerce.views.checkout_links

/api/checkout-links                                      GET list, POST create (seller)
/api/checkout-links/{id}                                 GET, PATCH, DELETE (seller)
/api/checkout-links/{sellerSlug}/{checkoutSlug}          GET buyer page (public)
/api/checkout-links/{sellerSlug}/{checkoutSlug}/visit    POST visit counter (public)
"""
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from commerce.serializers.checkout_link import (
    CheckoutLinkInputSerializer,
    CheckoutLinkSerializer,
    PublicCheckoutLinkSerializer,
)
from commerce.services import catalog
from sellers.authentication import IsSeller


class CheckoutLinkListView(APIView):
    permission_classes = (IsSeller,)

    def get(self, request, *args, **kwargs):
        links = catalog.list_checkout_links(request.user)
        return Response(CheckoutLinkSerializer(links, many=True).data)

    def post(self, request, *args, **kwargs):
        ser = CheckoutLinkInputSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        link = catalog.create_checkout_link(request.user, ser.validated_data)
        return Response(CheckoutLinkSerializer(link).data, status=status.HTTP_201_CREATED)


class CheckoutLinkDetailView(APIView):
    permission_classes = (IsSeller,)

    def get(self, request, pk, *args, **kwargs):
        link = catalog.get_checkout_link(request.user, pk)
        return Response(CheckoutLinkSerializer(link).data)

    def patch(self, request, pk, *args, **kwargs):
        # ownership first, so another seller's id is a 404 even with a bad body
        catalog.get_checkout_link(request.user, pk)
        ser = CheckoutLinkInputSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        link = catalog.update_checkout_link(request.user, pk, ser.validated_data)
        return Response(CheckoutLinkSerializer(link).data)

    def delete(self, request, pk, *args, **kwargs):
        catalog.delete_checkout_link(request.user, pk)
        return Response({"success": True})


class PublicCheckoutLinkView(APIView):
    authentication_classes = ()

    def get(self, request, seller_slug, checkout_slug, *args, **kwargs):
        link = catalog.get_public_checkout_link(seller_slug, checkout_slug)
        return Response(PublicCheckoutLinkSerializer(link).data)


class CheckoutLinkVisitView(APIView):
    """Fire-and-forget from the buyer page; answers 204 whatever happens."""

    authentication_classes = ()

    def post(self, request, seller_slug, checkout_slug, *args, **kwargs):
        catalog.record_visit(seller_slug, checkout_slug)
        return Response(status=status.HTTP_204_NO_CONTENT)
