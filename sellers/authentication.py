"""
sellers.authentication

DRF authentication + permission for seller-only endpoints.

The seller identity comes from `Authorization: Bearer <token>` on each
request. Nothing is cached between requests.
"""
from __future__ import annotations

from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import exceptions
from rest_framework.authentication import BaseAuthentication, get_authorization_header
from rest_framework.permissions import BasePermission

from sellers.models import Seller
from sellers.tokens import InvalidToken, read_token

KEYWORD = "Bearer"


class SellerTokenAuthentication(BaseAuthentication):
    def authenticate(self, request):
        auth = get_authorization_header(request).split()
        if not auth or auth[0].lower() != KEYWORD.lower().encode():
            return None
        if len(auth) != 2:
            raise exceptions.AuthenticationFailed("Invalid token header.")

        try:
            token = auth[1].decode()
        except UnicodeError:
            raise exceptions.AuthenticationFailed("Invalid token header.")

        try:
            seller_id = read_token(token)
        except InvalidToken as exc:
            raise exceptions.AuthenticationFailed(str(exc))

        try:
            seller = Seller.objects.get(pk=seller_id)
        except (Seller.DoesNotExist, DjangoValidationError, ValueError):
            raise exceptions.AuthenticationFailed("Invalid token.")
        return seller, token

    def authenticate_header(self, request):
        return KEYWORD


class IsSeller(BasePermission):
    """Allows access only to requests carrying a valid seller token."""

    def has_permission(self, request, view):
        return isinstance(request.user, Seller)
