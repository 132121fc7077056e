"""
commerce.views.orders

/api/orders       POST submit (public), GET paginated list (seller), PATCH status {orderId, ...} (seller)
/api/orders/{id}  GET success page (public), PATCH status (seller)
"""
import math

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from commerce.serializers.order import (
    OrderListParamsSerializer,
    OrderSerializer,
    OrderStatusPatchSerializer,
    OrderSubmitSerializer,
    PublicOrderSerializer,
    StatusUpdateSerializer,
)
from commerce.services import orders as order_service
from sellers.authentication import IsSeller


class _MixedAccessView(APIView):
    """
    One path, two audiences: the methods in `public_methods` skip token
    authentication entirely (a stale token on the buyer page must not 401),
    the rest require a seller.
    """

    public_methods = ()

    def get_authenticators(self):
        if self.request.method in self.public_methods:
            return []
        return super().get_authenticators()

    def get_permissions(self):
        if self.request.method in self.public_methods:
            return [AllowAny()]
        return [IsSeller()]


def _status_changes(validated):
    return {
        "payment_status": validated.get("payment_status"),
        "delivery_status": validated.get("delivery_status"),
    }


class OrderCollectionView(_MixedAccessView):
    public_methods = ("POST",)

    def post(self, request, *args, **kwargs):
        ser = OrderSubmitSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        order = order_service.submit_order(ser.validated_data)
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)

    def get(self, request, *args, **kwargs):
        params = OrderListParamsSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        page = params.validated_data["page"]
        limit = params.validated_data["limit"]

        orders, total = order_service.list_orders(
            request.user, page=page, limit=limit, order_id=params.validated_data.get("id"),
        )
        return Response({
            "orders": OrderSerializer(orders, many=True).data,
            "pagination": {
                "page": page,
                "limit": limit,
                "total": total,
                "totalPages": math.ceil(total / limit),
            },
        })

    def patch(self, request, *args, **kwargs):
        ser = OrderStatusPatchSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        order = order_service.update_order_status(
            request.user,
            ser.validated_data["order_id"],
            **_status_changes(ser.validated_data),
        )
        return Response(OrderSerializer(order).data)


class OrderDetailView(_MixedAccessView):
    public_methods = ("GET",)

    def get(self, request, pk, *args, **kwargs):
        order = order_service.get_public_order(pk)
        return Response(PublicOrderSerializer(order).data)

    def patch(self, request, pk, *args, **kwargs):
        ser = StatusUpdateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        order = order_service.update_order_status(request.user, pk, **_status_changes(ser.validated_data))
        return Response(OrderSerializer(order).data)
