from rest_framework import serializers

from commerce.models import Customer
from commerce.serializers.order import OrderSerializer


class CustomerSerializer(serializers.ModelSerializer):
    """Directory row: customer fields plus order stats from the list annotation."""

    fullName = serializers.CharField(source="full_name", read_only=True)
    marketingOptIn = serializers.BooleanField(source="marketing_opt_in", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    lastUsedAt = serializers.DateTimeField(source="last_used_at", read_only=True)
    totalOrders = serializers.IntegerField(source="total_orders", read_only=True)
    lastOrderDate = serializers.DateTimeField(source="last_order_date", read_only=True, allow_null=True)

    class Meta:
        model = Customer
        fields = (
            "id", "fullName", "phone", "city", "address", "username",
            "marketingOptIn", "createdAt", "lastUsedAt", "totalOrders", "lastOrderDate",
        )


class CustomerDetailSerializer(CustomerSerializer):
    # Orders come prefetched newest-first (see commerce.services.directory).
    orders = OrderSerializer(many=True, read_only=True)

    class Meta(CustomerSerializer.Meta):
        fields = CustomerSerializer.Meta.fields + ("orders",)
