from rest_framework import serializers

from commerce.models import CheckoutLink, Customer, DeliveryMethod, DeliveryStatus, Order, PaymentStatus
from commerce.models.customer import uz_phone_validator


# ---------- Input ----------

class BuyerSerializer(serializers.Serializer):
    fullName = serializers.CharField(source="full_name", max_length=200, error_messages={"blank": "Full name is required"})
    phone = serializers.CharField(max_length=13, validators=[uz_phone_validator])
    city = serializers.CharField(max_length=120, error_messages={"blank": "City is required"})
    address = serializers.CharField(max_length=500, error_messages={"blank": "Address is required"})
    username = serializers.CharField(max_length=120, required=False, allow_blank=True, allow_null=True)


class OrderSubmitSerializer(serializers.Serializer):
    checkoutLinkId = serializers.CharField(source="checkout_link_id")
    quantity = serializers.IntegerField(min_value=1, error_messages={"min_value": "Quantity must be positive"})
    selectedSize = serializers.CharField(source="selected_size", max_length=64, error_messages={"blank": "Size selection is required"})
    deliveryMethod = serializers.ChoiceField(
        source="delivery_method",
        choices=DeliveryMethod.choices,
        error_messages={"invalid_choice": "Unknown delivery method"},
    )
    buyer = BuyerSerializer()
    saveDetails = serializers.BooleanField(source="save_details", required=False, default=False)


class StatusUpdateSerializer(serializers.Serializer):
    paymentStatus = serializers.ChoiceField(source="payment_status", choices=PaymentStatus.choices, required=False)
    deliveryStatus = serializers.ChoiceField(source="delivery_status", choices=DeliveryStatus.choices, required=False)

    def validate(self, attrs):
        if "payment_status" not in attrs and "delivery_status" not in attrs:
            raise serializers.ValidationError("Provide paymentStatus and/or deliveryStatus")
        return attrs


class OrderStatusPatchSerializer(StatusUpdateSerializer):
    """PATCH /api/orders carries the order id in the body."""

    orderId = serializers.CharField(source="order_id")


class OrderListParamsSerializer(serializers.Serializer):
    page = serializers.IntegerField(min_value=1, required=False, default=1)
    limit = serializers.IntegerField(min_value=1, max_value=100, required=False, default=20)
    # seller order page looks a single order up through the list endpoint
    id = serializers.CharField(required=False, allow_blank=True, max_length=64)


# ---------- Output ----------

class CheckoutLinkMiniSerializer(serializers.ModelSerializer):
    paymentNote = serializers.CharField(source="payment_note", read_only=True)

    class Meta:
        model = CheckoutLink
        fields = ("id", "name", "slug", "price", "currency", "paymentNote")


class CustomerMiniSerializer(serializers.ModelSerializer):
    fullName = serializers.CharField(source="full_name", read_only=True)

    class Meta:
        model = Customer
        fields = ("id", "fullName", "phone")


class OrderSerializer(serializers.ModelSerializer):
    """Seller-side order (list, status updates, customer history) and the create response."""

    sellerId = serializers.UUIDField(source="seller_id", read_only=True)
    checkoutLinkId = serializers.UUIDField(source="checkout_link_id", read_only=True)
    customerId = serializers.UUIDField(source="customer_id", read_only=True)
    totalPrice = serializers.IntegerField(source="total_price", read_only=True)
    selectedSize = serializers.CharField(source="selected_size", read_only=True)
    deliveryMethod = serializers.CharField(source="delivery_method", read_only=True)
    contactSnapshot = serializers.JSONField(source="contact_snapshot", read_only=True)
    paymentStatus = serializers.CharField(source="payment_status", read_only=True)
    deliveryStatus = serializers.CharField(source="delivery_status", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)
    checkoutLink = CheckoutLinkMiniSerializer(source="checkout_link", read_only=True)
    customer = CustomerMiniSerializer(read_only=True, allow_null=True)
    seller = serializers.SerializerMethodField()

    class Meta:
        model = Order
        fields = (
            "id", "sellerId", "checkoutLinkId", "customerId", "quantity",
            "totalPrice", "selectedSize", "deliveryMethod", "contactSnapshot",
            "paymentStatus", "deliveryStatus", "createdAt", "updatedAt",
            "checkoutLink", "customer", "seller",
        )

    def get_seller(self, obj):
        return obj.seller.public_profile()


class PublicOrderSerializer(serializers.ModelSerializer):
    """Post-order success page: what was ordered and how to pay."""

    totalPrice = serializers.IntegerField(source="total_price", read_only=True)
    selectedSize = serializers.CharField(source="selected_size", read_only=True)
    deliveryMethod = serializers.CharField(source="delivery_method", read_only=True)
    contactSnapshot = serializers.JSONField(source="contact_snapshot", read_only=True)
    paymentStatus = serializers.CharField(source="payment_status", read_only=True)
    deliveryStatus = serializers.CharField(source="delivery_status", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    checkoutLink = serializers.SerializerMethodField()
    seller = serializers.SerializerMethodField()

    class Meta:
        model = Order
        fields = (
            "id", "quantity", "totalPrice", "selectedSize", "deliveryMethod",
            "contactSnapshot", "paymentStatus", "deliveryStatus", "createdAt",
            "checkoutLink", "seller",
        )

    def get_checkoutLink(self, obj):
        link = obj.checkout_link
        return {
            "name": link.name,
            "price": link.price,
            "currency": link.currency,
            "size": obj.selected_size,
            "paymentNote": link.payment_note,
        }

    def get_seller(self, obj):
        profile = obj.seller.public_profile()
        profile.pop("id", None)
        return profile
