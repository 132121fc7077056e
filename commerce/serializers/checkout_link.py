from rest_framework import serializers

from commerce.models import CheckoutLink


class DeliveryOptionsSerializer(serializers.Serializer):
    courierCity = serializers.BooleanField(source="courier_city", required=False, default=False)
    pickup = serializers.BooleanField(required=False, default=False)
    region = serializers.BooleanField(required=False, default=False)

    def validate(self, attrs):
        if not (attrs.get("courier_city") or attrs.get("pickup") or attrs.get("region")):
            raise serializers.ValidationError("At least one delivery option must be selected")
        return attrs


class CheckoutLinkInputSerializer(serializers.Serializer):
    """Create/update payload. Update is a full replace, so every call validates everything."""

    name = serializers.CharField(max_length=200, error_messages={"blank": "Product name is required"})
    price = serializers.IntegerField(min_value=1, error_messages={"min_value": "Price must be positive"})
    currency = serializers.CharField(max_length=8, required=False, default="UZS")
    defaultQty = serializers.IntegerField(source="default_qty", min_value=1, required=False, default=1)
    maxQty = serializers.IntegerField(source="max_qty", min_value=1, required=False, allow_null=True, default=None)
    imageUrl = serializers.URLField(
        source="image_url",
        max_length=500,
        required=False,
        allow_blank=True,
        allow_null=True,
        default="",
        error_messages={"invalid": "Must be a valid URL"},
    )
    sizes = serializers.ListField(
        child=serializers.CharField(max_length=64, error_messages={"blank": "Size cannot be empty"}),
        allow_empty=False,
        error_messages={"empty": "At least one size is required"},
    )
    deliveryOptions = DeliveryOptionsSerializer(source="*")
    paymentNote = serializers.CharField(source="payment_note", error_messages={"blank": "Payment instructions are required"})

    def validate(self, attrs):
        max_qty = attrs.get("max_qty")
        if max_qty is not None and attrs.get("default_qty", 1) > max_qty:
            raise serializers.ValidationError({"defaultQty": ["Default quantity cannot exceed max quantity"]})
        attrs["image_url"] = attrs.get("image_url") or ""
        return attrs


class CheckoutLinkSerializer(serializers.ModelSerializer):
    """Seller-side representation (dashboard list/detail, create/update responses)."""

    sellerId = serializers.UUIDField(source="seller_id", read_only=True)
    defaultQty = serializers.IntegerField(source="default_qty", read_only=True)
    maxQty = serializers.IntegerField(source="max_qty", read_only=True)
    imageUrl = serializers.SerializerMethodField()
    deliveryOptions = serializers.DictField(source="delivery_options", read_only=True)
    paymentNote = serializers.CharField(source="payment_note", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)
    orderCount = serializers.SerializerMethodField()
    conversionRate = serializers.SerializerMethodField()

    class Meta:
        model = CheckoutLink
        fields = (
            "id", "sellerId", "name", "slug", "price", "currency",
            "defaultQty", "maxQty", "imageUrl", "sizes", "deliveryOptions",
            "paymentNote", "visits", "createdAt", "updatedAt",
            "orderCount", "conversionRate",
        )

    def get_imageUrl(self, obj):
        return obj.image_url or None

    def get_orderCount(self, obj):
        count = getattr(obj, "order_count", None)
        return count if count is not None else obj.orders.count()

    def get_conversionRate(self, obj):
        """Orders per visit, as a percentage with one decimal."""
        if not obj.visits:
            return 0
        return round(self.get_orderCount(obj) / obj.visits * 100, 1)


class PublicCheckoutLinkSerializer(serializers.ModelSerializer):
    """Buyer-facing page data; no counters, includes the seller's public profile."""

    defaultQty = serializers.IntegerField(source="default_qty", read_only=True)
    maxQty = serializers.IntegerField(source="max_qty", read_only=True)
    imageUrl = serializers.SerializerMethodField()
    deliveryOptions = serializers.DictField(source="delivery_options", read_only=True)
    paymentNote = serializers.CharField(source="payment_note", read_only=True)
    seller = serializers.SerializerMethodField()

    class Meta:
        model = CheckoutLink
        fields = (
            "id", "name", "slug", "price", "currency", "defaultQty", "maxQty",
            "imageUrl", "sizes", "deliveryOptions", "paymentNote", "seller",
        )

    def get_imageUrl(self, obj):
        return obj.image_url or None

    def get_seller(self, obj):
        return obj.seller.public_profile()
