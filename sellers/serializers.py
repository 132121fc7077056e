from rest_framework import serializers

from sellers.models import Seller


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField(error_messages={"invalid": "Invalid email address"})
    password = serializers.CharField(trim_whitespace=False, error_messages={"blank": "Password is required"})


class SellerSerializer(serializers.ModelSerializer):
    instagramUrl = serializers.CharField(source="instagram_url", read_only=True)

    class Meta:
        model = Seller
        fields = ("id", "name", "slug", "email", "instagramUrl")
