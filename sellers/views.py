import logging

from rest_framework import status
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from bogla.exceptions import Unauthorized
from sellers.authentication import IsSeller
from sellers.serializers import LoginSerializer, SellerSerializer
from sellers.services.accounts import authenticate_seller
from sellers.services.media import upload_product_image
from sellers.tokens import issue_token

logger = logging.getLogger(__name__)


class LoginView(APIView):
    """
    POST /api/auth/login
    {email, password} -> {seller, token}
    """
    authentication_classes = ()

    def post(self, request, *args, **kwargs):
        ser = LoginSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        seller = authenticate_seller(ser.validated_data["email"], ser.validated_data["password"])
        if seller is None:
            raise Unauthorized("Invalid email or password")

        logger.info("seller_login seller=%s", seller.pk)
        return Response(
            {"seller": SellerSerializer(seller).data, "token": issue_token(seller)},
            status=status.HTTP_200_OK,
        )


class UploadView(APIView):
    """
    POST /api/upload  (multipart, field "file")
    Returns {url, publicId} from the media CDN.
    """
    permission_classes = (IsSeller,)
    parser_classes = (MultiPartParser, FormParser)

    def post(self, request, *args, **kwargs):
        result = upload_product_image(request.user, request.FILES.get("file"))
        return Response(result, status=status.HTTP_200_OK)
