from rest_framework.response import Response
from rest_framework.views import APIView

from commerce.serializers.order import OrderSerializer
from commerce.services.directory import dashboard_stats
from sellers.authentication import IsSeller


class DashboardView(APIView):
    permission_classes = (IsSeller,)

    def get(self, request, *args, **kwargs):
        stats = dashboard_stats(request.user)
        stats["recentOrders"] = OrderSerializer(stats["recentOrders"], many=True).data
        return Response(stats)
