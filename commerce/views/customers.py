from rest_framework.response import Response
from rest_framework.views import APIView

from commerce.serializers.customer import CustomerDetailSerializer, CustomerSerializer
from commerce.services import directory
from sellers.authentication import IsSeller


class CustomerListView(APIView):
    """GET /api/customers (newest first, with totalOrders / lastOrderDate)"""

    permission_classes = (IsSeller,)

    def get(self, request, *args, **kwargs):
        customers = directory.list_customers(request.user)
        return Response(CustomerSerializer(customers, many=True).data)


class CustomerDetailView(APIView):
    """GET /api/customers/{id} (customer + full order history)"""

    permission_classes = (IsSeller,)

    def get(self, request, pk, *args, **kwargs):
        customer = directory.get_customer_detail(request.user, pk)
        return Response(CustomerDetailSerializer(customer).data)
