"""
JSON endpoints over the same mutation services the dashboard forms use.

Writes accept a flat object (JSON or form encoded) and answer with the
APIResponse envelope built from the action result.
"""

from collections.abc import Mapping

from rest_framework.views import APIView

from ..models import Invoice
from ..services import CustomerService, InvoiceService
from ..validation import ErrorCode
from .response import APIResponse
from .serializers import CustomerSerializer, InvoiceSerializer


def _payload_error():
    return APIResponse.error(
        ErrorCode.VALIDATION_ERROR.value,
        "Request body must be an object of field values.",
    )


class RecordCollectionView(APIView):
    service = None
    serializer_class = None

    def get_queryset(self):
        return self.service.model.objects.all()

    def get(self, request):
        serializer = self.serializer_class(self.get_queryset(), many=True)
        return APIResponse.success(data=serializer.data)

    def post(self, request):
        if not isinstance(request.data, Mapping):
            return _payload_error()
        return APIResponse.from_action_result(self.service.create(request.data), success_status=201)


class RecordDetailView(APIView):
    service = None

    def put(self, request, pk):
        if not isinstance(request.data, Mapping):
            return _payload_error()
        return APIResponse.from_action_result(self.service.update(pk, request.data))

    def delete(self, request, pk):
        return APIResponse.from_action_result(self.service.delete(pk))


class InvoiceCollectionView(RecordCollectionView):
    service = InvoiceService
    serializer_class = InvoiceSerializer

    def get_queryset(self):
        return Invoice.objects.select_related("customer")


class InvoiceDetailView(RecordDetailView):
    service = InvoiceService


class CustomerCollectionView(RecordCollectionView):
    service = CustomerService
    serializer_class = CustomerSerializer


class CustomerDetailView(RecordDetailView):
    service = CustomerService
