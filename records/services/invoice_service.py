from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List

from django.utils import timezone

from .. import paths
from ..models import Invoice
from ..validation import InvoiceSchema
from .mutation_service import MutationService

CreateInvoiceSchema = InvoiceSchema.omit("id", "date")
UpdateInvoiceSchema = InvoiceSchema.omit("id", "date")


def to_cents(amount: Decimal) -> int:
    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class InvoiceService(MutationService):
    entity = "Invoice"
    model = Invoice
    create_schema = CreateInvoiceSchema
    update_schema = UpdateInvoiceSchema
    list_path = paths.INVOICES
    invalidates = (paths.INVOICES, paths.CUSTOMERS, paths.DASHBOARD)

    @classmethod
    def transform(cls, data: Dict[str, Any], creating: bool) -> Dict[str, Any]:
        fields = {
            "customer_id": data["customer_id"],
            "amount": to_cents(data["amount"]),
            "status": data["status"],
        }
        if creating:
            fields["date"] = timezone.localdate()
        return fields

    @staticmethod
    def list_rows() -> List[Dict[str, Any]]:
        return list(
            Invoice.objects.select_related("customer")
            .order_by("-date", "customer__name")
            .values(
                "id",
                "amount",
                "status",
                "date",
                "customer__name",
                "customer__email",
                "customer__image_url",
            )
        )
