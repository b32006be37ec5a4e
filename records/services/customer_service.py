from typing import Any, Dict, List

from django.db.models import Count, Q, Sum
from django.db.models.functions import Coalesce

from .. import paths
from ..models import Customer, Invoice
from ..validation import CustomerSchema
from .mutation_service import MutationService

CreateCustomerSchema = CustomerSchema.omit("id")
UpdateCustomerSchema = CustomerSchema.omit("id")


class CustomerService(MutationService):
    entity = "Customer"
    model = Customer
    create_schema = CreateCustomerSchema
    update_schema = UpdateCustomerSchema
    list_path = paths.CUSTOMERS
    # The invoice form lists customers, so it goes stale with them.
    invalidates = (paths.CUSTOMERS, paths.DASHBOARD, paths.INVOICE_CREATE)

    @classmethod
    def transform(cls, data: Dict[str, Any], creating: bool) -> Dict[str, Any]:
        return {
            "name": data["name"],
            "email": data["email"],
            "image_url": data["picture"],
        }

    @staticmethod
    def list_rows() -> List[Dict[str, Any]]:
        return list(
            Customer.objects.annotate(
                total_invoices=Count("invoices"),
                total_pending=Coalesce(Sum("invoices__amount", filter=Q(invoices__status=Invoice.Status.PENDING)), 0),
                total_paid=Coalesce(Sum("invoices__amount", filter=Q(invoices__status=Invoice.Status.PAID)), 0),
            )
            .order_by("name")
            .values("id", "name", "email", "image_url", "total_invoices", "total_pending", "total_paid")
        )

    @staticmethod
    def choices() -> List[Dict[str, Any]]:
        return list(Customer.objects.order_by("name").values("id", "name"))
