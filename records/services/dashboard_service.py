from typing import Any, Dict

from django.db.models import Q, Sum
from django.db.models.functions import Coalesce

from ..models import Customer, Invoice


class DashboardService:
    LATEST_INVOICES = 5

    @classmethod
    def card_data(cls) -> Dict[str, Any]:
        totals = Invoice.objects.aggregate(
            total_paid=Coalesce(Sum("amount", filter=Q(status=Invoice.Status.PAID)), 0),
            total_pending=Coalesce(Sum("amount", filter=Q(status=Invoice.Status.PENDING)), 0),
        )
        latest = (
            Invoice.objects.select_related("customer")
            .order_by("-date")
            .values("id", "amount", "customer__name", "customer__email", "customer__image_url")[: cls.LATEST_INVOICES]
        )
        return {
            "total_paid": totals["total_paid"],
            "total_pending": totals["total_pending"],
            "invoice_count": Invoice.objects.count(),
            "customer_count": Customer.objects.count(),
            "latest_invoices": list(latest),
        }
