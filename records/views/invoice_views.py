from django.contrib.auth.decorators import login_required
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from .. import paths
from ..models import Invoice
from ..services import CustomerService, InvoiceService, ViewCache
from . import flash_result, render_form

FORM_TEMPLATE = "pages/invoices/form.html"


def _form_context(form_data, **extra):
    return {
        "customers": ViewCache.get_or_build(paths.INVOICE_CREATE, CustomerService.choices),
        "statuses": Invoice.Status.choices,
        "form_data": form_data,
        **extra,
    }


@login_required
@require_GET
def invoice_list(request):
    invoices = ViewCache.get_or_build(paths.INVOICES, InvoiceService.list_rows)
    return render(request, "pages/invoices/list.html", {
        "invoices": invoices,
        "page_title": "Invoices",
    })


@login_required
@require_http_methods(["GET", "POST"])
def invoice_create(request):
    context = _form_context(request.POST, page_title="Create Invoice")
    if request.method == "POST":
        return render_form(request, FORM_TEMPLATE, context, InvoiceService.create(request.POST))
    return render_form(request, FORM_TEMPLATE, context)


@login_required
@require_http_methods(["GET", "POST"])
def invoice_edit(request, invoice_id):
    if request.method == "POST":
        context = _form_context(request.POST, page_title="Edit Invoice", invoice_id=invoice_id)
        return render_form(request, FORM_TEMPLATE, context, InvoiceService.update(invoice_id, request.POST))

    invoice = get_object_or_404(Invoice, pk=invoice_id)
    form_data = {
        "customer_id": str(invoice.customer_id),
        "amount": f"{invoice.amount / 100:.2f}",
        "status": invoice.status,
    }
    return render_form(request, FORM_TEMPLATE, _form_context(form_data, page_title="Edit Invoice", invoice_id=invoice_id))


@login_required
@require_POST
def invoice_delete(request, invoice_id):
    flash_result(request, InvoiceService.delete(invoice_id))
    return redirect(paths.INVOICES)
