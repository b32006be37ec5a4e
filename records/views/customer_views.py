from django.contrib.auth.decorators import login_required
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from .. import paths
from ..models import Customer
from ..services import CustomerService, ViewCache
from . import flash_result, render_form

FORM_TEMPLATE = "pages/customers/form.html"


@login_required
@require_GET
def customer_list(request):
    customers = ViewCache.get_or_build(paths.CUSTOMERS, CustomerService.list_rows)
    return render(request, "pages/customers/list.html", {
        "customers": customers,
        "page_title": "Customers",
    })


@login_required
@require_http_methods(["GET", "POST"])
def customer_create(request):
    context = {"form_data": request.POST, "page_title": "Create Customer"}
    if request.method == "POST":
        return render_form(request, FORM_TEMPLATE, context, CustomerService.create(request.POST))
    return render_form(request, FORM_TEMPLATE, context)


@login_required
@require_http_methods(["GET", "POST"])
def customer_edit(request, customer_id):
    context = {"page_title": "Edit Customer", "customer_id": customer_id}
    if request.method == "POST":
        context["form_data"] = request.POST
        return render_form(request, FORM_TEMPLATE, context, CustomerService.update(customer_id, request.POST))

    customer = get_object_or_404(Customer, pk=customer_id)
    context["form_data"] = {
        "name": customer.name,
        "email": customer.email,
        "picture": customer.image_url,
    }
    return render_form(request, FORM_TEMPLATE, context)


@login_required
@require_POST
def customer_delete(request, customer_id):
    flash_result(request, CustomerService.delete(customer_id))
    return redirect(paths.CUSTOMERS)
