from django.shortcuts import redirect
from django.views.decorators.http import require_http_methods, require_POST

from .. import paths
from ..services import AuthService
from . import render_form

LOGIN_TEMPLATE = "pages/auth/login.html"


@require_http_methods(["GET", "POST"])
def login_view(request):
    if request.user.is_authenticated and request.method == "GET":
        return redirect(paths.DASHBOARD)

    context = {
        "form_data": request.POST,
        "redirect_to": request.POST.get("redirectTo") or request.GET.get("next", ""),
        "page_title": "Sign In",
    }
    if request.method == "POST":
        return render_form(request, LOGIN_TEMPLATE, context, AuthService.authenticate(request, request.POST))
    return render_form(request, LOGIN_TEMPLATE, context)


@require_POST
def logout_view(request):
    return redirect(AuthService.sign_out(request).path)
