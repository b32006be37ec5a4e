from django.contrib.auth.decorators import login_required
from django.shortcuts import render
from django.views.decorators.http import require_GET

from .. import paths
from ..services import DashboardService, ViewCache


@login_required
@require_GET
def overview(request):
    cards = ViewCache.get_or_build(paths.DASHBOARD, DashboardService.card_data)
    return render(request, "pages/dashboard/overview.html", {
        "cards": cards,
        "page_title": "Dashboard",
    })
