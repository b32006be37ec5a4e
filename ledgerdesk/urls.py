from django.contrib import admin
from django.urls import path, include
from django.views.generic import RedirectView

handler404 = "records.views.error_views.page_not_found"
handler500 = "records.views.error_views.server_error"

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/v1/", include("records.api.urls")),
    path("", RedirectView.as_view(url="/dashboard/", permanent=False), name="home"),
    path("", include("records.urls", namespace="records")),
]
