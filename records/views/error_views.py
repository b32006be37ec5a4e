import logging

from django.shortcuts import render

logger = logging.getLogger(__name__)


def page_not_found(request, exception):
    return render(request, "errors/404.html", status=404)


def server_error(request):
    logger.error("Rendering generic failure page for %s %s", request.method, request.path)
    return render(request, "errors/500.html", status=500)
