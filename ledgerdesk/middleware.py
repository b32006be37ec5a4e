import time
import uuid
import logging
import threading

logger = logging.getLogger(__name__)

_request_state = threading.local()


def get_current_request_id():
    return getattr(_request_state, "request_id", "no-id")


class RequestIDFilter(logging.Filter):
    """Stamps every log record with the id of the request being served."""

    def filter(self, record):
        record.request_id = get_current_request_id()
        return True


class RequestIDMiddleware:
    """Tags each request with an id (client supplied or generated) and logs its timing."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        request.request_id = request_id
        _request_state.request_id = request_id
        started = time.monotonic()
        try:
            response = self.get_response(request)
            elapsed_ms = (time.monotonic() - started) * 1000
            level = logging.WARNING if response.status_code >= 500 else logging.INFO
            logger.log(level, "%s %s -> %s (%.1f ms)", request.method, request.path, response.status_code, elapsed_ms)
            response["X-Request-ID"] = request_id
            return response
        finally:
            _request_state.request_id = "no-id"
