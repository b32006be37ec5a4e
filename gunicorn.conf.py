"""
LedgerDesk - Gunicorn configuration.

    gunicorn ledgerdesk.wsgi -c gunicorn.conf.py
"""

import logging
import multiprocessing
import os

IS_PRODUCTION = os.getenv("PRODUCTION", "false").lower() == "true"

logging.basicConfig(
    level=logging.INFO if IS_PRODUCTION else logging.DEBUG,
    format='[%(asctime)s] %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


# =============================================================================
# SERVER BINDING
# =============================================================================

bind = [f"0.0.0.0:{int(os.getenv('PORT', 8000))}"]


# =============================================================================
# WORKERS
# =============================================================================

def calculate_workers():
    """Two workers per core plus one, capped so small hosts are not oversubscribed."""
    return min(multiprocessing.cpu_count() * 2 + 1, 9)


workers = int(os.getenv("WEB_CONCURRENCY", calculate_workers()))
worker_class = "gthread"
threads = int(os.getenv("GUNICORN_THREADS", 4))

max_requests = int(os.getenv("GUNICORN_MAX_REQUESTS", 1000))
max_requests_jitter = int(os.getenv("GUNICORN_MAX_REQUESTS_JITTER", 100))


# =============================================================================
# TIMEOUTS & LIMITS
# =============================================================================

timeout = 60
graceful_timeout = int(os.getenv("GUNICORN_GRACEFUL_TIMEOUT", 10))
keepalive = 5

limit_request_line = 8190
limit_request_fields = 100
limit_request_field_size = 8190

preload_app = True
forwarded_allow_ips = os.getenv("FORWARDED_ALLOW_IPS", "127.0.0.1")


# =============================================================================
# LOGGING
# =============================================================================

accesslog = "-"
errorlog = "-"
loglevel = "info" if IS_PRODUCTION else "debug"
capture_output = True

access_log_format = (
    '%(h)s %(t)s "%(r)s" %(s)s %(b)s response_time=%(D)s_us '
    'request_id=%({x-request-id}o)s'
)

proc_name = "ledgerdesk"


def when_ready(server):
    logger.info(f"Gunicorn ready at {server.address} with {workers} workers")


def post_fork(server, worker):
    """Open the database connection before the first request hits the worker."""
    try:
        import django
        django.setup()
        from django.db import connection
        connection.ensure_connection()
    except Exception as e:
        logger.warning(f"Worker {worker.pid}: Failed to pre-warm DB connection: {e}")
