import os
import logging
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)

REQUIRED_PRODUCTION_ENV_VARS = [
    "SECRET_KEY",
    "DATABASE_URL",
    "ALLOWED_HOSTS",
]


def validate_env():
    """
    Validate the environment before settings are built.
    Development only warns; production refuses to start on a bad setup.
    """
    is_production = os.getenv("PRODUCTION", "false").lower() == "true"
    secret_key = os.getenv("SECRET_KEY")

    if not is_production:
        if not secret_key:
            logger.warning("SECRET_KEY not set, using insecure default for development.")
        return

    missing = [var for var in REQUIRED_PRODUCTION_ENV_VARS if not os.getenv(var)]
    if missing:
        error_msg = f"CRITICAL: Missing required environment variables in production: {', '.join(missing)}"
        logger.critical(error_msg)
        raise ImproperlyConfigured(error_msg)

    if secret_key.startswith("django-insecure") or len(secret_key) < 50:
        error_msg = "CRITICAL: SECRET_KEY must be a long, secure string in production"
        logger.critical(error_msg)
        raise ImproperlyConfigured(error_msg)
