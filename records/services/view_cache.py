"""Data caching for dashboard views, keyed by logical view path."""

import hashlib
import logging
from typing import Any, Callable, Optional

from django.conf import settings
from django.core.cache import cache

logger = logging.getLogger(__name__)


class ViewCache:
    """Read-through cache of the data a view renders, invalidated after mutations."""

    KEY_PREFIX = "view"

    @staticmethod
    def normalize(view_path: str) -> str:
        return "/" + view_path.strip().strip("/")

    @classmethod
    def make_key(cls, view_path: str) -> str:
        key_data = f"{cls.KEY_PREFIX}:{cls.normalize(view_path)}"
        return f"{cls.KEY_PREFIX}:{hashlib.md5(key_data.encode()).hexdigest()}"

    @classmethod
    def get_or_build(cls, view_path: str, builder: Callable[[], Any], timeout: Optional[int] = None) -> Any:
        key = cls.make_key(view_path)
        data = cache.get(key)
        if data is not None:
            return data

        data = builder()
        cache.set(key, data, timeout if timeout is not None else settings.VIEW_CACHE_TIMEOUT)
        return data

    @classmethod
    def invalidate(cls, view_path: str) -> None:
        """Mark a view's cached data stale. Invalidating a stale path does nothing."""
        cache.delete(cls.make_key(view_path))
        logger.debug("Invalidated view cache for %s", cls.normalize(view_path))
