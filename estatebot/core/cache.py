import threading
from cachetools import TTLCache
from .config import settings

# In-process counters for local dev and single-worker deployments.
_local_cache = TTLCache(maxsize=4096, ttl=settings.CACHE_TTL_SECONDS)
# TTLCache is not thread-safe; sync dependencies run in the threadpool
_local_lock = threading.Lock()

try:
    import redis  # Optional dependency
except ImportError:
    redis = None

class Cache:
    """
    Thin abstraction over Redis/in-memory so swapping is one flag away.
    """
    def __init__(self, ttl_seconds: int | None = None):
        self.ttl = ttl_seconds or settings.CACHE_TTL_SECONDS
        self.backend = None
        if settings.USE_REDIS and redis is not None:
            self.backend = redis.Redis.from_url(settings.REDIS_URL, decode_responses=True)

    def incr(self, key: str) -> int:
        """Increment a counter, creating it at 1 with the cache TTL."""
        if self.backend:
            pipe = self.backend.pipeline()
            pipe.incr(key)
            pipe.expire(key, self.ttl)
            count, _ = pipe.execute()
            return int(count)
        with _local_lock:
            count = int(_local_cache.get(key, 0)) + 1
            _local_cache[key] = count
        return count

    def clear(self) -> None:
        """Drop in-process entries (used by tests)."""
        with _local_lock:
            _local_cache.clear()

cache = Cache()
