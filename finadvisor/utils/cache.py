import os
import time
from functools import wraps
import json
import hashlib


class SimpleMemoryCache:
    def __init__(self, ttl=300):
        self._cache = {}
        self.ttl = ttl

    def get(self, key):
        entry = self._cache.get(key)
        if entry is None:
            return None
        if time.time() - entry["time"] < self.ttl:
            return entry["data"]
        # another worker may have evicted it already
        self._cache.pop(key, None)
        return None

    def set(self, key, value):
        self._cache[key] = {
            'time': time.time(),
            'data': value
        }

    def clear(self):
        self._cache.clear()


# Live quotes only; synthetic placeholders are never stored
quote_cache = SimpleMemoryCache(ttl=float(os.getenv("QUOTE_CACHE_TTL", "60")))


def cache_result(cache: SimpleMemoryCache):
    """Decorator to memoise a function's non-None results in ``cache``."""
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            # Create a deterministic key from args and kwargs
            key_data = json.dumps({'fn': func.__name__, 'args': args, 'kwargs': kwargs}, sort_keys=True, default=str)
            key = hashlib.md5(key_data.encode('utf-8')).hexdigest()

            cached = cache.get(key)
            if cached is not None:
                return cached

            result = func(*args, **kwargs)
            if result is not None:
                cache.set(key, result)
            return result
        return wrapper
    return decorator
