# utils/cache_utils.py
"""
View cache over Django's cache framework.

Cached views are stored under ``<key>:g<generation>``. Invalidating a key
bumps its generation instead of deleting the entry, so a fill that read the
generation before an invalidation writes under a key nobody reads again.
"""
from django.conf import settings
from django.core.cache import cache

# Keys of every cached view whose content includes post listings
POSTS_LIST_KEY = "view:posts:list"
POSTS_VIEW_KEYS = (POSTS_LIST_KEY,)


def posts_by_owner_key(user_id: str) -> str:
    return f"view:posts:owner:{user_id}"


def _generation_key(key: str) -> str:
    return f"{key}:gen"


def get_generation(key: str) -> int:
    gen_key = _generation_key(key)
    cache.add(gen_key, 0, None)
    return cache.get(gen_key, 0)


def versioned_key(key: str, generation: int) -> str:
    return f"{key}:g{generation}"


def set_cache(key: str, value, ttl: int = None):
    """
    Set a value in cache with an optional TTL (seconds).
    """
    if ttl is None:
        ttl = getattr(settings, "POSTS_VIEW_CACHE_TTL", 300)
    cache.set(key, value, ttl)


def get_cache(key: str):
    """
    Retrieve a value from cache. Returns None if expired or not found.
    """
    return cache.get(key)


def get_or_set_cache(key: str, builder, ttl: int = None):
    """
    Return the cached value for key, computing and storing it on a miss.
    The entry is written under the generation read before ``builder`` runs.
    """
    entry_key = versioned_key(key, get_generation(key))
    value = get_cache(entry_key)
    if value is None:
        value = builder()
        set_cache(entry_key, value, ttl)
    return value


def invalidate_cache(*keys: str):
    """
    Move each key to a new generation; entries of older generations expire unread.
    """
    for key in keys:
        gen_key = _generation_key(key)
        cache.add(gen_key, 0, None)
        cache.incr(gen_key)


def clear_cache():
    """
    Clear all cache.
    """
    cache.clear()
