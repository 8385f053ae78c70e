"""
In-memory caching module for analytics results.

Uses TTLCache for automatic expiration. Every write to expenses, categories,
split settings or historical snapshots calls invalidate_analytics_on_commit(),
which clears the cache immediately and again when the write's transaction
ends, so results cached by readers in between are dropped too.

Note: This is an in-memory cache that doesn't persist across server restarts
and doesn't sync across multiple instances. The app serves a single household,
so one process-local cache is enough.
"""

import logging
from datetime import date
from functools import wraps
from typing import Callable, Any

from cachetools import TTLCache
from sqlalchemy import event
from sqlalchemy.orm import Session

from household.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

_cache: TTLCache = TTLCache(
    maxsize=settings.ANALYTICS_CACHE_MAX_SIZE,
    ttl=settings.ANALYTICS_CACHE_TTL_SECONDS,
)

# Track cache statistics for monitoring
_cache_stats = {"hits": 0, "misses": 0}

# Session.info key marking a transaction that changed analytics inputs
_PENDING_INVALIDATION = "analytics_invalidation_pending"


def _build_cache_key(
    func_name: str,
    include_month: bool = False,
    **params: Any,
) -> str:
    """Build a cache key from function name and parameters.

    Args:
        func_name: Name of the cached function
        include_month: If True, include current month in key (for time-sensitive data)
        **params: Additional parameters to include in the key
    """
    if include_month:
        params["_month"] = date.today().strftime("%Y-%m")

    # Sort params for consistent key generation
    param_str = ":".join(f"{k}={v}" for k, v in sorted(params.items()) if v is not None)
    return f"{func_name}:{param_str}"


def cached(include_month: bool = False):
    """Decorator to cache async method results.

    Args:
        include_month: If True, cache key includes current month.
                      Use for results that depend on "this month" so they
                      auto-invalidate at month boundaries.

    Usage:
        @cached(include_month=True)
        async def get_analytics(self, year: int):
            ...
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(*args, **kwargs) -> Any:
            cache_params = {k: v for k, v in kwargs.items() if k != "db"}

            # Include positional args after self
            arg_names = func.__code__.co_varnames[1:]
            for name, value in zip(arg_names, args[1:]):
                if name != "db" and name not in cache_params:
                    if isinstance(value, (str, int, float, bool, type(None), date)):
                        cache_params[name] = value

            cache_key = _build_cache_key(
                func.__name__,
                include_month=include_month,
                **cache_params,
            )

            if cache_key in _cache:
                _cache_stats["hits"] += 1
                logger.debug(f"Cache HIT: {cache_key}")
                return _cache[cache_key]

            _cache_stats["misses"] += 1
            logger.debug(f"Cache MISS: {cache_key}")

            result = await func(*args, **kwargs)
            _cache[cache_key] = result

            return result

        return wrapper
    return decorator


def invalidate_analytics() -> int:
    """Drop every cached analytics result.

    Call this after any write that can change analytics:
    - Expense created, updated or deleted
    - Category created, updated or deleted
    - Split settings updated
    - Historical snapshots written
    - Backup imported or database cleared

    Returns:
        Number of cache entries invalidated
    """
    count = len(_cache)
    _cache.clear()

    if count:
        logger.info(f"Analytics cache invalidated: {count} entries cleared")

    return count


def invalidate_analytics_on_commit(db) -> int:
    """Invalidate now and once more when the session's transaction ends.

    Args:
        db: AsyncSession (or Session) the write was made in

    Returns:
        Number of cache entries invalidated now
    """
    db.info[_PENDING_INVALIDATION] = True
    return invalidate_analytics()


@event.listens_for(Session, "after_commit")
@event.listens_for(Session, "after_rollback")
def _invalidate_after_transaction(session: Session) -> None:
    if session.info.pop(_PENDING_INVALIDATION, False):
        invalidate_analytics()


def get_cache_stats() -> dict:
    """Get cache statistics for monitoring.

    Returns:
        Dict with hits, misses, hit_rate, and current_size
    """
    total = _cache_stats["hits"] + _cache_stats["misses"]
    hit_rate = (_cache_stats["hits"] / total * 100) if total > 0 else 0

    return {
        "hits": _cache_stats["hits"],
        "misses": _cache_stats["misses"],
        "hit_rate": round(hit_rate, 1),
        "current_size": len(_cache),
        "max_size": _cache.maxsize,
        "ttl_seconds": _cache.ttl,
    }


def clear_all() -> int:
    """Clear the entire cache and reset statistics. Use sparingly (e.g., for testing).

    Returns:
        Number of entries cleared
    """
    count = len(_cache)
    _cache.clear()
    _cache_stats["hits"] = 0
    _cache_stats["misses"] = 0
    logger.info(f"Cache cleared: {count} entries removed")
    return count
