"""
In-memory cache for upstream responses (NYT per-date documents, community archive).
Key: request URL. Value: decoded JSON plus the time it was stored.
Entries older than PUZZLE_CACHE_TTL seconds (default 3600) are re-fetched.
"""

import logging
import os
import threading
import time
from typing import Any, Callable

logger = logging.getLogger(__name__)

DEFAULT_TTL = 3600.0

# Module-level store; key = URL, value = (stored_at monotonic seconds, payload)
_cache: dict[str, tuple[float, Any]] = {}
_lock = threading.Lock()


def _ttl() -> float:
    raw = os.environ.get("PUZZLE_CACHE_TTL")
    if not raw:
        return DEFAULT_TTL
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring invalid PUZZLE_CACHE_TTL=%r", raw)
        return DEFAULT_TTL


def _get(url: str, now: float, ttl: float) -> Any | None:
    """Return cached payload if present and fresh, else None."""
    with _lock:
        entry = _cache.get(url)
    if entry is None:
        return None
    stored_at, payload = entry
    if now - stored_at >= ttl:
        return None
    return payload


def _set(url: str, payload: Any, now: float) -> None:
    with _lock:
        _cache[url] = (now, payload)


def get_or_fetch(
    url: str,
    fetcher: Callable[[], Any],
    *,
    ttl: float | None = None,
    clock: Callable[[], float] = time.monotonic,
) -> Any:
    """
    Return the payload for url from cache if still fresh; otherwise call fetcher(),
    store, and return. Exceptions from fetcher propagate and nothing is stored.

    Args:
        url: Request URL, used as the cache key.
        fetcher: No-arg callable that performs the request and returns decoded JSON.
        ttl: Freshness window in seconds; defaults to PUZZLE_CACHE_TTL.
        clock: Monotonic time source (injectable for tests).
    """
    window = _ttl() if ttl is None else ttl
    cached = _get(url, clock(), window)
    if cached is not None:
        logger.debug("cache hit url=%s", url)
        return cached
    payload = fetcher()
    _set(url, payload, clock())
    return payload


def clear() -> None:
    """Clear the cache (e.g. for tests)."""
    with _lock:
        _cache.clear()
