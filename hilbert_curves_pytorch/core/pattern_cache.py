"""
Caching of materialised curve coordinates.

Walking a whole curve costs one ``map`` call per cell, so consumers that draw
or reorder the same grid repeatedly can share the result through this cache.
"""

import logging
import threading
from collections import OrderedDict
from typing import Any

import numpy as np

logger = logging.getLogger(__name__)


class PatternCache:
    """
    Thread-safe LRU cache for curve patterns.

    Args:
        max_size: Maximum number of patterns to cache (default: 32)
        enable_stats: Whether to track cache hit/miss statistics
    """

    def __init__(self, max_size: int = 32, enable_stats: bool = True):
        if max_size <= 0:
            raise ValueError(f"max_size must be positive, got {max_size}")

        self.max_size = max_size
        self.enable_stats = enable_stats

        self._cache: OrderedDict[str, Any] = OrderedDict()
        self._lock = threading.RLock()

        # Statistics
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def get(self, key: str) -> Any | None:
        """Return the cached pattern for key, or None if not found."""
        with self._lock:
            if key not in self._cache:
                if self.enable_stats:
                    self._misses += 1
                return None

            # Move to end (most recently used)
            self._cache.move_to_end(key)
            if self.enable_stats:
                self._hits += 1
            return self._cache[key]

    def put(self, key: str, pattern: Any) -> None:
        """
        Store a pattern in the cache.

        Numpy arrays are made read-only so a cached pattern cannot be changed
        through a reference handed out by ``get``.
        """
        if isinstance(pattern, np.ndarray):
            pattern.flags.writeable = False

        with self._lock:
            if key in self._cache:
                self._cache.move_to_end(key)
            elif len(self._cache) >= self.max_size:
                removed_key, _ = self._cache.popitem(last=False)
                if self.enable_stats:
                    self._evictions += 1
                logger.debug(f"Evicted pattern with key: {removed_key}")

            self._cache[key] = pattern

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._cache

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def clear(self) -> None:
        """Clear all cached patterns."""
        with self._lock:
            self._cache.clear()
            logger.info("Pattern cache cleared")

    def get_stats(self) -> dict[str, Any]:
        """Get cache statistics."""
        with self._lock:
            total_accesses = self._hits + self._misses
            hit_rate = self._hits / total_accesses if total_accesses > 0 else 0.0

            return {
                "size": len(self._cache),
                "max_size": self.max_size,
                "hits": self._hits,
                "misses": self._misses,
                "evictions": self._evictions,
                "hit_rate": hit_rate,
                "total_accesses": total_accesses,
            }

    def reset_stats(self) -> None:
        """Reset cache statistics."""
        with self._lock:
            self._hits = 0
            self._misses = 0
            self._evictions = 0


class CurvePatternCache(PatternCache):
    """
    Pattern cache keyed by curve variant and grid size.

    Curves are immutable and fully described by their class and n, so two
    equal curves share one cache entry.
    """

    def get_coordinates(self, curve: Any) -> np.ndarray | None:
        """Get cached [n*n, 2] coordinates for a curve, or None."""
        return self.get(self._make_curve_key(curve, "coords"))

    def put_coordinates(self, curve: Any, coordinates: np.ndarray) -> None:
        """Cache the [n*n, 2] coordinates of a curve."""
        self.put(self._make_curve_key(curve, "coords"), coordinates)

    @staticmethod
    def _make_curve_key(curve: Any, kind: str) -> str:
        """Generate cache key for a curve pattern."""
        cls = type(curve)
        return f"{kind}_{cls.__module__}.{cls.__qualname__}_n{curve.n}"


# Global cache instance for shared use across modules
_global_pattern_cache: CurvePatternCache | None = None
_cache_lock = threading.Lock()


def get_global_pattern_cache(
    max_size: int = 32, enable_stats: bool = True
) -> CurvePatternCache:
    """
    Get or create the global pattern cache instance.

    Args:
        max_size: Maximum cache size, used only when the cache is created
        enable_stats: Whether to enable statistics tracking

    Returns:
        Global CurvePatternCache instance
    """
    global _global_pattern_cache

    if _global_pattern_cache is None:
        with _cache_lock:
            if _global_pattern_cache is None:
                _global_pattern_cache = CurvePatternCache(
                    max_size=max_size, enable_stats=enable_stats
                )
                logger.info(f"Created global pattern cache with max_size={max_size}")

    return _global_pattern_cache


def clear_global_cache() -> None:
    """Clear the global pattern cache."""
    if _global_pattern_cache is not None:
        _global_pattern_cache.clear()
        logger.info("Global pattern cache cleared")
