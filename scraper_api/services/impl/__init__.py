"""Services implementation package."""

from .cache_service import CacheService, CacheStats

__all__ = ["CacheService", "CacheStats"]
