"""캐시 서비스 - export only."""

from .impl import CacheService, CacheStats

__all__ = ["CacheService", "CacheStats"]
