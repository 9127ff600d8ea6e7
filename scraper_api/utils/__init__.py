"""유틸리티 패키지 - export only."""

from .cache_keys import CacheVariant, product_key, search_key
from .validators import InputValidator, is_asin, normalize_asin

__all__ = [
    "CacheVariant",
    "product_key",
    "search_key",
    "InputValidator",
    "is_asin",
    "normalize_asin",
]
