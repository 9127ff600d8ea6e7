"""응답 스키마 - export only."""

from .product_schema import (
    BasicProduct,
    CacheClearResponse,
    CacheStatsData,
    CacheStatsResponse,
    ErrorResponse,
    FullProduct,
    HealthDetailsResponse,
    MessageResponse,
    QuickInfo,
    SearchResponse,
    WelcomeResponse,
)

__all__ = [
    "BasicProduct",
    "CacheClearResponse",
    "CacheStatsData",
    "CacheStatsResponse",
    "ErrorResponse",
    "FullProduct",
    "HealthDetailsResponse",
    "MessageResponse",
    "QuickInfo",
    "SearchResponse",
    "WelcomeResponse",
]
