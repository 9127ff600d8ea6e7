"""API 엔드포인트 패키지 - export only."""

from .dependencies import get_cache_service, get_orchestrator
from .routes import cache_router, health_router, product_router, search_router

__all__ = [
    "health_router",
    "search_router",
    "product_router",
    "cache_router",
    "get_cache_service",
    "get_orchestrator",
]
