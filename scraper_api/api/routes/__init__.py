"""API routes package."""

from .cache_routes import router as cache_router
from .health_routes import router as health_router
from .product_routes import router as product_router
from .search_routes import router as search_router

__all__ = ["health_router", "search_router", "product_router", "cache_router"]
