"""라우트 의존성 - app.state에 구성된 인스턴스를 꺼내 줍니다."""
from fastapi import Request

from scraper_api.core.config import Settings
from scraper_api.engine.orchestrator import ProductOrchestrator
from scraper_api.services.impl.cache_service import CacheService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_cache_service(request: Request) -> CacheService:
    """앱 단위 CacheService"""
    return request.app.state.cache_service


def get_orchestrator(request: Request) -> ProductOrchestrator:
    """앱 단위 ProductOrchestrator"""
    return request.app.state.orchestrator
