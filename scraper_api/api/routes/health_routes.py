"""헬스 체크 엔드포인트"""
import platform
import time

import psutil
from fastapi import APIRouter, Depends, Request

from scraper_api import __version__
from scraper_api.api.dependencies import get_cache_service, get_settings
from scraper_api.core.config import Settings
from scraper_api.schemas.product_schema import HealthDetailsResponse, MessageResponse, WelcomeResponse
from scraper_api.services.impl.cache_service import CacheService

router = APIRouter(tags=["health"])


@router.get("/", response_model=WelcomeResponse)
async def root(settings: Settings = Depends(get_settings)):
    """루트 엔드포인트"""
    return WelcomeResponse(message=settings.welcome_message, version=__version__, docs="/docs")


@router.get("/health", response_model=MessageResponse)
async def health_check():
    """헬스 체크 엔드포인트 (liveness)"""
    return MessageResponse(message="API is healthy")


@router.get("/health/details", response_model=HealthDetailsResponse)
async def health_check_details(
    request: Request,
    settings: Settings = Depends(get_settings),
    cache_service: CacheService = Depends(get_cache_service),
):
    """
    상세 헬스 체크

    - 가동 시간
    - 프로세스 메모리 (RSS)
    - 런타임/환경 정보
    - 캐시 키 개수
    """
    uptime_s = time.monotonic() - request.app.state.started_at
    memory_rss = psutil.Process().memory_info().rss

    return HealthDetailsResponse(
        message="API is healthy",
        uptime_s=round(uptime_s, 3),
        memory_rss_bytes=memory_rss,
        python_version=platform.python_version(),
        environment=settings.environment,
        version=__version__,
        cache_keys=cache_service.stats().keys,
    )
