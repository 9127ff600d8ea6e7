"""FastAPI 앱 팩토리"""
import asyncio
import time
from contextlib import asynccontextmanager, suppress
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from scraper_api.api import cache_router, health_router, product_router, search_router
from scraper_api.api.errors import (
    http_exception_handler,
    scraper_api_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from scraper_api.api.middleware import RequestLoggingMiddleware
from scraper_api.core.config import Settings, settings as default_settings
from scraper_api.core.exceptions import ScraperApiException
from scraper_api.core.logging import logger
from scraper_api.engine.orchestrator import ProductOrchestrator
from scraper_api.services.impl.cache_service import CacheService
from scraper_api.upstream.http_client import UpstreamClient


async def _sweep_expired_loop(cache_service: CacheService, period_s: int) -> None:
    """만료 캐시 엔트리 주기적 정리"""
    while True:
        await asyncio.sleep(period_s)
        removed = cache_service.sweep_expired()
        if removed:
            logger.info(f"[CACHE] Swept {removed} expired keys")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기"""
    logger.info("Starting application...")
    settings: Settings = app.state.settings
    if not settings.api_key:
        logger.warning("API_KEY is not set; upstream requests will be rejected by the vendor")

    sweep_task: Optional[asyncio.Task] = None
    if settings.cache_check_period_s > 0:
        sweep_task = asyncio.create_task(
            _sweep_expired_loop(app.state.cache_service, settings.cache_check_period_s)
        )
    logger.info(f"Server running on port: {settings.port}")
    yield
    logger.info("Shutting down application...")
    if sweep_task is not None:
        sweep_task.cancel()
        with suppress(asyncio.CancelledError):
            await sweep_task
    await app.state.upstream_client.close()


def create_app(
    settings: Optional[Settings] = None,
    cache_service: Optional[CacheService] = None,
    upstream_client: Optional[UpstreamClient] = None,
) -> FastAPI:
    """
    FastAPI 앱 생성 (Factory Pattern)

    캐시/업스트림 클라이언트는 앱마다 새로 구성되므로 테스트에서 독립된 인스턴스를 얻을 수 있습니다.

    Args:
        settings: 설정 (기본: 전역 settings)
        cache_service: 캐시 (기본: 새 인메모리 캐시)
        upstream_client: 업스트림 클라이언트 (기본: 새 httpx 클라이언트)

    Returns:
        FastAPI 앱 인스턴스
    """
    settings = settings or default_settings
    cache_service = cache_service or CacheService()
    upstream_client = upstream_client or UpstreamClient(settings)

    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        lifespan=lifespan
    )

    app.state.settings = settings
    app.state.cache_service = cache_service
    app.state.upstream_client = upstream_client
    app.state.orchestrator = ProductOrchestrator(
        cache=cache_service,
        client=upstream_client,
        settings=settings,
    )
    app.state.started_at = time.monotonic()

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    # 예외 핸들러
    app.add_exception_handler(ScraperApiException, scraper_api_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # 라우터 등록
    app.include_router(health_router)
    app.include_router(search_router)
    app.include_router(product_router)
    app.include_router(cache_router)

    return app

# 앱 인스턴스 생성 (uvicorn이 로드할 수 있도록)
app = create_app()
