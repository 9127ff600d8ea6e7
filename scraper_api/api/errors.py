"""예외 → HTTP 응답 변환 (HTTP 경계)"""
from typing import Any, Dict, Tuple

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from scraper_api.core.exceptions import (
    ResourceNotFoundException,
    ScraperApiException,
    UpstreamBlockedException,
    UpstreamNotFoundException,
    UpstreamRateLimitedException,
    UpstreamTimeoutException,
    UpstreamUnknownException,
    ValidationException,
)
from scraper_api.core.logging import logger

AVAILABLE_ROUTES = [
    "GET /",
    "GET /health",
    "GET /health/details",
    "GET /search/:searchQuery",
    "GET /products/:productId",
    "GET /products/:productId/reviews",
    "GET /products/:productId/offers",
    "GET /products/:productId/quick",
    "GET /cache/stats",
    "DELETE /cache",
]


def error_response(exc: ScraperApiException) -> Tuple[int, Dict[str, Any]]:
    """예외 종류별 (상태 코드, 본문)

    Args:
        exc: 서비스 예외

    Returns:
        (HTTP 상태 코드, ``{"message", "error"?}``)
    """
    if isinstance(exc, ValidationException):
        return 400, {"message": exc.message}

    if isinstance(exc, UpstreamTimeoutException):
        logger.error(f"Timeout fetching {exc.url}")
        return 504, {"message": "Upstream timeout"}

    if isinstance(exc, UpstreamBlockedException):
        logger.error(f"Blocked (403) {exc.url}: {exc.message}")
        return 502, {"message": "Upstream request blocked"}

    if isinstance(exc, UpstreamRateLimitedException):
        logger.error(f"Rate limited (429) {exc.url}")
        return 429, {"message": "Rate limited by upstream"}

    if isinstance(exc, UpstreamNotFoundException):
        logger.warning(f"Not found ({exc.status}) {exc.url}")
        return 404, {"message": "Not found"}

    if isinstance(exc, ResourceNotFoundException):
        logger.warning(f"Not found: {exc.message}")
        return 404, {"message": exc.message}

    if isinstance(exc, UpstreamUnknownException):
        logger.error(f"Unhandled upstream error {exc.url}: {exc.message}")
        return 500, {"message": "Internal Server Error", "error": exc.message}

    logger.error(f"Unhandled service error: {exc}")
    return 500, {"message": "Internal Server Error", "error": exc.message}


async def scraper_api_exception_handler(request: Request, exc: ScraperApiException) -> JSONResponse:
    status_code, body = error_response(exc)
    return JSONResponse(status_code=status_code, content=body)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """라우팅 실패 시 사용 가능한 라우트 목록을 함께 반환

    경로는 있지만 메서드가 다른 경우(405)도 없는 라우트로 보고 404로 응답합니다.
    """
    if exc.status_code in (404, 405):
        return JSONResponse(
            status_code=404,
            content={
                "message": f"Route {request.method} {request.url.path} not found",
                "availableRoutes": AVAILABLE_ROUTES,
            },
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return JSONResponse(status_code=400, content={"message": message})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {type(exc).__name__}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"message": "Internal server error", "error": str(exc)},
    )
