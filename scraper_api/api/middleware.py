"""요청 로깅 미들웨어"""
import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from scraper_api.core.logging import logger, sanitize_for_log


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """요청별 ``METHOD path - status - ms`` 로그와 X-Process-Time 헤더"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        response.headers["X-Process-Time"] = f"{duration_ms / 1000:.3f}"
        logger.info(
            f"{request.method} {sanitize_for_log(request.url.path, max_length=300)} "
            f"- {response.status_code} - {duration_ms:.0f}ms"
        )
        return response
