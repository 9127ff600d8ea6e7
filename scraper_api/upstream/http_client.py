"""업스트림 HTTP 클라이언트 (httpx)

- 요청마다 AsyncClient를 만들면 커넥션 오버헤드가 커지므로 인스턴스 단위로 재사용합니다.
- 앱 종료 시 close()로 정리합니다.
"""

from __future__ import annotations

import asyncio
from typing import Any, Dict, Optional

import httpx

from scraper_api.core.config import Settings, settings as default_settings
from scraper_api.core.exceptions import (
    UpstreamTimeoutException,
    UpstreamUnknownException,
    classify_http_error,
)
from scraper_api.core.logging import logger, sanitize_url

BODY_SNIPPET_LENGTH = 200


class UpstreamClient:
    """스크래핑 벤더 JSON 클라이언트"""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Args:
            settings: 설정 (기본: 전역 settings)
            transport: httpx 트랜스포트 (테스트에서 MockTransport 주입)
        """
        self.settings = settings or default_settings
        self._transport = transport
        self._lock = asyncio.Lock()
        self._client: Optional[httpx.AsyncClient] = None

    async def _ensure_client(self) -> httpx.AsyncClient:
        async with self._lock:
            if self._client is not None:
                return self._client
            self._client = httpx.AsyncClient(
                headers=self.default_headers(),
                timeout=httpx.Timeout(self.settings.upstream_timeout_s),
                limits=httpx.Limits(max_connections=self.settings.upstream_max_connections),
                follow_redirects=True,
                transport=self._transport,
            )
            return self._client

    def default_headers(self) -> Dict[str, str]:
        return {
            "User-Agent": self.settings.upstream_user_agent,
            "Accept-Language": self.settings.upstream_accept_language,
        }

    async def fetch_json(self, url: str) -> Any:
        """
        벤더 URL 1회 GET 후 JSON 반환

        Args:
            url: build_scrape_url()로 만든 벤더 URL

        Returns:
            디코딩된 JSON

        Raises:
            UpstreamTimeoutException: 타임아웃
            UpstreamBlockedException / UpstreamRateLimitedException /
            UpstreamNotFoundException / UpstreamUnknownException: non-2xx 또는 전송 오류
            ValueError: 본문이 JSON이 아닌 경우 (벤더 계약 위반)
        """
        client = await self._ensure_client()
        safe_url = sanitize_url(url)

        try:
            resp = await client.get(url)
        except httpx.TimeoutException as e:
            logger.error(f"[UPSTREAM] Timeout after {self.settings.upstream_timeout_s}s: {safe_url}")
            raise UpstreamTimeoutException(safe_url, self.settings.upstream_timeout_s) from e
        except httpx.RequestError as e:
            logger.error(f"[UPSTREAM] Transport error: {type(e).__name__}: {safe_url}")
            raise UpstreamUnknownException(
                f"Transport error: {type(e).__name__}", url=safe_url
            ) from e

        if not resp.is_success:
            snippet = resp.text[:BODY_SNIPPET_LENGTH]
            logger.info(f"[UPSTREAM] HTTP {resp.status_code} on {safe_url}")
            raise classify_http_error(resp.status_code, safe_url, snippet)

        return resp.json()

    async def close(self) -> None:
        async with self._lock:
            if self._client is None:
                return
            await self._client.aclose()
            self._client = None
