"""Regional Fallback - 마켓플레이스 도메인 순차 재시도

미발견(404/410)은 지역 카탈로그 차이일 수 있으므로 다음 도메인으로 넘어가고,
그 외 오류(타임아웃, 차단, 한도 초과, 서버 오류)는 즉시 전파합니다.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from scraper_api.core.config import Settings, settings as default_settings
from scraper_api.core.exceptions import UpstreamException, UpstreamNotFoundException
from scraper_api.core.logging import logger

from .http_client import UpstreamClient
from .urls import build_scrape_url, marketplace_url


class RegionalFallbackResolver:
    """경로 목록 x 지역 목록 순서로 업스트림 조회"""

    def __init__(
        self,
        client: UpstreamClient,
        settings: Optional[Settings] = None,
        regions: Optional[Sequence[str]] = None,
    ) -> None:
        self.client = client
        self.settings = settings or default_settings
        self.regions = list(regions or self.settings.marketplace_regions)
        if not self.regions:
            raise ValueError("regions must not be empty")

    @staticmethod
    def should_try_next_region(error: Exception) -> bool:
        """다음 지역으로 넘어갈지 여부 (미발견만 재시도)"""
        return isinstance(error, UpstreamNotFoundException)

    async def resolve(self, paths: Sequence[str]) -> Any:
        """
        첫 성공 응답 반환

        Args:
            paths: 경로 템플릿 목록 (보통 1개)

        Returns:
            디코딩된 JSON

        Raises:
            UpstreamNotFoundException: 모든 지역에서 미발견 (마지막 오류 재발생)
            UpstreamException: 미발견 외 오류 (즉시)
        """
        if not paths:
            raise ValueError("paths must not be empty")

        last_error: Optional[UpstreamException] = None
        for path in paths:
            for region in self.regions:
                target = marketplace_url(region, path, self.settings)
                url = build_scrape_url(target, self.settings)
                try:
                    return await self.client.fetch_json(url)
                except UpstreamException as e:
                    if not self.should_try_next_region(e):
                        raise
                    last_error = e
                    logger.warning(f"Regional miss {e.status} for {target}")

        if last_error is None:
            raise ValueError("no regional attempt was made")
        raise last_error
