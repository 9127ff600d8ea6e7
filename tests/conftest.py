"""전역 테스트 설정

역할:
- 테스트 환경 구성
- 벤더(스크래핑 API) Fake 주입
- 앱/캐시 인스턴스를 테스트마다 새로 구성

금지:
- 실제 네트워크 호출
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import httpx
import pytest


# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from scraper_api.core.config import Settings  # noqa: E402
from scraper_api.services.impl.cache_service import CacheService  # noqa: E402
from scraper_api.upstream.http_client import UpstreamClient  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def test_env() -> None:
    """테스트 환경 변수 설정 (세션 전역)"""
    os.environ["ENVIRONMENT"] = "test"
    os.environ["LOG_LEVEL"] = "INFO"


@dataclass
class FakeClock:
    """CacheService 만료 테스트용 수동 시계"""

    now: float = 1000.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@dataclass
class VendorRoute:
    status: int = 200
    json: Any = None
    text: str = ""
    error: Optional[Exception] = None


@dataclass
class VendorStub:
    """스크래핑 벤더 대역 (httpx.MockTransport)

    요청의 ``url`` 파라미터(마켓플레이스 대상 URL)로 응답을 고릅니다.
    등록되지 않은 대상은 404를 돌려줍니다.
    """

    routes: dict[str, VendorRoute] = field(default_factory=dict)
    calls: list[str] = field(default_factory=list)
    requests: list[httpx.Request] = field(default_factory=list)

    def add(
        self,
        target: str,
        json: Any = None,
        status: int = 200,
        text: str = "",
        error: Optional[Exception] = None,
    ) -> None:
        self.routes[target] = VendorRoute(status=status, json=json, text=text, error=error)

    def handler(self, request: httpx.Request) -> httpx.Response:
        target = request.url.params.get("url")
        self.calls.append(target)
        self.requests.append(request)

        route = self.routes.get(target)
        if route is None:
            return httpx.Response(404, text="Not Found")
        if route.error is not None:
            raise route.error
        if route.json is not None:
            return httpx.Response(route.status, json=route.json)
        return httpx.Response(route.status, text=route.text)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        api_key="test-key",
        cache_check_period_s=0,
        marketplace_regions=[".com", ".ca", ".co.uk"],
        search_region=".com",
    )


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(fake_clock: FakeClock) -> CacheService:
    return CacheService(clock=fake_clock)


@pytest.fixture
def vendor() -> VendorStub:
    return VendorStub()


@pytest.fixture
def upstream(vendor: VendorStub, test_settings: Settings) -> UpstreamClient:
    return UpstreamClient(test_settings, transport=vendor.transport)
