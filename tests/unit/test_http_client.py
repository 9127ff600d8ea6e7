"""업스트림 클라이언트 / URL 생성 테스트 (httpx.MockTransport)"""
from urllib.parse import parse_qs, urlparse

import httpx
import pytest

from scraper_api.core.exceptions import (
    UpstreamBlockedException,
    UpstreamNotFoundException,
    UpstreamRateLimitedException,
    UpstreamTimeoutException,
    UpstreamUnknownException,
)
from scraper_api.upstream import UpstreamClient, build_scrape_url, marketplace_url
from scraper_api.upstream.urls import details_path, offers_path, reviews_path, search_path

TARGET = "https://www.amazon.com/dp/B08N5WRWNW"


class TestUrls:
    def test_marketplace_url(self, test_settings):
        assert marketplace_url(".co.uk", "/dp/B000000000", test_settings) == "https://www.amazon.co.uk/dp/B000000000"

    def test_build_scrape_url(self, test_settings):
        url = build_scrape_url(TARGET, test_settings)
        parsed = urlparse(url)
        params = parse_qs(parsed.query)

        assert url.startswith("http://api.scraperapi.com?")
        assert params["api_key"] == ["test-key"]
        assert params["autoparse"] == ["true"]
        assert params["url"] == [TARGET]

    def test_paths(self):
        assert details_path("B000000000") == "/dp/B000000000"
        assert reviews_path("B000000000") == "/product-reviews/B000000000"
        assert offers_path("B000000000") == "/gp/offer-listing/B000000000"
        assert search_path("usb c cable") == "/s?k=usb+c+cable"


class TestFetchJson:
    @pytest.mark.asyncio
    async def test_success_with_fixed_headers(self, vendor, upstream, test_settings):
        vendor.add(TARGET, json={"name": "Echo Dot"})

        data = await upstream.fetch_json(build_scrape_url(TARGET, test_settings))

        assert data == {"name": "Echo Dot"}
        request = vendor.requests[0]
        assert request.headers["User-Agent"] == "Mozilla/5.0"
        assert request.headers["Accept-Language"] == "en-US,en;q=0.9"
        await upstream.close()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status, expected",
        [
            (403, UpstreamBlockedException),
            (429, UpstreamRateLimitedException),
            (404, UpstreamNotFoundException),
            (410, UpstreamNotFoundException),
            (500, UpstreamUnknownException),
            (503, UpstreamUnknownException),
        ],
    )
    async def test_status_classification(self, vendor, upstream, test_settings, status, expected):
        vendor.add(TARGET, status=status, text="x" * 500)

        with pytest.raises(expected) as exc_info:
            await upstream.fetch_json(build_scrape_url(TARGET, test_settings))

        assert exc_info.value.status == status
        assert len(exc_info.value.body_snippet) == 200
        await upstream.close()

    @pytest.mark.asyncio
    async def test_timeout(self, vendor, upstream, test_settings):
        vendor.add(TARGET, error=httpx.ReadTimeout("timed out"))

        with pytest.raises(UpstreamTimeoutException) as exc_info:
            await upstream.fetch_json(build_scrape_url(TARGET, test_settings))

        assert exc_info.value.timeout_s == 20.0
        assert exc_info.value.error_code == "UPSTREAM_TIMEOUT"
        await upstream.close()

    @pytest.mark.asyncio
    async def test_transport_error(self, vendor, upstream, test_settings):
        vendor.add(TARGET, error=httpx.ConnectError("refused"))

        with pytest.raises(UpstreamUnknownException):
            await upstream.fetch_json(build_scrape_url(TARGET, test_settings))
        await upstream.close()

    @pytest.mark.asyncio
    async def test_api_key_not_in_error_url(self, vendor, upstream, test_settings):
        vendor.add(TARGET, status=403, text="blocked")

        with pytest.raises(UpstreamBlockedException) as exc_info:
            await upstream.fetch_json(build_scrape_url(TARGET, test_settings))

        assert "test-key" not in exc_info.value.url
        assert "api_key=***" in exc_info.value.url
        await upstream.close()

    @pytest.mark.asyncio
    async def test_invalid_json_is_not_classified(self, vendor, upstream, test_settings):
        """JSON이 아닌 본문은 업스트림 오류로 분류하지 않고 그대로 전파"""
        vendor.add(TARGET, text="<html>not json</html>")

        with pytest.raises(ValueError):
            await upstream.fetch_json(build_scrape_url(TARGET, test_settings))
        await upstream.close()

    @pytest.mark.asyncio
    async def test_client_reused_and_closed(self, vendor, test_settings):
        client = UpstreamClient(test_settings, transport=vendor.transport)
        vendor.add(TARGET, json={})

        await client.fetch_json(build_scrape_url(TARGET, test_settings))
        first = client._client
        await client.fetch_json(build_scrape_url(TARGET, test_settings))
        assert client._client is first

        await client.close()
        assert client._client is None
