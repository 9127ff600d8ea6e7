"""업스트림(스크래핑 벤더) 호출 계층."""

from .http_client import UpstreamClient
from .regional import RegionalFallbackResolver
from .urls import build_scrape_url, marketplace_url

__all__ = [
    "UpstreamClient",
    "RegionalFallbackResolver",
    "build_scrape_url",
    "marketplace_url",
]
