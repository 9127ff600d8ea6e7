"""벤더 URL 생성 유틸리티"""
from typing import Optional
from urllib.parse import quote_plus, urlencode

from scraper_api.core.config import Settings, settings as default_settings


def marketplace_url(region: str, path: str, settings: Optional[Settings] = None) -> str:
    """
    마켓플레이스 대상 URL 생성

    Examples:
        >>> marketplace_url(".co.uk", "/dp/B000000000")
        'https://www.amazon.co.uk/dp/B000000000'

    Args:
        region: 도메인 접미사 (예: ".com")
        path: 경로 (예: "/dp/<ASIN>")
    """
    cfg = settings or default_settings
    return f"https://{cfg.marketplace_host}{region}{path}"


def build_scrape_url(target_url: str, settings: Optional[Settings] = None) -> str:
    """
    스크래핑 벤더 호출 URL 생성

    ``<vendor>?api_key=<key>&autoparse=true&url=<encoded target>``
    """
    cfg = settings or default_settings
    params = {"api_key": cfg.api_key}
    if cfg.scraper_autoparse:
        params["autoparse"] = "true"
    params["url"] = target_url
    return f"{cfg.scraper_api_url}?{urlencode(params)}"


def search_path(query: str) -> str:
    """검색 경로 (``/s?k=<query>``)"""
    return f"/s?k={quote_plus(query)}"


def details_path(asin: str) -> str:
    return f"/dp/{asin}"


def reviews_path(asin: str) -> str:
    return f"/product-reviews/{asin}"


def offers_path(asin: str) -> str:
    return f"/gp/offer-listing/{asin}"
