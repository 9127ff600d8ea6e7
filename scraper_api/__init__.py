"""Scraper API 게이트웨이 - 상품/검색 조회를 외부 스크래핑 API로 중계하고 캐시합니다."""

__version__ = "1.0.0"
