"""설정 관리 - 환경 변수 로드 및 검증"""
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # 스크래핑 벤더
    api_key: str = ""
    scraper_api_url: str = "http://api.scraperapi.com"
    scraper_autoparse: bool = True

    # 마켓플레이스 도메인
    # 순서가 곧 지역 폴백 순서입니다.
    marketplace_host: str = "www.amazon"
    marketplace_regions: List[str] = [".com", ".ca", ".co.uk"]
    search_region: str = ".com"

    # 업스트림 HTTP
    upstream_timeout_s: float = 20.0
    upstream_user_agent: str = "Mozilla/5.0"
    upstream_accept_language: str = "en-US,en;q=0.9"
    upstream_max_connections: int = 20

    # 캐시 TTL (초)
    cache_ttl: int = 60 * 60 * 12
    cache_empty_reviews_ttl: int = 60 * 60
    cache_empty_offers_ttl: int = 60 * 30
    # 만료 엔트리 정리 주기. 0이면 정리 태스크를 띄우지 않습니다.
    cache_check_period_s: int = 600

    # 입력 검증
    search_max_length: int = 200

    # API
    api_title: str = "Amazon Scraper API"
    api_version: str = "1.0.0"
    api_description: str = "스크래핑 벤더 응답을 정규화/캐시하여 상품 조회 엔드포인트로 제공합니다."
    welcome_message: str = "Welcome to Dungy's Amazon Scraper API"

    # 서버
    host: str = "0.0.0.0"
    port: int = 5000
    environment: str = "development"

    # 로깅
    log_level: str = "INFO"

    @field_validator("cache_ttl", "cache_empty_reviews_ttl", "cache_empty_offers_ttl")
    @classmethod
    def validate_cache_ttl(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("cache TTLs must be positive")
        return v

    @field_validator("cache_check_period_s")
    @classmethod
    def validate_check_period(cls, v: int) -> int:
        if v < 0:
            raise ValueError("cache_check_period_s must be >= 0")
        return v

    @field_validator("upstream_timeout_s")
    @classmethod
    def validate_upstream_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("upstream_timeout_s must be positive")
        return v

    @field_validator("upstream_max_connections", "search_max_length")
    @classmethod
    def validate_positive_int(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("value must be positive")
        return v

    @field_validator("marketplace_regions")
    @classmethod
    def validate_regions(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("marketplace_regions must not be empty")
        for region in v:
            if not region.startswith("."):
                raise ValueError(f"region suffix must start with '.': {region}")
        return v

    @field_validator("search_region")
    @classmethod
    def validate_search_region(cls, v: str) -> str:
        if not v.startswith("."):
            raise ValueError(f"region suffix must start with '.': {v}")
        return v

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
