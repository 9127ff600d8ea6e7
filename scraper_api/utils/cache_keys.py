"""캐시 키 생성 유틸리티

키 형식:
- 상품: ``product:<ASIN>:<variant>``
- 검색: ``search:<query>``
"""
from enum import Enum

PRODUCT_PREFIX = "product:"
SEARCH_PREFIX = "search:"


class CacheVariant(str, Enum):
    """상품 캐시 키의 변형(variant)"""

    FULL = "full"  # details + reviews + offers
    DETAILS = "details"
    REVIEWS = "reviews"
    OFFERS = "offers"
    QUICK = "quick"
    BASIC = "basic"  # 검색 결과에서 추출한 경량 카드


def product_key(asin: str, variant: CacheVariant) -> str:
    """
    상품 캐시 키 생성

    Args:
        asin: 정규화(대문자)된 ASIN
        variant: 캐시 변형

    Returns:
        ``product:<ASIN>:<variant>``
    """
    return f"{PRODUCT_PREFIX}{asin}:{CacheVariant(variant).value}"


def search_key(query: str) -> str:
    """검색어로 캐시 키 생성 (trim된 검색어 기준)"""
    return f"{SEARCH_PREFIX}{query}"
