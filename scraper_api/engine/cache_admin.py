"""캐시 관리 - 타입/ASIN 조건으로 키 일괄 삭제

인덱스 없이 keys() 전체를 필터링합니다.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from scraper_api.core.logging import logger
from scraper_api.services.impl.cache_service import CacheService
from scraper_api.utils.cache_keys import PRODUCT_PREFIX, SEARCH_PREFIX
from scraper_api.utils.validators import normalize_asin

ALL_TYPES = "all"
SEARCH_TYPE = "search"


def _matches_type(key: str, cache_type: Optional[str]) -> bool:
    if not cache_type or cache_type == ALL_TYPES:
        return True
    if cache_type == SEARCH_TYPE and key.startswith(SEARCH_PREFIX):
        return True
    return key.endswith(f":{cache_type}")


def select_keys(keys: Iterable[str], cache_type: Optional[str] = None, asin: Optional[str] = None) -> List[str]:
    """
    삭제 대상 키 선택

    Args:
        keys: 전체 키 목록
        cache_type: all | search | full | details | reviews | offers | quick | basic (없으면 전체)
        asin: 지정 시 ``product:<ASIN>``을 포함하는 키만

    Returns:
        조건에 맞는 키 목록
    """
    asin_marker = f"{PRODUCT_PREFIX}{normalize_asin(asin)}" if asin else None

    selected = []
    for key in keys:
        if asin_marker and asin_marker not in key:
            continue
        if _matches_type(key, cache_type):
            selected.append(key)
    return selected


def clear_cache(cache: CacheService, cache_type: Optional[str] = None, asin: Optional[str] = None) -> Dict[str, Any]:
    """조건에 맞는 키 삭제 후 응답 본문 반환"""
    targets = select_keys(cache.keys(), cache_type, asin)
    if not targets:
        return {"message": "No matching cache keys to clear", "cleared": 0}

    cleared = cache.delete(targets)
    logger.info(f"Cache cleared: {cleared} keys (type={cache_type}, asin={asin})")
    return {"message": "Cache cleared", "cleared": cleared}
