"""Engine Layer - 요청 오케스트레이션

- ProductOrchestrator: 검색/상품/리뷰/오퍼/Quick Info 처리
- cache_admin: 캐시 일괄 삭제
"""

from .cache_admin import clear_cache, select_keys
from .orchestrator import ProductOrchestrator, empty_offers, empty_reviews

__all__ = [
    "ProductOrchestrator",
    "clear_cache",
    "select_keys",
    "empty_offers",
    "empty_reviews",
]
