"""Pydantic 스키마 정의

벤더 응답(details/reviews/offers/search results)은 스키마가 벤더 정의이므로
dict로 그대로 통과시키고, 이 서비스가 직접 만드는 형태만 모델로 정의합니다.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class MessageResponse(BaseModel):
    """단순 메시지 응답"""
    message: str


class ErrorResponse(BaseModel):
    """에러 응답"""
    message: str = Field(..., description="에러 메시지")
    error: Optional[str] = Field(None, description="원인 (분류되지 않은 오류일 때만)")


class WelcomeResponse(BaseModel):
    """루트 응답"""
    message: str
    version: str
    docs: str = "/docs"


class BasicProduct(BaseModel):
    """검색 결과에서 추출한 경량 상품 카드 (``product:<ASIN>:basic``)"""
    asin: str
    title: Any = None
    price: Any = None
    rating: Any = None
    thumbnail: Any = None

    @classmethod
    def from_search_item(cls, item: Dict[str, Any]) -> "BasicProduct":
        """벤더 검색 결과 아이템에서 변환 (name/stars/image 필드명 사용)"""
        return cls(
            asin=item["asin"],
            title=item.get("name"),
            price=item.get("price"),
            rating=item.get("stars"),
            thumbnail=item.get("image"),
        )


class SearchResponse(BaseModel):
    """검색 응답"""
    model_config = ConfigDict(populate_by_name=True)

    search_query: str = Field(..., alias="searchQuery", description="trim된 검색어")
    results: List[Any] = Field(default_factory=list, description="벤더 검색 결과")


class FullProduct(BaseModel):
    """상품 상세 + 리뷰 + 오퍼 합성 응답"""
    details: Dict[str, Any]
    reviews: Dict[str, Any]
    offers: Dict[str, Any]


class QuickInfo(BaseModel):
    """경량 상품 정보"""
    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(..., alias="productId")
    title: Any = None
    rating: Any = None
    price: Any = None
    reviews_count: Any = Field(0, alias="reviewsCount")
    top_positive_review: Any = Field(None, alias="topPositiveReview")
    top_critical_review: Any = Field(None, alias="topCriticalReview")


class CacheStatsData(BaseModel):
    """캐시 통계"""
    hits: int
    misses: int
    keys: int
    sets: int
    deletes: int
    expired: int
    hit_rate: float


class CacheStatsResponse(BaseModel):
    """캐시 통계 응답"""
    message: str
    data: CacheStatsData


class CacheClearResponse(BaseModel):
    """캐시 삭제 응답"""
    message: str
    cleared: int = Field(..., ge=0)


class HealthDetailsResponse(BaseModel):
    """상세 헬스 체크 응답"""
    message: str
    uptime_s: float = Field(..., ge=0)
    memory_rss_bytes: int = Field(..., ge=0)
    python_version: str
    environment: str
    version: str
    cache_keys: int = Field(..., ge=0)
