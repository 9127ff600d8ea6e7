"""캐시 관리 엔드포인트"""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from scraper_api.api.dependencies import get_cache_service
from scraper_api.engine.cache_admin import clear_cache
from scraper_api.schemas.product_schema import CacheClearResponse, CacheStatsResponse
from scraper_api.services.impl.cache_service import CacheService

router = APIRouter(prefix="/cache", tags=["cache"])


@router.get("/stats", response_model=CacheStatsResponse)
async def get_cache_stats(cache_service: CacheService = Depends(get_cache_service)):
    """캐시 히트/미스 통계"""
    return {"message": "Cache statistics", "data": cache_service.stats().to_dict()}


@router.delete("", response_model=CacheClearResponse)
async def delete_cache(
    cache_type: Optional[str] = Query(None, alias="type", description="all | search | full | details | reviews | offers | quick | basic"),
    asin: Optional[str] = Query(None, description="ASIN (대소문자 무관)"),
    cache_service: CacheService = Depends(get_cache_service),
):
    """캐시 일괄 삭제

    Examples:
        DELETE /cache?type=reviews
        DELETE /cache?asin=B08N5WRWNW
    """
    return clear_cache(cache_service, cache_type=cache_type, asin=asin)
