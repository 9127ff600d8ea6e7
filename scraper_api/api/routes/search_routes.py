"""검색 엔드포인트"""
from fastapi import APIRouter, Depends

from scraper_api.api.dependencies import get_orchestrator
from scraper_api.engine.orchestrator import ProductOrchestrator
from scraper_api.schemas.product_schema import SearchResponse

router = APIRouter(tags=["search"])


@router.get("/search/{search_query}", response_model=SearchResponse)
async def search_products(
    search_query: str,
    orchestrator: ProductOrchestrator = Depends(get_orchestrator),
):
    """상품 검색 (결과는 12시간 캐시, 아이템별 basic 카드도 함께 캐시)"""
    return await orchestrator.search(search_query)
