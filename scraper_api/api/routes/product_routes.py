"""상품 엔드포인트

HTTP Layer는 Engine Layer로 요청을 위임하는 Translator 역할만 수행합니다.
오류는 앱에 등록된 예외 핸들러가 상태 코드로 변환합니다.
"""
from typing import Any, Dict

from fastapi import APIRouter, Depends

from scraper_api.api.dependencies import get_orchestrator
from scraper_api.engine.orchestrator import ProductOrchestrator
from scraper_api.schemas.product_schema import FullProduct, QuickInfo

router = APIRouter(prefix="/products", tags=["products"])


@router.get("/{product_id}", response_model=FullProduct)
async def get_product_details(
    product_id: str,
    orchestrator: ProductOrchestrator = Depends(get_orchestrator),
):
    """상품 상세 + 리뷰 + 오퍼"""
    return await orchestrator.get_product(product_id)


@router.get("/{product_id}/reviews", response_model=Dict[str, Any])
async def get_product_reviews(
    product_id: str,
    orchestrator: ProductOrchestrator = Depends(get_orchestrator),
):
    """리뷰만 (리뷰가 없으면 ``{"reviews_count": 0}``)"""
    return await orchestrator.get_reviews(product_id)


@router.get("/{product_id}/offers", response_model=Dict[str, Any])
async def get_product_offers(
    product_id: str,
    orchestrator: ProductOrchestrator = Depends(get_orchestrator),
):
    """오퍼만 (오퍼가 없으면 ``{"offers": []}``)"""
    return await orchestrator.get_offers(product_id)


@router.get("/{product_id}/quick", response_model=QuickInfo)
async def get_quick_product_info(
    product_id: str,
    orchestrator: ProductOrchestrator = Depends(get_orchestrator),
):
    """경량 상품 정보 (검색에서 캐시된 basic 카드 우선 사용)"""
    return await orchestrator.get_quick_info(product_id)
