"""Product Orchestrator - 엔티티별 요청 처리 파이프라인

모든 처리는 같은 순서를 따릅니다:
1. 입력 검증 (I/O 전)
2. 캐시 키 계산 및 조회 (히트 시 그대로 반환)
3. 미스 시 업스트림 호출 (합성 조회는 병렬)
4. 결과 가공 및 여러 캐시 키 채우기
"""

from __future__ import annotations

import asyncio
from typing import Any, Dict, List, Optional, Tuple

from scraper_api.core.config import Settings, settings as default_settings
from scraper_api.core.exceptions import (
    NoProductsFoundException,
    ProductNotFoundException,
    ResourceNotFoundException,
    UpstreamException,
    UpstreamNotFoundException,
)
from scraper_api.core.logging import logger, sanitize_for_log
from scraper_api.schemas.product_schema import BasicProduct, QuickInfo
from scraper_api.services.impl.cache_service import CacheService
from scraper_api.upstream import urls
from scraper_api.upstream.http_client import UpstreamClient
from scraper_api.upstream.regional import RegionalFallbackResolver
from scraper_api.utils.cache_keys import CacheVariant, product_key, search_key
from scraper_api.utils.validators import InputValidator


def empty_reviews() -> Dict[str, Any]:
    """리뷰 조회 실패 시 대체 값"""
    return {"reviews_count": 0}


def empty_offers() -> Dict[str, Any]:
    """오퍼 조회 실패 시 대체 값"""
    return {"offers": []}


def _pick(doc: Optional[Dict[str, Any]], *names: str) -> Any:
    """여러 필드명 중 값이 있는 첫 번째를 반환"""
    if not doc:
        return None
    for name in names:
        value = doc.get(name)
        if value is not None and value != "":
            return value
    return None


class ProductOrchestrator:
    """검색/상품 조회 오케스트레이터

    캐시와 업스트림 클라이언트는 주입받으므로 테스트마다 독립 인스턴스를 구성할 수 있습니다.
    """

    def __init__(
        self,
        cache: CacheService,
        client: UpstreamClient,
        resolver: Optional[RegionalFallbackResolver] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Args:
            cache: TTL 캐시
            client: 업스트림 클라이언트 (검색 단일 호출용)
            resolver: 지역 폴백 조회기 (없으면 client로 생성)
            settings: 설정
        """
        if cache is None:
            raise ValueError("cache must not be None")
        if client is None:
            raise ValueError("client must not be None")

        self.settings = settings or default_settings
        self.cache = cache
        self.client = client
        self.resolver = resolver or RegionalFallbackResolver(client, self.settings)

    # ------------------------------------------------------------------
    # 검색
    # ------------------------------------------------------------------

    async def search(self, search_query: str) -> Dict[str, Any]:
        """상품 검색

        성공 시 전체 결과를 ``search:<query>``에, 각 아이템의 경량 카드를
        ``product:<ASIN>:basic``에 캐시합니다. 결과 0건은 캐시하지 않습니다.

        Raises:
            InvalidQueryException: 검색어 검증 실패
            NoProductsFoundException: 결과 0건
            ResourceNotFoundException: 업스트림 미발견
            UpstreamException: 그 외 업스트림 오류
        """
        query = InputValidator.validate_search_query(search_query, self.settings.search_max_length)
        cache_key = search_key(query)

        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.info(f'Search results from cache: "{sanitize_for_log(query)}"')
            return {"searchQuery": query, "results": cached.get("results", [])}

        logger.info(f'Searching: "{sanitize_for_log(query)}"')
        target = urls.marketplace_url(self.settings.search_region, urls.search_path(query), self.settings)
        try:
            payload = await self.client.fetch_json(urls.build_scrape_url(target, self.settings))
        except UpstreamNotFoundException as e:
            logger.warning(f'Search not found upstream: "{sanitize_for_log(query)}"')
            raise ResourceNotFoundException("Search failed", details={"query": query}) from e

        results = payload.get("results") if isinstance(payload, dict) else None
        if not isinstance(results, list) or not results:
            logger.info(f'No products for query: "{sanitize_for_log(query)}"')
            raise NoProductsFoundException(query)

        # 카드 변환이 끝난 뒤에 한꺼번에 캐시 (부분 기록 방지)
        cards = self._build_basic_cards(results)
        self.cache.set(cache_key, payload, self.settings.cache_ttl)
        for card in cards:
            self.cache.set(
                product_key(card.asin, CacheVariant.BASIC),
                card.model_dump(),
                self.settings.cache_ttl,
            )
        logger.debug(f"Cached {len(cards)} basic product cards for query")

        return {"searchQuery": query, "results": results}

    @staticmethod
    def _build_basic_cards(results: list) -> List[BasicProduct]:
        """검색 결과 아이템별 경량 카드 (문자열 ASIN이 없는 아이템은 건너뜀)"""
        return [
            BasicProduct.from_search_item(item)
            for item in results
            if isinstance(item, dict) and isinstance(item.get("asin"), str) and item["asin"]
        ]

    # ------------------------------------------------------------------
    # 상품 상세 (details + reviews + offers)
    # ------------------------------------------------------------------

    async def get_product(self, product_id: str) -> Dict[str, Any]:
        """상품 전체 정보

        세 하위 요청을 병렬로 실행합니다. details 실패는 전체 실패,
        reviews/offers 실패는 빈 값으로 대체합니다.

        Raises:
            InvalidProductIdException: ASIN 형식 오류
            ProductNotFoundException: 모든 지역에서 details 미발견
            UpstreamException: details의 그 외 업스트림 오류
        """
        asin = InputValidator.validate_product_id(product_id)
        cache_key = product_key(asin, CacheVariant.FULL)

        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.info(f'Full product from cache: "{asin}"')
            return cached

        logger.info(f'Fetching full product: "{asin}"')
        details, (reviews, reviews_degraded), (offers, offers_degraded) = await asyncio.gather(
            self._fetch_details(asin),
            self._fetch_or_default(asin, urls.reviews_path(asin), empty_reviews, "reviews"),
            self._fetch_or_default(asin, urls.offers_path(asin), empty_offers, "offers"),
        )

        full = {"details": details, "reviews": reviews, "offers": offers}
        ttl = self.settings.cache_ttl
        self.cache.set(cache_key, full, ttl)
        self.cache.set(product_key(asin, CacheVariant.DETAILS), details, ttl)
        self.cache.set(
            product_key(asin, CacheVariant.REVIEWS),
            reviews,
            self.settings.cache_empty_reviews_ttl if reviews_degraded else ttl,
        )
        self.cache.set(
            product_key(asin, CacheVariant.OFFERS),
            offers,
            self.settings.cache_empty_offers_ttl if offers_degraded else ttl,
        )
        return full

    async def _fetch_details(self, asin: str) -> Dict[str, Any]:
        """details 조회 - 미발견은 ProductNotFoundException으로 종료"""
        try:
            return await self.resolver.resolve([urls.details_path(asin)])
        except UpstreamNotFoundException as e:
            logger.warning(f"Not found ({e.status}) {asin}")
            raise ProductNotFoundException(asin) from e

    async def _fetch_or_default(
        self, asin: str, path: str, default_factory, facet: str
    ) -> Tuple[Dict[str, Any], bool]:
        """하위 문서 조회 - 업스트림 오류는 기본값으로 대체

        Returns:
            (문서, 대체 여부)
        """
        try:
            return await self.resolver.resolve([path]), False
        except UpstreamException as e:
            logger.warning(f'Degraded {facet} for "{asin}": {e.error_code}')
            return default_factory(), True

    # ------------------------------------------------------------------
    # 리뷰 / 오퍼 단독
    # ------------------------------------------------------------------

    async def get_reviews(self, product_id: str) -> Dict[str, Any]:
        """리뷰만 조회 - 미발견은 빈 값(짧은 TTL)으로 200 응답"""
        asin = InputValidator.validate_product_id(product_id)
        return await self._get_facet(
            asin,
            CacheVariant.REVIEWS,
            urls.reviews_path(asin),
            empty_reviews,
            self.settings.cache_empty_reviews_ttl,
        )

    async def get_offers(self, product_id: str) -> Dict[str, Any]:
        """오퍼만 조회 - 미발견은 빈 값(짧은 TTL)으로 200 응답"""
        asin = InputValidator.validate_product_id(product_id)
        return await self._get_facet(
            asin,
            CacheVariant.OFFERS,
            urls.offers_path(asin),
            empty_offers,
            self.settings.cache_empty_offers_ttl,
        )

    async def _get_facet(
        self,
        asin: str,
        variant: CacheVariant,
        path: str,
        default_factory,
        empty_ttl: int,
    ) -> Dict[str, Any]:
        facet = variant.value
        cache_key = product_key(asin, variant)

        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.info(f'{facet.capitalize()} from cache: "{asin}"')
            return cached

        logger.info(f'Fetching {facet}: "{asin}"')
        try:
            doc = await self.resolver.resolve([path])
        except UpstreamNotFoundException:
            logger.warning(f'No {facet} for "{asin}"')
            empty = default_factory()
            self.cache.set(cache_key, empty, empty_ttl)
            return empty

        self.cache.set(cache_key, doc, self.settings.cache_ttl)
        return doc

    # ------------------------------------------------------------------
    # Quick Info
    # ------------------------------------------------------------------

    async def get_quick_info(self, product_id: str) -> Dict[str, Any]:
        """경량 상품 정보

        details는 캐시된 details → 검색에서 만든 basic 카드 → 업스트림 순으로 얻고,
        reviews는 캐시 → 업스트림(실패 시 기본값) 순으로 얻습니다.

        Raises:
            ProductNotFoundException: details 미발견
        """
        asin = InputValidator.validate_product_id(product_id)
        cache_key = product_key(asin, CacheVariant.QUICK)

        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.info(f'Quick info from cache: "{asin}"')
            return cached

        logger.info(f'Fetching quick info: "{asin}"')
        details = self.cache.get(product_key(asin, CacheVariant.DETAILS))
        if details is None:
            details = self.cache.get(product_key(asin, CacheVariant.BASIC))
            if details is not None:
                logger.debug(f'Quick info using basic card: "{asin}"')
        if details is None:
            details = await self._fetch_details(asin)

        reviews = self.cache.get(product_key(asin, CacheVariant.REVIEWS))
        if reviews is None:
            try:
                reviews = await self.resolver.resolve([urls.reviews_path(asin)])
            except UpstreamException as e:
                logger.warning(f'Quick reviews miss for "{asin}": {e.message}')
                reviews = empty_reviews()

        reviews_count = _pick(reviews, "reviews_count")
        quick = QuickInfo(
            product_id=asin,
            title=_pick(details, "name", "title"),
            rating=_pick(details, "rating", "stars"),
            price=_pick(details, "price"),
            reviews_count=reviews_count if reviews_count is not None else 0,
            top_positive_review=_pick(reviews, "top_positive_review"),
            top_critical_review=_pick(reviews, "top_critical_review"),
        ).model_dump(by_alias=True)

        self.cache.set(cache_key, quick, self.settings.cache_ttl)
        return quick
