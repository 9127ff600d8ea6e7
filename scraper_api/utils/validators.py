"""입력 검증 - 캐시/네트워크 접근 전에 실행"""
import re

from scraper_api.core.config import settings
from scraper_api.core.exceptions import InvalidProductIdException, InvalidQueryException
from scraper_api.core.logging import logger, sanitize_for_log

_ASIN_PATTERN = re.compile(r"^[A-Z0-9]{10}$", re.IGNORECASE | re.ASCII)


def is_asin(product_id: str) -> bool:
    """10자리 영숫자(대소문자 무관) 여부"""
    return bool(product_id) and _ASIN_PATTERN.fullmatch(product_id) is not None


def normalize_asin(product_id: str) -> str:
    """ASIN 정규화 (대문자)"""
    return product_id.upper()


class InputValidator:
    """요청 입력 검증"""

    MIN_QUERY_LENGTH = 1

    @staticmethod
    def validate_product_id(product_id: str) -> str:
        """상품 ID 검증 후 정규화된 ASIN 반환

        Args:
            product_id: 경로로 받은 상품 ID

        Returns:
            대문자 ASIN

        Raises:
            InvalidProductIdException: 10자리 영숫자가 아닌 경우
        """
        if not isinstance(product_id, str) or not is_asin(product_id):
            logger.error(f'Invalid product ID: "{sanitize_for_log(str(product_id), max_length=50)}".')
            raise InvalidProductIdException(str(product_id))
        return normalize_asin(product_id)

    @staticmethod
    def validate_search_query(search_query: str, max_length: int = 0) -> str:
        """검색어 검증 후 trim된 검색어 반환

        Args:
            search_query: 경로로 받은 검색어
            max_length: 최대 길이 (0이면 설정값 사용)

        Returns:
            trim된 검색어

        Raises:
            InvalidQueryException: 비어 있거나 너무 긴 경우
        """
        limit = max_length or settings.search_max_length
        query = (search_query or "").strip()

        if len(query) < InputValidator.MIN_QUERY_LENGTH:
            reason = '"searchQuery" is not allowed to be empty'
        elif len(query) > limit:
            reason = f'"searchQuery" length must be less than or equal to {limit} characters long'
        else:
            return query

        logger.error(f'Invalid search query: "{sanitize_for_log(search_query or "")}". {reason}')
        raise InvalidQueryException(reason, details={"length": len(query), "max_length": limit})
