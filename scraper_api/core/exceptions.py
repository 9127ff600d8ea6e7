"""커스텀 예외 정의 (Structured Exception Hierarchy)"""
from typing import Any, Optional


NOT_FOUND_STATUSES = (404, 410)


# 기본 예외 클래스
class ScraperApiException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모"""
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# 유효성 검증 관련 예외
class ValidationException(ScraperApiException):
    """유효성 검증 예외 - 네트워크 호출 전에 거절"""
    def __init__(self, field: str, reason: str, details: Optional[dict[str, Any]] = None):
        self.field = field
        self.reason = reason
        super().__init__(reason, "VALIDATION_ERROR", details or {"field": field, "reason": reason})


class InvalidProductIdException(ValidationException):
    """유효하지 않은 상품 ID (ASIN)"""
    def __init__(self, product_id: str, details: Optional[dict[str, Any]] = None):
        super().__init__(
            "productId",
            "Invalid productId (must be 10 alphanumeric chars).",
            details or {"field": "productId", "value": product_id},
        )


class InvalidQueryException(ValidationException):
    """유효하지 않은 검색어"""
    def __init__(self, reason: str, details: Optional[dict[str, Any]] = None):
        super().__init__("searchQuery", reason, details)


# 업스트림(스크래핑 벤더) 관련 예외
class UpstreamException(ScraperApiException):
    """업스트림 호출 실패의 기본 클래스"""
    def __init__(
        self,
        message: str,
        error_code: str = "UPSTREAM_ERROR",
        url: Optional[str] = None,
        status: Optional[int] = None,
        body_snippet: str = "",
        details: Optional[dict[str, Any]] = None,
    ):
        self.url = url
        self.status = status
        self.body_snippet = body_snippet
        super().__init__(message, error_code, details or {"status": status, "body_snippet": body_snippet})


class UpstreamTimeoutException(UpstreamException):
    """업스트림 타임아웃"""
    def __init__(self, url: str, timeout_s: float):
        self.timeout_s = timeout_s
        super().__init__(
            f"Upstream request timed out after {timeout_s}s",
            "UPSTREAM_TIMEOUT",
            url=url,
            details={"timeout_s": timeout_s},
        )


class UpstreamBlockedException(UpstreamException):
    """업스트림 차단 (HTTP 403)"""
    def __init__(self, url: str, body_snippet: str = ""):
        super().__init__(
            f"HTTP 403 :: {body_snippet}",
            "UPSTREAM_BLOCKED",
            url=url,
            status=403,
            body_snippet=body_snippet,
        )


class UpstreamRateLimitedException(UpstreamException):
    """업스트림 호출 한도 초과 (HTTP 429)"""
    def __init__(self, url: str, body_snippet: str = ""):
        super().__init__(
            f"HTTP 429 :: {body_snippet}",
            "UPSTREAM_RATE_LIMITED",
            url=url,
            status=429,
            body_snippet=body_snippet,
        )


class UpstreamNotFoundException(UpstreamException):
    """업스트림 미발견 (HTTP 404/410)

    호출 지점에 따라 종료(404), 지역 폴백, 빈 값 대체로 다르게 처리됩니다.
    """
    def __init__(self, url: str, status: int = 404, body_snippet: str = ""):
        super().__init__(
            f"HTTP {status} :: {body_snippet}",
            "UPSTREAM_NOT_FOUND",
            url=url,
            status=status,
            body_snippet=body_snippet,
        )


class UpstreamUnknownException(UpstreamException):
    """분류되지 않은 업스트림 실패 (기타 non-2xx, 전송 오류)"""
    def __init__(self, message: str, url: Optional[str] = None, status: Optional[int] = None, body_snippet: str = ""):
        super().__init__(
            message,
            "UPSTREAM_UNKNOWN",
            url=url,
            status=status,
            body_snippet=body_snippet,
        )


def classify_http_error(status: int, url: str, body_snippet: str = "") -> UpstreamException:
    """HTTP 상태 코드로 업스트림 예외 생성

    Args:
        status: non-2xx 상태 코드
        url: 요청 URL
        body_snippet: 응답 본문 앞부분

    Returns:
        상태 코드에 맞는 UpstreamException 하위 예외
    """
    if status == 403:
        return UpstreamBlockedException(url, body_snippet)
    if status == 429:
        return UpstreamRateLimitedException(url, body_snippet)
    if status in NOT_FOUND_STATUSES:
        return UpstreamNotFoundException(url, status, body_snippet)
    return UpstreamUnknownException(f"HTTP {status} :: {body_snippet}", url=url, status=status, body_snippet=body_snippet)


# 리소스 미발견 (종료형 404)
class ResourceNotFoundException(ScraperApiException):
    """요청한 리소스를 찾을 수 없음"""
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, "NOT_FOUND", details)


class ProductNotFoundException(ResourceNotFoundException):
    """ASIN에 해당하는 상품이 어느 지역에도 없음"""
    def __init__(self, asin: str, details: Optional[dict[str, Any]] = None):
        self.asin = asin
        super().__init__(f"Product not found for ASIN {asin}", details or {"asin": asin})


class NoProductsFoundException(ResourceNotFoundException):
    """검색 결과 0건"""
    def __init__(self, query: str, details: Optional[dict[str, Any]] = None):
        self.query = query
        super().__init__("No products found", details or {"query": query})
