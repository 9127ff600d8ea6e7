"""예외 계층 및 HTTP 상태 매핑 테스트"""
import pytest

from scraper_api.api.errors import error_response
from scraper_api.core.exceptions import (
    InvalidProductIdException,
    InvalidQueryException,
    NoProductsFoundException,
    ProductNotFoundException,
    ScraperApiException,
    UpstreamBlockedException,
    UpstreamException,
    UpstreamNotFoundException,
    UpstreamRateLimitedException,
    UpstreamTimeoutException,
    UpstreamUnknownException,
    classify_http_error,
)

URL = "http://api.scraperapi.com?api_key=***&url=x"


class TestClassifyHttpError:
    @pytest.mark.parametrize(
        "status, expected",
        [
            (403, UpstreamBlockedException),
            (429, UpstreamRateLimitedException),
            (404, UpstreamNotFoundException),
            (410, UpstreamNotFoundException),
            (500, UpstreamUnknownException),
            (502, UpstreamUnknownException),
            (400, UpstreamUnknownException),
        ],
    )
    def test_status_mapping(self, status, expected):
        error = classify_http_error(status, URL, "body")
        assert isinstance(error, expected)
        assert isinstance(error, UpstreamException)
        assert error.status == status
        assert error.url == URL

    def test_message_carries_snippet(self):
        error = classify_http_error(500, URL, "boom")
        assert error.message == "HTTP 500 :: boom"
        assert error.body_snippet == "boom"


class TestExceptionAttributes:
    def test_str_includes_code(self):
        error = ScraperApiException("bad", "SOME_CODE")
        assert str(error) == "[SOME_CODE] bad"
        assert error.details == {}

    def test_invalid_product_id(self):
        error = InvalidProductIdException("abc")
        assert error.field == "productId"
        assert error.error_code == "VALIDATION_ERROR"
        assert error.details["value"] == "abc"

    def test_timeout_keeps_timeout(self):
        error = UpstreamTimeoutException(URL, 20.0)
        assert error.timeout_s == 20.0
        assert error.status is None

    def test_product_not_found(self):
        error = ProductNotFoundException("B08N5WRWNW")
        assert error.asin == "B08N5WRWNW"
        assert error.message == "Product not found for ASIN B08N5WRWNW"


class TestErrorResponse:
    @pytest.mark.parametrize(
        "error, expected_status, expected_body",
        [
            (InvalidProductIdException("x"), 400, {"message": "Invalid productId (must be 10 alphanumeric chars)."}),
            (InvalidQueryException("too long"), 400, {"message": "too long"}),
            (UpstreamTimeoutException(URL, 20.0), 504, {"message": "Upstream timeout"}),
            (UpstreamBlockedException(URL), 502, {"message": "Upstream request blocked"}),
            (UpstreamRateLimitedException(URL), 429, {"message": "Rate limited by upstream"}),
            (UpstreamNotFoundException(URL, 410), 404, {"message": "Not found"}),
            (ProductNotFoundException("B08N5WRWNW"), 404, {"message": "Product not found for ASIN B08N5WRWNW"}),
            (NoProductsFoundException("laptop"), 404, {"message": "No products found"}),
        ],
    )
    def test_mapping(self, error, expected_status, expected_body):
        status, body = error_response(error)
        assert status == expected_status
        assert body == expected_body

    def test_unknown_upstream_exposes_cause(self):
        status, body = error_response(UpstreamUnknownException("HTTP 503 :: down", url=URL, status=503))
        assert status == 500
        assert body == {"message": "Internal Server Error", "error": "HTTP 503 :: down"}
