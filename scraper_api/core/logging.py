"""로깅 설정 - ``scraper_api`` 로거와 벤더 키 마스킹"""
import logging
import os
import re
import sys

from scraper_api.core.config import settings


IS_PRODUCTION = os.getenv("ENVIRONMENT", settings.environment) == "production"

_API_KEY_PATTERN = re.compile(r"(api_key=)[^&\s]*", re.IGNORECASE)

_DEV_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
_PROD_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def _resolve_level(name: str, production: bool) -> int:
    """로그 레벨 이름 → 정수 (운영 환경은 DEBUG를 INFO로 올림)"""
    level = getattr(logging, name.upper(), logging.INFO)
    if production and level < logging.INFO:
        return logging.INFO
    return level


def setup_logging(name: str = "scraper_api") -> logging.Logger:
    """서비스 로거 구성

    stdout 핸들러 하나만 붙이며, 재호출해도 핸들러가 중복되지 않습니다.
    """
    level = _resolve_level(settings.log_level, IS_PRODUCTION)

    service_logger = logging.getLogger(name)
    service_logger.setLevel(level)

    if not service_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        handler.setFormatter(
            logging.Formatter(
                fmt=_PROD_FORMAT if IS_PRODUCTION else _DEV_FORMAT,
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        service_logger.addHandler(handler)

    return service_logger


logger = setup_logging()


def sanitize_url(url: str) -> str:
    """URL의 api_key 쿼리 파라미터를 마스킹

    벤더 URL은 키를 쿼리스트링에 담으므로 로그에 남기기 전에 반드시 거칩니다.

    Examples:
        >>> sanitize_url("http://api.scraperapi.com?api_key=abc&autoparse=true")
        'http://api.scraperapi.com?api_key=***&autoparse=true'
    """
    if not url:
        return "[empty]"
    return _API_KEY_PATTERN.sub(r"\1***", url)


def sanitize_for_log(value: str, max_length: int = 100) -> str:
    """민감 정보 제거 후 로깅용 문자열 반환

    Args:
        value: 로깅할 문자열
        max_length: 최대 길이

    Returns:
        제거된 문자열
    """
    if not value:
        return "[empty]"

    result = sanitize_url(value)

    # 길이 초과 시 절단
    if len(result) > max_length:
        result = result[:max_length] + "..."

    return result
