"""인메모리 TTL 캐시 서비스 - 캐싱 로직만 담당"""
import copy
import time
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from scraper_api.core.logging import logger


@dataclass
class CacheStats:
    """캐시 통계 (프로세스 시작 이후 누적, 영속화하지 않음)"""

    hits: int = 0
    misses: int = 0
    keys: int = 0
    sets: int = 0
    deletes: int = 0
    expired: int = 0

    @property
    def hit_rate(self) -> float:
        """캐시 히트율 (0.0~1.0)"""
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["hit_rate"] = round(self.hit_rate, 4)
        return data


class CacheService:
    """프로세스 단위 TTL 캐시

    - 키별 TTL을 가지며 만료된 엔트리는 get에서 없는 것으로 취급
    - 물리적 삭제는 주기적인 sweep_expired()에서 수행
    - 동일 키 동시 set은 last write wins (값은 같은 업스트림 쿼리에서 결정적으로 유도됨)
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        """
        Args:
            clock: 현재 시각(초)을 돌려주는 함수 (기본: time.monotonic)
        """
        self._clock = clock or time.monotonic
        self._store: Dict[str, Tuple[Any, float]] = {}
        self._stats = CacheStats()

    def get(self, key: str) -> Optional[Any]:
        """
        캐시 조회

        Args:
            key: 캐시 키

        Returns:
            저장된 값 또는 None (없거나 만료)
        """
        entry = self._store.get(key)
        if entry is None:
            self._stats.misses += 1
            return None

        value, expires_at = entry
        if self._clock() >= expires_at:
            self._stats.misses += 1
            return None

        self._stats.hits += 1
        return value

    def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        """
        캐시 저장 (기존 엔트리 덮어쓰기)

        값은 복사되어 저장되므로 호출자가 이후 원본을 수정해도 캐시에 영향이 없습니다.

        Args:
            key: 캐시 키
            value: JSON 호환 값
            ttl_seconds: TTL (초)
        """
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")

        self._store[key] = (copy.deepcopy(value), self._clock() + ttl_seconds)
        self._stats.sets += 1
        logger.debug(f"Cache set for key: {key}, TTL: {ttl_seconds}s")

    def delete(self, keys: Iterable[str]) -> int:
        """
        키 목록 삭제

        Returns:
            실제로 삭제된 키 개수
        """
        removed = 0
        for key in keys:
            if self._store.pop(key, None) is not None:
                removed += 1
        self._stats.deletes += removed
        return removed

    def keys(self) -> List[str]:
        """저장된 모든 키 (아직 정리되지 않은 만료 키 포함)"""
        return list(self._store.keys())

    def sweep_expired(self) -> int:
        """만료된 엔트리를 물리적으로 제거

        Returns:
            제거된 엔트리 수
        """
        now = self._clock()
        expired_keys = [key for key, (_, expires_at) in self._store.items() if now >= expires_at]
        for key in expired_keys:
            del self._store[key]

        if expired_keys:
            self._stats.expired += len(expired_keys)
            logger.debug(f"Cache sweep removed {len(expired_keys)} expired keys")
        return len(expired_keys)

    def stats(self) -> CacheStats:
        """통계 스냅샷"""
        return CacheStats(
            hits=self._stats.hits,
            misses=self._stats.misses,
            keys=len(self._store),
            sets=self._stats.sets,
            deletes=self._stats.deletes,
            expired=self._stats.expired,
        )

    def clear(self) -> None:
        """엔트리 전체 삭제 (통계는 유지)"""
        self._store.clear()

    def health_check(self) -> bool:
        """인메모리 캐시는 항상 사용 가능"""
        return True
