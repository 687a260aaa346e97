import asyncio
import logging
import time
from email.utils import parsedate_to_datetime
from typing import Any, Callable, Optional

from pydantic import ValidationError

from common.constants import (
    CACHE_KEY_PREFIX,
    CACHE_TTL_SECONDS,
    RATE_LIMIT_BACKOFF_SECONDS,
)
from core.ports import KeyValueStore
from core.versions import CACHE_VERSION
from domain.examples.schemas.schema import CacheEntry, ProviderQuota

Clock = Callable[[], float]


def cache_key(provider: str, term: str) -> str:
    """
    Composite key "{provider}_{term}", namespaced and versioned.
    """
    term = " ".join(term.lower().split())
    return f"{CACHE_KEY_PREFIX}_{CACHE_VERSION}_{provider.lower()}_{term}"


class ExampleCache:
    """
    TTL cache over a persistent key-value store.
    Expired entries are ignored on read, never purged.
    """

    def __init__(
        self,
        store: KeyValueStore,
        ttl_seconds: float = CACHE_TTL_SECONDS,
        clock: Clock = time.time,
    ):
        self.store = store
        self.ttl_seconds = ttl_seconds
        self.clock = clock

    def _now_ms(self) -> int:
        return int(self.clock() * 1000)

    def _read(self, key: str) -> Optional[Any]:
        raw = self.store.get_item(key)
        if raw is None:
            return None
        try:
            entry = CacheEntry.model_validate_json(raw)
        except ValidationError as e:
            logging.warning(f"Corrupted cache entry {key!r}, treating as miss: {e}")
            return None

        if self._now_ms() - entry.timestamp > self.ttl_seconds * 1000:
            return None
        return entry.value

    def _write(self, key: str, value: Any) -> None:
        entry = CacheEntry(value=value, timestamp=self._now_ms())
        self.store.set_item(key, entry.model_dump_json())

    async def get(self, key: str) -> Optional[Any]:
        try:
            return await asyncio.to_thread(self._read, key)
        except Exception as e:
            logging.warning(f"Cache read failed for {key!r}: {e}")
            return None

    async def set(self, key: str, value: Any) -> None:
        try:
            await asyncio.to_thread(self._write, key, value)
        except Exception as e:
            logging.warning(f"Cache write failed for {key!r}: {e}")


def parse_retry_after(value: Optional[str], now: float) -> Optional[float]:
    """
    Retry-After header -> seconds to wait. Accepts delta-seconds or an HTTP date.
    """
    if not value:
        return None
    value = value.strip()
    if value.isdigit():
        return float(value)
    try:
        reset_at = parsedate_to_datetime(value).timestamp()
    except (TypeError, ValueError):
        return None
    return max(0.0, reset_at - now)


class RateLimiter:
    """
    Per-provider quota counters and throttling backoff.
    Shared by all concurrent lookups in a process.
    """

    def __init__(
        self,
        monthly_limits: Optional[dict[str, int]] = None,
        backoff_seconds: float = RATE_LIMIT_BACKOFF_SECONDS,
        clock: Clock = time.time,
    ):
        self.monthly_limits = monthly_limits or {}
        self.backoff_seconds = backoff_seconds
        self.clock = clock
        self._quotas: dict[str, ProviderQuota] = {}

    def quota(self, provider: str) -> ProviderQuota:
        if provider not in self._quotas:
            self._quotas[provider] = ProviderQuota(
                provider=provider, monthly_limit=self.monthly_limits.get(provider)
            )
        return self._quotas[provider]

    def is_available(self, provider: str) -> bool:
        quota = self.quota(provider)
        if self.clock() < quota.rate_limit_reset_time:
            return False
        if quota.monthly_limit is not None and quota.request_count >= quota.monthly_limit:
            return False
        return True

    def record_attempt(self, provider: str) -> None:
        self.quota(provider).request_count += 1

    def record_throttled(self, provider: str, retry_after: Optional[str] = None) -> float:
        """
        Mark provider unavailable until the hinted reset, or the default backoff.
        Returns the reset timestamp.
        """
        now = self.clock()
        wait = parse_retry_after(retry_after, now)
        if wait is None:
            wait = self.backoff_seconds
        quota = self.quota(provider)
        quota.rate_limit_reset_time = now + wait
        logging.warning(f"{provider} rate limited, skipping for {wait:.0f}s")
        return quota.rate_limit_reset_time
