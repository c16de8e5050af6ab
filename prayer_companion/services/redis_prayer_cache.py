"""
Redis cache for generated prayers. Cache-Aside: Redis is a read-through cache only, the prayer_cache table is the source of truth.
All Redis errors are handled internally; never raise to caller. System works if Redis is down.
Key: prayer:{cache_key}, value a JSON string, TTL = seconds left until the DB row expires.
"""
import json
import logging
from datetime import datetime, timezone
from typing import Any

logger = logging.getLogger(__name__)

PRAYER_KEY_PREFIX = "prayer:"

_FIELDS = ("id", "content", "title", "category", "cache_key")


def _key(cache_key: str) -> str:
    return f"{PRAYER_KEY_PREFIX}{cache_key}"


def _serialize(record: dict) -> str:
    data = {k: record.get(k) for k in _FIELDS}
    data["generated_at"] = record["generated_at"].isoformat()
    data["expires_at"] = record["expires_at"].isoformat()
    return json.dumps(data, ensure_ascii=False)


def _naive_utc(value: str) -> datetime:
    dt = datetime.fromisoformat(value)
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt


def _deserialize(s: str) -> dict | None:
    """Known fields only, datetimes as naive UTC; anything else is a miss."""
    try:
        raw = json.loads(s)
        if not isinstance(raw, dict) or not raw.get("content") or not raw.get("id"):
            return None
        data = {k: raw.get(k) for k in _FIELDS}
        data["generated_at"] = _naive_utc(raw["generated_at"])
        data["expires_at"] = _naive_utc(raw["expires_at"])
        return data
    except (json.JSONDecodeError, TypeError, KeyError, ValueError):
        return None


class RedisPrayerCache:
    """
    Async Redis cache for prayers. GET / SET EX.
    All methods swallow Redis errors and log; caller gets None or no-op on failure.
    """

    def __init__(self, redis_client: Any):
        self._redis = redis_client

    async def get(self, cache_key: str) -> dict | None:
        """Returns the cached record dict or None on miss/error (caller should hit DB)."""
        if not self._redis:
            return None
        try:
            raw = await self._redis.get(_key(cache_key))
            if not raw:
                return None
            s = raw.decode() if isinstance(raw, bytes) else raw
            return _deserialize(s)
        except Exception as e:
            logger.warning("Redis prayer cache get failed for key %s: %s", cache_key[:12], e, exc_info=False)
            return None

    async def set(self, cache_key: str, record: dict) -> None:
        """SET with EX = remaining lifetime of the record; already-expired records are not written."""
        if not self._redis:
            return
        ttl = int((record["expires_at"] - datetime.utcnow()).total_seconds())
        if ttl <= 0:
            return
        try:
            await self._redis.set(_key(cache_key), _serialize(record), ex=ttl)
        except Exception as e:
            logger.warning("Redis prayer cache set failed for key %s: %s", cache_key[:12], e, exc_info=False)
