"""
Optional async Redis client for the prayer cache. If redis_url is empty or connection fails, returns None.
No startup sync; cache warms on read (Cache-Aside).
"""
import logging
from typing import Any

from prayer_companion.config import get_settings
from prayer_companion.services.redis_prayer_cache import RedisPrayerCache

logger = logging.getLogger(__name__)


async def connect_redis(url: str | None = None) -> Any:
    """One async Redis client, or None if disabled/unavailable."""
    url = (url if url is not None else get_settings().redis_url or "").strip()
    if not url:
        return None
    try:
        from redis.asyncio import Redis
        client = Redis.from_url(url, decode_responses=True)
        await client.ping()
        logger.info("Redis prayer cache connected: %s", url.split("@")[-1] if "@" in url else url)
        return client
    except Exception as e:
        logger.warning("Redis unavailable (prayer cache uses DB only): %s", e, exc_info=False)
        return None


def build_redis_prayer_cache(client: Any) -> RedisPrayerCache | None:
    """Build RedisPrayerCache from an async Redis client (None stays None)."""
    return RedisPrayerCache(client) if client is not None else None


async def close_redis(client: Any) -> None:
    """Graceful shutdown: close Redis connection."""
    if client is None:
        return
    try:
        await client.aclose()
    except Exception as e:
        logger.warning("Redis close error: %s", e)
