"""
Prayer cache: prayer_cache table as source of truth, optional Redis in front (Cache-Aside).
- get: Redis; on miss DB (only rows with expires_at > now), then warm Redis.
- upsert: DB row keyed by cache_key (insert or overwrite), then Redis.
Errors are logged and treated as miss / no-op; never raised to the caller.
Concurrent upserts for the same key may race; the last write wins and both values are valid prayers.
"""
import asyncio
import logging
from dataclasses import asdict, dataclass
from datetime import datetime, timedelta

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from prayer_companion.config import get_settings
from prayer_companion.models.prayer_cache import PrayerCache
from prayer_companion.services.redis_prayer_cache import RedisPrayerCache

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CachedPrayer:
    id: str
    content: str
    title: str
    category: str | None
    generated_at: datetime
    cache_key: str
    expires_at: datetime


def _to_cached(row: PrayerCache) -> CachedPrayer:
    return CachedPrayer(
        id=row.id,
        content=row.content,
        title=row.title,
        category=row.category,
        generated_at=row.generated_at,
        cache_key=row.cache_key,
        expires_at=row.expires_at,
    )


class PrayerCacheStore:
    def __init__(
        self,
        session_factory: sessionmaker,
        redis_cache: RedisPrayerCache | None = None,
        ttl_hours: int | None = None,
    ):
        self._session_factory = session_factory
        self._redis = redis_cache
        self._ttl = timedelta(hours=ttl_hours or get_settings().prayer_cache_ttl_hours)

    def _db_get(self, cache_key: str) -> CachedPrayer | None:
        db: Session = self._session_factory()
        try:
            row = db.query(PrayerCache).filter(
                PrayerCache.cache_key == cache_key,
                PrayerCache.expires_at > datetime.utcnow(),
            ).first()
            return _to_cached(row) if row else None
        finally:
            db.close()

    def _db_upsert(self, record: CachedPrayer) -> bool:
        db: Session = self._session_factory()
        try:
            for _ in range(2):
                row = db.query(PrayerCache).filter(PrayerCache.cache_key == record.cache_key).first()
                if row is None:
                    db.add(PrayerCache(**asdict(record)))
                else:
                    row.id = record.id
                    row.content = record.content
                    row.title = record.title
                    row.category = record.category
                    row.generated_at = record.generated_at
                    row.expires_at = record.expires_at
                try:
                    db.commit()
                    return True
                except IntegrityError:
                    # Same key inserted concurrently; retry as overwrite
                    db.rollback()
            logger.warning("Prayer cache write for key %s lost to concurrent writers", record.cache_key[:12])
            return False
        finally:
            db.close()

    async def get(self, cache_key: str) -> CachedPrayer | None:
        if self._redis:
            data = await self._redis.get(cache_key)
            if data is not None:
                try:
                    if data["expires_at"] > datetime.utcnow():
                        return CachedPrayer(**data)
                except (TypeError, KeyError, ValueError) as e:
                    logger.warning("Unreadable Redis prayer record for key %s (falling back to DB): %s", cache_key[:12], e)
        loop = asyncio.get_event_loop()
        try:
            cached = await loop.run_in_executor(None, self._db_get, cache_key)
        except Exception as e:
            logger.warning("Prayer cache read failed (treated as miss): %s", e)
            return None
        if cached and self._redis:
            await self._redis.set(cache_key, asdict(cached))
        return cached

    async def upsert(
        self,
        cache_key: str,
        prayer_id: str,
        content: str,
        title: str,
        category: str | None,
        generated_at: datetime | None = None,
    ) -> CachedPrayer | None:
        """Returns the stored record, or None if the DB write failed."""
        generated_at = generated_at or datetime.utcnow()
        record = CachedPrayer(
            id=prayer_id,
            content=content,
            title=title,
            category=category,
            generated_at=generated_at,
            cache_key=cache_key,
            expires_at=generated_at + self._ttl,
        )
        loop = asyncio.get_event_loop()
        try:
            written = await loop.run_in_executor(None, self._db_upsert, record)
        except Exception as e:
            logger.warning("Prayer cache write failed (ignored): %s", e)
            return None
        if not written:
            return None
        if self._redis:
            await self._redis.set(cache_key, asdict(record))
        return record
