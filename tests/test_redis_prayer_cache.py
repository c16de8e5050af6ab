import asyncio
import json
from datetime import datetime, timedelta

from prayer_companion.core.redis import build_redis_prayer_cache, close_redis, connect_redis
from prayer_companion.services.redis_prayer_cache import RedisPrayerCache

from fakes import FakeRedis


def record(expires_in=timedelta(hours=24)):
    now = datetime.utcnow()
    return {
        "id": "prayer_1",
        "content": "주님 감사합니다. 아멘.",
        "title": "감사",
        "category": "감사",
        "cache_key": "abc",
        "generated_at": now,
        "expires_at": now + expires_in,
    }


def test_set_then_get_restores_datetimes():
    redis = FakeRedis()
    cache = RedisPrayerCache(redis)

    async def scenario():
        await cache.set("abc", record())
        return await cache.get("abc")

    data = asyncio.run(scenario())
    assert data["content"] == "주님 감사합니다. 아멘."
    assert isinstance(data["expires_at"], datetime)
    assert 0 < redis.ttls["prayer:abc"] <= 24 * 3600


def test_expired_record_is_not_written():
    redis = FakeRedis()
    asyncio.run(RedisPrayerCache(redis).set("abc", record(expires_in=timedelta(seconds=-5))))
    assert redis.store == {}


def test_garbage_value_is_a_miss():
    redis = FakeRedis()
    redis.store["prayer:abc"] = json.dumps({"content": ""})
    assert asyncio.run(RedisPrayerCache(redis).get("abc")) is None
    redis.store["prayer:abc"] = "not json"
    assert asyncio.run(RedisPrayerCache(redis).get("abc")) is None


def test_redis_errors_are_swallowed():
    cache = RedisPrayerCache(FakeRedis(fail=True))

    async def scenario():
        await cache.set("abc", record())
        return await cache.get("abc")

    assert asyncio.run(scenario()) is None


def test_disabled_redis_helpers():
    assert asyncio.run(connect_redis("")) is None
    assert build_redis_prayer_cache(None) is None
    asyncio.run(close_redis(None))
    asyncio.run(close_redis(FakeRedis(fail=True)))
