import asyncio
import json
import logging
from datetime import datetime, timedelta, timezone

import pytest

from prayer_companion.errors import ExhaustionError, LlmAuthFailed, LlmOther, LlmRateLimited
from prayer_companion.models import PrayerCache, PrayerGeneration
from prayer_companion.schemas.prayer import FeedbackRequest, GenerationRequest
from prayer_companion.services import prayer_service as prayer_service_module
from prayer_companion.services.ai_service import TransformedInput
from prayer_companion.services.cache_key import derive_cache_key
from prayer_companion.services.learning_store import LearningStore
from prayer_companion.services.prayer_cache import PrayerCacheStore
from prayer_companion.services.redis_prayer_cache import RedisPrayerCache
from prayer_companion.services.static_prayers import get_static_prayer
from prayer_companion.services.template_catalog import get_tone_closings, get_tone_openings
from fakes import LLM_PRAYER, CollidingSession, FakeLlm, FakeRedis


def rows(session_factory, model):
    db = session_factory()
    try:
        return db.query(model).all()
    finally:
        db.close()


# ---- primary path ----

def test_llm_prayer_is_returned_and_cached(make_service, session_factory):
    llm = FakeLlm()
    service = make_service(llm=llm)
    request = GenerationRequest(title="감사 기도", category="감사")

    async def scenario():
        return await service.generate(request), await service.generate(request)

    first, second = asyncio.run(scenario())
    assert first.content == LLM_PRAYER
    assert first.cached is False
    assert first.id.startswith("prayer_")
    assert second.cached is True
    assert second.id == first.id
    assert second.content == first.content
    assert len(llm.prompts) == 1

    generations = rows(session_factory, PrayerGeneration)
    assert [(g.prayer_id, g.source) for g in generations] == [(first.id, "llm")]


def test_equivalent_requests_share_cache_entry(make_service):
    llm = FakeLlm()
    service = make_service(llm=llm)

    async def scenario():
        await service.generate(GenerationRequest(title="Family Prayer"))
        return await service.generate(GenerationRequest(title=" family prayer ", tone="warm", length="short"))

    assert asyncio.run(scenario()).cached is True
    assert len(llm.prompts) == 1


def test_prompt_includes_learned_patterns(make_service, session_factory):
    llm = FakeLlm()
    learning = LearningStore(session_factory, limit=20)
    service = make_service(llm=llm, learning=learning)

    async def scenario():
        for i in range(5):
            await service.record_feedback(FeedbackRequest(prayerId=f"prayer_{i}", rating=1, improvements=["too_formal"]))
        await service.generate(GenerationRequest(title="오늘 하루"))

    asyncio.run(scenario())
    assert "피해야 할 패턴들:\n- 너무 격식적임" in llm.prompts[0]


def test_llm_transform_feeds_prompt(make_service):
    llm = FakeLlm(transformed=TransformedInput(
        transformed_title="주님의 인도하심을 구하는 마음",
        prayer_context="새로운 길 앞에 선 마음",
    ))
    service = make_service(llm=llm, transform_input=True)
    asyncio.run(service.generate(GenerationRequest(title="이직 고민")))
    assert "- 주제: 주님의 인도하심을 구하는 마음" in llm.prompts[0]


def test_transform_failure_uses_offline_context(make_service):
    llm = FakeLlm()
    service = make_service(llm=llm, transform_input=True)
    prayer = asyncio.run(service.generate(GenerationRequest(title="이직 고민")))
    assert prayer.content == LLM_PRAYER
    assert "- 주제: 이직 고민" in llm.prompts[0]


# ---- template fallback ----

@pytest.mark.parametrize("error", [LlmRateLimited("quota"), LlmAuthFailed("no key"), LlmOther("boom")])
def test_llm_failure_uses_topic_template(make_service, session_factory, error):
    service = make_service(llm=FakeLlm(error=error))
    prayer = asyncio.run(service.generate(GenerationRequest(title="건강 회복을 위한 기도", length="short", tone="warm")))

    assert prayer.cached is False
    assert prayer.id.startswith("fallback_")
    assert prayer.content.startswith(get_tone_openings()["warm"])
    assert prayer.content.endswith(get_tone_closings()["warm"])
    assert "건강" in prayer.content
    assert 6 <= prayer.content.count(".") <= 8

    assert rows(session_factory, PrayerCache) == []
    assert [g.source for g in rows(session_factory, PrayerGeneration)] == ["template"]


def test_fallback_results_are_not_served_from_cache(make_service):
    llm = FakeLlm(error=LlmOther("down"))
    service = make_service(llm=llm)
    request = GenerationRequest(title="면접을 앞두고", length="long")

    async def scenario():
        return await service.generate(request), await service.generate(request)

    first, second = asyncio.run(scenario())
    assert first.cached is False and second.cached is False
    assert first.id != second.id
    assert len(llm.prompts) == 2


# ---- cache lifecycle ----

def test_expired_entry_is_regenerated(make_service, session_factory):
    request = GenerationRequest(title="감사 기도")
    key = derive_cache_key(request)
    past = datetime.utcnow() - timedelta(hours=30)
    db = session_factory()
    db.add(PrayerCache(
        id="prayer_old", cache_key=key, content="오래된 기도", title="감사 기도",
        category=None, generated_at=past, expires_at=past + timedelta(hours=24),
    ))
    db.commit()
    db.close()

    llm = FakeLlm()
    service = make_service(llm=llm)

    async def scenario():
        return await service.generate(request), await service.generate(request)

    fresh, again = asyncio.run(scenario())
    assert fresh.cached is False
    assert fresh.content == LLM_PRAYER
    assert again.cached is True
    assert again.id == fresh.id

    stored = rows(session_factory, PrayerCache)
    assert len(stored) == 1
    assert stored[0].expires_at > datetime.utcnow()


def test_cache_read_failure_is_a_miss(make_service, broken_session_factory):
    llm = FakeLlm()
    service = make_service(llm=llm, cache=PrayerCacheStore(broken_session_factory, ttl_hours=24))
    prayer = asyncio.run(service.generate(GenerationRequest(title="오늘 하루")))
    assert prayer.content == LLM_PRAYER
    assert prayer.cached is False


def test_redis_hit_skips_database(make_service, session_factory):
    redis = FakeRedis()
    cache = PrayerCacheStore(session_factory, RedisPrayerCache(redis), ttl_hours=24)
    llm = FakeLlm()
    service = make_service(llm=llm, cache=cache)
    request = GenerationRequest(title="오늘 하루")

    asyncio.run(service.generate(request))
    assert f"prayer:{derive_cache_key(request)}" in redis.store

    db = session_factory()
    db.query(PrayerCache).delete()
    db.commit()
    db.close()

    again = asyncio.run(service.generate(request))
    assert again.cached is True
    assert len(llm.prompts) == 1


def seeded_redis(request, **overrides):
    now = datetime.utcnow()
    record = {
        "id": "prayer_from_redis",
        "content": "레디스에 저장된 기도. 아멘.",
        "title": request.title,
        "category": None,
        "cache_key": derive_cache_key(request),
        "generated_at": now.isoformat(),
        "expires_at": (now + timedelta(hours=1)).isoformat(),
    }
    record.update(overrides)
    redis = FakeRedis()
    redis.store[f"prayer:{derive_cache_key(request)}"] = json.dumps(record, ensure_ascii=False)
    return redis


@pytest.mark.parametrize(
    "overrides",
    [
        {"version": 2},
        {"expires_at": "2099-01-02T00:00:00+00:00"},
    ],
)
def test_redis_record_from_other_writer_is_served(make_service, session_factory, overrides):
    request = GenerationRequest(title="오늘 하루")
    redis = seeded_redis(request, **overrides)
    llm = FakeLlm()
    service = make_service(llm=llm, cache=PrayerCacheStore(session_factory, RedisPrayerCache(redis), ttl_hours=24))

    prayer = asyncio.run(service.generate(request))
    assert prayer.cached is True
    assert prayer.id == "prayer_from_redis"
    assert llm.prompts == []


@pytest.mark.parametrize(
    "overrides",
    [
        {"id": None},
        {"expires_at": "not a date"},
        {"generated_at": 12345},
    ],
)
def test_unusable_redis_record_is_a_miss(make_service, session_factory, overrides):
    request = GenerationRequest(title="오늘 하루")
    redis = seeded_redis(request, **overrides)
    llm = FakeLlm()
    service = make_service(llm=llm, cache=PrayerCacheStore(session_factory, RedisPrayerCache(redis), ttl_hours=24))

    prayer = asyncio.run(service.generate(request))
    assert prayer.cached is False
    assert prayer.content == LLM_PRAYER


class MalformedRedisCache:
    """Returns a record whose expiry cannot be compared with a naive UTC datetime."""

    async def get(self, cache_key):
        return {"id": "x", "content": "x", "expires_at": datetime(2099, 1, 1, tzinfo=timezone.utc)}

    async def set(self, cache_key, record):
        return None


def test_redis_record_that_cannot_be_read_falls_back_to_database(make_service, session_factory):
    llm = FakeLlm()
    service = make_service(llm=llm, cache=PrayerCacheStore(session_factory, MalformedRedisCache(), ttl_hours=24))
    prayer = asyncio.run(service.generate(GenerationRequest(title="오늘 하루")))
    assert prayer.cached is False
    assert prayer.content == LLM_PRAYER


def test_database_hit_warms_redis(session_factory):
    redis = FakeRedis()
    cache = PrayerCacheStore(session_factory, RedisPrayerCache(redis), ttl_hours=24)
    now = datetime.utcnow()
    db = session_factory()
    db.add(PrayerCache(
        id="prayer_db", cache_key="k" * 64, content="저장된 기도. 아멘.", title="감사",
        category="감사", generated_at=now, expires_at=now + timedelta(hours=2),
    ))
    db.commit()
    db.close()

    cached = asyncio.run(cache.get("k" * 64))
    assert cached.id == "prayer_db"
    key = "prayer:" + "k" * 64
    assert key in redis.store
    assert 0 < redis.ttls[key] <= 2 * 3600


# ---- last resort ----

def test_static_prayer_when_topic_path_breaks(make_service, session_factory, monkeypatch):
    def explode(*args, **kwargs):
        raise RuntimeError("analyzer broken")

    monkeypatch.setattr(prayer_service_module, "analyze_topic", explode)
    service = make_service(llm=FakeLlm(error=LlmOther("down")))
    request = GenerationRequest(title="어머니를 위한 기도", category="중보", length="long")

    prayer = asyncio.run(service.generate(request))
    assert prayer.id.startswith("static_")
    assert prayer.cached is False
    assert prayer.content == get_static_prayer("중보", "long", "어머니를 위한 기도")
    assert rows(session_factory, PrayerCache) == []


def test_exhaustion_when_every_path_fails(make_service, monkeypatch):
    def explode(*args, **kwargs):
        raise RuntimeError("broken")

    monkeypatch.setattr(prayer_service_module, "analyze_topic", explode)
    monkeypatch.setattr(prayer_service_module, "get_static_prayer", explode)
    service = make_service()
    with pytest.raises(ExhaustionError):
        asyncio.run(service.generate(GenerationRequest(title="오늘 하루")))


def test_cache_write_lost_to_repeated_collisions_is_logged(caplog):
    session = CollidingSession()
    cache = PrayerCacheStore(lambda: session, ttl_hours=24)
    with caplog.at_level(logging.WARNING, logger="prayer_companion.services.prayer_cache"):
        stored = asyncio.run(cache.upsert("c" * 64, "prayer_1", "기도. 아멘.", "감사", None))
    assert session.commits == 2
    assert stored is None
    assert "lost to concurrent writers" in caplog.text
