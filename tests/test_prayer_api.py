import pytest
from fastapi.testclient import TestClient

from prayer_companion.errors import ExhaustionError, LlmOther
from prayer_companion.main import app
from prayer_companion.models import PrayerFeedback

from fakes import LLM_PRAYER, FakeLlm, FakeRedis


@pytest.fixture
def client(make_service):
    """TestClient without the lifespan: state is wired by hand onto the app."""
    llm = FakeLlm()
    app.state.prayer_service = make_service(llm=llm)
    app.state.llm_client = llm
    app.state.redis_client = None
    yield TestClient(app)
    for name in ("prayer_service", "llm_client", "redis_client"):
        delattr(app.state, name)


def test_root(client):
    assert client.get("/").json()["message"] == "Prayer Companion API"


def test_generate_then_cached(client):
    body = {"title": "감사 기도", "category": "감사", "tone": "warm", "length": "short"}
    first = client.post("/api/prayer/generate", json=body)
    assert first.status_code == 200
    data = first.json()
    assert data["success"] is True
    assert data["prayer"]["content"] == LLM_PRAYER
    assert data["prayer"]["cached"] is False
    assert data["prayer"]["title"] == "감사 기도"

    second = client.post("/api/prayer/generate", json=body).json()
    assert second["prayer"]["cached"] is True
    assert second["prayer"]["id"] == data["prayer"]["id"]


def test_generate_falls_back_when_llm_down(client, make_service):
    app.state.prayer_service = make_service(llm=FakeLlm(error=LlmOther("down")))
    resp = client.post("/api/prayer/generate", json={"title": "건강 회복을 위한 기도"})
    assert resp.status_code == 200
    prayer = resp.json()["prayer"]
    assert prayer["id"].startswith("fallback_")
    assert prayer["content"].endswith("아멘.")


@pytest.mark.parametrize(
    "body",
    [
        {"title": ""},
        {"title": "   "},
        {"title": "가" * 101},
        {"title": "기도", "situation": "가" * 501},
        {"title": "기도", "tone": "loud"},
        {"title": "기도", "length": "medium"},
        {},
    ],
)
def test_generate_validation(client, body):
    assert client.post("/api/prayer/generate", json=body).status_code == 422


def test_generate_exhaustion_is_500(client, monkeypatch):
    async def exhausted(request):
        raise ExhaustionError("nothing left")

    monkeypatch.setattr(app.state.prayer_service, "generate", exhausted)
    resp = client.post("/api/prayer/generate", json={"title": "기도"})
    assert resp.status_code == 500
    assert resp.json()["detail"] == "Failed to generate prayer. Please try again."


def test_feedback_saved(client, session_factory):
    resp = client.post(
        "/api/prayer/feedback",
        json={"prayerId": "prayer_1", "rating": 2, "feedback": "딱딱해요", "improvements": ["too_formal"]},
    )
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "message": "피드백이 성공적으로 저장되었습니다."}

    db = session_factory()
    try:
        assert db.query(PrayerFeedback).count() == 1
    finally:
        db.close()


@pytest.mark.parametrize("rating", [0, 6])
def test_feedback_rating_out_of_range(client, rating):
    resp = client.post("/api/prayer/feedback", json={"prayerId": "prayer_1", "rating": rating})
    assert resp.status_code == 422


def test_feedback_store_failure_is_500(client, monkeypatch):
    async def failing(feedback):
        raise RuntimeError("db down")

    monkeypatch.setattr(app.state.prayer_service, "record_feedback", failing)
    resp = client.post("/api/prayer/feedback", json={"prayerId": "prayer_1", "rating": 3})
    assert resp.status_code == 500
    assert resp.json()["detail"] == "피드백 저장 중 오류가 발생했습니다."


def test_health_reports_redis_and_llm(client):
    assert client.get("/api/prayer/health").json() == {"llm": "configured", "redis": "unavailable"}

    app.state.redis_client = FakeRedis()
    assert client.get("/api/prayer/health").json()["redis"] == "ok"

    app.state.redis_client = FakeRedis(fail=True)
    assert client.get("/api/prayer/health").json()["redis"] == "error"


def test_generate_requires_post(client):
    assert client.get("/api/prayer/generate").status_code == 405
