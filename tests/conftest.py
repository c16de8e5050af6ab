"""Shared fixtures: in-memory SQLite, a scripted Gemini stand-in and a wired PrayerService."""
import os

# Settings are read once at import time of prayer_companion.database
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["REDIS_URL"] = ""
os.environ["VERTEX_PROJECT_ID"] = ""

import random

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import prayer_companion.models  # noqa: F401 - register tables
from prayer_companion.database import Base
from prayer_companion.services.generation_log import GenerationLog
from prayer_companion.services.learning_store import LearningStore
from prayer_companion.services.prayer_cache import PrayerCacheStore
from prayer_companion.services.prayer_service import PrayerService

from fakes import FakeLlm


def _unreachable_session():
    raise RuntimeError("database unreachable")


@pytest.fixture
def broken_session_factory():
    """Session factory whose every call fails, as when the database is down."""
    return _unreachable_session


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def make_service(session_factory):
    """Factory: make_service(llm=..., cache=..., learning=..., transform_input=False)."""

    def _make(llm=None, cache=None, learning=None, transform_input=False, seed=7) -> PrayerService:
        return PrayerService(
            cache=cache or PrayerCacheStore(session_factory, ttl_hours=24),
            learning=learning or LearningStore(session_factory, limit=20),
            llm=llm or FakeLlm(),
            generation_log=GenerationLog(session_factory),
            rng=random.Random(seed),
            transform_input=transform_input,
        )

    return _make
