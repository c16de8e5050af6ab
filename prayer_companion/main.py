from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prayer_companion.config import get_settings
from prayer_companion.core.redis import build_redis_prayer_cache, close_redis, connect_redis
from prayer_companion.database import Base, SessionLocal, engine
from prayer_companion.routers import prayer
from prayer_companion.services.ai_service import GeminiPrayerClient
from prayer_companion.services.generation_log import GenerationLog
from prayer_companion.services.learning_store import LearningStore
from prayer_companion.services.prayer_cache import PrayerCacheStore
from prayer_companion.services.prayer_service import PrayerService
import prayer_companion.models  # noqa: F401 - register tables on Base.metadata

settings = get_settings()


def build_prayer_service(session_factory, redis_client=None, llm=None) -> PrayerService:
    """Wire the process-wide PrayerService and its collaborators."""
    return PrayerService(
        cache=PrayerCacheStore(session_factory, build_redis_prayer_cache(redis_client)),
        learning=LearningStore(session_factory),
        llm=llm or GeminiPrayerClient(settings),
        generation_log=GenerationLog(session_factory),
        transform_input=settings.transform_input_with_llm,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Alembic owns the schema in production; create_all covers fresh SQLite setups
    Base.metadata.create_all(bind=engine)
    redis_client = await connect_redis()
    llm = GeminiPrayerClient(settings)
    app.state.redis_client = redis_client
    app.state.llm_client = llm
    app.state.prayer_service = build_prayer_service(SessionLocal, redis_client, llm)
    try:
        yield
    finally:
        await close_redis(redis_client)


app = FastAPI(title="Prayer Companion API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(prayer.router)


@app.get("/")
def root():
    return {"message": "Prayer Companion API", "docs": "/docs"}
