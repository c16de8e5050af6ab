"""
Prayer endpoints:
- POST /api/prayer/generate: prayer for a title/situation (cached 24h; falls back to templates when Gemini fails)
- POST /api/prayer/feedback: rating + improvement tags; feeds learning data for future prompts
- GET /api/prayer/health: Redis / Gemini configuration status
Request validation (title 1-100 chars, situation <= 500, rating 1-5) happens in the pydantic schemas.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, Request, status

from prayer_companion.errors import ExhaustionError
from prayer_companion.schemas.prayer import (
    FeedbackRequest,
    FeedbackResponse,
    GenerationRequest,
    GenerationResponse,
)
from prayer_companion.services.prayer_service import PrayerService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/prayer", tags=["prayer"])


def get_prayer_service(request: Request) -> PrayerService:
    """PrayerService built in main.lifespan."""
    return request.app.state.prayer_service


@router.post("/generate", response_model=GenerationResponse)
async def generate_prayer(
    body: GenerationRequest,
    service: PrayerService = Depends(get_prayer_service),
):
    try:
        prayer = await service.generate(body)
    except ExhaustionError as e:
        logger.exception("Prayer generation exhausted every path")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate prayer. Please try again.",
        ) from e
    return GenerationResponse(prayer=prayer)


@router.post("/feedback", response_model=FeedbackResponse)
async def submit_feedback(
    body: FeedbackRequest,
    service: PrayerService = Depends(get_prayer_service),
):
    try:
        await service.record_feedback(body)
    except Exception as e:
        logger.exception("Saving prayer feedback failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="피드백 저장 중 오류가 발생했습니다.",
        ) from e
    logger.info(
        "Prayer feedback saved: prayer_id=%s rating=%s improvements=%d",
        body.prayer_id, body.rating, len(body.improvements),
    )
    return FeedbackResponse()


@router.get("/health")
async def prayer_health(request: Request):
    """Health check: Redis status (optional) and whether Gemini is configured. DB not checked here."""
    client = getattr(request.app.state, "redis_client", None)
    llm = getattr(request.app.state, "llm_client", None)
    body = {"llm": "configured" if llm is not None and llm.is_configured else "unconfigured"}
    if client is None:
        body["redis"] = "unavailable"
        return body
    try:
        await client.ping()
        body["redis"] = "ok"
    except Exception as e:
        logger.warning("Redis health ping failed: %s", e)
        body["redis"] = "error"
    return body
