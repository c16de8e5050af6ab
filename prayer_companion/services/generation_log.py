"""Generation metadata sink (prayer_generations). Best-effort: failures are logged, never raised."""
import asyncio
import logging

from sqlalchemy.orm import Session, sessionmaker

from prayer_companion.models.prayer_generation import PrayerGeneration
from prayer_companion.schemas.prayer import GenerationRequest

logger = logging.getLogger(__name__)

SOURCE_LLM = "llm"
SOURCE_TEMPLATE = "template"


class GenerationLog:
    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def _insert(self, entry: PrayerGeneration) -> None:
        db: Session = self._session_factory()
        try:
            db.add(entry)
            db.commit()
        finally:
            db.close()

    async def insert(self, prayer_id: str, content: str, request: GenerationRequest, source: str) -> None:
        entry = PrayerGeneration(
            prayer_id=prayer_id,
            title=request.title,
            category=request.category,
            situation=request.situation,
            tone=request.effective_tone,
            length=request.effective_length,
            content_length=len(content),
            source=source,
        )
        loop = asyncio.get_event_loop()
        try:
            await loop.run_in_executor(None, self._insert, entry)
        except Exception as e:
            logger.warning("Generation metadata not saved for %s: %s", prayer_id, e)
