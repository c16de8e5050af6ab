"""
Learning data: feedback rows and the effectiveness-weighted patterns derived from them.
- Reads degrade to empty lists on any DB error; learning data only enhances the prompt.
- Pattern upserts are keyed by pattern_text; concurrent writers on the same text: last write wins.
- Scores are never decayed; the latest feedback for a pattern text replaces its score.
All DB work is sync and runs in the default executor.
"""
import asyncio
import json
import logging
from dataclasses import dataclass, field
from datetime import datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from prayer_companion.config import get_settings
from prayer_companion.models.prayer_feedback import PrayerFeedback
from prayer_companion.models.prayer_learning_pattern import PatternType, PrayerLearningPattern
from prayer_companion.schemas.prayer import FeedbackRequest

logger = logging.getLogger(__name__)

POSITIVE_THRESHOLD = 0.6
AVOID_THRESHOLD = 0.3

POSITIVE_PATTERN_TEXT = "자연스럽고 감동적인 표현 사용"

# Improvement tags offered by the feedback form -> stored pattern text
IMPROVEMENT_LABELS = {
    "too_formal": "너무 격식적임",
    "too_casual": "너무 편안함",
    "repetitive": "반복적인 표현",
    "not_personal": "개인적이지 않음",
    "too_abstract": "추상적임",
    "not_natural": "자연스럽지 않음",
    "too_long": "너무 길어요",
    "too_short": "너무 짧아요",
    "off_topic": "주제에서 벗어남",
    "not_comforting": "위로가 되지 않음",
}


@dataclass
class LearningData:
    positive_patterns: list[str] = field(default_factory=list)
    avoid_patterns: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ExtractedPattern:
    text: str
    type: PatternType
    score: float


def improvement_text(tag: str) -> str:
    tag = tag.strip()
    return IMPROVEMENT_LABELS.get(tag, tag)


def extract_patterns(rating: int, improvements: list[str]) -> list[ExtractedPattern]:
    """One avoid-pattern per improvement tag (score 1 - rating/5); one positive pattern if rating >= 4."""
    effectiveness = rating / 5.0
    patterns = []
    seen = set()
    for tag in improvements:
        text = improvement_text(tag)
        if not text or text in seen:
            continue
        seen.add(text)
        patterns.append(ExtractedPattern(text=text, type=PatternType.AVOID, score=round(1 - effectiveness, 4)))
    if rating >= 4:
        patterns.append(ExtractedPattern(text=POSITIVE_PATTERN_TEXT, type=PatternType.POSITIVE, score=effectiveness))
    return patterns


def effectiveness_of(pattern_type: str, score: float) -> float:
    """Avoid-patterns store the strength of the avoid signal; flip it back to effectiveness."""
    if pattern_type == PatternType.AVOID.value:
        return 1.0 - score
    return score


def partition_patterns(rows: list[tuple[str, str, float]]) -> LearningData:
    """rows: (pattern_type, pattern_text, effectiveness_score), highest score first.
    A row only ever lands in the list of its own type."""
    data = LearningData()
    for pattern_type, text, score in rows:
        effectiveness = effectiveness_of(pattern_type, score)
        if pattern_type == PatternType.POSITIVE.value and effectiveness > POSITIVE_THRESHOLD:
            data.positive_patterns.append(text)
        elif pattern_type == PatternType.AVOID.value and effectiveness < AVOID_THRESHOLD:
            data.avoid_patterns.append(text)
    return data


class LearningStore:
    def __init__(self, session_factory: sessionmaker, limit: int | None = None):
        self._session_factory = session_factory
        self._limit = limit or get_settings().learning_pattern_limit

    # ---- read ----

    def _query_top_patterns(self) -> list[tuple[str, str, float]]:
        db: Session = self._session_factory()
        try:
            rows = (
                db.query(
                    PrayerLearningPattern.pattern_type,
                    PrayerLearningPattern.pattern_text,
                    PrayerLearningPattern.effectiveness_score,
                )
                .filter(PrayerLearningPattern.effectiveness_score >= 0)
                .order_by(PrayerLearningPattern.effectiveness_score.desc())
                .limit(self._limit)
                .all()
            )
            return [(r[0], r[1], float(r[2])) for r in rows]
        finally:
            db.close()

    async def get_learning_data(self, category: str | None = None, tone: str | None = None) -> LearningData:
        """Patterns are global; category and tone are only logged."""
        loop = asyncio.get_event_loop()
        try:
            rows = await loop.run_in_executor(None, self._query_top_patterns)
        except Exception as e:
            logger.warning("Learning data unavailable (category=%s, tone=%s): %s", category, tone, e)
            return LearningData()
        return partition_patterns(rows)

    # ---- write ----

    def _insert_feedback(self, feedback: FeedbackRequest) -> None:
        db: Session = self._session_factory()
        try:
            db.add(PrayerFeedback(
                prayer_id=feedback.prayer_id,
                rating=feedback.rating,
                feedback_text=feedback.feedback or "",
                improvements=json.dumps(feedback.improvements, ensure_ascii=False),
                user_id=feedback.user_id,
            ))
            db.commit()
        finally:
            db.close()

    def _upsert_pattern(self, pattern: ExtractedPattern) -> None:
        db: Session = self._session_factory()
        try:
            for _ in range(2):
                row = db.query(PrayerLearningPattern).filter(
                    PrayerLearningPattern.pattern_text == pattern.text,
                ).first()
                if row is None:
                    db.add(PrayerLearningPattern(
                        pattern_text=pattern.text,
                        pattern_type=pattern.type.value,
                        effectiveness_score=pattern.score,
                    ))
                else:
                    row.pattern_type = pattern.type.value
                    row.effectiveness_score = pattern.score
                    row.last_updated = datetime.utcnow()
                try:
                    db.commit()
                    return
                except IntegrityError:
                    # Another writer inserted the same text first; retry as update
                    db.rollback()
            logger.warning("Learning pattern %r not saved: insert kept colliding", pattern.text)
        finally:
            db.close()

    async def record_feedback(self, feedback: FeedbackRequest) -> None:
        """Feedback row first (errors propagate), then pattern upserts (errors logged)."""
        loop = asyncio.get_event_loop()
        await loop.run_in_executor(None, self._insert_feedback, feedback)
        for pattern in extract_patterns(feedback.rating, feedback.improvements):
            try:
                await loop.run_in_executor(None, self._upsert_pattern, pattern)
            except Exception as e:
                logger.warning("Learning pattern upsert failed for %r: %s", pattern.text, e)
