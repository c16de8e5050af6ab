"""Effectiveness-weighted text patterns derived from feedback; read back into future prompts."""
import uuid
import enum
from datetime import datetime
from sqlalchemy import Column, String, Float, DateTime
from prayer_companion.database import Base


class PatternType(str, enum.Enum):
    POSITIVE = "positive_pattern"
    AVOID = "avoid_pattern"


class PrayerLearningPattern(Base):
    __tablename__ = "prayer_learning_data"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    pattern_text = Column(String(255), nullable=False, unique=True, index=True)
    pattern_type = Column(String(32), nullable=False, default=PatternType.AVOID.value)
    effectiveness_score = Column(Float, nullable=False, default=0.0)  # [0, 1]
    last_updated = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)
