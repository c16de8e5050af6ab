"""Generation metadata, mined later for learning data. Written best-effort."""
import uuid
from datetime import datetime
from sqlalchemy import Column, String, Integer, DateTime, Text
from prayer_companion.database import Base


class PrayerGeneration(Base):
    __tablename__ = "prayer_generations"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    prayer_id = Column(String(64), nullable=False, index=True)
    title = Column(String(100), nullable=False)
    category = Column(String(50), nullable=True)
    situation = Column(Text, nullable=True)
    tone = Column(String(16), nullable=True)
    length = Column(String(16), nullable=True)
    content_length = Column(Integer, nullable=False, default=0)
    source = Column(String(16), nullable=False, index=True)  # "llm" | "template"
    generated_at = Column(DateTime, nullable=False, default=datetime.utcnow)
