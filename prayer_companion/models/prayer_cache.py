"""Cached prayers so a repeated identical request does not call Gemini again."""
import uuid
from datetime import datetime
from sqlalchemy import Column, String, Text, DateTime
from prayer_companion.database import Base


class PrayerCache(Base):
    __tablename__ = "prayer_cache"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    cache_key = Column(String(64), nullable=False, unique=True, index=True)  # sha256 of normalized request
    content = Column(Text, nullable=False)
    title = Column(String(100), nullable=False)
    category = Column(String(50), nullable=True)
    generated_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    expires_at = Column(DateTime, nullable=False, index=True)
