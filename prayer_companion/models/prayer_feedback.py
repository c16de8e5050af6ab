import uuid
from datetime import datetime
from sqlalchemy import Column, String, Integer, DateTime, Text
from prayer_companion.database import Base


class PrayerFeedback(Base):
    __tablename__ = "prayer_feedback"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    prayer_id = Column(String(64), nullable=False, index=True)
    rating = Column(Integer, nullable=False)  # 1..5
    feedback_text = Column(Text, nullable=False, default="")
    improvements = Column(Text, nullable=False, default="[]")  # JSON list of improvement tags
    user_id = Column(String(36), nullable=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
