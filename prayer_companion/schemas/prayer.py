from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


Tone = Literal["formal", "casual", "warm"]
Length = Literal["short", "long"]

DEFAULT_TONE: Tone = "warm"
DEFAULT_LENGTH: Length = "short"


# ---- Generate ----

class GenerationRequest(BaseModel):
    """One prayer request. Tone/length stay None when omitted; defaults are applied downstream."""
    # Whitespace is stripped before length checks, so a blank title is rejected
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=100)
    category: str | None = Field(None, description="Free label, e.g. 감사, 회개, 간구, 중보, 찬양, 묵상")
    situation: str | None = Field(None, max_length=500)
    tone: Tone | None = None
    length: Length | None = None

    @property
    def effective_tone(self) -> Tone:
        return self.tone or DEFAULT_TONE

    @property
    def effective_length(self) -> Length:
        return self.length or DEFAULT_LENGTH


class PrayerOut(BaseModel):
    id: str
    content: str
    title: str
    category: str | None = None
    generated_at: datetime
    cached: bool = False


class GenerationResponse(BaseModel):
    success: bool = True
    prayer: PrayerOut


# ---- Feedback ----

class FeedbackRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    prayer_id: str = Field(..., min_length=1, max_length=64, alias="prayerId")
    rating: int = Field(..., ge=1, le=5)
    feedback: str = Field("", max_length=2000)
    improvements: list[str] = Field(default_factory=list, description="Improvement tags, e.g. too_formal")
    user_id: str | None = Field(None, alias="userId")


class FeedbackResponse(BaseModel):
    success: bool = True
    message: str = "피드백이 성공적으로 저장되었습니다."
