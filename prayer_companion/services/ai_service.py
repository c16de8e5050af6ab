"""
Gemini (Vertex AI) client for prayer generation.
Uses google-genai client with Vertex AI. Calls are sync; async callers run them in an executor.
Every failure is raised as an LlmError variant (see prayer_companion.errors).
"""
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import httpx

from prayer_companion.config import Settings, get_settings
from prayer_companion.errors import LlmAuthFailed, LlmError, LlmOther, LlmRateLimited, LlmTimeout
from prayer_companion.services.ai_security import filter_personal_data
from prayer_companion.utils.text import normalize_prayer_text

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = (
    "당신은 경험 많은 기독교 목회자입니다. "
    "성도들의 마음에 깊이 와닿는 자연스럽고 따뜻한 기도문을 작성합니다."
)

TRANSFORM_PROMPT = """다음 기도 제목과 상황을 더 자연스럽고 기도문에 적합한 표현으로 변환해주세요:

제목: "{title}"
{situation_line}
변환 규칙:
1. 직접적인 표현을 간접적이고 겸손한 표현으로
2. 명령조를 간구하는 어조로
3. 구체적인 단어를 기도문에 어울리는 표현으로
4. 한국 기독교 문화에 맞는 정중한 표현으로

응답은 다음 JSON 형식으로:
{{
  "transformedTitle": "변환된 제목",
  "transformedSituation": "변환된 상황 (없으면 null)",
  "prayerContext": "기도문 작성에 도움될 배경 설명"
}}

JSON만 응답하세요."""


@dataclass(frozen=True)
class TransformedInput:
    transformed_title: str
    prayer_context: str
    transformed_situation: str | None = None


def classify_error(exc: Exception) -> LlmError:
    """Map SDK / transport exceptions to an LlmError variant."""
    if isinstance(exc, LlmError):
        return exc
    if isinstance(exc, (TimeoutError, httpx.TimeoutException)):
        return LlmTimeout(str(exc) or "LLM request timed out")
    code = getattr(exc, "code", None)
    if isinstance(code, int):
        if code == 429:
            return LlmRateLimited(str(exc))
        if code in (401, 403):
            return LlmAuthFailed(str(exc))
        if code in (408, 504):
            return LlmTimeout(str(exc))
    status = str(getattr(exc, "status", "") or "").upper()
    if status == "RESOURCE_EXHAUSTED":
        return LlmRateLimited(str(exc))
    if status in ("UNAUTHENTICATED", "PERMISSION_DENIED"):
        return LlmAuthFailed(str(exc))
    if status == "DEADLINE_EXCEEDED":
        return LlmTimeout(str(exc))
    return LlmOther(str(exc) or exc.__class__.__name__)


def _text_field(parsed: dict, name: str) -> str:
    """Stripped string value of a JSON field; non-strings count as missing."""
    value = parsed.get(name)
    return value.strip() if isinstance(value, str) else ""


def _response_text(response: Any) -> str:
    if not response or not response.candidates:
        raise LlmOther("Empty response from model")
    candidate = response.candidates[0]
    if not candidate.content or not candidate.content.parts:
        raise LlmOther("No text in model response")
    return getattr(response, "text", None) or candidate.content.parts[0].text or ""


class GeminiPrayerClient:
    """One instance per process; the genai client is built lazily on first use."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings or get_settings()
        self._client = None

    @property
    def is_configured(self) -> bool:
        return bool(self._settings.vertex_project_id)

    def _get_client(self):
        if self._client is not None:
            return self._client
        try:
            from google import genai
            from google.oauth2 import service_account
        except ImportError as e:
            raise LlmOther("Google GenAI not installed. pip install google-genai google-auth") from e

        if not self.is_configured:
            raise LlmAuthFailed("vertex_project_id is not configured")

        credentials = None
        if self._settings.vertex_credentials_path:
            path = Path(self._settings.vertex_credentials_path)
            if path.is_file():
                credentials = service_account.Credentials.from_service_account_file(
                    str(path),
                    scopes=["https://www.googleapis.com/auth/cloud-platform"],
                )

        self._client = genai.Client(
            vertexai=True,
            project=self._settings.vertex_project_id,
            location=self._settings.vertex_location,
            credentials=credentials,
        )
        return self._client

    def _generate(self, contents: str, **config: Any) -> str:
        try:
            client = self._get_client()
            from google.genai.types import GenerateContentConfig

            response = client.models.generate_content(
                model=self._settings.gemini_model,
                contents=contents,
                config=GenerateContentConfig(**config),
            )
            return _response_text(response)
        except Exception as e:
            raise classify_error(e) from e

    def generate_prayer(self, prompt: str) -> str:
        """Returns the normalized prayer text. Raises LlmError; empty text is LlmOther."""
        s = self._settings
        text = normalize_prayer_text(self._generate(
            prompt,
            system_instruction=SYSTEM_INSTRUCTION,
            temperature=s.llm_temperature,
            max_output_tokens=s.llm_max_output_tokens,
            presence_penalty=s.llm_presence_penalty,
            frequency_penalty=s.llm_frequency_penalty,
        ))
        if not text:
            raise LlmOther("No content generated")
        return text

    def transform_input(self, title: str, situation: str | None = None) -> TransformedInput:
        """Ask Gemini to rephrase title/situation for a prayer. Raises LlmError on any failure."""
        safe_title = filter_personal_data(title)
        safe_situation = filter_personal_data(situation)
        prompt = TRANSFORM_PROMPT.format(
            title=safe_title,
            situation_line=f'상황: "{safe_situation}"\n' if safe_situation else "",
        )
        raw = self._generate(
            prompt,
            temperature=0.7,
            max_output_tokens=500,
            response_mime_type="application/json",
        )
        try:
            parsed = json.loads(normalize_prayer_text(raw))
        except (json.JSONDecodeError, TypeError) as e:
            raise LlmOther(f"Malformed transform response: {e}") from e
        if not isinstance(parsed, dict):
            raise LlmOther("Transform response is not a JSON object")
        return TransformedInput(
            transformed_title=_text_field(parsed, "transformedTitle") or safe_title,
            transformed_situation=_text_field(parsed, "transformedSituation") or None,
            prayer_context=_text_field(parsed, "prayerContext"),
        )
