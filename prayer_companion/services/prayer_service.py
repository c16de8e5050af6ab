"""
Prayer generation orchestration.
1) Cache lookup by derived key; hit -> cached=True.
2) Miss: topic analysis + learning data.
3) Gemini with the enhanced prompt; success -> cache write + generation metadata.
4) Any LlmError -> template synthesis from the analyzed topic (not cached).
5) If 2-4 raise anything else -> category-keyed static prayer (not cached).
No retries: one failed LLM attempt goes straight to the template path.
"""
import asyncio
import logging
import random
import time
import uuid
from datetime import datetime

from prayer_companion.errors import ExhaustionError, GenerationFailure, LlmError
from prayer_companion.schemas.prayer import FeedbackRequest, GenerationRequest, PrayerOut
from prayer_companion.services.ai_service import GeminiPrayerClient, TransformedInput
from prayer_companion.services.cache_key import derive_cache_key
from prayer_companion.services.fallback_generator import compose_fallback_prayer
from prayer_companion.services.generation_log import SOURCE_LLM, SOURCE_TEMPLATE, GenerationLog
from prayer_companion.services.learning_store import LearningData, LearningStore
from prayer_companion.services.prayer_cache import PrayerCacheStore
from prayer_companion.services.prompt_builder import build_prompt
from prayer_companion.services.static_prayers import get_static_prayer
from prayer_companion.services.template_catalog import PrayerTemplate, get_template
from prayer_companion.services.topic_analyzer import TopicAnalysis, analyze_topic

logger = logging.getLogger(__name__)


def new_prayer_id(prefix: str) -> str:
    return f"{prefix}_{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"


class PrayerService:
    """Built once at startup (see main.lifespan) and shared by all requests; holds no per-request state."""

    def __init__(
        self,
        cache: PrayerCacheStore,
        learning: LearningStore,
        llm: GeminiPrayerClient,
        generation_log: GenerationLog,
        rng: random.Random | None = None,
        transform_input: bool = True,
    ):
        self._cache = cache
        self._learning = learning
        self._llm = llm
        self._log = generation_log
        self._rng = rng or random.Random()
        self._transform_input = transform_input

    async def generate(self, request: GenerationRequest) -> PrayerOut:
        cache_key = derive_cache_key(request)
        cached = await self._cache.get(cache_key)
        if cached:
            return PrayerOut(
                id=cached.id,
                content=cached.content,
                title=cached.title,
                category=cached.category,
                generated_at=cached.generated_at,
                cached=True,
            )

        try:
            return await self._generate_fresh(request, cache_key)
        except Exception:
            logger.exception("Topic-based generation failed; using static prayer text")

        try:
            content = get_static_prayer(request.category, request.effective_length, request.title, request.situation)
        except Exception as e:
            raise ExhaustionError("All prayer generation paths failed") from e
        return PrayerOut(
            id=new_prayer_id("static"),
            content=content,
            title=request.title,
            category=request.category,
            generated_at=datetime.utcnow(),
            cached=False,
        )

    async def record_feedback(self, feedback: FeedbackRequest) -> None:
        await self._learning.record_feedback(feedback)

    async def _generate_fresh(self, request: GenerationRequest, cache_key: str) -> PrayerOut:
        analysis = analyze_topic(request.title, request.situation)
        template = get_template(analysis.main_topic)
        learning = await self._learning.get_learning_data(request.category, request.effective_tone)

        try:
            content = await self._generate_with_llm(request, analysis, template, learning)
        except GenerationFailure as e:
            logger.warning("Gemini unavailable (%s), using template prayer: %s", e.cause.kind, e.cause)
            content = compose_fallback_prayer(request, analysis, template, self._rng)
            prayer_id = new_prayer_id("fallback")
            await self._log.insert(prayer_id, content, request, SOURCE_TEMPLATE)
            return PrayerOut(
                id=prayer_id,
                content=content,
                title=request.title,
                category=request.category,
                generated_at=datetime.utcnow(),
                cached=False,
            )

        prayer_id = new_prayer_id("prayer")
        generated_at = datetime.utcnow()
        await self._cache.upsert(cache_key, prayer_id, content, request.title, request.category, generated_at)
        await self._log.insert(prayer_id, content, request, SOURCE_LLM)
        logger.info("Generated prayer %s with Gemini (topic=%s)", prayer_id, analysis.main_topic.value)
        return PrayerOut(
            id=prayer_id,
            content=content,
            title=request.title,
            category=request.category,
            generated_at=generated_at,
            cached=False,
        )

    async def _transform(self, request: GenerationRequest) -> TransformedInput | None:
        """LLM rephrasing of title/situation; None means use the offline transform."""
        if not self._transform_input:
            return None
        loop = asyncio.get_event_loop()
        try:
            return await loop.run_in_executor(None, self._llm.transform_input, request.title, request.situation)
        except LlmError as e:
            logger.info("Input transform unavailable (%s); using offline transform", e.kind)
            return None

    async def _generate_with_llm(
        self,
        request: GenerationRequest,
        analysis: TopicAnalysis,
        template: PrayerTemplate,
        learning: LearningData,
    ) -> str:
        transformed = await self._transform(request)
        prompt = build_prompt(request, analysis, template, learning, transformed)
        loop = asyncio.get_event_loop()
        try:
            return await loop.run_in_executor(None, self._llm.generate_prayer, prompt)
        except LlmError as e:
            raise GenerationFailure(e) from e
