"""
Template-based prayer synthesis, used when the LLM call fails.
Picks one prayer/blessing/concern from the analyzed topic's template with the injected RNG and
fills a fixed short (6-8 sentences) or long (15-20 sentences) skeleton.
"""
import random

from prayer_companion.schemas.prayer import GenerationRequest
from prayer_companion.services.template_catalog import (
    PrayerTemplate,
    get_emotional_expression,
    get_tone_closings,
    get_tone_openings,
)
from prayer_companion.services.topic_analyzer import TopicAnalysis, prayer_context

SHORT_SKELETON = """{opening} {context}.

주님께서 이 마음을 깊이 아시고 계심을 믿습니다. {prayer}.

{concern}이 있지만, {emotion} 주님께서 모든 것을 아시고 가장 좋은 길로 인도해 주실 것을 믿습니다.

{blessing}을 허락하시고, 이 모든 과정을 통해 주님을 더욱 신뢰하게 하시옵소서. {closing}"""

LONG_SKELETON = """{opening} {context}.

주님께서는 우리의 모든 필요를 아시고, 때를 따라 돕는 은혜를 주시는 분이심을 고백합니다. 이 간절한 마음을 주님께서 받아주시기를 원합니다.

{prayer}. 또한 {extra_prayer}.

때로는 {concern}이 있어서 마음이 무거울 때가 있습니다. {emotion} 주님께서는 우리의 길을 인도하시고 올바른 방향으로 이끄시는 분이심을 믿습니다.

주님의 지혜와 명철이 필요한 이 시간입니다. 우리의 생각과 계획이 주님의 뜻과 다를 수 있음을 인정하며, 주님의 완전하신 계획에 순복하는 마음을 주시옵소서.

{blessing}을 허락하시고, {extra_blessing}도 함께 누릴 수 있게 하여 주시옵소서.

어떤 결과가 주어지든지 그 모든 것이 합력하여 선을 이루시는 주님의 손길임을 믿습니다. 감사하는 마음과 찬양하는 영으로 이 시간들을 보낼 수 있게 하여 주시옵소서.

주변의 사랑하는 사람들과도 이 은혜를 함께 나누며, 서로 격려하고 기도할 수 있는 복된 공동체가 되게 하여 주시옵소서.

무엇보다 이 모든 과정을 통해 주님을 더욱 깊이 알아가고, 주님과의 관계가 더욱 친밀해지는 귀한 시간이 되기를 소망합니다. {closing}"""


def _pick_other(rng: random.Random, items: tuple[str, ...], taken: str) -> str:
    """Second pick from the entries not already used; single-entry lists reuse the only entry."""
    rest = [x for x in items if x != taken]
    return rng.choice(rest) if rest else taken


def compose_fallback_prayer(
    request: GenerationRequest,
    analysis: TopicAnalysis,
    template: PrayerTemplate,
    rng: random.Random,
) -> str:
    tone = request.effective_tone
    prayer = rng.choice(template.specific_prayers)
    blessing = rng.choice(template.blessings)
    concern = rng.choice(template.concerns)
    fields = {
        "opening": get_tone_openings()[tone],
        "closing": get_tone_closings()[tone],
        "context": prayer_context(analysis, has_situation=bool(request.situation)),
        "emotion": get_emotional_expression(analysis.emotional_context),
        "prayer": prayer,
        "blessing": blessing,
        "concern": concern,
    }
    if request.effective_length == "short":
        return SHORT_SKELETON.format(**fields)
    return LONG_SKELETON.format(
        extra_prayer=_pick_other(rng, template.specific_prayers, prayer),
        extra_blessing=_pick_other(rng, template.blessings, blessing),
        **fields,
    )
