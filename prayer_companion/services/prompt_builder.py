"""
Prompt for the prayer LLM call. Pure string composition, no randomness.
Section order: role preamble, request context, writing principles, length/tone, four-part structure,
learned patterns (only when present), output instruction.
The raw situation text is never placed in the prompt by the offline transform; only the phrase
derived from topic analysis is. An LLM-rephrased situation may appear when the transform step ran.
"""
from prayer_companion.schemas.prayer import GenerationRequest
from prayer_companion.services.ai_security import filter_personal_data
from prayer_companion.services.ai_service import TransformedInput
from prayer_companion.services.learning_store import LearningData
from prayer_companion.services.template_catalog import PrayerTemplate
from prayer_companion.services.topic_analyzer import TopicAnalysis, prayer_context

MAX_PATTERNS = 3

LENGTH_GUIDE = {
    "short": "6-8문장의 간결하면서도 충분한",
    "long": "15-20문장의 깊이 있고 상세한",
}

TONE_GUIDE = {
    "formal": "정중하고 경건한 어조로, 격식을 갖춘",
    "casual": "친근하고 편안한 어조로, 일상적인 언어를 사용한",
    "warm": "따뜻하고 위로가 되는 어조로, 부드럽고 포근한",
}

PREAMBLE = "당신은 20년 경력의 기독교 목회자로서, 개인의 마음에 깊이 와닿는 기도문을 작성하는 전문가입니다."

PRINCIPLES = """중요한 작성 원칙:
1. 사용자의 입력 내용을 그대로 반복하지 말고, 다른 표현과 문장으로 자연스럽게 풀어서 작성
2. 분석된 주제와 감정 상태에 맞는 구체적이고 적절한 기도 내용 작성
3. 실제 목회자가 성도와 함께 기도하는 듯한 자연스러운 흐름
4. 개인적이고 구체적인 언어 사용 (추상적이지 않게)
5. 감정적 공감과 영적 위로가 담긴 표현
6. 성경적 근거가 자연스럽게 녹아든 내용
7. 상황 설명을 그대로 인용하지 말고 기도문에 어울리는 표현으로 재해석"""

STRUCTURE = """기도문 구조 (기승전결):
- 기(起): 하나님께 나아가는 마음, 현재 상황 인정
- 승(承): 구체적인 고민이나 감정 표현, 하나님과의 관계 확인
- 전(轉): 하나님의 은혜와 도움을 구하는 간구
- 결(結): 감사와 믿음의 고백, 결단"""

OUTPUT_INSTRUCTION = "기도문만 작성하고 다른 설명은 포함하지 마세요."


def offline_transform(request: GenerationRequest, analysis: TopicAnalysis) -> TransformedInput:
    """Title kept, situation replaced by the derived context phrase."""
    return TransformedInput(
        transformed_title=request.title,
        prayer_context=prayer_context(analysis, has_situation=bool(request.situation)),
        transformed_situation=None,
    )


def _bullets(items: list[str]) -> str:
    return "\n".join(f"- {item}" for item in items[:MAX_PATTERNS])


def build_prompt(
    request: GenerationRequest,
    analysis: TopicAnalysis,
    template: PrayerTemplate,
    learning_data: LearningData,
    transformed: TransformedInput | None = None,
) -> str:
    offline = offline_transform(request, analysis)
    t = transformed or offline

    context = [
        "기도문 작성 요청:",
        f"- 주제: {filter_personal_data(t.transformed_title)}",
        f"- 배경: {t.prayer_context or offline.prayer_context}",
    ]
    if t.transformed_situation:
        context.append(f"- 상황적 맥락: {filter_personal_data(t.transformed_situation)}")
    if request.category:
        context.append(f"- 카테고리: {request.category}")
    context.append(f"- 분석된 주제: {analysis.main_topic.value}")
    context.append(f"- 감정적 상태: {analysis.emotional_context.value}")
    if analysis.sub_topics:
        context.append(f"- 세부 관심사: {', '.join(analysis.sub_topics)}")
    if analysis.specific_concerns:
        context.append(f"- 구체적 걱정: {', '.join(analysis.specific_concerns)}")
    context.append(f"- 공감할 마음: {', '.join(template.concerns)}")

    constraints = "\n".join([
        "작성 조건:",
        f"- {LENGTH_GUIDE[request.effective_length]} 기도문으로 작성",
        f"- {TONE_GUIDE[request.effective_tone]} 표현 사용",
        '- "하나님 아버지" 또는 "사랑하는 주님"으로 자연스럽게 시작',
        '- "예수님의 이름으로 기도드립니다. 아멘"으로 마무리',
    ])

    sections = [PREAMBLE, "\n".join(context), PRINCIPLES, constraints, STRUCTURE]
    if learning_data.positive_patterns:
        sections.append("과거 좋은 평가를 받은 패턴들:\n" + _bullets(learning_data.positive_patterns))
    if learning_data.avoid_patterns:
        sections.append("피해야 할 패턴들:\n" + _bullets(learning_data.avoid_patterns))
    sections.append(OUTPUT_INSTRUCTION)
    return "\n\n".join(sections)
