"""
Keyword-based analysis of a prayer title + situation.
- Main topic: first matching keyword set wins, in TOPIC_RULES order; no match -> 일반.
- Emotion, urgency and concerns are independent passes over the same text and may disagree with the topic.
Keyword tables are module-level and read-only.
"""
import enum
from dataclasses import dataclass, field


class MainTopic(str, enum.Enum):
    HEALTH = "건강"
    EMPLOYMENT = "취업"
    FAMILY = "가족"
    STUDY = "학업"
    MARRIAGE = "결혼"
    GRATITUDE = "감사"
    GENERAL = "일반"


class Emotion(str, enum.Enum):
    ANXIOUS = "불안"
    SAD = "슬픔"
    GRATEFUL = "감사"
    CALM = "평온"


class Urgency(str, enum.Enum):
    NORMAL = "보통"
    HIGH = "높음"


CONCERN_FINANCIAL = "경제적 어려움"
CONCERN_RELATIONAL = "인간관계"
CONCERN_FUTURE = "미래에 대한 불안"

GRATITUDE_KEYWORDS = ("감사", "고마", "축복", "은혜", "기쁨", "행복")

# (topic, topic keywords, [(subtag, trigger keywords), ...])
TOPIC_RULES: tuple[tuple[MainTopic, tuple[str, ...], tuple[tuple[str, tuple[str, ...]], ...]], ...] = (
    (
        MainTopic.HEALTH,
        ("건강", "병", "치료", "회복", "아픈", "몸", "마음", "정신", "우울", "스트레스"),
        (("정신건강", ("정신", "우울", "스트레스")), ("치료과정", ("치료", "병원")), ("회복기원", ("회복",))),
    ),
    (
        MainTopic.EMPLOYMENT,
        ("취업", "직장", "일자리", "면접", "회사", "사업", "승진", "이직"),
        (("면접", ("면접",)), ("사업", ("사업",)), ("경력발전", ("승진", "이직"))),
    ),
    (
        MainTopic.FAMILY,
        ("가족", "부모", "자녀", "아이", "형제", "자매", "남편", "아내", "시부모", "처가"),
        (("자녀문제", ("자녀", "아이")), ("부모님", ("부모",)), ("가족갈등", ("갈등", "싸움"))),
    ),
    (
        MainTopic.STUDY,
        ("시험", "공부", "학업", "입시", "대학", "학교", "성적", "졸업", "진학"),
        (("진학", ("입시", "대학")), ("시험", ("시험",))),
    ),
    (
        MainTopic.MARRIAGE,
        ("결혼", "연애", "배우자", "만남", "데이트", "약혼", "신혼"),
        (("만남", ("만남",)), ("결혼준비", ("준비",))),
    ),
    (MainTopic.GRATITUDE, GRATITUDE_KEYWORDS, ()),
)

# Checked in order; first hit wins
EMOTION_RULES: tuple[tuple[Emotion, tuple[str, ...]], ...] = (
    (Emotion.ANXIOUS, ("불안", "걱정", "두려", "무서", "염려", "근심")),
    (Emotion.SAD, ("슬픈", "힘든", "어려운", "괴로운", "고통", "아픈")),
    (Emotion.GRATEFUL, GRATITUDE_KEYWORDS),
)

URGENT_KEYWORDS = ("급히", "빨리", "시급", "긴급", "당장", "즉시")

CONCERN_RULES: tuple[tuple[str, tuple[str, ...]], ...] = (
    (CONCERN_FINANCIAL, ("돈", "경제", "재정")),
    (CONCERN_RELATIONAL, ("관계", "소통")),
    (CONCERN_FUTURE, ("미래", "앞으로")),
)


@dataclass(frozen=True)
class TopicAnalysis:
    main_topic: MainTopic = MainTopic.GENERAL
    sub_topics: tuple[str, ...] = field(default_factory=tuple)
    emotional_context: Emotion = Emotion.CALM
    urgency_level: Urgency = Urgency.NORMAL
    specific_concerns: tuple[str, ...] = field(default_factory=tuple)


def _contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    return any(k in text for k in keywords)


def analyze_topic(title: str, situation: str | None = None) -> TopicAnalysis:
    text = f"{title.lower()} {(situation or '').lower()}"

    main_topic = MainTopic.GENERAL
    sub_topics: list[str] = []
    for topic, keywords, subtags in TOPIC_RULES:
        if _contains_any(text, keywords):
            main_topic = topic
            sub_topics = [tag for tag, triggers in subtags if _contains_any(text, triggers)]
            break

    emotion = next((e for e, keywords in EMOTION_RULES if _contains_any(text, keywords)), Emotion.CALM)
    urgency = Urgency.HIGH if _contains_any(text, URGENT_KEYWORDS) else Urgency.NORMAL
    concerns = tuple(tag for tag, keywords in CONCERN_RULES if _contains_any(text, keywords))

    return TopicAnalysis(
        main_topic=main_topic,
        sub_topics=tuple(sub_topics),
        emotional_context=emotion,
        urgency_level=urgency,
        specific_concerns=concerns,
    )


def situation_to_context(analysis: TopicAnalysis) -> str:
    """Abstract phrase standing in for the user's situation. Never quotes the situation text."""
    topic = analysis.main_topic
    if topic is MainTopic.HEALTH:
        if analysis.emotional_context is Emotion.ANXIOUS:
            context = "몸과 마음의 건강에 대한 염려가 있는 상황에서"
        else:
            context = "건강에 관한 절실한 마음을 갖고"
    elif topic is MainTopic.EMPLOYMENT:
        if analysis.urgency_level is Urgency.HIGH:
            context = "진로에 대한 간절한 소망과 함께"
        else:
            context = "앞으로의 일터와 삶의 방향에 대해"
    elif topic is MainTopic.FAMILY:
        if CONCERN_RELATIONAL in analysis.specific_concerns:
            context = "가족과의 관계에서 지혜가 필요한 때에"
        else:
            context = "사랑하는 가족들을 위한 마음으로"
    elif topic is MainTopic.STUDY:
        if analysis.emotional_context is Emotion.ANXIOUS:
            context = "학업에 대한 부담과 걱정을 안고"
        else:
            context = "배움의 길에서 최선을 다하고자 하는 마음으로"
    elif topic is MainTopic.MARRIAGE:
        context = "인생의 동반자에 대한 소망을 품고"
    elif topic is MainTopic.GRATITUDE:
        context = "받은 은혜와 축복에 대한 감사한 마음으로"
    else:
        context = "이 마음의 소원을 품고"
    return f"{context} 주님 앞에 나아옵니다"


def prayer_context(analysis: TopicAnalysis, has_situation: bool) -> str:
    if has_situation:
        return situation_to_context(analysis)
    return f"{analysis.main_topic.value}에 관한 마음을 품고 주님께 간절히 기도드립니다"
