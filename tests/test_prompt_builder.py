from prayer_companion.schemas.prayer import GenerationRequest
from prayer_companion.services.ai_service import TransformedInput
from prayer_companion.services.learning_store import LearningData
from prayer_companion.services.prompt_builder import MAX_PATTERNS, build_prompt
from prayer_companion.services.template_catalog import get_template
from prayer_companion.services.topic_analyzer import analyze_topic


def prompt_for(request, learning=None, transformed=None):
    analysis = analyze_topic(request.title, request.situation)
    return build_prompt(request, analysis, get_template(analysis.main_topic), learning or LearningData(), transformed)


def test_prompt_carries_request_context():
    prompt = prompt_for(GenerationRequest(title="면접을 앞두고", category="간구", tone="formal", length="long"))
    assert "- 주제: 면접을 앞두고" in prompt
    assert "- 카테고리: 간구" in prompt
    assert "- 분석된 주제: 취업" in prompt
    assert "15-20문장" in prompt
    assert "정중하고 경건한" in prompt
    assert "기도문 구조 (기승전결):" in prompt
    assert prompt.rstrip().endswith("기도문만 작성하고 다른 설명은 포함하지 마세요.")


def test_defaults_are_short_and_warm():
    prompt = prompt_for(GenerationRequest(title="오늘 하루"))
    assert "6-8문장" in prompt
    assert "따뜻하고 위로가 되는" in prompt


def test_raw_situation_is_not_echoed():
    situation = "어머니가 서울대병원 암병동에 입원하셨어요"
    prompt = prompt_for(GenerationRequest(title="어머니 건강", situation=situation))
    assert situation not in prompt
    assert "서울대병원" not in prompt
    assert "주님 앞에 나아옵니다" in prompt


def test_pattern_sections_only_when_present():
    prompt = prompt_for(GenerationRequest(title="오늘 하루"))
    assert "과거 좋은 평가를 받은 패턴들" not in prompt
    assert "피해야 할 패턴들" not in prompt


def test_patterns_capped():
    learning = LearningData(
        positive_patterns=[f"좋은 패턴 {i}" for i in range(5)],
        avoid_patterns=[f"나쁜 패턴 {i}" for i in range(5)],
    )
    prompt = prompt_for(GenerationRequest(title="오늘 하루"), learning)
    assert "과거 좋은 평가를 받은 패턴들:" in prompt
    assert "피해야 할 패턴들:" in prompt
    assert "좋은 패턴 2" in prompt
    assert "좋은 패턴 3" not in prompt
    assert sum(1 for line in prompt.splitlines() if line.startswith("- 나쁜 패턴")) == MAX_PATTERNS


def test_transformed_input_replaces_title_and_context():
    transformed = TransformedInput(
        transformed_title="새로운 일터를 향한 소망",
        prayer_context="새 출발을 앞둔 마음",
        transformed_situation="연락처 010-1234-5678 로 소식을 기다리는 중",
    )
    prompt = prompt_for(GenerationRequest(title="취업", situation="연락 기다림"), transformed=transformed)
    assert "- 주제: 새로운 일터를 향한 소망" in prompt
    assert "- 배경: 새 출발을 앞둔 마음" in prompt
    assert "- 상황적 맥락:" in prompt
    assert "010-1234-5678" not in prompt


def test_prompt_is_deterministic():
    request = GenerationRequest(title="시험 걱정", situation="내일 시험")
    assert prompt_for(request) == prompt_for(request)
