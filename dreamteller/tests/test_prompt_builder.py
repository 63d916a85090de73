from dreamteller.llm.schemas.dream import DreamInput
from dreamteller.llm.services.prompt_builder import (
    DISCLAIMER,
    MISSING_FIELD_PLACEHOLDER,
    build_prompt,
)


def test_prompt_embeds_fields_verbatim():
    dream = DreamInput(
        story="높은 탑에서 떨어지는 꿈",
        symbols="검은 고양이, {열쇠}",
        emotion="불안하지만 홀가분함",
    )

    prompt = build_prompt(dream)

    assert "꿈의 전체적인 줄거리: 높은 탑에서 떨어지는 꿈" in prompt
    assert "꿈에 등장한 상징적인 것들: 검은 고양이, {열쇠}" in prompt
    assert "꿈에서 느낀 감정 & 현재 상황: 불안하지만 홀가분함" in prompt
    assert MISSING_FIELD_PLACEHOLDER not in prompt


def test_missing_fields_use_placeholder():
    prompt = build_prompt(DreamInput(symbols="뱀"))

    assert f"꿈의 전체적인 줄거리: {MISSING_FIELD_PLACEHOLDER}" in prompt
    assert "꿈에 등장한 상징적인 것들: 뱀" in prompt
    assert f"꿈에서 느낀 감정 & 현재 상황: {MISSING_FIELD_PLACEHOLDER}" in prompt


def test_prompt_is_deterministic():
    dream = DreamInput(story="바다", symbols="", emotion=None)

    assert build_prompt(dream) == build_prompt(dream.model_copy())


def test_prompt_carries_format_contract():
    prompt = build_prompt(DreamInput(story="x"))

    assert "제1해석" in prompt
    assert "제2해석" in prompt
    assert "미래의 속삭임" in prompt
    assert DISCLAIMER in prompt
    assert "■" in prompt
    assert "경고몽" in prompt
    assert prompt.rstrip().endswith("}")
    assert '"psychology": "제1해석 전체 내용"' in prompt
    assert '"prophecy": "제2해석 전체 내용"' in prompt
