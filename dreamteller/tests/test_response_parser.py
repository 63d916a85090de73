import pytest

from dreamteller.llm.services.response_parser import (
    UNSPLITTABLE_PROPHECY,
    extract_json_candidate,
    parse_response,
)


def test_fenced_json_block_is_decoded():
    raw = '```json\n{"psychology":"A","prophecy":"B"}\n```'

    result = parse_response(raw)

    assert result.psychology == "A"
    assert result.prophecy == "B"


def test_fenced_block_wins_over_surrounding_braces():
    raw = (
        'Preface {not json}\n'
        '```json\n{"psychology": "inner", "prophecy": "fenced"}\n```\n'
        "trailing }"
    )

    assert extract_json_candidate(raw) == '{"psychology": "inner", "prophecy": "fenced"}'
    assert parse_response(raw).prophecy == "fenced"


def test_brace_span_is_used_when_no_fence():
    raw = '여기 결과입니다:\n{"psychology": "■ 심리", "prophecy": "■ **길몽**"}\n감사합니다.'

    result = parse_response(raw)

    assert result.psychology == "■ 심리"
    assert result.prophecy == "■ **길몽**"


def test_brace_span_runs_from_first_open_to_last_close():
    raw = 'a {"x": 1} b {"y": 2} c'

    assert extract_json_candidate(raw) == '{"x": 1} b {"y": 2}'


def test_extra_keys_pass_through_and_missing_keys_are_empty():
    result = parse_response('{"psychology": "only this", "mood": "calm"}')

    assert result.psychology == "only this"
    assert result.prophecy == ""
    assert result.model_dump()["mood"] == "calm"


def test_non_string_values_are_rendered_as_json_text():
    result = parse_response('{"psychology": ["a", "b"], "prophecy": 7}')

    assert result.psychology == '["a", "b"]'
    assert result.prophecy == "7"


def test_invalid_json_splits_at_second_interpretation_marker():
    result = parse_response("some text 제2해석 more text")

    assert result.psychology == "some text"
    assert result.prophecy == "제2해석 more text"


def test_invalid_json_splits_at_prophecy_title():
    raw = "■ 심리 분석 내용\n\n미래의 속삭임: 뱀이 예고하는 운명의 길\n■ 길몽"

    result = parse_response(raw)

    assert result.psychology == "■ 심리 분석 내용"
    assert result.prophecy.startswith("미래의 속삭임")


def test_broken_json_with_marker_falls_back_to_split():
    raw = '{"psychology": "제1해석 내용", "prophecy": "제2해석 내용"'

    result = parse_response(raw)

    assert result.psychology == '{"psychology": "제1해석 내용", "prophecy": "'
    assert result.prophecy == '제2해석 내용"'


def test_marker_at_start_is_not_a_split_point():
    raw = "제2해석 only"

    result = parse_response(raw)

    assert result.psychology == raw
    assert result.prophecy == UNSPLITTABLE_PROPHECY


def test_plain_text_without_marker_keeps_everything_as_psychology():
    result = parse_response("just plain text")

    assert result.psychology == "just plain text"
    assert result.prophecy == "예언적 해석을 분리할 수 없습니다."


@pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
def test_non_standard_constants_fall_back_to_text(constant):
    raw = f'{{"psychology":"a","prophecy":"b","x":{constant}}}'

    result = parse_response(raw)

    assert result.psychology == raw
    assert result.prophecy == UNSPLITTABLE_PROPHECY
    assert "x" not in result.model_dump()


def test_non_standard_constant_with_marker_is_split():
    raw = '{"psychology":"심리","prophecy":"제2해석 예언","score":NaN}'

    result = parse_response(raw)

    assert result.psychology == '{"psychology":"심리","prophecy":"'
    assert result.prophecy == '제2해석 예언","score":NaN}'


def test_json_scalar_is_not_treated_as_result():
    result = parse_response('"just a string"')

    assert result.psychology == '"just a string"'
    assert result.prophecy == UNSPLITTABLE_PROPHECY


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "   ",
        "{",
        "}{",
        "```json\n```",
        "```json\nnot json\n```",
        "[1, 2, 3]",
        "null",
    ],
)
def test_parser_never_raises(raw):
    result = parse_response(raw)

    assert isinstance(result.psychology, str)
    assert isinstance(result.prophecy, str)
