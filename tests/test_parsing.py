"""Tests for normalization of model output."""

import pytest

from relnet.llms.errors import MalformedResponseError
from relnet.llms.parsing import (
    EMPTY_SUMMARY,
    normalize_analysis,
    normalize_severity,
    parse_analysis_response,
    strip_code_fence,
)
from relnet.llms.schemas import AIAnalysisResult


def test_out_of_domain_values_are_normalized() -> None:
    raw = '{"eventType":"Bogus","impact":"Positive","severity":"15","summary":""}'

    assert parse_analysis_response(raw) == AIAnalysisResult(
        event_type="Meeting", impact="Positive", severity=10, summary=EMPTY_SUMMARY
    )


def test_valid_response_is_kept() -> None:
    raw = (
        '{"eventType": "Betrayal", "impact": "Negative", "severity": 8, '
        '"summary": "Trust broken."}'
    )

    assert parse_analysis_response(raw) == AIAnalysisResult(
        event_type="Betrayal", impact="Negative", severity=8, summary="Trust broken."
    )


@pytest.mark.parametrize(
    "raw",
    [
        '```json\n{"impact": "Mixed"}\n```',
        '```\n{"impact": "Mixed"}\n```',
        '  ```json{"impact": "Mixed"}```  ',
    ],
)
def test_code_fences_are_stripped(raw: str) -> None:
    assert parse_analysis_response(raw).impact == "Mixed"


def test_strip_code_fence_leaves_plain_text() -> None:
    assert strip_code_fence(' {"a": 1} ') == '{"a": 1}'


def test_invalid_json_is_malformed() -> None:
    with pytest.raises(MalformedResponseError):
        parse_analysis_response("The event looks like a conflict.")


def test_non_object_json_gets_defaults() -> None:
    result = parse_analysis_response("[1, 2, 3]")

    assert result == AIAnalysisResult(
        event_type="Meeting", impact="Neutral", severity=5, summary=EMPTY_SUMMARY
    )


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, 5),
        ("high", 5),
        ("1_0", 5),
        (True, 5),
        ([], 5),
        (7, 7),
        ("3", 3),
        (-4, 1),
        (0, 5),
        ("0", 5),
        (0.0, 5),
        (99, 10),
        (2.5, 3),
        (6.4, 6),
    ],
)
def test_normalize_severity(value: object, expected: int) -> None:
    assert normalize_severity(value) == expected


def test_non_string_summary_is_stringified() -> None:
    result = normalize_analysis({"summary": 42})

    assert result.summary == "42"


def test_zero_severity_defaults_to_five() -> None:
    result = parse_analysis_response('{"eventType":"Meeting","impact":"Neutral","severity":0}')

    assert result.severity == 5
