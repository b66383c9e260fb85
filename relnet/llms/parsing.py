"""Parsing and normalization of model output into an AIAnalysisResult."""

import json
import math
import re
from typing import Any

from relnet.domain.entities import EVENT_TYPES, IMPACTS
from relnet.llms.errors import MalformedResponseError
from relnet.llms.schemas import AIAnalysisResult

DEFAULT_EVENT_TYPE = "Meeting"
DEFAULT_IMPACT = "Neutral"
DEFAULT_SEVERITY = 5
MIN_SEVERITY = 1
MAX_SEVERITY = 10
EMPTY_SUMMARY = "No analysis available."

_FENCE_START = re.compile(r"^```(?:json)?\n?")
_FENCE_END = re.compile(r"\n?```$")


def strip_code_fence(raw: str) -> str:
    """Remove a surrounding markdown code fence, if any."""
    cleaned = raw.strip()
    if cleaned.startswith("```"):
        cleaned = _FENCE_END.sub("", _FENCE_START.sub("", cleaned))
    return cleaned


def parse_analysis_response(raw: str) -> AIAnalysisResult:
    """Parse raw model text into a normalized analysis result.

    Raises:
        MalformedResponseError: If the text is not valid JSON
    """
    try:
        parsed = json.loads(strip_code_fence(raw))
    except json.JSONDecodeError as e:
        raise MalformedResponseError() from e

    return normalize_analysis(parsed if isinstance(parsed, dict) else {})


def normalize_analysis(data: dict[str, Any]) -> AIAnalysisResult:
    """Coerce arbitrary parsed JSON into a valid result. Never fails."""
    event_type = _as_text(data.get("eventType"))
    impact = _as_text(data.get("impact"))
    summary = _as_text(data.get("summary"))

    return AIAnalysisResult(
        event_type=event_type if event_type in EVENT_TYPES else DEFAULT_EVENT_TYPE,
        impact=impact if impact in IMPACTS else DEFAULT_IMPACT,
        severity=normalize_severity(data.get("severity")),
        summary=summary or EMPTY_SUMMARY,
    )


def normalize_severity(value: Any) -> int:
    """Numeric severity clamped to 1-10 and rounded half up; 5 when zero or not numeric."""
    severity = _as_number(value)
    if not severity:
        severity = DEFAULT_SEVERITY
    severity = max(MIN_SEVERITY, min(MAX_SEVERITY, severity))
    return math.floor(severity + 0.5)


def _as_text(value: Any) -> str:
    if not value:
        return ""
    return value if isinstance(value, str) else json.dumps(value)


def _as_number(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str) and "_" not in value:
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None
