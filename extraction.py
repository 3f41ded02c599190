# extraction.py - pull a JSON value out of loosely formatted model output

import json
import re
from dataclasses import dataclass
from typing import Any, Optional

# Greedy: first "{" through the last "}".
BRACKET_SPAN = re.compile(r"\{[\s\S]*\}")
FENCE_OPEN = re.compile(r"^```(?:json)?\s*")
FENCE_CLOSE = re.compile(r"\s*```\s*\Z")


@dataclass(frozen=True)
class ExtractionResult:
    value: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _parse(text: str) -> ExtractionResult:
    try:
        return ExtractionResult(value=json.loads(text))
    except json.JSONDecodeError as e:
        return ExtractionResult(error=str(e))


def extract_bracket_span(raw: str) -> ExtractionResult:
    """Parse the substring from the first '{' to the last '}' in `raw`."""
    match = BRACKET_SPAN.search(raw)
    if not match:
        return ExtractionResult(error="no JSON object found")
    return _parse(match.group(0))


def strip_code_fence(raw: str) -> str:
    """Remove a leading ``` / ```json marker and a trailing ``` marker."""
    return FENCE_CLOSE.sub("", FENCE_OPEN.sub("", raw))


def extract_fenced(raw: str) -> ExtractionResult:
    return _parse(strip_code_fence(raw))


def extract_json(raw: str) -> ExtractionResult:
    """
    Two-stage extraction: bracket span first, then fence stripping.
    The error of a failed result names why each stage failed.
    """
    bracket = extract_bracket_span(raw)
    if bracket.ok:
        return bracket

    fenced = extract_fenced(raw)
    if fenced.ok:
        return fenced

    return ExtractionResult(error=f"bracket span: {bracket.error}; code fence: {fenced.error}")
