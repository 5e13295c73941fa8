"""JSON extraction from LLM completions.

Every provider response goes through the same 3-stage pipeline:
  1. Strip markdown code fences (```json and ```), keeping the interior
  2. Take the first '{' through the LAST '}' (greedy); failing that, the
     first '[' through the last ']'
  3. Strict JSON parse of that span (no trailing-comma or truncation repair)

The greedy span assumes the model emits at most one top-level JSON value.
Two separate objects in one completion, or a stray brace in trailing prose,
produce a span that will not parse.
"""

from __future__ import annotations

import json
from typing import Any

from ...exceptions import ResponseParseError, StructureNotFoundError

_FENCE_JSON = "```json"
_FENCE = "```"


def strip_code_fences(text: str) -> str:
    """Remove every code-fence marker and trim surrounding whitespace."""
    return text.replace(_FENCE_JSON, "").replace(_FENCE, "").strip()


def _greedy_span(text: str, open_char: str, close_char: str) -> str | None:
    start = text.find(open_char)
    end = text.rfind(close_char)
    if start == -1 or end <= start:
        return None
    return text[start : end + 1]


def find_json_candidate(text: str) -> str:
    """Return the substring most likely to be the JSON payload.

    Objects win over arrays: the array span is only considered when the
    cleaned text holds no '{' ... '}' span at all.

    Raises StructureNotFoundError if neither span exists (this includes
    empty and whitespace-only input).
    """
    cleaned = strip_code_fences(text or "")
    candidate = _greedy_span(cleaned, "{", "}")
    if candidate is None:
        candidate = _greedy_span(cleaned, "[", "]")
    if candidate is None:
        raise StructureNotFoundError("No JSON object or array found in LLM response")
    return candidate


def extract_json(text: str) -> dict[str, Any] | list[Any]:
    """Extract and parse the JSON payload from an LLM response string.

    Raises StructureNotFoundError when there is nothing bracketed to parse,
    and ResponseParseError (a json.JSONDecodeError) when the span is not
    valid JSON or is nested deeper than the decoder can recurse.
    """
    candidate = find_json_candidate(text)
    try:
        return json.loads(candidate)
    except json.JSONDecodeError as e:
        raise ResponseParseError(e.msg, e.doc, e.pos) from e
    except RecursionError as e:
        raise ResponseParseError("JSON nesting too deep", candidate, 0) from e
