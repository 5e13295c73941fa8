"""GameResponse recovery: normalize LLM payloads and build fallbacks.

``parse_game_response`` is the one entry point every caller uses. It never
raises: text that holds no JSON, or JSON that does not parse, turns into the
plain continue/retry fallback; missing or mistyped fields in an otherwise
valid object are repaired one by one.

A GameResponse is a plain dict with these keys::

    message          str, never empty
    choices          list of {"text", "type", "effects": [{"stat", "value"}]}
    playerUpdates    list
    worldUpdates     dict
    achievements     list[str]
    createdElements  list[str]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from ..exceptions import ResponseParseError, StructureNotFoundError
from .providers.json_extract import extract_json

logger = logging.getLogger("creation-gm")

DEFAULT_MESSAGE = "창조의 힘이 당신 안에서 꿈틀거립니다. 다음 단계를 선택해주세요."
FALLBACK_MESSAGE = (
    "AI가 응답을 생성하는 중 문제가 발생했습니다. 창조의 여정을 계속하시겠습니까?"
)
CONTEXTUAL_BASE_MESSAGE = (
    "🌟 창조의 힘이 당신 안에서 꿈틀거립니다. 어떤 길을 선택하시겠습니까?"
)

_LIST_FIELDS = ("playerUpdates", "choices", "achievements", "createdElements")

# Checked in order; only the first matching theme contributes a prefix.
_CONTEXT_PREFIXES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("창조", "만들", "생성"), "🎨 창조의 에너지가 흘러넘칩니다. "),
    (("파괴", "없애", "부수"), "⚡ 변화의 바람이 불어옵니다. "),
    (("도움", "구원", "치유"), "🤝 자비로운 마음이 빛을 발합니다. "),
    (("탐험", "발견", "찾"), "🔍 호기심이 새로운 길을 열어줍니다. "),
)


def _empty_response(message: str, choices: list[dict[str, Any]]) -> dict[str, Any]:
    return {
        "message": message,
        "choices": choices,
        "playerUpdates": [],
        "worldUpdates": {},
        "achievements": [],
        "createdElements": [],
    }


@dataclass(frozen=True)
class PlainFallback:
    """Used when the model answered but nothing usable could be parsed."""

    def build(self) -> dict[str, Any]:
        return _empty_response(
            FALLBACK_MESSAGE,
            [
                {"text": "계속 진행한다", "type": "continue", "effects": []},
                {"text": "다시 시도한다", "type": "retry", "effects": []},
            ],
        )


@dataclass(frozen=True)
class ContextualFallback:
    """Used when no provider produced any text for the player's prompt.

    The message opens with a thematic prefix picked from keywords in
    ``prompt`` (creation, change, compassion, curiosity, in that priority).
    """

    prompt: str = ""

    @property
    def prefix(self) -> str:
        prompt = self.prompt or ""
        for keywords, prefix in _CONTEXT_PREFIXES:
            if any(keyword in prompt for keyword in keywords):
                return prefix
        return ""

    def build(self) -> dict[str, Any]:
        return _empty_response(
            self.prefix + CONTEXTUAL_BASE_MESSAGE,
            [
                {
                    "text": "지혜롭게 행동한다",
                    "type": "wisdom",
                    "effects": [{"stat": "wisdom", "value": 5}],
                },
                {
                    "text": "창의적인 해결책을 찾는다",
                    "type": "creative",
                    "effects": [{"stat": "creativity", "value": 5}],
                },
            ],
        )


Fallback = PlainFallback | ContextualFallback


def build_fallback(variant: Fallback | None = None) -> dict[str, Any]:
    """Build a fresh fallback GameResponse. Defaults to the plain variant."""
    return (variant or PlainFallback()).build()


def normalize_game_response(payload: dict[str, Any]) -> dict[str, Any]:
    """Default each missing or mistyped GameResponse field independently.

    ``message`` and ``worldUpdates`` are only checked for truthiness, so a
    non-string message survives unchanged. Unknown keys are kept.
    """
    result = dict(payload)

    if not result.get("message"):
        logger.warning("LLM response has no message field, using default message")
        result["message"] = DEFAULT_MESSAGE

    for field in _LIST_FIELDS:
        if not isinstance(result.get(field), list):
            result[field] = []

    if not result.get("worldUpdates"):
        result["worldUpdates"] = {}

    return result


def parse_game_response(text: str | None) -> dict[str, Any]:
    """Turn a raw LLM completion into a GameResponse. Never raises."""
    try:
        payload = extract_json(text or "")
    except StructureNotFoundError:
        logger.warning("No JSON structure found in LLM response: %r", text)
        return build_fallback()
    except ResponseParseError as e:
        logger.warning("LLM response JSON parse failed (%s). Original: %r", e, text)
        return build_fallback()

    if not isinstance(payload, dict):
        logger.warning(
            "LLM response is a JSON %s, not an object. Original: %r",
            type(payload).__name__,
            text,
        )
        return build_fallback()

    return normalize_game_response(payload)


def is_valid_game_response(response: Any) -> bool:
    """Check the fields the UI cannot render without."""
    if not isinstance(response, dict):
        return False
    for field in ("message", "choices", "playerUpdates"):
        if field not in response:
            logger.warning("GameResponse is missing required field '%s'", field)
            return False
    if not isinstance(response["message"], str):
        logger.warning("GameResponse message is not a string")
        return False
    if not isinstance(response["choices"], list):
        logger.warning("GameResponse choices is not a list")
        return False
    if not isinstance(response["playerUpdates"], list):
        logger.warning("GameResponse playerUpdates is not a list")
        return False
    return True
