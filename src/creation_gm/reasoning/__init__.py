"""LLM response recovery and game-turn orchestration."""

from .game_master import GameMaster, call_with_retry
from .response import (
    ContextualFallback,
    Fallback,
    PlainFallback,
    build_fallback,
    is_valid_game_response,
    normalize_game_response,
    parse_game_response,
)

__all__ = [
    "GameMaster",
    "call_with_retry",
    "ContextualFallback",
    "Fallback",
    "PlainFallback",
    "build_fallback",
    "is_valid_game_response",
    "normalize_game_response",
    "parse_game_response",
]
