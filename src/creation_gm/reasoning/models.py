"""Pydantic models for game state and typed views of GameResponse choices."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger("creation-gm")


class ChoiceEffect(BaseModel):
    stat: str  # "wisdom" | "power" | "compassion" | "creativity"
    value: float


class Choice(BaseModel):
    text: str
    type: str = ""  # Free-form tag: "creation", "continue", "retry", ...
    description: str = ""
    effects: list[ChoiceEffect] = Field(default_factory=list)


class PlayerStats(BaseModel):
    wisdom: int = 0
    power: int = 0
    compassion: int = 0
    creativity: int = 0


class WorldState(BaseModel):
    stage: str = "beginning"  # "beginning" | "creation" | "development" | "advanced"
    environment: str = "void"
    population: int = 0
    elements: list[str] = Field(default_factory=list)


def choices_from_response(response: dict[str, Any]) -> list[Choice]:
    """Convert the raw choices of a GameResponse into Choice models.

    The response pipeline does not validate choice shapes, so entries that
    don't fit (missing text, effects without a numeric value, ...) are
    skipped here instead of failing the whole turn.
    """
    choices: list[Choice] = []
    for raw in response.get("choices") or []:
        if not isinstance(raw, dict):
            logger.debug("Skipping non-object choice: %r", raw)
            continue
        try:
            choices.append(Choice(**raw))
        except ValidationError as e:
            logger.debug("Skipping malformed choice %r: %s", raw, e)
    return choices
