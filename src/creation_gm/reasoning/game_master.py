"""Game master: runs one game turn through the configured provider chain."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable

from ..config import GameMasterConfig
from .models import PlayerStats, WorldState
from .prompts import build_system_prompt
from .providers.base import TextProvider
from .response import (
    ContextualFallback,
    build_fallback,
    is_valid_game_response,
    parse_game_response,
)

logger = logging.getLogger("creation-gm")

# Default maximum time to wait for an LLM API call (seconds).
# Overridden by config.llm_timeout_seconds at runtime.
LLM_CALL_TIMEOUT = 10.0


class GameMaster:
    """Multi-provider game turn orchestrator.

    Providers are tried in order; the first one that returns non-blank text
    wins, and that text goes through ``parse_game_response``. When none of
    them produce text the turn is answered with the contextual fallback for
    the player's prompt.
    """

    def __init__(
        self,
        providers: list[TextProvider] | None = None,
        config: GameMasterConfig | None = None,
    ):
        self._providers = list(providers or [])
        self._config = config or GameMasterConfig()

    @property
    def has_provider(self) -> bool:
        return bool(self._providers)

    @property
    def provider_info(self) -> dict:
        if not self._providers:
            return {"configured": False}
        return {
            "configured": True,
            "providers": [
                {"provider": p.provider_name, "model": p.model_name}
                for p in self._providers
            ],
        }

    async def warmup(self) -> None:
        """Pre-establish API connections to reduce first-call latency."""
        for provider in self._providers:
            await provider.warmup()

    async def _complete(self, system_prompt: str, user_prompt: str) -> str | None:
        timeout = getattr(self._config, "llm_timeout_seconds", LLM_CALL_TIMEOUT)
        for provider in self._providers:
            try:
                text = await asyncio.wait_for(
                    provider.complete(system_prompt, user_prompt),
                    timeout=timeout,
                )
            except asyncio.TimeoutError:
                logger.warning(
                    "%s call timed out after %.0fs", provider.provider_name, timeout
                )
                continue
            except Exception as e:
                logger.warning("%s call failed: %s", provider.provider_name, e)
                continue
            if text and text.strip():
                return text
            logger.warning("%s returned an empty response", provider.provider_name)
        return None

    async def take_turn(
        self,
        user_prompt: str,
        world: WorldState | None = None,
        player: PlayerStats | None = None,
    ) -> dict[str, Any]:
        """Play one turn and return a GameResponse. Never raises."""
        system_prompt = build_system_prompt(world or WorldState(), player or PlayerStats())
        text = await self._complete(system_prompt, user_prompt)
        if text is None:
            logger.info("No provider produced a response, using contextual fallback")
            return ContextualFallback(user_prompt).build()
        try:
            return parse_game_response(text)
        except Exception as e:
            logger.error("Could not recover a GameResponse: %s", e)
            return build_fallback()

    async def take_turn_with_retry(
        self,
        user_prompt: str,
        world: WorldState | None = None,
        player: PlayerStats | None = None,
    ) -> dict[str, Any]:
        """``take_turn`` wrapped in the configured retry policy."""
        return await call_with_retry(
            self.take_turn,
            user_prompt,
            world,
            player,
            max_retries=self._config.max_retries,
            base_delay=self._config.retry_base_delay,
        )


async def call_with_retry(
    call: Callable[..., Awaitable[Any]],
    *args: Any,
    max_retries: int = 3,
    base_delay: float = 1.0,
) -> dict[str, Any]:
    """Await ``call(*args)`` until it yields a valid GameResponse.

    Waits ``base_delay * 2 ** (attempt - 1)`` seconds between attempts and
    returns the plain fallback once every attempt has failed.
    """
    for attempt in range(1, max_retries + 1):
        try:
            logger.debug("LLM call attempt %d/%d", attempt, max_retries)
            response = await call(*args)
            if is_valid_game_response(response):
                return response
            logger.warning("Attempt %d returned an invalid GameResponse", attempt)
        except Exception as e:
            logger.warning("Attempt %d failed: %s", attempt, e)

        if attempt < max_retries:
            delay = base_delay * 2 ** (attempt - 1)
            logger.info("Retrying in %.1fs", delay)
            await asyncio.sleep(delay)

    logger.error("All %d LLM call attempts failed, using fallback", max_retries)
    return build_fallback()
