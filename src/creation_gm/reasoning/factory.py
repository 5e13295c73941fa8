"""Provider factory — builds the ordered provider chain from configuration."""

from __future__ import annotations

import logging

from ..config import GameMasterConfig
from .providers.base import TextProvider

logger = logging.getLogger("creation-gm")


def create_providers(config: GameMasterConfig) -> list[TextProvider]:
    """Create the configured providers, Groq first and Gemini second.

    Providers without an API key are left out, so an empty list means the
    game master will answer every turn with the contextual fallback.
    """
    providers: list[TextProvider] = []

    groq = config.groq
    if groq.is_configured:
        from .providers.openai_compat import (
            GROQ_BASE_URL,
            GROQ_DEFAULT_MODEL,
            OpenAICompatProvider,
        )

        providers.append(
            OpenAICompatProvider(
                api_key=groq.api_key,
                model=groq.model or GROQ_DEFAULT_MODEL,
                base_url=groq.endpoint or GROQ_BASE_URL,
            )
        )

    gemini = config.gemini
    if gemini.is_configured:
        from .providers.google import GEMINI_DEFAULT_MODEL, GoogleProvider

        providers.append(
            GoogleProvider(
                api_key=gemini.api_key,
                model=gemini.model or GEMINI_DEFAULT_MODEL,
                backup_api_key=gemini.backup_api_key,
                base_url=gemini.endpoint,
            )
        )

    if not providers:
        logger.warning("No LLM provider configured (set GROQ_API_KEY or GEMINI_API_KEY)")
    return providers
