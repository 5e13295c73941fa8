"""Text provider abstraction — all LLM chat providers implement this interface."""

from __future__ import annotations

from abc import ABC, abstractmethod


class TextProvider(ABC):
    """Abstract interface for chat-completion LLM providers."""

    @abstractmethod
    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        """Send a system + user prompt and get the raw completion text."""
        ...

    async def warmup(self) -> None:
        """Pre-establish HTTP connections. Override in subclasses for real warmup."""

    @property
    @abstractmethod
    def provider_name(self) -> str: ...

    @property
    @abstractmethod
    def model_name(self) -> str: ...
