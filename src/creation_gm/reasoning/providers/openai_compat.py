"""OpenAI-compatible chat provider.

Covers: Groq (the default endpoint), OpenAI, Together, DeepSeek, and any
service that implements the OpenAI chat completions API.
"""

from __future__ import annotations

from ...exceptions import ProviderAuthError, ProviderError, ProviderRateLimitError
from .base import TextProvider

GROQ_BASE_URL = "https://api.groq.com/openai/v1"
GROQ_DEFAULT_MODEL = "llama3-70b-8192"


class OpenAICompatProvider(TextProvider):
    def __init__(
        self,
        api_key: str,
        model: str = GROQ_DEFAULT_MODEL,
        base_url: str | None = GROQ_BASE_URL,
        temperature: float = 0.7,
        max_tokens: int = 1024,
    ):
        try:
            from openai import AsyncOpenAI
        except ImportError:
            raise ImportError(
                "OpenAI SDK not installed. Run: pip install creation-gm[groq]"
            )
        kwargs: dict = {"api_key": api_key}
        if base_url:
            kwargs["base_url"] = base_url
        self._client = AsyncOpenAI(**kwargs)
        self._model = model
        self._base_url = base_url
        self._temperature = temperature
        self._max_tokens = max_tokens

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        import openai

        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                temperature=self._temperature,
                max_tokens=self._max_tokens,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except (openai.AuthenticationError, openai.PermissionDeniedError) as e:
            raise ProviderAuthError(f"{self.provider_name} rejected the API key: {e}") from e
        except openai.RateLimitError as e:
            raise ProviderRateLimitError(f"{self.provider_name} rate limit: {e}") from e
        except openai.APIError as e:
            raise ProviderError(f"{self.provider_name} call failed: {e}") from e

        if not response.choices:
            return ""
        # Some providers return None for content (e.g. refusal, empty response)
        return response.choices[0].message.content or ""

    @property
    def provider_name(self) -> str:
        if self._base_url == GROQ_BASE_URL:
            return "groq"
        if self._base_url:
            return f"openai-compatible ({self._base_url})"
        return "openai"

    @property
    def model_name(self) -> str:
        return self._model
