"""Google Gemini chat provider."""

from __future__ import annotations

import logging

from ...exceptions import ProviderAuthError, ProviderError, ProviderRateLimitError
from .base import TextProvider

logger = logging.getLogger("creation-gm")

GEMINI_DEFAULT_MODEL = "gemini-1.5-flash-latest"


class GoogleProvider(TextProvider):
    """Gemini provider with an optional backup API key.

    When the primary key's call fails with an API or transport error and a
    backup key is configured, the same request is sent once more with the
    backup key.
    """

    def __init__(
        self,
        api_key: str,
        model: str = GEMINI_DEFAULT_MODEL,
        backup_api_key: str = "",
        base_url: str = "",
    ):
        try:
            from google import genai
        except ImportError:
            raise ImportError(
                "Google GenAI SDK not installed. Run: pip install creation-gm[google]"
            )
        kwargs: dict = {}
        if base_url:
            kwargs["http_options"] = {"base_url": base_url}
        self._client = genai.Client(api_key=api_key, **kwargs)
        self._backup_client = (
            genai.Client(api_key=backup_api_key, **kwargs) if backup_api_key else None
        )
        self._model = model

    async def _generate(self, client, system_prompt: str, user_prompt: str) -> str:
        from google.genai import types

        contents = [
            types.Content(role="user", parts=[types.Part.from_text(text=system_prompt)]),
            types.Content(
                role="model",
                parts=[types.Part.from_text(text='{"response_format": "json"}')],
            ),
            types.Content(role="user", parts=[types.Part.from_text(text=user_prompt)]),
        ]
        response = await client.aio.models.generate_content(
            model=self._model,
            contents=contents,
            config=types.GenerateContentConfig(response_mime_type="application/json"),
        )
        return response.text or ""

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        import httpx
        from google.genai import errors

        failures = (errors.APIError, httpx.HTTPError)
        try:
            return await self._generate(self._client, system_prompt, user_prompt)
        except failures as e:
            if self._backup_client is None:
                raise _map_error(e) from e
            logger.warning("Gemini primary key failed (%s), trying backup key", e)

        try:
            return await self._generate(self._backup_client, system_prompt, user_prompt)
        except failures as e:
            raise _map_error(e) from e

    @property
    def provider_name(self) -> str:
        return "google"

    @property
    def model_name(self) -> str:
        return self._model


def _map_error(e: Exception) -> ProviderError:
    code = getattr(e, "code", None)
    if code in (401, 403):
        return ProviderAuthError(f"Gemini rejected the API key: {e}")
    if code == 429:
        return ProviderRateLimitError(f"Gemini rate limit: {e}")
    return ProviderError(f"Gemini call failed: {e}")
