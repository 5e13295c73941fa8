"""Custom exception hierarchy for creation-gm.

All creation-gm exceptions inherit from CreationGMError, allowing callers
to catch broad or specific errors:

    try:
        payload = extract_json(raw_text)
    except StructureNotFoundError:
        print("The model answered in prose only")
    except CreationGMError as e:
        print(f"creation-gm error: {e}")

The response pipeline itself (``parse_game_response``) never raises; these
exceptions surface from the lower-level extraction helpers, the providers
and the configuration loader.
"""

from __future__ import annotations

import json


class CreationGMError(Exception):
    """Base exception for all creation-gm errors."""


class ResponseError(CreationGMError):
    """Raised when an LLM completion cannot be turned into a payload."""


class StructureNotFoundError(ResponseError):
    """Raised when no {...} or [...] span exists in the completion text."""


class ResponseParseError(ResponseError, json.JSONDecodeError):
    """Raised when a bracketed span was found but is not valid JSON."""

    def __init__(self, msg: str, doc: str, pos: int = 0):
        json.JSONDecodeError.__init__(self, msg, doc, pos)


class ProviderError(CreationGMError):
    """Raised when an LLM provider call fails."""


class ProviderAuthError(ProviderError):
    """Raised when provider authentication fails (invalid API key)."""


class ProviderRateLimitError(ProviderError):
    """Raised when a provider rate-limits the request."""


class ProviderNotConfiguredError(ProviderError):
    """Raised when a provider is requested but has no credential."""


class ConfigError(CreationGMError):
    """Raised when configuration is invalid or missing."""
