"""Human-readable messages for common provider and configuration errors.

Maps technical errors to a title, a message and a fix suggestion the CLI
can print.
"""

from __future__ import annotations

from dataclasses import dataclass

from .exceptions import (
    ProviderAuthError,
    ProviderNotConfiguredError,
    ProviderRateLimitError,
)


@dataclass
class FriendlyError:
    """A user-facing error with a fix suggestion."""

    title: str
    message: str
    fix: str


def friendly_provider_error(error: Exception) -> FriendlyError:
    """Convert an LLM provider error to a user-facing message."""
    msg = str(error).lower()

    if isinstance(error, ProviderAuthError) or "api key" in msg or "401" in msg:
        return FriendlyError(
            title="LLM provider key invalid",
            message="Your Groq or Gemini API key was rejected.",
            fix=(
                "Check the api_key values in ~/.creation-gm/config.yaml, or the "
                "GROQ_API_KEY / GEMINI_API_KEY environment variables. Keys may "
                "have expired or been revoked."
            ),
        )

    if isinstance(error, ProviderRateLimitError) or "429" in msg or "quota" in msg:
        return FriendlyError(
            title="LLM provider rate limit",
            message="Too many requests to the LLM provider.",
            fix=(
                "Wait a minute and try again. If this keeps happening:\n"
                "1. Configure both groq and gemini so turns can fall over\n"
                "2. Set gemini.backup_api_key\n"
                "3. Upgrade your API plan"
            ),
        )

    if isinstance(error, ProviderNotConfiguredError) or "not configured" in msg:
        return FriendlyError(
            title="No LLM provider set up",
            message="creation-gm needs Groq or Gemini to narrate the game.",
            fix=(
                "Add a provider to ~/.creation-gm/config.yaml:\n\n"
                "  groq:\n"
                "    api_key: ${GROQ_API_KEY}\n\n"
                "or export GROQ_API_KEY / GEMINI_API_KEY."
            ),
        )

    return FriendlyError(
        title="LLM provider error",
        message=f"The LLM provider returned an error: {error}",
        fix="This is usually temporary. Try the turn again.",
    )


def friendly_config_error(error: Exception) -> FriendlyError:
    """Convert a configuration error to a user-facing message."""
    msg = str(error).lower()

    if "yaml" in msg or "parse" in msg or "mapping" in msg:
        return FriendlyError(
            title="Configuration file error",
            message="The configuration file has a formatting issue.",
            fix=(
                "Check ~/.creation-gm/config.yaml for syntax errors. "
                "Common issues:\n"
                "- Missing spaces after colons (use 'key: value' not 'key:value')\n"
                "- Incorrect indentation (use 2 spaces, not tabs)\n"
                "- Missing quotes around special characters"
            ),
        )

    return FriendlyError(
        title="Configuration error",
        message=f"There's a problem with your setup: {error}",
        fix="Check ~/.creation-gm/config.yaml against the documented settings.",
    )


def format_friendly_error(err: FriendlyError) -> str:
    """Format a FriendlyError for display in a terminal."""
    lines = [
        f"Error: {err.title}",
        f"   {err.message}",
        "",
        "How to fix:",
    ]
    for line in err.fix.split("\n"):
        lines.append(f"   {line}")
    return "\n".join(lines)
