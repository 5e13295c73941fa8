"""Creation GM: LLM game master for the "창조의 여정" text adventure."""

__version__ = "0.3.0"

from .exceptions import (
    ConfigError,
    CreationGMError,
    ProviderAuthError,
    ProviderError,
    ProviderNotConfiguredError,
    ProviderRateLimitError,
    ResponseError,
    ResponseParseError,
    StructureNotFoundError,
)

__all__ = [
    "__version__",
    "CreationGMError",
    "ResponseError",
    "StructureNotFoundError",
    "ResponseParseError",
    "ProviderError",
    "ProviderAuthError",
    "ProviderRateLimitError",
    "ProviderNotConfiguredError",
    "ConfigError",
]
