"""Configuration loading and validation."""

from __future__ import annotations

import os
import re
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigError

DEFAULT_CONFIG_PATH = "~/.creation-gm/config.yaml"


class ProviderConfig(BaseModel):
    endpoint: str = ""  # Empty = the SDK's default endpoint
    api_key: str = ""
    model: str = ""
    backup_api_key: str = ""  # Gemini only: retried once when the primary key fails

    @field_validator("endpoint", "api_key", "model", "backup_api_key", mode="before")
    @classmethod
    def _none_as_empty(cls, v):
        # An unset ${VAR} leaves "key:" with no value, which YAML loads as None
        return "" if v is None else v

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)


def _default_groq() -> ProviderConfig:
    return ProviderConfig(
        endpoint="https://api.groq.com/openai/v1", model="llama3-70b-8192"
    )


def _default_gemini() -> ProviderConfig:
    return ProviderConfig(model="gemini-1.5-flash-latest")


class GameMasterConfig(BaseModel):
    groq: ProviderConfig = Field(default_factory=_default_groq)
    gemini: ProviderConfig = Field(default_factory=_default_gemini)
    llm_timeout_seconds: float = 10.0  # Max time for a single LLM API call
    max_retries: int = 3
    retry_base_delay: float = 1.0  # Seconds; doubles after each failed attempt
    log_level: str = "INFO"


def _interpolate_env_vars(text: str) -> str:
    """Replace ${VAR_NAME} with environment variable values."""

    def replacer(match: re.Match) -> str:
        var_name = match.group(1)
        return os.environ.get(var_name, "")

    return re.sub(r"\$\{(\w+)\}", replacer, text)


def _config_from_env() -> GameMasterConfig:
    """Build config from environment variables.

    Falls back to defaults when env vars are not set.
    """
    groq = _default_groq()
    gemini = _default_gemini()
    return GameMasterConfig(
        groq=ProviderConfig(
            endpoint=os.environ.get("GROQ_ENDPOINT", groq.endpoint),
            api_key=os.environ.get("GROQ_API_KEY", ""),
            model=os.environ.get("GROQ_MODEL", groq.model),
        ),
        gemini=ProviderConfig(
            endpoint=os.environ.get("GEMINI_ENDPOINT", gemini.endpoint),
            api_key=os.environ.get("GEMINI_API_KEY", ""),
            model=os.environ.get("GEMINI_MODEL", gemini.model),
            backup_api_key=os.environ.get("GEMINI_BACKUP_API_KEY", ""),
        ),
        llm_timeout_seconds=float(os.environ.get("CREATION_GM_LLM_TIMEOUT", "10")),
        log_level=os.environ.get("CREATION_GM_LOG_LEVEL", "INFO"),
    )


def load_config(path: str | Path | None = None) -> GameMasterConfig:
    """Load config from YAML file, env vars, or defaults.

    Priority: config.yaml (with ${ENV} interpolation) > env vars > defaults.
    """
    path = Path(path or DEFAULT_CONFIG_PATH).expanduser()

    if not path.exists():
        try:
            return _config_from_env()
        except ValueError as e:
            raise ConfigError(f"Invalid environment setting: {e}") from e

    try:
        raw_text = path.read_text(encoding="utf-8")
        data = yaml.safe_load(_interpolate_env_vars(raw_text))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Could not read config file {path}: {e}") from e

    if data is None:
        return GameMasterConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config file {path}: expected a mapping")
    try:
        return GameMasterConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e


def save_config(config: GameMasterConfig, path: str | Path | None = None) -> Path:
    """Save config to YAML file."""
    path = Path(path or DEFAULT_CONFIG_PATH).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump()
    path.write_text(
        yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True),
        encoding="utf-8",
    )
    return path
