"""Tests for building the provider chain from configuration."""

import pytest

from creation_gm.config import GameMasterConfig, ProviderConfig
from creation_gm.reasoning.factory import create_providers

pytest.importorskip("openai")
pytest.importorskip("google.genai")


class TestCreateProviders:
    def test_nothing_configured(self):
        assert create_providers(GameMasterConfig()) == []

    def test_groq_only(self):
        config = GameMasterConfig(groq=ProviderConfig(api_key="gsk_test"))
        providers = create_providers(config)
        assert [p.provider_name for p in providers] == ["groq"]
        assert providers[0].model_name == "llama3-70b-8192"

    def test_groq_first_then_gemini(self):
        config = GameMasterConfig(
            groq=ProviderConfig(api_key="gsk_test", model="llama3-8b-8192"),
            gemini=ProviderConfig(api_key="gem_main", backup_api_key="gem_backup"),
        )
        providers = create_providers(config)
        assert [p.provider_name for p in providers] == ["groq", "google"]
        assert providers[0].model_name == "llama3-8b-8192"
        assert providers[1].model_name == "gemini-1.5-flash-latest"
        assert providers[1]._backup_client is not None

    def test_custom_openai_compatible_endpoint(self):
        config = GameMasterConfig(
            groq=ProviderConfig(
                api_key="k", endpoint="https://api.together.xyz/v1", model="m"
            )
        )
        (provider,) = create_providers(config)
        assert provider.provider_name.startswith("openai-compatible")
