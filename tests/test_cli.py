"""Tests for the creation-gm command line."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from creation_gm.__main__ import main
from creation_gm.reasoning.response import (
    CONTEXTUAL_BASE_MESSAGE,
    DEFAULT_MESSAGE,
    build_fallback,
)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def _no_provider_env(monkeypatch):
    for var in ("GROQ_API_KEY", "GEMINI_API_KEY", "GEMINI_BACKUP_API_KEY"):
        monkeypatch.delenv(var, raising=False)


class TestParseCommand:
    def test_parse_stdin(self, runner):
        result = runner.invoke(main, ["parse"], input='{"choices": []}')
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["message"] == DEFAULT_MESSAGE
        assert data["worldUpdates"] == {}

    def test_parse_file(self, runner, tmp_path: Path):
        path = tmp_path / "completion.txt"
        path.write_text('```json\n{"message": "빛"}\n```', encoding="utf-8")
        result = runner.invoke(main, ["parse", str(path)])
        assert result.exit_code == 0
        assert "빛" in result.output
        assert json.loads(result.output)["message"] == "빛"

    def test_parse_garbage_prints_fallback(self, runner):
        result = runner.invoke(main, ["parse"], input="not json at all")
        assert result.exit_code == 0
        assert json.loads(result.output) == build_fallback()


class TestFallbackCommand:
    def test_plain(self, runner):
        result = runner.invoke(main, ["fallback"])
        assert result.exit_code == 0
        assert json.loads(result.output) == build_fallback()

    def test_contextual(self, runner):
        result = runner.invoke(main, ["fallback", "--prompt", "괜찮아"])
        assert result.exit_code == 0
        assert json.loads(result.output)["message"] == CONTEXTUAL_BASE_MESSAGE


class TestTurnCommand:
    def test_no_provider_plays_contextual_fallback(self, runner, tmp_path: Path):
        result = runner.invoke(
            main,
            ["turn", "빛을 창조하고 싶다", "--config", str(tmp_path / "missing.yaml")],
        )
        assert result.exit_code == 0
        assert "No LLM provider set up" in result.output
        assert "🎨 창조의 에너지가 흘러넘칩니다." in result.output

    def test_bad_config_exits_with_friendly_error(self, runner, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("groq: [unclosed\n", encoding="utf-8")
        result = runner.invoke(main, ["turn", "안녕", "--config", str(path)])
        assert result.exit_code == 1
        assert "Configuration file error" in result.output


class TestVersion:
    def test_version(self, runner):
        from creation_gm import __version__

        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
