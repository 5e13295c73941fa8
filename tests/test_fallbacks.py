"""Tests for the plain and contextual fallback variants."""

import pytest

from creation_gm.reasoning.response import (
    CONTEXTUAL_BASE_MESSAGE,
    FALLBACK_MESSAGE,
    ContextualFallback,
    PlainFallback,
    build_fallback,
    is_valid_game_response,
)

CREATION = "🎨 창조의 에너지가 흘러넘칩니다. "
CHANGE = "⚡ 변화의 바람이 불어옵니다. "
COMPASSION = "🤝 자비로운 마음이 빛을 발합니다. "
CURIOSITY = "🔍 호기심이 새로운 길을 열어줍니다. "


class TestPlainFallback:
    def test_fixed_shape(self):
        assert PlainFallback().build() == {
            "message": FALLBACK_MESSAGE,
            "choices": [
                {"text": "계속 진행한다", "type": "continue", "effects": []},
                {"text": "다시 시도한다", "type": "retry", "effects": []},
            ],
            "playerUpdates": [],
            "worldUpdates": {},
            "achievements": [],
            "createdElements": [],
        }

    def test_build_fallback_defaults_to_plain(self):
        assert build_fallback() == PlainFallback().build()

    def test_builds_are_not_shared(self):
        first = build_fallback()
        first["choices"][0]["effects"].append({"stat": "power", "value": 1})
        assert build_fallback()["choices"][0]["effects"] == []


class TestContextualFallback:
    @pytest.mark.parametrize(
        "prompt,prefix",
        [
            ("빛을 창조하고 싶다", CREATION),
            ("새로운 생명체를 만들고 싶어", CREATION),
            ("바다를 생성하자", CREATION),
            ("이 건물을 부수고 싶어", CHANGE),
            ("악을 없애라", CHANGE),
            ("세계를 파괴한다", CHANGE),
            ("상처받은 사람들을 치유하고 싶어", COMPASSION),
            ("도움이 필요해", COMPASSION),
            ("인류를 구원하라", COMPASSION),
            ("숨겨진 보물을 발견하고 싶어", CURIOSITY),
            ("새로운 땅을 탐험해보자", CURIOSITY),
            ("길을 찾는다", CURIOSITY),
        ],
    )
    def test_keyword_prefix(self, prompt, prefix):
        result = ContextualFallback(prompt).build()
        assert result["message"] == prefix + CONTEXTUAL_BASE_MESSAGE

    def test_no_keyword_has_no_prefix(self):
        assert ContextualFallback("괜찮아").build()["message"] == CONTEXTUAL_BASE_MESSAGE

    def test_empty_prompt_has_no_prefix(self):
        assert ContextualFallback().prefix == ""
        assert ContextualFallback("").build()["message"] == CONTEXTUAL_BASE_MESSAGE

    def test_first_matching_theme_wins(self):
        assert ContextualFallback("창조파괴도움탐험").prefix == CREATION
        assert ContextualFallback("세계를 파괴하고 다시 만들자").prefix == CREATION
        assert ContextualFallback("파괴 후에 치유").prefix == CHANGE
        assert ContextualFallback("탐험하며 도움을 준다").prefix == COMPASSION

    def test_choices_differ_from_plain(self):
        result = ContextualFallback("괜찮아").build()
        assert result["choices"] == [
            {
                "text": "지혜롭게 행동한다",
                "type": "wisdom",
                "effects": [{"stat": "wisdom", "value": 5}],
            },
            {
                "text": "창의적인 해결책을 찾는다",
                "type": "creative",
                "effects": [{"stat": "creativity", "value": 5}],
            },
        ]
        assert result["choices"] != PlainFallback().build()["choices"]

    def test_other_fields_empty(self):
        result = build_fallback(ContextualFallback("빛을 창조하고 싶다"))
        assert result["playerUpdates"] == []
        assert result["worldUpdates"] == {}
        assert result["achievements"] == []
        assert result["createdElements"] == []
        assert is_valid_game_response(result)

    @pytest.mark.parametrize(
        "prompt", ["a" * 1000, "!@#$%^&*()", "123456789", "ㄱㄴㄷㄹㅁ", "\n\t\r"]
    )
    def test_unusual_prompts_still_build(self, prompt):
        assert ContextualFallback(prompt).build()["message"] == CONTEXTUAL_BASE_MESSAGE
