"""Tests for model alias mapping and OpenCode output rendering."""

import pytest

from plugin_translate.translate.model_map import map_model
from plugin_translate.translate.serializer import render_agent, render_command


class TestMapModel:
    @pytest.mark.parametrize(
        "alias, expected",
        [
            ("sonnet", "anthropic/claude-sonnet"),
            ("haiku", "anthropic/claude-haiku"),
            ("opus", "anthropic/claude-opus"),
        ],
    )
    def test_known_aliases(self, alias, expected):
        assert map_model(alias) == expected

    @pytest.mark.parametrize("alias", ["", None, "gpt-4", "Opus", "inherit"])
    def test_unknown_falls_back_to_sonnet(self, alias):
        assert map_model(alias) == "anthropic/claude-sonnet"

    def test_custom_mapping_and_fallback(self):
        mapping = {"fast": "openai/gpt-4o-mini"}
        assert map_model("fast", mapping=mapping, fallback="openai/gpt-4o") == "openai/gpt-4o-mini"
        assert map_model("sonnet", mapping=mapping, fallback="openai/gpt-4o") == "openai/gpt-4o"


class TestRenderCommand:
    def test_exact_shape(self):
        assert render_command("Show status", "Body text.") == (
            "---\ndescription: Show status\n---\n\nBody text.\n"
        )

    def test_empty_body(self):
        assert render_command("d", "") == "---\ndescription: d\n---\n\n\n"


class TestRenderAgent:
    def test_exact_shape(self):
        expected = (
            "---\n"
            "description: Plans work\n"
            "mode: subagent\n"
            "model: anthropic/claude-opus\n"
            "tools:\n"
            "  read: true\n"
            "  glob: true\n"
            "  grep: true\n"
            "  bash: true\n"
            "  write: false\n"
            "  edit: false\n"
            "---\n"
            "\n"
            "Body.\n"
        )
        assert render_agent("Plans work", "anthropic/claude-opus", "Body.") == expected

    def test_custom_mode_and_tools(self):
        out = render_agent("d", "m", "b", mode="primary", tools={"write": True})
        assert "mode: primary\n" in out
        assert "tools:\n  write: true\n---\n" in out
