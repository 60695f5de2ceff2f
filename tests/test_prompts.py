"""
Tests for system prompt assembly.
"""

from gemimiw.agent.prompts import (
    NO_CONTEXT_MARKER,
    NO_RULES_MARKER,
    build_system_prompt,
    join_contexts,
)


def test_join_contexts_keeps_order():
    """Snippets should be joined with '; ' in the order given."""
    assert join_contexts(["first", "second", "third"]) == "first; second; third"


def test_join_contexts_empty():
    """No snippets should give an empty string."""
    assert join_contexts([]) == ""


def test_prompt_embeds_rules_and_contexts():
    """Rules and contexts should appear verbatim."""
    prompt = build_system_prompt("Always answer politely", "Jakarta is the capital; Bali is an island")

    assert "Always answer politely" in prompt
    assert "Jakarta is the capital; Bali is an island" in prompt
    assert NO_RULES_MARKER not in prompt


def test_prompt_signals_missing_context():
    """An empty context pool should be replaced by the explicit marker."""
    prompt = build_system_prompt("Be brief", "")

    assert f"context here: {NO_CONTEXT_MARKER}" in prompt


def test_prompt_signals_missing_rules():
    """Null or empty rules should be replaced by the explicit marker."""
    assert f"rules defined here: {NO_RULES_MARKER}" in build_system_prompt(None, "ctx")
    assert f"rules defined here: {NO_RULES_MARKER}" in build_system_prompt("", "ctx")


def test_prompt_states_language_policy():
    """The prompt should ask for replies in the language of the prompt."""
    prompt = build_system_prompt("rules", "ctx")

    assert "Bahasa Indonesia" in prompt
    assert "English" in prompt
    assert "based on the information I have" in prompt
