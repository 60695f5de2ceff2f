"""
System instruction template for chat generation.

The rules and the joined contexts of a session are embedded verbatim.
Empty values are replaced by explicit markers so the model can tell
"no context" apart from a blank one.
"""

CONTEXT_SEPARATOR = "; "

NO_CONTEXT_MARKER = "NO CONTEXT PROVIDED"
NO_RULES_MARKER = "NO RULES PROVIDED"

SYSTEM_PROMPT_TEMPLATE = """\
- You are a language expert fluent in Bahasa Indonesia and English. Respond to all questions in Bahasa Indonesia or English. If the user writes in English, respond in English; if the user writes in Bahasa Indonesia, respond in Bahasa Indonesia.
- Always follow the rules defined here: {rules}
- Give your response based on the context here: {contexts}
- If the context is "{no_context}", give a response based on the rules only and say that no context was found. Always answer based on the latest context and do not generate your own context or speculate. Do not say "based on the contexts", say "based on the information I have" instead."""


def join_contexts(snippets: list[str]) -> str:
    """Join context snippets in the order given."""
    return CONTEXT_SEPARATOR.join(snippets)


def build_system_prompt(rules: str | None, contexts: str) -> str:
    """Fill the system instruction with a session's rules and joined contexts."""
    return SYSTEM_PROMPT_TEMPLATE.format(
        rules=rules or NO_RULES_MARKER,
        contexts=contexts or NO_CONTEXT_MARKER,
        no_context=NO_CONTEXT_MARKER,
    )
