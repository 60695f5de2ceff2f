"""Session-scoped LLM chat API with rules and reference contexts."""
