"""Model-backed response generation."""

from .generator import ResponseGenerator, get_generator, response_generator
from .prompts import build_system_prompt, join_contexts

__all__ = [
    "ResponseGenerator",
    "get_generator",
    "response_generator",
    "build_system_prompt",
    "join_contexts",
]
