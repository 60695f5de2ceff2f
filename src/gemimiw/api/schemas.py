"""Request body schemas."""

from pydantic import BaseModel, ConfigDict, StrictStr, field_validator
from pydantic_core import PydanticCustomError


def _require_text(field: str, value: str) -> str:
    if not value:
        raise PydanticCustomError("string_empty", f'"{field}" cannot be empty')
    return value


class ChatCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    chat: StrictStr

    @field_validator("chat")
    @classmethod
    def _chat_not_empty(cls, value: str) -> str:
        return _require_text("chat", value)


class RulesUpdate(BaseModel):
    """Rules may be set to an empty string to clear them."""

    model_config = ConfigDict(extra="ignore")

    rules: StrictStr


class ContextCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    context: StrictStr

    @field_validator("context")
    @classmethod
    def _context_not_empty(cls, value: str) -> str:
        return _require_text("context", value)
