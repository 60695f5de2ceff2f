"""Request dependencies: database gateway, session guard and body validators."""

import json
from typing import Callable, TypeVar

from fastapi import Depends, Request
from pydantic import BaseModel
from pydantic import ValidationError as SchemaError
from sqlalchemy.ext.asyncio import AsyncSession

from gemimiw.api.responses import format_issues
from gemimiw.api.schemas import ChatCreate, ContextCreate, RulesUpdate
from gemimiw.db import Database, get_session
from gemimiw.errors import InternalError, NotFoundError, ValidationError
from gemimiw.identifiers import is_valid_session_uuid

M = TypeVar("M", bound=BaseModel)


async def get_database(db: AsyncSession = Depends(get_session)) -> Database:
    """Table gateway bound to the request's database session."""
    return Database(db)


async def session_guard(
    session_uuid: str,
    database: Database = Depends(get_database),
) -> str:
    """
    Validate the path session identifier and check the session exists.

    Returns the validated identifier for the handler.
    """
    if not session_uuid:
        raise ValidationError("Session UUID is required")

    if not is_valid_session_uuid(session_uuid):
        raise ValidationError("Invalid session")

    result = await database.sessions.select({"uuid": session_uuid}, single=True)

    if result.is_empty:
        raise NotFoundError("Session not found")

    if result.error:
        raise InternalError.from_exception(result.error)

    return session_uuid


def body_validator(schema: type[M]) -> Callable:
    """Build a dependency that parses the JSON body against ``schema``."""

    async def validate(request: Request) -> M:
        try:
            body = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            raise ValidationError('"body" must be an object')

        try:
            return schema.model_validate(body)
        except SchemaError as exc:
            raise ValidationError(format_issues(exc.errors()))

    validate.__name__ = f"validate_{schema.__name__}"
    return validate


validate_chat = body_validator(ChatCreate)
validate_rules = body_validator(RulesUpdate)
validate_context = body_validator(ContextCreate)
