"""Session, history and rules endpoints."""

from fastapi import APIRouter, Depends

from gemimiw.api.dependencies import get_database, session_guard, validate_rules
from gemimiw.api.responses import handle_route_errors, respond
from gemimiw.api.schemas import RulesUpdate
from gemimiw.db import Database
from gemimiw.errors import InternalError, NotFoundError
from gemimiw.identifiers import generate_session_uuid
from gemimiw.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _history_entry(chat: dict) -> dict:
    """Flatten a chat and its first response into one history row."""
    responses = chat.get("responses") or []
    response = responses[0] if responses else {}
    return {
        "chat_id": chat["id"],
        "chat": chat["chat"],
        "chat_created_at": chat["created_at"],
        "response_id": response.get("id"),
        "response": response.get("response"),
        "response_created_at": response.get("created_at"),
    }


@router.post("/create")
@handle_route_errors
async def create_session(database: Database = Depends(get_database)):
    """Create a new session with empty rules."""
    result = await database.sessions.insert({"uuid": generate_session_uuid()})
    if result.error:
        raise InternalError.from_exception(result.error)

    logger.info("Session %s created", result.data["uuid"])
    return respond(201, data=result.data)


@router.get("/{session_uuid}")
@handle_route_errors
async def get_session_history(
    session_uuid: str = Depends(session_guard),
    database: Database = Depends(get_database),
):
    """List a session's chats, each with its response."""
    result = await database.chats.select({"session_uuid": session_uuid}, related="responses")
    if result.error:
        raise InternalError.from_exception(result.error)

    return respond(200, data=[_history_entry(chat) for chat in result.data])


@router.get("/{session_uuid}/rules")
@handle_route_errors
async def get_rules(
    session_uuid: str = Depends(session_guard),
    database: Database = Depends(get_database),
):
    """Get a session's rules."""
    result = await database.sessions.select({"uuid": session_uuid}, single=True)
    if result.error:
        raise InternalError.from_exception(result.error)

    return respond(200, data={"uuid": result.data["uuid"], "rules": result.data["rules"]})


async def _set_rules(database: Database, session_uuid: str, rules: str):
    result = await database.sessions.update({"rules": rules}, {"uuid": session_uuid}, single=True)
    if result.error:
        raise InternalError.from_exception(result.error)

    return respond(201, data={"uuid": result.data["uuid"], "rules": result.data["rules"]})


@router.post("/{session_uuid}/rules/create")
@handle_route_errors
async def create_rules(
    session_uuid: str = Depends(session_guard),
    body: RulesUpdate = Depends(validate_rules),
    database: Database = Depends(get_database),
):
    """Set a session's rules."""
    return await _set_rules(database, session_uuid, body.rules)


@router.put("/{session_uuid}/rules/edit")
@handle_route_errors
async def edit_rules(
    session_uuid: str = Depends(session_guard),
    body: RulesUpdate = Depends(validate_rules),
    database: Database = Depends(get_database),
):
    """Replace a session's rules. Same effect as creating them."""
    return await _set_rules(database, session_uuid, body.rules)


@router.delete("/{session_uuid}/delete")
@handle_route_errors
async def delete_session(
    session_uuid: str = Depends(session_guard),
    database: Database = Depends(get_database),
):
    """Delete a session together with its chats, responses and contexts."""
    result = await database.sessions.delete({"uuid": session_uuid})

    if result.is_empty:
        raise NotFoundError("Session not found")

    if result.error:
        raise InternalError.from_exception(result.error)

    logger.info("Session %s deleted", session_uuid)
    return respond(200)
