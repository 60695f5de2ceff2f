"""Context CRUD endpoints."""

from fastapi import APIRouter, Depends

from gemimiw.api.dependencies import get_database, session_guard, validate_context
from gemimiw.api.responses import handle_route_errors, respond
from gemimiw.api.schemas import ContextCreate
from gemimiw.db import Database
from gemimiw.errors import InternalError, NotFoundError

router = APIRouter(prefix="/sessions", tags=["contexts"])

# Signed 64-bit range of the id column
MIN_CONTEXT_ID = -(2**63)
MAX_CONTEXT_ID = 2**63 - 1


def _require_storable_id(context_id: int) -> None:
    """An id the database cannot hold can never match a row."""
    if not MIN_CONTEXT_ID <= context_id <= MAX_CONTEXT_ID:
        raise NotFoundError("Context not found")


@router.get("/{session_uuid}/contexts")
@handle_route_errors
async def list_contexts(
    session_uuid: str = Depends(session_guard),
    database: Database = Depends(get_database),
):
    """List all contexts of a session."""
    result = await database.contexts.select({"session_uuid": session_uuid})
    if result.error:
        raise InternalError.from_exception(result.error)

    return respond(200, data={"contexts": result.data})


@router.post("/{session_uuid}/contexts/create")
@handle_route_errors
async def create_context(
    session_uuid: str = Depends(session_guard),
    body: ContextCreate = Depends(validate_context),
    database: Database = Depends(get_database),
):
    """Add a context snippet to a session."""
    result = await database.contexts.insert({"session_uuid": session_uuid, "context": body.context})
    if result.error:
        raise InternalError.from_exception(result.error)

    return respond(201, data={"context": result.data})


@router.patch("/{session_uuid}/contexts/{context_id}/edit")
@handle_route_errors
async def edit_context(
    context_id: int,
    session_uuid: str = Depends(session_guard),
    body: ContextCreate = Depends(validate_context),
    database: Database = Depends(get_database),
):
    """Replace the text of a context owned by the session."""
    _require_storable_id(context_id)

    result = await database.contexts.update(
        {"context": body.context},
        {"id": context_id, "session_uuid": session_uuid},
        single=True,
    )

    if result.is_empty:
        raise NotFoundError("Context not found")

    if result.error:
        raise InternalError.from_exception(result.error)

    return respond(201, data={"context": result.data})


@router.delete("/{session_uuid}/contexts/{context_id}/delete")
@handle_route_errors
async def delete_context(
    context_id: int,
    session_uuid: str = Depends(session_guard),
    database: Database = Depends(get_database),
):
    """Delete a context owned by the session."""
    _require_storable_id(context_id)

    result = await database.contexts.delete({"id": context_id, "session_uuid": session_uuid})

    if result.is_empty:
        raise NotFoundError("Context not found")

    if result.error:
        raise InternalError.from_exception(result.error)

    return respond(200)
