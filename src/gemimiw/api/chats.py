"""Chat turn endpoint."""

from fastapi import APIRouter, Depends

from gemimiw.agent import ResponseGenerator, get_generator, join_contexts
from gemimiw.api.dependencies import get_database, session_guard, validate_chat
from gemimiw.api.responses import handle_route_errors, respond
from gemimiw.api.schemas import ChatCreate
from gemimiw.db import Database
from gemimiw.errors import GatewayError, InternalError
from gemimiw.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/sessions", tags=["chats"])


async def _discard_chat(database: Database, chat_id: int, cause: GatewayError) -> InternalError:
    """Remove a chat whose response could not be produced."""
    result = await database.chats.delete({"id": chat_id})
    if result.error:
        logger.error("Could not discard chat %s: %s", chat_id, result.error)
    elif result.is_empty:
        logger.warning("Chat %s was already gone after failure: %s", chat_id, cause)
    else:
        logger.warning("Discarded chat %s after failure: %s", chat_id, cause)
    return InternalError.from_exception(cause)


@router.post("/{session_uuid}/chats/create")
@handle_route_errors
async def create_chat(
    session_uuid: str = Depends(session_guard),
    body: ChatCreate = Depends(validate_chat),
    database: Database = Depends(get_database),
    generator: ResponseGenerator = Depends(get_generator),
):
    """Store a prompt, generate its response from the session's rules and contexts, store that too."""
    session = await database.sessions.select({"uuid": session_uuid}, single=True)
    if session.error:
        raise InternalError.from_exception(session.error)

    contexts = await database.contexts.select({"session_uuid": session_uuid})
    if contexts.error:
        raise InternalError.from_exception(contexts.error)

    chat = await database.chats.insert({"session_uuid": session_uuid, "chat": body.chat})
    if chat.error:
        raise InternalError.from_exception(chat.error)

    generated = await generator.generate(
        session.data["rules"],
        join_contexts([row["context"] for row in contexts.data]),
        chat.data["chat"],
    )
    if generated.error:
        raise await _discard_chat(database, chat.data["id"], generated.error)

    response = await database.responses.insert({"chat_id": chat.data["id"], "response": generated.data})
    if response.error:
        raise await _discard_chat(database, chat.data["id"], response.error)

    logger.info("Chat %s answered in session %s", chat.data["id"], session_uuid)
    return respond(
        201,
        data={
            "chat": chat.data["chat"],
            "response": response.data["response"],
        },
    )
