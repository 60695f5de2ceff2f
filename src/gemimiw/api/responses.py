"""
Response shaping and error mapping.

Every body carries ``status`` mirroring the HTTP status code. Client
errors add a ``message``; internal errors add the raw ``error`` detail.
"""

import functools
from typing import Any, Callable, Iterable, TypeVar

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from gemimiw.errors import ApiError, InternalError, ValidationError
from gemimiw.logger import get_logger

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def respond(status: int, **payload: Any) -> JSONResponse:
    """Build a JSON response whose body mirrors ``status``."""
    return JSONResponse(
        content=jsonable_encoder({"status": status, **payload}),
        status_code=status,
    )


def error_response(exc: ApiError) -> JSONResponse:
    """Map an ApiError onto its response body."""
    if isinstance(exc, InternalError):
        return respond(exc.status, error=exc.error)
    return respond(exc.status, message=exc.message)


def format_issues(errors: Iterable[dict[str, Any]]) -> str:
    """Render validation issues as ``"path": message`` pairs joined by commas."""
    return ", ".join(
        f'"{".".join(str(part) for part in error["loc"])}": {error["msg"].lower()}'
        for error in errors
    )


def handle_route_errors(func: F) -> F:
    """
    Convert anything a route lets escape into an InternalError.

    ApiErrors pass through untouched so their own status is kept.
    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except ApiError:
            raise
        except Exception as exc:
            logger.exception("Unexpected failure in %s", func.__name__)
            raise InternalError.from_exception(exc) from exc

    return wrapper  # type: ignore


# --- Exception handlers ---


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    if exc.status >= 500:
        logger.error("%s %s -> %d: %s", request.method, request.url.path, exc.status, exc.error)
    return error_response(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Path parameters only; bodies are parsed by the validators themselves
    locs = [{**error, "loc": error["loc"][1:]} for error in exc.errors()]
    return error_response(ValidationError(format_issues(locs)))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code in (404, 405):
        return respond(404, message="Not Found")
    return respond(exc.status_code, message=exc.detail)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort for failures outside a route body, e.g. in a dependency."""
    logger.error("%s %s failed", request.method, request.url.path, exc_info=exc)
    return error_response(InternalError.from_exception(exc))
