"""gemimiw API server."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from gemimiw.agent import response_generator
from gemimiw.api import router
from gemimiw.api.responses import (
    api_error_handler,
    http_exception_handler,
    request_validation_handler,
    unhandled_exception_handler,
)
from gemimiw.config import PORT, missing_secrets
from gemimiw.db import engine
from gemimiw.errors import ApiError
from gemimiw.logger import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    for name in missing_secrets():
        logger.warning("%s is empty", name)
    yield
    await response_generator.close()
    await engine.dispose()


app = FastAPI(title="gemimiw", version="0.1.0", lifespan=lifespan)

# Hit counter for /about, per process and never persisted
app.state.times_about_called = 0

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(ApiError, api_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

app.include_router(router)


def run() -> None:
    """Serve the app with uvicorn."""
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=PORT)
