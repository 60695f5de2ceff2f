"""API routes."""

from fastapi import APIRouter

from gemimiw.config import API_VERSION

from .about import router as about_router
from .sessions import router as sessions_router
from .chats import router as chats_router
from .contexts import router as contexts_router

router = APIRouter(prefix=f"/{API_VERSION}")
router.include_router(about_router)
router.include_router(sessions_router)
router.include_router(chats_router)
router.include_router(contexts_router)
