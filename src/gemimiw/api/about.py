"""Diagnostic about endpoint."""

from fastapi import APIRouter, Request

from gemimiw.api.responses import respond

router = APIRouter(tags=["about"])

AUTHOR = "Richard Erwin Manampiring"


@router.get("/about")
async def about(request: Request):
    """Author and how many times this endpoint was hit since startup."""
    # Per-process and reset on restart
    request.app.state.times_about_called += 1
    return respond(
        200,
        author=AUTHOR,
        times_called=request.app.state.times_about_called,
    )
