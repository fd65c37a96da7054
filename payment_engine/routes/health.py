# This project was developed with assistance from AI tools.
"""Liveness endpoint."""

from fastapi import APIRouter

from ..core.config import settings
from ..services.sessions import get_session_registry

router = APIRouter()


@router.get("/")
async def health() -> dict[str, str | int]:
    return {
        "status": "ok",
        "app": settings.APP_NAME,
        "sessions": len(get_session_registry()),
    }
