"""Health check endpoints."""

from fastapi import APIRouter, Depends

from registry_extractor.config import settings
from registry_extractor.routes.auth import get_session_store
from registry_extractor.services.sessions import SessionStore

router = APIRouter()


@router.get("")
async def health():
    """Basic health check."""
    return {"status": "healthy"}


@router.get("/config")
async def config_health(store: SessionStore = Depends(get_session_store)):
    """Report the active decoder settings and the number of live sessions."""
    return {
        "status": "healthy",
        "line_break_threshold": settings.line_break_threshold,
        "use_pdf_line_flags": settings.use_pdf_line_flags,
        "sessions": len(store),
    }
