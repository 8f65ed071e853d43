import logging
import uuid

from fastapi import APIRouter, Cookie, Depends, HTTPException, Request, Response
from pydantic import BaseModel

from registry_extractor.config import settings
from registry_extractor.middleware.rate_limit import rate_limit_login
from registry_extractor.services.sessions import SessionStore, UserSession, session_store

logger = logging.getLogger(__name__)

router = APIRouter()


class LoginRequest(BaseModel):
    email: str
    password: str


class UserResponse(BaseModel):
    email: str
    expires_at: str


def get_session_store() -> SessionStore:
    return session_store


def _parse_session_id(session_id: str | None) -> uuid.UUID:
    if not session_id:
        raise HTTPException(status_code=401, detail="Not authenticated")
    try:
        return uuid.UUID(session_id)
    except ValueError:
        raise HTTPException(status_code=401, detail="Invalid session") from None


async def get_current_session(
    session_id: str | None = Cookie(default=None),
    store: SessionStore = Depends(get_session_store),
) -> UserSession:
    """Dependency to get the current live session."""
    session = store.get(_parse_session_id(session_id))
    if not session:
        raise HTTPException(status_code=401, detail="Session expired or not found")
    return session


@router.post("/login", response_model=UserResponse)
@rate_limit_login()
async def login(
    request: Request,
    body: LoginRequest,
    response: Response,
    store: SessionStore = Depends(get_session_store),
):
    """Open a session for any non-empty email and password."""
    email = body.email.strip()
    if not email or not body.password:
        raise HTTPException(status_code=400, detail="Email and password are required")

    session = store.create(email)
    response.set_cookie(
        key="session_id",
        value=str(session.id),
        httponly=True,
        secure=settings.frontend_url.startswith("https"),
        samesite="lax",
        max_age=settings.session_expire_hours * 3600,
        domain=settings.cookie_domain,
    )
    return UserResponse(email=session.email, expires_at=session.expires_at.isoformat())


@router.post("/logout")
async def logout(
    response: Response,
    session_id: str | None = Cookie(default=None),
    store: SessionStore = Depends(get_session_store),
):
    """Drop the session and clear the cookie."""
    if session_id:
        try:
            store.delete(uuid.UUID(session_id))
        except ValueError:
            pass  # Invalid UUID, ignore

    response.delete_cookie(key="session_id")
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=UserResponse)
async def get_current_user(session: UserSession = Depends(get_current_session)):
    """Get current authenticated user info."""
    return UserResponse(email=session.email, expires_at=session.expires_at.isoformat())
