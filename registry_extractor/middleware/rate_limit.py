"""Rate limiting middleware using SlowAPI."""

import logging

from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from registry_extractor.config import settings

logger = logging.getLogger(__name__)


def get_user_key(request: Request) -> str:
    """Extract user identifier for rate limiting.

    Uses the session cookie if present, otherwise falls back to IP address.
    """
    session_id = request.cookies.get("session_id")
    if session_id:
        return f"session:{session_id}"

    return f"ip:{get_remote_address(request)}"


def get_ip_key(request: Request) -> str:
    """Always use IP address for rate limiting (for unauthenticated endpoints)."""
    return f"ip:{get_remote_address(request)}"


limiter = Limiter(
    key_func=get_user_key,
    storage_uri=settings.rate_limit_storage_uri,
    default_limits=[f"{settings.rate_limit_general_per_minute}/minute"],
    enabled=settings.rate_limit_enabled,
)


def rate_limit_extract():
    """Decorator for extraction endpoints (PDF decoding is the expensive part)."""
    return limiter.limit(f"{settings.rate_limit_extract_per_minute}/minute")


def rate_limit_login():
    """Decorator for the login endpoint (IP-based)."""
    return limiter.limit(f"{settings.rate_limit_login_per_minute}/minute", key_func=get_ip_key)
