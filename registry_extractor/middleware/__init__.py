"""Middleware components for request validation and protection."""

from registry_extractor.middleware.rate_limit import get_user_key, limiter
from registry_extractor.middleware.size_limit import RequestSizeLimitMiddleware

__all__ = [
    "RequestSizeLimitMiddleware",
    "limiter",
    "get_user_key",
]
