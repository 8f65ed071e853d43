"""Request body size limit middleware."""

import logging

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from registry_extractor.config import settings

logger = logging.getLogger(__name__)


class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    """Reject uploads larger than the configured limit.

    Checks the Content-Length header so oversized documents are refused
    before their body is read into memory.
    """

    def __init__(self, app, max_size: int | None = None):
        super().__init__(app)
        self.max_size = max_size or settings.max_request_size_bytes

    async def dispatch(self, request: Request, call_next):
        content_length = request.headers.get("content-length")
        if not content_length:
            return await call_next(request)

        try:
            size = int(content_length)
        except ValueError:
            return JSONResponse(status_code=400, content={"detail": "Invalid Content-Length header"})

        if size > self.max_size:
            logger.warning(
                f"Upload too large: {size} bytes (max: {self.max_size})",
                extra={"content_length": size, "max_size": self.max_size, "path": request.url.path},
            )
            return JSONResponse(
                status_code=413,
                content={"detail": f"Request body exceeds maximum size of {self.max_size} bytes"},
            )

        return await call_next(request)
