"""FastAPI middleware for logging requests without their bodies."""

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
import logging
import time

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and duration of every request"""

    def __init__(self, app, skip_paths: tuple = ("/health",)):
        """Initializes the middleware."""
        super().__init__(app)
        self.skip_paths = skip_paths

    async def dispatch(self, request: Request, call_next):
        """Times the request and logs the outcome. Bodies are never logged."""
        if request.url.path in self.skip_paths:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"({elapsed_ms:.1f} ms)"
        )
        return response
