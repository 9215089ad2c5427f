"""
Request ID middleware for FastAPI.

Generates a unique request_id for each incoming request. The request_id is:
- Added to the request state
- Added to response headers (X-Request-ID)
- Set in context variables so every log line of the request includes it
- Set as a Sentry tag
"""

import time
import uuid

from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from risk_api.core.logging_config import clear_request_id, set_request_id
from risk_api.core.sentry import clear_sentry_context, set_sentry_context

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Attach a UUID4 request_id to each request and its logging context."""

    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        set_request_id(request_id)
        set_sentry_context(request_id=request_id)

        start_time = time.perf_counter()
        try:
            logger.info(f"{request.method} {request.url.path} - Request started")

            response: Response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id

            duration_ms = (time.perf_counter() - start_time) * 1000.0
            logger.info(
                f"{request.method} {request.url.path} - Request completed with status "
                f"{response.status_code} in {duration_ms:.1f}ms"
            )

            return response

        except Exception as e:
            logger.error(f"{request.method} {request.url.path} - Request failed: {e}")
            raise
        finally:
            clear_request_id()
            clear_sentry_context()
