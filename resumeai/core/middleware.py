"""Request context middleware"""

import time
import uuid
from typing import Callable
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from resumeai.core.logging import get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Tag every request with an id and log its outcome

    The id is taken from the ``X-Request-ID`` header when the client sends
    one, stored on ``request.state`` for the exception handlers and echoed on
    the response. Requests under ``resume_prefix`` also log the ingest
    workflow state after the endpoint has run.
    """

    def __init__(self, app: ASGIApp, resume_prefix: str = "/api/v1/resumes"):
        super().__init__(app)
        self.resume_prefix = resume_prefix

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        context = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
        }
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            context["duration_ms"] = round((time.perf_counter() - start_time) * 1000, 2)
            logger.error(f"Request failed: {str(e)}", extra=context, exc_info=True)
            raise

        context["status_code"] = response.status_code
        context["duration_ms"] = round((time.perf_counter() - start_time) * 1000, 2)

        if request.url.path.startswith(self.resume_prefix):
            context["state"] = request.app.state.ingest_service.state.value

        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code}",
            extra=context
        )

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
