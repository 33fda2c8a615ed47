# kbsearch/middleware.py
import time
import uuid
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from .logging_setup import request_id_var, get_logger

logger = get_logger("kb_search.http")

REQUEST_ID_HEADER = "X-Request-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        req_id = uuid.uuid4().hex[:12]
        token = request_id_var.set(req_id)
        # the fallback error handler runs outside this middleware and reads it from here
        request.state.request_id = req_id

        start = time.perf_counter()
        response: Optional[Response] = None

        try:
            logger.info(f"REQUEST START: {request.method} {request.url.path}")
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = req_id
            return response
        except Exception:
            # Re-raise so the fallback exception handler can respond
            logger.exception(f"REQUEST EXCEPTION: {request.method} {request.url.path}")
            raise
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            status = getattr(response, "status_code", 500)  # never got a response
            logger.info(f"REQUEST END: {request.method} {request.url.path} -> {status} ({elapsed_ms:.1f} ms)")
            request_id_var.reset(token)
