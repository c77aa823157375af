from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response, PlainTextResponse
from app.core.routing import RequestKind, CORS_HEADERS, classify_request, is_api_path
import logging
import time
from typing import Callable

logger = logging.getLogger(__name__)

class DispatchMiddleware(BaseHTTPMiddleware):
    """
    Classifies every request before routing. Preflight and unsupported
    requests are answered here; everything else goes on to the routers.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        path = request.url.path
        method = request.method
        kind = classify_request(method, path)

        logger.debug(f"Request {method} {path} classified as {kind.value}")

        if kind == RequestKind.PREFLIGHT:
            response = Response(status_code=204)
        elif kind == RequestKind.UNSUPPORTED:
            # Body is never read for rejected requests
            response = PlainTextResponse("Method Not Allowed", status_code=405)
        else:
            response = await call_next(request)

        # CORS headers go on every API response, not only the preflight
        if is_api_path(path):
            response.headers.update(CORS_HEADERS)

        return response

class AccessLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable):
        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(f"{request.method} {request.url.path} -> {status_code} ({elapsed_ms:.1f} ms)")
