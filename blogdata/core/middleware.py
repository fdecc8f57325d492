import logging
import time
from typing import Callable

from fastapi import Request
from fastapi.responses import JSONResponse

from ..services.global_data import MalformedURIError
from .config import Config


logger = logging.getLogger(__name__)

SLOW_REQUEST_SECONDS = 1.0


def cors_allowed_origins() -> list[str]:
    return Config.allowed_origins()


def _request_id(request: Request) -> str:
    return f"gd-{int(time.time() * 1000)}-{id(request)}"


def _apply_cors_headers(request: Request, response) -> None:
    origin = request.headers.get("origin")
    if origin and origin in cors_allowed_origins():
        response.headers["Access-Control-Allow-Origin"] = origin
        response.headers["Access-Control-Allow-Credentials"] = "true"
        response.headers["Access-Control-Allow-Methods"] = "GET, OPTIONS"
        response.headers["Access-Control-Allow-Headers"] = "*"


async def log_requests(request: Request, call_next: Callable):
    start_time = time.time()
    request_id = _request_id(request)

    try:
        response = await call_next(request)
    except Exception as e:
        elapsed = time.time() - start_time
        logger.error(f"[{request_id}] {request.method} {request.url.path} failed after {elapsed:.2f}s: {type(e).__name__}")
        raise

    elapsed = time.time() - start_time
    if elapsed > SLOW_REQUEST_SECONDS or response.status_code >= 400:
        logger.info(f"[{request_id}] {request.method} {request.url.path} - {response.status_code} - {elapsed:.2f}s")
    return response


async def global_exception_handler(request: Request, exc: Exception):
    request_id = _request_id(request)
    if isinstance(exc, MalformedURIError):
        # A bad BLOG_* value is an operator error, not a code fault
        logger.error(f"[{request_id}] Blog setting is not valid percent-encoding ({exc.reason}): {exc.value!r}")
    else:
        logger.error(f"[{request_id}] Unhandled exception in {request.method} {request.url.path}: {exc}", exc_info=True)

    response = JSONResponse(status_code=500, content={"detail": "Internal server error"})
    # Errors raised past CORSMiddleware lose its headers
    _apply_cors_headers(request, response)
    return response
