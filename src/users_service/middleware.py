"""Request middleware for the users API.

Three stages, applied outermost first:

    log_requests          logs the request line, then the response status
    require_bearer_token  rejects requests without the expected token
    catch_errors          turns unhandled exceptions into a generic 500

Each is an ``async def (request, call_next)`` callable and can be composed
with ``users_service.core.middleware.build_middleware_chain``.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import Request, Response
from starlette.responses import JSONResponse

logger = logging.getLogger(__name__)

CallNext = Callable[[Request], Awaitable[Response]]

DEFAULT_TOKEN = "demo-token"


async def catch_errors(request: Request, call_next: CallNext) -> Response:
    """Return a generic 500 for any exception escaping the inner chain."""
    try:
        return await call_next(request)
    except Exception as exc:
        logger.exception(
            f"Unhandled Exception: {exc}",
            extra={"method": request.method, "path": request.url.path},
        )
        return JSONResponse({"error": "Internal server error."}, status_code=500)


def require_bearer_token(token: str = DEFAULT_TOKEN) -> Callable[..., Any]:
    """Build an auth middleware accepting exactly ``Authorization: Bearer <token>``.

    Args:
        token: The single accepted token.

    Returns:
        An async middleware that short-circuits with 401 on a missing or
        mismatched header and forwards the request otherwise.
    """
    expected = f"Bearer {token}"

    async def auth_check(request: Request, call_next: CallNext) -> Response:
        if request.headers.get("Authorization") != expected:
            return JSONResponse({"error": "Unauthorized"}, status_code=401)
        return await call_next(request)

    return auth_check


async def log_requests(request: Request, call_next: CallNext) -> Response:
    """Log the request line before and the status code after the inner chain."""
    logger.info(f"Request: {request.method} {request.url.path}")
    response = await call_next(request)
    logger.info(f"Response: {response.status_code}")
    return response


def default_middleware(token: str = DEFAULT_TOKEN) -> tuple[Callable[..., Any], ...]:
    """Return the standard stack for the users API, outermost first."""
    return (log_requests, require_bearer_token(token), catch_errors)
