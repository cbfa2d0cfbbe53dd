"""Middleware chain assembly.

A middleware is an ``async def (request, call_next)`` callable. It may act
before and after awaiting ``call_next(request)``, or return its own
response without calling it at all. A stack is an ordered sequence of
middleware, outermost first.
"""

import inspect
from collections.abc import Callable, Sequence
from typing import Any

from fastapi import FastAPI

from users_service.exceptions import MiddlewareValidationError


def normalize_middleware(
    middleware_attr: Any,
    *,
    source: str = "",
) -> tuple[Callable[..., Any], ...]:
    """Normalize a middleware value to a tuple of async callables.

    Accepts: None, single callable, list, or tuple.
    Returns: tuple of callables (empty if None).

    Args:
        middleware_attr: The middleware value to normalize.
        source: Context for error messages (e.g., "users router").

    Raises:
        MiddlewareValidationError: If middleware_attr is not a valid type,
            or any entry is not an async callable.
    """
    prefix = f"{source}: " if source else ""

    if middleware_attr is None:
        return ()
    if callable(middleware_attr) and not isinstance(middleware_attr, (list, tuple)):
        stack: tuple[Callable[..., Any], ...] = (middleware_attr,)
    elif isinstance(middleware_attr, (list, tuple)):
        stack = tuple(middleware_attr)
    else:
        raise MiddlewareValidationError(
            f"{prefix}middleware must be a list or callable, "
            f"got {type(middleware_attr).__name__}"
        )

    for i, mw in enumerate(stack):
        if not callable(mw):
            raise MiddlewareValidationError(f"{prefix}non-callable middleware at index {i}")
        if not inspect.iscoroutinefunction(mw):
            raise MiddlewareValidationError(
                f"{prefix}middleware at index {i} must be async, "
                f"got sync function {getattr(mw, '__name__', type(mw).__name__)}"
            )
    return stack


def build_middleware_chain(
    handler: Callable[..., Any],
    middleware_stack: Sequence[Callable[..., Any]],
) -> Callable[..., Any]:
    """Wrap a handler function with a middleware chain.

    Composes middleware in order so that the first middleware in the list
    is the outermost (executes first). Each middleware receives (request, call_next)
    where call_next invokes the next middleware or handler.

    Args:
        handler: The route handler function.
        middleware_stack: Ordered sequence of middleware (outermost first).

    Returns:
        A wrapped handler function that executes the middleware chain.
        If middleware_stack is empty, returns the handler unchanged.
    """
    if not middleware_stack:
        return handler

    # Build chain from inside out (last middleware wraps handler first)
    chain = handler
    for mw in reversed(middleware_stack):
        chain = _wrap_with_middleware(chain, mw)
    return chain


def _wrap_with_middleware(
    next_handler: Callable[..., Any],
    middleware: Callable[..., Any],
) -> Callable[..., Any]:
    """Wrap a handler with a single middleware function.

    Args:
        next_handler: The next function in the chain (middleware or handler).
        middleware: The middleware function with signature (request, call_next).

    Returns:
        A new async function that calls middleware(request, call_next).
    """

    async def wrapped(request: Any) -> Any:
        async def call_next(req: Any) -> Any:
            return await next_handler(req)

        return await middleware(request, call_next)

    wrapped.__name__ = (
        f"{middleware.__name__}_wrapping_{getattr(next_handler, '__name__', 'handler')}"
    )
    wrapped.__qualname__ = wrapped.__name__

    return wrapped


def install_middleware(
    app: FastAPI,
    middleware_stack: Sequence[Callable[..., Any]],
) -> None:
    """Run a middleware chain around every request the app receives.

    The chain is registered as a single HTTP middleware, outside routing
    and outside FastAPI's exception handlers. Unknown paths, unsupported
    methods and requests that fail parameter or body parsing therefore
    pass through the chain too, and their 404/405/422 responses come back
    through it like any other response.

    Args:
        app: The application to install the chain on.
        middleware_stack: Ordered sequence of middleware (outermost first).
    """
    stack = tuple(middleware_stack)
    if not stack:
        return

    async def run_chain(request: Any, call_next: Callable[..., Any]) -> Any:
        return await build_middleware_chain(call_next, stack)(request)

    app.middleware("http")(run_chain)
