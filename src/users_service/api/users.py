"""User CRUD endpoints."""

import logging
from collections.abc import Callable
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request, Response
from starlette.responses import JSONResponse

from users_service.core.models import User, UserPayload
from users_service.core.store import UserStore
from users_service.core.validation import validate_user
from users_service.exceptions import UserNotFoundError, UserValidationError

logger = logging.getLogger(__name__)

PROBLEM_TYPE = "https://tools.ietf.org/html/rfc9110#section-15.6.1"
PROBLEM_TITLE = "An error occurred while processing your request."


def get_store(request: Request) -> UserStore:
    """Return the store owned by the running application."""
    return request.app.state.store


StoreDep = Annotated[UserStore, Depends(get_store)]


def problem_response(detail: str, status_code: int = 500) -> JSONResponse:
    """Build an RFC 9457 problem response carrying ``detail``."""
    return JSONResponse(
        {
            "type": PROBLEM_TYPE,
            "title": PROBLEM_TITLE,
            "status": status_code,
            "detail": detail,
        },
        status_code=status_code,
        media_type="application/problem+json",
    )


def _bad_request(exc: UserValidationError) -> JSONResponse:
    # Body is the bare message as a JSON string
    return JSONResponse(exc.message, status_code=400)


async def list_users(store: StoreDep) -> list[User]:
    """List all users."""
    return store.list_users()


async def get_user(user_id: int, store: StoreDep) -> User | Response:
    """Get a user by ID."""
    try:
        return store.get(user_id)
    except UserNotFoundError:
        return Response(status_code=404)
    except Exception as exc:
        logger.warning("Failed to retrieve user", extra={"user_id": user_id}, exc_info=True)
        return problem_response(f"Error retrieving user: {exc}")


async def create_user(payload: UserPayload, response: Response, store: StoreDep) -> User | Response:
    """Create a new user."""
    try:
        validate_user(payload.name, payload.email)
    except UserValidationError as exc:
        return _bad_request(exc)

    user = store.create(payload.name, payload.email)
    response.headers["Location"] = f"/users/{user.id}"
    logger.info("Created user", extra={"user_id": user.id})
    return user


async def update_user(user_id: int, payload: UserPayload, store: StoreDep) -> User | Response:
    """Replace a user's name and email."""
    try:
        store.get(user_id)
    except UserNotFoundError:
        return Response(status_code=404)

    try:
        validate_user(payload.name, payload.email)
    except UserValidationError as exc:
        return _bad_request(exc)

    try:
        return store.update(user_id, payload.name, payload.email)
    except UserNotFoundError:
        # Deleted between the lookup and the update
        return Response(status_code=404)


async def delete_user(user_id: int, store: StoreDep) -> Response:
    """Delete a user."""
    try:
        store.delete(user_id)
    except UserNotFoundError:
        return Response(status_code=404)
    except Exception as exc:
        logger.warning("Failed to delete user", extra={"user_id": user_id}, exc_info=True)
        return problem_response(f"Error deleting user: {exc}")
    logger.info("Deleted user", extra={"user_id": user_id})
    return Response(status_code=204)


# (path, method, handler, response_model, status_code)
_ROUTES: tuple[tuple[str, str, Callable[..., Any], Any, int], ...] = (
    ("", "get", list_users, list[User], 200),
    ("/{user_id}", "get", get_user, User, 200),
    ("", "post", create_user, User, 201),
    ("/{user_id}", "put", update_user, User, 200),
    ("/{user_id}", "delete", delete_user, None, 204),
)


def create_users_router(*, prefix: str = "/users") -> APIRouter:
    """Create the APIRouter exposing user CRUD.

    The router carries no middleware of its own; authentication, logging
    and fault handling are installed on the application.

    Args:
        prefix: URL prefix for the collection.

    Returns:
        An APIRouter with the five user routes registered.

    Example:
        from fastapi import FastAPI
        from users_service.api.users import create_users_router

        app = FastAPI()
        app.state.store = UserStore()
        app.include_router(create_users_router())
    """
    router = APIRouter(prefix=prefix)
    for path, method, handler, response_model, status_code in _ROUTES:
        router.add_api_route(
            path=path,
            endpoint=handler,
            methods=[method.upper()],
            tags=["users"],
            description=handler.__doc__,
            response_model=response_model,
            status_code=status_code,
        )

    logger.info(
        "Route registration complete",
        extra={"route_count": len(_ROUTES), "prefix": prefix or "(none)"},
    )
    return router
