"""Application factory for the users service."""

import logging

from fastapi import FastAPI
from starlette.middleware.httpsredirect import HTTPSRedirectMiddleware

from users_service.api.users import create_users_router
from users_service.config import Settings, get_settings
from users_service.core.middleware import install_middleware, normalize_middleware
from users_service.core.store import UserStore
from users_service.middleware import default_middleware

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    *,
    store: UserStore | None = None,
) -> FastAPI:
    """Build a FastAPI instance serving the users API.

    Args:
        settings: Settings to use. Defaults to ``get_settings()``.
        store: Store backing the API. Defaults to a fresh store holding
            the two seed users.

    Returns:
        The configured application. The store is available as
        ``app.state.store``.

    Example:
        app = create_app(Settings(environment="development"))
    """
    settings = settings or get_settings()

    docs_enabled = settings.is_development
    application = FastAPI(
        title="Users Service",
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )
    application.state.settings = settings
    application.state.store = store if store is not None else UserStore()

    application.include_router(create_users_router())

    # Every request, routed or not, passes through logging, auth and error-catch
    stack = normalize_middleware(default_middleware(settings.api_token), source="users app")
    install_middleware(application, stack)

    # Added last so it runs outermost, ahead of the chain
    if settings.https_redirect:
        application.add_middleware(HTTPSRedirectMiddleware)

    logger.info(
        "Application created",
        extra={
            "environment": settings.environment,
            "docs_enabled": docs_enabled,
            "https_redirect": settings.https_redirect,
        },
    )
    return application
