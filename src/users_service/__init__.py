"""In-memory users CRUD service built on FastAPI."""

# Primary API
from users_service.app import create_app
from users_service.config import Settings, get_settings

# Core types
from users_service.core.middleware import build_middleware_chain, normalize_middleware
from users_service.core.models import User, UserPayload
from users_service.core.store import UserStore
from users_service.core.validation import validate_user

# Exceptions
from users_service.exceptions import (
    MiddlewareValidationError,
    UserNotFoundError,
    UsersServiceError,
    UserValidationError,
)

__all__ = [
    # Primary API
    "create_app",
    "Settings",
    "get_settings",
    # Core types
    "User",
    "UserPayload",
    "UserStore",
    "build_middleware_chain",
    "normalize_middleware",
    "validate_user",
    # Exceptions
    "MiddlewareValidationError",
    "UserNotFoundError",
    "UserValidationError",
    "UsersServiceError",
]

__version__ = "1.0.0"
