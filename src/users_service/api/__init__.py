"""HTTP routers for the users service."""

from users_service.api.users import create_users_router

__all__ = ["create_users_router"]
