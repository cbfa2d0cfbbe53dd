"""Exception hierarchy for the users service."""


class UsersServiceError(Exception):
    """Base exception for all users service errors.

    Catching this exception will catch every error raised by the
    ``users_service`` package itself.

    Example:
        try:
            store.update(user_id, payload)
        except UsersServiceError as e:
            logger.error(f"Update failed: {e}")
    """


class UserValidationError(UsersServiceError):
    """Raised when a user payload fails the name/email checks.

    The message is client-facing and is returned verbatim as the body
    of the 400 response.

    Example:
        UserValidationError("Valid email is required.")
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UserNotFoundError(UsersServiceError):
    """Raised when no user record has the requested id.

    Example:
        UserNotFoundError(999)
    """

    def __init__(self, user_id: int) -> None:
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id


class MiddlewareValidationError(UsersServiceError):
    """Raised when middleware configuration is invalid.

    This exception is raised at application build time when:
        - A middleware value is not a callable, list or tuple
        - A middleware list contains a non-callable
        - Middleware is not async

    Example:
        MiddlewareValidationError(
            "Middleware at index 1 must be async, got sync function log_requests"
        )
    """
