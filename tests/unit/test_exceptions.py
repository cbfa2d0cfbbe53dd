"""Unit tests for exception hierarchy."""

import pytest

from users_service.exceptions import (
    MiddlewareValidationError,
    UserNotFoundError,
    UsersServiceError,
    UserValidationError,
)


class TestUsersServiceError:
    def test_inherits_from_exception(self) -> None:
        assert issubclass(UsersServiceError, Exception)

    def test_message_is_preserved(self) -> None:
        assert str(UsersServiceError("specific error details")) == "specific error details"


@pytest.mark.parametrize(
    "exc_class",
    [UserValidationError, UserNotFoundError, MiddlewareValidationError],
)
def test_subclasses_caught_by_base(exc_class: type[Exception]) -> None:
    assert issubclass(exc_class, UsersServiceError)


def test_validation_error_carries_message() -> None:
    error = UserValidationError("Name is required.")
    assert error.message == "Name is required."
    assert str(error) == "Name is required."


def test_not_found_error_carries_id() -> None:
    error = UserNotFoundError(42)
    assert error.user_id == 42
    assert str(error) == "User 42 not found"
