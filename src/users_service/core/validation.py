"""Presence and format checks for user payloads."""

from users_service.exceptions import UserValidationError

NAME_REQUIRED = "Name is required."
EMAIL_REQUIRED = "Valid email is required."


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_user(name: str | None, email: str | None) -> None:
    """Check that a name and email are acceptable for a user record.

    The name is checked first, so a payload failing both checks reports
    the name error.

    Args:
        name: Candidate name. Must contain a non-whitespace character.
        email: Candidate email. Must be non-blank and contain "@".

    Raises:
        UserValidationError: With the client-facing message of the first
            failing check.
    """
    if _is_blank(name):
        raise UserValidationError(NAME_REQUIRED)
    if email is None or not email.strip() or "@" not in email:
        raise UserValidationError(EMAIL_REQUIRED)
