"""User record and request payload models."""

from pydantic import BaseModel


class User(BaseModel):
    """A stored user record.

    Attributes:
        id: Store-assigned identifier, unique and never changed after creation.
        name: Display name.
        email: Contact address.
    """

    id: int
    name: str | None = None
    email: str | None = None


class UserPayload(BaseModel):
    """Body accepted by create and update.

    Any ``id`` sent by the client is ignored; unknown fields are dropped.
    Missing fields default to None so the handler, not the framework,
    decides which message to return.
    """

    name: str | None = None
    email: str | None = None
