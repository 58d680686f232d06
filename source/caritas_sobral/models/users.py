"""This module defines the models for administrator accounts and sessions."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel


class User(BaseModel):
    """An administrator account read from the database."""

    id: UUID
    email: str
    name: str
    password_hash: str
    created_at: datetime | None = None


class AuthSession(BaseModel):
    """The authenticated state stored in the signed session cookie.

    Attributes:
        user_id: The signed-in user.
        email: The user's e-mail, shown in the admin header.
        name: The user's display name.
        signed_in_at: When the session started (UTC).
    """

    user_id: UUID
    email: str
    name: str
    signed_in_at: datetime
