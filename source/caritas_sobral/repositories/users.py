"""This module defines the repository for administrator accounts."""

from caritas_sobral.models.users import User
from caritas_sobral.providers.logging import Logger, LoggingProvider
from sqlalchemy import Engine, text


class UsersRepository:
    """Handles database operations for the `users` table.

    Args:
        engine: An SQLAlchemy Engine instance for database communication.
    """

    logger: Logger
    engine: Engine

    def __init__(self, engine: Engine) -> None:
        self.logger = LoggingProvider().get_logger()
        self.engine = engine

    def get_by_email(self, email: str) -> User | None:
        """Fetches an account by e-mail, ignoring case.

        Args:
            email: The e-mail address.

        Returns:
            The account, or None.
        """
        sql = text(
            """
            SELECT id, email, name, password_hash, created_at
            FROM users
            WHERE LOWER(email) = LOWER(:email);
            """
        )
        with self.engine.connect() as conn:
            row = conn.execute(sql, {"email": email.strip()}).mappings().first()
        return User.model_validate(dict(row)) if row else None

    def create(self, email: str, name: str, password_hash: str) -> User:
        """Inserts a new account.

        Args:
            email: The e-mail address, stored lowercase.
            name: The display name.
            password_hash: The bcrypt hash of the password.

        Returns:
            The stored account.
        """
        self.logger.info(f"Creating user {email}.")
        sql = text(
            """
            INSERT INTO users (email, name, password_hash)
            VALUES (:email, :name, :password_hash)
            RETURNING id, email, name, password_hash, created_at;
            """
        )
        params = {"email": email.strip().lower(), "name": name, "password_hash": password_hash}
        with self.engine.connect() as conn:
            row = conn.execute(sql, params).mappings().one()
            conn.commit()
        return User.model_validate(dict(row))
