"""This module handles administrator sign-in and sessions."""

from collections.abc import MutableMapping
from datetime import datetime, timezone
from typing import Any

from caritas_sobral.exceptions.errors import AuthenticationError, ValidationFailedError
from caritas_sobral.models.users import AuthSession, User
from caritas_sobral.providers.auth_state import AuthEvent, AuthStateEvent, AuthStateNotifier
from caritas_sobral.providers.logging import Logger, LoggingProvider
from caritas_sobral.repositories.users import UsersRepository
from caritas_sobral.services.remote import remote_operation
from passlib.context import CryptContext
from pydantic import ValidationError

SESSION_KEY = "auth"
INVALID_CREDENTIALS_MESSAGE = "E-mail ou senha inválidos."

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    """Hashes a password with bcrypt."""
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Checks a password against its bcrypt hash."""
    return pwd_context.verify(password, password_hash)


class AuthService:
    """Signs administrators in and out.

    The session is a mapping backed by the signed session cookie. Every
    change is published through the `AuthStateNotifier`.
    """

    logger: Logger

    def __init__(self, repository: UsersRepository, notifier: AuthStateNotifier) -> None:
        self.logger = LoggingProvider().get_logger()
        self.repository = repository
        self.notifier = notifier

    def sign_in(self, session: MutableMapping[str, Any], email: str, password: str) -> AuthSession:
        """Checks the credentials and opens a session.

        Args:
            session: The request session.
            email: The submitted e-mail.
            password: The submitted password.

        Returns:
            The new session.

        Raises:
            AuthenticationError: If the credentials do not match an account.
            RemoteOperationError: If the database fails.
        """
        if not email.strip() or not password:
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

        with remote_operation("entrar"):
            user = self.repository.get_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            self.logger.warning(f"Failed sign-in attempt for {email.strip()!r}.")
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

        auth_session = AuthSession(
            user_id=user.id,
            email=user.email,
            name=user.name,
            signed_in_at=datetime.now(timezone.utc),
        )
        session.clear()
        session[SESSION_KEY] = auth_session.model_dump(mode="json")
        self.logger.info(f"User {user.email} signed in.")
        self.notifier.publish(AuthStateEvent(AuthEvent.SIGNED_IN, user.email))
        return auth_session

    def sign_out(self, session: MutableMapping[str, Any]) -> None:
        """Closes the session, if any."""
        current = self.get_current_session(session)
        session.pop(SESSION_KEY, None)
        if current is not None:
            self.logger.info(f"User {current.email} signed out.")
            self.notifier.publish(AuthStateEvent(AuthEvent.SIGNED_OUT, current.email))

    def get_current_session(self, session: MutableMapping[str, Any]) -> AuthSession | None:
        """Reads the session stored in the cookie.

        Args:
            session: The request session.

        Returns:
            The current session, or None when signed out. A damaged session
            entry is discarded and reported as an expired session.
        """
        raw = session.get(SESSION_KEY)
        if raw is None:
            return None
        try:
            return AuthSession.model_validate(raw)
        except ValidationError:
            self.logger.warning("Discarding an unreadable session.")
            session.pop(SESSION_KEY, None)
            self.notifier.publish(AuthStateEvent(AuthEvent.SESSION_EXPIRED))
            return None

    def create_user(self, email: str, name: str, password: str) -> User:
        """Creates an administrator account.

        Raises:
            ValidationFailedError: If a field is blank, the password is too
                short or the e-mail is already registered.
            RemoteOperationError: If the database fails.
        """
        errors: dict[str, str] = {}
        if "@" not in email:
            errors["email"] = "E-mail inválido."
        if not name.strip():
            errors["name"] = "Campo obrigatório."
        if len(password) < 8:
            errors["password"] = "A senha deve ter pelo menos 8 caracteres."
        if errors:
            raise ValidationFailedError(errors)

        with remote_operation("criar o usuário"):
            if self.repository.get_by_email(email) is not None:
                raise ValidationFailedError({"email": "Já existe um usuário com este e-mail."})
            return self.repository.create(email, name.strip(), hash_password(password))
