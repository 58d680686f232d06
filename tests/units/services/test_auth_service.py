"""Unit tests for the AuthService."""

from unittest.mock import MagicMock, patch
from uuid import uuid4

import pytest
from caritas_sobral.exceptions.errors import AuthenticationError, ValidationFailedError
from caritas_sobral.models.users import User
from caritas_sobral.providers.auth_state import AuthEvent, AuthStateNotifier
from caritas_sobral.services.auth import SESSION_KEY, AuthService, hash_password, verify_password


@pytest.fixture(scope="module")
def password_hash() -> str:
    """Hashes the test password once, bcrypt being slow on purpose."""
    return hash_password("segredo123")


@pytest.fixture
def repository(password_hash: str) -> MagicMock:
    """Fixture for a users repository holding one administrator."""
    repository = MagicMock()
    repository.get_by_email.return_value = User(
        id=uuid4(), email="admin@caritas.org", name="Admin", password_hash=password_hash
    )
    return repository


@pytest.fixture
def events() -> list:
    """Collects the published auth events."""
    return []


@pytest.fixture
def service(repository: MagicMock, events: list) -> AuthService:
    """Fixture for the service under test, with a recording listener."""
    notifier = AuthStateNotifier()
    notifier.subscribe(events.append)
    return AuthService(repository, notifier)


def test_password_hashing(password_hash: str) -> None:
    """Hashes verify only against the original password."""
    assert password_hash != "segredo123"
    assert verify_password("segredo123", password_hash)
    assert not verify_password("outra", password_hash)


def test_sign_in_stores_session(service: AuthService, events: list) -> None:
    """A successful sign-in fills the session and publishes an event."""
    # Arrange
    session = {"stale": True}

    # Act
    auth_session = service.sign_in(session, "admin@caritas.org", "segredo123")

    # Assert
    assert "stale" not in session
    assert session[SESSION_KEY]["email"] == "admin@caritas.org"
    assert auth_session.name == "Admin"
    assert [event.event for event in events] == [AuthEvent.SIGNED_IN]


def test_sign_in_wrong_password(service: AuthService, events: list) -> None:
    """Wrong passwords are rejected with a generic message."""
    session: dict = {}

    with pytest.raises(AuthenticationError, match="E-mail ou senha inválidos"):
        service.sign_in(session, "admin@caritas.org", "errada")

    assert session == {}
    assert events == []


def test_sign_in_unknown_user(service: AuthService, repository: MagicMock) -> None:
    """Unknown e-mails get the same message as wrong passwords."""
    repository.get_by_email.return_value = None

    with pytest.raises(AuthenticationError, match="E-mail ou senha inválidos"):
        service.sign_in({}, "ninguem@caritas.org", "segredo123")


def test_sign_in_blank_fields_skip_the_database(service: AuthService, repository: MagicMock) -> None:
    """Blank credentials never reach the database."""
    with pytest.raises(AuthenticationError):
        service.sign_in({}, " ", "")

    repository.get_by_email.assert_not_called()


def test_sign_out(service: AuthService, events: list) -> None:
    """Signing out clears the session and publishes an event."""
    session: dict = {}
    service.sign_in(session, "admin@caritas.org", "segredo123")

    service.sign_out(session)

    assert SESSION_KEY not in session
    assert events[-1].event is AuthEvent.SIGNED_OUT


def test_damaged_session_is_discarded(service: AuthService, events: list) -> None:
    """An unreadable session entry counts as expired."""
    session = {SESSION_KEY: {"email": "x"}}

    assert service.get_current_session(session) is None
    assert SESSION_KEY not in session
    assert events[-1].event is AuthEvent.SESSION_EXPIRED


def test_create_user_validates_fields(service: AuthService, repository: MagicMock) -> None:
    """Invalid account data is rejected field by field."""
    with pytest.raises(ValidationFailedError) as exc_info:
        service.create_user("invalido", " ", "curta")

    assert set(exc_info.value.errors) == {"email", "name", "password"}
    repository.create.assert_not_called()


def test_create_user_rejects_duplicate_email(service: AuthService, repository: MagicMock) -> None:
    """An e-mail can only be registered once."""
    with pytest.raises(ValidationFailedError) as exc_info:
        service.create_user("admin@caritas.org", "Outro", "segredo123")

    assert "email" in exc_info.value.errors


@patch("caritas_sobral.services.auth.hash_password", return_value="hashed")
def test_create_user(mock_hash: MagicMock, service: AuthService, repository: MagicMock) -> None:
    """A new account is stored with the hashed password."""
    repository.get_by_email.return_value = None

    service.create_user("nova@caritas.org", " Nova ", "segredo123")

    repository.create.assert_called_once_with("nova@caritas.org", "Nova", "hashed")
    mock_hash.assert_called_once_with("segredo123")
