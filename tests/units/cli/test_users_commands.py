"""Tests for the users command group."""

from unittest.mock import MagicMock, patch
from uuid import uuid4

from caritas_sobral.cli.users import users_group
from caritas_sobral.exceptions.errors import RemoteOperationError, ValidationFailedError
from caritas_sobral.models.users import User
from click.testing import CliRunner

ARGS = ["create", "--email", "admin@caritas.org", "--name", "Admin", "--password", "segredo123"]


@patch("caritas_sobral.cli.users.DatabaseManager.release_engine")
@patch("caritas_sobral.cli.users.build_auth_service")
def test_create_user(mock_build: MagicMock, mock_release: MagicMock) -> None:
    """A new administrator is created."""
    # Arrange
    mock_build.return_value.create_user.return_value = User(
        id=uuid4(), email="admin@caritas.org", name="Admin", password_hash="hash"
    )

    # Act
    result = CliRunner().invoke(users_group, ARGS)

    # Assert
    assert result.exit_code == 0
    assert "User admin@caritas.org created." in result.output
    mock_build.return_value.create_user.assert_called_once_with("admin@caritas.org", "Admin", "segredo123")
    mock_release.assert_called_once()


@patch("caritas_sobral.cli.users.DatabaseManager.release_engine")
@patch("caritas_sobral.cli.users.build_auth_service")
def test_create_user_validation_error(mock_build: MagicMock, mock_release: MagicMock) -> None:
    """Field errors are printed and the command aborts."""
    mock_build.return_value.create_user.side_effect = ValidationFailedError(
        {"password": "A senha deve ter pelo menos 8 caracteres."}
    )

    result = CliRunner().invoke(users_group, ARGS)

    assert result.exit_code == 1
    assert "password: A senha deve ter pelo menos 8 caracteres." in result.output
    mock_release.assert_called_once()


@patch("caritas_sobral.cli.users.DatabaseManager.release_engine")
@patch("caritas_sobral.cli.users.build_auth_service")
def test_create_user_database_error(mock_build: MagicMock, mock_release: MagicMock) -> None:
    """Database failures abort the command."""
    mock_build.return_value.create_user.side_effect = RemoteOperationError("Erro ao criar o usuário: offline")

    result = CliRunner().invoke(users_group, ARGS)

    assert result.exit_code == 1
    assert "Erro ao criar o usuário: offline" in result.output


@patch("caritas_sobral.cli.users.DatabaseManager.release_engine")
@patch("caritas_sobral.cli.users.build_auth_service")
def test_create_user_prompts_for_password(mock_build: MagicMock, mock_release: MagicMock) -> None:
    """The password is prompted twice when not given."""
    mock_build.return_value.create_user.return_value = User(
        id=uuid4(), email="admin@caritas.org", name="Admin", password_hash="hash"
    )

    result = CliRunner().invoke(
        users_group, ["create", "--email", "admin@caritas.org", "--name", "Admin"], input="segredo123\nsegredo123\n"
    )

    assert result.exit_code == 0
    mock_build.return_value.create_user.assert_called_once_with("admin@caritas.org", "Admin", "segredo123")
