"""This module defines the 'users' command group."""

import click
from caritas_sobral.exceptions.errors import RemoteOperationError, ValidationFailedError
from caritas_sobral.providers.auth_state import AuthStateNotifier
from caritas_sobral.providers.database import DatabaseManager
from caritas_sobral.repositories.users import UsersRepository
from caritas_sobral.services import AuthService


def build_auth_service() -> AuthService:
    """Builds the authentication service bound to the configured database."""
    return AuthService(UsersRepository(DatabaseManager.get_engine()), AuthStateNotifier())


@click.group("users")
def users_group() -> None:
    """Groups commands related to administrator accounts."""
    pass


@users_group.command("create")
@click.option("--email", required=True, help="The administrator's e-mail.")
@click.option("--name", required=True, help="The administrator's display name.")
@click.password_option(help="The administrator's password.")
def create_user(email: str, name: str, password: str) -> None:
    """Creates an administrator account for the admin area.

    Args:
        email: The administrator's e-mail.
        name: The administrator's display name.
        password: The administrator's password.
    """
    service = build_auth_service()
    try:
        user = service.create_user(email, name, password)
    except ValidationFailedError as e:
        for field, message in e.errors.items():
            click.secho(f"{field}: {message}", fg="red")
        raise click.Abort() from e
    except RemoteOperationError as e:
        click.secho(str(e), fg="red")
        raise click.Abort() from e
    finally:
        DatabaseManager.release_engine()
    click.secho(f"User {user.email} created.", fg="green")
