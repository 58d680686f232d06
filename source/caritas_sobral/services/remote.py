"""This module turns backend failures into `RemoteOperationError`s."""

from collections.abc import Generator
from contextlib import contextmanager

from caritas_sobral.exceptions.errors import RemoteOperationError
from caritas_sobral.providers.logging import LoggingProvider
from google.api_core.exceptions import GoogleAPIError
from sqlalchemy.exc import SQLAlchemyError


@contextmanager
def remote_operation(action: str) -> Generator[None, None, None]:
    """Wraps a call to the database or the object storage.

    Args:
        action: A short description of the operation, shown to the user,
            such as "salvar o edital".

    Yields:
        None.

    Raises:
        RemoteOperationError: If the backend reported a failure. The original
            exception is chained and its message is kept.
    """
    try:
        yield
    except (SQLAlchemyError, GoogleAPIError) as e:
        LoggingProvider().get_logger().error(f"Failed to {action}: {e}", exc_info=True)
        detail = getattr(e, "orig", None) or getattr(e, "message", None) or e
        raise RemoteOperationError(f"Erro ao {action}: {detail}") from e
