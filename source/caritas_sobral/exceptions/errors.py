"""This module defines the custom exceptions raised by the application.

Services raise these exceptions; the web layer maps each of them to a
response (a redirect with a flash message, a re-rendered form or a 404
page).
"""


class CaritasError(Exception):
    """Base exception for every expected failure of the application."""

    pass


class NotFoundError(CaritasError):
    """Raised when a requested record does not exist."""

    def __init__(self, entity: str, identifier: object) -> None:
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} {identifier} não encontrado(a).")


class ValidationFailedError(CaritasError):
    """Raised when submitted form data is invalid.

    Attributes:
        errors: A mapping of form field names to human-readable messages.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = errors
        super().__init__("; ".join(f"{field}: {message}" for field, message in errors.items()))


class UploadError(CaritasError):
    """Raised when an uploaded file is rejected or cannot be stored."""

    pass


class RemoteOperationError(CaritasError):
    """Raised when the database or the object storage reports a failure."""

    pass


class AuthenticationError(CaritasError):
    """Raised when the provided credentials are not valid."""

    pass


class LoginRequiredError(CaritasError):
    """Raised when an admin page is requested without a valid session."""

    pass
