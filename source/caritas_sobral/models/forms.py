"""This module provides helpers shared by the form payload models."""

from typing import Any

from pydantic import ValidationError

REQUIRED_MESSAGE = "Campo obrigatório."


def blank_to_none(value: Any) -> Any:
    """Turns empty or whitespace-only form values into None.

    HTML forms submit every field, so an untouched optional input arrives as
    an empty string instead of being absent.

    Args:
        value: The raw submitted value.

    Returns:
        None for blank strings, the stripped string for other strings and the
        value unchanged otherwise.
    """
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


def field_errors(exc: ValidationError) -> dict[str, str]:
    """Flattens a pydantic validation error into one message per field.

    Messages raised by our own validators are shown as written; pydantic's
    built-in messages are replaced by generic Portuguese ones.

    Args:
        exc: The validation error.

    Returns:
        A mapping of field names to messages. Only the first error of each
        field is kept.
    """
    errors: dict[str, str] = {}
    for error in exc.errors():
        location = error.get("loc") or ("__root__",)
        field = str(location[0])
        if field in errors:
            continue
        error_type = error.get("type", "")
        if error_type == "missing":
            message = REQUIRED_MESSAGE
        elif error_type == "value_error":
            message = str(error.get("ctx", {}).get("error", error.get("msg", "")))
        elif error_type.startswith(("date_", "datetime_")):
            message = "Data inválida."
        elif error_type.startswith(("decimal_", "float_", "int_")):
            message = "Número inválido."
        elif error_type == "enum":
            message = "Selecione uma opção válida."
        else:
            message = str(error.get("msg", "Valor inválido."))
        errors[field] = message
    return errors
