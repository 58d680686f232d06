"""Helpers that adapt requests and service results to the templates."""

from enum import Enum
from typing import Any, TypeVar

from caritas_sobral.models.pagination import Page
from caritas_sobral.services.uploads import UploadedFile
from fastapi import Request
from starlette.datastructures import UploadFile

E = TypeVar("E", bound=Enum)


def pagination(page: Page[Any]) -> dict[str, Any]:
    """Summarizes a page for the pagination partial.

    Args:
        page: A page returned by a service.

    Returns:
        A dictionary with the current page, the number of pages, the total
        number of rows and whether previous and next pages exist.
    """
    return {
        "page": page.page,
        "pages": page.total_pages,
        "total": page.count,
        "has_next": page.has_next,
        "has_prev": page.has_prev,
    }


def parse_enum(enum_type: type[E], value: str | None) -> E | None:
    """Reads an optional enum filter from the query string.

    Unknown values are ignored rather than rejected, so a stale bookmark
    still shows the unfiltered list.
    """
    if not value:
        return None
    try:
        return enum_type(value)
    except ValueError:
        return None


def parse_bool(value: str | None) -> bool | None:
    """Reads an optional "true"/"false" filter from the query string."""
    if value == "true":
        return True
    if value == "false":
        return False
    return None


async def read_form(request: Request, file_fields: tuple[str, ...] = ()) -> tuple[dict[str, Any], dict[str, Any]]:
    """Reads a submitted form, separating its text fields from its files.

    Args:
        request: The current request.
        file_fields: The names of the file inputs.

    Returns:
        The text fields, and a mapping of each file input to an
        `UploadedFile`, or None when no file was chosen.
    """
    form = await request.form()
    data: dict[str, Any] = {}
    files: dict[str, UploadedFile | None] = {name: None for name in file_fields}
    for key, value in form.multi_items():
        if isinstance(value, UploadFile):
            if key in files and value.filename:
                content = await value.read()
                files[key] = UploadedFile(filename=value.filename, content=content) if content else None
            continue
        data[key] = value
    return data, files
