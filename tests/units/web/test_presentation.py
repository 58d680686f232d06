"""Unit tests for the presentation helpers."""

from unittest.mock import MagicMock

from caritas_sobral.models.editais import EditalStatus
from caritas_sobral.models.pagination import Page
from caritas_sobral.web.flash import flash, pop_flashed_messages
from caritas_sobral.web.presentation import pagination, parse_bool, parse_enum
from caritas_sobral.web.templates_config import estado_label


def test_pagination_summary() -> None:
    """The partial receives page, pages, total and neighbours."""
    page = Page(items=[], count=25, page=2, page_size=10)

    assert pagination(page) == {"page": 2, "pages": 3, "total": 25, "has_next": True, "has_prev": True}


def test_pagination_empty_listing() -> None:
    """An empty listing still has one page."""
    assert pagination(Page(items=[], count=0, page=1, page_size=10))["pages"] == 1


def test_parse_enum() -> None:
    """Known values are parsed; unknown or empty ones are ignored."""
    assert parse_enum(EditalStatus, "Cancelado") is EditalStatus.CANCELLED
    assert parse_enum(EditalStatus, "Arquivado") is None
    assert parse_enum(EditalStatus, "") is None


def test_parse_bool() -> None:
    """Only "true" and "false" are filters."""
    assert parse_bool("true") is True
    assert parse_bool("false") is False
    assert parse_bool("") is None


def test_estado_label() -> None:
    """Conditions are shown by their display name."""
    assert estado_label("inservivel") == "Inservível"
    assert estado_label("desconhecido") == "desconhecido"
    assert estado_label(None) == "—"


def test_flash_messages_are_popped_once() -> None:
    """Flashed messages are shown a single time."""
    request = MagicMock()
    request.session = {}
    request.scope = {"session": request.session}

    flash(request, "Salvo")
    flash(request, "Falhou", "error")

    assert pop_flashed_messages(request) == [
        {"message": "Salvo", "category": "success"},
        {"message": "Falhou", "category": "error"},
    ]
    assert pop_flashed_messages(request) == []


def test_flash_without_session() -> None:
    """Pages rendered outside the session middleware have no messages."""
    request = MagicMock()
    request.scope = {}

    assert pop_flashed_messages(request) == []
