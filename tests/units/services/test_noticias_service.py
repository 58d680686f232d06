"""Unit tests for the NoticiasService."""

from unittest.mock import MagicMock
from uuid import uuid4

import pytest
from caritas_sobral.exceptions.errors import NotFoundError, ValidationFailedError
from caritas_sobral.services.noticias import NoticiasService
from caritas_sobral.services.uploads import UploadedFile

from tests.units.services.conftest import make_noticia


@pytest.fixture
def repository() -> MagicMock:
    """Fixture for a mocked noticias repository."""
    return MagicMock()


@pytest.fixture
def service(repository: MagicMock, mock_upload_service: MagicMock, passthrough_cache: MagicMock) -> NoticiasService:
    """Fixture for the service under test."""
    return NoticiasService(repository, mock_upload_service, passthrough_cache)


def form_data(**overrides: str) -> dict[str, str]:
    """Builds a submitted news form."""
    data = {
        "titulo": "Feira solidária",
        "resumo": "Resumo da feira",
        "conteudo": "<p>Texto</p><script>x()</script>",
        "url": "",
        "data_publicacao": "2025-05-01",
        "ativo": "true",
    }
    data.update(overrides)
    return data


def test_create_sanitizes_and_normalizes(
    service: NoticiasService, repository: MagicMock, passthrough_cache: MagicMock
) -> None:
    """The body is sanitized and the URL made absolute before saving."""
    service.create(form_data(url="caritas.org.br/noticia"), None)

    values = repository.create.call_args.args[0]
    assert values["conteudo"] == "<p>Texto</p>"
    assert values["url"] == "https://caritas.org.br/noticia"
    assert values["imagem_url"] is None
    passthrough_cache.invalidate.assert_called_once_with("noticias")


def test_create_uploads_image(service: NoticiasService, repository: MagicMock, mock_upload_service: MagicMock) -> None:
    """A cover image is uploaded and its URL stored."""
    mock_upload_service.upload_noticia_image.return_value = "https://storage/capa.png"

    service.create(form_data(), UploadedFile("capa.png", b"\x89PNG"))

    assert repository.create.call_args.args[0]["imagem_url"] == "https://storage/capa.png"


def test_create_validates_title_and_summary(service: NoticiasService, repository: MagicMock) -> None:
    """Short titles and summaries are rejected."""
    with pytest.raises(ValidationFailedError) as exc_info:
        service.create(form_data(titulo="ab", resumo="abc"), None)

    assert set(exc_info.value.errors) == {"titulo", "resumo"}
    repository.create.assert_not_called()


def test_toggle_active(service: NoticiasService, repository: MagicMock) -> None:
    """Toggling flips the visibility."""
    noticia = make_noticia(ativo=True)
    repository.get_by_id.return_value = noticia

    assert service.toggle_active(noticia.id) is False
    repository.set_active.assert_called_once_with(noticia.id, False)


def test_get_hidden_on_public_page(service: NoticiasService, repository: MagicMock) -> None:
    """A hidden article is reported missing on public pages."""
    repository.get_by_id.return_value = None
    noticia_id = uuid4()

    with pytest.raises(NotFoundError):
        service.get(noticia_id, only_active=True)

    repository.get_by_id.assert_called_once_with(noticia_id, only_active=True)


def test_list_carousel(service: NoticiasService, repository: MagicMock) -> None:
    """The carousel reads the most recent visible articles."""
    repository.list_recent_active.return_value = [make_noticia()]

    assert len(service.list_carousel(10)) == 1
    repository.list_recent_active.assert_called_once_with(10)
