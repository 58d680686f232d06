"""Tests for the web main module."""

from unittest.mock import MagicMock
from uuid import uuid4

import pytest
from caritas_sobral.exceptions.errors import RemoteOperationError, UploadError
from caritas_sobral.models.pagination import Page
from caritas_sobral.web import strings
from caritas_sobral.web.main import _fallback_url, app
from fastapi.testclient import TestClient


def test_health_check() -> None:
    """Tests the health check endpoint."""
    client = TestClient(app)
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_unknown_path_renders_404() -> None:
    """Unknown addresses render the friendly 404 page."""
    response = TestClient(app).get("/pagina-que-nao-existe")

    assert response.status_code == 404
    assert strings.NOT_FOUND_TITLE in response.text


def test_request_id_is_echoed() -> None:
    """A caller-provided correlation ID is returned."""
    response = TestClient(app).get("/health", headers={"X-Request-ID": "abc123"})

    assert response.headers["X-Request-ID"] == "abc123"


def test_request_id_is_generated() -> None:
    """A correlation ID is generated when none is sent."""
    response = TestClient(app).get("/health")

    assert len(response.headers["X-Request-ID"]) == 32


def test_remote_failure_on_page_load(admin_client: TestClient, services: dict[str, MagicMock]) -> None:
    """A page that cannot load shows the error page instead of redirecting."""
    services["editais"].list_admin.side_effect = RemoteOperationError("Erro ao carregar os editais: offline")

    response = admin_client.get("/admin/editais", follow_redirects=False)

    assert response.status_code == 503
    assert "Erro ao carregar os editais: offline" in response.text


def test_remote_failure_on_submit(admin_client: TestClient, services: dict[str, MagicMock]) -> None:
    """A failed action goes back to its list with a notification."""
    services["editais"].delete.side_effect = RemoteOperationError("Erro ao excluir o edital: offline")

    response = admin_client.post(f"/admin/editais/{uuid4()}/excluir", follow_redirects=False)

    assert response.status_code == 303
    assert response.headers["location"] == "/admin/editais"


def test_upload_failure_shows_toast(admin_client: TestClient, services: dict[str, MagicMock]) -> None:
    """A rejected upload is shown as a notification on the next page."""
    services["noticias"].create.side_effect = UploadError("Formato não suportado.")
    services["noticias"].list_admin.return_value = Page(items=[], count=0, page=1, page_size=10)
    form = {"titulo": "Título", "resumo": "Resumo longo", "data_publicacao": "2025-06-01"}

    response = admin_client.post("/admin/noticias", data=form)

    assert response.status_code == 200
    assert "Formato não suportado." in response.text


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/admin/editais/123/excluir", "/admin/editais"),
        ("/admin/noticias", "/admin/noticias"),
        ("/admin/patrimonio/abc/movimentacoes", "/admin/patrimonio/abc"),
        ("/admin/patrimonio/novo", "/admin/patrimonio"),
        ("/contato", "/"),
    ],
)
def test_fallback_url(path: str, expected: str) -> None:
    """Failed actions return to the closest list or detail page."""
    request = MagicMock()
    request.url.path = path

    assert _fallback_url(request) == expected
