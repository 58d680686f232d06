"""Shared fixtures for the web unit tests."""

from collections.abc import Generator
from datetime import date, datetime, timezone
from unittest.mock import MagicMock
from uuid import uuid4

import pytest
from caritas_sobral.models.users import AuthSession
from caritas_sobral.web.dependencies import (
    get_auth_service,
    get_date_provider,
    get_editais_service,
    get_noticias_service,
    get_patrimonio_service,
    require_admin,
)
from caritas_sobral.web.main import app
from fastapi.testclient import TestClient

TODAY = date(2025, 6, 15)


@pytest.fixture
def admin_session() -> AuthSession:
    """A signed-in administrator."""
    return AuthSession(
        user_id=uuid4(),
        email="admin@caritas.org",
        name="Maria Admin",
        signed_in_at=datetime(2025, 6, 15, 12, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def services() -> dict[str, MagicMock]:
    """Mocked services, keyed by name."""
    date_provider = MagicMock()
    date_provider.today.return_value = TODAY
    return {
        "editais": MagicMock(),
        "noticias": MagicMock(),
        "patrimonio": MagicMock(),
        "auth": MagicMock(),
        "date": date_provider,
    }


@pytest.fixture
def client(services: dict[str, MagicMock]) -> Generator[TestClient, None, None]:
    """A test client for the public pages with mocked services."""
    app.dependency_overrides[get_editais_service] = lambda: services["editais"]
    app.dependency_overrides[get_noticias_service] = lambda: services["noticias"]
    app.dependency_overrides[get_patrimonio_service] = lambda: services["patrimonio"]
    app.dependency_overrides[get_auth_service] = lambda: services["auth"]
    app.dependency_overrides[get_date_provider] = lambda: services["date"]
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_client(client: TestClient, admin_session: AuthSession) -> TestClient:
    """A test client whose requests are already signed in."""
    app.dependency_overrides[require_admin] = lambda: admin_session
    return client
