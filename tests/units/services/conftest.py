"""This module contains shared fixtures for the services unit tests."""

from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any
from unittest.mock import MagicMock
from uuid import uuid4

import pytest
from caritas_sobral.models.editais import Edital, EditalStatus
from caritas_sobral.models.noticias import Noticia
from caritas_sobral.models.patrimonio import BemPatrimonial, EstadoConservacao

TODAY = date(2025, 6, 15)


@pytest.fixture
def mock_date_provider() -> MagicMock:
    """Fixture for a date provider frozen on 2025-06-15."""
    provider = MagicMock()
    provider.today.return_value = TODAY
    return provider


@pytest.fixture
def passthrough_cache() -> MagicMock:
    """Fixture for a cache that always calls the loader, recording invalidations."""
    cache = MagicMock()
    cache.get_or_load.side_effect = lambda entity, filters, page, loader: loader()
    return cache


@pytest.fixture
def mock_upload_service() -> MagicMock:
    """Fixture for a mocked upload service."""
    return MagicMock()


def make_edital(**overrides: Any) -> Edital:
    """Builds an edital for tests."""
    data: dict[str, Any] = {
        "id": uuid4(),
        "nome": "Edital de Seleção",
        "data_publicacao": date(2025, 5, 1),
        "status": EditalStatus.OPEN,
        "data_finalizacao": None,
        "documento_url": "https://storage.googleapis.com/editais/edital.pdf",
        "created_at": datetime(2025, 5, 1, tzinfo=timezone.utc),
    }
    data.update(overrides)
    return Edital(**data)


def make_noticia(**overrides: Any) -> Noticia:
    """Builds a news article for tests."""
    data: dict[str, Any] = {
        "id": uuid4(),
        "titulo": "Feira solidária",
        "resumo": "Resumo da feira",
        "data_publicacao": date(2025, 5, 1),
    }
    data.update(overrides)
    return Noticia(**data)


def make_bem(**overrides: Any) -> BemPatrimonial:
    """Builds an asset for tests."""
    data: dict[str, Any] = {
        "id": uuid4(),
        "tipo": "Tecnologia / TI",
        "nome": "Notebook",
        "numero_tombamento": "PAT-001",
        "estado": EstadoConservacao.BOM,
        "valor": Decimal("2500.00"),
    }
    data.update(overrides)
    return BemPatrimonial(**data)
