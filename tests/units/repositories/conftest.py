from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock
from uuid import UUID, uuid4

import pytest

CREATED_AT = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def mock_engine() -> MagicMock:
    """Fixture for a mocked database engine."""
    return MagicMock()


@pytest.fixture
def mock_conn(mock_engine: MagicMock) -> MagicMock:
    """The connection yielded by both `engine.connect()` and `engine.begin()`."""
    conn = MagicMock()
    mock_engine.connect.return_value.__enter__.return_value = conn
    mock_engine.begin.return_value.__enter__.return_value = conn
    return conn


def edital_row(**overrides: object) -> dict:
    """Builds a row of the editais table."""
    row = {
        "id": uuid4(),
        "nome": "Edital 01/2025",
        "data_publicacao": date(2025, 1, 10),
        "status": "Aberto",
        "data_finalizacao": date(2025, 2, 10),
        "documento_url": "https://storage.googleapis.com/editais/edital-1.pdf",
        "descricao": None,
        "created_at": CREATED_AT,
        "updated_at": CREATED_AT,
    }
    row.update(overrides)
    return row


def noticia_row(**overrides: object) -> dict:
    """Builds a row of the noticias table."""
    row = {
        "id": uuid4(),
        "titulo": "Feira solidária",
        "resumo": "Resumo da feira",
        "conteudo": "<p>Texto</p>",
        "url": None,
        "imagem_url": None,
        "data_publicacao": date(2025, 5, 1),
        "ativo": True,
        "autor": None,
        "created_at": CREATED_AT,
        "updated_at": CREATED_AT,
    }
    row.update(overrides)
    return row


def bem_row(**overrides: object) -> dict:
    """Builds a row of the bens_patrimoniais table."""
    row = {
        "id": uuid4(),
        "tipo": "Tecnologia / TI",
        "nome": "Notebook",
        "numero_serie": None,
        "numero_tombamento": "PAT-001",
        "estado": "bom",
        "descricao": None,
        "valor": Decimal("2500.00"),
        "foto_url": None,
        "localizacao_atual": None,
        "responsavel_atual": None,
        "data_ultima_movimentacao": None,
        "created_at": CREATED_AT,
        "updated_at": CREATED_AT,
    }
    row.update(overrides)
    return row


def movimentacao_row(bem_id: UUID, **overrides: object) -> dict:
    """Builds a row of the movimentacoes table."""
    row = {
        "id": uuid4(),
        "bem_id": bem_id,
        "setor": "Secretaria",
        "responsavel": "João",
        "data_movimentacao": date(2025, 3, 1),
        "created_at": CREATED_AT,
    }
    row.update(overrides)
    return row


def executed_sql(conn: MagicMock, index: int = 0) -> str:
    """Returns the SQL text of the n-th `execute` call."""
    return str(conn.execute.call_args_list[index].args[0])


def executed_params(conn: MagicMock, index: int = 0) -> dict:
    """Returns the parameters of the n-th `execute` call."""
    return conn.execute.call_args_list[index].args[1]
