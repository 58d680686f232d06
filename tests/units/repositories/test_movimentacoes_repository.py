from datetime import date
from unittest.mock import MagicMock
from uuid import uuid4

from caritas_sobral.repositories.movimentacoes import MovimentacoesRepository

from tests.units.repositories.conftest import executed_params, executed_sql, movimentacao_row


def test_list_for_bem_is_deterministically_ordered(mock_engine: MagicMock, mock_conn: MagicMock) -> None:
    """Should order by date, then insertion time, then id, all descending."""
    bem_id = uuid4()
    mock_conn.execute.return_value.mappings.return_value.all.return_value = [movimentacao_row(bem_id)]

    movimentacoes = MovimentacoesRepository(mock_engine).list_for_bem(bem_id)

    assert movimentacoes[0].bem_id == bem_id
    assert "ORDER BY data_movimentacao DESC, created_at DESC, id DESC" in executed_sql(mock_conn)


def test_register_calls_function_in_a_transaction(mock_engine: MagicMock, mock_conn: MagicMock) -> None:
    """Should call the database function inside `engine.begin()`."""
    bem_id, movimentacao_id = uuid4(), uuid4()
    mock_conn.execute.return_value.scalar_one.return_value = movimentacao_id

    result = MovimentacoesRepository(mock_engine).register(bem_id, "Secretaria", "João", date(2025, 3, 1))

    assert result == movimentacao_id
    mock_engine.begin.assert_called_once()
    mock_engine.connect.assert_not_called()
    assert "registrar_movimentacao" in executed_sql(mock_conn)
    assert executed_params(mock_conn) == {
        "bem_id": str(bem_id),
        "setor": "Secretaria",
        "responsavel": "João",
        "data_movimentacao": date(2025, 3, 1),
    }
