from unittest.mock import MagicMock
from uuid import uuid4

from caritas_sobral.models.patrimonio import EstadoConservacao, RelatorioFiltros
from caritas_sobral.repositories.bens_patrimoniais import BensPatrimoniaisRepository

from tests.units.repositories.conftest import bem_row, executed_params, executed_sql


def test_list_page_searches_name_and_tag(mock_engine: MagicMock, mock_conn: MagicMock) -> None:
    """Should search both the name and the tag number."""
    count_result, rows_result = MagicMock(), MagicMock()
    count_result.scalar_one.return_value = 1
    rows_result.mappings.return_value.all.return_value = [bem_row()]
    mock_conn.execute.side_effect = [count_result, rows_result]

    page = BensPatrimoniaisRepository(mock_engine).list_page(1, 10, busca="PAT", estado=EstadoConservacao.BOM)

    assert page.items[0].estado is EstadoConservacao.BOM
    assert "numero_tombamento ILIKE :busca" in executed_sql(mock_conn, 0)
    assert executed_params(mock_conn, 0) == {"busca": "%PAT%", "estado": "bom"}


def test_list_for_report_combines_filters(mock_engine: MagicMock, mock_conn: MagicMock) -> None:
    """Should match the category and location by substring and the condition exactly."""
    mock_conn.execute.return_value.mappings.return_value.all.return_value = []
    filtros = RelatorioFiltros(tipo="Tecno", estado=EstadoConservacao.NOVO, localizacao_atual="Secretaria")

    BensPatrimoniaisRepository(mock_engine).list_for_report(filtros)

    assert executed_params(mock_conn) == {
        "tipo": "%Tecno%",
        "estado": "novo",
        "localizacao_atual": "%Secretaria%",
    }
    assert "ORDER BY tipo ASC, nome ASC" in executed_sql(mock_conn)


def test_list_for_report_without_filters(mock_engine: MagicMock, mock_conn: MagicMock) -> None:
    """Should list every asset when no filter is given."""
    mock_conn.execute.return_value.mappings.return_value.all.return_value = [bem_row(), bem_row()]

    bens = BensPatrimoniaisRepository(mock_engine).list_for_report(RelatorioFiltros())

    assert len(bens) == 2
    assert "WHERE" not in executed_sql(mock_conn)


def test_tombamento_exists_excludes_current_asset(mock_engine: MagicMock, mock_conn: MagicMock) -> None:
    """Should ignore the asset being edited."""
    bem_id = uuid4()
    mock_conn.execute.return_value.scalar_one.return_value = False

    assert BensPatrimoniaisRepository(mock_engine).tombamento_exists("PAT-001", exclude_id=bem_id) is False
    assert executed_params(mock_conn) == {"numero_tombamento": "PAT-001", "exclude_id": str(bem_id)}


def test_create_never_writes_location_columns(mock_engine: MagicMock, mock_conn: MagicMock) -> None:
    """The current location is only written by movement registration."""
    mock_conn.execute.return_value.mappings.return_value.one.return_value = bem_row()

    BensPatrimoniaisRepository(mock_engine).create({"numero_tombamento": "PAT-001"})

    sql = executed_sql(mock_conn)
    assert "INSERT INTO bens_patrimoniais" in sql
    assert "localizacao_atual" not in sql.split("RETURNING")[0]
    mock_conn.commit.assert_called_once()


def test_delete(mock_engine: MagicMock, mock_conn: MagicMock) -> None:
    """Should report a deleted row."""
    mock_conn.execute.return_value.rowcount = 1

    assert BensPatrimoniaisRepository(mock_engine).delete(uuid4()) is True
