"""This module defines the repository for physical assets."""

from typing import Any
from uuid import UUID

from caritas_sobral.models.pagination import Page
from caritas_sobral.models.patrimonio import BemPatrimonial, EstadoConservacao, RelatorioFiltros
from caritas_sobral.providers.logging import Logger, LoggingProvider
from sqlalchemy import Engine, text

BEM_COLUMNS = (
    "id, tipo, nome, numero_serie, numero_tombamento, estado, descricao, valor, foto_url, "
    "localizacao_atual, responsavel_atual, data_ultima_movimentacao, created_at, updated_at"
)


class BensPatrimoniaisRepository:
    """Handles database operations for the `bens_patrimoniais` table.

    The current-location columns are never written here: they belong to the
    `registrar_movimentacao` procedure (see `MovimentacoesRepository`).

    Args:
        engine: An SQLAlchemy Engine instance for database communication.
    """

    logger: Logger
    engine: Engine

    def __init__(self, engine: Engine) -> None:
        """Initializes the repository with a database engine.

        Args:
            engine: The SQLAlchemy Engine to be used for all database
                communications.
        """
        self.logger = LoggingProvider().get_logger()
        self.engine = engine

    def list_page(
        self,
        page: int,
        page_size: int,
        busca: str | None = None,
        estado: EstadoConservacao | None = None,
    ) -> Page[BemPatrimonial]:
        """Fetches one page of assets, ordered by name.

        Args:
            page: The 1-based page number.
            page_size: The number of rows per page.
            busca: An optional substring of the name or the tag number.
            estado: An optional condition to match exactly.

        Returns:
            The requested page and the total number of matching rows.
        """
        self.logger.info(f"Fetching bens page {page} (busca={busca!r}, estado={estado}).")
        clauses = []
        params: dict[str, Any] = {}
        if busca:
            clauses.append("(nome ILIKE :busca OR numero_tombamento ILIKE :busca)")
            params["busca"] = f"%{busca}%"
        if estado:
            clauses.append("estado = :estado")
            params["estado"] = estado.value
        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        count_sql = text(f"SELECT COUNT(*) FROM bens_patrimoniais {where};")
        rows_sql = text(
            f"""
            SELECT {BEM_COLUMNS}
            FROM bens_patrimoniais
            {where}
            ORDER BY nome ASC, numero_tombamento ASC
            LIMIT :limit OFFSET :offset;
            """
        )
        rows_params = {**params, "limit": page_size, "offset": Page.offset_for(page, page_size)}
        with self.engine.connect() as conn:
            count = conn.execute(count_sql, params).scalar_one()
            rows = conn.execute(rows_sql, rows_params).mappings().all()
        return Page[BemPatrimonial](
            items=[BemPatrimonial.model_validate(dict(row)) for row in rows],
            count=count,
            page=page,
            page_size=page_size,
        )

    def list_for_report(self, filtros: RelatorioFiltros) -> list[BemPatrimonial]:
        """Fetches every asset matching the report filters.

        Args:
            filtros: `tipo` and `localizacao_atual` match as case-insensitive
                substrings, `estado` exactly.

        Returns:
            The matching assets, grouped by category and ordered by name.
        """
        clauses = []
        params: dict[str, Any] = {}
        if filtros.tipo:
            clauses.append("tipo ILIKE :tipo")
            params["tipo"] = f"%{filtros.tipo}%"
        if filtros.estado:
            clauses.append("estado = :estado")
            params["estado"] = filtros.estado.value
        if filtros.localizacao_atual:
            clauses.append("localizacao_atual ILIKE :localizacao_atual")
            params["localizacao_atual"] = f"%{filtros.localizacao_atual}%"
        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
        self.logger.info(f"Generating asset report with {len(clauses)} filter(s).")

        sql = text(f"SELECT {BEM_COLUMNS} FROM bens_patrimoniais {where} ORDER BY tipo ASC, nome ASC;")
        with self.engine.connect() as conn:
            rows = conn.execute(sql, params).mappings().all()
        return [BemPatrimonial.model_validate(dict(row)) for row in rows]

    def get_by_id(self, bem_id: UUID) -> BemPatrimonial | None:
        """Fetches one asset.

        Args:
            bem_id: The record identifier.

        Returns:
            The asset, or None if it does not exist.
        """
        sql = text(f"SELECT {BEM_COLUMNS} FROM bens_patrimoniais WHERE id = :id;")
        with self.engine.connect() as conn:
            row = conn.execute(sql, {"id": bem_id}).mappings().first()
        return BemPatrimonial.model_validate(dict(row)) if row else None

    def tombamento_exists(self, numero_tombamento: str, exclude_id: UUID | None = None) -> bool:
        """Checks whether a tag number is already used by another asset.

        Args:
            numero_tombamento: The tag number.
            exclude_id: An asset to ignore, used when editing.

        Returns:
            True if another asset carries the tag number.
        """
        sql = text(
            """
            SELECT EXISTS (
                SELECT 1 FROM bens_patrimoniais
                WHERE numero_tombamento = :numero_tombamento
                  AND (CAST(:exclude_id AS UUID) IS NULL OR id <> CAST(:exclude_id AS UUID))
            );
            """
        )
        params = {"numero_tombamento": numero_tombamento, "exclude_id": str(exclude_id) if exclude_id else None}
        with self.engine.connect() as conn:
            return bool(conn.execute(sql, params).scalar_one())

    def create(self, values: dict[str, Any]) -> BemPatrimonial:
        """Inserts a new asset.

        Args:
            values: tipo, nome, numero_serie, numero_tombamento, estado,
                descricao, valor and foto_url.

        Returns:
            The stored record.
        """
        self.logger.info(f"Creating bem {values.get('numero_tombamento')!r}.")
        sql = text(
            f"""
            INSERT INTO bens_patrimoniais (
                tipo, nome, numero_serie, numero_tombamento, estado, descricao, valor, foto_url
            ) VALUES (
                :tipo, :nome, :numero_serie, :numero_tombamento, :estado, :descricao, :valor, :foto_url
            )
            RETURNING {BEM_COLUMNS};
            """
        )
        with self.engine.connect() as conn:
            row = conn.execute(sql, values).mappings().one()
            conn.commit()
        return BemPatrimonial.model_validate(dict(row))

    def update(self, bem_id: UUID, values: dict[str, Any]) -> BemPatrimonial | None:
        """Updates an asset and stamps `updated_at`.

        Args:
            bem_id: The record identifier.
            values: The same column values accepted by `create`.

        Returns:
            The updated record, or None if it does not exist.
        """
        self.logger.info(f"Updating bem {bem_id}.")
        sql = text(
            f"""
            UPDATE bens_patrimoniais
            SET tipo = :tipo,
                nome = :nome,
                numero_serie = :numero_serie,
                numero_tombamento = :numero_tombamento,
                estado = :estado,
                descricao = :descricao,
                valor = :valor,
                foto_url = :foto_url,
                updated_at = NOW()
            WHERE id = :id
            RETURNING {BEM_COLUMNS};
            """
        )
        with self.engine.connect() as conn:
            row = conn.execute(sql, {**values, "id": bem_id}).mappings().first()
            conn.commit()
        return BemPatrimonial.model_validate(dict(row)) if row else None

    def delete(self, bem_id: UUID) -> bool:
        """Deletes an asset together with its movement history.

        Args:
            bem_id: The record identifier.

        Returns:
            True if a row was deleted.
        """
        self.logger.info(f"Deleting bem {bem_id}.")
        sql = text("DELETE FROM bens_patrimoniais WHERE id = :id;")
        with self.engine.connect() as conn:
            result = conn.execute(sql, {"id": bem_id})
            conn.commit()
        return bool(result.rowcount)
