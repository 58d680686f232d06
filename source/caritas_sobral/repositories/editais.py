"""This module defines the repository for calls for proposals (editais)."""

from typing import Any
from uuid import UUID

from caritas_sobral.models.editais import Edital, EditalStatus
from caritas_sobral.models.pagination import Page
from caritas_sobral.providers.logging import Logger, LoggingProvider
from sqlalchemy import Engine, text

EDITAL_COLUMNS = (
    "id, nome, data_publicacao, status, data_finalizacao, documento_url, descricao, created_at, updated_at"
)


class EditaisRepository:
    """Handles database operations for the `editais` table.

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

    @staticmethod
    def _build_filters(busca: str | None, status: EditalStatus | None) -> tuple[str, dict[str, Any]]:
        clauses = []
        params: dict[str, Any] = {}
        if busca:
            clauses.append("nome ILIKE :busca")
            params["busca"] = f"%{busca}%"
        if status:
            clauses.append("status = :status")
            params["status"] = status.value
        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
        return where, params

    def list_page(
        self,
        page: int,
        page_size: int,
        busca: str | None = None,
        status: EditalStatus | None = None,
    ) -> Page[Edital]:
        """Fetches one page of editais, newest first, for the admin list.

        Args:
            page: The 1-based page number.
            page_size: The number of rows per page.
            busca: An optional case-insensitive substring of the name.
            status: An optional stored status to match exactly.

        Returns:
            The requested page and the total number of matching rows.
        """
        self.logger.info(f"Fetching editais page {page} (busca={busca!r}, status={status}).")
        where, params = self._build_filters(busca, status)
        count_sql = text(f"SELECT COUNT(*) FROM editais {where};")
        rows_sql = text(
            f"""
            SELECT {EDITAL_COLUMNS}
            FROM editais
            {where}
            ORDER BY created_at DESC, id DESC
            LIMIT :limit OFFSET :offset;
            """
        )
        rows_params = {**params, "limit": page_size, "offset": Page.offset_for(page, page_size)}
        with self.engine.connect() as conn:
            count = conn.execute(count_sql, params).scalar_one()
            rows = conn.execute(rows_sql, rows_params).mappings().all()
        return Page[Edital](
            items=[Edital.model_validate(dict(row)) for row in rows],
            count=count,
            page=page,
            page_size=page_size,
        )

    def list_for_public(self, busca: str | None = None) -> list[Edital]:
        """Fetches every edital matching a search, most recently published first.

        The public list filters on the derived status, which is not stored,
        so the filtering and pagination happen after this call.

        Args:
            busca: An optional case-insensitive substring of the name.

        Returns:
            The matching editais.
        """
        self.logger.info(f"Fetching public editais (busca={busca!r}).")
        where, params = self._build_filters(busca, None)
        sql = text(
            f"""
            SELECT {EDITAL_COLUMNS}
            FROM editais
            {where}
            ORDER BY data_publicacao DESC, created_at DESC;
            """
        )
        with self.engine.connect() as conn:
            rows = conn.execute(sql, params).mappings().all()
        return [Edital.model_validate(dict(row)) for row in rows]

    def get_by_id(self, edital_id: UUID) -> Edital | None:
        """Fetches one edital.

        Args:
            edital_id: The record identifier.

        Returns:
            The edital, or None if it does not exist.
        """
        sql = text(f"SELECT {EDITAL_COLUMNS} FROM editais WHERE id = :id;")
        with self.engine.connect() as conn:
            row = conn.execute(sql, {"id": edital_id}).mappings().first()
        return Edital.model_validate(dict(row)) if row else None

    def create(self, values: dict[str, Any]) -> Edital:
        """Inserts a new edital.

        Args:
            values: The column values: nome, data_publicacao, status,
                data_finalizacao, documento_url and descricao.

        Returns:
            The stored record.
        """
        self.logger.info(f"Creating edital {values.get('nome')!r} with status {values.get('status')}.")
        sql = text(
            f"""
            INSERT INTO editais (nome, data_publicacao, status, data_finalizacao, documento_url, descricao)
            VALUES (:nome, :data_publicacao, :status, :data_finalizacao, :documento_url, :descricao)
            RETURNING {EDITAL_COLUMNS};
            """
        )
        with self.engine.connect() as conn:
            row = conn.execute(sql, values).mappings().one()
            conn.commit()
        return Edital.model_validate(dict(row))

    def update(self, edital_id: UUID, values: dict[str, Any]) -> Edital | None:
        """Updates an edital and stamps `updated_at`.

        Args:
            edital_id: The record identifier.
            values: The same column values accepted by `create`.

        Returns:
            The updated record, or None if it does not exist.
        """
        self.logger.info(f"Updating edital {edital_id}.")
        sql = text(
            f"""
            UPDATE editais
            SET nome = :nome,
                data_publicacao = :data_publicacao,
                status = :status,
                data_finalizacao = :data_finalizacao,
                documento_url = :documento_url,
                descricao = :descricao,
                updated_at = NOW()
            WHERE id = :id
            RETURNING {EDITAL_COLUMNS};
            """
        )
        with self.engine.connect() as conn:
            row = conn.execute(sql, {**values, "id": edital_id}).mappings().first()
            conn.commit()
        return Edital.model_validate(dict(row)) if row else None

    def delete(self, edital_id: UUID) -> bool:
        """Deletes an edital.

        Args:
            edital_id: The record identifier.

        Returns:
            True if a row was deleted.
        """
        self.logger.info(f"Deleting edital {edital_id}.")
        sql = text("DELETE FROM editais WHERE id = :id;")
        with self.engine.connect() as conn:
            result = conn.execute(sql, {"id": edital_id})
            conn.commit()
        return bool(result.rowcount)
