"""This module defines the repository for asset movements."""

from datetime import date
from uuid import UUID

from caritas_sobral.models.patrimonio import Movimentacao
from caritas_sobral.providers.logging import Logger, LoggingProvider
from sqlalchemy import Engine, text


class MovimentacoesRepository:
    """Handles database operations for the `movimentacoes` table.

    Movements are append-only. New ones are always written through the
    `registrar_movimentacao` database function, which also refreshes the
    current-location columns of the asset in the same transaction.

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

    def list_for_bem(self, bem_id: UUID) -> list[Movimentacao]:
        """Fetches the movement history of an asset, most recent first.

        Movements on the same day are ordered by insertion time, then by id,
        so the order is always deterministic.

        Args:
            bem_id: The asset identifier.

        Returns:
            The movements of the asset.
        """
        sql = text(
            """
            SELECT id, bem_id, setor, responsavel, data_movimentacao, created_at
            FROM movimentacoes
            WHERE bem_id = :bem_id
            ORDER BY data_movimentacao DESC, created_at DESC, id DESC;
            """
        )
        with self.engine.connect() as conn:
            rows = conn.execute(sql, {"bem_id": bem_id}).mappings().all()
        return [Movimentacao.model_validate(dict(row)) for row in rows]

    def register(self, bem_id: UUID, setor: str, responsavel: str, data_movimentacao: date) -> UUID:
        """Appends a movement and updates the asset's current location.

        Both writes happen inside the database function and the surrounding
        transaction: either both are committed or neither is.

        Args:
            bem_id: The asset identifier.
            setor: The destination sector.
            responsavel: The person now responsible for the asset.
            data_movimentacao: The movement date.

        Returns:
            The identifier of the new movement.
        """
        self.logger.info(f"Registering movement of bem {bem_id} to {setor!r} ({responsavel!r}).")
        sql = text(
            """
            SELECT registrar_movimentacao(
                CAST(:bem_id AS UUID), :setor, :responsavel, CAST(:data_movimentacao AS DATE)
            );
            """
        )
        params = {
            "bem_id": str(bem_id),
            "setor": setor,
            "responsavel": responsavel,
            "data_movimentacao": data_movimentacao,
        }
        with self.engine.begin() as conn:
            movimentacao_id: UUID = conn.execute(sql, params).scalar_one()
        self.logger.info(f"Movement {movimentacao_id} registered.")
        return movimentacao_id
