"""This module defines the repository for news articles (notícias)."""

from typing import Any
from uuid import UUID

from caritas_sobral.models.noticias import Noticia
from caritas_sobral.models.pagination import Page
from caritas_sobral.providers.logging import Logger, LoggingProvider
from sqlalchemy import Engine, text

NOTICIA_COLUMNS = (
    "id, titulo, resumo, conteudo, url, imagem_url, data_publicacao, ativo, autor, created_at, updated_at"
)


class NoticiasRepository:
    """Handles database operations for the `noticias` table.

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
        ativo: bool | None = None,
    ) -> Page[Noticia]:
        """Fetches one page of news articles, most recently published first.

        Args:
            page: The 1-based page number.
            page_size: The number of rows per page.
            busca: An optional case-insensitive substring of the title.
            ativo: When given, only articles with this visibility.

        Returns:
            The requested page and the total number of matching rows.
        """
        self.logger.info(f"Fetching noticias page {page} (busca={busca!r}, ativo={ativo}).")
        clauses = []
        params: dict[str, Any] = {}
        if busca:
            clauses.append("titulo ILIKE :busca")
            params["busca"] = f"%{busca}%"
        if ativo is not None:
            clauses.append("ativo = :ativo")
            params["ativo"] = ativo
        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        count_sql = text(f"SELECT COUNT(*) FROM noticias {where};")
        rows_sql = text(
            f"""
            SELECT {NOTICIA_COLUMNS}
            FROM noticias
            {where}
            ORDER BY data_publicacao DESC, created_at DESC
            LIMIT :limit OFFSET :offset;
            """
        )
        rows_params = {**params, "limit": page_size, "offset": Page.offset_for(page, page_size)}
        with self.engine.connect() as conn:
            count = conn.execute(count_sql, params).scalar_one()
            rows = conn.execute(rows_sql, rows_params).mappings().all()
        return Page[Noticia](
            items=[Noticia.model_validate(dict(row)) for row in rows],
            count=count,
            page=page,
            page_size=page_size,
        )

    def list_recent_active(self, limit: int) -> list[Noticia]:
        """Fetches the most recent visible articles for the home page carousel.

        Args:
            limit: The maximum number of articles.

        Returns:
            The articles, most recently published first.
        """
        sql = text(
            f"""
            SELECT {NOTICIA_COLUMNS}
            FROM noticias
            WHERE ativo = TRUE
            ORDER BY data_publicacao DESC, created_at DESC
            LIMIT :limit;
            """
        )
        with self.engine.connect() as conn:
            rows = conn.execute(sql, {"limit": limit}).mappings().all()
        return [Noticia.model_validate(dict(row)) for row in rows]

    def get_by_id(self, noticia_id: UUID, only_active: bool = False) -> Noticia | None:
        """Fetches one article.

        Args:
            noticia_id: The record identifier.
            only_active: Ignore the article when it is hidden.

        Returns:
            The article, or None.
        """
        condition = " AND ativo = TRUE" if only_active else ""
        sql = text(f"SELECT {NOTICIA_COLUMNS} FROM noticias WHERE id = :id{condition};")
        with self.engine.connect() as conn:
            row = conn.execute(sql, {"id": noticia_id}).mappings().first()
        return Noticia.model_validate(dict(row)) if row else None

    def create(self, values: dict[str, Any]) -> Noticia:
        """Inserts a new article.

        Args:
            values: titulo, resumo, conteudo, url, imagem_url,
                data_publicacao, ativo and autor.

        Returns:
            The stored record.
        """
        self.logger.info(f"Creating noticia {values.get('titulo')!r}.")
        sql = text(
            f"""
            INSERT INTO noticias (titulo, resumo, conteudo, url, imagem_url, data_publicacao, ativo, autor)
            VALUES (:titulo, :resumo, :conteudo, :url, :imagem_url, :data_publicacao, :ativo, :autor)
            RETURNING {NOTICIA_COLUMNS};
            """
        )
        with self.engine.connect() as conn:
            row = conn.execute(sql, values).mappings().one()
            conn.commit()
        return Noticia.model_validate(dict(row))

    def update(self, noticia_id: UUID, values: dict[str, Any]) -> Noticia | None:
        """Updates an article and stamps `updated_at`.

        Args:
            noticia_id: The record identifier.
            values: The same column values accepted by `create`.

        Returns:
            The updated record, or None if it does not exist.
        """
        self.logger.info(f"Updating noticia {noticia_id}.")
        sql = text(
            f"""
            UPDATE noticias
            SET titulo = :titulo,
                resumo = :resumo,
                conteudo = :conteudo,
                url = :url,
                imagem_url = :imagem_url,
                data_publicacao = :data_publicacao,
                ativo = :ativo,
                autor = :autor,
                updated_at = NOW()
            WHERE id = :id
            RETURNING {NOTICIA_COLUMNS};
            """
        )
        with self.engine.connect() as conn:
            row = conn.execute(sql, {**values, "id": noticia_id}).mappings().first()
            conn.commit()
        return Noticia.model_validate(dict(row)) if row else None

    def set_active(self, noticia_id: UUID, ativo: bool) -> bool:
        """Shows or hides an article on the public site.

        Args:
            noticia_id: The record identifier.
            ativo: The new visibility.

        Returns:
            True if a row was updated.
        """
        self.logger.info(f"Setting noticia {noticia_id} ativo={ativo}.")
        sql = text("UPDATE noticias SET ativo = :ativo, updated_at = NOW() WHERE id = :id;")
        with self.engine.connect() as conn:
            result = conn.execute(sql, {"id": noticia_id, "ativo": ativo})
            conn.commit()
        return bool(result.rowcount)

    def delete(self, noticia_id: UUID) -> bool:
        """Deletes an article.

        Args:
            noticia_id: The record identifier.

        Returns:
            True if a row was deleted.
        """
        self.logger.info(f"Deleting noticia {noticia_id}.")
        sql = text("DELETE FROM noticias WHERE id = :id;")
        with self.engine.connect() as conn:
            result = conn.execute(sql, {"id": noticia_id})
            conn.commit()
        return bool(result.rowcount)
