"""
Creates the editais and noticias tables.

Revision ID: 8a3e5b6c0d12
Revises: 4f1c2a7d9b01
Create Date: 2025-03-10 14:10:00.000000

"""

from collections.abc import Sequence

from alembic import op
from caritas_sobral.migrations.helpers import get_qualified_name

revision: str = "8a3e5b6c0d12"
down_revision: str | None = "4f1c2a7d9b01"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """
    Creates the tables for calls for proposals and news articles.

    The stored edital status is limited to the four known values; the
    status shown to visitors is derived from it and the deadline.
    """
    editais = get_qualified_name("editais")
    noticias = get_qualified_name("noticias")
    op.execute(
        f"""
        CREATE TABLE {editais} (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            nome VARCHAR(255) NOT NULL,
            data_publicacao DATE NOT NULL,
            status VARCHAR(32) NOT NULL DEFAULT 'Aberto'
                CHECK (status IN ('Aberto', 'Em andamento', 'Finalizado', 'Cancelado')),
            data_finalizacao DATE,
            documento_url VARCHAR(1024),
            descricao TEXT,
            created_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT NOW()
        );
    """
    )
    op.execute(f"CREATE INDEX ix_editais_created_at ON {editais} (created_at DESC);")
    op.execute(
        f"""
        CREATE TABLE {noticias} (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            titulo VARCHAR(255) NOT NULL,
            resumo TEXT NOT NULL,
            conteudo TEXT,
            url VARCHAR(1024),
            imagem_url VARCHAR(1024),
            data_publicacao DATE NOT NULL,
            ativo BOOLEAN NOT NULL DEFAULT TRUE,
            autor VARCHAR(255),
            created_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT NOW()
        );
    """
    )
    op.execute(f"CREATE INDEX ix_noticias_ativo_data ON {noticias} (ativo, data_publicacao DESC);")


def downgrade() -> None:
    """
    Drops the noticias and editais tables.
    """
    op.execute(f"DROP TABLE IF EXISTS {get_qualified_name('noticias')} CASCADE;")
    op.execute(f"DROP TABLE IF EXISTS {get_qualified_name('editais')} CASCADE;")
