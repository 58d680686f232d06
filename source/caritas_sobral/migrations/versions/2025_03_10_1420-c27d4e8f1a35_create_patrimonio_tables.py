"""
Creates the asset inventory tables and the movement registration function.

Revision ID: c27d4e8f1a35
Revises: 8a3e5b6c0d12
Create Date: 2025-03-10 14:20:00.000000

"""

from collections.abc import Sequence

from alembic import op
from caritas_sobral.migrations.helpers import get_qualified_name

revision: str = "c27d4e8f1a35"
down_revision: str | None = "8a3e5b6c0d12"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """
    Creates bens_patrimoniais, movimentacoes and registrar_movimentacao().

    The current location columns of an asset are only written by
    registrar_movimentacao(), in the same transaction as the movement row.
    """
    bens = get_qualified_name("bens_patrimoniais")
    movimentacoes = get_qualified_name("movimentacoes")
    function_name = get_qualified_name("registrar_movimentacao")
    op.execute(
        f"""
        CREATE TABLE {bens} (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            tipo VARCHAR(64) NOT NULL,
            nome VARCHAR(255) NOT NULL,
            numero_serie VARCHAR(255),
            numero_tombamento VARCHAR(64) NOT NULL,
            estado VARCHAR(16) NOT NULL DEFAULT 'bom'
                CHECK (estado IN ('novo', 'bom', 'regular', 'danificado', 'inservivel')),
            descricao TEXT,
            valor NUMERIC(12, 2) NOT NULL DEFAULT 0 CHECK (valor >= 0),
            foto_url VARCHAR(1024),
            localizacao_atual VARCHAR(255),
            responsavel_atual VARCHAR(255),
            data_ultima_movimentacao DATE,
            created_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT NOW(),
            CONSTRAINT uq_bens_patrimoniais_numero_tombamento UNIQUE (numero_tombamento)
        );
    """
    )
    op.execute(
        f"""
        CREATE TABLE {movimentacoes} (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            bem_id UUID NOT NULL REFERENCES {bens} (id) ON DELETE CASCADE,
            setor VARCHAR(255) NOT NULL,
            responsavel VARCHAR(255) NOT NULL,
            data_movimentacao DATE NOT NULL,
            created_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT clock_timestamp()
        );
    """
    )
    op.execute(
        f"""
        CREATE INDEX ix_movimentacoes_bem_data
        ON {movimentacoes} (bem_id, data_movimentacao DESC, created_at DESC);
    """
    )
    op.execute(
        f"""
        CREATE OR REPLACE FUNCTION {function_name}(
            p_bem_id UUID,
            p_setor TEXT,
            p_responsavel TEXT,
            p_data DATE
        ) RETURNS UUID
        LANGUAGE plpgsql
        AS $$
        DECLARE
            v_id UUID;
        BEGIN
            UPDATE {bens}
            SET localizacao_atual = p_setor,
                responsavel_atual = p_responsavel,
                data_ultima_movimentacao = p_data,
                updated_at = NOW()
            WHERE id = p_bem_id;

            IF NOT FOUND THEN
                RAISE EXCEPTION 'bem % não encontrado', p_bem_id USING ERRCODE = 'no_data_found';
            END IF;

            INSERT INTO {movimentacoes} (bem_id, setor, responsavel, data_movimentacao)
            VALUES (p_bem_id, p_setor, p_responsavel, p_data)
            RETURNING id INTO v_id;

            RETURN v_id;
        END;
        $$;
    """
    )


def downgrade() -> None:
    """
    Drops the movement function and the asset inventory tables.
    """
    op.execute(f"DROP FUNCTION IF EXISTS {get_qualified_name('registrar_movimentacao')}(UUID, TEXT, TEXT, DATE);")
    op.execute(f"DROP TABLE IF EXISTS {get_qualified_name('movimentacoes')} CASCADE;")
    op.execute(f"DROP TABLE IF EXISTS {get_qualified_name('bens_patrimoniais')} CASCADE;")
