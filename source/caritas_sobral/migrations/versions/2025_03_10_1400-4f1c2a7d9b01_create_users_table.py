"""
Creates the users table for the admin area.

Revision ID: 4f1c2a7d9b01
Revises:
Create Date: 2025-03-10 14:00:00.000000

"""

from collections.abc import Sequence

from alembic import op
from caritas_sobral.migrations.helpers import get_qualified_name

revision: str = "4f1c2a7d9b01"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """
    Enables pgcrypto for gen_random_uuid() and creates the users table.
    E-mails are unique regardless of case.
    """
    table_name = get_qualified_name("users")
    op.execute("CREATE EXTENSION IF NOT EXISTS pgcrypto;")
    op.execute(
        f"""
        CREATE TABLE {table_name} (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            email VARCHAR(255) NOT NULL,
            name VARCHAR(255) NOT NULL,
            password_hash VARCHAR(255) NOT NULL,
            created_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT NOW()
        );
    """
    )
    op.execute(f"CREATE UNIQUE INDEX ux_users_email ON {table_name} (LOWER(email));")


def downgrade() -> None:
    """
    Drops the users table.
    """
    op.execute(f"DROP TABLE IF EXISTS {get_qualified_name('users')} CASCADE;")
