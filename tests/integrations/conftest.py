import uuid
from collections.abc import Generator
from typing import Any

import pytest
from alembic import command
from alembic.config import Config
from caritas_sobral.providers.config import ConfigProvider
from caritas_sobral.providers.database import DatabaseManager
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError


@pytest.fixture(scope="function")
def db_session(monkeypatch: pytest.MonkeyPatch) -> Generator[Engine, Any, None]:
    """Creates a migrated, throwaway schema for a test.

    The schema gets a unique name, is built by running every Alembic
    migration and is dropped afterwards. Tests are skipped when no
    PostgreSQL server answers at the configured address.

    Yields:
        The SQLAlchemy engine, with the schema as its search path.
    """
    schema_name = f"test_schema_{uuid.uuid4().hex}"
    monkeypatch.setenv("POSTGRES_DB_SCHEMA", schema_name)
    monkeypatch.setenv("USE_CLOUD_SQL_AUTH", "false")
    config = ConfigProvider.get_config()
    db_url = DatabaseManager.build_url(config)

    admin_engine = create_engine(db_url)
    try:
        with admin_engine.connect() as connection:
            connection.execute(text(f"CREATE SCHEMA {schema_name}"))
            connection.commit()
    except OperationalError as e:
        admin_engine.dispose()
        pytest.skip(f"PostgreSQL is not available: {e.orig}")

    engine = create_engine(db_url, connect_args={"options": f"-csearch_path={schema_name}"})
    try:
        alembic_cfg = Config("alembic.ini")
        command.upgrade(alembic_cfg, "head")
        yield engine
    finally:
        engine.dispose()
        with admin_engine.connect() as connection:
            connection.execute(text(f"DROP SCHEMA IF EXISTS {schema_name} CASCADE"))
            connection.commit()
        admin_engine.dispose()
