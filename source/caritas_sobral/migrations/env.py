from logging.config import fileConfig

from alembic import context
from caritas_sobral.providers.config import ConfigProvider
from caritas_sobral.providers.database import DatabaseManager
from sqlalchemy import engine_from_config, pool

sqlalchemy_config = context.config
project_config = ConfigProvider.get_config()

if sqlalchemy_config.config_file_name is not None:
    fileConfig(sqlalchemy_config.config_file_name, disable_existing_loggers=False)

sqlalchemy_config.set_main_option("sqlalchemy.url", DatabaseManager.build_url(project_config).replace("%", "%%"))

target_metadata = None


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode, emitting the SQL as a script."""
    url = sqlalchemy_config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode.

    When a schema is configured, every connection gets it as its search
    path and the alembic version table is created inside it.
    """
    schema_name = project_config.POSTGRES_DB_SCHEMA
    config_section = sqlalchemy_config.get_section(sqlalchemy_config.config_ini_section, {})

    connect_args = {}
    if schema_name:
        connect_args["options"] = f"-csearch_path={schema_name}"

    connectable = engine_from_config(
        config_section,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
        connect_args=connect_args,
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            version_table_schema=schema_name,
            include_schemas=True,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
