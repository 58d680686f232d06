from caritas_sobral.providers.config import ConfigProvider


def get_qualified_name(base_name: str) -> str:
    """
    Returns the object name with the configured schema prefix, if any.
    """
    schema_name = ConfigProvider.get_config().POSTGRES_DB_SCHEMA
    if schema_name:
        return f"{schema_name}.{base_name}"
    return base_name
