"""This module contains shared fixtures for all unit tests."""

import os

import pytest


@pytest.fixture(scope="session", autouse=True)
def isolate_environment() -> None:
    """Removes settings that would point unit tests at real services.

    Unit tests must never reach Google Cloud Storage or a real database, so
    emulator hosts, Cloud SQL flags and schema overrides are cleared for the
    whole session.
    """
    for key in ("GCP_GCS_HOST", "USE_CLOUD_SQL_AUTH", "INSTANCE_CONNECTION_NAME", "POSTGRES_DB_SCHEMA"):
        os.environ.pop(key, None)
