from pathlib import Path

import pytest
from caritas_sobral.providers.config_manager import ConfigManager, is_secret_key, mask_value


@pytest.fixture
def env_file(tmp_path: Path) -> Path:
    """Provides the path of a not yet existing .env file."""
    return tmp_path / ".env"


def test_creates_missing_file_with_private_permissions(env_file: Path) -> None:
    """Should create the file readable by the owner only."""
    ConfigManager(env_file)

    assert env_file.exists()
    assert env_file.stat().st_mode & 0o077 == 0


def test_set_get_and_unset(env_file: Path) -> None:
    """Should round-trip a value through the file."""
    manager = ConfigManager(env_file)

    manager.set("LOG_LEVEL", "DEBUG")
    assert manager.get("LOG_LEVEL") == "DEBUG"
    assert manager.get_all() == {"LOG_LEVEL": "DEBUG"}

    manager.unset("LOG_LEVEL")
    assert manager.get("LOG_LEVEL") is None


def test_unset_missing_key_is_a_no_op(env_file: Path) -> None:
    """Should not fail when the key is absent."""
    ConfigManager(env_file).unset("LOG_LEVEL")


def test_display_value_masks_secrets(env_file: Path) -> None:
    """Should never print a secret in clear text."""
    manager = ConfigManager(env_file)
    manager.set("SESSION_SECRET_KEY", "super-secret-value")
    manager.set("LOG_LEVEL", "INFO")

    assert manager.get_display_value("SESSION_SECRET_KEY") == "****alue"
    assert manager.get_display_value("LOG_LEVEL") == "INFO"
    assert manager.get_display_value("POSTGRES_PASSWORD") == "(não definido)"


def test_known_keys_lists_settings() -> None:
    """Should expose every setting of the Config model."""
    keys = ConfigManager.known_keys()

    assert "POSTGRES_HOST" in keys
    assert "SESSION_SECRET_KEY" in keys


@pytest.mark.parametrize(
    "key, expected",
    [
        ("POSTGRES_PASSWORD", True),
        ("SESSION_SECRET_KEY", True),
        ("api_token", True),
        ("LOG_LEVEL", False),
    ],
)
def test_is_secret_key(key: str, expected: bool) -> None:
    """Should detect credential-like names regardless of case."""
    assert is_secret_key(key) is expected


def test_mask_value() -> None:
    """Should keep at most the last four characters."""
    assert mask_value(None) == "(não definido)"
    assert mask_value("abc") == "****"
    assert mask_value("abcdefgh") == "****efgh"
