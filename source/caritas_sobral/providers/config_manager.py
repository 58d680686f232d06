"""This module provides a manager for the site's .env settings file.

It backs the `caritas config` commands. Values whose key names look like
credentials (the session secret, the database password) are masked
whenever they are displayed.
"""

from pathlib import Path

from caritas_sobral.providers.config import Config
from dotenv import dotenv_values, set_key, unset_key

SECRET_MARKERS = ("SECRET", "PASSWORD", "TOKEN", "CREDENTIAL")


def is_secret_key(key: str) -> bool:
    """Checks if a setting holds a credential.

    Args:
        key: The setting name.

    Returns:
        True if the value must never be printed in clear text.
    """
    return any(marker in key.upper() for marker in SECRET_MARKERS)


def mask_value(value: str | None) -> str:
    """Hides all but the last characters of a secret.

    Args:
        value: The secret value.

    Returns:
        A display-safe representation.
    """
    if value is None:
        return "(não definido)"
    if len(value) <= 4:
        return "****"
    return f"****{value[-4:]}"


class ConfigManager:
    """Reads and writes settings stored in a .env file."""

    def __init__(self, env_file: str | Path = ".env") -> None:
        """Initializes the ConfigManager.

        Args:
            env_file: The path to the .env file. Created with owner-only
                permissions when missing.
        """
        self.env_file = Path(env_file)
        if not self.env_file.exists():
            self.env_file.touch(mode=0o600)

    @staticmethod
    def known_keys() -> list[str]:
        """Lists the settings understood by the application.

        Returns:
            The setting names, in declaration order.
        """
        return list(Config.model_fields.keys())

    def get_all(self) -> dict[str, str | None]:
        """Reads every setting present in the file.

        Returns:
            A mapping of setting names to raw values.
        """
        return dict(dotenv_values(self.env_file))

    def get(self, key: str) -> str | None:
        """Reads a single setting.

        Args:
            key: The setting name.

        Returns:
            The raw value, or None when the setting is absent.
        """
        return self.get_all().get(key)

    def get_display_value(self, key: str) -> str:
        """Reads a single setting, masking it when it is a secret.

        Args:
            key: The setting name.

        Returns:
            The value ready to be printed.
        """
        value = self.get(key)
        if is_secret_key(key):
            return mask_value(value)
        return value if value is not None else "(não definido)"

    def set(self, key: str, value: str) -> None:
        """Writes a setting, replacing any previous value.

        Args:
            key: The setting name.
            value: The new value.
        """
        set_key(str(self.env_file), key, value)

    def unset(self, key: str) -> None:
        """Removes a setting from the file.

        Args:
            key: The setting name.
        """
        if key in self.get_all():
            unset_key(str(self.env_file), key)
