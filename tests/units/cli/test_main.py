"""Unit tests for the main CLI entry point."""

from unittest.mock import MagicMock, patch

from caritas_sobral.cli import create_cli
from click.testing import CliRunner


def test_cli_group_invoked_without_command() -> None:
    """Invoking the CLI without a command shows the usage."""
    from caritas_sobral.cli.__main__ import cli  # Local import

    runner = CliRunner()
    result = runner.invoke(cli)
    assert result.exit_code != 0
    assert "Usage:" in result.output


def test_cli_group_help() -> None:
    """The --help option lists every command group."""
    runner = CliRunner()
    result = runner.invoke(create_cli(), ["--help"])
    assert result.exit_code == 0
    assert "Cáritas Diocesana de Sobral" in result.output
    for group in ("web", "db", "config", "users"):
        assert group in result.output


@patch("caritas_sobral.cli.LoggingProvider")
def test_log_level_override(mock_logging_provider: MagicMock) -> None:
    """The global --log-level option reconfigures the logger."""
    runner = CliRunner()
    result = runner.invoke(create_cli(), ["--log-level", "DEBUG", "config", "keys"])

    assert result.exit_code == 0
    mock_logging_provider.return_value.get_logger.assert_called_once_with(level_override="DEBUG")


def test_main_invokes_cli() -> None:
    """The console script calls the CLI group."""
    from caritas_sobral.cli.__main__ import main

    with patch("caritas_sobral.cli.__main__.cli") as mock_cli:
        main()
        mock_cli.assert_called_once()
