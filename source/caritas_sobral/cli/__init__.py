"""This module initializes the CLI application."""

import click
from caritas_sobral.cli.config import config_group
from caritas_sobral.cli.db import db_group
from caritas_sobral.cli.users import users_group
from caritas_sobral.cli.web import web_group
from caritas_sobral.providers.logging import LoggingProvider


def create_cli() -> click.Group:
    """Create and configure the main CLI group with all subcommands.

    Returns:
        The main Click command group for the application.
    """

    @click.group()
    @click.option(
        "--log-level",
        type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
        help="Override the default log level for this command.",
    )
    def cli(log_level: str | None) -> None:
        """Command-line tools for the Cáritas Diocesana de Sobral site.

        Args:
            log_level: The desired logging level.
        """
        LoggingProvider().get_logger(level_override=log_level)

    cli.add_command(web_group)
    cli.add_command(db_group)
    cli.add_command(config_group)
    cli.add_command(users_group)

    return cli
