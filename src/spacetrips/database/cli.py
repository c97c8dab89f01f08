"""
``spacetrips-migrate``: Alembic migrations for the users/trips schema.
"""

import sys
from collections.abc import Callable
from pathlib import Path

import click

from alembic import command
from alembic.config import Config
from spacetrips import __version__
from spacetrips.logging import configure_logging, get_logger

logger = get_logger(__name__)

# src/spacetrips/database/cli.py -> project root
DEFAULT_ALEMBIC_INI = Path(__file__).resolve().parents[3] / "alembic.ini"


def load_alembic_config(path: Path | str | None = None) -> Config:
    """Load ``alembic.ini``, by default the one at the project root."""
    alembic_ini = Path(path) if path else DEFAULT_ALEMBIC_INI
    if not alembic_ini.is_file():
        raise click.ClickException(f"alembic.ini not found at {alembic_ini}")
    return Config(str(alembic_ini))


def _run(action: str, operation: Callable[[], None]) -> None:
    try:
        operation()
    except Exception as e:
        logger.error("Migration command failed", action=action, error=str(e))
        click.echo(f"✗ {action} failed: {e}", err=True)
        sys.exit(1)


@click.group()
@click.option(
    "--config",
    "config_path",
    envvar="SPACETRIPS_ALEMBIC_CONFIG",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to alembic.ini (default: project root)",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
@click.version_option(version=__version__, prog_name="spacetrips-migrate")
@click.pass_context
def main(ctx: click.Context, config_path: str | None, log_level: str) -> None:
    """Manage the Space Trips database schema."""
    configure_logging(debug=(log_level == "debug"), level=log_level)
    ctx.obj = load_alembic_config(config_path)


@main.command()
@click.argument("revision", default="head")
@click.option("--sql", is_flag=True, help="Print the SQL instead of running it")
@click.pass_obj
def upgrade(config: Config, revision: str, sql: bool) -> None:
    """Upgrade the schema to REVISION (default: head)."""
    logger.info("Upgrading database", revision=revision, offline=sql)
    _run("upgrade", lambda: command.upgrade(config, revision, sql=sql))


@main.command()
@click.argument("revision", default="-1")
@click.pass_obj
def downgrade(config: Config, revision: str) -> None:
    """Downgrade the schema to REVISION (default: one step back)."""
    logger.info("Downgrading database", revision=revision)
    _run("downgrade", lambda: command.downgrade(config, revision))


@main.command()
@click.pass_obj
def current(config: Config) -> None:
    """Show the revision the database is at."""
    _run("current", lambda: command.current(config))


@main.command()
@click.pass_obj
def history(config: Config) -> None:
    """List known revisions."""
    _run("history", lambda: command.history(config))


if __name__ == "__main__":
    main()
