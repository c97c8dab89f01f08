#!/usr/bin/env python3
"""
Main CLI entry point for the Space Trips server.
"""

import asyncio
import os
import sys

import click
import uvicorn

from spacetrips import __version__
from spacetrips.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="spacetrips")
def cli() -> None:
    """Space Trips CLI - run the server and manage the database."""
    pass


@cli.command()
@click.option("--host", default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
@click.option("--port", default=4000, type=int, help="Port to bind to (default: 4000)")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the Space Trips API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info("Starting Space Trips API server", host=host, port=port, reload=reload)

    # The app reads these at import time, including under the reloader
    if log_level == "debug":
        os.environ["SPACETRIPS_DEBUG"] = "true"
        os.environ["SPACETRIPS_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("SPACETRIPS_DEBUG", "false")
        os.environ.setdefault("SPACETRIPS_LOG_LEVEL", log_level)

    try:
        uvicorn.run(
            "spacetrips.api.app:app",
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("init-db")
def init_db() -> None:
    """Create the database tables without running migrations (local SQLite)."""
    from spacetrips.database.connection import create_tables, dispose_database

    configure_logging()

    async def do_init():
        try:
            await create_tables()
        finally:
            await dispose_database()

    try:
        asyncio.run(do_init())
    except Exception as e:
        logger.error("Failed to create tables", error=str(e))
        click.echo(f"✗ Error creating tables: {e}", err=True)
        sys.exit(1)
    click.echo("✓ Database tables created")


if __name__ == "__main__":
    cli()
