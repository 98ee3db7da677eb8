#!/usr/bin/env python3
"""
CLI entry point for Pointmap database migrations.
"""

import os
import sys
from collections.abc import Callable
from pathlib import Path

import click

from alembic import command
from alembic.config import Config
from pointmap import __version__
from pointmap.logging import configure_logging, get_logger

logger = get_logger(__name__)


def get_alembic_config() -> Config:
    """Load alembic.ini from POINTMAP_ALEMBIC_INI or the project root."""
    override = os.environ.get("POINTMAP_ALEMBIC_INI")
    if override:
        alembic_ini = Path(override)
    else:
        # src/pointmap/database/cli.py -> project root
        alembic_ini = Path(__file__).resolve().parents[3] / "alembic.ini"

    if not alembic_ini.exists():
        raise FileNotFoundError(f"alembic.ini not found at {alembic_ini}")

    config = Config(str(alembic_ini))
    config.set_main_option("script_location", str(alembic_ini.parent / "alembic"))
    return config


def run_alembic(action: str, fn: Callable[[Config], None], **log_fields) -> None:
    """Run an Alembic command, exiting with status 1 on failure."""
    try:
        config = get_alembic_config()
        logger.info(f"Running {action}", **log_fields)
        fn(config)
        logger.info(f"{action.capitalize()} completed successfully")
    except Exception as e:
        logger.error(f"{action.capitalize()} failed", error=str(e))
        sys.exit(1)


@click.group()
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
@click.version_option(version=__version__, prog_name="pointmap-migrate")
def main(log_level: str) -> None:
    """Pointmap database migration management."""
    configure_logging(debug=(log_level == "debug"))


@main.command()
@click.argument("revision", default="head")
def upgrade(revision: str) -> None:
    """Upgrade database to a revision (default: head)."""
    run_alembic("upgrade", lambda cfg: command.upgrade(cfg, revision), revision=revision)


@main.command()
@click.argument("revision", default="-1")
def downgrade(revision: str) -> None:
    """Downgrade database to a revision (default: -1)."""
    run_alembic("downgrade", lambda cfg: command.downgrade(cfg, revision), revision=revision)


@main.command()
@click.option("-m", "--message", required=True, help="Revision message")
@click.option("--autogenerate/--no-autogenerate", default=True, help="Auto-generate migration")
def revision(message: str, autogenerate: bool) -> None:
    """Create a new migration revision."""
    run_alembic(
        "revision",
        lambda cfg: command.revision(cfg, message=message, autogenerate=autogenerate),
        message=message,
        autogenerate=autogenerate,
    )


@main.command()
@click.argument("revision", default="head")
def stamp(revision: str) -> None:
    """Mark the database as being at a revision without running migrations."""
    run_alembic("stamp", lambda cfg: command.stamp(cfg, revision), revision=revision)


@main.command()
def current() -> None:
    """Show current database revision."""
    run_alembic("current", command.current)


@main.command()
def history() -> None:
    """Show migration history."""
    run_alembic("history", command.history)


if __name__ == "__main__":
    main()
