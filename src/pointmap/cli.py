#!/usr/bin/env python3
"""
Main CLI entry point for Pointmap backend server.
"""

import asyncio
import os
import sys

import click
import uvicorn

from pointmap import __version__
from pointmap.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="pointmap")
def cli() -> None:
    """Pointmap CLI - manage the server and database."""
    pass


@cli.command()
@click.option("--host", default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
@click.option("--port", default=8090, type=int, help="Port to bind to (default: 8090)")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
@click.option("--workers", default=1, type=int, help="Number of worker processes (default: 1)")
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, workers: int, log_level: str) -> None:
    """Start the Pointmap API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting Pointmap API server",
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=log_level,
    )

    # The app reads its settings at import time
    if log_level == "debug":
        os.environ["POINTMAP_DEBUG"] = "true"
        os.environ["POINTMAP_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("POINTMAP_DEBUG", "false")
        os.environ.setdefault("POINTMAP_LOG_LEVEL", log_level)

    try:
        if reload or workers > 1:
            uvicorn.run(
                "pointmap.api.app:app",
                host=host,
                port=port,
                reload=reload,
                workers=(workers if not reload else 1),
                log_level=log_level,
                access_log=True,
            )
        else:
            from pointmap.api.app import app

            uvicorn.run(app, host=host, port=port, log_level=log_level, access_log=True)
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("init-db")
@click.option("--drop", is_flag=True, default=False, help="Drop existing tables first")
def init_db(drop: bool) -> None:
    """Create the database tables directly from the models (no migrations)."""
    from pointmap.database.connection import create_tables, dispose_database, drop_tables

    configure_logging()

    async def do_init():
        try:
            if drop:
                await drop_tables()
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


@cli.command()
@click.option(
    "--force", is_flag=True, default=False, help="Insert sample maps even if they already exist"
)
def seed(force: bool) -> None:
    """Seed the database with sample maps and points."""
    from pointmap.database.connection import dispose_database, get_async_session
    from pointmap.database.seed_data import seed_sample_maps

    configure_logging()

    async def do_seed():
        try:
            async with get_async_session() as db:
                return await seed_sample_maps(db, force=force)
        finally:
            await dispose_database()

    try:
        created = asyncio.run(do_seed())
    except Exception as e:
        logger.error("Failed to seed database", error=str(e))
        click.echo(f"✗ Error seeding database: {e}", err=True)
        sys.exit(1)

    click.echo(f"✓ Database seeded successfully ({len(created)} map(s) created)")
    for map_id in created:
        click.echo(f"  Map: {map_id}")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
