#!/usr/bin/env python3
"""
Main CLI entry point for the eventgraph server.
"""

import os
import sys
from typing import Any

import click
import uvicorn

from eventgraph import __version__
from eventgraph.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="eventgraph")
def cli() -> None:
    """eventgraph CLI - run the API server and inspect its schema and data."""
    pass


@cli.command()
@click.option("--host", default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
@click.option("--port", default=4000, type=int, help="Port to bind to (default: 4000)")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
@click.option(
    "--read-only",
    is_flag=True,
    default=False,
    help="Serve the schema without mutations",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, read_only: bool, log_level: str) -> None:
    """Start the eventgraph API server."""

    configure_logging(debug=(log_level == "debug"), log_level=log_level)

    logger.info(
        "Starting eventgraph API server",
        host=host,
        port=port,
        reload=reload,
        read_only=read_only,
        log_level=log_level,
    )

    # A reloading server imports the app in a fresh process that reads
    # its settings from the environment
    if log_level == "debug":
        os.environ["EVENTGRAPH_DEBUG"] = "true"
    os.environ["EVENTGRAPH_LOG_LEVEL"] = log_level
    if read_only:
        os.environ["EVENTGRAPH_MUTATIONS_ENABLED"] = "false"

    try:
        if reload:
            uvicorn.run(
                "eventgraph.api.app:app",
                host=host,
                port=port,
                reload=reload,
                log_level=log_level,
                access_log=True,
            )
        else:
            # Build the app here, the global settings predate the options above
            from eventgraph.api.app import create_app
            from eventgraph.config import Settings

            overrides: dict[str, Any] = {"log_level": log_level}
            if log_level == "debug":
                overrides["debug"] = True
            if read_only:
                overrides["mutations_enabled"] = False
            app = create_app(Settings(**overrides))

            uvicorn.run(
                app,
                host=host,
                port=port,
                log_level=log_level,
                access_log=True,
            )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
@click.option(
    "--read-only",
    is_flag=True,
    default=False,
    help="Print the schema without mutations",
)
def schema(read_only: bool) -> None:
    """Print the GraphQL schema (SDL)."""
    from eventgraph.graphql.schema import create_schema

    click.echo(create_schema(mutations_enabled=not read_only).as_str())


@cli.command("seed-info")
@click.option(
    "--seed-path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Seed JSON file to inspect (default: bundled sample data)",
)
def seed_info(seed_path: str | None) -> None:
    """Show how many records the seed data holds."""
    from eventgraph.store import SeedDataError, load_default_store

    configure_logging()

    try:
        store = load_default_store(seed_path)
    except SeedDataError as e:
        logger.error("Failed to load seed data", error=str(e))
        click.echo(f"✗ Error loading seed data: {e}", err=True)
        sys.exit(1)

    click.echo(f"Seed data: {seed_path or 'bundled'}")
    for name, count in store.counts().items():
        click.echo(f"  {name}: {count}")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
