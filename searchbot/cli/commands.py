"""CLI commands for searchbot."""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Any

import typer
from loguru import logger

from searchbot import __logo__, __version__
from searchbot.agent.tools.factory import build_tool_registry
from searchbot.config.loader import convert_to_camel, load_config

app = typer.Typer(
    name="searchbot",
    help=f"{__logo__} searchbot - headless-browser web search",
    no_args_is_help=True,
    add_completion=False,
)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{__logo__} searchbot v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True
    ),
) -> None:
    """searchbot - headless-browser web search."""


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


@app.command()
def search(
    query: str = typer.Argument(..., help="Search query"),
    domain: str | None = typer.Option(None, "--domain", "-d", help="Restrict results to a site"),
    max_results: int | None = typer.Option(None, "--max-results", "-n", min=1, help="Results to process"),
    window_size: int | None = typer.Option(None, "--window-size", min=1, help="Key-phrase window in words"),
    output_dir: str | None = typer.Option(None, "--output-dir", "-o", help="Directory for the JSON artifact"),
    workspace: Path = typer.Option(Path("."), "--workspace", "-w", help="Base directory for relative paths"),
    config_path: Path | None = typer.Option(None, "--config", "-c", help="Config file path"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt"),
    verbose: bool = typer.Option(False, "--verbose", help="Show debug logs"),
) -> None:
    """Search the web and print the analyzed results."""
    _configure_logging(verbose)
    config = load_config(config_path)

    async def approve(message: str) -> bool:
        if yes:
            return True
        details = json.loads(message)
        typer.echo(f"{details['description']}\nResults directory: {details['path']}")
        return await asyncio.to_thread(typer.confirm, "Proceed?", default=True)

    failures: list[str] = []

    async def report_error(stage: str, error: BaseException) -> None:
        logger.error("Error {}: {}", stage, error)
        failures.append(str(error))

    registry = build_tool_registry(
        workspace=workspace,
        config=config,
        approval=approve,
        error_sink=report_error,
    )
    if not registry.has("web_search"):
        typer.echo("web_search is disabled (tools.web.search.enabled=false)", err=True)
        raise typer.Exit(1)

    params: dict[str, Any] = {"query": query}
    if domain:
        params["domain"] = domain
    if max_results is not None:
        params["max_results"] = max_results
    if window_size is not None:
        params["sliding_window_size"] = window_size
    if output_dir:
        params["chunk_dir"] = output_dir

    result = asyncio.run(registry.execute("web_search", params))
    if failures or result.startswith("Error"):
        typer.echo(result, err=True)
        raise typer.Exit(1)
    typer.echo(result)


@app.command()
def config(
    config_path: Path | None = typer.Option(None, "--config", "-c", help="Config file path"),
) -> None:
    """Print the effective configuration."""
    loaded = load_config(config_path)
    typer.echo(json.dumps(convert_to_camel(loaded.model_dump()), indent=2))


if __name__ == "__main__":
    app()
