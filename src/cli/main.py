"""CLI principal (Typer + Rich).

Por qué la CLI es fina:
- Toda la lógica HTTP/decodificación vive en `adapters.spacex_api`.
- Aquí solo se elige la salida (tabla, panel, JSON) y se traducen errores a
  códigos de salida.
"""

from __future__ import annotations

import asyncio
import json
import random
from pathlib import Path
from typing import Optional

import httpx
import typer
from loguru import logger
from pydantic import ValidationError
from rich.console import Console

from adapters.json_exporter import export_launches_json, launches_to_payload
from adapters.spacex_api import LaunchClientHooks, SpaceXLaunchClient
from cli import doctor
from cli.ui_components import build_launch_panel, build_launches_table, print_banner
from core.config import AppSettings
from core.errors import LaunchClientError
from core.interfaces.launches import LaunchSource
from core.logger import configure_logging

app = typer.Typer(
    no_args_is_help=True,
    help="Query the public SpaceX launches API from the terminal.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def _build_source(
    settings: AppSettings,
    *,
    seed: int | None = None,
    hooks: LaunchClientHooks | None = None,
) -> LaunchSource:
    rng = random.Random(seed) if seed is not None else None
    return SpaceXLaunchClient(settings, rng=rng, hooks=hooks)


def _debug_hooks() -> LaunchClientHooks:
    def on_request(method: str, url: str) -> None:
        _err_console.print(f"[dim]→ {method} {url}[/dim]")

    return LaunchClientHooks(on_request=on_request)


def _fail(exc: Exception) -> typer.Exit:
    logger.debug("Command failed: {exc!r}", exc=exc)
    _err_console.print(f"[red]Request failed:[/red] {exc}")
    return typer.Exit(code=1)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging + request trace."),
) -> None:
    try:
        settings = AppSettings()
    except ValidationError as exc:
        _err_console.print(f"[red]Invalid configuration:[/red] {exc}")
        raise typer.Exit(code=2) from exc
    configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = {"settings": settings, "verbose": verbose}


@app.command()
def latest(
    ctx: typer.Context,
    as_json: bool = typer.Option(False, "--json", help="Print the launches as sent by the API (JSON) instead of a table."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Also write the launches to a JSON file."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for the random page number."),
) -> None:
    """Show one page of launches sorted by date (ascending)."""

    settings: AppSettings = ctx.obj["settings"]
    hooks = _debug_hooks() if ctx.obj["verbose"] else None
    source = _build_source(settings, seed=seed, hooks=hooks)

    try:
        launches = asyncio.run(source.list_recent_launches())
    except (LaunchClientError, httpx.HTTPError) as exc:
        raise _fail(exc) from exc

    if output is not None:
        export_launches_json(launches=launches, output_path=output)

    if as_json:
        typer.echo(json.dumps(launches_to_payload(launches), ensure_ascii=False, indent=2))
        return

    print_banner(_console)
    if not launches:
        _console.print("[yellow]No launches returned for this page.[/yellow]")
    else:
        _console.print(build_launches_table(launches))
    if output is not None:
        _console.print(f"[green]Saved:[/green] {output}")


@app.command()
def show(
    ctx: typer.Context,
    launch_id: str = typer.Argument(..., help="Launch identifier, e.g. 5eb87cd9ffd86e000604b32a."),
    as_json: bool = typer.Option(False, "--json", help="Print the launch as sent by the API (JSON) instead of a panel."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Also write the launch to a JSON file."),
) -> None:
    """Show a single launch by its identifier."""

    settings: AppSettings = ctx.obj["settings"]
    hooks = _debug_hooks() if ctx.obj["verbose"] else None
    source = _build_source(settings, hooks=hooks)

    try:
        launch = asyncio.run(source.get_launch_by_id(launch_id))
    except (LaunchClientError, httpx.HTTPError) as exc:
        raise _fail(exc) from exc

    if output is not None:
        export_launches_json(launches=[launch], output_path=output)

    if as_json:
        typer.echo(json.dumps(launches_to_payload([launch])[0], ensure_ascii=False, indent=2))
        return

    _console.print(build_launch_panel(launch))
    if output is not None:
        _console.print(f"[green]Saved:[/green] {output}")


def run() -> None:
    app()
