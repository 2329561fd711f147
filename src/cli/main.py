"""CLI principal (Typer).

Comandos:
- `update`: resuelve los dominios y reescribe el bloque gestionado del hosts.
- `resolve`: solo resuelve y muestra la tabla.
- `doctor`: diagnósticos del entorno.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from adapters.http_client import build_async_client
from adapters.lookup import IPAddressComResolver
from cli import doctor
from cli.ui_components import build_hosts_panel, build_resolution_table, print_banner
from core.config import AppSettings, get_hosts_location
from core.domain.models import ResolutionResult
from core.errors import EnvironmentFailure
from core.logging_config import configure_logging
from core.services.hosts_editor import update_hosts_file
from core.services.resolution import resolve_all

app = typer.Typer(
    no_args_is_help=True,
    help="Pin GitHub domains to their current IPv4 addresses in the hosts file.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()


def _load_settings(**overrides: Any) -> AppSettings:
    values = {k: v for k, v in overrides.items() if v is not None}
    try:
        return AppSettings(**values)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc


async def resolve_domains(settings: AppSettings) -> ResolutionResult:
    """Resuelve todos los dominios configurados con un único cliente HTTP."""

    async with build_async_client(settings) as client:
        resolver = IPAddressComResolver(settings, client=client)
        return await resolve_all(settings.domain_list(), resolver)


@app.command()
def update(
    domains: str | None = typer.Option(
        None, "--domains", help="Comma-separated domains to write to the hosts file."
    ),
    hosts_file: Path | None = typer.Option(
        None, "--hosts-file", help="Hosts file to edit (defaults to the OS hosts file)."
    ),
    line_delimiter: str | None = typer.Option(
        None, "--line-delimiter", help="Line delimiter of the hosts file: lf, cr or crlf."
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the new content instead of writing it."),
    atomic: bool | None = typer.Option(
        None, "--atomic/--no-atomic", help="Replace the file atomically (default from settings)."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Skip the banner."),
) -> None:
    """Resolve the domains and rewrite the managed block of the hosts file."""

    settings = _load_settings(
        domains=domains,
        hosts_path=hosts_file,
        line_delimiter=line_delimiter,
        atomic_write=atomic,
    )
    configure_logging("DEBUG" if verbose else settings.log_level)
    if not no_banner:
        print_banner(_console)

    try:
        location = get_hosts_location(settings)
        result = asyncio.run(resolve_domains(settings))
        _console.print(build_resolution_table(result))
        content = update_hosts_file(
            location,
            result.as_map(),
            atomic=settings.atomic_write,
            dry_run=dry_run,
        )
    except EnvironmentFailure as exc:
        _console.print(f"[red]Fatal:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    if dry_run:
        _console.print(build_hosts_panel(content, location))
    else:
        _console.print(f"[green]Updated[/green] {location.path}")


@app.command()
def resolve(
    domains: str | None = typer.Option(None, "--domains", help="Comma-separated domains to resolve."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """Resolve the domains and show the addresses without touching the hosts file."""

    settings = _load_settings(domains=domains)
    configure_logging("DEBUG" if verbose else settings.log_level)
    result = asyncio.run(resolve_domains(settings))
    _console.print(build_resolution_table(result))
    if not result.resolved:
        raise typer.Exit(code=2)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
