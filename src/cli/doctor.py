"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio
import os

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from adapters.lookup import build_lookup_target
from core.config import AppSettings, get_hosts_location
from core.errors import EnvironmentFailure

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

_DELIMITER_NAMES = {"\n": "LF", "\r": "CR", "\r\n": "CRLF"}


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="githubdns Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    domains = settings.domain_list()
    table.add_row("Domains", "OK" if domains else "FAIL", ", ".join(domains) or "none configured")

    # Hosts file
    hosts_ok = False
    try:
        location = get_hosts_location(settings)
        table.add_row("Hosts file", "OK", str(location.path))
        table.add_row("Line delimiter", "OK", _DELIMITER_NAMES.get(location.line_delimiter, repr(location.line_delimiter)))
        readable = os.access(location.path, os.R_OK)
        writable = os.access(location.path, os.W_OK)
        table.add_row("Hosts readable", "OK" if readable else "FAIL", "" if readable else "missing or no permission")
        table.add_row("Hosts writable", "OK" if writable else "FAIL", "" if writable else "run as root/administrator")
        hosts_ok = readable and writable
    except EnvironmentFailure as exc:
        table.add_row("Hosts file", "FAIL", str(exc))

    # Connectivity (best-effort)
    probe = build_lookup_target(domains[0] if domains else "github.com", settings.lookup_suffix)
    ok_http, detail_http = asyncio.run(_check_http(probe.url, settings))
    table.add_row("Lookup service", "OK" if ok_http else "FAIL", f"{probe.url}: {detail_http}")

    _console.print(table)

    if not hosts_ok:
        _console.print(
            "\n[yellow]Note:[/yellow] `githubdns update` needs write access to the hosts file; "
            "use `--hosts-file` or GITHUBDNS_HOSTS_PATH to point at another file."
        )
