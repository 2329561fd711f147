"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import HostsLocation, ResolutionResult


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("githubdns", style="bold cyan")
    subtitle = Text("ipaddress.com lookup • hosts file pinning", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_resolution_table(result: ResolutionResult) -> Table:
    table = Table(title="Resolved Domains")
    table.add_column("Domain", style="cyan", no_wrap=True)
    table.add_column("Address", style="green")
    table.add_column("Status", style="white")
    table.add_column("Error", style="red")
    for record in result.records:
        if record.failed:
            status = "FAILED"
        elif record.resolved:
            status = "OK"
        else:
            status = "NOT FOUND"
        table.add_row(record.domain, record.address or "-", status, record.error or "")
    return table


def build_hosts_panel(content: str, location: HostsLocation) -> Panel:
    """Panel con el contenido que se escribiría (modo --dry-run)."""

    # Render every delimiter as a newline so CR-only files display sanely.
    shown = content.replace(location.line_delimiter, "\n")
    return Panel(Text(shown), title=str(location.path), border_style="yellow")
