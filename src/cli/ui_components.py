"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Launch


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Se omite en modo `--json` para no ensuciar la salida en pipelines.
    """

    title = Text("SPACEX LAUNCHES", style="bold cyan")
    subtitle = Text("api.spacexdata.com • v5", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def parse_launch_date(value: str | None) -> datetime | None:
    """Parsea `date_utc` (p.ej. `2006-03-24T22:30:00.000Z`) solo para mostrarlo."""

    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def _format_success(value: bool | None) -> Text:
    if value is None:
        return Text("-", style="dim")
    if value:
        return Text("yes", style="green")
    return Text("no", style="red")


def build_launches_table(launches: Sequence[Launch]) -> Table:
    """Tabla Rich con una fila por lanzamiento, en el orden recibido."""

    table = Table(title="Launches")
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("Name", style="cyan")
    table.add_column("Date (UTC)", style="white", no_wrap=True)
    table.add_column("Success")
    table.add_column("ID", style="magenta", no_wrap=True)

    for launch in launches:
        flight = str(launch.flight_number) if launch.flight_number is not None else "-"
        launched_at = parse_launch_date(launch.date_utc)
        date = launched_at.strftime("%Y-%m-%d %H:%M") if launched_at else (launch.date_utc or "-")
        table.add_row(flight, launch.name, date, _format_success(launch.success), launch.id)
    return table


def build_launch_panel(launch: Launch) -> Panel:
    """Panel de detalle para un único lanzamiento."""

    title = Text(launch.name, style="bold yellow")
    body = Text()
    body.append("ID: ", style="bold")
    body.append(f"{launch.id}\n")
    if launch.flight_number is not None:
        body.append("Flight: ", style="bold")
        body.append(f"{launch.flight_number}\n")
    if launch.date_utc is not None:
        body.append("Date (UTC): ", style="bold")
        body.append(f"{launch.date_utc}\n")
    body.append("Success: ", style="bold")
    body.append_text(_format_success(launch.success))
    body.append("\n")

    if launch.details:
        body.append("\n" + launch.details.strip() + "\n")

    links = launch.links or {}
    webcast = links.get("webcast")
    if isinstance(webcast, str) and webcast:
        body.append(f"\nWebcast: {webcast}", style="dim")

    return Panel(body, title=title, border_style="yellow")
