"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles entre `spoof` y `doctor`.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import SpoofResult


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("GeoSpoofer", style="bold cyan")
    subtitle = Text("Locale • Carrier • GPS spoofing for Android", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_plan_table(
    *,
    locale: str,
    country_code: str,
    country_name: str | None,
    mcc: str,
    mnc: str,
    latitude: float | None,
    longitude: float | None,
) -> Table:
    """Tabla con lo que se va a aplicar (antes de tocar el dispositivo)."""

    table = Table(title="Spoofing plan")
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("Locale", f"{locale} ({country_code})")
    table.add_row("Country", country_name or "-")
    table.add_row("MCC", mcc)
    table.add_row("MNC", mnc)
    if latitude is not None and longitude is not None:
        table.add_row("GPS", f"{latitude},{longitude}")
    return table


def build_properties_table(result: SpoofResult) -> Table:
    table = Table(title="New Settings Applied")
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")
    for key, value in result.properties.items():
        table.add_row(key, value)
    return table


def build_warnings_panel(warnings: Iterable[str]) -> Panel:
    body = Text()
    for w in warnings:
        body.append(f"- {w}\n")
    return Panel(body, title=Text("Warnings", style="bold yellow"), border_style="yellow")


def print_locales(console: Console, locales: Iterable[str]) -> None:
    # Texto plano, una por línea: se usa en pipes (`| grep`).
    console.print("Possible locale codes:", highlight=False)
    for code in locales:
        console.print(code, highlight=False, soft_wrap=True)
