"""CLI principal (Typer).

Por qué Typer + Rich:
- Flags tipados y ayuda autogenerada.
- Toda la presentación vive aquí; el Core solo devuelve datos y excepciones.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from adapters.device_shell import DeviceShell
from adapters.json_exporter import export_result_json
from adapters.locale_directory import LocaleDirectoryClient
from cli import doctor
from cli.ui_components import (
    build_plan_table,
    build_properties_table,
    build_warnings_panel,
    print_banner,
    print_locales,
)
from core.config import AppSettings
from core.domain.errors import InvalidLocale, ResolveError
from core.domain.locales import list_locales
from core.domain.models import ResolvedCountry
from core.services.spoof_pipeline import PipelineHooks, SpoofRequest, run_spoof

__version__ = "0.1.0"

app = typer.Typer(
    help="Geo-location spoofer for Android devices.",
    epilog='Example: geospoofer --locale fr-CA --mcc 214 --mnc 21',
    add_completion=False,
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def _digits(value: str) -> str:
    if not value.isdigit():
        raise typer.BadParameter("must contain digits only")
    return value


def _validate_mcc(value: str) -> str:
    value = _digits(value)
    if len(value) != 3:
        raise typer.BadParameter("MCC must be exactly 3 digits")
    return value


def _validate_mnc(value: str) -> str:
    value = _digits(value)
    if len(value) not in (2, 3):
        raise typer.BadParameter("MNC must be 2 or 3 digits")
    return value


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"geospoofer v{__version__}", highlight=False)
        raise typer.Exit()


def _list_locales_callback(value: bool) -> None:
    # Eager: se ejecuta antes de validar el resto de flags.
    if value:
        print_locales(_console, list_locales())
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def spoof(
    ctx: typer.Context,
    locale: str = typer.Option(
        "en-US", "--locale", "-l", help="Language-Country code (e.g., en-US, es-ES, ja-JP)."
    ),
    mcc: str = typer.Option("310", "--mcc", help="Mobile Country Code (e.g., 310).", callback=_validate_mcc),
    mnc: str = typer.Option("260", "--mnc", help="Mobile Network Code (e.g., 260).", callback=_validate_mnc),
    latitude: Optional[float] = typer.Option(
        None, "--latitude", min=-90.0, max=90.0, help="Override GPS latitude (default: capital of the country)."
    ),
    longitude: Optional[float] = typer.Option(
        None, "--longitude", min=-180.0, max=180.0, help="Override GPS longitude (default: capital of the country)."
    ),
    export_json: Optional[Path] = typer.Option(
        None, "--export-json", help="Write the run result as JSON to this path."
    ),
    no_banner: bool = typer.Option(False, "--no-banner", help="Do not print the banner."),
    list_locales_flag: bool = typer.Option(
        False,
        "--list-locales",
        help="List all possible locale codes and exit.",
        is_eager=True,
        callback=_list_locales_callback,
    ),
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", is_eager=True, callback=_version_callback
    ),
) -> None:
    """Spoof locale, carrier (MCC/MNC) and GPS on an Android device."""

    if ctx.invoked_subcommand is not None:
        return

    if (latitude is None) != (longitude is None):
        raise typer.BadParameter("--latitude and --longitude must be given together")

    settings = AppSettings()
    if not no_banner:
        print_banner(_console)

    def on_resolved(country: ResolvedCountry) -> None:
        _console.print(
            build_plan_table(
                locale=locale,
                country_code=country.country_code,
                country_name=country.name,
                mcc=mcc,
                mnc=mnc,
                latitude=latitude if latitude is not None else country.latitude,
                longitude=longitude if longitude is not None else country.longitude,
            )
        )

    hooks = PipelineHooks(
        warning=lambda msg: _err_console.print(f"[yellow]Warning:[/yellow] {msg}", highlight=False),
        resolved=on_resolved,
        step=lambda msg: _console.print(f"[dim]-> {msg}[/dim]", highlight=False),
    )

    request = SpoofRequest(locale=locale, mcc=mcc, mnc=mnc, latitude=latitude, longitude=longitude)
    try:
        result = run_spoof(
            request,
            directory=LocaleDirectoryClient(settings),
            device=DeviceShell(settings),
            hooks=hooks,
        )
    except InvalidLocale as exc:
        _err_console.print(f"[red]Error:[/red] {exc}", highlight=False)
        _err_console.print("Run with --list-locales to see the valid codes.", highlight=False)
        raise typer.Exit(code=1) from exc
    except ResolveError as exc:
        _err_console.print(f"[red]Error:[/red] {exc}", highlight=False)
        raise typer.Exit(code=1) from exc

    _console.print(build_properties_table(result))
    if result.warnings:
        _err_console.print(build_warnings_panel(result.warnings))

    if export_json:
        path = export_result_json(result=result, output_path=export_json)
        _console.print(f"[green]Result saved to:[/green] {path}")

    _console.print("--- Spoofing Complete ---", highlight=False)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
