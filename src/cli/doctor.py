"""Doctor command for environment diagnostics."""

from __future__ import annotations

import shutil

import typer
from rich.console import Console
from rich.table import Table

from adapters.device_shell import DeviceShell
from adapters.locale_directory import LocaleDirectoryClient
from core.config import AppSettings, DeviceMode, write_user_env_vars
from core.domain.errors import ResolveError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_tool(settings: AppSettings) -> tuple[bool, str]:
    """Checks the device tool is on PATH (adb on the host, setprop on device)."""

    tool = settings.adb_path if settings.device_mode is DeviceMode.ADB else "setprop"
    found = shutil.which(tool)
    if found:
        return True, found
    return False, f"'{tool}' not found on PATH"


def _check_directory(settings: AppSettings) -> tuple[bool, str]:
    client = LocaleDirectoryClient(settings)
    try:
        records = client.fetch("en-US")
    except ResolveError as exc:
        return False, exc.detail
    return True, f"{len(records)} records"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="GeoSpoofer Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("Device mode", "OK", settings.device_mode.value)
    if settings.device_mode is DeviceMode.ADB:
        table.add_row("ADB serial", "OK" if settings.adb_serial else "OPTIONAL", settings.adb_serial or "default device")
    table.add_row("Directory URL", "OK", settings.locale_directory_url)

    ok_tool, detail_tool = _check_tool(settings)
    table.add_row("Device tool", "OK" if ok_tool else "FAIL", detail_tool)

    if ok_tool:
        ok_device, detail_device = DeviceShell(settings).is_reachable()
        table.add_row("Device", "OK" if ok_device else "FAIL", detail_device)

    ok_dir, detail_dir = _check_directory(settings)
    table.add_row("Locale directory", "OK" if ok_dir else "FAIL", detail_dir)

    _console.print(table)

    if not ok_tool and settings.device_mode is DeviceMode.ADB:
        _console.print(
            "\n[yellow]Note:[/yellow] Install Android platform-tools or set GEOSPOOFER_ADB_PATH."
        )


@app.command()
def configure() -> None:
    """Interactive setup (stores config in the user config .env)."""

    mode = typer.prompt(
        "Device mode (adb/local)",
        default=DeviceMode.ADB.value,
        show_default=True,
    ).strip().lower()
    try:
        device_mode = DeviceMode(mode)
    except ValueError as exc:
        raise typer.BadParameter("device mode must be 'adb' or 'local'") from exc

    values: dict[str, str | None] = {"GEOSPOOFER_DEVICE_MODE": device_mode.value}
    if device_mode is DeviceMode.ADB:
        values["GEOSPOOFER_ADB_PATH"] = typer.prompt("adb executable", default="adb").strip()
        serial = typer.prompt("Device serial (empty for default)", default="", show_default=False).strip()
        values["GEOSPOOFER_ADB_SERIAL"] = serial or None
    else:
        values["GEOSPOOFER_ADB_PATH"] = None
        values["GEOSPOOFER_ADB_SERIAL"] = None

    url = typer.prompt(
        "Locale directory URL",
        default=AppSettings().locale_directory_url,
        show_default=True,
    ).strip()
    if not url:
        raise typer.BadParameter("the directory URL is required")
    values["GEOSPOOFER_LOCALE_DIRECTORY_URL"] = url

    env_path = write_user_env_vars(values)
    _console.print(f"[green]Saved config to:[/green] {env_path}")
