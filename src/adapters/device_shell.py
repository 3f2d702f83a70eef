"""Controlador de dispositivo basado en comandos de shell.

Dos transportes:
- `adb`: desde el host, `adb [-s SERIAL] shell setprop ...`; el GPS va por la
  consola del emulador (`adb emu geo fix`).
- `local`: ejecutando en el propio dispositivo (root), `setprop ...` directo.

Cada comando que falla (exit != 0, binario ausente, timeout) lanza
`PropertyApplyFailure`; el pipeline decide si sigue.
"""

from __future__ import annotations

import subprocess
from typing import Callable, Sequence

from core.config import AppSettings, DeviceMode
from core.domain.errors import PropertyApplyFailure
from core.interfaces.device import DeviceController

CommandRunner = Callable[[Sequence[str], float], "subprocess.CompletedProcess[str]"]


def run_command(args: Sequence[str], timeout: float) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        list(args),
        capture_output=True,
        text=True,
        timeout=timeout,
        check=False,
    )


class DeviceShell(DeviceController):
    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        runner: CommandRunner | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._runner = runner or run_command

    @property
    def mode(self) -> DeviceMode:
        return self._settings.device_mode

    def _adb(self) -> list[str]:
        cmd = [self._settings.adb_path]
        if self._settings.adb_serial:
            cmd += ["-s", self._settings.adb_serial]
        return cmd

    def shell_command(self, *args: str) -> list[str]:
        """Comando completo para ejecutar `args` en la shell del dispositivo."""

        if self.mode is DeviceMode.ADB:
            return self._adb() + ["shell", *args]
        return list(args)

    def geo_command(self, latitude: float, longitude: float) -> list[str]:
        # `geo fix` recibe longitud primero.
        fix = ["geo", "fix", str(longitude), str(latitude)]
        if self.mode is DeviceMode.ADB:
            return self._adb() + ["emu", *fix]
        return fix

    def _run(self, action: str, cmd: Sequence[str]) -> str:
        try:
            proc = self._runner(cmd, self._settings.command_timeout_seconds)
        except FileNotFoundError as exc:
            raise PropertyApplyFailure(action, f"command not found: {cmd[0]}") from exc
        except subprocess.TimeoutExpired as exc:
            raise PropertyApplyFailure(action, f"timed out after {exc.timeout}s") from exc
        except OSError as exc:
            raise PropertyApplyFailure(action, str(exc)) from exc

        if proc.returncode != 0:
            detail = (proc.stderr or proc.stdout or "").strip() or f"exit code {proc.returncode}"
            raise PropertyApplyFailure(action, detail)
        return proc.stdout or ""

    def set_prop(self, key: str, value: str) -> None:
        self._run(f"Failed to set property {key} to {value}", self.shell_command("setprop", key, value))

    def get_prop(self, key: str) -> str:
        out = self._run(f"Failed to get property {key}", self.shell_command("getprop", key))
        return out.strip()

    def restart(self, component: str) -> None:
        self._run(
            f"Failed to restart {component}",
            self.shell_command("setprop", "ctl.restart", component),
        )

    def geo_fix(self, latitude: float, longitude: float) -> None:
        self._run(
            f"Failed to set GPS location to {latitude},{longitude}",
            self.geo_command(latitude, longitude),
        )

    def is_reachable(self) -> tuple[bool, str]:
        """Chequeo best-effort para `doctor`: lee `sys.boot_completed`."""

        try:
            value = self.get_prop("sys.boot_completed")
        except PropertyApplyFailure as exc:
            return False, exc.detail
        if value == "1":
            return True, "boot completed"
        return False, f"sys.boot_completed={value or '<empty>'}"
