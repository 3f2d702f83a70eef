"""Tests for the `doctor` sub-commands (CliRunner with fake collaborators)."""

import pytest
from typer.testing import CliRunner

import cli.doctor as doctor
import cli.main as cli_main
from core import config
from core.domain.errors import TransportError

runner = CliRunner()


class FakeShell:
    def __init__(self, reachable: tuple[bool, str]):
        self.reachable = reachable

    def is_reachable(self) -> tuple[bool, str]:
        return self.reachable


class FakeDirectoryClient:
    def __init__(self, records: list | None = None, error: Exception | None = None):
        self.records = records or []
        self.error = error

    def fetch(self, locale: str) -> list:
        if self.error is not None:
            raise self.error
        return self.records


@pytest.fixture(autouse=True)
def adb_mode(monkeypatch) -> None:
    monkeypatch.setenv("GEOSPOOFER_DEVICE_MODE", "adb")
    monkeypatch.delenv("GEOSPOOFER_ADB_SERIAL", raising=False)


def _status_of(output: str, check: str) -> str:
    for line in output.splitlines():
        cells = [c.strip() for c in line.strip("│┃ ").split("│")]
        if cells and cells[0] == check:
            return cells[1]
    raise AssertionError(f"row {check!r} not found in:\n{output}")


class TestDoctorRun:
    def test_all_checks_ok(self, monkeypatch) -> None:
        monkeypatch.setattr(doctor.shutil, "which", lambda tool: f"/usr/bin/{tool}")
        monkeypatch.setattr(doctor, "DeviceShell", lambda settings: FakeShell((True, "boot completed")))
        monkeypatch.setattr(doctor, "LocaleDirectoryClient", lambda settings: FakeDirectoryClient([{}, {}]))

        result = runner.invoke(cli_main.app, ["doctor", "run"])

        assert result.exit_code == 0, result.output
        assert _status_of(result.output, "Device tool") == "OK"
        assert _status_of(result.output, "Device") == "OK"
        assert _status_of(result.output, "Locale directory") == "OK"
        assert "FAIL" not in result.output

    def test_missing_adb_skips_device_check(self, monkeypatch) -> None:
        monkeypatch.setattr(doctor.shutil, "which", lambda tool: None)

        def no_device(settings):
            raise AssertionError("device must not be probed without adb")

        monkeypatch.setattr(doctor, "DeviceShell", no_device)
        monkeypatch.setattr(doctor, "LocaleDirectoryClient", lambda settings: FakeDirectoryClient([]))

        result = runner.invoke(cli_main.app, ["doctor", "run"])

        assert result.exit_code == 0, result.output
        assert _status_of(result.output, "Device tool") == "FAIL"
        assert "Install Android platform-tools" in result.output

    def test_unreachable_device_and_directory(self, monkeypatch) -> None:
        monkeypatch.setattr(doctor.shutil, "which", lambda tool: "/usr/bin/adb")
        monkeypatch.setattr(doctor, "DeviceShell", lambda settings: FakeShell((False, "no devices")))
        failing = FakeDirectoryClient(error=TransportError("en-US", "HTTP 503", status_code=503))
        monkeypatch.setattr(doctor, "LocaleDirectoryClient", lambda settings: failing)

        result = runner.invoke(cli_main.app, ["doctor", "run"])

        assert result.exit_code == 0, result.output
        assert _status_of(result.output, "Device") == "FAIL"
        assert _status_of(result.output, "Locale directory") == "FAIL"


class TestDoctorConfigure:
    @pytest.fixture
    def env_path(self, monkeypatch, tmp_path):
        path = tmp_path / "geospoofer" / ".env"
        monkeypatch.setattr(
            doctor,
            "write_user_env_vars",
            lambda values: config.write_user_env_vars(values, env_path=path),
        )
        return path

    def _written(self, env_path) -> dict[str, str]:
        return config._parse_env_lines(env_path.read_text(encoding="utf-8"))

    def test_adb_mode(self, env_path) -> None:
        result = runner.invoke(
            cli_main.app,
            ["doctor", "configure"],
            input="adb\n/opt/adb\nemulator-5556\nhttps://mirror.test/locales\n",
        )

        assert result.exit_code == 0, result.output
        assert self._written(env_path) == {
            "GEOSPOOFER_DEVICE_MODE": "adb",
            "GEOSPOOFER_ADB_PATH": "/opt/adb",
            "GEOSPOOFER_ADB_SERIAL": "emulator-5556",
            "GEOSPOOFER_LOCALE_DIRECTORY_URL": "https://mirror.test/locales",
        }

    def test_empty_serial_clears_previous_one(self, env_path) -> None:
        env_path.parent.mkdir(parents=True)
        env_path.write_text("GEOSPOOFER_ADB_SERIAL=emulator-5554\n", encoding="utf-8")

        result = runner.invoke(
            cli_main.app,
            ["doctor", "configure"],
            input="adb\nadb\n\nhttps://mirror.test/locales\n",
        )

        assert result.exit_code == 0, result.output
        assert "GEOSPOOFER_ADB_SERIAL" not in self._written(env_path)

    def test_local_mode_drops_adb_keys(self, env_path) -> None:
        env_path.parent.mkdir(parents=True)
        env_path.write_text(
            "GEOSPOOFER_ADB_PATH=/opt/adb\nGEOSPOOFER_ADB_SERIAL=emulator-5554\n", encoding="utf-8"
        )

        result = runner.invoke(
            cli_main.app,
            ["doctor", "configure"],
            input="local\nhttps://mirror.test/locales\n",
        )

        assert result.exit_code == 0, result.output
        assert self._written(env_path) == {
            "GEOSPOOFER_DEVICE_MODE": "local",
            "GEOSPOOFER_LOCALE_DIRECTORY_URL": "https://mirror.test/locales",
        }

    def test_bad_mode_is_rejected(self, env_path) -> None:
        result = runner.invoke(cli_main.app, ["doctor", "configure"], input="usb\n")

        assert result.exit_code == 2
        assert "device mode must be 'adb' or 'local'" in result.output
        assert not env_path.exists()
