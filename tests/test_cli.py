"""CLI tests (typer.testing.CliRunner) with fake collaborators."""

import json

import pytest
from typer.testing import CliRunner

import cli.main as cli_main
from core.domain.errors import IncompleteCountryData, TransportError
from core.domain.locales import LOCALE_CODES

from fakes import FakeDevice, FakeDirectory

runner = CliRunner()


@pytest.fixture
def device(monkeypatch) -> FakeDevice:
    fake = FakeDevice()
    monkeypatch.setattr(cli_main, "DeviceShell", lambda settings: fake)
    return fake


@pytest.fixture
def directory(monkeypatch, canada) -> FakeDirectory:
    fake = FakeDirectory({"fr-CA": canada})
    monkeypatch.setattr(cli_main, "LocaleDirectoryClient", lambda settings: fake)
    return fake


class TestListLocales:
    def test_prints_every_code_once_in_order(self) -> None:
        result = runner.invoke(cli_main.app, ["--list-locales"])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "Possible locale codes:"
        assert lines[1:] == list(LOCALE_CODES)

    def test_ignores_other_flags(self) -> None:
        result = runner.invoke(cli_main.app, ["--locale", "xx-ZZ", "--mcc", "abc", "--list-locales"])

        assert result.exit_code == 0
        assert "zu-ZA" in result.output


class TestSpoof:
    def test_success(self, device, directory) -> None:
        result = runner.invoke(cli_main.app, ["--locale", "fr-CA", "--mcc", "302", "--mnc", "720", "--no-banner"])

        assert result.exit_code == 0, result.output
        assert directory.calls == ["fr-CA"]
        assert ("set_prop", "gsm.operator.numeric", "302720") in device.calls
        assert ("geo_fix", 45.4215, -75.6972) in device.calls
        assert "Spoofing Complete" in result.output

    def test_invalid_locale_exits_1(self, device, directory) -> None:
        result = runner.invoke(cli_main.app, ["--locale", "xx-ZZ"])

        assert result.exit_code == 1
        assert "is not valid" in result.output
        assert directory.calls == []
        assert device.calls == []

    def test_http_error_exits_1_without_device_calls(self, monkeypatch, device) -> None:
        failing = FakeDirectory(error=TransportError("fr-CA", "HTTP 502 from directory", status_code=502))
        monkeypatch.setattr(cli_main, "LocaleDirectoryClient", lambda settings: failing)

        result = runner.invoke(cli_main.app, ["--locale", "fr-CA", "--no-banner"])

        assert result.exit_code == 1
        assert "HTTP 502" in result.output
        assert device.calls == []

    def test_incomplete_data_exits_1(self, monkeypatch, device) -> None:
        failing = FakeDirectory(error=IncompleteCountryData("fr-CA", ["capital_longitude"]))
        monkeypatch.setattr(cli_main, "LocaleDirectoryClient", lambda settings: failing)

        result = runner.invoke(cli_main.app, ["--locale", "fr-CA", "--no-banner"])

        assert result.exit_code == 1
        assert device.calls == []

    def test_property_failures_do_not_change_exit_code(self, monkeypatch, directory) -> None:
        fake = FakeDevice(fail={"persist.sys.locale", "geo_fix"})
        monkeypatch.setattr(cli_main, "DeviceShell", lambda settings: fake)

        result = runner.invoke(cli_main.app, ["--locale", "fr-CA", "--no-banner"])

        assert result.exit_code == 0
        assert "Warning" in result.output
        assert ("set_prop", "gsm.operator.numeric", "310260") in fake.calls

    def test_rejects_non_numeric_mcc(self, device, directory) -> None:
        result = runner.invoke(cli_main.app, ["--locale", "fr-CA", "--mcc", "31a"])

        assert result.exit_code == 2
        assert device.calls == []

    def test_latitude_requires_longitude(self, device, directory) -> None:
        result = runner.invoke(cli_main.app, ["--locale", "fr-CA", "--latitude", "40.0"])

        assert result.exit_code == 2
        assert directory.calls == []

    def test_export_json(self, device, directory, tmp_path) -> None:
        out = tmp_path / "reports" / "run.json"
        result = runner.invoke(
            cli_main.app,
            ["--locale", "fr-CA", "--latitude", "46.8139", "--longitude", "-71.208", "--export-json", str(out), "--no-banner"],
        )

        assert result.exit_code == 0, result.output
        payload = json.loads(out.read_text(encoding="utf-8"))
        assert payload["locale"]["raw"] == "fr-CA"
        assert payload["country"]["name"] == "Canada"
        assert payload["carrier"] == {"mcc": "310", "mnc": "260"}
        assert payload["latitude"] == 46.8139
        assert payload["warnings"] == []

    def test_version(self) -> None:
        result = runner.invoke(cli_main.app, ["--version"])

        assert result.exit_code == 0
        assert cli_main.__version__ in result.output
