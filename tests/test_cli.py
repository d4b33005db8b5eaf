from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from kmon import cli
from kmon.core.registry import NOT_FOUND_SENTINEL

runner = CliRunner()


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


@pytest.fixture
def sysfs(tmp_path: Path) -> Path:
    _write(tmp_path / "class" / "thermal" / "thermal_zone0" / "temp", "71000\n")
    _write(tmp_path / "class" / "thermal" / "thermal_zone0" / "type", "x86_pkg_temp\n")
    _write(tmp_path / "class" / "net" / "lo" / "operstate", "unknown\n")
    _write(tmp_path / "class" / "net" / "eth0" / "operstate", "up\n")
    _write(tmp_path / "class" / "net" / "eth0" / "address", "aa:bb:cc:dd:ee:ff\n")
    _write(tmp_path / "class" / "net" / "eth0" / "statistics" / "rx_bytes", "1024\n")
    return tmp_path


def test_categories_command(sysfs: Path) -> None:
    result = runner.invoke(cli.app, ["--sysfs-root", str(sysfs), "categories"])
    assert result.exit_code == 0
    assert "thermal" in result.stdout
    assert str(sysfs / "class" / "power_supply") in result.stdout


def test_devices_command(sysfs: Path) -> None:
    result = runner.invoke(cli.app, ["--sysfs-root", str(sysfs), "devices", "network"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["eth0", "lo"]


def test_devices_command_missing_category_root(sysfs: Path) -> None:
    result = runner.invoke(cli.app, ["--sysfs-root", str(sysfs), "devices", "leds"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == [NOT_FOUND_SENTINEL]


def test_show_command_network(sysfs: Path) -> None:
    result = runner.invoke(cli.app, ["--sysfs-root", str(sysfs), "show", "network", "eth0"])
    assert result.exit_code == 0
    assert "(network)" in result.stdout
    assert "Link State: up" in result.stdout
    assert "MAC: aa:bb:cc:dd:ee:ff" in result.stdout
    assert "Data Rx: 1024 bytes" in result.stdout


def test_show_command_reads_sysfs_root_from_env(sysfs: Path) -> None:
    result = runner.invoke(
        cli.app,
        ["show", "thermal", "thermal_zone0"],
        env={"KMON_SYSFS_ROOT": str(sysfs)},
    )
    assert result.exit_code == 0
    assert "Temperature: 71.0 °C" in result.stdout
    assert "Sensor Type: x86_pkg_temp" in result.stdout


def test_show_unknown_device_error_is_clean(sysfs: Path) -> None:
    result = runner.invoke(cli.app, ["--sysfs-root", str(sysfs), "show", "network", "wlan0"])
    assert result.exit_code == 1
    assert "Error: No device 'wlan0'" in result.stderr
    assert "Traceback" not in result.stdout
    assert "Traceback" not in result.stderr


def test_unknown_category_error_is_clean(sysfs: Path) -> None:
    result = runner.invoke(cli.app, ["--sysfs-root", str(sysfs), "devices", "gpu"])
    assert result.exit_code == 1
    assert "Error: Unknown category 'gpu'" in result.stderr


def test_dashboard_command_runs_controller(monkeypatch: pytest.MonkeyPatch, sysfs: Path) -> None:
    calls = []

    def fake_run_dashboard(controller, interval):
        calls.append((controller.render(), interval))

    monkeypatch.setattr("kmon.tui.run_dashboard", fake_run_dashboard)
    result = runner.invoke(
        cli.app, ["--sysfs-root", str(sysfs), "dashboard", "--interval", "2"]
    )
    assert result.exit_code == 0
    frame, interval = calls[0]
    assert interval == 2.0
    assert frame.devices == ("thermal_zone0",)
    assert frame.summary.texts()[0] == "Temperature: 71.0 °C"
