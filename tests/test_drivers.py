from __future__ import annotations

from pathlib import Path

import pytest

from kmon.core.drivers import Driver, NetworkDriver, PowerDriver, ThermalDriver, parse_int
from kmon.core.model import Severity
from kmon.sources.sysfs import SysfsSource


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def test_parse_int_success_and_failure() -> None:
    assert parse_int(" 42000\n").value == 42000
    failed = parse_int("abc")
    assert not failed.ok
    assert failed.value is None


@pytest.mark.parametrize("raw", ["45_000", "٤٥٠٠٠", "0x10", "+-5", "1e3"])
def test_parse_int_rejects_non_decimal_forms(raw: str) -> None:
    assert not parse_int(raw).ok


def test_parse_int_accepts_sign() -> None:
    assert parse_int("+500").value == 500
    assert parse_int("-500").value == -500


def test_driver_without_summarize_cannot_be_created() -> None:
    class IncompleteDriver(Driver):
        name = "incomplete"
        marker = "brightness"

    with pytest.raises(TypeError):
        IncompleteDriver()


def test_thermal_underscore_literal_is_parse_error(tmp_path: Path) -> None:
    _write(tmp_path / "temp", "45_000\n")
    summary = ThermalDriver().summarize(tmp_path, SysfsSource())
    assert summary.texts() == ["Parse Error"]


@pytest.mark.parametrize(
    ("raw", "shown", "severity"),
    [
        ("12350", "12.4 °C", Severity.NORMAL),
        ("1150", "1.2 °C", Severity.NORMAL),
        ("60050", "60.1 °C", Severity.ALERT),
        ("45000", "45.0 °C", Severity.NORMAL),
        ("60000", "60.0 °C", Severity.NORMAL),
        ("60001", "60.0 °C", Severity.ALERT),
        ("72400", "72.4 °C", Severity.ALERT),
        ("-5000", "-5.0 °C", Severity.NORMAL),
    ],
)
def test_thermal_converts_millidegrees(tmp_path: Path, raw: str, shown: str, severity: Severity) -> None:
    _write(tmp_path / "temp", raw + "\n")
    summary = ThermalDriver().summarize(tmp_path, SysfsSource())
    assert summary.driver == "thermal"
    assert len(summary.lines) == 1
    assert summary.lines[0].text == f"Temperature: {shown}"
    assert summary.lines[0].severity is severity


def test_thermal_appends_sensor_type(tmp_path: Path) -> None:
    _write(tmp_path / "temp", "38000\n")
    _write(tmp_path / "type", "x86_pkg_temp\n")
    summary = ThermalDriver().summarize(tmp_path, SysfsSource())
    assert summary.texts() == ["Temperature: 38.0 °C", "Sensor Type: x86_pkg_temp"]


def test_thermal_skips_empty_sensor_type(tmp_path: Path) -> None:
    _write(tmp_path / "temp", "38000\n")
    _write(tmp_path / "type", "\n")
    summary = ThermalDriver().summarize(tmp_path, SysfsSource())
    assert summary.texts() == ["Temperature: 38.0 °C"]


@pytest.mark.parametrize("raw", ["abc", "", "45.5", "12 34"])
def test_thermal_parse_error_is_a_single_line(tmp_path: Path, raw: str) -> None:
    _write(tmp_path / "temp", raw)
    _write(tmp_path / "type", "acpitz\n")
    summary = ThermalDriver().summarize(tmp_path, SysfsSource())
    assert summary.texts() == ["Parse Error"]
    assert summary.lines[0].severity is Severity.ALERT


def test_network_summary(tmp_path: Path) -> None:
    _write(tmp_path / "operstate", "up\n")
    _write(tmp_path / "address", "aa:bb:cc:dd:ee:ff\n")
    _write(tmp_path / "statistics" / "rx_bytes", "1024\n")
    summary = NetworkDriver().summarize(tmp_path, SysfsSource())
    assert summary.texts() == [
        "Link State: up",
        "MAC: aa:bb:cc:dd:ee:ff",
        "Data Rx: 1024 bytes",
    ]
    assert summary.lines[0].severity is Severity.HEALTHY
    assert summary.lines[1].severity is None


def test_network_non_up_state_is_unhealthy(tmp_path: Path) -> None:
    _write(tmp_path / "operstate", "dormant\n")
    summary = NetworkDriver().summarize(tmp_path, SysfsSource())
    assert summary.texts() == ["Link State: dormant"]
    assert summary.lines[0].severity is Severity.UNHEALTHY


def test_network_empty_state_is_down(tmp_path: Path) -> None:
    _write(tmp_path / "operstate", "")
    _write(tmp_path / "address", "\n")
    summary = NetworkDriver().summarize(tmp_path, SysfsSource())
    assert summary.texts() == ["Link State: down"]
    assert summary.lines[0].severity is Severity.UNHEALTHY


def test_power_summary(tmp_path: Path) -> None:
    _write(tmp_path / "capacity", "85\n")
    _write(tmp_path / "status", "Charging\n")
    summary = PowerDriver().summarize(tmp_path, SysfsSource())
    assert summary.texts() == ["Battery Level: 85%", "Status: Charging"]
    assert all(line.severity is None for line in summary.lines)


def test_power_missing_status_displays_empty(tmp_path: Path) -> None:
    _write(tmp_path / "capacity", "\n")
    summary = PowerDriver().summarize(tmp_path, SysfsSource())
    assert summary.texts() == ["Battery Level: %", "Status: "]
