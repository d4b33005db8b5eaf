"""Typer CLI entrypoint."""

from __future__ import annotations

import logging

import typer

from kmon.core.config import load_settings
from kmon.core.errors import KmonError
from kmon.core.model import MetricLine, Severity
from kmon.core.service import DashboardController, MonitorService

app = typer.Typer(help="Browse kernel device metrics under /sys/class")

_SEVERITY_COLORS = {
    Severity.NORMAL: typer.colors.GREEN,
    Severity.HEALTHY: typer.colors.GREEN,
    Severity.ALERT: typer.colors.RED,
    Severity.UNHEALTHY: typer.colors.RED,
    Severity.MUTED: typer.colors.BRIGHT_BLACK,
}


def _configure_logging(verbose: bool, log_file: str | None) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        filename=log_file,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def _build_service(ctx: typer.Context, refresh_s: float | None = None) -> MonitorService:
    options = ctx.obj or {}
    settings = load_settings(sysfs_root=options.get("sysfs_root"), refresh_s=refresh_s)
    return MonitorService(settings=settings)


def _styled(line: MetricLine) -> str:
    if line.severity is None:
        return line.text
    return typer.style(line.text, fg=_SEVERITY_COLORS[line.severity])


@app.callback()
def main(
    ctx: typer.Context,
    sysfs_root: str | None = typer.Option(
        None,
        "--sysfs-root",
        envvar="KMON_SYSFS_ROOT",
        help="Base of the sysfs tree (default /sys)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    log_file: str | None = typer.Option(None, "--log-file", help="Write log records to a file"),
) -> None:
    _configure_logging(verbose, log_file)
    ctx.obj = {"sysfs_root": sysfs_root}


@app.command("categories")
def list_categories(ctx: typer.Context) -> None:
    """List the device categories and their sysfs roots."""
    service = _build_service(ctx)
    for category in service.list_categories():
        typer.echo(f"{category.key:<8} {category.label:<12} {category.root_path}")


@app.command("devices")
def list_devices(ctx: typer.Context, category: str) -> None:
    """List the devices under CATEGORY (key or label)."""
    try:
        service = _build_service(ctx)
        for device in service.list_devices(category):
            typer.echo(device)
    except KmonError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from None


@app.command("show")
def show_device(ctx: typer.Context, category: str, device: str) -> None:
    """Print the metric summary for DEVICE under CATEGORY."""
    try:
        service = _build_service(ctx)
        handle, summary = service.probe(category, device)
        typer.echo(f"{handle.path} ({summary.driver or 'no driver'})")
        for line in summary.lines:
            typer.echo(f"  {_styled(line)}")
    except KmonError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from None


@app.command("dashboard")
def dashboard(
    ctx: typer.Context,
    interval: float | None = typer.Option(
        None,
        "--interval",
        help="Seconds between refreshes (default 1.0, env KMON_REFRESH_S)",
    ),
) -> None:
    """Open the interactive dashboard."""
    from kmon.tui import run_dashboard

    service = _build_service(ctx, refresh_s=interval)
    run_dashboard(DashboardController(service), service.settings.refresh_s)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
