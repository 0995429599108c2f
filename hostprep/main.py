"""
hostprep — CLI entrypoint.

Usage:
    hostprep --help
    hostprep install --dry-run
    sudo hostprep install
    hostprep detect
"""

from __future__ import annotations

import json
import os
import signal
import sys
from pathlib import Path

import click

from hostprep import __version__
from hostprep.core.observability.logging_config import resolve_log_file, setup_logging


def _console_level(ctx: click.Context) -> str:
    if ctx.obj.get("debug"):
        return "DEBUG"
    if ctx.obj.get("verbose"):
        return "INFO"
    if ctx.obj.get("quiet"):
        return "ERROR"
    return os.environ.get("HOSTPREP_LOG_LEVEL", "WARNING")


def _exit_on_signal(signum: int, frame: object) -> None:
    # SystemExit unwinds with-blocks, so the stderr capture file is released.
    raise SystemExit(128 + signum)


def _install_signal_handlers() -> None:
    for sig in (signal.SIGTERM, signal.SIGHUP):
        try:
            signal.signal(sig, _exit_on_signal)
        except (AttributeError, ValueError):
            pass


def _echo_progress(line: str) -> None:
    if line.startswith("✓"):
        click.secho(line, fg="green")
    elif line.startswith("✗"):
        click.secho(line, fg="red")
    elif line.startswith("[dry-run]"):
        click.secho(line, fg="yellow")
    else:
        click.echo(line)


@click.group()
@click.version_option(version=__version__, prog_name="hostprep")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to hostprep.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """hostprep — install a base set of CLI tools on a fresh Linux host."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (console only; install adds the log file) ──
    setup_logging(level=_console_level(ctx))


@cli.command()
@click.option("--dry-run", is_flag=True, help="Show what would be installed without changing anything.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def install(ctx: click.Context, dry_run: bool, as_json: bool) -> None:
    """Install the base app catalog.

    Exits 0 once the run completes, even if some apps failed; the
    summary lists every failure. Exits 1 if the run cannot start.

    Examples:

        hostprep install --dry-run

        sudo hostprep install
    """
    from hostprep.core.config.loader import ConfigError, load_settings
    from hostprep.core.engine.report import render_report
    from hostprep.core.use_cases.install import run_install

    try:
        settings = load_settings(ctx.obj.get("config_path"))
    except ConfigError as e:
        if as_json:
            click.echo(json.dumps({"error": str(e)}, indent=2))
        else:
            click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    log_file = resolve_log_file(settings.log_dir, dry_run=dry_run)
    setup_logging(
        level=_console_level(ctx),
        log_file=log_file,
        log_file_level=settings.log_level,
    )
    _install_signal_handlers()

    quiet = ctx.obj.get("quiet", False) or as_json
    if not quiet:
        mode_label = "[dry-run] " if dry_run else ""
        click.secho(f"\n📦 {mode_label}hostprep {__version__}", fg="cyan", bold=True)
        if log_file:
            click.echo(f"   Log: {log_file}")
        click.echo()

    result = run_install(
        dry_run=dry_run,
        settings=settings,
        progress=None if quiet else _echo_progress,
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(result.exit_code)

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    report = result.report
    assert report is not None

    click.echo()
    for line in render_report(report):
        if line.startswith("==="):
            click.secho(line, fg="cyan", bold=True)
        elif line.endswith(":") and not line.startswith(("✓", "✗")):
            click.secho(line, bold=True)
        else:
            _echo_progress(line)
    click.echo()


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def detect(as_json: bool) -> None:
    """Show which package manager this host uses."""
    from hostprep.adapters.registry import default_registry

    registry = default_registry()
    adapter = registry.detect()
    status = registry.adapter_status()

    if as_json:
        click.echo(json.dumps({
            "detected": adapter.name if adapter else None,
            "adapters": status,
        }, indent=2))
        sys.exit(0 if adapter else 1)

    click.echo()
    for name, info in status.items():
        if adapter is not None and name == adapter.name:
            click.secho(f"   ✓ {name} ", fg="green", bold=True, nl=False)
            click.echo(f"({info['binary']})  ← selected")
        elif info["available"]:
            click.secho(f"   ✓ {name} ", fg="green", nl=False)
            click.echo(f"({info['binary']})")
        else:
            click.secho(f"   ✗ {name} ", fg="red", nl=False)
            click.echo(f"({info['binary']} not found)")
    click.echo()

    if adapter is None:
        click.secho("❌ No supported package manager found", fg="red")
        sys.exit(1)


@cli.command()
@click.option(
    "--manager",
    "-m",
    type=click.Choice(["apt", "dnf", "pacman", "zypper", "apk"]),
    default=None,
    help="Show package names for this manager (default: detected).",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def catalog(ctx: click.Context, manager: str | None, as_json: bool) -> None:
    """List the apps hostprep installs and their package names."""
    from hostprep.adapters.registry import default_registry
    from hostprep.core.config.loader import ConfigError, load_settings
    from hostprep.core.data.catalog import MANUAL_INSTALLS, build_catalog

    try:
        settings = load_settings(ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    registry = default_registry()
    adapter = registry.get(manager) if manager else registry.detect()
    if adapter is None:
        click.secho("❌ No supported package manager found; pass --manager", fg="red")
        sys.exit(1)

    apps = build_catalog(settings.extra_apps)
    manual = [(m, m.resolve(adapter)) for m in MANUAL_INSTALLS]

    if as_json:
        click.echo(json.dumps({
            "manager": adapter.name,
            "apps": [
                {"name": app.name, "package": app.package_for(adapter.kind)}
                for app in apps
            ],
            "manual": [
                {"name": m.name, "command": action.display if action else None}
                for m, action in manual
            ],
        }, indent=2))
        return

    click.secho(f"\n📋 Catalog for {adapter.name}", fg="cyan", bold=True)
    for app in apps:
        package = app.package_for(adapter.kind)
        if package is None:
            click.secho(f"   ⊘ {app.name} ", fg="yellow", nl=False)
            click.echo("(not packaged)")
        else:
            label = f" → {package}" if package != app.name else ""
            click.echo(f"   • {app.name}{label}")

    click.echo()
    click.secho("   Manual installs:", fg="white", bold=True)
    for m, action in manual:
        if action is None:
            click.secho(f"   ⊘ {m.name} ", fg="yellow", nl=False)
            click.echo(f"(not applicable to {adapter.name})")
        else:
            click.echo(f"   • {m.name}")
            if ctx.obj.get("verbose"):
                click.echo(f"     │ {action.display}")
    click.echo()


if __name__ == "__main__":
    cli()
