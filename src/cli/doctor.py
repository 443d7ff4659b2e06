"""Doctor command for environment diagnostics.

Read-only: it detects the distribution, looks up the tools on PATH and
queries the package manager, but never installs, blocks or saves anything.
"""

from __future__ import annotations

import shutil

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.command_runner import build_runner
from cli.logging_setup import configure_logging
from cli.ui_components import build_doctor_table
from core.config import AppSettings
from core.domain.distro import DistroFamily
from core.domain.errors import DependencyError
from core.services.dependencies import get_profile, is_package_installed
from core.services.distro import detect_distro

app = typer.Typer(add_completion=False, help="Environment diagnostics for ipblocker.")

_console = Console()


@app.command()
def run(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging on stderr."),
) -> None:
    """Check that this host can run ipblocker and show what is missing."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        Console(stderr=True).print(f"Error: invalid configuration: {exc}", markup=False)
        raise typer.Exit(code=1) from exc

    configure_logging(settings.log_level, verbose=verbose)

    table = build_doctor_table()
    healthy = True

    family = detect_distro(settings.os_release_path)
    if family.is_supported:
        table.add_row("Distribution", "OK", f"{family.label()} ({settings.os_release_path})")
    else:
        healthy = False
        table.add_row("Distribution", "FAIL", f"unsupported or unreadable {settings.os_release_path}")

    if settings.use_sudo:
        sudo_path = shutil.which("sudo")
        healthy = healthy and sudo_path is not None
        table.add_row("sudo", "OK" if sudo_path else "MISSING", sudo_path or "use_sudo is enabled")

    if family.is_supported:
        profile = get_profile(family)
        for tool in profile.tools:
            path = shutil.which(tool)
            if path is None:
                healthy = False
            table.add_row(tool, "OK" if path else "MISSING", path or "not found on PATH")

        try:
            installed = is_package_installed(profile, build_runner(settings))
        except DependencyError as exc:
            healthy = False
            table.add_row(profile.package, "FAIL", str(exc))
        else:
            if installed:
                table.add_row(profile.package, "OK", "installed")
            else:
                table.add_row(profile.package, "ABSENT", "will be installed on the first block")

        if family is DistroFamily.ARCH:
            table.add_row("Rules file", "INFO", str(settings.arch_rules_path))

    table.add_row("use_sudo", "INFO", str(settings.use_sudo))
    _console.print(table)

    if not healthy:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
