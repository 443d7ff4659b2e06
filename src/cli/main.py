"""ipblocker CLI.

    ipblocker <IP_ADDRESS>

Drops all INPUT traffic from IP_ADDRESS with iptables and makes the rule
survive a reboot. Exit status 0 on success, 1 on any failure.
"""

from __future__ import annotations

import click
import typer
from pydantic import ValidationError
from rich.console import Console
from typer.core import TyperCommand

from adapters.command_runner import build_runner
from cli.logging_setup import configure_logging
from cli.ui_components import VERIFY_HINT, build_removal_panel
from core.config import AppSettings
from core.domain.errors import BlockerError
from core.services.block_pipeline import BlockRequest, PipelineHooks, run_block_pipeline

USAGE = "Usage: sudo ipblocker <IP_ADDRESS_TO_BLOCK>"

app = typer.Typer(
    add_completion=False,
    help="Block an IP address with iptables and persist the rule across reboots.",
)

_console = Console()
_err_console = Console(stderr=True)


def _fail(message: str) -> typer.Exit:
    _err_console.print(message, style="red", markup=False, highlight=False)
    return typer.Exit(code=1)


class UsageErrorExitsOne(TyperCommand):
    """Reports any usage error (extra arguments, unknown options) with exit 1."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as exc:
            _err_console.print(f"Error: {exc.format_message()}", style="red", markup=False, highlight=False)
            _err_console.print(USAGE, style="red", markup=False, highlight=False)
            raise click.exceptions.Exit(1) from exc


@app.command(cls=UsageErrorExitsOne)
def block(
    ip_address: str | None = typer.Argument(
        None,
        metavar="IP_ADDRESS",
        help="Address to drop all INPUT traffic from (passed to iptables verbatim).",
        show_default=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging on stderr."),
) -> None:
    """Block IP_ADDRESS and persist the rule."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        raise _fail(f"Error: invalid configuration: {exc}") from exc

    configure_logging(settings.log_level, verbose=verbose)
    _console.print("Starting IP blocking program...", markup=False, highlight=False)

    if ip_address is None:
        _err_console.print("Error: No IP address provided.", style="red", markup=False, highlight=False)
        raise _fail(USAGE)

    hooks = PipelineHooks(
        step=lambda msg: _console.print(msg, style="cyan", markup=False, highlight=False),
        done=lambda msg: _console.print(msg, style="green", markup=False, highlight=False),
    )

    try:
        result = run_block_pipeline(
            request=BlockRequest(address=ip_address),
            runner=build_runner(settings),
            settings=settings,
            hooks=hooks,
        )
    except BlockerError as exc:
        raise _fail(f"Error: {exc}") from exc

    _console.print(
        f"Program finished. The IP address '{result.address}' is now blocked "
        "and the rule will persist after reboot.",
        markup=False,
        highlight=False,
    )
    for command in result.persisted:
        _console.print(f"Persisted with: {command}", style="dim", markup=False, highlight=False)
    _console.print(f"You can verify the rule by running: {VERIFY_HINT}", markup=False, highlight=False)
    _console.print()
    _console.print(build_removal_panel(result))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
