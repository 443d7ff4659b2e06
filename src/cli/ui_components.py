"""Rich components for the CLI.

Keeps command logic apart from visual details.
"""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.services.block_pipeline import PipelineResult

VERIFY_HINT = "sudo iptables -L INPUT -n --line-numbers"


def build_removal_panel(result: PipelineResult) -> Panel:
    """Manual-removal guidance for the detected family."""

    body = Text()
    for number, step in enumerate(result.removal_steps, start=1):
        body.append(f"{number}. {step}\n")
    return Panel(
        body,
        title=Text("To remove the rule", style="bold yellow"),
        border_style="yellow",
    )


def build_doctor_table() -> Table:
    table = Table(title="ipblocker doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
