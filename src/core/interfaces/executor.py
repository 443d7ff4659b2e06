"""Contract for running external commands.

Every meaningful action of ipblocker is delegated to host tools (`dpkg`,
`pacman`, `apt`, `iptables`, `systemctl`...). Services only see this
Protocol, so unit tests can pass a fake that returns canned results instead of
touching a real host.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from core.domain.models import CommandResult


@runtime_checkable
class CommandRunner(Protocol):
    """Minimal contract for a synchronous command executor.

    Rules:
    - `args` is an argv list; no shell interpretation takes place.
    - Blocks until the subordinate process exits; no timeout, no retry.
    - A non-zero exit is reported through `CommandResult.returncode`, never
      raised.
    """

    def run(self, args: Sequence[str], *, capture: bool = False) -> CommandResult:
        """Run `args`; collect stdout as text when `capture` is true."""

        ...
