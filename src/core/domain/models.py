"""Domain models (Pydantic v2).

These models describe *what* a command result or a block rule is, not *how*
commands get executed.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

# Exit status a shell reports when the binary is not on PATH.
COMMAND_NOT_FOUND = 127
# Exit status a shell reports when the binary cannot be executed.
PERMISSION_DENIED = 126


class CommandResult(BaseModel):
    """Outcome of one external invocation.

    Produced by a `CommandRunner` and consumed immediately by the caller; it
    is never stored.
    """

    model_config = ConfigDict(frozen=True)

    args: list[str] = Field(
        ...,
        min_length=1,
        description="Argument vector as executed (including a `sudo` prefix, if any).",
    )
    returncode: int = Field(
        ...,
        description="Exit status of the subordinate process.",
    )
    stdout: str = Field(
        default="",
        description="Captured standard output; empty unless capture was requested.",
    )

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def command_missing(self) -> bool:
        return self.returncode == COMMAND_NOT_FOUND

    def display(self) -> str:
        return " ".join(self.args)


class BlockRule(BaseModel):
    """A "drop everything from this source" rule.

    The address is an opaque token: it is not validated as an IP literal and
    always travels as a single argv element.
    """

    model_config = ConfigDict(frozen=True)

    address: str = Field(
        ...,
        min_length=1,
        description="Source address to drop, passed through verbatim.",
    )
    chain: str = Field(default="INPUT", min_length=1)
    target: str = Field(default="DROP", min_length=1)

    def append_args(self) -> list[str]:
        """`iptables` argv that appends this rule to its chain."""

        return ["iptables", "-A", self.chain, "-s", self.address, "-j", self.target]

    def save_lines(self) -> tuple[str, ...]:
        """Lines `iptables-save` may print for this rule.

        `iptables-save` renders a single host as `<addr>/32`, so both the bare
        and the normalized form count as a match.
        """

        bare = f"-A {self.chain} -s {self.address} -j {self.target}"
        if "/" in self.address:
            return (bare,)
        host = f"-A {self.chain} -s {self.address}/32 -j {self.target}"
        return (bare, host)

    def matches_ruleset(self, ruleset: str) -> bool:
        wanted = set(self.save_lines())
        return any(line.strip() in wanted for line in ruleset.splitlines())
