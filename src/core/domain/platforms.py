"""Per-family command profiles.

Each supported distribution family is described as data: which package
provides rule persistence, how to query and install it, how to persist the
live rule set and how a user removes the rule by hand. Services stay
family-agnostic and read everything from here.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from core.domain.distro import DistroFamily

DEFAULT_ARCH_RULES_PATH = Path("/etc/iptables/iptables.rules")


class PlatformProfile(BaseModel):
    family: DistroFamily
    package: str = Field(..., min_length=1, description="Package that provides rule persistence.")
    query: list[str] = Field(..., min_length=1, description="Exits 0 when the package is installed.")
    install: list[list[str]] = Field(
        default_factory=list,
        description="Commands run in order to install the package.",
    )
    save_hint: str = Field(
        ...,
        description="Command a user runs to re-save rules after a manual change.",
    )
    tools: list[str] = Field(
        default_factory=list,
        description="Executables the block run needs before the package is installed.",
    )

    def persist_commands(self, rules_path: Path = DEFAULT_ARCH_RULES_PATH) -> list[list[str]]:
        """Commands that make the live rule set survive a reboot."""

        if self.family is DistroFamily.DEBIAN:
            return [["netfilter-persistent", "save"]]
        return [
            ["iptables-save", "-f", str(rules_path)],
            ["systemctl", "enable", "iptables.service"],
            ["systemctl", "start", "iptables.service"],
        ]

    def removal_steps(self, rules_path: Path = DEFAULT_ARCH_RULES_PATH) -> list[str]:
        save = self.save_hint.format(rules_path=rules_path)
        return [
            "Find its line number (e.g., N) by running: sudo iptables -L INPUT -n --line-numbers",
            "Remove the rule: sudo iptables -D INPUT N",
            f"After removing, remember to save changes: {save}",
        ]


PROFILES: dict[DistroFamily, PlatformProfile] = {
    DistroFamily.DEBIAN: PlatformProfile(
        family=DistroFamily.DEBIAN,
        package="iptables-persistent",
        query=["dpkg", "-s", "iptables-persistent"],
        install=[
            ["apt", "update"],
            ["apt", "install", "-y", "iptables-persistent"],
        ],
        save_hint="sudo netfilter-persistent save",
        tools=["dpkg", "apt", "iptables", "iptables-save"],
    ),
    DistroFamily.ARCH: PlatformProfile(
        family=DistroFamily.ARCH,
        package="iptables",
        # Search, not an exact lookup: iptables-nft provides iptables.
        query=["pacman", "-Qsq", "^iptables"],
        install=[["pacman", "-Sy", "--noconfirm", "iptables"]],
        save_hint="sudo iptables-save -f {rules_path} && sudo systemctl restart iptables.service",
        tools=["pacman", "iptables", "iptables-save", "systemctl"],
    ),
}
