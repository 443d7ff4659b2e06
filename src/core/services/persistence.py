"""Make the live rule set survive a reboot."""

from __future__ import annotations

import logging
from pathlib import Path

from core.domain.distro import DistroFamily
from core.domain.errors import PersistenceError
from core.domain.platforms import DEFAULT_ARCH_RULES_PATH
from core.interfaces.executor import CommandRunner
from core.services.dependencies import get_profile

logger = logging.getLogger(__name__)


def persist_rules(
    family: DistroFamily,
    runner: CommandRunner,
    *,
    rules_path: Path = DEFAULT_ARCH_RULES_PATH,
) -> list[str]:
    """Run the family's persistence commands in order.

    Stops at the first non-zero exit. Returns the commands that ran, for
    reporting. The saved file and the boot-time unit are not verified.
    """

    profile = get_profile(family)
    executed: list[str] = []
    for args in profile.persist_commands(rules_path):
        result = runner.run(args)
        if not result.ok:
            raise PersistenceError(
                f"Failed to persist iptables rules ('{result.display()}' exited with {result.returncode})."
            )
        executed.append(result.display())
        logger.debug("Persistence step done: %s", result.display())
    return executed
