"""Add the INPUT drop rule for an address unless it already exists."""

from __future__ import annotations

import logging
from enum import Enum

from core.domain.errors import RuleError
from core.domain.models import BlockRule
from core.interfaces.executor import CommandRunner

logger = logging.getLogger(__name__)

SAVE_COMMAND = ["iptables-save"]


class RuleStatus(str, Enum):
    ALREADY_PRESENT = "already_present"
    ADDED = "added"


def rule_exists(rule: BlockRule, runner: CommandRunner) -> bool:
    result = runner.run(SAVE_COMMAND, capture=True)
    if not result.ok:
        raise RuleError(
            f"Could not read the current rule set ('{result.display()}' exited with {result.returncode})."
        )
    return rule.matches_ruleset(result.stdout)


def ensure_block_rule(address: str, runner: CommandRunner) -> RuleStatus:
    """Drop all INPUT traffic from `address`.

    The address is not validated beyond being non-empty; it is handed to
    `iptables` as a single argument.
    """

    if not address:
        raise RuleError("No IP address provided.")

    rule = BlockRule(address=address)
    if rule_exists(rule, runner):
        logger.info("Rule to block %s already exists", address)
        return RuleStatus.ALREADY_PRESENT

    result = runner.run(rule.append_args())
    if not result.ok:
        raise RuleError(
            f"Failed to add iptables rule for {address} (exit status {result.returncode})."
        )
    logger.info("Added iptables rule to block %s", address)
    return RuleStatus.ADDED
