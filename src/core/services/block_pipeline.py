"""Block pipeline orchestration.

Sequences the services in the only order ipblocker supports:

    detect -> ensure dependency -> add rule -> persist

The first failure propagates as a `BlockerError` and nothing after it runs.
Completed steps are not rolled back. Printing stays in the CLI: the pipeline
reports progress through optional hooks.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from core.config import AppSettings
from core.domain.distro import DistroFamily
from core.domain.errors import UnsupportedDistributionError
from core.interfaces.executor import CommandRunner
from core.services.dependencies import DependencyStatus, ensure_dependency, get_profile
from core.services.distro import detect_distro
from core.services.persistence import persist_rules
from core.services.rules import RuleStatus, ensure_block_rule

logger = logging.getLogger(__name__)


@dataclass
class BlockRequest:
    """Parameters of one run."""

    address: str


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers."""

    step: Callable[[str], None] | None = None
    done: Callable[[str], None] | None = None


@dataclass
class PipelineResult:
    """Output of a successful run."""

    family: DistroFamily
    address: str
    dependency: DependencyStatus
    rule: RuleStatus
    persisted: list[str] = field(default_factory=list)
    removal_steps: list[str] = field(default_factory=list)


def _notify(callback: Callable[[str], None] | None, message: str) -> None:
    if callback is not None:
        callback(message)


def run_block_pipeline(
    *,
    request: BlockRequest,
    runner: CommandRunner,
    settings: AppSettings,
    hooks: PipelineHooks | None = None,
) -> PipelineResult:
    hooks = hooks or PipelineHooks()

    family = detect_distro(settings.os_release_path)
    logger.debug("Distribution family: %s", family.value)
    if not family.is_supported:
        raise UnsupportedDistributionError("Unsupported distribution. Exiting.")
    _notify(hooks.done, f"Detected distribution family: {family.label()}")

    profile = get_profile(family)

    _notify(hooks.step, f"Checking {profile.package} installation...")
    dependency = ensure_dependency(family, runner)
    if dependency is DependencyStatus.INSTALLED:
        _notify(hooks.done, f"{profile.package} installed successfully.")
    else:
        _notify(hooks.done, f"{profile.package} is already installed.")

    _notify(hooks.step, f"Blocking IP address: {request.address}...")
    rule = ensure_block_rule(request.address, runner)
    if rule is RuleStatus.ADDED:
        _notify(hooks.done, f"Successfully added iptables rule to block {request.address}.")
    else:
        _notify(hooks.done, f"Rule to block {request.address} already exists.")

    _notify(hooks.step, "Saving iptables rules for persistence...")
    persisted = persist_rules(family, runner, rules_path=settings.arch_rules_path)
    _notify(hooks.done, f"iptables rules saved for {family.label()}.")

    return PipelineResult(
        family=family,
        address=request.address,
        dependency=dependency,
        rule=rule,
        persisted=persisted,
        removal_steps=profile.removal_steps(settings.arch_rules_path),
    )
