"""Ensure the persistence-capable firewall package is installed."""

from __future__ import annotations

import logging
from enum import Enum

from core.domain.distro import DistroFamily
from core.domain.errors import DependencyError, UnsupportedDistributionError
from core.domain.platforms import PROFILES, PlatformProfile
from core.interfaces.executor import CommandRunner

logger = logging.getLogger(__name__)


class DependencyStatus(str, Enum):
    ALREADY_INSTALLED = "already_installed"
    INSTALLED = "installed"


def get_profile(family: DistroFamily) -> PlatformProfile:
    profile = PROFILES.get(family)
    if profile is None:
        raise UnsupportedDistributionError(f"Unsupported distribution: {family.value}")
    return profile


def is_package_installed(profile: PlatformProfile, runner: CommandRunner) -> bool:
    """Query the native package manager.

    A non-zero exit counts as "not installed", except when the query tool
    itself is missing from PATH.
    """

    result = runner.run(profile.query, capture=True)
    if result.command_missing:
        raise DependencyError(
            f"Package query tool '{profile.query[0]}' was not found on PATH."
        )
    return result.ok


def ensure_dependency(family: DistroFamily, runner: CommandRunner) -> DependencyStatus:
    """Install the family's persistence package when it is absent.

    Idempotent: when the package is present only the query runs.
    """

    profile = get_profile(family)

    if is_package_installed(profile, runner):
        logger.info("%s is already installed", profile.package)
        return DependencyStatus.ALREADY_INSTALLED

    logger.info("%s is not installed, installing", profile.package)
    for args in profile.install:
        result = runner.run(args)
        if not result.ok:
            raise DependencyError(
                f"Failed to install {profile.package} "
                f"('{result.display()}' exited with {result.returncode})."
            )
    return DependencyStatus.INSTALLED
