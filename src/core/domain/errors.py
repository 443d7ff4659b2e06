"""Exception taxonomy.

Every failure is terminal: services raise, the pipeline lets the exception
propagate and the CLI turns it into exit status 1.
"""

from __future__ import annotations


class BlockerError(Exception):
    """Base class for every failure the CLI reports to the user."""


class UnsupportedDistributionError(BlockerError):
    """The host is not Debian/Ubuntu-family nor Arch-family."""


class DependencyError(BlockerError):
    """The package query or install command failed."""


class RuleError(BlockerError):
    """The rule check or the rule addition failed."""


class PersistenceError(BlockerError):
    """Saving the rule set or enabling the boot-time service failed."""
