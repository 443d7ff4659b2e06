"""subprocess-backed `CommandRunner`.

Runs argv lists with `shell=False`, so the target address can never be
interpreted by a shell. Output that is not captured goes straight to the
terminal (apt/pacman progress stays visible).
"""

from __future__ import annotations

import logging
import subprocess
from typing import Sequence

from core.config import AppSettings
from core.domain.models import COMMAND_NOT_FOUND, PERMISSION_DENIED, CommandResult
from core.interfaces.executor import CommandRunner

logger = logging.getLogger(__name__)


class SubprocessRunner(CommandRunner):
    """Synchronous executor with no timeout and no retry."""

    def __init__(self, *, use_sudo: bool = False) -> None:
        self._use_sudo = use_sudo

    def _argv(self, args: Sequence[str]) -> list[str]:
        argv = [str(a) for a in args]
        if self._use_sudo and argv[0] != "sudo":
            argv.insert(0, "sudo")
        return argv

    def run(self, args: Sequence[str], *, capture: bool = False) -> CommandResult:
        argv = self._argv(args)
        logger.debug("Running: %s", " ".join(argv))
        try:
            proc = subprocess.run(
                argv,
                check=False,
                encoding="utf-8",
                errors="replace",
                stdout=subprocess.PIPE if capture else None,
            )
        except FileNotFoundError:
            logger.debug("Command not found: %s", argv[0])
            return CommandResult(args=argv, returncode=COMMAND_NOT_FOUND)
        except PermissionError:
            logger.debug("Permission denied executing: %s", argv[0])
            return CommandResult(args=argv, returncode=PERMISSION_DENIED)

        if proc.returncode != 0:
            logger.debug("Exit status %d: %s", proc.returncode, " ".join(argv))
        return CommandResult(args=argv, returncode=proc.returncode, stdout=proc.stdout or "")


def build_runner(settings: AppSettings | None = None) -> CommandRunner:
    """Create the runner the CLI uses, honouring `use_sudo`."""

    settings = settings or AppSettings()
    return SubprocessRunner(use_sudo=settings.use_sudo)
