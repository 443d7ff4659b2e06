"""Distribution detection from the os-release file."""

from __future__ import annotations

import logging
from pathlib import Path

from core.domain.distro import DistroFamily

logger = logging.getLogger(__name__)

OS_RELEASE_PATH = Path("/etc/os-release")

# Checked in order on every line; the first hit wins.
_ID_PATTERNS: tuple[tuple[str, DistroFamily], ...] = (
    ("ID=debian", DistroFamily.DEBIAN),
    ("ID=ubuntu", DistroFamily.DEBIAN),
    ("ID=arch", DistroFamily.ARCH),
)


def classify_line(line: str) -> DistroFamily:
    for token, family in _ID_PATTERNS:
        if token in line:
            return family
    return DistroFamily.UNKNOWN


def detect_distro(path: Path = OS_RELEASE_PATH) -> DistroFamily:
    """Classify the host from `path`.

    Case-sensitive substring match, first matching line wins, no format
    validation. A missing or unreadable file yields UNKNOWN.
    """

    try:
        with path.open("r", encoding="utf-8", errors="replace") as fh:
            for line in fh:
                family = classify_line(line)
                if family.is_supported:
                    logger.debug("Detected %s from line %r", family.value, line.strip())
                    return family
    except OSError as exc:
        logger.debug("Cannot read %s: %s", path, exc)
        return DistroFamily.UNKNOWN

    return DistroFamily.UNKNOWN
