"""Distribution families supported by ipblocker."""

from __future__ import annotations

from enum import Enum


class DistroFamily(str, Enum):
    """Host classification derived from the os-release file."""

    DEBIAN = "debian"
    ARCH = "arch"
    UNKNOWN = "unknown"

    @property
    def is_supported(self) -> bool:
        return self is not DistroFamily.UNKNOWN

    def label(self) -> str:
        """Human readable label for console output."""

        if self is DistroFamily.DEBIAN:
            return "Debian/Ubuntu"
        if self is DistroFamily.ARCH:
            return "Arch Linux"
        return "unknown"
