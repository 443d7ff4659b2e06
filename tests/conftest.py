from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from core.config import AppSettings, get_user_env_file


@pytest.fixture
def write_os_release(tmp_path: Path) -> Callable[[str], Path]:
    def _write(content: str) -> Path:
        path = tmp_path / "os-release"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep `.env` files and IPBLOCKER_* variables of the host out of the tests."""

    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    # The env_file tuple is built when AppSettings is defined.
    monkeypatch.setitem(AppSettings.model_config, "env_file", (".env", str(get_user_env_file())))
    for var in ("IPBLOCKER_OS_RELEASE_PATH", "IPBLOCKER_ARCH_RULES_PATH", "IPBLOCKER_USE_SUDO", "IPBLOCKER_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def make_settings(tmp_path: Path) -> Callable[..., AppSettings]:
    def _make(os_release: Path, **overrides: object) -> AppSettings:
        return AppSettings(
            os_release_path=os_release,
            arch_rules_path=tmp_path / "iptables.rules",
            **overrides,
        )

    return _make
