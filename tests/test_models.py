from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.domain.distro import DistroFamily
from core.domain.models import BlockRule, CommandResult
from core.domain.platforms import PROFILES


def test_command_result_flags():
    assert CommandResult(args=["true"], returncode=0).ok
    missing = CommandResult(args=["nope"], returncode=127)
    assert not missing.ok
    assert missing.command_missing


def test_block_rule_argv():
    rule = BlockRule(address="203.0.113.9")
    assert rule.append_args() == ["iptables", "-A", "INPUT", "-s", "203.0.113.9", "-j", "DROP"]


def test_block_rule_save_lines_include_host_mask():
    assert BlockRule(address="203.0.113.9").save_lines() == (
        "-A INPUT -s 203.0.113.9 -j DROP",
        "-A INPUT -s 203.0.113.9/32 -j DROP",
    )


def test_block_rule_ignores_partial_line_matches():
    ruleset = "-A INPUT -s 203.0.113.9/32 -p tcp -j DROP\n-A INPUT -s 203.0.113.90/32 -j DROP\n"
    assert not BlockRule(address="203.0.113.9").matches_ruleset(ruleset)


def test_block_rule_requires_address():
    with pytest.raises(ValidationError):
        BlockRule(address="")


def test_removal_steps_per_family(tmp_path):
    debian = PROFILES[DistroFamily.DEBIAN].removal_steps()
    arch = PROFILES[DistroFamily.ARCH].removal_steps(tmp_path / "rules")

    assert debian[-1].endswith("sudo netfilter-persistent save")
    assert str(tmp_path / "rules") in arch[-1]
    assert "systemctl restart iptables.service" in arch[-1]
    assert debian[:2] == arch[:2]


def test_unknown_has_no_profile():
    assert DistroFamily.UNKNOWN not in PROFILES
