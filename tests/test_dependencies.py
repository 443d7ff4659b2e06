from __future__ import annotations

import pytest

from core.domain.distro import DistroFamily
from core.domain.errors import DependencyError, UnsupportedDistributionError
from core.services.dependencies import DependencyStatus, ensure_dependency
from fakes import FakeHost, FakeRunner


def test_debian_package_present_only_queries():
    host = FakeHost(installed={"iptables-persistent"})

    assert ensure_dependency(DistroFamily.DEBIAN, host) is DependencyStatus.ALREADY_INSTALLED
    assert host.calls == [["dpkg", "-s", "iptables-persistent"]]


def test_debian_package_missing_is_installed():
    host = FakeHost()

    assert ensure_dependency(DistroFamily.DEBIAN, host) is DependencyStatus.INSTALLED
    assert host.calls == [
        ["dpkg", "-s", "iptables-persistent"],
        ["apt", "update"],
        ["apt", "install", "-y", "iptables-persistent"],
    ]


def test_arch_package_missing_is_installed():
    host = FakeHost()

    assert ensure_dependency(DistroFamily.ARCH, host) is DependencyStatus.INSTALLED
    assert host.calls == [
        ["pacman", "-Qsq", "^iptables"],
        ["pacman", "-Sy", "--noconfirm", "iptables"],
    ]


@pytest.mark.parametrize("family", [DistroFamily.DEBIAN, DistroFamily.ARCH])
def test_second_run_installs_nothing(family):
    host = FakeHost()

    ensure_dependency(family, host)
    installs_after_first = len(host.calls)
    assert ensure_dependency(family, host) is DependencyStatus.ALREADY_INSTALLED

    second_run = host.calls[installs_after_first:]
    assert len(second_run) == 1
    assert second_run[0][0] in ("dpkg", "pacman")


def test_query_is_captured_so_it_stays_quiet():
    host = FakeHost(installed={"iptables"})
    ensure_dependency(DistroFamily.ARCH, host)
    assert host.captured == [True]


def test_failed_apt_update_stops_before_install():
    host = FakeHost(responses={("apt", "update"): (100, "")})

    with pytest.raises(DependencyError, match="iptables-persistent"):
        ensure_dependency(DistroFamily.DEBIAN, host)
    assert not host.ran("apt", "install", "-y", "iptables-persistent")


def test_failed_install_raises():
    host = FakeHost(responses={("pacman", "-Sy", "--noconfirm", "iptables"): (1, "")})

    with pytest.raises(DependencyError):
        ensure_dependency(DistroFamily.ARCH, host)


def test_missing_query_tool_is_reported_distinctly():
    runner = FakeRunner({("dpkg", "-s", "iptables-persistent"): (127, "")})

    with pytest.raises(DependencyError, match="dpkg"):
        ensure_dependency(DistroFamily.DEBIAN, runner)
    assert runner.calls == [["dpkg", "-s", "iptables-persistent"]]


def test_unknown_family_runs_nothing():
    runner = FakeRunner()

    with pytest.raises(UnsupportedDistributionError):
        ensure_dependency(DistroFamily.UNKNOWN, runner)
    assert runner.calls == []


def test_arch_provider_package_counts_as_installed():
    host = FakeHost(installed={"iptables-nft"})

    assert ensure_dependency(DistroFamily.ARCH, host) is DependencyStatus.ALREADY_INSTALLED
    assert host.calls == [["pacman", "-Qsq", "^iptables"]]
    assert "iptables" not in host.installed


def test_arch_unrelated_package_does_not_count():
    host = FakeHost(installed={"nftables", "python-iptables"})

    assert ensure_dependency(DistroFamily.ARCH, host) is DependencyStatus.INSTALLED
