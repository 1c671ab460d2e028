"""
Qt Install — default architecture decision table.

Every (host, target) pair is checked across version thresholds so that
each triple yields exactly one arch or an empty string.
"""

from __future__ import annotations

import pytest

from src.core.models.inputs import Host, Target
from src.core.services.qt_install.domain.arch_defaults import default_arch

VERSIONS = ["5.5.1", "5.6.0", "5.9.0", "5.12.12", "5.14.0", "5.15.2", "6.0.0", "6.7.3", "6.8.0"]


class TestAndroid:
    @pytest.mark.parametrize("version", ["5.14.0", "5.14.2", "5.15.2", "5.15"])
    def test_qt5_unified_android(self, version):
        assert default_arch(Host.LINUX, Target.ANDROID, version) == "android"

    @pytest.mark.parametrize("version", ["5.12.12", "5.13.2", "6.0.0", "6.5.3", "6.8.1"])
    def test_android_armv7_elsewhere(self, version):
        assert default_arch(Host.LINUX, Target.ANDROID, version) == "android_armv7"

    @pytest.mark.parametrize("host", list(Host))
    def test_android_ignores_host(self, host):
        assert default_arch(host, Target.ANDROID, "5.15.2") == "android"


class TestWindows:
    @pytest.mark.parametrize("version, expected", [
        ("5.5.1", "win64_msvc2013_64"),
        ("5.6.0", "win64_msvc2015_64"),
        ("5.8.0", "win64_msvc2015_64"),
        ("5.9.0", "win64_msvc2017_64"),
        ("5.9", "win64_msvc2017_64"),
        ("5.14.2", "win64_msvc2017_64"),
        ("5.15.0", "win64_msvc2019_64"),
        ("6.7.3", "win64_msvc2019_64"),
        ("6.8.0", "win64_msvc2022_64"),
        ("6.9.1", "win64_msvc2022_64"),
    ])
    def test_desktop_buckets(self, version, expected):
        assert default_arch(Host.WINDOWS, Target.DESKTOP, version) == expected

    @pytest.mark.parametrize("version", VERSIONS)
    def test_windows_arm64_fixed(self, version):
        assert default_arch(Host.WINDOWS_ARM64, Target.DESKTOP, version) == "win64_msvc2022_arm64"


class TestNoDefault:
    @pytest.mark.parametrize("host", [Host.LINUX, Host.LINUX_ARM64, Host.MAC, Host.ALL_OS])
    @pytest.mark.parametrize("target", [Target.DESKTOP, Target.IOS, Target.WASM])
    @pytest.mark.parametrize("version", VERSIONS)
    def test_left_empty(self, host, target, version):
        assert default_arch(host, target, version) == ""


class TestTotality:
    @pytest.mark.parametrize("host", list(Host))
    @pytest.mark.parametrize("target", list(Target))
    @pytest.mark.parametrize("version", VERSIONS)
    def test_every_triple_yields_a_string(self, host, target, version):
        arch = default_arch(host, target, version)
        assert isinstance(arch, str)
        assert arch == default_arch(host, target, version)
