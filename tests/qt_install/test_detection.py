"""
Qt Install — host detection and aqtinstall capability tests.
"""

from __future__ import annotations

import sys

import pytest

from src.core.services.qt_install.detection.aqt_version import (
    is_autodesktop_supported,
    parse_aqt_version,
)
from src.core.services.qt_install.detection.host_detect import (
    _normalise_system,
    detect_host_environment,
)


class TestAqtVersion:
    @pytest.mark.parametrize("output, expected", [
        ("aqtinstall(aqt) v3.2.0 on Python 3.12.3 [CPython MSC v.1938 64 bit (AMD64)]", "3.2.0"),
        ("INFO    : aqtinstall(aqt) v2.2.3 on Python 3.10.6", "2.2.3"),
        ("No module named aqt", None),
        ("", None),
    ])
    def test_parse(self, output, expected):
        assert parse_aqt_version(output) == expected

    @pytest.mark.parametrize("output, supported", [
        ("aqtinstall(aqt) v3.0.0", True),
        ("aqtinstall(aqt) v3.2.1", True),
        ("aqtinstall(aqt) v2.2.3", False),
        ("garbage", False),
    ])
    def test_autodesktop(self, output, supported):
        assert is_autodesktop_supported(output) is supported


class TestHostDetection:
    @pytest.mark.parametrize("platform_name, expected", [
        ("linux", "linux"),
        ("darwin", "darwin"),
        ("win32", "win32"),
        ("freebsd14", "linux"),
    ])
    def test_normalise_system(self, platform_name, expected):
        assert _normalise_system(platform_name) == expected

    def test_detects_real_host(self, monkeypatch):
        monkeypatch.setenv("RUNNER_WORKSPACE", "/tmp/ws")
        host_env = detect_host_environment()
        assert host_env.python == sys.executable
        assert host_env.getenv("RUNNER_WORKSPACE") == "/tmp/ws"

    def test_machine_normalised(self, monkeypatch):
        import platform

        monkeypatch.setattr(platform, "machine", lambda: "aarch64")
        assert detect_host_environment().machine == "arm64"
