"""
L1 Domain — Default architecture decision table (pure).

When the ``arch`` input is omitted, pick the aqt architecture name the
action has always defaulted to for the (host, target, version) triple.
"""

from __future__ import annotations

from src.core.models.inputs import Host, Target
from src.core.services.qt_install.domain.version_compare import compare_versions


def default_arch(host: Host, target: Target, version: str) -> str:
    """Return the default arch, or ``""`` to let aqt choose.

    Examples::

        default_arch(Host.LINUX, Target.ANDROID, "5.15.2")   → "android"
        default_arch(Host.LINUX, Target.ANDROID, "6.4.0")    → "android_armv7"
        default_arch(Host.WINDOWS, Target.DESKTOP, "6.8.1")  → "win64_msvc2022_64"
        default_arch(Host.LINUX, Target.DESKTOP, "6.8.1")    → ""
    """
    if target == Target.ANDROID:
        if compare_versions(version, ">=", "5.14.0") and compare_versions(version, "<", "6.0.0"):
            return "android"
        return "android_armv7"

    if host == Host.WINDOWS_ARM64:
        return "win64_msvc2022_arm64"

    if host == Host.WINDOWS:
        if compare_versions(version, ">=", "6.8.0"):
            return "win64_msvc2022_64"
        if compare_versions(version, ">=", "5.15.0"):
            return "win64_msvc2019_64"
        if compare_versions(version, "<", "5.6.0"):
            return "win64_msvc2013_64"
        if compare_versions(version, "<", "5.9.0"):
            return "win64_msvc2015_64"
        return "win64_msvc2017_64"

    return ""
