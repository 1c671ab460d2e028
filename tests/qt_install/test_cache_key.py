"""
Qt Install — cache key builder tests.
"""

from __future__ import annotations

import hashlib

import pytest

from src.core.models.inputs import ActionInputs, Host, Target
from src.core.services.qt_install.domain.cache_key import build_cache_key

RELEASE = "6.5.0-1025-azure"


def _inputs(**overrides) -> ActionInputs:
    values = dict(
        host=Host.LINUX,
        target=Target.DESKTOP,
        version="6.8.1",
        dir="/home/runner/work/Qt",
        cache_key_prefix="install-qt-action",
    )
    values.update(overrides)
    return ActionInputs(**values)


class TestKeyShape:
    def test_minimal_key(self):
        key = build_cache_key(_inputs(), RELEASE)
        assert key == "install-qt-action-linux-6.5.0-1025-azure-desktop-6.8.1-/home/runner/work/Qt"

    def test_field_order(self):
        key = build_cache_key(_inputs(
            arch="gcc_64",
            py7zr_version="==0.22.*",
            aqt_version="==3.2.*",
            use_official=True,
            modules=("qtcharts",),
            archives=("qtbase",),
            extra=("--autodesktop",),
            tools=("tools_ninja",),
            src=True,
            src_archives=("qtsvg",),
            doc=True,
            doc_archives=("qmake",),
            doc_modules=("qtpdf",),
            example=True,
            example_archives=("qtdeclarative",),
            example_modules=("qtwebengine",),
        ), RELEASE)
        assert key == (
            "install-qt-action-linux-6.5.0-1025-azure-desktop-gcc_64-6.8.1"
            "-/home/runner/work/Qt-==0.22.*-==3.2.*-official"
            "-qtcharts-qtbase---autodesktop-tools_ninja"
            "-src-qtsvg-doc-qmake-qtpdf-example-qtdeclarative-qtwebengine"
        )

    def test_equal_inputs_equal_keys(self):
        assert build_cache_key(_inputs(modules=("a", "b")), RELEASE) == \
            build_cache_key(_inputs(modules=("a", "b")), RELEASE)

    def test_commas_replaced(self):
        key = build_cache_key(_inputs(aqt_source="aqtinstall[a,b]", py7zr_version=">=0.20,<0.23"), RELEASE)
        assert "," not in key
        assert ">=0.20-<0.23" in key


class TestSensitivity:
    @pytest.mark.parametrize("field, value", [
        ("host", Host.WINDOWS),
        ("target", Target.ANDROID),
        ("arch", "gcc_64"),
        ("version", "6.8.2"),
        ("dir", "/opt/Qt"),
        ("py7zr_version", "==0.22.*"),
        ("aqt_source", "git+https://example.com/aqt.git"),
        ("aqt_version", "==3.1.*"),
        ("use_official", True),
        ("modules", ("qtcharts",)),
        ("archives", ("qtbase",)),
        ("extra", ("--base", "https://mirror")),
        ("tools", ("tools_ifw",)),
        ("src", True),
        ("src_archives", ("qtbase",)),
        ("doc", True),
        ("doc_archives", ("qmake",)),
        ("doc_modules", ("qtcharts",)),
        ("example", True),
        ("example_archives", ("qtsvg",)),
        ("example_modules", ("qtpdf",)),
        ("cache_key_prefix", "other-prefix"),
    ])
    def test_single_field_changes_key(self, field, value):
        base = build_cache_key(_inputs(), RELEASE)
        assert build_cache_key(_inputs(**{field: value}), RELEASE) != base

    def test_os_release_changes_key(self):
        assert build_cache_key(_inputs(), RELEASE) != build_cache_key(_inputs(), "22.04")

    def test_credentials_not_in_key(self):
        key = build_cache_key(_inputs(use_official=True, email="me@example.com", pw="hunter2"), RELEASE)
        assert "hunter2" not in key
        assert "me@example.com" not in key

    def test_empty_fields_contribute_nothing(self):
        # explicitly empty and absent collide; existing cache entries rely on it
        assert build_cache_key(_inputs(arch=""), RELEASE) == build_cache_key(_inputs(), RELEASE)


class TestLength:
    def test_short_key_untouched(self):
        key = build_cache_key(_inputs(), RELEASE)
        assert len(key) < 512

    def test_long_key_hashed(self):
        modules = tuple(f"qtmodule{i:03d}" for i in range(60))
        inputs = _inputs(modules=modules)

        full = "install-qt-action-linux-6.5.0-1025-azure-desktop-6.8.1-/home/runner/work/Qt"
        full += "".join(f"-{m}" for m in modules)
        assert len(full) > 512

        key = build_cache_key(inputs, RELEASE)
        assert key == "install-qt-action-" + hashlib.sha256(full.encode()).hexdigest()
        assert len(key) <= 512

    def test_hash_taken_after_comma_replacement(self):
        tools = tuple(f"tool{i:03d},variant,arch" for i in range(40))
        key = build_cache_key(_inputs(tools=tools), RELEASE)
        full = "install-qt-action-linux-6.5.0-1025-azure-desktop-6.8.1-/home/runner/work/Qt"
        full += "".join(f"-{t}" for t in tools).replace(",", "-")
        assert key == "install-qt-action-" + hashlib.sha256(full.encode()).hexdigest()

    def test_exactly_at_limit_not_hashed(self):
        base = build_cache_key(_inputs(), RELEASE)
        padding = 512 - len(base) - 1
        key = build_cache_key(_inputs(modules=("m" * padding,)), RELEASE)
        assert len(key) == 512
        assert key.endswith("m" * padding)

    def test_oversized_prefix_cut(self):
        key = build_cache_key(_inputs(cache_key_prefix="p" * 600), RELEASE)
        assert len(key) == 512
        assert key.startswith("p" * (512 - 65) + "-")
