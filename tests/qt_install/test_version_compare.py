"""
Qt Install — version comparison tests.
"""

from __future__ import annotations

import pytest

from src.core.errors import InputError
from src.core.services.qt_install.domain.version_compare import compare_versions, version_cmp


class TestVersionCmp:
    @pytest.mark.parametrize("v1, v2, expected", [
        ("6.5.0", "6.5.0", 0),
        ("6.5.1", "6.5.0", 1),
        ("6.4.3", "6.5.0", -1),
        ("5.15.2", "5.9.0", 1),      # numeric, not lexical
        ("6.10.0", "6.9.9", 1),
        ("v6.5.0", "6.5.0", 0),
    ])
    def test_three_way(self, v1, v2, expected):
        assert version_cmp(v1, v2) == expected

    def test_missing_components_are_zero(self):
        assert version_cmp("5.9", "5.9.0") == 0
        assert version_cmp("6", "6.0.0") == 0
        assert version_cmp("6.0.0.1", "6.0.0") == 1

    def test_wildcard_matches_anything(self):
        assert version_cmp("6.5.*", "6.5.3") == 0
        assert version_cmp("6.x", "6.8.0") == 0
        assert version_cmp("6.5.*", "6.4.0") == 1

    def test_prerelease_sorts_before_release(self):
        assert version_cmp("6.5.0-beta1", "6.5.0") == -1
        assert version_cmp("6.5.0", "6.5.0-rc1") == 1
        assert version_cmp("6.5.0-beta1", "6.5.0-beta2") == -1

    def test_build_metadata_ignored(self):
        assert version_cmp("6.5.0+build7", "6.5.0") == 0


class TestCompareVersions:
    def test_short_and_full_forms_agree(self):
        # "5.9" and "5.9.0" must give the same answer against any threshold
        for v in ("5.9", "5.9.0"):
            assert compare_versions(v, "<", "6.0.0") is True
            assert compare_versions(v, ">=", "6.0.0") is False
            assert compare_versions(v, ">=", "5.9.0") is True
            assert compare_versions(v, "<", "5.9.0") is False

    @pytest.mark.parametrize("op, expected", [
        (">", False), (">=", True), ("=", True), ("==", True),
        ("<", False), ("<=", True), ("!=", False),
    ])
    def test_operators_on_equal_versions(self, op, expected):
        assert compare_versions("6.8.0", op, "6.8") is expected

    def test_unknown_operator(self):
        with pytest.raises(ValueError, match="Invalid operator"):
            compare_versions("6.8.0", "~=", "6.8.0")

    @pytest.mark.parametrize("bad", ["", "latest", "six.two", "6..2", "6.5.0 beta"])
    def test_invalid_version_is_input_error(self, bad):
        with pytest.raises(InputError, match="Invalid version"):
            compare_versions(bad, ">=", "6.0.0")

    def test_input_error_is_type_error(self):
        with pytest.raises(TypeError):
            compare_versions("latest", "<", "6.0.0")
