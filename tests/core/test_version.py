"""
Unit tests for Qt version helpers.
"""

import pytest

from qtkit.core.exceptions import InvalidVersionError
from qtkit.core.version import parse_version, version_dir, version_ge, version_lt


class TestVersionComparison:
    """Tests for numeric version comparison."""

    def test_minor_compared_numerically(self):
        """5.15.0 is newer than 5.9.0 despite sorting lower as text."""
        assert version_ge("5.15.0", "5.9.0")
        assert version_lt("5.9.0", "5.15.0")

    def test_equal_versions(self):
        assert version_ge("6.0.0", "6.0.0")
        assert not version_lt("6.0.0", "6.0.0")

    def test_two_component_version(self):
        assert parse_version("5.9") == parse_version("5.9.0")

    def test_patch_compared_numerically(self):
        assert version_lt("5.12.2", "5.12.10")

    def test_whitespace_is_ignored(self):
        assert parse_version(" 6.2.4\n") == parse_version("6.2.4")

    def test_invalid_version_raises(self):
        with pytest.raises(InvalidVersionError, match="not-a-version"):
            parse_version("not-a-version")

    def test_none_raises(self):
        with pytest.raises(InvalidVersionError):
            parse_version(None)


class TestVersionDir:
    """Tests for the directory name of an installed version."""

    def test_legacy_5_9_0(self):
        assert version_dir("5.9.0") == "5.9"

    def test_other_5_9_releases_unchanged(self):
        assert version_dir("5.9.1") == "5.9.1"

    def test_qt6_unchanged(self):
        assert version_dir("6.2.0") == "6.2.0"
