"""Tests for runtime package version resolution."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as distribution_version

import npms_colorizer


class TestRuntimeVersion:
    """Version resolution should reflect installed package metadata."""

    def test_module_version_matches_installed_distribution(self):
        assert npms_colorizer.__version__ == distribution_version("npms-colorizer")

    def test_resolve_version_uses_deterministic_fallback_when_metadata_missing(self, monkeypatch):
        def _raise_package_not_found(_: str) -> str:
            raise PackageNotFoundError

        monkeypatch.setattr(npms_colorizer, "_distribution_version", _raise_package_not_found)

        assert npms_colorizer._resolve_version() == npms_colorizer._LOCAL_VERSION_FALLBACK


class TestPublicApi:
    def test_exports_resolve(self):
        for name in npms_colorizer.__all__:
            assert getattr(npms_colorizer, name) is not None

    def test_top_level_colorizer_matches_module(self):
        from npms_colorizer.colorize.colorizer import NPMS_QUALITY

        assert npms_colorizer.colorizer_for("quality") is NPMS_QUALITY
