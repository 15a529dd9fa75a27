"""
Tests for the top-level package metadata and public API.
"""

import page_binder


class TestPackageMetadata:
    """Tests for page_binder module attributes."""

    def test_version_is_set(self):
        assert page_binder.__version__
        assert page_binder.__version__ != "0.0.0"

    def test_copyright_names_project_and_license(self):
        assert "Page Binder" in page_binder.__copyright__
        assert "MIT" in page_binder.__copyright__

    def test_public_api_is_exported(self):
        for name in page_binder.__all__:
            assert hasattr(page_binder, name)
