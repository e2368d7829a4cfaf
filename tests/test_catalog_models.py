# -*- coding: utf-8 -*-
"""
Tests for themewatch.catalog.models.

Created
-------
2026-02-06
"""

import pytest

from themewatch.catalog.models import (
    CatalogEntry,
    InstalledTheme,
    UpdateDescriptor,
    UpdateListing,
)


class TestInstalledTheme:
    def test_defaults(self):
        theme = InstalledTheme(slug="boldgrid-sample", version="1.0")
        assert theme.name == "boldgrid-sample"
        assert theme.tags == []
        assert theme.homepage_uri == ""

    def test_template(self):
        theme = InstalledTheme(slug="child", version="1.0", template="parent")
        assert theme.template == "parent"
        assert InstalledTheme(slug="parent", version="1.0", template="").template is None

    def test_empty_slug_rejected(self):
        with pytest.raises(ValueError):
            InstalledTheme(slug="", version="1.0")


class TestCatalogEntry:
    def test_from_dict(self):
        entry = CatalogEntry.from_dict(
            {"version": "2.0", "package": "http://x/pkg.zip", "updated": "2024-01-01"}
        )
        assert entry == CatalogEntry("2.0", "http://x/pkg.zip", "2024-01-01")

    def test_numeric_version_becomes_string(self):
        assert CatalogEntry.from_dict({"version": 3}).version == "3"

    def test_numeric_package_becomes_string(self):
        assert CatalogEntry.from_dict({"version": "1", "package": 42}).package_uri == "42"

    def test_empty_fields_become_none(self):
        entry = CatalogEntry.from_dict({"version": "", "package": ""})
        assert entry.version is None
        assert entry.package_uri is None
        assert entry.updated_at is None

    def test_frozen(self):
        entry = CatalogEntry(version="1.0")
        with pytest.raises(AttributeError):
            entry.version = "2.0"


class TestUpdateListing:
    def test_wire_shape(self):
        listing = UpdateListing(
            checked={"boldgrid-sample": "1.5"},
            response={
                "boldgrid-sample": UpdateDescriptor(
                    slug="boldgrid-sample",
                    new_version="2.0",
                    info_uri="//www.boldgrid.com/themes/sample",
                    package_uri="http://x/pkg.zip",
                    author="BoldGrid",
                    tags=["boldgrid-theme-7"],
                    fields={'version': "2.0"},
                ),
            },
        )
        assert listing.to_dict() == {
            'checked': {"boldgrid-sample": "1.5"},
            'response': {
                "boldgrid-sample": {
                    'theme': "boldgrid-sample",
                    'new_version': "2.0",
                    'url': "//www.boldgrid.com/themes/sample",
                    'package': "http://x/pkg.zip",
                    'author': "BoldGrid",
                    'Tag': ["boldgrid-theme-7"],
                    'fields': {'version': "2.0"},
                },
            },
        }

    def test_from_dict_tolerates_missing_keys(self):
        listing = UpdateListing.from_dict({})
        assert listing.checked == {}
        assert listing.response == {}

    def test_from_dict_reads_descriptors(self):
        listing = UpdateListing.from_dict({
            'checked': {"a": "1"},
            'response': {"a": {'theme': "a", 'new_version': "2"}},
        })
        assert listing.response["a"].new_version == "2"
        assert listing.response["a"].package_uri is None
