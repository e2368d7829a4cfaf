# -*- coding: utf-8 -*-
"""
Tests for themewatch.core.themes — stylesheet headers and enumeration.

Created
-------
2026-02-06
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from themewatch.catalog.models import CatalogEntry, UpdateListing
from themewatch.core.themes import ThemeDirectoryEnumerator, parse_stylesheet_headers
from themewatch.core.updater import UpdateResolver


_SAMPLE_HEADER = """/*
Theme Name: BoldGrid Sample
Theme URI: https://www.boldgrid.com/themes/sample
Author: BoldGrid
Author URI: https://www.boldgrid.com/
Description: A sample theme.
Version: 1.5
Tags: boldgrid-theme-7, one-column ,custom-menu
*/

body { color: #333; }
"""


def _write_theme(root: Path, folder: str, header: str) -> Path:
    theme_dir = root / folder
    theme_dir.mkdir(parents=True)
    (theme_dir / "style.css").write_text(header, encoding="utf-8")
    return theme_dir


class TestParseStylesheetHeaders:
    def test_reads_fields(self):
        headers = parse_stylesheet_headers(_SAMPLE_HEADER)
        assert headers['name'] == "BoldGrid Sample"
        assert headers['homepage_uri'] == "https://www.boldgrid.com/themes/sample"
        assert headers['author'] == "BoldGrid"
        assert headers['description'] == "A sample theme."
        assert headers['version'] == "1.5"
        assert headers['template'] == ""

    def test_inline_comment_close(self):
        headers = parse_stylesheet_headers("/* Theme Name: Tiny */\n")
        assert headers['name'] == "Tiny"

    def test_star_prefixed_lines(self):
        headers = parse_stylesheet_headers("/**\n * Version: 3.1\n */\n")
        assert headers['version'] == "3.1"


class TestThemeDirectoryEnumerator:
    def test_list_themes(self, tmp_path):
        _write_theme(tmp_path, "boldgrid-sample", _SAMPLE_HEADER)
        themes = ThemeDirectoryEnumerator(tmp_path).list_themes()

        assert len(themes) == 1
        theme = themes[0]
        assert theme.slug == "boldgrid-sample"
        assert theme.version == "1.5"
        assert theme.tags == ["boldgrid-theme-7", "one-column", "custom-menu"]

    def test_child_theme_keeps_folder_slug(self, tmp_path):
        _write_theme(
            tmp_path, "sample-child",
            "/*\nTheme Name: Sample Child\nTemplate: boldgrid-sample\nVersion: 0.1\n*/\n",
        )
        theme = ThemeDirectoryEnumerator(tmp_path).list_themes()[0]
        assert theme.slug == "sample-child"
        assert theme.template == "boldgrid-sample"
        assert theme.name == "Sample Child"

    def test_name_defaults_to_folder(self, tmp_path):
        _write_theme(tmp_path, "bare", "/* Version: 1.0 */\n")
        theme = ThemeDirectoryEnumerator(tmp_path).list_themes()[0]
        assert theme.name == "bare"

    def test_skips_dirs_without_stylesheet_and_files(self, tmp_path):
        (tmp_path / "empty").mkdir()
        (tmp_path / "index.php").write_text("<?php\n")
        _write_theme(tmp_path, "zeta", "/* Version: 1 */")
        _write_theme(tmp_path, "alpha", "/* Version: 2 */")

        themes = ThemeDirectoryEnumerator(tmp_path).list_themes()
        assert [t.slug for t in themes] == ["alpha", "zeta"]

    def test_missing_directory(self, tmp_path):
        assert ThemeDirectoryEnumerator(tmp_path / "nope").list_themes() == []

    def test_parent_theme_has_no_template(self, tmp_path):
        _write_theme(tmp_path, "boldgrid-sample", _SAMPLE_HEADER)
        theme = ThemeDirectoryEnumerator(tmp_path).list_themes()[0]
        assert theme.template is None


class TestChildThemeResolution:
    """A child theme must not disturb its parent's update entry."""

    def test_parent_update_survives_child(self, tmp_path):
        _write_theme(tmp_path, "boldgrid-sample", _SAMPLE_HEADER)
        _write_theme(
            tmp_path, "boldgrid-sample-child",
            "/*\nTheme Name: Sample Child\nTemplate: boldgrid-sample\nVersion: 1.0\n*/\n",
        )
        themes = ThemeDirectoryEnumerator(tmp_path).list_themes()
        assert [t.slug for t in themes] == ["boldgrid-sample", "boldgrid-sample-child"]

        provider = MagicMock()
        provider.get_catalog.return_value = {"7": CatalogEntry(version="2.0")}
        listing = UpdateListing(checked={t.slug: t.version for t in themes})

        UpdateResolver(provider).resolve(listing, themes)

        assert "boldgrid-sample" in listing.response
        assert listing.response["boldgrid-sample"].new_version == "2.0"
        assert "boldgrid-sample-child" not in listing.response
