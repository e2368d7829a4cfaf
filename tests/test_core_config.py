# -*- coding: utf-8 -*-
"""
Tests for themewatch.core.config — ThemewatchConfig and load_config.

Created
-------
2026-02-06
"""

import json
from pathlib import Path

import pytest

from themewatch.core.config import ThemewatchConfig, load_config, resolve_cache_path


class TestThemewatchConfig:
    def test_defaults(self):
        cfg = ThemewatchConfig()
        assert cfg.api_base == "https://api.boldgrid.com"
        assert cfg.theme_channel == "stable"
        assert cfg.update_timeout == 10.0
        assert cfg.cache_ttl == 8 * 3600
        assert cfg.run_timeout == 60.0
        assert cfg.themes_dir is None

    def test_theme_data_url(self):
        cfg = ThemewatchConfig(
            api_base="https://api.example.com/",
            theme_data_path="v1/themes",
        )
        assert cfg.theme_data_url == "https://api.example.com/v1/themes"

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "config.json"
        cfg = ThemewatchConfig(theme_channel="edge", cache_ttl=60)
        cfg.save(path)

        loaded = load_config(path)
        assert loaded.theme_channel == "edge"
        assert loaded.cache_ttl == 60
        assert loaded.update_timeout == 10.0

    def test_load_missing_file_returns_defaults(self, tmp_path):
        cfg = load_config(tmp_path / "nonexistent.json")
        assert cfg == ThemewatchConfig()

    def test_load_corrupted_file_returns_defaults(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("not json {{{")
        assert load_config(path) == ThemewatchConfig()

    def test_load_ignores_unknown_fields(self, tmp_path):
        path = tmp_path / "config.json"
        with open(path, 'w') as f:
            json.dump({"themes_dir": "/srv/themes", "unknown_field": 42}, f)
        cfg = load_config(path)
        assert cfg.themes_dir == "/srv/themes"


class TestResolveCachePath:
    @pytest.fixture(autouse=True)
    def _no_cache_env(self, monkeypatch):
        monkeypatch.delenv("THEMEWATCH_CACHE_PATH", raising=False)

    def test_env_var_highest_priority(self, monkeypatch):
        monkeypatch.setenv("THEMEWATCH_CACHE_PATH", "/custom/path/cache.sqlite")
        cfg = ThemewatchConfig(cache_path="/from/config/cache.db")
        assert resolve_cache_path(cfg) == Path("/custom/path/cache.sqlite")

    def test_config_second_priority(self, tmp_path):
        path = tmp_path / "config.json"
        ThemewatchConfig(cache_path="/from/config/cache.db").save(path)
        assert resolve_cache_path(load_config(path)) == Path("/from/config/cache.db")

    def test_default_fallback(self):
        path = resolve_cache_path(ThemewatchConfig())
        assert path == Path.home() / ".themewatch" / "cache.db"
