# -*- coding: utf-8 -*-
"""
themewatch - Theme update checker.

Checks a remote catalog for newer versions of locally installed
themes, caches the catalog between runs and keeps a host update
listing in step with what the catalog offers.

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-02-06

Modified
--------
2026-02-06
"""

__version__ = "0.1.0"

from themewatch.catalog.models import (
    CatalogEntry,
    InstalledTheme,
    UpdateDescriptor,
    UpdateListing,
)
from themewatch.catalog.provider import CatalogProvider
from themewatch.core.updater import UpdateResolver, extract_theme_id

__all__: list = [
    "CatalogEntry",
    "CatalogProvider",
    "InstalledTheme",
    "UpdateDescriptor",
    "UpdateListing",
    "UpdateResolver",
    "extract_theme_id",
]
