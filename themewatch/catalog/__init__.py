# -*- coding: utf-8 -*-
"""
Catalog Module - Remote theme catalog access.

Provides the data models, the SQLite-backed transient cache, the
release channel selector and the provider that fetches the theme
version catalog.

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
