# -*- coding: utf-8 -*-
"""
Installed Themes - Enumerate themes from a themes directory.

Each subdirectory holding a ``style.css`` is an installed theme. Theme
metadata is read from the header comment at the top of the stylesheet::

    /*
    Theme Name: BoldGrid Sample
    Theme URI: https://www.boldgrid.com/themes/sample
    Version: 1.5
    Tags: boldgrid-theme-7, one-column
    */

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

# Standard library
import logging
import re
from pathlib import Path
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

# themewatch internal
from themewatch.catalog.models import InstalledTheme


_STYLESHEET = "style.css"

# Header lines are only looked for in the first 8 KiB of the stylesheet.
_HEADER_BYTES = 8192

_HEADERS = {
    'name': 'Theme Name',
    'homepage_uri': 'Theme URI',
    'author': 'Author',
    'description': 'Description',
    'version': 'Version',
    'tags': 'Tags',
    'template': 'Template',
}


def parse_stylesheet_headers(text: str) -> Dict[str, str]:
    """Read theme header fields from stylesheet text.

    Parameters
    ----------
    text : str
        Leading part of a ``style.css`` file.

    Returns
    -------
    Dict[str, str]
        Field key (see ``_HEADERS``) to stripped value. Missing headers
        are returned as empty strings.
    """
    headers: Dict[str, str] = {}
    for key, label in _HEADERS.items():
        match = re.search(
            r'^[ \t/*#@]*' + re.escape(label) + r':(.*)$',
            text,
            re.MULTILINE | re.IGNORECASE,
        )
        value = match.group(1) if match else ''
        # Strip a trailing comment close on the same line.
        value = re.sub(r'\s*(?:\*/|\?>).*$', '', value)
        headers[key] = value.strip()
    return headers


def _split_tags(value: str) -> List[str]:
    return [tag.strip() for tag in value.split(',') if tag.strip()]


class ThemeDirectoryEnumerator:
    """Lists the themes installed under a directory.

    Parameters
    ----------
    themes_dir : Path
        Directory whose subdirectories are themes.
    """

    def __init__(self, themes_dir: Path) -> None:
        self._themes_dir = Path(themes_dir)

    @property
    def themes_dir(self) -> Path:
        return self._themes_dir

    def list_themes(self) -> List[InstalledTheme]:
        """Return every installed theme, sorted by directory name."""
        if not self._themes_dir.is_dir():
            logger.warning("Themes directory not found: %s", self._themes_dir)
            return []

        themes: List[InstalledTheme] = []
        for theme_dir in sorted(self._themes_dir.iterdir()):
            if not theme_dir.is_dir():
                continue
            theme = self.load_theme(theme_dir)
            if theme is not None:
                themes.append(theme)
        return themes

    def load_theme(self, theme_dir: Path) -> Optional[InstalledTheme]:
        """Build an InstalledTheme from one theme directory.

        Parameters
        ----------
        theme_dir : Path

        Returns
        -------
        Optional[InstalledTheme]
            The theme, or None if the directory has no readable
            stylesheet.
        """
        stylesheet = theme_dir / _STYLESHEET
        if not stylesheet.is_file():
            logger.debug("Skipping %s: no %s", theme_dir, _STYLESHEET)
            return None

        try:
            with open(stylesheet, 'r', encoding='utf-8', errors='replace') as f:
                text = f.read(_HEADER_BYTES)
        except OSError as e:
            logger.warning("Cannot read %s: %s", stylesheet, e)
            return None

        headers = parse_stylesheet_headers(text)
        return InstalledTheme(
            slug=theme_dir.name,
            version=headers['version'],
            name=headers['name'] or theme_dir.name,
            tags=_split_tags(headers['tags']),
            author=headers['author'],
            description=headers['description'],
            homepage_uri=headers['homepage_uri'],
            template=headers['template'],
        )
