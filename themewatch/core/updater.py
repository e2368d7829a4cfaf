# -*- coding: utf-8 -*-
"""
Theme Update Resolver - Reconcile installed themes with the catalog.

Decides, for every installed theme that maps to a catalog id, whether
the catalog offers a different version, and keeps the update listing
in step: a descriptor is added when an update is available and any
existing descriptor is removed when it is not.

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
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)

# themewatch internal
from themewatch.catalog.models import (
    CatalogEntry,
    InstalledTheme,
    UpdateDescriptor,
    UpdateListing,
)
from themewatch.catalog.provider import CatalogProvider


_THEME_ID_TAG = re.compile(r'^boldgrid-theme-([0-9]+|parent)$')
_VENDOR_SLUG_PREFIX = "boldgrid-"
_FALLBACK_INFO_URI = "//www.boldgrid.com/themes/{name}"
_HOMEPAGE = "http://www.boldgrid.com/"


def extract_theme_id(tags: Iterable[str], slug: str) -> Optional[str]:
    """Derive the catalog id of a theme.

    The first tag of the form ``boldgrid-theme-<number>`` or
    ``boldgrid-theme-parent`` wins. Without one, a slug containing
    ``boldgrid-`` is its own id.

    Parameters
    ----------
    tags : Iterable[str]
        Declared theme tags, in declaration order.
    slug : str
        Theme folder slug.

    Returns
    -------
    Optional[str]
        The theme id, or None if the theme is not in the catalog's
        namespace.
    """
    for tag in tags:
        match = _THEME_ID_TAG.match(tag)
        if match:
            return match.group(1)

    if _VENDOR_SLUG_PREFIX in slug:
        return slug

    return None


def build_descriptor(
    theme: InstalledTheme,
    entry: CatalogEntry,
) -> UpdateDescriptor:
    """Describe the update ``entry`` offers for ``theme``.

    Parameters
    ----------
    theme : InstalledTheme
    entry : CatalogEntry
        Catalog entry with a non-empty version.

    Returns
    -------
    UpdateDescriptor
    """
    info_uri = theme.homepage_uri or _FALLBACK_INFO_URI.format(
        name=theme.name.lower()
    )
    return UpdateDescriptor(
        slug=theme.slug,
        new_version=entry.version,
        info_uri=info_uri,
        package_uri=entry.package_uri,
        author=theme.author,
        tags=list(theme.tags),
        fields={
            'version': entry.version,
            'author': theme.author,
            'description': theme.description,
            'download_link': entry.package_uri,
            'name': theme.name,
            'slug': theme.slug,
            'tags': list(theme.tags),
            'last_updated': entry.updated_at,
            'homepage': _HOMEPAGE,
        },
    )


class UpdateResolver:
    """Applies the remote catalog to an update listing.

    Parameters
    ----------
    provider : CatalogProvider
        Source of the remote catalog.
    """

    def __init__(self, provider: CatalogProvider) -> None:
        self._provider = provider

    def resolve(
        self,
        listing: UpdateListing,
        installed: List[InstalledTheme],
    ) -> UpdateListing:
        """Add or remove update descriptors for the installed themes.

        The listing is left unchanged when it has no checked themes or
        the catalog is unavailable this cycle. Themes without a catalog
        id are never touched.

        Parameters
        ----------
        listing : UpdateListing
            Listing to update in place.
        installed : List[InstalledTheme]
            Every installed theme.

        Returns
        -------
        UpdateListing
            ``listing``, after the update.
        """
        if not listing.checked:
            return listing

        catalog = self._provider.get_catalog()
        if not catalog:
            return listing

        for theme in installed:
            theme_id = extract_theme_id(theme.tags, theme.slug)
            if theme_id is None:
                logger.debug("Skipping unmanaged theme '%s'", theme.slug)
                continue

            entry = catalog.get(theme_id)
            incoming = entry.version if entry is not None else None

            if incoming and incoming != theme.version:
                logger.info(
                    "Update available for '%s': %s -> %s",
                    theme.slug, theme.version, incoming,
                )
                listing.response[theme.slug] = build_descriptor(theme, entry)
            elif listing.response.pop(theme.slug, None) is not None:
                logger.debug("Removed stale update entry for '%s'", theme.slug)

        return listing
