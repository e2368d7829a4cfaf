# -*- coding: utf-8 -*-
"""
Catalog Provider - Fetch the remote theme version catalog.

Queries the theme catalog service for the latest version of every
managed theme on the configured release channel, normalizes the
response and keeps it in the transient cache for eight hours.

Dependencies
------------
requests

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
import sqlite3
from typing import Any, Dict, Optional

# Third-party
import requests

logger = logging.getLogger(__name__)

# themewatch internal
from themewatch.catalog.cache import TransientCache
from themewatch.catalog.channel import ReleaseChannel
from themewatch.catalog.models import CatalogEntry
from themewatch.core.config import ThemewatchConfig


CACHE_KEY = "boldgrid_theme_data"


def normalize_theme_versions(raw: Any) -> Dict[str, Dict[str, Any]]:
    """Convert a ``theme_versions`` payload into a plain keyed mapping.

    Parameters
    ----------
    raw : Any
        The decoded ``result.data.theme_versions`` value. An object is
        keyed by theme id; an array is keyed by position.

    Returns
    -------
    Dict[str, Dict[str, Any]]
        Theme id to ``{version, package, updated}`` record. Records that
        are not objects are dropped.
    """
    if isinstance(raw, dict):
        items = raw.items()
    elif isinstance(raw, list):
        items = enumerate(raw)
    else:
        return {}

    return {
        str(theme_id): CatalogEntry.from_dict(record).to_dict()
        for theme_id, record in items
        if isinstance(record, dict)
    }


def _extract_theme_versions(payload: Any) -> Optional[Any]:
    """Return ``payload.result.data.theme_versions`` or None."""
    try:
        return payload['result']['data']['theme_versions']
    except (KeyError, TypeError, IndexError):
        return None


class CatalogProvider:
    """Supplies the remote theme catalog, from cache when possible.

    Parameters
    ----------
    config : ThemewatchConfig
        Endpoint, timeout and cache lifetime.
    cache : TransientCache
        Store for the normalized catalog.
    channel : Optional[ReleaseChannel]
        Channel selector. Defaults to one built from ``config``.
    session : Optional[requests.Session]
        Session used for the call. Defaults to module-level
        ``requests.get``.
    """

    def __init__(
        self,
        config: ThemewatchConfig,
        cache: TransientCache,
        channel: Optional[ReleaseChannel] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._config = config
        self._cache = cache
        self._channel = channel or ReleaseChannel(config.theme_channel)
        self._session = session

    def get_catalog(self) -> Dict[str, CatalogEntry]:
        """Return the theme catalog.

        Returns
        -------
        Dict[str, CatalogEntry]
            Theme id to latest catalog entry. Empty when the catalog
            could not be obtained this cycle.
        """
        try:
            cached = self._cache.get(CACHE_KEY)
        except sqlite3.Error as e:
            logger.warning("Theme catalog cache unreadable: %s", e)
            cached = None
        if cached and isinstance(cached, dict):
            logger.debug("Using cached theme catalog (%d entries)", len(cached))
            return self._to_entries(cached)

        theme_data = self.fetch()
        if not theme_data:
            return {}

        try:
            self._cache.set(CACHE_KEY, theme_data, self._config.cache_ttl)
        except sqlite3.Error as e:
            logger.warning("Failed to cache theme catalog: %s", e)
        return self._to_entries(theme_data)

    def fetch(self) -> Dict[str, Dict[str, Any]]:
        """Call the catalog service, bypassing the cache.

        Returns
        -------
        Dict[str, Dict[str, Any]]
            Normalized theme versions, or an empty dict if the call
            fails or the response has no theme versions.
        """
        url = self._config.theme_data_url
        params = {'channel': self._channel.get_theme_channel()}
        get = self._session.get if self._session is not None else requests.get
        try:
            resp = get(url, params=params, timeout=self._config.update_timeout)
            resp.raise_for_status()
            payload = resp.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning("Theme catalog request to %s failed: %s", url, e)
            return {}

        raw = _extract_theme_versions(payload)
        if raw is None:
            logger.warning("Theme catalog response from %s has no theme versions", url)
            return {}

        theme_data = normalize_theme_versions(raw)
        logger.info(
            "Fetched theme catalog on channel '%s' (%d entries)",
            params['channel'], len(theme_data),
        )
        return theme_data

    def clear(self) -> bool:
        """Drop the cached catalog so the next call refetches it."""
        return self._cache.delete(CACHE_KEY)

    @staticmethod
    def _to_entries(theme_data: Dict[str, Any]) -> Dict[str, CatalogEntry]:
        return {
            theme_id: CatalogEntry.from_dict(record)
            for theme_id, record in theme_data.items()
            if isinstance(record, dict)
        }
