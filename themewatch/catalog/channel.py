# -*- coding: utf-8 -*-
"""
Release Channel - Select the theme release channel.

The channel is sent to the catalog service, which answers with the
theme versions published on that channel.

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
import os
from typing import Optional

logger = logging.getLogger(__name__)


_ENV_VAR = "THEMEWATCH_THEME_CHANNEL"
DEFAULT_CHANNEL = "stable"
KNOWN_CHANNELS = ('stable', 'edge', 'candidate', 'beta')


class ReleaseChannel:
    """Resolves the release channel for theme updates.

    Priority:
    1. ``THEMEWATCH_THEME_CHANNEL`` environment variable
    2. ``configured`` (usually ``ThemewatchConfig.theme_channel``)
    3. ``"stable"``

    Parameters
    ----------
    configured : Optional[str]
        Channel from the configuration file.
    """

    def __init__(self, configured: Optional[str] = None) -> None:
        self._configured = configured

    def get_theme_channel(self) -> str:
        """Return the channel to request from the catalog service."""
        channel = os.environ.get(_ENV_VAR) or self._configured or DEFAULT_CHANNEL
        channel = channel.strip().lower()
        if channel not in KNOWN_CHANNELS:
            logger.warning(
                "Unknown theme release channel '%s', using '%s'",
                channel, DEFAULT_CHANNEL,
            )
            return DEFAULT_CHANNEL
        return channel
