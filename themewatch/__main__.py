# -*- coding: utf-8 -*-
"""
themewatch CLI - Check installed themes for updates.

Usage::

    python -m themewatch --themes-dir wp-content/themes
    python -m themewatch --themes-dir themes --listing update_themes.json --force

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

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from themewatch.catalog.cache import TransientCache
from themewatch.catalog.models import InstalledTheme, UpdateListing
from themewatch.catalog.provider import CatalogProvider
from themewatch.core.config import load_config, resolve_cache_path
from themewatch.core.scheduler import TriggerContext, UpdateScheduler
from themewatch.core.themes import ThemeDirectoryEnumerator
from themewatch.core.updater import UpdateResolver

_log = logging.getLogger("themewatch.cli")


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="themewatch",
        description="themewatch — Check installed themes for catalog updates.",
    )
    parser.add_argument(
        "--themes-dir", "-t",
        type=Path,
        default=None,
        help="Directory holding the installed themes "
        "(default: themes_dir from the config file).",
    )
    parser.add_argument(
        "--listing", "-l",
        type=Path,
        default=None,
        help="JSON update listing to read and write back.",
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Config file (default: ~/.themewatch/config.json).",
    )
    parser.add_argument(
        "--cache",
        type=Path,
        default=None,
        help="Cache database (default: THEMEWATCH_CACHE_PATH, then cache_path "
        "from the config file, then ~/.themewatch/cache.db).",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Discard the cached catalog before checking.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging level (default: WARNING).",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        metavar="PATH",
        help="Write log output to a file (in addition to stderr).",
    )
    return parser


def _configure_logging(level_name: str, log_file: Optional[str]) -> None:
    handlers: list = [logging.StreamHandler()]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
    )


def _load_listing(
    path: Optional[Path],
    installed: List[InstalledTheme],
) -> UpdateListing:
    """Read the listing at ``path``, or start one checking every theme."""
    if path is not None and path.exists():
        with open(path, 'r', encoding='utf-8') as f:
            listing = UpdateListing.from_dict(json.load(f))
        if listing.checked:
            return listing
    else:
        listing = UpdateListing()

    listing.checked = {theme.slug: theme.version for theme in installed}
    return listing


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_arg_parser().parse_args(argv)
    _configure_logging(args.log_level, args.log_file)

    config = load_config(args.config)
    themes_dir = args.themes_dir or (
        Path(config.themes_dir) if config.themes_dir else None
    )
    if themes_dir is None or not themes_dir.is_dir():
        print(f"Error: themes directory not found: {themes_dir}", file=sys.stderr)
        return 1

    enumerator = ThemeDirectoryEnumerator(themes_dir)
    try:
        listing = _load_listing(args.listing, enumerator.list_themes())
    except (OSError, ValueError, KeyError, AttributeError) as e:
        print(f"Error: cannot read listing {args.listing}: {e}", file=sys.stderr)
        return 1

    cache = TransientCache(db_path=args.cache or resolve_cache_path(config))
    provider = CatalogProvider(config, cache)
    if args.force:
        provider.clear()

    scheduler = UpdateScheduler(
        UpdateResolver(provider),
        enumerator,
        run_timeout=config.run_timeout,
    )
    try:
        listing = scheduler.trigger(listing, TriggerContext.CLI)
    finally:
        if scheduler.busy:
            # The abandoned run still uses the cache, leave it open.
            scheduler.shutdown(wait=False)
        else:
            scheduler.shutdown()
            cache.close()

    _log.info("%d theme update(s) available", len(listing.response))
    for slug, descriptor in sorted(listing.response.items()):
        print(f"{slug}: {listing.checked.get(slug, '?')} -> {descriptor.new_version}")

    if args.listing is not None:
        args.listing.parent.mkdir(parents=True, exist_ok=True)
        with open(args.listing, 'w', encoding='utf-8') as f:
            json.dump(listing.to_dict(), f, indent=2)

    return 0


if __name__ == "__main__":
    sys.exit(main())
