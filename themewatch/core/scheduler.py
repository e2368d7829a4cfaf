# -*- coding: utf-8 -*-
"""
Update Scheduler - Decide when to check for theme updates and run it.

Replaces host hook registration with an explicit object the host
calls from its admin page load, background tick or command line. The
resolution runs on a worker thread so the caller can bound how long
it waits.

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
import copy
import logging
from concurrent.futures import Future, ThreadPoolExecutor, TimeoutError
from enum import Enum
from typing import Callable, Optional

logger = logging.getLogger(__name__)

# themewatch internal
from themewatch.catalog.models import UpdateListing
from themewatch.core.themes import ThemeDirectoryEnumerator
from themewatch.core.updater import UpdateResolver


class TriggerContext(Enum):
    """Where a check was triggered from."""

    ADMIN = "admin"
    CRON = "cron"
    CLI = "cli"
    FRONTEND = "frontend"


_CHECKING_CONTEXTS = (
    TriggerContext.ADMIN,
    TriggerContext.CRON,
    TriggerContext.CLI,
)


class UpdateScheduler:
    """Runs the update resolver for the contexts that check for updates.

    Parameters
    ----------
    resolver : UpdateResolver
        Resolver applied to the listing.
    enumerator : ThemeDirectoryEnumerator
        Source of the installed themes.
    bootstrap : Optional[Callable[[], None]]
        Environment setup run once before the first background run.
    run_timeout : Optional[float]
        Seconds to wait for a run. None waits indefinitely.
    """

    def __init__(
        self,
        resolver: UpdateResolver,
        enumerator: ThemeDirectoryEnumerator,
        bootstrap: Optional[Callable[[], None]] = None,
        run_timeout: Optional[float] = None,
    ) -> None:
        self._resolver = resolver
        self._enumerator = enumerator
        self._bootstrap = bootstrap
        self._bootstrapped = False
        self._run_timeout = run_timeout
        self._executor = ThreadPoolExecutor(max_workers=1)
        self._future: Optional[Future] = None

    @property
    def busy(self) -> bool:
        """True while an abandoned run is still working."""
        return self._future is not None and not self._future.done()

    @staticmethod
    def should_check(context: TriggerContext) -> bool:
        """Return True if ``context`` triggers an update check."""
        return context in _CHECKING_CONTEXTS

    def trigger(
        self,
        listing: UpdateListing,
        context: TriggerContext,
    ) -> UpdateListing:
        """Run an update check for ``context``.

        Parameters
        ----------
        listing : UpdateListing
            Current update listing. Never mutated.
        context : TriggerContext

        Returns
        -------
        UpdateListing
            The updated listing, or ``listing`` itself when no check ran
            or the run did not finish in time.
        """
        if not self.should_check(context):
            return listing

        if context is TriggerContext.CRON:
            self._run_bootstrap()

        working = copy.deepcopy(listing)
        self._future = self._executor.submit(self._run, working)
        try:
            return self._future.result(timeout=self._run_timeout)
        except TimeoutError:
            logger.warning(
                "Theme update check exceeded %.1fs, leaving listing unchanged",
                self._run_timeout,
            )
        except Exception as e:
            logger.error("Theme update check failed: %s", e)
        return listing

    def shutdown(self, wait: bool = True) -> None:
        """Shut down the worker thread.

        Parameters
        ----------
        wait : bool
            If True, wait for a running check to complete. Otherwise
            return at once and cancel checks not yet started.
        """
        self._executor.shutdown(wait=wait, cancel_futures=not wait)

    def _run(self, listing: UpdateListing) -> UpdateListing:
        installed = self._enumerator.list_themes()
        logger.debug("Checking %d installed themes", len(installed))
        return self._resolver.resolve(listing, installed)

    def _run_bootstrap(self) -> None:
        if self._bootstrap is None or self._bootstrapped:
            return
        logger.debug("Bootstrapping background environment")
        self._bootstrap()
        self._bootstrapped = True
