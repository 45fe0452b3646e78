"""In-process daily job trigger.

Runs the account deletion sweep once a day from the API process. Deployments
that drive the sweep from host cron disable it via ``SCHEDULER__ENABLED=false``
and call ``scripts/run_deletion_sweep.py`` instead.
"""

import asyncio
import sys
from collections.abc import Awaitable, Callable
from datetime import datetime

import aiocron
import logfire
from dishka import AsyncContainer

from forum.domain.service import DeletionScheduler, SweepReport


async def run_deletion_sweep(
    container: AsyncContainer, now: datetime | None = None
) -> SweepReport:
    """Run one deletion sweep in its own request scope (one transaction).

    Args:
        container: Application DI container
        now: Reference time (defaults to the current time)

    Returns:
        Sweep outcome
    """
    async with container() as request_container:
        scheduler = await request_container.get(DeletionScheduler)
        return await scheduler.run(now or datetime.now())


class DailyTrigger:
    """Fires an async job once a day at a fixed wall-clock time.

    A firing that happens while the previous run is still in progress is
    skipped.
    """

    def __init__(
        self,
        name: str,
        job: Callable[[], Awaitable[object]],
        hour: int,
        minute: int = 0,
    ) -> None:
        """Initialize the trigger.

        Args:
            name: Job name used in logs
            job: Coroutine factory run on each firing
            hour: Hour of day (0-23, local time)
            minute: Minute of hour
        """
        self.name = name
        self.job = job
        self.spec = f"{minute} {hour} * * *"
        self._lock = asyncio.Lock()
        self._cron: aiocron.Cron | None = None

    @property
    def running(self) -> bool:
        return self._cron is not None

    async def fire(self) -> bool:
        """Run the job once unless a previous run is still going.

        Job failures are logged; they never stop the trigger.

        Returns:
            True if the job ran
        """
        if self._lock.locked():
            logfire.warn("Scheduled job skipped, previous run in progress", job=self.name)
            return False

        async with self._lock:
            with logfire.span("scheduled_job", job=self.name):
                try:
                    await self.job()
                except Exception as e:
                    logfire.error(
                        "Scheduled job failed",
                        job=self.name,
                        error=str(e),
                        _exc_info=sys.exc_info(),
                    )
            return True

    def start(self) -> None:
        """Schedule the job on the running event loop."""
        if self._cron is None:
            self._cron = aiocron.crontab(self.spec, func=self.fire, start=True)
            logfire.info("Scheduled job started", job=self.name, cron=self.spec)

    async def stop(self) -> None:
        """Stop future firings and wait for a run in progress to finish."""
        if self._cron is None:
            return
        self._cron.stop()
        self._cron = None

        async with self._lock:
            pass
        logfire.info("Scheduled job stopped", job=self.name)
