#!/usr/bin/env python3
"""Run one account deletion sweep, for hosts that schedule it with cron.

Anonymizes every account whose deletion grace window has expired. Set
SCHEDULER__ENABLED=false on the API when using this script so the sweep
is not driven from two places.

Exit status is 1 when any account failed to anonymize.
"""

import asyncio
import sys

import logfire

from forum.config import Settings
from forum.util.di.container import create_container
from forum.util.logging import setup_logging
from forum.util.observability import configure_logfire
from forum.util.scheduler import run_deletion_sweep


async def sweep() -> int:
    """Run the sweep against the production container."""
    container = create_container()
    try:
        report = await run_deletion_sweep(container)
    finally:
        await container.close()
    return 1 if report.failed else 0


def main() -> int:
    """Run the sweep and log any errors to Logfire."""
    settings = Settings()

    configure_logfire(settings)
    setup_logging(settings)

    try:
        return asyncio.run(sweep())
    except Exception as e:
        logfire.error(
            "Deletion sweep failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
