#!/usr/bin/env python3
"""Upgrade the forum schema to the latest Alembic revision.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py <revision> # upgrade to a given revision
"""

import sys
import logfire
from alembic import command
from alembic.config import Config

from forum.config import Settings
from forum.util.logging import setup_logging
from forum.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Apply migrations, reporting failures to Logfire before re-raising."""
    settings = Settings()

    configure_logfire(settings)
    setup_logging(settings)

    target = argv[1] if len(argv) > 1 else "head"

    try:
        with logfire.span("database migrations", target=target):
            # env.py reads DATABASE__URL through Settings
            alembic_cfg = Config("alembic.ini")
            command.upgrade(alembic_cfg, target)

        logfire.info("Schema is at revision", target=target)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            target=target,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # The app must not start against a half-migrated schema
        raise


if __name__ == "__main__":
    sys.exit(main(sys.argv))
