"""Deletion sweep: anonymizes accounts whose grace window has elapsed."""

from dataclasses import dataclass, field
from datetime import datetime

import logfire

from forum.domain.error import DomainError
from forum.domain.repository import AccountRepository
from forum.domain.value import AccountId

from .base import Service
from .lifecycle_policy import LifecyclePolicy


@dataclass
class SweepReport:
    """Outcome of one sweep run."""

    candidates: int = 0
    anonymized: list[AccountId] = field(default_factory=list)
    failed: list[AccountId] = field(default_factory=list)


class DeletionScheduler(Service):
    """Domain service for the periodic account deletion sweep."""

    def __init__(
        self, account_repository: AccountRepository, lifecycle_policy: LifecyclePolicy
    ) -> None:
        """Initialize deletion scheduler.

        Args:
            account_repository: Account repository
            lifecycle_policy: Lifecycle decisions
        """
        self.account_repository = account_repository
        self.lifecycle_policy = lifecycle_policy

    async def run(self, now: datetime) -> SweepReport:
        """Anonymize every account due at ``now``.

        Accounts are processed independently. A failure on one account is
        logged and the sweep moves on; that account stays a candidate for
        the next run.

        Args:
            now: Reference time for the grace window check

        Returns:
            Counts and ids of anonymized and failed accounts
        """
        with logfire.span("deletion_scheduler.run", now=now.isoformat()):
            candidates = await self.account_repository.find_due_for_anonymization(now)
            report = SweepReport(candidates=len(candidates))

            for account in candidates:
                if account.is_deleted:
                    continue

                try:
                    fields = self.lifecycle_policy.anonymize(account, now)
                    updated = await self.account_repository.anonymize(
                        account.id, fields.email, fields.name, now
                    )
                except DomainError as e:
                    logfire.warn(
                        "Account skipped by deletion sweep",
                        account_id=account.id,
                        error_code=e.code,
                    )
                    report.failed.append(account.id)
                    continue
                except Exception as e:
                    logfire.warn(
                        "Account anonymization failed",
                        account_id=account.id,
                        error=str(e),
                    )
                    report.failed.append(account.id)
                    continue

                if not updated:
                    logfire.warn(
                        "Account anonymization affected no rows", account_id=account.id
                    )
                    report.failed.append(account.id)
                    continue

                report.anonymized.append(account.id)

            logfire.info(
                "Deletion sweep finished",
                candidates=report.candidates,
                anonymized=len(report.anonymized),
                failed=len(report.failed),
            )
            return report
