"""Account lifecycle policy.

Pure decisions over an account snapshot. Nothing here touches storage: each
method either raises a domain error or returns a small value describing the
change the caller must persist.

    active --schedule--> pending deletion --anonymize (deleted_at <= now)--> anonymized
       ^                        |
       +--------restore---------+
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from forum.domain.error import (
    AccountAnonymizedError,
    AlreadyScheduledError,
    GraceWindowNotExpiredError,
    NotScheduledError,
)
from forum.domain.model.account import Account
from forum.domain.value import AccountId, LoginDecision

from .base import Service

ANONYMIZED_NAME = "Deleted User"
ANONYMIZED_EMAIL_DOMAIN = "deleted.com"


@dataclass(frozen=True)
class DeletionSchedule:
    """Scheduled deletion moment for an account."""

    account_id: AccountId
    deleted_at: datetime


@dataclass(frozen=True)
class Restoration:
    """Cleared deletion schedule for an account."""

    account_id: AccountId


@dataclass(frozen=True)
class AnonymizedFields:
    """Replacement values written when an account is anonymized."""

    account_id: AccountId
    email: str
    name: str


def anonymized_email(account_id: AccountId) -> str:
    """Deterministic placeholder email for an anonymized account."""
    return f"deleted_{account_id}@{ANONYMIZED_EMAIL_DOMAIN}"


class LifecyclePolicy(Service):
    """Decides account lifecycle transitions."""

    def decide_login(self, account: Account) -> LoginDecision:
        """Decide whether an account may log in or act with an issued token.

        A schedule blocks login even once its moment has passed; only the
        sweep or a restore changes that. ``enabled`` is checked too, so an
        account disabled by an operator is refused like an anonymized one.

        Returns:
            ALLOW only for active, enabled accounts
        """
        if account.is_deleted or not account.enabled:
            return LoginDecision.REJECT_DISABLED
        if account.deleted_at is not None:
            return LoginDecision.REJECT_DELETED_PENDING
        return LoginDecision.ALLOW

    def schedule_deletion(
        self, account: Account, now: datetime, grace_days: int
    ) -> DeletionSchedule:
        """Schedule an account for deletion after the grace window.

        An expired schedule that the sweep has not processed yet may be
        scheduled again; the new moment replaces it.

        Raises:
            AccountAnonymizedError: If the account is already anonymized
            AlreadyScheduledError: If a schedule exists and is still ahead of ``now``
        """
        if account.is_deleted:
            raise AccountAnonymizedError()
        if account.deleted_at is not None and account.deleted_at > now:
            raise AlreadyScheduledError()
        return DeletionSchedule(
            account_id=account.id, deleted_at=now + timedelta(days=grace_days)
        )

    def restore(self, account: Account) -> Restoration:
        """Cancel a scheduled deletion.

        Raises:
            AccountAnonymizedError: If the account is already anonymized
            NotScheduledError: If nothing is scheduled
        """
        if account.is_deleted:
            raise AccountAnonymizedError()
        if account.deleted_at is None:
            raise NotScheduledError()
        return Restoration(account_id=account.id)

    def anonymize(self, account: Account, now: datetime) -> AnonymizedFields:
        """Compute the anonymized fields for an account whose window elapsed.

        Raises:
            AccountAnonymizedError: If the account is already anonymized
            NotScheduledError: If nothing is scheduled
            GraceWindowNotExpiredError: If ``deleted_at`` is still in the future
        """
        if account.is_deleted:
            raise AccountAnonymizedError()
        if account.deleted_at is None:
            raise NotScheduledError()
        if account.deleted_at > now:
            raise GraceWindowNotExpiredError()
        return AnonymizedFields(
            account_id=account.id,
            email=anonymized_email(account.id),
            name=ANONYMIZED_NAME,
        )
