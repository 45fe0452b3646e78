"""Unit tests for LifecyclePolicy."""

from datetime import timedelta

import pytest

from forum.domain.error import (
    AccountAnonymizedError,
    AlreadyScheduledError,
    GraceWindowNotExpiredError,
    NotScheduledError,
)
from forum.domain.service import LifecyclePolicy
from forum.domain.service.lifecycle_policy import ANONYMIZED_NAME, anonymized_email
from forum.domain.value import AccountId, AccountStatus, LoginDecision
from tests.conftest import make_account


@pytest.fixture
def policy() -> LifecyclePolicy:
    return LifecyclePolicy()


class TestDecideLogin:
    """Tests for the login decision."""

    @pytest.mark.parametrize(
        ("is_deleted", "enabled", "scheduled", "expected"),
        [
            (False, True, False, LoginDecision.ALLOW),
            (False, True, True, LoginDecision.REJECT_DELETED_PENDING),
            (False, False, False, LoginDecision.REJECT_DISABLED),
            (False, False, True, LoginDecision.REJECT_DISABLED),
            (True, False, True, LoginDecision.REJECT_DISABLED),
            (True, True, True, LoginDecision.REJECT_DISABLED),
        ],
    )
    def test_login_decision_table(
        self, policy, now, is_deleted, enabled, scheduled, expected
    ):
        """Only active, enabled accounts may log in."""
        account = make_account(
            1,
            is_deleted=is_deleted,
            enabled=enabled,
            deleted_at=now + timedelta(days=30) if scheduled else None,
        )

        assert policy.decide_login(account) == expected

    def test_expired_schedule_still_rejects_login(self, policy, now):
        """An elapsed but unswept schedule still blocks login."""
        account = make_account(1, deleted_at=now - timedelta(days=1))

        assert policy.decide_login(account) == LoginDecision.REJECT_DELETED_PENDING


class TestScheduleDeletion:
    """Tests for scheduling a deletion."""

    def test_schedule_sets_grace_window(self, policy, now):
        """deleted_at is now plus the grace window."""
        account = make_account(7)

        schedule = policy.schedule_deletion(account, now, grace_days=90)

        assert schedule.account_id == AccountId(7)
        assert schedule.deleted_at == now + timedelta(days=90)

    def test_zero_grace_days_is_due_immediately(self, policy, now):
        """With no grace window the account is due at once."""
        schedule = policy.schedule_deletion(make_account(1), now, grace_days=0)

        assert schedule.deleted_at == now

    def test_double_schedule_raises(self, policy, now):
        """A pending schedule cannot be replaced."""
        account = make_account(1, deleted_at=now + timedelta(days=10))

        with pytest.raises(AlreadyScheduledError) as exc_info:
            policy.schedule_deletion(account, now, grace_days=90)
        assert exc_info.value.code == "U100"

    def test_expired_schedule_can_be_rescheduled(self, policy, now):
        """An elapsed, unswept schedule is replaced by a new one."""
        account = make_account(1, deleted_at=now - timedelta(days=1))

        schedule = policy.schedule_deletion(account, now, grace_days=90)

        assert schedule.deleted_at == now + timedelta(days=90)

    def test_anonymized_account_cannot_be_scheduled(self, policy, now):
        account = make_account(1, is_deleted=True, enabled=False, deleted_at=now)

        with pytest.raises(AccountAnonymizedError):
            policy.schedule_deletion(account, now, grace_days=90)


class TestRestore:
    """Tests for restoring a scheduled account."""

    def test_schedule_then_restore_returns_to_active(self, policy, now):
        """Restore undoes a schedule."""
        account = make_account(3)
        schedule = policy.schedule_deletion(account, now, grace_days=90)
        pending = account.model_copy(update={"deleted_at": schedule.deleted_at})
        assert pending.status == AccountStatus.PENDING_DELETION

        restoration = policy.restore(pending)
        restored = pending.model_copy(update={"deleted_at": None})

        assert restoration.account_id == AccountId(3)
        assert restored.status == AccountStatus.ACTIVE
        assert policy.decide_login(restored) == LoginDecision.ALLOW

    def test_restore_without_schedule_raises(self, policy):
        with pytest.raises(NotScheduledError) as exc_info:
            policy.restore(make_account(1))
        assert exc_info.value.code == "U103"

    def test_restore_anonymized_raises(self, policy, now):
        account = make_account(1, is_deleted=True, enabled=False, deleted_at=now)

        with pytest.raises(AccountAnonymizedError) as exc_info:
            policy.restore(account)
        assert exc_info.value.code == "U105"


class TestAnonymize:
    """Tests for the anonymization decision."""

    def test_anonymize_due_account(self, policy, now):
        account = make_account(42, deleted_at=now - timedelta(seconds=1))

        fields = policy.anonymize(account, now)

        assert fields.account_id == AccountId(42)
        assert fields.email == "deleted_42@deleted.com"
        assert fields.name == ANONYMIZED_NAME

    def test_anonymize_exactly_at_deadline(self, policy, now):
        """deleted_at equal to now counts as due."""
        fields = policy.anonymize(make_account(1, deleted_at=now), now)

        assert fields.email == anonymized_email(AccountId(1))

    def test_anonymized_email_is_deterministic(self):
        assert anonymized_email(AccountId(5)) == anonymized_email(AccountId(5))
        assert anonymized_email(AccountId(5)) != anonymized_email(AccountId(6))

    def test_anonymize_before_deadline_raises(self, policy, now):
        account = make_account(1, deleted_at=now + timedelta(minutes=1))

        with pytest.raises(GraceWindowNotExpiredError):
            policy.anonymize(account, now)

    def test_anonymize_unscheduled_raises(self, policy, now):
        with pytest.raises(NotScheduledError):
            policy.anonymize(make_account(1), now)

    def test_anonymize_twice_raises(self, policy, now):
        account = make_account(1, is_deleted=True, enabled=False, deleted_at=now)

        with pytest.raises(AccountAnonymizedError):
            policy.anonymize(account, now)
