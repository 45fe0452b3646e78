"""Integration tests for the PostgreSQL repositories.

Require a migrated database at DATABASE__URL; run with ``pytest -m integration``.
Each test runs in a request scope whose session commits on exit, so data is
made unique per run.
"""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from forum.domain.model import NewAccount, NewComment
from forum.domain.repository import AccountRepository, CommentRepository
from forum.domain.value import AccountId, BoardId, BoardType, Email, Nickname
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture - real persistence
integration_env = create_env_fixture(unmock={"persistence"})


def new_account() -> NewAccount:
    suffix = uuid4().hex[:12]
    return NewAccount(
        email=Email(f"it-{suffix}@example.com"),
        password_hash="hash",
        name="Integration",
        nickname=Nickname(f"it-{suffix}"),
    )


class TestAccountRepositoryIntegration:
    """Integration tests for PostgresAccountRepository."""

    @pytest.mark.asyncio
    async def test_create_assigns_id_and_defaults(self, integration_env):
        account_repo = await integration_env.get(AccountRepository)

        account = await account_repo.create(new_account())

        assert account.id > 0
        assert account.grade == 1
        assert account.enabled is True
        assert account.deleted_at is None

    @pytest.mark.asyncio
    async def test_schedule_sweep_query_and_anonymize(self, integration_env):
        # Arrange
        account_repo = await integration_env.get(AccountRepository)
        account = await account_repo.create(new_account())
        now = datetime.now()

        # Act
        scheduled = await account_repo.schedule_deletion(
            account.id, now - timedelta(minutes=1)
        )
        due = await account_repo.find_due_for_anonymization(now)
        anonymized = await account_repo.anonymize(
            account.id, f"deleted_{account.id}@deleted.com", "Deleted User", now
        )
        again = await account_repo.anonymize(
            account.id, f"deleted_{account.id}@deleted.com", "Deleted User", now
        )

        # Assert
        assert scheduled is True
        assert account.id in [a.id for a in due]
        assert anonymized is True
        assert again is False  # Already anonymized

        stored = await account_repo.find_by_id(account.id)
        assert stored.is_deleted is True
        assert stored.enabled is False
        assert stored.email.root == f"deleted_{account.id}@deleted.com"
        assert await account_repo.clear_deletion(account.id) is False

    @pytest.mark.asyncio
    async def test_unknown_account_updates_nothing(self, integration_env):
        account_repo = await integration_env.get(AccountRepository)

        assert await account_repo.schedule_deletion(AccountId(0), datetime.now()) is False

    @pytest.mark.asyncio
    async def test_update_profile_skips_anonymized_rows(self, integration_env):
        account_repo = await integration_env.get(AccountRepository)
        account = await account_repo.create(new_account())
        now = datetime.now()
        nickname = f"re-{uuid4().hex[:12]}"

        updated = await account_repo.update_profile(
            account.id, "Renamed", nickname, "/img.png", now
        )
        await account_repo.schedule_deletion(account.id, now - timedelta(minutes=1))
        await account_repo.anonymize(
            account.id, f"deleted_{account.id}@deleted.com", "Deleted User", now
        )
        after_anonymize = await account_repo.update_profile(
            account.id, "Back", nickname, None, now
        )

        assert updated is True
        assert after_anonymize is False
        stored = await account_repo.find_by_id(account.id)
        assert stored.nickname.root == nickname
        assert stored.name == "Deleted User"

    @pytest.mark.asyncio
    async def test_rotate_refresh_token_compares_stored_value(self, integration_env):
        account_repo = await integration_env.get(AccountRepository)
        account = await account_repo.create(new_account())
        await account_repo.store_refresh_token(account.id, "first")

        rotated = await account_repo.rotate_refresh_token(account.id, "first", "second")
        stale = await account_repo.rotate_refresh_token(account.id, "first", "third")

        assert rotated is True
        assert stale is False
        stored = await account_repo.find_by_id(account.id)
        assert stored.refresh_token == "second"


class TestCommentRepositoryIntegration:
    """Integration tests for PostgresCommentRepository."""

    @pytest.mark.asyncio
    async def test_like_count_never_negative(self, integration_env):
        account_repo = await integration_env.get(AccountRepository)
        comment_repo = await integration_env.get(CommentRepository)
        author = await account_repo.create(new_account())
        comment = await comment_repo.create(
            NewComment(
                board_type=BoardType.FREEBOARD,
                board_id=BoardId(1),
                author_id=author.id,
                content="Counting",
            )
        )

        await comment_repo.adjust_like_count(comment.id, -1)

        stored = await comment_repo.find_by_id(comment.id)
        assert stored.like_count == 0
