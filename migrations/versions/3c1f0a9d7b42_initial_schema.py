"""initial_schema

Create the foundational schema for the forum:
- Accounts (email/password login, scheduled deletion and anonymization)
- Free board and code board posts (existence and author lookups)
- Comments (top-level comments with one level of replies)
- Likes (one per account and target)

Revision ID: 3c1f0a9d7b42
Revises:
Create Date: 2026-10-18 09:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d7b42"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # ACCOUNTS table
    # ========================================================================
    op.create_table(
        "accounts",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("nickname", sa.String(30), nullable=False),
        sa.Column("image", sa.Text(), nullable=True),
        sa.Column("grade", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("role", sa.String(30), nullable=False, server_default="ROLE_USER"),
        sa.Column("github_token", sa.Text(), nullable=True),
        sa.Column("refresh_token", sa.Text(), nullable=True),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("deleted_at", sa.TIMESTAMP(timezone=False), nullable=True),
        sa.Column("enabled", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=False),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=False),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_accounts_email"),
        sa.UniqueConstraint("nickname", name="uq_accounts_nickname"),
    )
    # Sweep candidates: scheduled and not yet anonymized
    op.create_index(
        "idx_accounts_deletion_due",
        "accounts",
        ["deleted_at"],
        postgresql_where=sa.text("is_deleted = false"),
    )

    # ========================================================================
    # FREEBOARDS / CODEBOARDS tables
    # ========================================================================
    for board in ("freeboards", "codeboards"):
        op.create_table(
            board,
            sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
            sa.Column("user_id", sa.BigInteger(), nullable=False),
            sa.Column("title", sa.String(255), nullable=False),
            sa.Column(
                "is_deleted", sa.Boolean(), nullable=False, server_default="false"
            ),
            sa.Column(
                "created_at",
                sa.TIMESTAMP(timezone=False),
                nullable=False,
                server_default=sa.text("NOW()"),
            ),
            sa.ForeignKeyConstraint(["user_id"], ["accounts.id"]),
            sa.PrimaryKeyConstraint("id"),
        )

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("board_type", sa.String(20), nullable=False),
        sa.Column("board_id", sa.BigInteger(), nullable=False),
        sa.Column("parent_comment_id", sa.BigInteger(), nullable=True),
        sa.Column("author_id", sa.BigInteger(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("like_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=False),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=False),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["parent_comment_id"], ["comments.id"]),
        sa.ForeignKeyConstraint(["author_id"], ["accounts.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "board_type IN ('FREEBOARD', 'CODEBOARD')",
            name="comment_board_type_valid",
        ),
        sa.CheckConstraint("like_count >= 0", name="like_count_non_negative"),
        sa.CheckConstraint(
            "char_length(content) BETWEEN 1 AND 1000",
            name="comment_content_length",
        ),
    )
    # Top-level page query: board filter, id descending
    op.create_index(
        "idx_comments_board_top_level",
        "comments",
        ["board_type", "board_id", "id"],
        postgresql_where=sa.text("parent_comment_id IS NULL"),
    )
    op.create_index(
        "idx_comments_parent_comment_id", "comments", ["parent_comment_id"]
    )
    op.create_index("idx_comments_author_id", "comments", ["author_id"])

    # ========================================================================
    # LIKES table
    # ========================================================================
    op.create_table(
        "likes",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("account_id", sa.BigInteger(), nullable=False),
        sa.Column("reference_type", sa.String(30), nullable=False),
        sa.Column("reference_id", sa.BigInteger(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=False),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["account_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "reference_type IN ('POST_FREEBOARD', 'POST_CODEBOARD', 'COMMENT')",
            name="like_reference_type_valid",
        ),
        sa.UniqueConstraint(
            "account_id", "reference_type", "reference_id", name="unique_like"
        ),
    )
    op.create_index(
        "idx_likes_reference", "likes", ["reference_type", "reference_id"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("likes")
    op.drop_table("comments")
    op.drop_table("codeboards")
    op.drop_table("freeboards")
    op.drop_table("accounts")
