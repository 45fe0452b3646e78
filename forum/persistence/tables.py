"""SQLAlchemy table definitions for the forum.

These tables are used with SQLAlchemy Core (no ORM mapping).
They match the schema defined in Alembic migrations.

Timestamps are naive and hold server local time.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# ACCOUNTS TABLE
# ============================================================================
accounts_table = Table(
    "accounts",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("email", String(255), nullable=False),
    Column("password_hash", String(255), nullable=False),
    Column("name", String(100), nullable=False),
    Column("nickname", String(30), nullable=False),
    Column("image", Text, nullable=True),
    Column("grade", Integer, nullable=False, server_default="1"),
    Column("role", String(30), nullable=False, server_default="ROLE_USER"),
    Column("github_token", Text, nullable=True),
    Column("refresh_token", Text, nullable=True),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column("deleted_at", TIMESTAMP(timezone=False), nullable=True),  # Scheduled deletion
    Column("enabled", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=False), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=False), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("email", name="uq_accounts_email"),
    UniqueConstraint("nickname", name="uq_accounts_nickname"),
)

# Sweep candidates: scheduled and not yet anonymized
Index(
    "idx_accounts_deletion_due",
    accounts_table.c.deleted_at,
    postgresql_where=accounts_table.c.is_deleted.is_(False),
)

# ============================================================================
# BOARD TABLES (owned by the board module, read here for existence/author)
# ============================================================================
freeboards_table = Table(
    "freeboards",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column(
        "user_id", BigInteger, ForeignKey("accounts.id"), nullable=False
    ),
    Column("title", String(255), nullable=False),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=False), nullable=False, server_default="NOW()"
    ),
)

codeboards_table = Table(
    "codeboards",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column(
        "user_id", BigInteger, ForeignKey("accounts.id"), nullable=False
    ),
    Column("title", String(255), nullable=False),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=False), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("board_type", String(20), nullable=False),
    Column("board_id", BigInteger, nullable=False),
    Column(
        "parent_comment_id", BigInteger, ForeignKey("comments.id"), nullable=True
    ),
    Column("author_id", BigInteger, ForeignKey("accounts.id"), nullable=False),
    Column("content", Text, nullable=False),
    Column("like_count", Integer, nullable=False, server_default="0"),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=False), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=False), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "board_type IN ('FREEBOARD', 'CODEBOARD')", name="comment_board_type_valid"
    ),
    CheckConstraint("like_count >= 0", name="like_count_non_negative"),
    CheckConstraint(
        "char_length(content) BETWEEN 1 AND 1000", name="comment_content_length"
    ),
)

# Top-level page: (board_type, board_id) filter, id descending
Index(
    "idx_comments_board_top_level",
    comments_table.c.board_type,
    comments_table.c.board_id,
    comments_table.c.id,
    postgresql_where=comments_table.c.parent_comment_id.is_(None),
)
Index("idx_comments_parent_comment_id", comments_table.c.parent_comment_id)
Index("idx_comments_author_id", comments_table.c.author_id)

# ============================================================================
# LIKES TABLE
# ============================================================================
likes_table = Table(
    "likes",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column(
        "account_id",
        BigInteger,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("reference_type", String(30), nullable=False),
    Column("reference_id", BigInteger, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=False), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "reference_type IN ('POST_FREEBOARD', 'POST_CODEBOARD', 'COMMENT')",
        name="like_reference_type_valid",
    ),
    UniqueConstraint(
        "account_id", "reference_type", "reference_id", name="unique_like"
    ),
)

Index(
    "idx_likes_reference", likes_table.c.reference_type, likes_table.c.reference_id
)
