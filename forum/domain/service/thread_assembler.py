"""Thread assembly for comment listings.

Threads are two levels deep, so a listing is a page of top-level comments
plus one batch lookup of their direct replies.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

import logfire

from forum.domain.model.comment import Comment
from forum.domain.repository import CommentRepository
from forum.domain.value import BoardId, BoardType, CommentId

from .base import Service

MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class CommentPage:
    """One page of top-level comments."""

    comments: list[Comment]
    has_more: bool
    next_cursor: Optional[CommentId]


class ThreadAssembler(Service):
    """Domain service that pages top-level comments and groups replies."""

    def __init__(
        self, comment_repository: CommentRepository, max_page_size: int = MAX_PAGE_SIZE
    ) -> None:
        """Initialize thread assembler.

        Args:
            comment_repository: Comment repository
            max_page_size: Upper bound for requested page sizes
        """
        self.comment_repository = comment_repository
        self.max_page_size = min(max_page_size, MAX_PAGE_SIZE)

    async def fetch_page(
        self,
        board_type: BoardType,
        board_id: BoardId,
        cursor: Optional[int],
        page_size: int,
    ) -> CommentPage:
        """Fetch a page of top-level comments, newest first.

        Args:
            board_type: Board kind
            board_id: Board post ID
            cursor: Id of the last comment already seen; None or <= 0 starts
                from the newest comment. Ids that do not exist still act as a
                plain upper bound.
            page_size: Requested page size, clamped to [1, 100]

        Returns:
            Comments with id strictly below the cursor, whether more exist,
            and the cursor for the next page
        """
        size = max(MIN_PAGE_SIZE, min(page_size, self.max_page_size))
        before_id = CommentId(cursor) if cursor is not None and cursor > 0 else None

        with logfire.span(
            "thread_assembler.fetch_page",
            board_type=board_type.value,
            board_id=board_id,
            cursor=before_id,
            size=size,
        ):
            rows = await self.comment_repository.find_top_level(
                board_type, board_id, before_id, size + 1
            )
            has_more = len(rows) > size
            comments = rows[:size]
            next_cursor = comments[-1].id if has_more else None

            logfire.info(
                "Comment page fetched",
                board_type=board_type.value,
                board_id=board_id,
                count=len(comments),
                has_more=has_more,
            )
            return CommentPage(
                comments=comments, has_more=has_more, next_cursor=next_cursor
            )

    async def attach_replies(
        self, top_level_comments: Sequence[Comment]
    ) -> dict[CommentId, list[Comment]]:
        """Group the direct replies of the given comments by parent id.

        Args:
            top_level_comments: Parents whose replies should be loaded

        Returns:
            Replies per parent id, oldest first. Parents without replies are
            absent from the mapping.
        """
        if not top_level_comments:
            return {}

        parent_ids = [comment.id for comment in top_level_comments]
        with logfire.span("thread_assembler.attach_replies", parents=len(parent_ids)):
            # Single batch query for all parents (avoid N+1)
            replies = await self.comment_repository.find_replies(parent_ids)

            grouped: dict[CommentId, list[Comment]] = {}
            for reply in sorted(replies, key=lambda c: (c.created_at, c.id)):
                if reply.parent_comment_id is None:
                    continue
                grouped.setdefault(reply.parent_comment_id, []).append(reply)
            return grouped
