"""Domain services."""

from .account_service import AccountService
from .base import Service
from .comment_service import CommentService
from .deletion_scheduler import DeletionScheduler, SweepReport
from .jwt_service import JWTService
from .lifecycle_policy import (
    AnonymizedFields,
    DeletionSchedule,
    LifecyclePolicy,
    Restoration,
)
from .like_service import LikeService
from .thread_assembler import CommentPage, ThreadAssembler

__all__ = [
    "AccountService",
    "AnonymizedFields",
    "CommentPage",
    "CommentService",
    "DeletionSchedule",
    "DeletionScheduler",
    "JWTService",
    "LifecyclePolicy",
    "LikeService",
    "Restoration",
    "Service",
    "SweepReport",
    "ThreadAssembler",
]
