"""Like entity.

One like per account per target. Targets are board posts or comments,
discriminated by ReferenceType.
"""

from datetime import datetime

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import AccountId, LikeId, ReferenceType


class Like(DomainModel):
    """Like entity."""

    id: LikeId
    account_id: AccountId
    reference_type: ReferenceType
    reference_id: int
    created_at: datetime = Field(default_factory=datetime.now)
