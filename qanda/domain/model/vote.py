"""Vote entity.

Each user holds at most one vote per target (question or answer).
Re-casting the same direction removes the vote, casting the other
direction switches it in place.
"""

from datetime import datetime

from pydantic import Field

from qanda.domain.model.common import DomainModel, utcnow
from qanda.domain.value import UserId, VoteDirection, VoteId, VoteTarget


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per (voter, target kind, target id), enforced by a database
      unique constraint
    - voted_at is refreshed whenever the direction changes
    """

    id: VoteId
    voter_id: UserId
    target: VoteTarget
    direction: VoteDirection
    voted_at: datetime = Field(default_factory=utcnow)
