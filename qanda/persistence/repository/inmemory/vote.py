"""In-memory vote repository for testing."""

from datetime import datetime
from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from qanda.domain.model import Vote
from qanda.domain.repository import VoteRepository
from qanda.domain.value import (
    TargetKind,
    UserId,
    VoteCounts,
    VoteDirection,
    VoteId,
    VoteTarget,
)

from .store import InMemoryStore


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Mirrors the unique (voter, target kind, target id) constraint by
    raising IntegrityError on a duplicate insert.
    """

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _newest_first(self, votes: list[Vote]) -> list[Vote]:
        return sorted(votes, key=lambda v: v.voted_at, reverse=True)

    async def find_by_voter_and_target(
        self, voter_id: UserId, target: VoteTarget, for_update: bool = False
    ) -> Optional[Vote]:
        """Find a voter's vote on a specific target."""
        for vote in self._store.votes.values():
            if vote.voter_id == voter_id and vote.target == target:
                return vote
        return None

    async def find_by_target(self, target: VoteTarget) -> List[Vote]:
        """Find all votes on a target, newest first."""
        return self._newest_first(
            [v for v in self._store.votes.values() if v.target == target]
        )

    async def find_by_voter(self, voter_id: UserId) -> List[Vote]:
        """Find all votes cast by a voter, newest first."""
        return self._newest_first(
            [v for v in self._store.votes.values() if v.voter_id == voter_id]
        )

    async def find_by_voter_and_targets(
        self, voter_id: UserId, kind: TargetKind, target_ids: Sequence[UUID]
    ) -> List[Vote]:
        """Find a voter's votes on multiple targets."""
        wanted = set(target_ids)
        return [
            v
            for v in self._store.votes.values()
            if v.voter_id == voter_id
            and v.target.kind == kind
            and v.target.id in wanted
        ]

    async def save(self, vote: Vote) -> Vote:
        """Save a new vote.

        Raises:
            IntegrityError: If the voter already voted on the target
        """
        if await self.find_by_voter_and_target(vote.voter_id, vote.target):
            raise IntegrityError("Duplicate vote", None, Exception())

        self._store.votes[vote.id] = vote
        return vote

    async def update_direction(
        self, vote_id: VoteId, direction: VoteDirection, voted_at: datetime
    ) -> Optional[Vote]:
        """Switch the direction of an existing vote."""
        vote = self._store.votes.get(vote_id)
        if not vote:
            return None

        updated = vote.model_copy(update={"direction": direction, "voted_at": voted_at})
        self._store.votes[vote_id] = updated
        return updated

    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote."""
        self._store.votes.pop(vote_id, None)

    async def delete_by_voter_and_target(
        self, voter_id: UserId, target: VoteTarget
    ) -> bool:
        """Delete a voter's vote on a target."""
        vote = await self.find_by_voter_and_target(voter_id, target)
        if not vote:
            return False

        del self._store.votes[vote.id]
        return True

    async def delete_by_targets(
        self, kind: TargetKind, target_ids: Sequence[UUID]
    ) -> int:
        """Delete every vote on the given targets."""
        wanted = set(target_ids)
        doomed = [
            v.id
            for v in self._store.votes.values()
            if v.target.kind == kind and v.target.id in wanted
        ]
        for vote_id in doomed:
            del self._store.votes[vote_id]
        return len(doomed)

    async def count_by_target(self, target: VoteTarget) -> VoteCounts:
        """Tally votes on a target."""
        tallies = self._store.tally(target.kind, [target.id])
        return tallies.get(target.id, VoteCounts.zero())

    async def count_by_targets(
        self, kind: TargetKind, target_ids: Sequence[UUID]
    ) -> dict[UUID, VoteCounts]:
        """Tally votes on several targets."""
        if not target_ids:
            return {}
        return self._store.tally(kind, target_ids)
