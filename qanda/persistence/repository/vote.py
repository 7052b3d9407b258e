"""PostgreSQL implementation of Vote repository."""

from datetime import datetime
from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import and_, delete, desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

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
from qanda.persistence.mappers import row_to_counts, row_to_vote, vote_to_dict
from qanda.persistence.tables import votes_table
from qanda.persistence.tally import vote_tally


def _matches(voter_id: UserId, target: VoteTarget):
    return and_(
        votes_table.c.user_id == voter_id,
        votes_table.c.target_kind == target.kind.value,
        votes_table.c.target_id == target.id,
    )


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_voter_and_target(
        self, voter_id: UserId, target: VoteTarget, for_update: bool = False
    ) -> Optional[Vote]:
        """Find a voter's vote on a specific target."""
        stmt = select(votes_table).where(_matches(voter_id, target))
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_target(self, target: VoteTarget) -> List[Vote]:
        """Find all votes on a target, newest first."""
        stmt = (
            select(votes_table)
            .where(
                votes_table.c.target_kind == target.kind.value,
                votes_table.c.target_id == target.id,
            )
            .order_by(desc(votes_table.c.voted_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def find_by_voter(self, voter_id: UserId) -> List[Vote]:
        """Find all votes cast by a voter, newest first."""
        stmt = (
            select(votes_table)
            .where(votes_table.c.user_id == voter_id)
            .order_by(desc(votes_table.c.voted_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def find_by_voter_and_targets(
        self, voter_id: UserId, kind: TargetKind, target_ids: Sequence[UUID]
    ) -> List[Vote]:
        """Find a voter's votes on multiple targets (batch query)."""
        if not target_ids:
            return []

        stmt = select(votes_table).where(
            votes_table.c.user_id == voter_id,
            votes_table.c.target_kind == kind.value,
            votes_table.c.target_id.in_(target_ids),
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def save(self, vote: Vote) -> Vote:
        """Save a new vote.

        The insert runs in a savepoint: on a unique violation only the
        savepoint is rolled back and IntegrityError propagates, leaving the
        request transaction usable for a retry.
        """
        async with self.session.begin_nested():
            await self.session.execute(insert(votes_table).values(**vote_to_dict(vote)))
        return vote

    async def update_direction(
        self, vote_id: VoteId, direction: VoteDirection, voted_at: datetime
    ) -> Optional[Vote]:
        """Switch the direction of an existing vote."""
        stmt = (
            update(votes_table)
            .where(votes_table.c.id == vote_id)
            .values(direction=direction.value, voted_at=voted_at)
            .returning(votes_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_vote(row._asdict()) if row else None

    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote."""
        await self.session.execute(delete(votes_table).where(votes_table.c.id == vote_id))
        await self.session.flush()

    async def delete_by_voter_and_target(
        self, voter_id: UserId, target: VoteTarget
    ) -> bool:
        """Delete a voter's vote on a target."""
        result = await self.session.execute(
            delete(votes_table).where(_matches(voter_id, target))
        )
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_targets(
        self, kind: TargetKind, target_ids: Sequence[UUID]
    ) -> int:
        """Delete every vote on the given targets."""
        if not target_ids:
            return 0

        result = await self.session.execute(
            delete(votes_table).where(
                votes_table.c.target_kind == kind.value,
                votes_table.c.target_id.in_(target_ids),
            )
        )
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def count_by_target(self, target: VoteTarget) -> VoteCounts:
        """Tally votes on a target."""
        tallies = await self.count_by_targets(target.kind, [target.id])
        return tallies.get(target.id, VoteCounts.zero())

    async def count_by_targets(
        self, kind: TargetKind, target_ids: Sequence[UUID]
    ) -> dict[UUID, VoteCounts]:
        """Tally votes on several targets in one query."""
        if not target_ids:
            return {}

        tally = vote_tally(kind, target_ids)
        result = await self.session.execute(select(tally))
        return {row.target_id: row_to_counts(row._asdict()) for row in result.fetchall()}
