"""Vote aggregation domain service."""

from typing import Sequence
from uuid import UUID

import logfire

from qanda.domain.repository import VoteRepository
from qanda.domain.value import TargetKind, VoteCounts, VoteTarget

from .base import Service


class AggregationService(Service):
    """Computes vote tallies from the live vote ledger.

    There is no stored counter: every call aggregates the committed votes,
    so tallies cannot drift from the ledger. The detail view, the feeds and
    the vote endpoints all read tallies through this service.
    """

    def __init__(self, vote_repository: VoteRepository) -> None:
        """Initialize aggregation service.

        Args:
            vote_repository: Vote repository
        """
        self.vote_repository = vote_repository

    async def counts(self, target: VoteTarget) -> VoteCounts:
        """Tally upvotes and downvotes on one target.

        Args:
            target: Question or answer

        Returns:
            Fresh counts, zero when the target has no votes
        """
        with logfire.span("aggregation_service.counts", target=str(target)):
            return await self.vote_repository.count_by_target(target)

    async def counts_for(
        self, kind: TargetKind, target_ids: Sequence[UUID]
    ) -> dict[UUID, VoteCounts]:
        """Tally several targets of one kind in one query.

        Args:
            kind: Kind of the targets
            target_ids: Target IDs

        Returns:
            Mapping with an entry for every requested ID
        """
        if not target_ids:
            return {}

        with logfire.span(
            "aggregation_service.counts_for", kind=kind.value, count=len(target_ids)
        ):
            tallies = await self.vote_repository.count_by_targets(kind, target_ids)
            return {tid: tallies.get(tid, VoteCounts.zero()) for tid in target_ids}
