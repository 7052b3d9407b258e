"""Vote domain service (the vote ledger)."""

from dataclasses import dataclass
from typing import Optional, Sequence
from uuid import UUID, uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from qanda.domain.error import NotFoundError, ValidationError
from qanda.domain.model.common import utcnow
from qanda.domain.model.vote import Vote
from qanda.domain.repository import VoteRepository
from qanda.domain.value import (
    AnswerId,
    Author,
    QuestionId,
    TargetKind,
    UserId,
    VoteCounts,
    VoteDirection,
    VoteId,
    VoteTarget,
)

from .aggregation_service import AggregationService
from .answer_service import AnswerService
from .base import Service
from .question_service import QuestionService
from .user_service import UserService


@dataclass
class VoteOutcome:
    """Result of casting a vote.

    ``vote`` is None when the cast toggled an existing vote off.
    """

    vote: Optional[Vote]
    counts: VoteCounts

    @property
    def direction(self) -> Optional[VoteDirection]:
        return self.vote.direction if self.vote else None


@dataclass
class VoteWithVoter:
    """A vote together with the voter's display identity."""

    vote: Vote
    voter: Author


class VoteService(Service):
    """Domain service for vote operations.

    A voter holds at most one vote per target. Casting the held direction
    again removes the vote, casting the other direction switches it.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        question_service: QuestionService,
        answer_service: AnswerService,
        aggregation_service: AggregationService,
        user_service: UserService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            question_service: Question domain service
            answer_service: Answer domain service
            aggregation_service: Vote aggregation service
            user_service: User domain service
        """
        self.vote_repository = vote_repository
        self.question_service = question_service
        self.answer_service = answer_service
        self.aggregation_service = aggregation_service
        self.user_service = user_service

    async def ensure_target_exists(self, target: VoteTarget) -> None:
        """Check that the voted item exists.

        Raises:
            NotFoundError: If the question or answer does not exist
        """
        if target.kind == TargetKind.QUESTION:
            exists = await self.question_service.question_exists(QuestionId(target.id))
            resource = "Question"
        else:
            exists = await self.answer_service.answer_exists(AnswerId(target.id))
            resource = "Answer"

        if not exists:
            logfire.warn("Vote on non-existent target", target=str(target))
            raise NotFoundError(resource, str(target.id))

    async def cast_vote(
        self, voter_id: UserId, target: VoteTarget, direction: VoteDirection
    ) -> VoteOutcome:
        """Cast, switch or toggle off a vote.

        - No vote held: a new vote is created
        - Same direction held: the vote is removed
        - Other direction held: the vote is switched and its timestamp refreshed

        A concurrent insert for the same voter and target is rejected by the
        unique constraint; the cast is then replayed once against the row
        that won.

        Args:
            voter_id: Authenticated voter
            target: Question or answer
            direction: Requested direction

        Returns:
            Resulting vote (None if toggled off) and fresh tallies

        Raises:
            NotFoundError: If the target does not exist
        """
        with logfire.span(
            "vote_service.cast_vote",
            voter_id=str(voter_id),
            target=str(target),
            direction=direction.value,
        ):
            await self.ensure_target_exists(target)

            try:
                vote = await self._apply(voter_id, target, direction)
            except IntegrityError:
                logfire.warn(
                    "Concurrent vote insert, retrying as update",
                    voter_id=str(voter_id),
                    target=str(target),
                )
                vote = await self._apply(voter_id, target, direction)

            counts = await self.aggregation_service.counts(target)
            return VoteOutcome(vote=vote, counts=counts)

    async def _apply(
        self, voter_id: UserId, target: VoteTarget, direction: VoteDirection
    ) -> Optional[Vote]:
        existing = await self.vote_repository.find_by_voter_and_target(
            voter_id, target, for_update=True
        )

        if existing is None:
            vote = Vote(
                id=VoteId(uuid4()),
                voter_id=voter_id,
                target=target,
                direction=direction,
                voted_at=utcnow(),
            )
            saved = await self.vote_repository.save(vote)
            logfire.info("Vote created", vote_id=str(saved.id), direction=direction.value)
            return saved

        if existing.direction == direction:
            await self.vote_repository.delete(existing.id)
            logfire.info("Vote toggled off", vote_id=str(existing.id))
            return None

        updated = await self.vote_repository.update_direction(
            existing.id, direction, utcnow()
        )
        if updated is None:
            # Removed between lookup and update; start over as a fresh cast
            return await self._apply(voter_id, target, direction)

        logfire.info(
            "Vote switched",
            vote_id=str(existing.id),
            direction=direction.value,
        )
        return updated

    async def remove_vote(self, voter_id: UserId, target: VoteTarget) -> VoteCounts:
        """Explicitly remove the voter's vote.

        Unlike the toggle in cast_vote, a missing vote is an error here.

        Args:
            voter_id: Authenticated voter
            target: Question or answer

        Returns:
            Fresh tallies after removal

        Raises:
            NotFoundError: If the target or the vote does not exist
        """
        with logfire.span(
            "vote_service.remove_vote", voter_id=str(voter_id), target=str(target)
        ):
            await self.ensure_target_exists(target)

            deleted = await self.vote_repository.delete_by_voter_and_target(
                voter_id, target
            )
            if not deleted:
                logfire.info(
                    "No vote to remove", voter_id=str(voter_id), target=str(target)
                )
                raise NotFoundError(
                    "Vote", str(target), message="No vote found for this item"
                )

            logfire.info("Vote removed", voter_id=str(voter_id), target=str(target))
            return await self.aggregation_service.counts(target)

    async def list_votes(
        self,
        target: Optional[VoteTarget] = None,
        voter_id: Optional[UserId] = None,
    ) -> list[VoteWithVoter]:
        """List votes on a target or by a voter, newest first.

        The target filter takes precedence when both are given. Voters that
        cannot be resolved are shown with the placeholder identity.

        Raises:
            ValidationError: If neither filter is given
        """
        if target is None and voter_id is None:
            raise ValidationError("Either itemId or userId must be provided")

        with logfire.span(
            "vote_service.list_votes",
            target=str(target) if target else None,
            voter_id=str(voter_id) if voter_id else None,
        ):
            if target is not None:
                votes = await self.vote_repository.find_by_target(target)
            else:
                votes = await self.vote_repository.find_by_voter(voter_id)

            voters = await self.user_service.resolve_authors(
                [vote.voter_id for vote in votes]
            )
            logfire.info("Votes listed", count=len(votes))
            return [VoteWithVoter(vote=v, voter=voters[v.voter_id]) for v in votes]

    async def direction_for(
        self, voter_id: UserId, target: VoteTarget
    ) -> Optional[VoteDirection]:
        """Direction currently held by a voter on one target."""
        vote = await self.vote_repository.find_by_voter_and_target(voter_id, target)
        return vote.direction if vote else None

    async def directions_for(
        self, voter_id: UserId, kind: TargetKind, target_ids: Sequence[UUID]
    ) -> dict[UUID, VoteDirection]:
        """Directions held by a voter on several targets.

        Args:
            voter_id: Voter ID
            kind: Kind of the targets
            target_ids: Target IDs

        Returns:
            Mapping of target ID to direction; unvoted targets are absent
        """
        if not target_ids:
            return {}

        # Batch query to avoid N+1
        votes = await self.vote_repository.find_by_voter_and_targets(
            voter_id, kind, target_ids
        )
        return {vote.target.id: vote.direction for vote in votes}
