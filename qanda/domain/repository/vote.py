"""Vote repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence
from uuid import UUID

from qanda.domain.model.vote import Vote
from qanda.domain.value import (
    TargetKind,
    UserId,
    VoteCounts,
    VoteDirection,
    VoteId,
    VoteTarget,
)


class VoteRepository(ABC):
    """Repository for Vote entity (the vote ledger).

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_voter_and_target(
        self, voter_id: UserId, target: VoteTarget, for_update: bool = False
    ) -> Optional[Vote]:
        """Find a voter's vote on a specific target.

        Args:
            voter_id: The voter's ID
            target: Question or answer
            for_update: Lock the row until the transaction ends

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_target(self, target: VoteTarget) -> List[Vote]:
        """Find all votes on a target, newest first.

        Args:
            target: Question or answer

        Returns:
            List of votes on the target
        """
        pass

    @abstractmethod
    async def find_by_voter(self, voter_id: UserId) -> List[Vote]:
        """Find all votes cast by a voter, newest first.

        Args:
            voter_id: The voter's ID

        Returns:
            List of votes by the voter
        """
        pass

    @abstractmethod
    async def find_by_voter_and_targets(
        self, voter_id: UserId, kind: TargetKind, target_ids: Sequence[UUID]
    ) -> List[Vote]:
        """Find a voter's votes on multiple targets of one kind (batch query).

        Args:
            voter_id: The voter's ID
            kind: Kind of the targets
            target_ids: Target IDs to check

        Returns:
            List of votes by the voter on the specified targets
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a new vote.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If the voter already holds a vote on the target
        """
        pass

    @abstractmethod
    async def update_direction(
        self, vote_id: VoteId, direction: VoteDirection, voted_at: datetime
    ) -> Optional[Vote]:
        """Switch the direction of an existing vote.

        Args:
            vote_id: Vote to change
            direction: New direction
            voted_at: Timestamp of the change

        Returns:
            The updated vote, None if it no longer exists
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote.

        Args:
            vote_id: The vote ID to delete
        """
        pass

    @abstractmethod
    async def delete_by_voter_and_target(
        self, voter_id: UserId, target: VoteTarget
    ) -> bool:
        """Delete a voter's vote on a target.

        Args:
            voter_id: The voter's ID
            target: Question or answer

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass

    @abstractmethod
    async def delete_by_targets(
        self, kind: TargetKind, target_ids: Sequence[UUID]
    ) -> int:
        """Delete every vote on the given targets.

        Used when the targets themselves are deleted.

        Args:
            kind: Kind of the targets
            target_ids: Target IDs

        Returns:
            Number of votes deleted
        """
        pass

    @abstractmethod
    async def count_by_target(self, target: VoteTarget) -> VoteCounts:
        """Tally votes on a target.

        Args:
            target: Question or answer

        Returns:
            Upvote and downvote counts computed from the stored votes
        """
        pass

    @abstractmethod
    async def count_by_targets(
        self, kind: TargetKind, target_ids: Sequence[UUID]
    ) -> dict[UUID, VoteCounts]:
        """Tally votes on several targets of one kind in one query.

        Args:
            kind: Kind of the targets
            target_ids: Target IDs

        Returns:
            Mapping of target ID to counts; targets without votes are absent
        """
        pass
