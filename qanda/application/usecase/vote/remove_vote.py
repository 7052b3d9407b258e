"""Remove vote use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from qanda.application.usecase.common import CamelModel, VoteCountsInfo
from qanda.domain.service import VoteService
from qanda.domain.value import AuthenticatedUser, VoteDirection

from .target import parse_target


class RemoveVoteRequest(BaseModel):
    """Remove vote request, with the item as raw query values."""

    item_id: Optional[str] = None
    item_type: Optional[str] = None
    voter: AuthenticatedUser


class RemoveVoteResponse(CamelModel):
    """Remove vote response."""

    vote_counts: VoteCountsInfo
    user_vote_type: Optional[VoteDirection] = None


class RemoveVoteUseCase:
    """Use case for explicitly withdrawing a vote."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize remove vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: RemoveVoteRequest) -> RemoveVoteResponse:
        """Execute remove vote flow.

        Args:
            request: Remove vote request

        Returns:
            Fresh tallies; the voter no longer holds a vote

        Raises:
            ValidationError: If the item is missing or malformed
            NotFoundError: If the item or the vote does not exist
        """
        target = parse_target(
            request.item_id,
            request.item_type,
            "itemId and itemType (question/answer) are required",
        )

        with logfire.span("remove_vote.execute", target=str(target)):
            counts = await self.vote_service.remove_vote(request.voter.user_id, target)
            return RemoveVoteResponse(vote_counts=VoteCountsInfo.from_counts(counts))
