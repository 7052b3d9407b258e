"""Cast vote use case."""

from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel

from qanda.application.usecase.common import CamelModel, VoteCountsInfo, VoteItem
from qanda.domain.service import UserService, VoteService
from qanda.domain.value import (
    AuthenticatedUser,
    TargetKind,
    VoteDirection,
    VoteTarget,
)


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    item_id: UUID
    item_type: TargetKind
    vote_type: VoteDirection
    voter: AuthenticatedUser


class CastVoteResponse(CamelModel):
    """Cast vote response.

    vote and user_vote_type are None when the cast toggled the vote off.
    """

    vote: Optional[VoteItem]
    vote_counts: VoteCountsInfo
    user_vote_type: Optional[VoteDirection]


class CastVoteUseCase:
    """Use case for voting on a question or answer."""

    def __init__(self, vote_service: VoteService, user_service: UserService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
            user_service: User domain service
        """
        self.vote_service = vote_service
        self.user_service = user_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Resulting vote, fresh tallies and the voter's current direction

        Raises:
            NotFoundError: If the item does not exist
        """
        with logfire.span(
            "cast_vote.execute",
            item_id=str(request.item_id),
            item_type=request.item_type.value,
            vote_type=request.vote_type.value,
        ):
            outcome = await self.vote_service.cast_vote(
                request.voter.user_id,
                VoteTarget(kind=request.item_type, id=request.item_id),
                request.vote_type,
            )
            await self.user_service.register_author(request.voter)

            return CastVoteResponse(
                vote=VoteItem.from_vote(outcome.vote) if outcome.vote else None,
                vote_counts=VoteCountsInfo.from_counts(outcome.counts),
                user_vote_type=outcome.direction,
            )
