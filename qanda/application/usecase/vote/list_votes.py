"""List votes use case."""

from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel

from qanda.application.usecase.common import (
    AuthorInfo,
    CamelModel,
    VoteCountsInfo,
    VoteItem,
)
from qanda.domain.error import ValidationError
from qanda.domain.service import AggregationService, VoteService
from qanda.domain.value import UserId, VoteTarget

from .target import parse_target


class ListVotesRequest(BaseModel):
    """List votes request, with filters as raw query values."""

    item_id: Optional[str] = None
    item_type: Optional[str] = None
    user_id: Optional[str] = None


class VoteWithUserItem(VoteItem):
    """Vote with the voter's display identity."""

    user: AuthorInfo


class ListVotesResponse(CamelModel):
    """List votes response.

    vote_counts is only present when listing the votes on one item.
    """

    votes: list[VoteWithUserItem]
    vote_counts: Optional[VoteCountsInfo] = None


class ListVotesUseCase:
    """Use case for listing the votes on an item or by a user."""

    def __init__(
        self, vote_service: VoteService, aggregation_service: AggregationService
    ) -> None:
        """Initialize list votes use case.

        Args:
            vote_service: Vote domain service
            aggregation_service: Vote aggregation service
        """
        self.vote_service = vote_service
        self.aggregation_service = aggregation_service

    def _filters(
        self, request: ListVotesRequest
    ) -> tuple[Optional[VoteTarget], Optional[UserId]]:
        if not request.item_id and not request.user_id:
            raise ValidationError("Either itemId or userId must be provided")

        if request.item_id:
            target = parse_target(
                request.item_id,
                request.item_type,
                "itemType (question/answer) is required when itemId is provided",
            )
            return target, None

        try:
            return None, UserId(UUID(request.user_id))
        except ValueError:
            raise ValidationError("Invalid userId", details={"userId": request.user_id})

    async def execute(self, request: ListVotesRequest) -> ListVotesResponse:
        """Execute list votes flow.

        The item filter takes precedence over the user filter.

        Args:
            request: List votes request

        Returns:
            Votes newest first, with tallies when filtered by item

        Raises:
            ValidationError: If no usable filter is given
        """
        target, voter_id = self._filters(request)

        with logfire.span(
            "list_votes.execute",
            target=str(target) if target else None,
            user_id=str(voter_id) if voter_id else None,
        ):
            votes = await self.vote_service.list_votes(target=target, voter_id=voter_id)

            counts = None
            if target is not None:
                counts = VoteCountsInfo.from_counts(
                    await self.aggregation_service.counts(target)
                )

            return ListVotesResponse(
                votes=[
                    VoteWithUserItem(
                        **VoteItem.from_vote(v.vote).model_dump(),
                        user=AuthorInfo.from_author(v.voter),
                    )
                    for v in votes
                ],
                vote_counts=counts,
            )
