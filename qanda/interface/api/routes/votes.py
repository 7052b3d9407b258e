"""Vote routes."""

from typing import Optional
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query

from qanda.application.usecase.common import CamelModel
from qanda.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    ListVotesRequest,
    ListVotesResponse,
    ListVotesUseCase,
    RemoveVoteRequest,
    RemoveVoteResponse,
    RemoveVoteUseCase,
)
from qanda.domain.value import AuthenticatedUser, TargetKind, VoteDirection
from qanda.interface.api.auth import current_user
from qanda.interface.api.envelope import ApiResponse

router = APIRouter(prefix="/votes", tags=["votes"], route_class=DishkaRoute)


class CastVoteBody(CamelModel):
    """API request for voting on an item."""

    item_id: UUID
    item_type: TargetKind
    vote_type: VoteDirection


@router.post("")
async def cast_vote(
    body: CastVoteBody,
    use_case: FromDishka[CastVoteUseCase],
    user: AuthenticatedUser = Depends(current_user),
) -> ApiResponse[CastVoteResponse]:
    """Vote on a question or answer.

    Repeating the vote you already hold removes it; voting the other way
    switches it.
    """
    result = await use_case.execute(
        CastVoteRequest(
            item_id=body.item_id,
            item_type=body.item_type,
            vote_type=body.vote_type,
            voter=user,
        )
    )
    message = "Vote recorded successfully" if result.vote else "Vote removed successfully"
    return ApiResponse(data=result, message=message)


@router.delete("")
async def remove_vote(
    use_case: FromDishka[RemoveVoteUseCase],
    user: AuthenticatedUser = Depends(current_user),
    item_id: Optional[str] = Query(default=None, alias="itemId"),
    item_type: Optional[str] = Query(default=None, alias="itemType"),
) -> ApiResponse[RemoveVoteResponse]:
    """Withdraw your vote on an item.

    Example:
        DELETE /votes?itemId=...&itemType=answer
    """
    result = await use_case.execute(
        RemoveVoteRequest(item_id=item_id, item_type=item_type, voter=user)
    )
    return ApiResponse(data=result, message="Vote removed successfully")


@router.get("")
async def list_votes(
    use_case: FromDishka[ListVotesUseCase],
    item_id: Optional[str] = Query(default=None, alias="itemId"),
    item_type: Optional[str] = Query(default=None, alias="itemType"),
    user_id: Optional[str] = Query(default=None, alias="userId"),
) -> ApiResponse[ListVotesResponse]:
    """List the votes on an item, or the votes cast by a user.

    Example:
        GET /votes?itemId=...&itemType=question
        GET /votes?userId=...
    """
    result = await use_case.execute(
        ListVotesRequest(item_id=item_id, item_type=item_type, user_id=user_id)
    )
    return ApiResponse(data=result, message="Votes retrieved successfully")
