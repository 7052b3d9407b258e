"""Answer routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Request
from pydantic import Field

from qanda.application.usecase.answer import (
    DeleteAnswerRequest,
    DeleteAnswerUseCase,
    GetAnswerRequest,
    GetAnswerUseCase,
    UpdateAnswerRequest,
    UpdateAnswerUseCase,
)
from qanda.application.usecase.common import AnswerItem, CamelModel
from qanda.domain.model.question import CONTENT_MAX_LENGTH, CONTENT_MIN_LENGTH
from qanda.domain.service import JWTService
from qanda.domain.value import AuthenticatedUser
from qanda.interface.api.auth import current_user, optional_user
from qanda.interface.api.envelope import ApiResponse

router = APIRouter(prefix="/answers", tags=["answers"], route_class=DishkaRoute)


class UpdateAnswerBody(CamelModel):
    """API request for editing an answer."""

    content: str = Field(min_length=CONTENT_MIN_LENGTH, max_length=CONTENT_MAX_LENGTH)


@router.get("/{answer_id}")
async def get_answer(
    answer_id: UUID,
    request: Request,
    use_case: FromDishka[GetAnswerUseCase],
    jwt_service: FromDishka[JWTService],
) -> ApiResponse[AnswerItem]:
    """Get a single answer."""
    answer = await use_case.execute(
        GetAnswerRequest(answer_id=answer_id, viewer=optional_user(request, jwt_service))
    )
    return ApiResponse(data=answer, message="Answer retrieved successfully")


@router.put("/{answer_id}")
async def update_answer(
    answer_id: UUID,
    body: UpdateAnswerBody,
    use_case: FromDishka[UpdateAnswerUseCase],
    user: AuthenticatedUser = Depends(current_user),
) -> ApiResponse[AnswerItem]:
    """Edit an answer. Only the author can edit."""
    answer = await use_case.execute(
        UpdateAnswerRequest(answer_id=answer_id, editor=user, content=body.content)
    )
    return ApiResponse(data=answer, message="Answer updated successfully")


@router.delete("/{answer_id}")
async def delete_answer(
    answer_id: UUID,
    use_case: FromDishka[DeleteAnswerUseCase],
    user: AuthenticatedUser = Depends(current_user),
) -> ApiResponse[None]:
    """Delete an answer with its votes. Only the author can delete."""
    await use_case.execute(DeleteAnswerRequest(answer_id=answer_id, user=user))
    return ApiResponse(data=None, message="Answer deleted successfully")
