"""Question routes."""

from typing import Optional
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Request, status
from pydantic import Field

from qanda.application.usecase.answer import (
    CreateAnswerRequest,
    CreateAnswerUseCase,
    ListAnswersRequest,
    ListAnswersUseCase,
)
from qanda.application.usecase.common import AnswerItem, CamelModel, QuestionItem
from qanda.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionUseCase,
    DeleteQuestionRequest,
    DeleteQuestionUseCase,
    GetQuestionRequest,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsUseCase,
    QuestionDetail,
    UpdateQuestionRequest,
    UpdateQuestionUseCase,
)
from qanda.domain.model.question import (
    CONTENT_MAX_LENGTH,
    CONTENT_MIN_LENGTH,
    TITLE_MAX_LENGTH,
    TITLE_MIN_LENGTH,
)
from qanda.domain.service import JWTService
from qanda.domain.value import AuthenticatedUser, SortOrder
from qanda.interface.api.auth import current_user, optional_user
from qanda.interface.api.envelope import ApiResponse

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class CreateQuestionBody(CamelModel):
    """API request for asking a question."""

    title: str = Field(min_length=TITLE_MIN_LENGTH, max_length=TITLE_MAX_LENGTH)
    content: str = Field(min_length=CONTENT_MIN_LENGTH, max_length=CONTENT_MAX_LENGTH)
    topic_ids: list[UUID] = Field(default_factory=list)


class UpdateQuestionBody(CamelModel):
    """API request for editing a question. Omitted fields stay unchanged."""

    title: Optional[str] = Field(
        default=None, min_length=TITLE_MIN_LENGTH, max_length=TITLE_MAX_LENGTH
    )
    content: Optional[str] = Field(
        default=None, min_length=CONTENT_MIN_LENGTH, max_length=CONTENT_MAX_LENGTH
    )
    topic_ids: Optional[list[UUID]] = None


class CreateAnswerBody(CamelModel):
    """API request for answering a question."""

    content: str = Field(min_length=CONTENT_MIN_LENGTH, max_length=CONTENT_MAX_LENGTH)


@router.get("")
async def list_questions(
    request: Request,
    use_case: FromDishka[ListQuestionsUseCase],
    jwt_service: FromDishka[JWTService],
    page: Optional[int] = None,
    limit: Optional[int] = None,
    sort: SortOrder = SortOrder.RECENT,
    topic: Optional[str] = None,
) -> ApiResponse[list[QuestionItem]]:
    """List questions, newest or most voted first.

    Example:
        GET /questions?page=2&limit=10&sort=most_voted&topic=science
    """
    result = await use_case.execute(
        ListQuestionsRequest(
            page=page,
            limit=limit,
            sort=sort,
            topic=topic,
            viewer=optional_user(request, jwt_service),
        )
    )
    return ApiResponse(
        data=result.questions,
        message="Questions retrieved successfully",
        pagination=result.pagination,
    )


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_question(
    body: CreateQuestionBody,
    use_case: FromDishka[CreateQuestionUseCase],
    user: AuthenticatedUser = Depends(current_user),
) -> ApiResponse[QuestionItem]:
    """Ask a question. Requires authentication."""
    question = await use_case.execute(
        CreateQuestionRequest(
            title=body.title,
            content=body.content,
            topic_ids=body.topic_ids,
            author=user,
        )
    )
    return ApiResponse(data=question, message="Question created successfully")


@router.get("/{question_id}")
async def get_question(
    question_id: UUID,
    request: Request,
    use_case: FromDishka[GetQuestionUseCase],
    jwt_service: FromDishka[JWTService],
) -> ApiResponse[QuestionDetail]:
    """Get a question with its answers.

    Authenticated callers also see their own votes.
    """
    question = await use_case.execute(
        GetQuestionRequest(
            question_id=question_id, viewer=optional_user(request, jwt_service)
        )
    )
    return ApiResponse(data=question, message="Question retrieved successfully")


@router.put("/{question_id}")
async def update_question(
    question_id: UUID,
    body: UpdateQuestionBody,
    use_case: FromDishka[UpdateQuestionUseCase],
    user: AuthenticatedUser = Depends(current_user),
) -> ApiResponse[QuestionItem]:
    """Edit a question. Only the author can edit."""
    question = await use_case.execute(
        UpdateQuestionRequest(
            question_id=question_id,
            editor=user,
            title=body.title,
            content=body.content,
            topic_ids=body.topic_ids,
        )
    )
    return ApiResponse(data=question, message="Question updated successfully")


@router.delete("/{question_id}")
async def delete_question(
    question_id: UUID,
    use_case: FromDishka[DeleteQuestionUseCase],
    user: AuthenticatedUser = Depends(current_user),
) -> ApiResponse[None]:
    """Delete a question with its answers and votes. Only the author can delete."""
    await use_case.execute(DeleteQuestionRequest(question_id=question_id, user=user))
    return ApiResponse(data=None, message="Question deleted successfully")


@router.get("/{question_id}/answers")
async def list_answers(
    question_id: UUID,
    request: Request,
    use_case: FromDishka[ListAnswersUseCase],
    jwt_service: FromDishka[JWTService],
    page: Optional[int] = None,
    limit: Optional[int] = None,
    sort: SortOrder = SortOrder.MOST_VOTED,
) -> ApiResponse[list[AnswerItem]]:
    """List the answers to a question, most voted first by default."""
    result = await use_case.execute(
        ListAnswersRequest(
            question_id=question_id,
            page=page,
            limit=limit,
            sort=sort,
            viewer=optional_user(request, jwt_service),
        )
    )
    return ApiResponse(
        data=result.answers,
        message="Answers retrieved successfully",
        pagination=result.pagination,
    )


@router.post("/{question_id}/answers", status_code=status.HTTP_201_CREATED)
async def create_answer(
    question_id: UUID,
    body: CreateAnswerBody,
    use_case: FromDishka[CreateAnswerUseCase],
    user: AuthenticatedUser = Depends(current_user),
) -> ApiResponse[AnswerItem]:
    """Answer a question. Requires authentication."""
    answer = await use_case.execute(
        CreateAnswerRequest(question_id=question_id, content=body.content, author=user)
    )
    return ApiResponse(data=answer, message="Answer created successfully")
