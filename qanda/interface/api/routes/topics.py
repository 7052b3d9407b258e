"""Topic routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from pydantic import Field

from qanda.application.usecase.common import CamelModel, TopicItem
from qanda.application.usecase.topic import (
    CreateTopicRequest,
    CreateTopicUseCase,
    GetTopicRequest,
    GetTopicUseCase,
    ListTopicsRequest,
    ListTopicsUseCase,
    TopicWithQuestions,
)
from qanda.domain.service import JWTService
from qanda.domain.value import SortOrder
from qanda.interface.api.auth import optional_user
from qanda.interface.api.envelope import ApiResponse

router = APIRouter(prefix="/topics", tags=["topics"], route_class=DishkaRoute)


class CreateTopicBody(CamelModel):
    """API request for creating a topic."""

    name: str = Field(min_length=1, max_length=100)
    slug: Optional[str] = Field(default=None, max_length=100)
    description: Optional[str] = Field(default=None, max_length=200)


@router.get("")
async def list_topics(
    use_case: FromDishka[ListTopicsUseCase],
    search: Optional[str] = None,
    limit: Optional[int] = None,
) -> ApiResponse[list[TopicItem]]:
    """List topics with their question counts, most used first.

    Example:
        GET /topics?search=sci&limit=10
    """
    topics = await use_case.execute(ListTopicsRequest(search=search, limit=limit))
    return ApiResponse(data=topics, message="Topics retrieved successfully")


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_topic(
    body: CreateTopicBody,
    use_case: FromDishka[CreateTopicUseCase],
) -> ApiResponse[TopicItem]:
    """Create a topic. The slug is derived from the name when omitted."""
    topic = await use_case.execute(
        CreateTopicRequest(name=body.name, slug=body.slug, description=body.description)
    )
    return ApiResponse(data=topic, message="Topic created successfully")


@router.get("/{slug}")
async def get_topic(
    slug: str,
    request: Request,
    use_case: FromDishka[GetTopicUseCase],
    jwt_service: FromDishka[JWTService],
    page: Optional[int] = None,
    limit: Optional[int] = None,
    sort: SortOrder = SortOrder.RECENT,
) -> ApiResponse[TopicWithQuestions]:
    """Get a topic with one page of its questions."""
    result = await use_case.execute(
        GetTopicRequest(
            slug=slug,
            page=page,
            limit=limit,
            sort=sort,
            viewer=optional_user(request, jwt_service),
        )
    )
    return ApiResponse(
        data=result.data,
        message="Topic and questions retrieved successfully",
        pagination=result.pagination,
    )
