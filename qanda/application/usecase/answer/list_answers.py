"""List answers use case."""

from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel

from qanda.application.usecase.common import AnswerItem, PaginationInfo
from qanda.domain.service import FeedService
from qanda.domain.value import AuthenticatedUser, QuestionId, SortOrder


class ListAnswersRequest(BaseModel):
    """List answers request."""

    question_id: UUID
    page: Optional[int] = None
    limit: Optional[int] = None
    sort: SortOrder = SortOrder.MOST_VOTED
    viewer: Optional[AuthenticatedUser] = None


class ListAnswersResponse(BaseModel):
    """List answers response."""

    answers: list[AnswerItem]
    pagination: PaginationInfo


class ListAnswersUseCase:
    """Use case for paging through the answers to a question."""

    def __init__(self, feed_service: FeedService) -> None:
        """Initialize list answers use case.

        Args:
            feed_service: Feed domain service
        """
        self.feed_service = feed_service

    async def execute(self, request: ListAnswersRequest) -> ListAnswersResponse:
        """Execute list answers flow.

        Args:
            request: List answers request

        Returns:
            One page of answers and its pagination metadata

        Raises:
            ValidationError: If page or limit is out of range
            NotFoundError: If the question does not exist
        """
        with logfire.span(
            "list_answers.execute",
            question_id=str(request.question_id),
            sort=request.sort.value,
        ):
            page = self.feed_service.page_request(request.page, request.limit)
            result = await self.feed_service.list_answers(
                QuestionId(request.question_id),
                page,
                sort=request.sort,
                viewer_id=request.viewer.user_id if request.viewer else None,
            )

            return ListAnswersResponse(
                answers=[AnswerItem.from_feed_item(i) for i in result.items],
                pagination=PaginationInfo.from_page_info(result.page_info),
            )
