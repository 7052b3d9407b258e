"""List questions use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from qanda.application.usecase.common import PaginationInfo, QuestionItem
from qanda.domain.service import FeedService
from qanda.domain.value import AuthenticatedUser, SortOrder


class ListQuestionsRequest(BaseModel):
    """List questions request.

    Omitted page and limit fall back to the configured defaults.
    """

    page: Optional[int] = None
    limit: Optional[int] = None
    sort: SortOrder = SortOrder.RECENT
    topic: Optional[str] = None
    viewer: Optional[AuthenticatedUser] = None


class ListQuestionsResponse(BaseModel):
    """List questions response."""

    questions: list[QuestionItem]
    pagination: PaginationInfo


class ListQuestionsUseCase:
    """Use case for browsing the question feed."""

    def __init__(self, feed_service: FeedService) -> None:
        """Initialize list questions use case.

        Args:
            feed_service: Feed domain service
        """
        self.feed_service = feed_service

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        Args:
            request: List questions request with filters and pagination

        Returns:
            One page of questions and its pagination metadata

        Raises:
            ValidationError: If page or limit is out of range
        """
        with logfire.span(
            "list_questions.execute",
            page=request.page,
            limit=request.limit,
            sort=request.sort.value,
            topic=request.topic,
        ):
            page = self.feed_service.page_request(request.page, request.limit)
            result = await self.feed_service.list_questions(
                page,
                sort=request.sort,
                topic=request.topic,
                viewer_id=request.viewer.user_id if request.viewer else None,
            )

            return ListQuestionsResponse(
                questions=[QuestionItem.from_feed_item(i) for i in result.items],
                pagination=PaginationInfo.from_page_info(result.page_info),
            )
