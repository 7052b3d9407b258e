"""Get topic use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from qanda.application.usecase.common import (
    CamelModel,
    PaginationInfo,
    QuestionItem,
    TopicItem,
)
from qanda.domain.error import NotFoundError
from qanda.domain.service import FeedService, TopicService
from qanda.domain.value import AuthenticatedUser, SortOrder


class GetTopicRequest(BaseModel):
    """Get topic request."""

    slug: str
    page: Optional[int] = None
    limit: Optional[int] = None
    sort: SortOrder = SortOrder.RECENT
    viewer: Optional[AuthenticatedUser] = None


class TopicWithQuestions(CamelModel):
    """Topic with one page of its questions."""

    topic: TopicItem
    questions: list[QuestionItem]


class GetTopicResponse(BaseModel):
    """Get topic response."""

    data: TopicWithQuestions
    pagination: PaginationInfo


class GetTopicUseCase:
    """Use case for browsing the questions of one topic."""

    def __init__(self, topic_service: TopicService, feed_service: FeedService) -> None:
        """Initialize get topic use case.

        Args:
            topic_service: Topic domain service
            feed_service: Feed domain service
        """
        self.topic_service = topic_service
        self.feed_service = feed_service

    async def execute(self, request: GetTopicRequest) -> GetTopicResponse:
        """Execute get topic flow.

        Args:
            request: Get topic request

        Returns:
            Topic with its question count and one page of its questions

        Raises:
            ValidationError: If page or limit is out of range
            NotFoundError: If no topic has this slug
        """
        with logfire.span("get_topic.execute", slug=request.slug):
            page = self.feed_service.page_request(request.page, request.limit)

            topic = await self.topic_service.get_topic_by_slug(request.slug)
            if not topic:
                raise NotFoundError("Topic", request.slug)

            question_count = await self.topic_service.count_questions(topic.id)
            result = await self.feed_service.list_questions(
                page,
                sort=request.sort,
                topic=topic.slug.root,
                viewer_id=request.viewer.user_id if request.viewer else None,
            )

            return GetTopicResponse(
                data=TopicWithQuestions(
                    topic=TopicItem.from_topic(topic, question_count),
                    questions=[QuestionItem.from_feed_item(i) for i in result.items],
                ),
                pagination=PaginationInfo.from_page_info(result.page_info),
            )
