"""List topics use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from qanda.application.usecase.common import TopicItem
from qanda.config import FeedSettings
from qanda.domain.service import TopicService


class ListTopicsRequest(BaseModel):
    """List topics request."""

    search: Optional[str] = None
    limit: Optional[int] = None


class ListTopicsUseCase:
    """Use case for listing topics with their question counts."""

    def __init__(self, topic_service: TopicService, feed_settings: FeedSettings) -> None:
        """Initialize list topics use case.

        Args:
            topic_service: Topic domain service
            feed_settings: Feed settings with the topic list limits
        """
        self.topic_service = topic_service
        self.feed_settings = feed_settings

    def _limit(self, requested: Optional[int]) -> int:
        # Missing or non-positive limits fall back to the default; large ones are capped
        if not requested or requested < 1:
            return self.feed_settings.default_topic_limit
        return min(requested, self.feed_settings.max_topic_limit)

    async def execute(self, request: ListTopicsRequest) -> list[TopicItem]:
        """Execute list topics flow.

        Args:
            request: List topics request

        Returns:
            Topics, most used first
        """
        limit = self._limit(request.limit)
        with logfire.span("list_topics.execute", search=request.search, limit=limit):
            topics = await self.topic_service.list_topics(
                search=request.search, limit=limit
            )
            return [TopicItem.from_topic(topic, count) for topic, count in topics]
