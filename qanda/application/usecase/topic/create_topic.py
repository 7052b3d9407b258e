"""Create topic use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from qanda.application.usecase.common import TopicItem
from qanda.domain.service import TopicService


class CreateTopicRequest(BaseModel):
    """Create topic request.

    Lengths are checked again after normalization.
    """

    name: str = Field(min_length=1)
    slug: Optional[str] = None
    description: Optional[str] = Field(default=None, max_length=200)


class CreateTopicUseCase:
    """Use case for creating a topic."""

    def __init__(self, topic_service: TopicService) -> None:
        """Initialize create topic use case.

        Args:
            topic_service: Topic domain service
        """
        self.topic_service = topic_service

    async def execute(self, request: CreateTopicRequest) -> TopicItem:
        """Execute create topic flow.

        Raises:
            ValidationError: If the name or slug is invalid after normalization
            ConflictError: If the name or slug is already taken
        """
        with logfire.span("create_topic.execute", name=request.name):
            topic = await self.topic_service.create_topic(
                name=request.name,
                slug=request.slug,
                description=request.description,
            )
            return TopicItem.from_topic(topic, question_count=0)
