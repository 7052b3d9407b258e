"""Create question use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from qanda.application.usecase.common import QuestionItem
from qanda.domain.model.question import (
    CONTENT_MAX_LENGTH,
    CONTENT_MIN_LENGTH,
    TITLE_MAX_LENGTH,
    TITLE_MIN_LENGTH,
)
from qanda.domain.service import FeedService, QuestionService, UserService
from qanda.domain.value import AuthenticatedUser, TopicId


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    title: str = Field(min_length=TITLE_MIN_LENGTH, max_length=TITLE_MAX_LENGTH)
    content: str = Field(min_length=CONTENT_MIN_LENGTH, max_length=CONTENT_MAX_LENGTH)
    topic_ids: list[UUID] = Field(default_factory=list)
    author: AuthenticatedUser


class CreateQuestionUseCase:
    """Use case for asking a new question."""

    def __init__(
        self,
        question_service: QuestionService,
        feed_service: FeedService,
        user_service: UserService,
    ) -> None:
        """Initialize create question use case.

        Args:
            question_service: Question domain service
            feed_service: Feed domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.feed_service = feed_service
        self.user_service = user_service

    async def execute(self, request: CreateQuestionRequest) -> QuestionItem:
        """Execute create question flow.

        The returned question is read back after the write, so it carries
        its author, topic names and zero tallies.

        Args:
            request: Create question request

        Returns:
            Created question

        Raises:
            ValidationError: If a topic does not exist
        """
        with logfire.span(
            "create_question.execute", author_id=str(request.author.user_id)
        ):
            question = await self.question_service.create_question(
                author_id=request.author.user_id,
                title=request.title,
                content=request.content,
                topic_ids=[TopicId(tid) for tid in request.topic_ids],
            )
            await self.user_service.register_author(request.author)

            item = await self.feed_service.question_item(
                question, viewer_id=request.author.user_id
            )
            return QuestionItem.from_feed_item(item)
