"""Create answer use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from qanda.application.usecase.common import AnswerItem
from qanda.domain.model.question import CONTENT_MAX_LENGTH, CONTENT_MIN_LENGTH
from qanda.domain.service import AnswerService, FeedService, UserService
from qanda.domain.value import AuthenticatedUser, QuestionId


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    question_id: UUID
    content: str = Field(min_length=CONTENT_MIN_LENGTH, max_length=CONTENT_MAX_LENGTH)
    author: AuthenticatedUser


class CreateAnswerUseCase:
    """Use case for answering a question."""

    def __init__(
        self,
        answer_service: AnswerService,
        feed_service: FeedService,
        user_service: UserService,
    ) -> None:
        """Initialize create answer use case.

        Args:
            answer_service: Answer domain service
            feed_service: Feed domain service
            user_service: User domain service
        """
        self.answer_service = answer_service
        self.feed_service = feed_service
        self.user_service = user_service

    async def execute(self, request: CreateAnswerRequest) -> AnswerItem:
        """Execute create answer flow.

        Args:
            request: Create answer request

        Returns:
            Created answer with its author and zero tallies

        Raises:
            NotFoundError: If the question does not exist
        """
        with logfire.span(
            "create_answer.execute",
            question_id=str(request.question_id),
            author_id=str(request.author.user_id),
        ):
            answer = await self.answer_service.create_answer(
                QuestionId(request.question_id),
                author_id=request.author.user_id,
                content=request.content,
            )
            await self.user_service.register_author(request.author)

            item = await self.feed_service.answer_item(
                answer, viewer_id=request.author.user_id
            )
            return AnswerItem.from_feed_item(item)
