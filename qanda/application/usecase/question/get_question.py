"""Get question use case."""

from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel

from qanda.application.usecase.common import AnswerItem, QuestionItem
from qanda.domain.service import FeedService
from qanda.domain.value import AuthenticatedUser, QuestionId


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: UUID
    viewer: Optional[AuthenticatedUser] = None


class QuestionDetail(QuestionItem):
    """Question with all of its answers."""

    answers: list[AnswerItem]


class GetQuestionUseCase:
    """Use case for viewing a question and its answers."""

    def __init__(self, feed_service: FeedService) -> None:
        """Initialize get question use case.

        Args:
            feed_service: Feed domain service
        """
        self.feed_service = feed_service

    async def execute(self, request: GetQuestionRequest) -> QuestionDetail:
        """Execute get question flow.

        Args:
            request: Get question request

        Returns:
            Question with tallies, answers most voted first, and the
            viewer's own votes when authenticated

        Raises:
            NotFoundError: If the question does not exist
        """
        with logfire.span("get_question.execute", question_id=str(request.question_id)):
            viewer_id = request.viewer.user_id if request.viewer else None
            item, answers = await self.feed_service.question_detail(
                QuestionId(request.question_id), viewer_id=viewer_id
            )

            question = QuestionItem.from_feed_item(item)
            return QuestionDetail(
                **question.model_dump(),
                answers=[AnswerItem.from_feed_item(a) for a in answers],
            )
