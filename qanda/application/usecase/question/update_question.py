"""Update question use case."""

from typing import Optional
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
from qanda.domain.service import FeedService, QuestionService
from qanda.domain.value import AuthenticatedUser, QuestionId, TopicId


class UpdateQuestionRequest(BaseModel):
    """Update question request. Omitted fields stay unchanged."""

    question_id: UUID
    editor: AuthenticatedUser
    title: Optional[str] = Field(
        default=None, min_length=TITLE_MIN_LENGTH, max_length=TITLE_MAX_LENGTH
    )
    content: Optional[str] = Field(
        default=None, min_length=CONTENT_MIN_LENGTH, max_length=CONTENT_MAX_LENGTH
    )
    topic_ids: Optional[list[UUID]] = None


class UpdateQuestionUseCase:
    """Use case for editing a question."""

    def __init__(
        self, question_service: QuestionService, feed_service: FeedService
    ) -> None:
        """Initialize update question use case.

        Args:
            question_service: Question domain service
            feed_service: Feed domain service
        """
        self.question_service = question_service
        self.feed_service = feed_service

    async def execute(self, request: UpdateQuestionRequest) -> QuestionItem:
        """Execute update question flow.

        Args:
            request: Update question request

        Returns:
            Updated question

        Raises:
            NotFoundError: If the question does not exist
            NotAuthorizedError: If the editor is not the author
            ValidationError: If a topic does not exist
        """
        with logfire.span(
            "update_question.execute",
            question_id=str(request.question_id),
            editor_id=str(request.editor.user_id),
        ):
            topic_ids = None
            if request.topic_ids is not None:
                topic_ids = [TopicId(tid) for tid in request.topic_ids]

            question = await self.question_service.update_question(
                QuestionId(request.question_id),
                editor_id=request.editor.user_id,
                title=request.title,
                content=request.content,
                topic_ids=topic_ids,
            )

            item = await self.feed_service.question_item(
                question, viewer_id=request.editor.user_id
            )
            return QuestionItem.from_feed_item(item)
