"""Update answer use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from qanda.application.usecase.common import AnswerItem
from qanda.domain.model.question import CONTENT_MAX_LENGTH, CONTENT_MIN_LENGTH
from qanda.domain.service import AnswerService, FeedService
from qanda.domain.value import AnswerId, AuthenticatedUser


class UpdateAnswerRequest(BaseModel):
    """Update answer request."""

    answer_id: UUID
    editor: AuthenticatedUser
    content: str = Field(min_length=CONTENT_MIN_LENGTH, max_length=CONTENT_MAX_LENGTH)


class UpdateAnswerUseCase:
    """Use case for editing an answer."""

    def __init__(self, answer_service: AnswerService, feed_service: FeedService) -> None:
        """Initialize update answer use case.

        Args:
            answer_service: Answer domain service
            feed_service: Feed domain service
        """
        self.answer_service = answer_service
        self.feed_service = feed_service

    async def execute(self, request: UpdateAnswerRequest) -> AnswerItem:
        """Execute update answer flow.

        Raises:
            NotFoundError: If the answer does not exist
            NotAuthorizedError: If the editor is not the author
        """
        with logfire.span(
            "update_answer.execute",
            answer_id=str(request.answer_id),
            editor_id=str(request.editor.user_id),
        ):
            answer = await self.answer_service.update_answer(
                AnswerId(request.answer_id),
                editor_id=request.editor.user_id,
                content=request.content,
            )
            item = await self.feed_service.answer_item(
                answer, viewer_id=request.editor.user_id
            )
            return AnswerItem.from_feed_item(item)
