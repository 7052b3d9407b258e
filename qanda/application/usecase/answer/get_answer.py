"""Get answer use case."""

from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel

from qanda.application.usecase.common import AnswerItem
from qanda.domain.service import AnswerService, FeedService
from qanda.domain.value import AnswerId, AuthenticatedUser


class GetAnswerRequest(BaseModel):
    """Get answer request."""

    answer_id: UUID
    viewer: Optional[AuthenticatedUser] = None


class GetAnswerUseCase:
    """Use case for viewing a single answer."""

    def __init__(self, answer_service: AnswerService, feed_service: FeedService) -> None:
        self.answer_service = answer_service
        self.feed_service = feed_service

    async def execute(self, request: GetAnswerRequest) -> AnswerItem:
        """Execute get answer flow.

        Raises:
            NotFoundError: If the answer does not exist
        """
        with logfire.span("get_answer.execute", answer_id=str(request.answer_id)):
            answer = await self.answer_service.require_answer(AnswerId(request.answer_id))
            item = await self.feed_service.answer_item(
                answer, viewer_id=request.viewer.user_id if request.viewer else None
            )
            return AnswerItem.from_feed_item(item)
