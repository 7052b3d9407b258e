"""Delete answer use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from qanda.domain.service import AnswerService
from qanda.domain.value import AnswerId, AuthenticatedUser


class DeleteAnswerRequest(BaseModel):
    """Delete answer request."""

    answer_id: UUID
    user: AuthenticatedUser


class DeleteAnswerUseCase:
    """Use case for deleting an answer with its votes."""

    def __init__(self, answer_service: AnswerService) -> None:
        self.answer_service = answer_service

    async def execute(self, request: DeleteAnswerRequest) -> None:
        """Execute delete answer flow.

        Raises:
            NotFoundError: If the answer does not exist
            NotAuthorizedError: If the caller is not the author
        """
        with logfire.span("delete_answer.execute", answer_id=str(request.answer_id)):
            await self.answer_service.delete_answer(
                AnswerId(request.answer_id), user_id=request.user.user_id
            )
