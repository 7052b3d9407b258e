"""Delete question use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from qanda.domain.service import QuestionService
from qanda.domain.value import AuthenticatedUser, QuestionId


class DeleteQuestionRequest(BaseModel):
    """Delete question request."""

    question_id: UUID
    user: AuthenticatedUser


class DeleteQuestionUseCase:
    """Use case for deleting a question with its answers and votes."""

    def __init__(self, question_service: QuestionService) -> None:
        self.question_service = question_service

    async def execute(self, request: DeleteQuestionRequest) -> None:
        """Execute delete question flow.

        Raises:
            NotFoundError: If the question does not exist
            NotAuthorizedError: If the caller is not the author
        """
        with logfire.span(
            "delete_question.execute", question_id=str(request.question_id)
        ):
            await self.question_service.delete_question(
                QuestionId(request.question_id), user_id=request.user.user_id
            )
