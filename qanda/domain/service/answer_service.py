"""Answer domain service."""

from uuid import uuid4

import logfire

from qanda.domain.error import NotAuthorizedError, NotFoundError
from qanda.domain.model import Answer
from qanda.domain.model.common import utcnow
from qanda.domain.repository import AnswerRepository, VoteRepository
from qanda.domain.value import AnswerId, QuestionId, UserId, VoteTarget

from .base import Service
from .question_service import QuestionService


class AnswerService(Service):
    """Domain service for answer operations."""

    def __init__(
        self,
        answer_repository: AnswerRepository,
        vote_repository: VoteRepository,
        question_service: QuestionService,
    ) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
            vote_repository: Vote repository
            question_service: Question domain service
        """
        self.answer_repository = answer_repository
        self.vote_repository = vote_repository
        self.question_service = question_service

    async def get_answer_by_id(self, answer_id: AnswerId) -> Answer | None:
        """Get an answer by ID.

        Args:
            answer_id: Answer ID

        Returns:
            Answer if found, None otherwise
        """
        with logfire.span("answer_service.get_answer_by_id", answer_id=str(answer_id)):
            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer:
                logfire.warn("Answer not found", answer_id=str(answer_id))
            return answer

    async def require_answer(self, answer_id: AnswerId) -> Answer:
        """Get an answer by ID or fail.

        Raises:
            NotFoundError: If the answer does not exist
        """
        answer = await self.get_answer_by_id(answer_id)
        if not answer:
            raise NotFoundError("Answer", str(answer_id))
        return answer

    async def answer_exists(self, answer_id: AnswerId) -> bool:
        """Check whether an answer exists."""
        return await self.answer_repository.exists(answer_id)

    async def create_answer(
        self, question_id: QuestionId, author_id: UserId, content: str
    ) -> Answer:
        """Answer a question.

        Raises:
            NotFoundError: If the question does not exist
        """
        with logfire.span(
            "answer_service.create_answer",
            question_id=str(question_id),
            author_id=str(author_id),
        ):
            if not await self.question_service.question_exists(question_id):
                logfire.warn("Answer on non-existent question", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))

            now = utcnow()
            answer = Answer(
                id=AnswerId(uuid4()),
                question_id=question_id,
                content=content,
                author_id=author_id,
                created_at=now,
                updated_at=now,
            )
            saved = await self.answer_repository.save(answer)
            logfire.info("Answer created", answer_id=str(saved.id))
            return saved

    async def update_answer(
        self, answer_id: AnswerId, editor_id: UserId, content: str
    ) -> Answer:
        """Edit the content of an answer.

        Raises:
            NotFoundError: If the answer does not exist
            NotAuthorizedError: If the caller is not the author
        """
        with logfire.span(
            "answer_service.update_answer",
            answer_id=str(answer_id),
            editor_id=str(editor_id),
        ):
            answer = await self.require_answer(answer_id)

            if answer.author_id != editor_id:
                logfire.warn(
                    "Answer edit by non-author",
                    answer_id=str(answer_id),
                    editor_id=str(editor_id),
                )
                raise NotAuthorizedError(
                    "You can only edit your own answers",
                    resource="answer",
                    resource_id=str(answer_id),
                    user_id=str(editor_id),
                )

            updated = Answer.model_validate(
                {**answer.model_dump(), "content": content, "updated_at": utcnow()}
            )
            saved = await self.answer_repository.save(updated)
            logfire.info("Answer updated", answer_id=str(answer_id))
            return saved

    async def delete_answer(self, answer_id: AnswerId, user_id: UserId) -> None:
        """Delete an answer together with its votes.

        Raises:
            NotFoundError: If the answer does not exist
            NotAuthorizedError: If the caller is not the author
        """
        with logfire.span(
            "answer_service.delete_answer",
            answer_id=str(answer_id),
            user_id=str(user_id),
        ):
            answer = await self.require_answer(answer_id)

            if answer.author_id != user_id:
                logfire.warn(
                    "Answer delete by non-author",
                    answer_id=str(answer_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError(
                    "You can only delete your own answers",
                    resource="answer",
                    resource_id=str(answer_id),
                    user_id=str(user_id),
                )

            target = VoteTarget.answer(answer_id)
            removed = await self.vote_repository.delete_by_targets(
                target.kind, [target.id]
            )
            await self.answer_repository.delete(answer_id)
            logfire.info("Answer deleted", answer_id=str(answer_id), votes=removed)
