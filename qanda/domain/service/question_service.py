"""Question domain service."""

from typing import Optional, Sequence
from uuid import uuid4

import logfire

from qanda.domain.error import NotAuthorizedError, NotFoundError
from qanda.domain.model import Question
from qanda.domain.model.common import utcnow
from qanda.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    VoteRepository,
)
from qanda.domain.value import QuestionId, TargetKind, TopicId, UserId

from .base import Service
from .topic_service import TopicService


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        vote_repository: VoteRepository,
        topic_service: TopicService,
    ) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository
            vote_repository: Vote repository
            topic_service: Topic domain service
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.vote_repository = vote_repository
        self.topic_service = topic_service

    async def get_question_by_id(self, question_id: QuestionId) -> Question | None:
        """Get a question by ID.

        Args:
            question_id: Question ID

        Returns:
            Question if found, None otherwise
        """
        with logfire.span(
            "question_service.get_question_by_id", question_id=str(question_id)
        ):
            question = await self.question_repository.find_by_id(question_id)
            if not question:
                logfire.warn("Question not found", question_id=str(question_id))
            return question

    async def require_question(self, question_id: QuestionId) -> Question:
        """Get a question by ID or fail.

        Raises:
            NotFoundError: If the question does not exist
        """
        question = await self.get_question_by_id(question_id)
        if not question:
            raise NotFoundError("Question", str(question_id))
        return question

    async def question_exists(self, question_id: QuestionId) -> bool:
        """Check whether a question exists."""
        return await self.question_repository.exists(question_id)

    async def create_question(
        self,
        author_id: UserId,
        title: str,
        content: str,
        topic_ids: Sequence[TopicId] = (),
    ) -> Question:
        """Create a question linked to existing topics.

        The question and its topic links are written together.

        Args:
            author_id: Authenticated author
            title: Question title
            content: Question body
            topic_ids: Topics to link; duplicates are collapsed

        Returns:
            Created question

        Raises:
            ValidationError: If a topic does not exist
        """
        unique_topic_ids = list(dict.fromkeys(topic_ids))

        with logfire.span(
            "question_service.create_question",
            author_id=str(author_id),
            topic_count=len(unique_topic_ids),
        ):
            await self.topic_service.validate_topics_exist(unique_topic_ids)

            now = utcnow()
            question = Question(
                id=QuestionId(uuid4()),
                title=title,
                content=content,
                author_id=author_id,
                topic_ids=unique_topic_ids,
                created_at=now,
                updated_at=now,
            )

            saved = await self.question_repository.save(question)
            logfire.info("Question created", question_id=str(saved.id))
            return saved

    async def update_question(
        self,
        question_id: QuestionId,
        editor_id: UserId,
        title: Optional[str] = None,
        content: Optional[str] = None,
        topic_ids: Optional[Sequence[TopicId]] = None,
    ) -> Question:
        """Partially update a question.

        Omitted fields stay unchanged. A topic list, even an empty one,
        replaces the current associations.

        Args:
            question_id: Question to edit
            editor_id: Authenticated caller
            title: New title
            content: New content
            topic_ids: New topic associations

        Returns:
            Updated question

        Raises:
            NotFoundError: If the question does not exist
            NotAuthorizedError: If the caller is not the author
            ValidationError: If a topic does not exist
        """
        with logfire.span(
            "question_service.update_question",
            question_id=str(question_id),
            editor_id=str(editor_id),
        ):
            question = await self.require_question(question_id)

            if question.author_id != editor_id:
                logfire.warn(
                    "Question edit by non-author",
                    question_id=str(question_id),
                    editor_id=str(editor_id),
                )
                raise NotAuthorizedError(
                    "You can only edit your own questions",
                    resource="question",
                    resource_id=str(question_id),
                    user_id=str(editor_id),
                )

            updates: dict = {"updated_at": utcnow()}
            if title is not None:
                updates["title"] = title
            if content is not None:
                updates["content"] = content
            if topic_ids is not None:
                unique_topic_ids = list(dict.fromkeys(topic_ids))
                await self.topic_service.validate_topics_exist(unique_topic_ids)
                updates["topic_ids"] = unique_topic_ids

            # Re-validate through the model, model_copy would skip field checks
            updated = Question.model_validate({**question.model_dump(), **updates})

            saved = await self.question_repository.save(updated)
            logfire.info(
                "Question updated",
                question_id=str(question_id),
                fields=sorted(updates),
            )
            return saved

    async def delete_question(self, question_id: QuestionId, user_id: UserId) -> None:
        """Delete a question and everything hanging off it.

        Removes votes on the question and on its answers, then the answers
        and topic links together with the question. All of it runs in the
        caller's transaction.

        Raises:
            NotFoundError: If the question does not exist
            NotAuthorizedError: If the caller is not the author
        """
        with logfire.span(
            "question_service.delete_question",
            question_id=str(question_id),
            user_id=str(user_id),
        ):
            question = await self.require_question(question_id)

            if question.author_id != user_id:
                logfire.warn(
                    "Question delete by non-author",
                    question_id=str(question_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError(
                    "You can only delete your own questions",
                    resource="question",
                    resource_id=str(question_id),
                    user_id=str(user_id),
                )

            answer_ids = await self.answer_repository.find_ids_by_question(question_id)
            answer_votes = await self.vote_repository.delete_by_targets(
                TargetKind.ANSWER, answer_ids
            )
            question_votes = await self.vote_repository.delete_by_targets(
                TargetKind.QUESTION, [question_id]
            )
            await self.question_repository.delete(question_id)

            logfire.info(
                "Question deleted",
                question_id=str(question_id),
                answers=len(answer_ids),
                votes=answer_votes + question_votes,
            )
