"""Unit tests for AnswerService."""

from uuid import uuid4

import pytest

from qanda.domain.error import NotAuthorizedError, NotFoundError
from qanda.domain.repository import AnswerRepository, QuestionRepository, VoteRepository
from qanda.domain.service import AnswerService, VoteService
from qanda.domain.value import (
    AnswerId,
    QuestionId,
    UserId,
    VoteDirection,
    VoteTarget,
)
from tests.conftest import make_answer, make_question
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestAnswerService:
    """Tests for answer lifecycle."""

    @pytest.mark.asyncio
    async def test_create_on_missing_question_raises_not_found(self, unit_env):
        answer_service = await unit_env.get(AnswerService)

        with pytest.raises(NotFoundError, match="Question not found"):
            await answer_service.create_answer(
                QuestionId(uuid4()), UserId(uuid4()), "An answer that goes nowhere."
            )

    @pytest.mark.asyncio
    async def test_create_answer(self, unit_env):
        # Arrange
        question_repo = await unit_env.get(QuestionRepository)
        answer_service = await unit_env.get(AnswerService)
        question = await question_repo.save(make_question())
        author_id = UserId(uuid4())

        # Act
        answer = await answer_service.create_answer(
            question.id, author_id, "Mark the test with pytest.mark.asyncio."
        )

        # Assert
        assert answer.question_id == question.id
        assert answer.author_id == author_id

    @pytest.mark.asyncio
    async def test_update_by_non_author_is_forbidden(self, unit_env):
        # Arrange
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        answer_service = await unit_env.get(AnswerService)
        question = await question_repo.save(make_question())
        answer = await answer_repo.save(make_answer(question.id))

        # Act & Assert
        with pytest.raises(NotAuthorizedError, match="only edit your own answers"):
            await answer_service.update_answer(
                answer.id, UserId(uuid4()), "Hijacked content here."
            )

    @pytest.mark.asyncio
    async def test_update_missing_answer_raises_not_found(self, unit_env):
        answer_service = await unit_env.get(AnswerService)

        with pytest.raises(NotFoundError, match="Answer not found"):
            await answer_service.update_answer(
                AnswerId(uuid4()), UserId(uuid4()), "Content for nothing."
            )

    @pytest.mark.asyncio
    async def test_update_by_author(self, unit_env):
        # Arrange
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        answer_service = await unit_env.get(AnswerService)
        question = await question_repo.save(make_question())
        answer = await answer_repo.save(make_answer(question.id))

        # Act
        updated = await answer_service.update_answer(
            answer.id, answer.author_id, "A clearer explanation."
        )

        # Assert
        assert updated.content == "A clearer explanation."
        assert updated.updated_at > answer.updated_at

    @pytest.mark.asyncio
    async def test_delete_removes_votes(self, unit_env):
        # Arrange
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        vote_repo = await unit_env.get(VoteRepository)
        vote_service = await unit_env.get(VoteService)
        answer_service = await unit_env.get(AnswerService)
        question = await question_repo.save(make_question())
        answer = await answer_repo.save(make_answer(question.id))
        target = VoteTarget.answer(answer.id)
        await vote_service.cast_vote(UserId(uuid4()), target, VoteDirection.UPVOTE)

        # Act
        await answer_service.delete_answer(answer.id, answer.author_id)

        # Assert
        assert await answer_repo.find_by_id(answer.id) is None
        assert await vote_repo.find_by_target(target) == []
        assert await question_repo.exists(question.id)
