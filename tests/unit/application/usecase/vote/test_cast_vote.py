"""Unit tests for CastVoteUseCase."""

from uuid import uuid4

import pytest

from qanda.application.usecase.vote.cast_vote import CastVoteRequest, CastVoteUseCase
from qanda.domain.error import NotFoundError
from qanda.domain.repository import QuestionRepository, UserRepository
from qanda.domain.value import TargetKind, VoteDirection
from tests.conftest import make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCastVoteUseCase:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_upvote_then_repeat_toggles_off(self, unit_env):
        """Casting the same vote twice returns to zero with no held vote."""
        # Arrange
        question_repo = await unit_env.get(QuestionRepository)
        use_case = await unit_env.get(CastVoteUseCase)
        question = await question_repo.save(make_question())
        voter = make_user("Voter")
        request = CastVoteRequest(
            item_id=question.id,
            item_type=TargetKind.QUESTION,
            vote_type=VoteDirection.UPVOTE,
            voter=voter,
        )

        # Act
        first = await use_case.execute(request)
        second = await use_case.execute(request)

        # Assert
        assert first.vote is not None
        assert first.vote.vote_type == VoteDirection.UPVOTE
        assert first.vote.item_id == str(question.id)
        assert (first.vote_counts.upvotes, first.vote_counts.net) == (1, 1)
        assert first.user_vote_type == VoteDirection.UPVOTE

        assert second.vote is None
        assert (second.vote_counts.upvotes, second.vote_counts.downvotes) == (0, 0)
        assert second.user_vote_type is None

    @pytest.mark.asyncio
    async def test_registers_voter_name(self, unit_env):
        # Arrange
        question_repo = await unit_env.get(QuestionRepository)
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(CastVoteUseCase)
        question = await question_repo.save(make_question())
        voter = make_user("Marie")

        # Act
        await use_case.execute(
            CastVoteRequest(
                item_id=question.id,
                item_type=TargetKind.QUESTION,
                vote_type=VoteDirection.DOWNVOTE,
                voter=voter,
            )
        )

        # Assert
        user = await user_repo.find_by_id(voter.user_id)
        assert user is not None
        assert user.name == "Marie"

    @pytest.mark.asyncio
    async def test_missing_answer_registers_nobody(self, unit_env):
        """A rejected vote leaves no trace."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(CastVoteUseCase)
        voter = make_user("Marie")

        # Act & Assert
        with pytest.raises(NotFoundError, match="Answer not found"):
            await use_case.execute(
                CastVoteRequest(
                    item_id=uuid4(),
                    item_type=TargetKind.ANSWER,
                    vote_type=VoteDirection.UPVOTE,
                    voter=voter,
                )
            )
        assert await user_repo.find_by_id(voter.user_id) is None
