"""Unit tests for FeedService."""

from uuid import uuid4

import pytest

from qanda.domain.error import NotFoundError, ValidationError
from qanda.domain.model import User
from qanda.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    TopicRepository,
    UserRepository,
)
from qanda.domain.service import FeedService, VoteService
from qanda.domain.value import (
    PageRequest,
    QuestionId,
    SortOrder,
    UserId,
    VoteDirection,
    VoteTarget,
)
from tests.conftest import make_answer, make_question, make_topic
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestPageRequest:
    """Tests for page window defaults and bounds."""

    @pytest.mark.asyncio
    async def test_defaults(self, unit_env):
        feed_service = await unit_env.get(FeedService)

        page = feed_service.page_request()

        assert page == PageRequest(page=1, limit=20)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("page,limit", [(0, None), (-1, 10), (None, 0), (1, 51)])
    async def test_rejects_explicit_out_of_range_values(self, unit_env, page, limit):
        feed_service = await unit_env.get(FeedService)

        with pytest.raises(ValidationError, match="Invalid pagination parameters"):
            feed_service.page_request(page=page, limit=limit)

    @pytest.mark.asyncio
    async def test_accepts_max_page_size(self, unit_env):
        feed_service = await unit_env.get(FeedService)

        page = feed_service.page_request(page=3, limit=50)

        assert page.limit == 50
        assert page.offset == 100


class TestListQuestions:
    """Tests for the question feed."""

    @pytest.mark.asyncio
    async def test_pagination_metadata(self, unit_env):
        """25 questions at 10 per page span 3 pages; page 4 is empty."""
        # Arrange
        question_repo = await unit_env.get(QuestionRepository)
        feed_service = await unit_env.get(FeedService)
        for i in range(25):
            await question_repo.save(make_question(minutes=i))

        # Act
        third = await feed_service.list_questions(PageRequest(page=3, limit=10))
        fourth = await feed_service.list_questions(PageRequest(page=4, limit=10))

        # Assert
        assert len(third.items) == 5
        assert third.page_info.total == 25
        assert third.page_info.total_pages == 3
        assert fourth.items == []
        assert fourth.page_info.total == 25

    @pytest.mark.asyncio
    async def test_recent_is_newest_first(self, unit_env):
        # Arrange
        question_repo = await unit_env.get(QuestionRepository)
        feed_service = await unit_env.get(FeedService)
        old = await question_repo.save(make_question(minutes=1))
        new = await question_repo.save(make_question(minutes=2))

        # Act
        feed = await feed_service.list_questions(PageRequest(), sort=SortOrder.RECENT)

        # Assert
        assert [item.question.id for item in feed.items] == [new.id, old.id]

    @pytest.mark.asyncio
    async def test_most_voted_breaks_ties_by_recency(self, unit_env):
        """Equal net scores fall back to newest first."""
        # Arrange
        question_repo = await unit_env.get(QuestionRepository)
        vote_service = await unit_env.get(VoteService)
        feed_service = await unit_env.get(FeedService)
        top = await question_repo.save(make_question(minutes=0))
        tied_old = await question_repo.save(make_question(minutes=1))
        tied_new = await question_repo.save(make_question(minutes=2))
        bottom = await question_repo.save(make_question(minutes=3))

        for _ in range(2):
            await vote_service.cast_vote(
                UserId(uuid4()), VoteTarget.question(top.id), VoteDirection.UPVOTE
            )
        for q in (tied_old, tied_new):
            await vote_service.cast_vote(
                UserId(uuid4()), VoteTarget.question(q.id), VoteDirection.UPVOTE
            )
        await vote_service.cast_vote(
            UserId(uuid4()), VoteTarget.question(bottom.id), VoteDirection.DOWNVOTE
        )

        # Act
        feed = await feed_service.list_questions(
            PageRequest(), sort=SortOrder.MOST_VOTED
        )

        # Assert
        assert [item.question.id for item in feed.items] == [
            top.id,
            tied_new.id,
            tied_old.id,
            bottom.id,
        ]
        assert feed.items[0].counts.net == 2

    @pytest.mark.asyncio
    async def test_topic_filter_matches_exact_slug(self, unit_env):
        # Arrange
        topic_repo = await unit_env.get(TopicRepository)
        question_repo = await unit_env.get(QuestionRepository)
        feed_service = await unit_env.get(FeedService)
        physics = await topic_repo.save(make_topic("physics"))
        biology = await topic_repo.save(make_topic("biology"))
        in_physics = await question_repo.save(make_question(topic_ids=[physics.id]))
        await question_repo.save(make_question(topic_ids=[biology.id]))
        await question_repo.save(make_question())

        # Act
        feed = await feed_service.list_questions(PageRequest(), topic="physics")

        # Assert
        assert [item.question.id for item in feed.items] == [in_physics.id]
        assert feed.items[0].topics == ["physics"]
        assert feed.page_info.total == 1

    @pytest.mark.asyncio
    async def test_malformed_topic_filter_yields_empty_page(self, unit_env):
        # Arrange
        question_repo = await unit_env.get(QuestionRepository)
        feed_service = await unit_env.get(FeedService)
        await question_repo.save(make_question())

        # Act
        feed = await feed_service.list_questions(PageRequest(), topic="Not A Slug")

        # Assert
        assert feed.items == []
        assert feed.page_info.total == 0
        assert feed.page_info.total_pages == 0

    @pytest.mark.asyncio
    async def test_missing_data_falls_back_to_safe_defaults(self, unit_env):
        """Unknown author, no topics and no votes still render."""
        # Arrange
        question_repo = await unit_env.get(QuestionRepository)
        feed_service = await unit_env.get(FeedService)
        question = await question_repo.save(make_question())

        # Act
        feed = await feed_service.list_questions(PageRequest())

        # Assert
        item = feed.items[0]
        assert item.author.id == question.author_id
        assert item.author.name == "Unknown User"
        assert item.topics == []
        assert item.counts.upvotes == 0
        assert item.counts.downvotes == 0
        assert item.answer_count == 0
        assert item.viewer_vote is None

    @pytest.mark.asyncio
    async def test_known_author_and_viewer_vote(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        vote_service = await unit_env.get(VoteService)
        feed_service = await unit_env.get(FeedService)
        author = await user_repo.save(User(id=UserId(uuid4()), name="Ada"))
        question = await question_repo.save(make_question(author_id=author.id))
        await answer_repo.save(make_answer(question.id))
        viewer_id = UserId(uuid4())
        await vote_service.cast_vote(
            viewer_id, VoteTarget.question(question.id), VoteDirection.DOWNVOTE
        )

        # Act
        as_viewer = await feed_service.list_questions(PageRequest(), viewer_id=viewer_id)
        anonymous = await feed_service.list_questions(PageRequest())

        # Assert
        assert as_viewer.items[0].author.name == "Ada"
        assert as_viewer.items[0].answer_count == 1
        assert as_viewer.items[0].viewer_vote == VoteDirection.DOWNVOTE
        assert anonymous.items[0].viewer_vote is None


class TestListAnswers:
    """Tests for the answer listing."""

    @pytest.mark.asyncio
    async def test_missing_question_raises_not_found(self, unit_env):
        feed_service = await unit_env.get(FeedService)

        with pytest.raises(NotFoundError, match="Question not found"):
            await feed_service.list_answers(QuestionId(uuid4()), PageRequest())

    @pytest.mark.asyncio
    async def test_most_voted_by_default(self, unit_env):
        # Arrange
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        vote_service = await unit_env.get(VoteService)
        feed_service = await unit_env.get(FeedService)
        question = await question_repo.save(make_question())
        first = await answer_repo.save(make_answer(question.id, minutes=1))
        second = await answer_repo.save(make_answer(question.id, minutes=2))
        await vote_service.cast_vote(
            UserId(uuid4()), VoteTarget.answer(first.id), VoteDirection.UPVOTE
        )

        # Act
        feed = await feed_service.list_answers(question.id, PageRequest())

        # Assert
        assert [item.answer.id for item in feed.items] == [first.id, second.id]
        assert feed.page_info.total == 2

    @pytest.mark.asyncio
    async def test_question_detail_includes_answers(self, unit_env):
        # Arrange
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        feed_service = await unit_env.get(FeedService)
        question = await question_repo.save(make_question())
        answer = await answer_repo.save(make_answer(question.id))

        # Act
        item, answers = await feed_service.question_detail(question.id)

        # Assert
        assert item.question.id == question.id
        assert item.answer_count == 1
        assert [a.answer.id for a in answers] == [answer.id]
