"""Feed query domain service.

Builds paginated, sorted listings of questions and answers and annotates
each entry with its author, topic names, live vote tallies and, for an
authenticated viewer, the viewer's own vote.
"""

from dataclasses import dataclass, field
from typing import Generic, Optional, Sequence, TypeVar

import logfire

from qanda.config import FeedSettings
from qanda.domain.error import NotFoundError, ValidationError
from qanda.domain.model import Answer, Question
from qanda.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    TopicRepository,
)
from qanda.domain.value import (
    Author,
    PageInfo,
    PageRequest,
    QuestionId,
    SortOrder,
    TargetKind,
    TopicSlug,
    UserId,
    VoteCounts,
    VoteDirection,
)

from .aggregation_service import AggregationService
from .base import Service
from .question_service import QuestionService
from .user_service import UserService
from .vote_service import VoteService

T = TypeVar("T")


@dataclass
class QuestionFeedItem:
    """A question as shown in feeds and on its detail page."""

    question: Question
    author: Author
    topics: list[str] = field(default_factory=list)
    counts: VoteCounts = field(default_factory=VoteCounts.zero)
    answer_count: int = 0
    viewer_vote: Optional[VoteDirection] = None


@dataclass
class AnswerFeedItem:
    """An answer as shown under its question."""

    answer: Answer
    author: Author
    counts: VoteCounts = field(default_factory=VoteCounts.zero)
    viewer_vote: Optional[VoteDirection] = None


@dataclass
class FeedPage(Generic[T]):
    """One page of a listing plus its pagination metadata."""

    items: list[T]
    page_info: PageInfo


class FeedService(Service):
    """Domain service for question and answer listings."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        topic_repository: TopicRepository,
        question_service: QuestionService,
        aggregation_service: AggregationService,
        vote_service: VoteService,
        user_service: UserService,
        feed_settings: FeedSettings,
    ) -> None:
        """Initialize feed service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository
            topic_repository: Topic repository
            question_service: Question domain service
            aggregation_service: Vote aggregation service
            vote_service: Vote domain service
            user_service: User domain service
            feed_settings: Page size defaults and bounds
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.topic_repository = topic_repository
        self.question_service = question_service
        self.aggregation_service = aggregation_service
        self.vote_service = vote_service
        self.user_service = user_service
        self.feed_settings = feed_settings

    def page_request(
        self, page: Optional[int] = None, limit: Optional[int] = None
    ) -> PageRequest:
        """Build a page window, applying defaults to omitted values.

        Supplied values are checked before defaults apply, so an explicit
        out-of-range value is rejected rather than silently replaced.

        Raises:
            ValidationError: If page < 1 or limit is outside [1, max page size]
        """
        max_limit = self.feed_settings.max_page_size
        errors = []
        if page is not None and page < 1:
            errors.append({"field": "page", "message": "page must be at least 1"})
        if limit is not None and not 1 <= limit <= max_limit:
            errors.append(
                {"field": "limit", "message": f"limit must be between 1 and {max_limit}"}
            )
        if errors:
            raise ValidationError("Invalid pagination parameters", details=errors)

        return PageRequest(
            page=page if page is not None else 1,
            limit=limit if limit is not None else self.feed_settings.default_page_size,
        )

    async def list_questions(
        self,
        page: PageRequest,
        sort: SortOrder = SortOrder.RECENT,
        topic: Optional[str] = None,
        viewer_id: Optional[UserId] = None,
    ) -> FeedPage[QuestionFeedItem]:
        """List one page of questions.

        Args:
            page: Page window
            sort: RECENT or MOST_VOTED
            topic: Only questions linked to the topic with this exact slug
            viewer_id: Authenticated viewer, to include their own votes

        Returns:
            Enriched questions and pagination metadata; a page past the end
            is empty, not an error
        """
        with logfire.span(
            "feed_service.list_questions",
            page=page.page,
            limit=page.limit,
            sort=sort.value,
            topic=topic,
        ):
            topic_slug: Optional[TopicSlug] = None
            if topic is not None:
                try:
                    topic_slug = TopicSlug(topic)
                except ValueError:
                    # No topic can have a malformed slug
                    logfire.info("Malformed topic filter", topic=topic)
                    return FeedPage(items=[], page_info=PageInfo.of(page, 0))

            total = await self.question_repository.count(topic=topic_slug)
            questions = await self.question_repository.find_page(
                sort=sort, topic=topic_slug, limit=page.limit, offset=page.offset
            )

            items = await self.enrich_questions(questions, viewer_id)
            logfire.info("Questions listed", count=len(items), total=total)
            return FeedPage(items=items, page_info=PageInfo.of(page, total))

    async def list_answers(
        self,
        question_id: QuestionId,
        page: PageRequest,
        sort: SortOrder = SortOrder.MOST_VOTED,
        viewer_id: Optional[UserId] = None,
    ) -> FeedPage[AnswerFeedItem]:
        """List one page of answers to a question.

        Raises:
            NotFoundError: If the question does not exist
        """
        with logfire.span(
            "feed_service.list_answers",
            question_id=str(question_id),
            page=page.page,
            limit=page.limit,
            sort=sort.value,
        ):
            if not await self.question_service.question_exists(question_id):
                raise NotFoundError("Question", str(question_id))

            total = await self.answer_repository.count_by_question(question_id)
            answers = await self.answer_repository.find_by_question(
                question_id, sort=sort, limit=page.limit, offset=page.offset
            )

            items = await self.enrich_answers(answers, viewer_id)
            logfire.info("Answers listed", count=len(items), total=total)
            return FeedPage(items=items, page_info=PageInfo.of(page, total))

    async def question_detail(
        self, question_id: QuestionId, viewer_id: Optional[UserId] = None
    ) -> tuple[QuestionFeedItem, list[AnswerFeedItem]]:
        """A question with all of its answers, most voted first.

        Raises:
            NotFoundError: If the question does not exist
        """
        with logfire.span("feed_service.question_detail", question_id=str(question_id)):
            question = await self.question_service.require_question(question_id)
            item = await self.question_item(question, viewer_id)

            answers = await self.answer_repository.find_by_question(
                question_id, sort=SortOrder.MOST_VOTED
            )
            answer_items = await self.enrich_answers(answers, viewer_id)
            return item, answer_items

    async def question_item(
        self, question: Question, viewer_id: Optional[UserId] = None
    ) -> QuestionFeedItem:
        """Enrich a single question."""
        items = await self.enrich_questions([question], viewer_id)
        return items[0]

    async def answer_item(
        self, answer: Answer, viewer_id: Optional[UserId] = None
    ) -> AnswerFeedItem:
        """Enrich a single answer."""
        items = await self.enrich_answers([answer], viewer_id)
        return items[0]

    async def enrich_questions(
        self, questions: Sequence[Question], viewer_id: Optional[UserId] = None
    ) -> list[QuestionFeedItem]:
        """Attach authors, topics, tallies and viewer votes to questions.

        Everything is fetched in batches. Missing data never drops a
        question: it falls back to the placeholder author, no topics and
        zero counts.
        """
        if not questions:
            return []

        ids = [q.id for q in questions]
        authors = await self.user_service.resolve_authors([q.author_id for q in questions])
        topics = await self.topic_repository.find_names_for_questions(ids)
        counts = await self.aggregation_service.counts_for(TargetKind.QUESTION, ids)
        answer_counts = await self.answer_repository.count_by_questions(ids)

        viewer_votes = {}
        if viewer_id is not None:
            viewer_votes = await self.vote_service.directions_for(
                viewer_id, TargetKind.QUESTION, ids
            )

        return [
            QuestionFeedItem(
                question=q,
                author=authors.get(q.author_id) or Author.placeholder(q.author_id),
                topics=topics.get(q.id, []),
                counts=counts.get(q.id, VoteCounts.zero()),
                answer_count=answer_counts.get(q.id, 0),
                viewer_vote=viewer_votes.get(q.id),
            )
            for q in questions
        ]

    async def enrich_answers(
        self, answers: Sequence[Answer], viewer_id: Optional[UserId] = None
    ) -> list[AnswerFeedItem]:
        """Attach authors, tallies and viewer votes to answers."""
        if not answers:
            return []

        ids = [a.id for a in answers]
        authors = await self.user_service.resolve_authors([a.author_id for a in answers])
        counts = await self.aggregation_service.counts_for(TargetKind.ANSWER, ids)

        viewer_votes = {}
        if viewer_id is not None:
            viewer_votes = await self.vote_service.directions_for(
                viewer_id, TargetKind.ANSWER, ids
            )

        return [
            AnswerFeedItem(
                answer=a,
                author=authors.get(a.author_id) or Author.placeholder(a.author_id),
                counts=counts.get(a.id, VoteCounts.zero()),
                viewer_vote=viewer_votes.get(a.id),
            )
            for a in answers
        ]
