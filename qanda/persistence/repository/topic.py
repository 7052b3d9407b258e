"""PostgreSQL implementation of Topic repository."""

from collections import defaultdict
from typing import List, Optional, Sequence

import logfire
from sqlalchemy import desc, func, insert, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from qanda.domain.model import Topic
from qanda.domain.repository import TopicRepository
from qanda.domain.value import QuestionId, TopicId, TopicName, TopicSlug
from qanda.persistence.mappers import row_to_topic, topic_to_dict
from qanda.persistence.tables import question_topics_table, topics_table


class PostgresTopicRepository(TopicRepository):
    """PostgreSQL implementation of TopicRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_ids(self, topic_ids: Sequence[TopicId]) -> List[Topic]:
        """Find several topics in one query."""
        if not topic_ids:
            return []

        stmt = select(topics_table).where(topics_table.c.id.in_(topic_ids))
        result = await self.session.execute(stmt)
        return [row_to_topic(row._asdict()) for row in result.fetchall()]

    async def find_by_slug(self, slug: TopicSlug) -> Optional[Topic]:
        """Find a topic by its exact slug."""
        stmt = select(topics_table).where(topics_table.c.slug == slug.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_topic(row._asdict()) if row else None

    async def find_by_name_or_slug(
        self, name: TopicName, slug: TopicSlug
    ) -> Optional[Topic]:
        """Find a topic that already uses this name or this slug."""
        stmt = (
            select(topics_table)
            .where(
                or_(
                    topics_table.c.name == name.root,
                    topics_table.c.slug == slug.root,
                )
            )
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_topic(row._asdict()) if row else None

    async def find_all_with_counts(
        self, search: Optional[str] = None, limit: int = 50
    ) -> List[tuple[Topic, int]]:
        """List topics with question counts, most used first."""
        with logfire.span(
            "topic_repository.find_all_with_counts", search=search, limit=limit
        ):
            question_count = func.count(question_topics_table.c.question_id).label(
                "question_count"
            )
            stmt = (
                select(topics_table, question_count)
                .select_from(
                    topics_table.outerjoin(
                        question_topics_table,
                        question_topics_table.c.topic_id == topics_table.c.id,
                    )
                )
                .group_by(topics_table.c.id)
                .order_by(desc(question_count), desc(topics_table.c.name))
                .limit(limit)
            )

            if search:
                stmt = stmt.where(topics_table.c.name.icontains(search, autoescape=True))

            result = await self.session.execute(stmt)
            topics = []
            for row in result.fetchall():
                data = row._asdict()
                count = data.pop("question_count")
                topics.append((row_to_topic(data), int(count)))

            logfire.info("Topics found", count=len(topics))
            return topics

    async def count_questions(self, topic_id: TopicId) -> int:
        """Count questions linked to a topic."""
        stmt = (
            select(func.count())
            .select_from(question_topics_table)
            .where(question_topics_table.c.topic_id == topic_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_names_for_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[QuestionId, List[str]]:
        """Fetch topic names for several questions in one query."""
        if not question_ids:
            return {}

        stmt = (
            select(question_topics_table.c.question_id, topics_table.c.name)
            .select_from(question_topics_table)
            .join(topics_table, question_topics_table.c.topic_id == topics_table.c.id)
            .where(question_topics_table.c.question_id.in_(question_ids))
            .order_by(topics_table.c.name)
        )
        result = await self.session.execute(stmt)

        names: dict[QuestionId, List[str]] = defaultdict(list)
        for row in result.fetchall():
            names[row.question_id].append(row.name)
        return names

    async def save(self, topic: Topic) -> Topic:
        """Create a topic.

        Runs in a savepoint so a duplicate rejection leaves the request
        transaction usable.
        """
        with logfire.span("topic_repository.save", slug=topic.slug.root):
            async with self.session.begin_nested():
                await self.session.execute(
                    insert(topics_table).values(**topic_to_dict(topic))
                )
            return topic
