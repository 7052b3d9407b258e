"""PostgreSQL implementation of Question repository."""

from collections import defaultdict
from typing import List, Optional, Sequence
from uuid import UUID

import logfire
from sqlalchemy import delete, desc, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from qanda.domain.model import Question
from qanda.domain.repository import QuestionRepository
from qanda.domain.value import QuestionId, SortOrder, TargetKind, TopicSlug
from qanda.persistence.mappers import question_to_dict, row_to_question
from qanda.persistence.tables import (
    answers_table,
    question_topics_table,
    questions_table,
    topics_table,
)
from qanda.persistence.tally import net_score, vote_tally


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_topic_ids_for_questions(
        self, question_ids: Sequence[UUID]
    ) -> dict[UUID, list[UUID]]:
        """Fetch topic IDs for multiple questions in a single query.

        Args:
            question_ids: List of question IDs

        Returns:
            Dict mapping question_id -> list of topic IDs
        """
        if not question_ids:
            return {}

        stmt = select(
            question_topics_table.c.question_id, question_topics_table.c.topic_id
        ).where(question_topics_table.c.question_id.in_(question_ids))
        result = await self.session.execute(stmt)

        topic_map: dict[UUID, list[UUID]] = defaultdict(list)
        for row in result.fetchall():
            topic_map[row.question_id].append(row.topic_id)
        return topic_map

    def _filter_by_topic(self, stmt, topic: Optional[TopicSlug]):
        if not topic:
            return stmt
        return (
            stmt.join(
                question_topics_table,
                questions_table.c.id == question_topics_table.c.question_id,
            )
            .join(topics_table, question_topics_table.c.topic_id == topics_table.c.id)
            .where(topics_table.c.slug == topic.root)
        )

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        with logfire.span(
            "question_repository.find_by_id", question_id=str(question_id)
        ):
            stmt = select(questions_table).where(questions_table.c.id == question_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                return None

            topic_map = await self._fetch_topic_ids_for_questions([question_id])
            return row_to_question(row._asdict(), topic_map.get(question_id, []))

    async def exists(self, question_id: QuestionId) -> bool:
        """Check whether a question exists."""
        stmt = select(questions_table.c.id).where(questions_table.c.id == question_id)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def find_page(
        self,
        sort: SortOrder = SortOrder.RECENT,
        topic: Optional[TopicSlug] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Question]:
        """Find one page of questions."""
        with logfire.span(
            "question_repository.find_page",
            sort=sort.value,
            topic=topic.root if topic else None,
            limit=limit,
            offset=offset,
        ):
            stmt = self._filter_by_topic(
                select(questions_table).select_from(questions_table), topic
            )

            if sort == SortOrder.MOST_VOTED:
                tally = vote_tally(TargetKind.QUESTION)
                stmt = stmt.outerjoin(
                    tally, tally.c.target_id == questions_table.c.id
                ).order_by(
                    desc(net_score(tally)),
                    desc(questions_table.c.created_at),
                    desc(questions_table.c.id),
                )
            else:
                stmt = stmt.order_by(
                    desc(questions_table.c.created_at), desc(questions_table.c.id)
                )

            stmt = stmt.limit(limit).offset(offset)

            result = await self.session.execute(stmt)
            rows = result.fetchall()

            if not rows:
                logfire.info("No questions found")
                return []

            topic_map = await self._fetch_topic_ids_for_questions([r.id for r in rows])
            questions = [
                row_to_question(row._asdict(), topic_map.get(row.id, []))
                for row in rows
            ]

            logfire.info("Found questions", count=len(questions))
            return questions

    async def count(self, topic: Optional[TopicSlug] = None) -> int:
        """Count questions matching the same filter as find_page."""
        stmt = self._filter_by_topic(
            select(func.count()).select_from(questions_table), topic
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, question: Question) -> Question:
        """Save a question (create or update) and replace its topic links."""
        with logfire.span(
            "question_repository.save",
            question_id=str(question.id),
            topic_count=len(question.topic_ids),
        ):
            question_dict = question_to_dict(question)

            if await self.exists(question.id):
                logfire.info("Updating existing question", question_id=str(question.id))
                await self.session.execute(
                    questions_table.update()
                    .where(questions_table.c.id == question.id)
                    .values(**question_dict)
                )
                await self.session.execute(
                    delete(question_topics_table).where(
                        question_topics_table.c.question_id == question.id
                    )
                )
            else:
                logfire.info("Inserting new question", question_id=str(question.id))
                await self.session.execute(
                    insert(questions_table).values(**question_dict)
                )

            if question.topic_ids:
                await self.session.execute(
                    insert(question_topics_table),
                    [
                        {"question_id": question.id, "topic_id": topic_id}
                        for topic_id in question.topic_ids
                    ],
                )

            await self.session.flush()
            return question

    async def delete(self, question_id: QuestionId) -> None:
        """Delete a question with its answers and topic links."""
        await self.session.execute(
            delete(question_topics_table).where(
                question_topics_table.c.question_id == question_id
            )
        )
        await self.session.execute(
            delete(answers_table).where(answers_table.c.question_id == question_id)
        )
        await self.session.execute(
            delete(questions_table).where(questions_table.c.id == question_id)
        )
        await self.session.flush()
