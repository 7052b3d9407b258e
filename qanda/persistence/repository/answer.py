"""PostgreSQL implementation of Answer repository."""

from typing import List, Optional, Sequence

import logfire
from sqlalchemy import delete, desc, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from qanda.domain.model import Answer
from qanda.domain.repository import AnswerRepository
from qanda.domain.value import AnswerId, QuestionId, SortOrder, TargetKind
from qanda.persistence.mappers import answer_to_dict, row_to_answer
from qanda.persistence.tables import answers_table
from qanda.persistence.tally import net_score, vote_tally


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_answer(row._asdict()) if row else None

    async def exists(self, answer_id: AnswerId) -> bool:
        """Check whether an answer exists."""
        stmt = select(answers_table.c.id).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def find_by_question(
        self,
        question_id: QuestionId,
        sort: SortOrder = SortOrder.MOST_VOTED,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Answer]:
        """Find answers to a question."""
        with logfire.span(
            "answer_repository.find_by_question",
            question_id=str(question_id),
            sort=sort.value,
            limit=limit,
            offset=offset,
        ):
            stmt = select(answers_table).where(
                answers_table.c.question_id == question_id
            )

            if sort == SortOrder.MOST_VOTED:
                tally = vote_tally(TargetKind.ANSWER)
                stmt = stmt.outerjoin(
                    tally, tally.c.target_id == answers_table.c.id
                ).order_by(
                    desc(net_score(tally)),
                    desc(answers_table.c.created_at),
                    desc(answers_table.c.id),
                )
            else:
                stmt = stmt.order_by(
                    desc(answers_table.c.created_at), desc(answers_table.c.id)
                )

            if limit is not None:
                stmt = stmt.limit(limit)
            if offset:
                stmt = stmt.offset(offset)

            result = await self.session.execute(stmt)
            return [row_to_answer(row._asdict()) for row in result.fetchall()]

    async def find_ids_by_question(self, question_id: QuestionId) -> List[AnswerId]:
        """List the IDs of every answer to a question."""
        stmt = select(answers_table.c.id).where(
            answers_table.c.question_id == question_id
        )
        result = await self.session.execute(stmt)
        return [AnswerId(row.id) for row in result.fetchall()]

    async def count_by_question(self, question_id: QuestionId) -> int:
        """Count answers to a question."""
        stmt = (
            select(func.count())
            .select_from(answers_table)
            .where(answers_table.c.question_id == question_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[QuestionId, int]:
        """Count answers for several questions in one query."""
        if not question_ids:
            return {}

        stmt = (
            select(answers_table.c.question_id, func.count().label("answer_count"))
            .where(answers_table.c.question_id.in_(question_ids))
            .group_by(answers_table.c.question_id)
        )
        result = await self.session.execute(stmt)
        return {row.question_id: row.answer_count for row in result.fetchall()}

    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update)."""
        answer_dict = answer_to_dict(answer)

        if await self.exists(answer.id):
            await self.session.execute(
                answers_table.update()
                .where(answers_table.c.id == answer.id)
                .values(**answer_dict)
            )
        else:
            await self.session.execute(insert(answers_table).values(**answer_dict))

        await self.session.flush()
        return answer

    async def delete(self, answer_id: AnswerId) -> None:
        """Delete an answer."""
        await self.session.execute(
            delete(answers_table).where(answers_table.c.id == answer_id)
        )
        await self.session.flush()
