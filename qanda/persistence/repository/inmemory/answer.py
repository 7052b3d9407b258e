"""In-memory answer repository for testing."""

from typing import List, Optional, Sequence

from qanda.domain.model import Answer
from qanda.domain.repository import AnswerRepository
from qanda.domain.value import AnswerId, QuestionId, SortOrder, TargetKind

from .store import InMemoryStore


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _for_question(self, question_id: QuestionId) -> list[Answer]:
        return [a for a in self._store.answers.values() if a.question_id == question_id]

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        return self._store.answers.get(answer_id)

    async def exists(self, answer_id: AnswerId) -> bool:
        """Check whether an answer exists."""
        return answer_id in self._store.answers

    async def find_by_question(
        self,
        question_id: QuestionId,
        sort: SortOrder = SortOrder.MOST_VOTED,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Answer]:
        """Find answers to a question."""
        ordered = self._store.ordered(
            self._for_question(question_id), TargetKind.ANSWER, sort
        )
        end = offset + limit if limit is not None else None
        return ordered[offset:end]

    async def find_ids_by_question(self, question_id: QuestionId) -> List[AnswerId]:
        """List the IDs of every answer to a question."""
        return [a.id for a in self._for_question(question_id)]

    async def count_by_question(self, question_id: QuestionId) -> int:
        """Count answers to a question."""
        return len(self._for_question(question_id))

    async def count_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[QuestionId, int]:
        """Count answers for several questions."""
        wanted = set(question_ids)
        counts: dict[QuestionId, int] = {}
        for answer in self._store.answers.values():
            if answer.question_id in wanted:
                counts[answer.question_id] = counts.get(answer.question_id, 0) + 1
        return counts

    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update)."""
        self._store.answers[answer.id] = answer
        return answer

    async def delete(self, answer_id: AnswerId) -> None:
        """Delete an answer."""
        self._store.answers.pop(answer_id, None)
