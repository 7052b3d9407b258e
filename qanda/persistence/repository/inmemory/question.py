"""In-memory question repository for testing."""

from typing import List, Optional

from qanda.domain.model import Question
from qanda.domain.repository import QuestionRepository
from qanda.domain.value import QuestionId, SortOrder, TargetKind, TopicSlug

from .store import InMemoryStore


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _filtered(self, topic: Optional[TopicSlug]) -> list[Question]:
        questions = list(self._store.questions.values())
        if topic is None:
            return questions

        topic_ids = {t.id for t in self._store.topics.values() if t.slug == topic}
        return [q for q in questions if topic_ids.intersection(q.topic_ids)]

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self._store.questions.get(question_id)

    async def exists(self, question_id: QuestionId) -> bool:
        """Check whether a question exists."""
        return question_id in self._store.questions

    async def find_page(
        self,
        sort: SortOrder = SortOrder.RECENT,
        topic: Optional[TopicSlug] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Question]:
        """Find one page of questions."""
        ordered = self._store.ordered(self._filtered(topic), TargetKind.QUESTION, sort)
        return ordered[offset : offset + limit]

    async def count(self, topic: Optional[TopicSlug] = None) -> int:
        """Count questions matching the filter."""
        return len(self._filtered(topic))

    async def save(self, question: Question) -> Question:
        """Save a question (create or update)."""
        self._store.questions[question.id] = question
        return question

    async def delete(self, question_id: QuestionId) -> None:
        """Delete a question with its answers (topic links live on the question)."""
        self._store.questions.pop(question_id, None)
        for answer_id in [
            a.id for a in self._store.answers.values() if a.question_id == question_id
        ]:
            del self._store.answers[answer_id]
