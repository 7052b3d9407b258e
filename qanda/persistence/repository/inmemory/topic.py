"""In-memory topic repository for testing."""

from typing import List, Optional, Sequence

from sqlalchemy.exc import IntegrityError

from qanda.domain.model import Topic
from qanda.domain.repository import TopicRepository
from qanda.domain.value import QuestionId, TopicId, TopicName, TopicSlug

from .store import InMemoryStore


class InMemoryTopicRepository(TopicRepository):
    """In-memory implementation of TopicRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _question_count(self, topic_id: TopicId) -> int:
        return sum(
            1 for q in self._store.questions.values() if topic_id in q.topic_ids
        )

    async def find_by_ids(self, topic_ids: Sequence[TopicId]) -> List[Topic]:
        """Find several topics."""
        return [
            self._store.topics[tid] for tid in topic_ids if tid in self._store.topics
        ]

    async def find_by_slug(self, slug: TopicSlug) -> Optional[Topic]:
        """Find a topic by its exact slug."""
        for topic in self._store.topics.values():
            if topic.slug == slug:
                return topic
        return None

    async def find_by_name_or_slug(
        self, name: TopicName, slug: TopicSlug
    ) -> Optional[Topic]:
        """Find a topic that already uses this name or this slug."""
        for topic in self._store.topics.values():
            if topic.name == name or topic.slug == slug:
                return topic
        return None

    async def find_all_with_counts(
        self, search: Optional[str] = None, limit: int = 50
    ) -> List[tuple[Topic, int]]:
        """List topics with question counts, most used first."""
        topics = list(self._store.topics.values())
        if search:
            needle = search.lower()
            topics = [t for t in topics if needle in t.name.root.lower()]

        counted = [(t, self._question_count(t.id)) for t in topics]
        counted.sort(key=lambda pair: (pair[1], pair[0].name.root), reverse=True)
        return counted[:limit]

    async def count_questions(self, topic_id: TopicId) -> int:
        """Count questions linked to a topic."""
        return self._question_count(topic_id)

    async def find_names_for_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[QuestionId, List[str]]:
        """Fetch topic names for several questions."""
        names: dict[QuestionId, List[str]] = {}
        for qid in question_ids:
            question = self._store.questions.get(qid)
            if not question:
                continue
            found = sorted(
                self._store.topics[tid].name.root
                for tid in question.topic_ids
                if tid in self._store.topics
            )
            if found:
                names[qid] = found
        return names

    async def save(self, topic: Topic) -> Topic:
        """Create a topic.

        Raises:
            IntegrityError: If the name or slug is already taken
        """
        if await self.find_by_name_or_slug(topic.name, topic.slug):
            raise IntegrityError("Duplicate topic", None, Exception())

        self._store.topics[topic.id] = topic
        return topic
