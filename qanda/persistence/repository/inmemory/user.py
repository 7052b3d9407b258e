"""In-memory user repository for testing."""

from typing import List, Optional, Sequence

from qanda.domain.model import User
from qanda.domain.repository import UserRepository
from qanda.domain.value import UserId

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._store.users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users."""
        return [self._store.users[uid] for uid in user_ids if uid in self._store.users]

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        self._store.users[user.id] = user
        return user
