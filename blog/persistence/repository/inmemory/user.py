"""In-memory user repository for testing."""

from typing import Optional, Sequence

from blog.domain.model.user import User
from blog.domain.repository.user import UserRepository
from blog.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        return {uid: self._users[uid] for uid in user_ids if uid in self._users}

    async def save(self, user: User) -> User:
        self._users[user.id] = user
        return user
