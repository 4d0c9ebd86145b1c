"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from blog.domain.model.user import User
from blog.domain.value import UserId


class UserRepository(ABC):
    """Read access to the user collaborator.

    Deactivated users are returned like any other; callers decide how to
    treat them.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        """Find several users in one query.

        Args:
            user_ids: User IDs to load (duplicates allowed)

        Returns:
            Mapping of user ID to user for the IDs that exist
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        pass
