"""User entity (collaborator view).

Accounts are owned by the auth collaborator. The comment subsystem only needs
the username, the account role and whether the account is deactivated.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import UserId, UserRole


class User(DomainModel):
    """User as seen by the comment subsystem."""

    id: UserId
    username: str = Field(min_length=1, max_length=50)
    role: UserRole = UserRole.USER
    created_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None

    @property
    def is_deactivated(self) -> bool:
        return self.deleted_at is not None
