"""Domain value types for the comment subsystem."""

from enum import Enum

from blog.domain.value.common import ValueObject
from blog.domain.value.identifiers import UserId


class UserRole(str, Enum):
    """Account role issued by the auth collaborator."""

    USER = "user"
    ADMIN = "admin"


class ModerationStatus(str, Enum):
    """Moderation state of a comment. New comments are approved."""

    PENDING = "pending"
    APPROVED = "approved"
    HIDDEN = "hidden"


class ModerationAction(str, Enum):
    """Action a post author can take on a comment."""

    APPROVE = "approve"
    HIDE = "hide"

    @property
    def resulting_status(self) -> ModerationStatus:
        if self is ModerationAction.HIDE:
            return ModerationStatus.HIDDEN
        return ModerationStatus.APPROVED


class ReportStatus(str, Enum):
    """Review state of a comment report."""

    PENDING = "pending"
    REVIEWED = "reviewed"
    REJECTED = "rejected"


class NotificationType(str, Enum):
    """Kinds of notifications a user can receive."""

    COMMENT_REPLY = "comment_reply"
    POST_COMMENT = "post_comment"
    POST_LIKE = "post_like"
    COMMENT_LIKE = "comment_like"
    NEW_FOLLOWER = "new_follower"
    POST_MENTION = "post_mention"
    THREAD_SUBSCRIPTION = "thread_subscription"


class ViewerRole(str, Enum):
    """Role of a viewer relative to one post."""

    ANONYMOUS = "anonymous"
    MEMBER = "member"
    POST_AUTHOR = "post_author"
    ADMIN = "admin"


class ThreadOrder(str, Enum):
    """Ordering of top-level comments in a thread."""

    NEWEST = "newest"
    OLDEST = "oldest"


class Viewer(ValueObject):
    """The requester as seen by the domain.

    An anonymous viewer has no user ID. The role is the account role from the
    token; the per-post role is resolved by the visibility policy.
    """

    user_id: UserId | None = None
    username: str | None = None
    role: UserRole = UserRole.USER

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    @property
    def is_admin(self) -> bool:
        return self.is_authenticated and self.role == UserRole.ADMIN

    @classmethod
    def anonymous(cls) -> "Viewer":
        return cls()
