"""Domain model entities for the blog comment subsystem."""

from blog.domain.model.comment import Comment
from blog.domain.model.like import CommentLike
from blog.domain.model.notification import Notification
from blog.domain.model.post import Post
from blog.domain.model.report import CommentReport
from blog.domain.model.stats import CommenterStats
from blog.domain.model.subscription import CommentSubscription
from blog.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Comment",
    "CommentLike",
    "CommentReport",
    "CommenterStats",
    "CommentSubscription",
    "Notification",
]
