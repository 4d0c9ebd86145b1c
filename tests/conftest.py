"""Test configuration and helpers."""

from datetime import datetime, timedelta
from uuid import uuid4

from dishka import AsyncContainer

from blog.domain.model import Comment, Post, User
from blog.domain.repository import CommentRepository, PostRepository, UserRepository
from blog.domain.value import CommentId, ModerationStatus, PostId, UserId, UserRole, Viewer


async def add_user(
    env: AsyncContainer,
    username: str | None = None,
    role: UserRole = UserRole.USER,
    deactivated: bool = False,
) -> User:
    """Store a user in the environment's user repository."""
    user_repo = await env.get(UserRepository)
    user_id = UserId(uuid4())
    return await user_repo.save(
        User(
            id=user_id,
            username=username or f"user-{str(user_id)[:8]}",
            role=role,
            deleted_at=datetime.now() if deactivated else None,
        )
    )


async def add_post(
    env: AsyncContainer,
    author: User,
    title: str = "On threaded comments",
    published: bool = True,
    allow_comments: bool = True,
) -> Post:
    """Store a post by ``author`` in the environment's post repository."""
    post_repo = await env.get(PostRepository)
    post_id = PostId(uuid4())
    return await post_repo.save(
        Post(
            id=post_id,
            title=title,
            slug=f"post-{str(post_id)[:8]}",
            author_id=author.id,
            published=published,
            allow_comments=allow_comments,
        )
    )


async def add_comment(
    env: AsyncContainer,
    post: Post,
    author: User,
    text: str = "Nice post",
    parent: Comment | None = None,
    status: ModerationStatus = ModerationStatus.APPROVED,
    created_at: datetime | None = None,
) -> Comment:
    """Store a comment directly, bypassing stats and notifications.

    Useful for building thread fixtures with a given moderation status or
    timestamp.
    """
    comment_repo = await env.get(CommentRepository)
    created = created_at or datetime.now()
    return await comment_repo.save(
        Comment(
            id=CommentId(uuid4()),
            post_id=post.id,
            author_id=author.id,
            text=text,
            parent_id=parent.id if parent else None,
            depth=parent.depth + 1 if parent else 0,
            moderation_status=status,
            created_at=created,
            updated_at=created,
        )
    )


def viewer_for(user: User) -> Viewer:
    return Viewer(user_id=user.id, username=user.username, role=user.role)


def minutes_ago(minutes: int) -> datetime:
    return datetime.now() - timedelta(minutes=minutes)
