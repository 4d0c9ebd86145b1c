"""Comment response items shared by the comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from blog.domain.model import Comment
from blog.domain.service import CommentNode


class CommentAuthorItem(BaseModel):
    """Public author of a comment."""

    id: str
    username: str


class CommentItem(BaseModel):
    """Comment node in a thread response.

    Placeholders keep the position of a comment the viewer may not see; they
    carry no content or author.
    """

    comment_id: str
    post_id: str
    parent_id: str | None
    depth: int
    content: str | None
    author: CommentAuthorItem | None
    created_at: datetime
    updated_at: datetime
    like_count: int
    has_liked: bool
    is_top_commenter: bool
    moderation_status: str | None = None
    placeholder: bool = False
    replies: list["CommentItem"] = []


class CommentDetail(BaseModel):
    """A single comment as returned after a mutation."""

    comment_id: str
    post_id: str
    author_id: str
    parent_id: str | None
    depth: int
    content: str
    moderation_status: str
    created_at: datetime
    updated_at: datetime


def comment_item_from_node(node: CommentNode) -> CommentItem:
    return CommentItem(
        comment_id=str(node.id),
        post_id=str(node.post_id),
        parent_id=str(node.parent_id) if node.parent_id else None,
        depth=node.depth,
        content=node.content,
        author=(
            CommentAuthorItem(id=str(node.author.id), username=node.author.username)
            if node.author
            else None
        ),
        created_at=node.created_at,
        updated_at=node.updated_at,
        like_count=node.like_count,
        has_liked=node.liked_by_viewer,
        is_top_commenter=node.is_top_commenter,
        moderation_status=(
            node.moderation_status.value if node.moderation_status else None
        ),
        placeholder=node.placeholder,
        replies=[comment_item_from_node(reply) for reply in node.replies],
    )


def comment_detail_from_model(comment: Comment) -> CommentDetail:
    return CommentDetail(
        comment_id=str(comment.id),
        post_id=str(comment.post_id),
        author_id=str(comment.author_id),
        parent_id=str(comment.parent_id) if comment.parent_id else None,
        depth=comment.depth,
        content=comment.text,
        moderation_status=comment.moderation_status.value,
        created_at=comment.created_at,
        updated_at=comment.updated_at,
    )
