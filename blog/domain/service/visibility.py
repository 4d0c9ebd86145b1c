"""Visibility policy for comments.

Pure functions deciding, per comment and per viewer, whether a comment is
shown and whether its moderation status is revealed. Thread assembly applies
them node by node, so a hidden parent never hides its visible replies.
"""

from typing import Callable, Optional

from blog.domain.model import Comment
from blog.domain.value import ModerationStatus, UserId, Viewer, ViewerRole

VisibilityPredicate = Callable[[Comment, ViewerRole, Optional[UserId]], bool]

_PRIVILEGED_ROLES = frozenset({ViewerRole.POST_AUTHOR, ViewerRole.ADMIN})


def resolve_viewer_role(viewer: Viewer, post_author_id: UserId) -> ViewerRole:
    """Resolve a viewer's role relative to one post.

    Admin takes precedence over post author.
    """
    if not viewer.is_authenticated:
        return ViewerRole.ANONYMOUS
    if viewer.is_admin:
        return ViewerRole.ADMIN
    if viewer.user_id == post_author_id:
        return ViewerRole.POST_AUTHOR
    return ViewerRole.MEMBER


def is_visible(
    comment: Comment, viewer_role: ViewerRole, viewer_id: UserId | None = None
) -> bool:
    """Decide whether a comment appears for a viewer.

    - APPROVED: everyone
    - HIDDEN: post author and admins only, not even the comment's author
    - PENDING: post author, admins and the comment's own author
    """
    if viewer_role in _PRIVILEGED_ROLES:
        return True
    if comment.moderation_status == ModerationStatus.APPROVED:
        return True
    if comment.moderation_status == ModerationStatus.PENDING:
        return viewer_id is not None and viewer_id == comment.author_id
    return False


def should_expose_moderation_status(viewer_role: ViewerRole) -> bool:
    """Only the post author and admins see moderation metadata."""
    return viewer_role in _PRIVILEGED_ROLES
