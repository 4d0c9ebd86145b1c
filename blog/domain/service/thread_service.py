"""Comment thread assembly."""

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime

import logfire

from blog.config import CommentSettings
from blog.domain.model import Comment, Post, User
from blog.domain.repository import CommentRepository
from blog.domain.value import (
    CommentId,
    ModerationStatus,
    PostId,
    ThreadOrder,
    UserId,
    Viewer,
    ViewerRole,
)

from .base import Service
from .like_service import CommentLikeService
from .post_service import PostService
from .stats_service import CommenterStatsService
from .user_service import UserService
from .visibility import (
    VisibilityPredicate,
    is_visible,
    resolve_viewer_role,
    should_expose_moderation_status,
)


@dataclass
class CommentAuthor:
    """Public author info attached to a comment node."""

    id: UserId
    username: str


@dataclass
class CommentNode:
    """Node in an assembled comment thread.

    A placeholder node stands in for a comment the viewer may not see but
    whose replies they may; it carries no content or author.
    """

    id: CommentId
    post_id: PostId
    parent_id: CommentId | None
    depth: int
    content: str | None
    author: CommentAuthor | None
    created_at: datetime
    updated_at: datetime
    like_count: int = 0
    liked_by_viewer: bool = False
    is_top_commenter: bool = False
    moderation_status: ModerationStatus | None = None
    placeholder: bool = False
    replies: list["CommentNode"] = field(default_factory=list)


@dataclass
class RecentComment:
    """Top-level comment with the post it was made on."""

    node: CommentNode
    post_id: PostId
    post_title: str
    post_slug: str


@dataclass
class RecentCommentsPage:
    items: list[RecentComment]
    total: int


class ThreadService(Service):
    """Builds the comment tree of a post as one viewer may see it.

    Loading is one query per tree level, then one batched query each for
    authors, like counts and top commenter badges.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_service: PostService,
        user_service: UserService,
        like_service: CommentLikeService,
        stats_service: CommenterStatsService,
        comment_settings: CommentSettings,
        visibility: VisibilityPredicate = is_visible,
    ) -> None:
        """Initialize thread service.

        Args:
            comment_repository: Comment repository
            post_service: Post domain service
            user_service: User domain service
            like_service: Like domain service (batched like counts)
            stats_service: Commenter stats service (badges)
            comment_settings: Comment configuration (depth, ordering)
            visibility: Per-comment visibility predicate
        """
        self.comment_repository = comment_repository
        self.post_service = post_service
        self.user_service = user_service
        self.like_service = like_service
        self.stats_service = stats_service
        self.max_depth = comment_settings.max_depth
        self.order = ThreadOrder(comment_settings.thread_order)
        self.visibility = visibility

    async def _load_tree(
        self, post_id: PostId
    ) -> tuple[list[Comment], dict[CommentId, list[Comment]], list[Comment]]:
        """Load top-level comments and their descendants level by level.

        Returns:
            Top-level comments, children grouped by parent, and every loaded
            comment
        """
        top_level = await self.comment_repository.find_top_level(
            post_id, newest_first=self.order == ThreadOrder.NEWEST
        )
        children_by_parent: dict[CommentId, list[Comment]] = defaultdict(list)
        loaded = list(top_level)

        level = top_level
        depth = 0
        while level and depth < self.max_depth:
            level = await self.comment_repository.find_children_of(
                [c.id for c in level]
            )
            for child in level:
                if child.parent_id is not None:
                    children_by_parent[child.parent_id].append(child)
            loaded.extend(level)
            depth += 1

        return top_level, children_by_parent, loaded

    def _visible(
        self,
        comment: Comment,
        role: ViewerRole,
        viewer: Viewer,
        authors: dict[UserId, User],
    ) -> bool:
        author = authors.get(comment.author_id)
        if author is None or author.is_deactivated:
            return False
        return self.visibility(comment, role, viewer.user_id)

    def _to_node(
        self,
        comment: Comment,
        author: User,
        expose_status: bool,
        like_counts: dict[CommentId, int],
        liked: set[CommentId],
        is_top_commenter: bool,
    ) -> CommentNode:
        return CommentNode(
            id=comment.id,
            post_id=comment.post_id,
            parent_id=comment.parent_id,
            depth=comment.depth,
            content=comment.text,
            author=CommentAuthor(id=author.id, username=author.username),
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            like_count=like_counts.get(comment.id, 0),
            liked_by_viewer=comment.id in liked,
            is_top_commenter=is_top_commenter,
            moderation_status=comment.moderation_status if expose_status else None,
        )

    async def assemble_thread(self, post_id: PostId, viewer: Viewer) -> list[CommentNode]:
        """Assemble the comment tree of a post for a viewer.

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span(
            "thread_service.assemble_thread",
            post_id=str(post_id),
            viewer_id=str(viewer.user_id) if viewer.user_id else None,
        ):
            post = await self.post_service.get_post(post_id)
            role = resolve_viewer_role(viewer, post.author_id)
            expose_status = should_expose_moderation_status(role)

            top_level, children_by_parent, loaded = await self._load_tree(post_id)
            if not loaded:
                return []

            authors = await self.user_service.get_users(c.author_id for c in loaded)
            visible = {
                c.id: c for c in loaded if self._visible(c, role, viewer, authors)
            }
            visible_ids = list(visible)

            like_counts = await self.like_service.like_counts(visible_ids)
            liked = await self.like_service.liked_by(viewer.user_id, visible_ids)
            badges = await self.stats_service.top_commenter_map(
                post.author_id, (c.author_id for c in visible.values())
            )

            def build(comment: Comment) -> CommentNode | None:
                replies = [build(child) for child in children_by_parent[comment.id]]
                replies = [r for r in replies if r is not None]

                if comment.id in visible:
                    node = self._to_node(
                        comment,
                        authors[comment.author_id],
                        expose_status,
                        like_counts,
                        liked,
                        badges.get(comment.author_id, False),
                    )
                    node.replies = replies
                    return node

                if not replies:
                    return None

                return CommentNode(
                    id=comment.id,
                    post_id=comment.post_id,
                    parent_id=comment.parent_id,
                    depth=comment.depth,
                    content=None,
                    author=None,
                    created_at=comment.created_at,
                    updated_at=comment.updated_at,
                    placeholder=True,
                    replies=replies,
                )

            nodes = [build(comment) for comment in top_level]
            thread = [node for node in nodes if node is not None]

            logfire.info(
                "Thread assembled",
                post_id=str(post_id),
                loaded=len(loaded),
                visible=len(visible),
                viewer_role=role.value,
            )
            return thread

    async def recent_comments(
        self, viewer: Viewer, limit: int, offset: int = 0
    ) -> RecentCommentsPage:
        """Recent top-level comments across published posts.

        Visibility is decided per comment against that comment's post, so the
        page may hold fewer than ``limit`` items.
        """
        with logfire.span(
            "thread_service.recent_comments", limit=limit, offset=offset
        ):
            comments, total = await self.comment_repository.find_recent_top_level(
                limit=limit, offset=offset
            )
            if not comments:
                return RecentCommentsPage(items=[], total=total)

            posts: dict[PostId, Post] = await self.post_service.get_posts(
                c.post_id for c in comments
            )
            authors = await self.user_service.get_users(c.author_id for c in comments)

            shown: list[tuple[Comment, Post, bool]] = []
            for comment in comments:
                post = posts.get(comment.post_id)
                if post is None:
                    continue
                role = resolve_viewer_role(viewer, post.author_id)
                if self._visible(comment, role, viewer, authors):
                    shown.append(
                        (comment, post, should_expose_moderation_status(role))
                    )

            ids = [comment.id for comment, _, _ in shown]
            like_counts = await self.like_service.like_counts(ids)
            liked = await self.like_service.liked_by(viewer.user_id, ids)
            badges = await self.stats_service.top_commenter_flags(
                (post.author_id, comment.author_id) for comment, post, _ in shown
            )

            items = [
                RecentComment(
                    node=self._to_node(
                        comment,
                        authors[comment.author_id],
                        expose_status,
                        like_counts,
                        liked,
                        badges.get((post.author_id, comment.author_id), False),
                    ),
                    post_id=post.id,
                    post_title=post.title,
                    post_slug=post.slug,
                )
                for comment, post, expose_status in shown
            ]
            return RecentCommentsPage(items=items, total=total)
