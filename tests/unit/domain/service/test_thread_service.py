"""Unit tests for ThreadService."""

from uuid import uuid4

import pytest

from blog.config import Settings
from blog.domain.error import NotFoundError
from blog.domain.service import (
    CommentLikeService,
    CommentService,
    CommenterStatsService,
    ThreadService,
)
from blog.domain.value import ModerationStatus, PostId, UserRole, Viewer
from tests.conftest import add_comment, add_post, add_user, minutes_ago, viewer_for
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestAssembleThread:
    """Tests for assemble_thread."""

    @pytest.mark.asyncio
    async def test_missing_post_raises_not_found(self, unit_env):
        thread_service = await unit_env.get(ThreadService)

        with pytest.raises(NotFoundError, match="Post not found"):
            await thread_service.assemble_thread(PostId(uuid4()), Viewer.anonymous())

    @pytest.mark.asyncio
    async def test_empty_thread(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        author = await add_user(unit_env)
        post = await add_post(unit_env, author)

        thread = await thread_service.assemble_thread(post.id, Viewer.anonymous())

        assert thread == []

    @pytest.mark.asyncio
    async def test_nests_replies_under_parents(self, unit_env):
        """Replies are attached to their parent, oldest first."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        author = await add_user(unit_env)
        reader = await add_user(unit_env)
        post = await add_post(unit_env, author)

        root = await add_comment(unit_env, post, reader, "root", created_at=minutes_ago(10))
        second = await add_comment(
            unit_env, post, author, "second", parent=root, created_at=minutes_ago(5)
        )
        first = await add_comment(
            unit_env, post, author, "first", parent=root, created_at=minutes_ago(8)
        )
        nested = await add_comment(unit_env, post, reader, "nested", parent=first)

        # Act
        thread = await thread_service.assemble_thread(post.id, Viewer.anonymous())

        # Assert
        assert [n.id for n in thread] == [root.id]
        assert [r.id for r in thread[0].replies] == [first.id, second.id]
        assert [r.id for r in thread[0].replies[0].replies] == [nested.id]
        assert thread[0].replies[0].replies[0].depth == 2
        assert thread[0].author.username == reader.username

    @pytest.mark.asyncio
    async def test_top_level_newest_first_by_default(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        author = await add_user(unit_env)
        post = await add_post(unit_env, author)

        older = await add_comment(unit_env, post, author, "older", created_at=minutes_ago(30))
        newer = await add_comment(unit_env, post, author, "newer", created_at=minutes_ago(1))

        thread = await thread_service.assemble_thread(post.id, Viewer.anonymous())

        assert [n.id for n in thread] == [newer.id, older.id]

    @pytest.mark.asyncio
    async def test_hidden_parent_becomes_placeholder_for_visible_replies(
        self, unit_env
    ):
        """A reader still sees approved replies under a hidden comment."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        author = await add_user(unit_env)
        reader = await add_user(unit_env)
        post = await add_post(unit_env, author)

        hidden = await add_comment(
            unit_env, post, reader, "rude", status=ModerationStatus.HIDDEN
        )
        reply = await add_comment(unit_env, post, author, "please be kind", parent=hidden)

        # Act
        thread = await thread_service.assemble_thread(post.id, viewer_for(reader))

        # Assert
        assert len(thread) == 1
        placeholder = thread[0]
        assert placeholder.placeholder is True
        assert placeholder.content is None
        assert placeholder.author is None
        assert [r.id for r in placeholder.replies] == [reply.id]
        assert placeholder.replies[0].content == "please be kind"

    @pytest.mark.asyncio
    async def test_hidden_leaf_is_dropped(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        author = await add_user(unit_env)
        reader = await add_user(unit_env)
        post = await add_post(unit_env, author)

        await add_comment(unit_env, post, reader, "spam", status=ModerationStatus.HIDDEN)

        thread = await thread_service.assemble_thread(post.id, Viewer.anonymous())

        assert thread == []

    @pytest.mark.asyncio
    async def test_post_author_sees_moderation_status(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        author = await add_user(unit_env)
        reader = await add_user(unit_env)
        post = await add_post(unit_env, author)
        await add_comment(unit_env, post, reader, "spam", status=ModerationStatus.HIDDEN)

        as_author = await thread_service.assemble_thread(post.id, viewer_for(author))
        as_reader = await thread_service.assemble_thread(post.id, viewer_for(reader))

        assert as_author[0].moderation_status == ModerationStatus.HIDDEN
        assert as_author[0].placeholder is False
        assert as_reader == []

    @pytest.mark.asyncio
    async def test_approved_comment_status_not_exposed_to_readers(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        author = await add_user(unit_env)
        post = await add_post(unit_env, author)
        await add_comment(unit_env, post, author)

        thread = await thread_service.assemble_thread(post.id, Viewer.anonymous())

        assert thread[0].moderation_status is None

    @pytest.mark.asyncio
    async def test_admin_sees_pending_comments(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        author = await add_user(unit_env)
        admin = await add_user(unit_env, role=UserRole.ADMIN)
        post = await add_post(unit_env, author)
        pending = await add_comment(
            unit_env, post, author, status=ModerationStatus.PENDING
        )

        thread = await thread_service.assemble_thread(post.id, viewer_for(admin))

        assert [n.id for n in thread] == [pending.id]
        assert thread[0].moderation_status == ModerationStatus.PENDING

    @pytest.mark.asyncio
    async def test_comments_by_deactivated_authors_are_not_shown(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        author = await add_user(unit_env)
        gone = await add_user(unit_env, deactivated=True)
        post = await add_post(unit_env, author)
        await add_comment(unit_env, post, gone)

        thread = await thread_service.assemble_thread(post.id, Viewer.anonymous())

        assert thread == []

    @pytest.mark.asyncio
    async def test_like_counts_and_viewer_likes(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        like_service = await unit_env.get(CommentLikeService)
        author = await add_user(unit_env)
        reader = await add_user(unit_env)
        fan = await add_user(unit_env)
        post = await add_post(unit_env, author)
        comment = await add_comment(unit_env, post, author)

        await like_service.like_comment(post.id, comment.id, reader.id)
        await like_service.like_comment(post.id, comment.id, fan.id)

        as_reader = await thread_service.assemble_thread(post.id, viewer_for(reader))
        as_anonymous = await thread_service.assemble_thread(
            post.id, Viewer.anonymous()
        )

        assert as_reader[0].like_count == 2
        assert as_reader[0].liked_by_viewer is True
        assert as_anonymous[0].liked_by_viewer is False

    @pytest.mark.asyncio
    async def test_top_commenter_badge(self, unit_env):
        """Commenters at or above the threshold on this author's posts get a badge."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        stats_service = await unit_env.get(CommenterStatsService)
        settings = await unit_env.get(Settings)
        author = await add_user(unit_env)
        regular = await add_user(unit_env)
        newcomer = await add_user(unit_env)
        post = await add_post(unit_env, author)

        for _ in range(settings.comments.top_commenter_threshold):
            await stats_service.on_comment_created(author.id, regular.id)
        await add_comment(unit_env, post, regular, "again")
        await add_comment(unit_env, post, newcomer, "hello")
        await add_comment(unit_env, post, author, "thanks")

        # Act
        thread = await thread_service.assemble_thread(post.id, Viewer.anonymous())

        # Assert
        badges = {n.author.id: n.is_top_commenter for n in thread}
        assert badges == {regular.id: True, newcomer.id: False, author.id: False}

    @pytest.mark.asyncio
    async def test_deleted_comments_are_skipped(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        comment_service = await unit_env.get(CommentService)
        author = await add_user(unit_env)
        post = await add_post(unit_env, author)
        keep = await add_comment(unit_env, post, author, "keep")
        drop = await add_comment(unit_env, post, author, "drop")

        await comment_service.delete_comment(post.id, drop.id, author.id)

        thread = await thread_service.assemble_thread(post.id, Viewer.anonymous())
        assert [n.id for n in thread] == [keep.id]


class TestRecentComments:
    """Tests for recent_comments."""

    @pytest.mark.asyncio
    async def test_lists_top_level_comments_of_published_posts(self, unit_env):
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        author = await add_user(unit_env)
        post = await add_post(unit_env, author, title="Published")
        draft = await add_post(unit_env, author, title="Draft", published=False)

        older = await add_comment(unit_env, post, author, "older", created_at=minutes_ago(9))
        newer = await add_comment(unit_env, post, author, "newer", created_at=minutes_ago(2))
        await add_comment(unit_env, post, author, "reply", parent=older)
        await add_comment(unit_env, draft, author, "on a draft")

        # Act
        page = await thread_service.recent_comments(Viewer.anonymous(), limit=10)

        # Assert
        assert page.total == 2
        assert [item.node.id for item in page.items] == [newer.id, older.id]
        assert page.items[0].post_title == "Published"
        assert page.items[0].post_slug == post.slug

    @pytest.mark.asyncio
    async def test_visibility_is_applied_per_post(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        author = await add_user(unit_env)
        other_author = await add_user(unit_env)
        reader = await add_user(unit_env)
        own_post = await add_post(unit_env, author)
        other_post = await add_post(unit_env, other_author)

        mine = await add_comment(
            unit_env, own_post, reader, status=ModerationStatus.HIDDEN
        )
        await add_comment(unit_env, other_post, reader, status=ModerationStatus.HIDDEN)

        page = await thread_service.recent_comments(viewer_for(author), limit=10)

        assert [item.node.id for item in page.items] == [mine.id]
        assert page.items[0].node.moderation_status == ModerationStatus.HIDDEN
