"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from canopy.config import CommentSettings
from canopy.domain.error import (
    ForbiddenError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from canopy.domain.repository import NotificationRepository, PostRepository
from canopy.domain.service import CommentService, ForestService, NotificationService
from canopy.domain.value import AuthorSnapshot, CommentId, NotificationType, PostId
from canopy.persistence.mappers import comments_to_documents, documents_to_comments
from canopy.persistence.repository.inmemory import (
    InMemoryNotificationRepository,
    InMemoryPostRepository,
)
from tests.conftest import make_author, make_node, make_post
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()

OWNER = make_author("owner@example.com", "Owner")
ALICE = make_author("alice@example.com", "Alice")
BOB = make_author("bob@example.com", "Bob")


async def seed_post(unit_env, **kwargs):
    post_repo = await unit_env.get(PostRepository)
    return await post_repo.save(make_post(author=OWNER, **kwargs))


class TestAddComment:
    """Tests for add_comment."""

    @pytest.mark.asyncio
    async def test_add_to_empty_post(self, unit_env):
        """First comment becomes the only root and bumps the counter."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        post = await seed_post(unit_env)

        # Act
        node = await comment_service.add_comment(post.id, ALICE, "  Nice post  ")

        # Assert
        assert node.content == "Nice post"
        assert node.author == ALICE
        assert node.likes_count == 0
        assert node.replies == ()

        stored = await post_repo.find_by_id(post.id)
        assert [c.id for c in stored.comments] == [node.id]
        assert stored.replies == 1

    @pytest.mark.asyncio
    async def test_add_appends_after_existing(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        post = await seed_post(unit_env)

        first = await comment_service.add_comment(post.id, ALICE, "first")
        second = await comment_service.add_comment(post.id, BOB, "second")

        stored = await post_repo.find_by_id(post.id)
        assert [c.id for c in stored.comments] == [first.id, second.id]
        assert stored.replies == 2

    @pytest.mark.asyncio
    async def test_blank_content_leaves_post_unchanged(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        post = await seed_post(unit_env)

        with pytest.raises(ValidationError):
            await comment_service.add_comment(post.id, ALICE, "   ")

        stored = await post_repo.find_by_id(post.id)
        assert stored.comments == ()
        assert stored.replies == 0

    @pytest.mark.asyncio
    async def test_missing_post_raises(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.add_comment(PostId(uuid4()), ALICE, "hello")

    @pytest.mark.asyncio
    async def test_notifies_post_author(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        notification_repo = await unit_env.get(NotificationRepository)
        post = await seed_post(unit_env)

        node = await comment_service.add_comment(post.id, ALICE, "hello")

        inbox = await notification_repo.find_for_recipient(OWNER.identity)
        assert len(inbox) == 1
        assert inbox[0].type == NotificationType.COMMENT
        assert inbox[0].comment_id == node.id
        assert inbox[0].message == "Alice commented on your post"

    @pytest.mark.asyncio
    async def test_no_notification_on_own_post(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        notification_repo = await unit_env.get(NotificationRepository)
        post = await seed_post(unit_env)

        await comment_service.add_comment(post.id, OWNER, "talking to myself")

        assert await notification_repo.find_for_recipient(OWNER.identity) == []


class TestAddReply:
    """Tests for add_reply."""

    @pytest.mark.asyncio
    async def test_nested_reply_leaves_counter(self, unit_env):
        """A reply under a reply nests two deep and does not touch replies."""
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        top = make_node("top", author=ALICE)
        post = await seed_post(unit_env, comments=(top,), replies=1)

        r1 = await comment_service.add_reply(post.id, top.id, BOB, "r1")
        r2 = await comment_service.add_reply(post.id, r1.id, ALICE, "r2")

        stored = await post_repo.find_by_id(post.id)
        assert stored.replies == 1
        assert stored.comments[0].replies[0].id == r1.id
        assert stored.comments[0].replies[0].replies[0].id == r2.id

    @pytest.mark.asyncio
    async def test_reply_to_missing_parent_raises(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        top = make_node("top")
        post = await seed_post(unit_env, comments=(top,), replies=1)

        with pytest.raises(NotFoundError):
            await comment_service.add_reply(
                post.id, CommentId(uuid4()), BOB, "into the void"
            )

        stored = await post_repo.find_by_id(post.id)
        assert stored.comments == (top,)

    @pytest.mark.asyncio
    async def test_notifies_parent_author(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        notification_repo = await unit_env.get(NotificationRepository)
        top = make_node("top", author=ALICE)
        post = await seed_post(unit_env, comments=(top,), replies=1)

        await comment_service.add_reply(post.id, top.id, BOB, "agreed")

        inbox = await notification_repo.find_for_recipient(ALICE.identity)
        assert [n.type for n in inbox] == [NotificationType.COMMENT_REPLY]
        assert inbox[0].message == "Bob replied to your comment"
        assert await notification_repo.find_for_recipient(OWNER.identity) == []


class TestEditComment:
    """Tests for edit_comment."""

    @pytest.mark.asyncio
    async def test_author_can_edit_nested(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        reply = make_node("old", author=BOB)
        top = make_node("top", author=ALICE, replies=(reply,))
        post = await seed_post(unit_env, comments=(top,), replies=1)

        edited = await comment_service.edit_comment(
            post.id, reply.id, BOB.identity, " new "
        )

        assert edited.content == "new"
        assert edited.edited_at is not None
        stored = await post_repo.find_by_id(post.id)
        assert stored.comments[0].replies[0].content == "new"
        assert stored.comments[0].edited_at is None

    @pytest.mark.asyncio
    async def test_second_edit_moves_timestamp_forward(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        top = make_node("v1", author=ALICE)
        post = await seed_post(unit_env, comments=(top,), replies=1)

        first = await comment_service.edit_comment(
            post.id, top.id, ALICE.identity, "v2"
        )
        second = await comment_service.edit_comment(
            post.id, top.id, ALICE.identity, "v3"
        )

        assert second.content == "v3"
        assert second.edited_at >= first.edited_at

    @pytest.mark.asyncio
    async def test_repeated_identical_edit_keeps_content(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        top = make_node("hello", author=ALICE)
        post = await seed_post(unit_env, comments=(top,), replies=1)

        first = await comment_service.edit_comment(
            post.id, top.id, ALICE.identity, "same"
        )
        second = await comment_service.edit_comment(
            post.id, top.id, ALICE.identity, "same"
        )

        assert first.content == second.content == "same"
        assert second.edited_at is not None
        assert second.edited_at >= first.edited_at

    @pytest.mark.asyncio
    async def test_non_author_forbidden(self, unit_env):
        """A forbidden edit leaves the stored forest as it was."""
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        top = make_node("mine", author=ALICE)
        post = await seed_post(unit_env, comments=(top,), replies=1)

        with pytest.raises(ForbiddenError):
            await comment_service.edit_comment(post.id, top.id, BOB.identity, "yours")

        stored = await post_repo.find_by_id(post.id)
        assert stored.comments == (top,)

    @pytest.mark.asyncio
    async def test_blank_edit_rejected(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        top = make_node("mine", author=ALICE)
        post = await seed_post(unit_env, comments=(top,), replies=1)

        with pytest.raises(ValidationError):
            await comment_service.edit_comment(post.id, top.id, ALICE.identity, " ")

    @pytest.mark.asyncio
    async def test_missing_comment_raises(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        post = await seed_post(unit_env)

        with pytest.raises(NotFoundError):
            await comment_service.edit_comment(
                post.id, CommentId(uuid4()), ALICE.identity, "text"
            )


class TestDeleteComment:
    """Tests for delete_comment."""

    @pytest.mark.asyncio
    async def test_delete_top_level_removes_subtree(self, unit_env):
        """Deleting a root with three replies drops four nodes, counter by one."""
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        top = make_node(
            "top",
            author=ALICE,
            replies=(make_node("a"), make_node("b", replies=(make_node("c"),))),
        )
        other = make_node("other")
        post = await seed_post(unit_env, comments=(top, other), replies=2)

        removed = await comment_service.delete_comment(post.id, top.id, ALICE.identity)

        assert removed == 4
        stored = await post_repo.find_by_id(post.id)
        assert [c.id for c in stored.comments] == [other.id]
        assert stored.replies == 1

    @pytest.mark.asyncio
    async def test_delete_nested_keeps_counter(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        reply = make_node("reply", author=BOB)
        top = make_node("top", author=ALICE, replies=(reply,))
        post = await seed_post(unit_env, comments=(top,), replies=1)

        removed = await comment_service.delete_comment(post.id, reply.id, BOB.identity)

        assert removed == 1
        stored = await post_repo.find_by_id(post.id)
        assert stored.comments[0].replies == ()
        assert stored.replies == 1

    @pytest.mark.asyncio
    async def test_non_author_forbidden(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        top = make_node("mine", author=ALICE)
        post = await seed_post(unit_env, comments=(top,), replies=1)

        with pytest.raises(ForbiddenError):
            await comment_service.delete_comment(post.id, top.id, BOB.identity)

        stored = await post_repo.find_by_id(post.id)
        assert stored.comments == (top,)
        assert stored.replies == 1


class TestToggleLike:
    """Tests for toggle_like."""

    @pytest.mark.asyncio
    async def test_like_then_unlike(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        top = make_node("likeable", author=ALICE)
        post = await seed_post(unit_env, comments=(top,), replies=1)

        liked = await comment_service.toggle_like(post.id, top.id, BOB)
        unliked = await comment_service.toggle_like(post.id, top.id, BOB)

        assert (liked.liked, liked.likes_count) == (True, 1)
        assert (unliked.liked, unliked.likes_count) == (False, 0)
        stored = await post_repo.find_by_id(post.id)
        assert stored.comments[0].likes == frozenset()

    @pytest.mark.asyncio
    async def test_only_like_notifies(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        notification_repo = await unit_env.get(NotificationRepository)
        top = make_node("likeable", author=ALICE)
        post = await seed_post(unit_env, comments=(top,), replies=1)

        await comment_service.toggle_like(post.id, top.id, BOB)
        await comment_service.toggle_like(post.id, top.id, BOB)

        inbox = await notification_repo.find_for_recipient(ALICE.identity)
        assert [n.type for n in inbox] == [NotificationType.COMMENT_LIKE]

    @pytest.mark.asyncio
    async def test_nameless_actor_notification_message(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        notification_repo = await unit_env.get(NotificationRepository)
        top = make_node("likeable", author=ALICE)
        post = await seed_post(unit_env, comments=(top,), replies=1)
        nameless = AuthorSnapshot.from_claims("carol@example.com")

        await comment_service.toggle_like(post.id, top.id, nameless)

        inbox = await notification_repo.find_for_recipient(ALICE.identity)
        assert [n.message for n in inbox] == ["Someone liked your comment"]

    @pytest.mark.asyncio
    async def test_like_missing_comment_raises(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        post = await seed_post(unit_env)

        with pytest.raises(NotFoundError):
            await comment_service.toggle_like(post.id, CommentId(uuid4()), BOB)


class FailingNotificationRepository(NotificationRepository):
    """Repository whose writes always fail."""

    async def save(self, notification):
        raise RuntimeError("notification store down")

    async def find_for_recipient(self, identity, limit=50):
        return []

    async def mark_read(self, identity, notification_ids):
        return 0


class TestNotificationFailure:
    """A failing notification store never fails the mutation."""

    @pytest.mark.asyncio
    async def test_comment_persists_when_notification_fails(self, unit_env):
        post_repo = await unit_env.get(PostRepository)
        comment_service = CommentService(
            forest_service=ForestService(post_repo),
            notification_service=NotificationService(FailingNotificationRepository()),
        )
        post = await seed_post(unit_env)

        node = await comment_service.add_comment(post.id, ALICE, "still here")

        stored = await post_repo.find_by_id(post.id)
        assert [c.id for c in stored.comments] == [node.id]
        assert stored.replies == 1


class FailingPostRepository(InMemoryPostRepository):
    """Post repository whose forest writes always fail."""

    async def update_comments(self, post_id, comments, replies_delta=0):
        raise PersistenceError("connection reset while writing comments")


class TestPersistenceFailure:
    """A failed forest write aborts the whole mutation."""

    def build_service(self):
        post_repo = FailingPostRepository()
        notification_repo = InMemoryNotificationRepository()
        comment_service = CommentService(
            forest_service=ForestService(post_repo),
            notification_service=NotificationService(notification_repo),
        )
        return comment_service, post_repo, notification_repo

    @pytest.mark.asyncio
    async def test_add_comment_propagates_and_does_not_notify(self):
        comment_service, post_repo, notification_repo = self.build_service()
        post = await post_repo.save(make_post(author=OWNER))

        with pytest.raises(PersistenceError):
            await comment_service.add_comment(post.id, ALICE, "lost")

        stored = await post_repo.find_by_id(post.id)
        assert stored.comments == ()
        assert stored.replies == 0
        assert await notification_repo.find_for_recipient(OWNER.identity) == []

    @pytest.mark.asyncio
    async def test_delete_comment_propagates_and_keeps_forest(self):
        comment_service, post_repo, _ = self.build_service()
        top = make_node("keep", author=ALICE, replies=(make_node("child", author=BOB),))
        post = await post_repo.save(make_post(author=OWNER, comments=(top,), replies=1))

        with pytest.raises(PersistenceError):
            await comment_service.delete_comment(post.id, top.id, ALICE.identity)

        stored = await post_repo.find_by_id(post.id)
        assert stored.comments == (top,)
        assert stored.replies == 1

    @pytest.mark.asyncio
    async def test_reply_propagates_and_does_not_notify(self):
        comment_service, post_repo, notification_repo = self.build_service()
        top = make_node("parent", author=ALICE)
        post = await post_repo.save(make_post(author=OWNER, comments=(top,), replies=1))

        with pytest.raises(PersistenceError):
            await comment_service.add_reply(post.id, top.id, BOB, "lost reply")

        assert await notification_repo.find_for_recipient(ALICE.identity) == []


class TestConfiguredContentLimit:
    """The configured limit is the only length check on comment content."""

    def build_service(self, post_repo, notification_repo, max_length):
        return CommentService(
            forest_service=ForestService(post_repo),
            notification_service=NotificationService(notification_repo),
            settings=CommentSettings(max_content_length=max_length),
        )

    @pytest.mark.asyncio
    async def test_raised_limit_allows_long_comment_that_reloads(self, unit_env):
        post_repo = await unit_env.get(PostRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        comment_service = self.build_service(post_repo, notification_repo, 20000)
        post = await seed_post(unit_env)

        node = await comment_service.add_comment(post.id, ALICE, "x" * 15000)

        stored = await post_repo.find_by_id(post.id)
        reloaded = documents_to_comments(comments_to_documents(stored.comments))
        assert reloaded[0].id == node.id
        assert len(reloaded[0].content) == 15000

    @pytest.mark.asyncio
    async def test_raised_limit_allows_long_edit_that_reloads(self, unit_env):
        post_repo = await unit_env.get(PostRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        comment_service = self.build_service(post_repo, notification_repo, 20000)
        top = make_node("short", author=ALICE)
        post = await seed_post(unit_env, comments=(top,), replies=1)

        await comment_service.edit_comment(post.id, top.id, ALICE.identity, "y" * 15000)

        stored = await post_repo.find_by_id(post.id)
        reloaded = documents_to_comments(comments_to_documents(stored.comments))
        assert reloaded[0].content == "y" * 15000

    @pytest.mark.asyncio
    async def test_lowered_limit_rejects_with_domain_error(self, unit_env):
        post_repo = await unit_env.get(PostRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        comment_service = self.build_service(post_repo, notification_repo, 5)
        top = make_node("short", author=ALICE)
        post = await seed_post(unit_env, comments=(top,), replies=1)

        with pytest.raises(ValidationError):
            await comment_service.add_comment(post.id, ALICE, "too long")
        with pytest.raises(ValidationError):
            await comment_service.edit_comment(
                post.id, top.id, ALICE.identity, "too long"
            )

        stored = await post_repo.find_by_id(post.id)
        assert stored.comments == (top,)
