"""Unit tests for the update, delete and like comment use cases."""

import pytest

from canopy.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
    ToggleCommentLikeRequest,
    ToggleCommentLikeUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from canopy.domain.error import AuthenticationRequiredError, ForbiddenError
from canopy.domain.repository import PostRepository
from tests.conftest import make_author, make_node, make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

ALICE = make_author("alice@example.com", "Alice")
BOB = make_author("bob@example.com", "Bob")


async def seed(unit_env):
    post_repo = await unit_env.get(PostRepository)
    top = make_node("top", author=ALICE, replies=(make_node("reply", author=BOB),))
    post = await post_repo.save(make_post(comments=(top,), replies=1))
    return post_repo, post, top


class TestGetCommentsUseCase:
    @pytest.mark.asyncio
    async def test_returns_nested_forest(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)
        _, post, top = await seed(unit_env)

        response = await use_case.execute(GetCommentsRequest(post_id=str(post.id)))

        assert response.post_id == str(post.id)
        assert [c.id for c in response.comments] == [top.id]
        assert response.comments[0].replies[0].content == "reply"


class TestUpdateCommentUseCase:
    @pytest.mark.asyncio
    async def test_author_edits(self, unit_env):
        use_case = await unit_env.get(UpdateCommentUseCase)
        post_repo, post, top = await seed(unit_env)

        response = await use_case.execute(
            UpdateCommentRequest(
                post_id=str(post.id),
                comment_id=str(top.id),
                identity=ALICE.identity,
                content="edited",
            )
        )

        assert response.ok is True
        assert response.edited_at is not None
        stored = await post_repo.find_by_id(post.id)
        assert stored.comments[0].content == "edited"

    @pytest.mark.asyncio
    async def test_other_user_forbidden(self, unit_env):
        use_case = await unit_env.get(UpdateCommentUseCase)
        _, post, top = await seed(unit_env)

        with pytest.raises(ForbiddenError):
            await use_case.execute(
                UpdateCommentRequest(
                    post_id=str(post.id),
                    comment_id=str(top.id),
                    identity=BOB.identity,
                    content="hijack",
                )
            )

    @pytest.mark.asyncio
    async def test_anonymous_rejected(self, unit_env):
        use_case = await unit_env.get(UpdateCommentUseCase)
        _, post, top = await seed(unit_env)

        with pytest.raises(AuthenticationRequiredError):
            await use_case.execute(
                UpdateCommentRequest(
                    post_id=str(post.id),
                    comment_id=str(top.id),
                    identity=None,
                    content="x",
                )
            )


class TestDeleteCommentUseCase:
    @pytest.mark.asyncio
    async def test_delete_counts_removed(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)
        post_repo, post, top = await seed(unit_env)

        response = await use_case.execute(
            DeleteCommentRequest(
                post_id=str(post.id), comment_id=str(top.id), identity=ALICE.identity
            )
        )

        assert response.removed == 2
        stored = await post_repo.find_by_id(post.id)
        assert stored.comments == ()
        assert stored.replies == 0


class TestToggleCommentLikeUseCase:
    @pytest.mark.asyncio
    async def test_toggle(self, unit_env):
        use_case = await unit_env.get(ToggleCommentLikeUseCase)
        _, post, top = await seed(unit_env)
        request = ToggleCommentLikeRequest(
            post_id=str(post.id), comment_id=str(top.id), actor=BOB
        )

        first = await use_case.execute(request)
        second = await use_case.execute(request)

        assert (first.liked, first.likes_count) == (True, 1)
        assert (second.liked, second.likes_count) == (False, 0)

    @pytest.mark.asyncio
    async def test_anonymous_rejected(self, unit_env):
        use_case = await unit_env.get(ToggleCommentLikeUseCase)
        _, post, top = await seed(unit_env)

        with pytest.raises(AuthenticationRequiredError):
            await use_case.execute(
                ToggleCommentLikeRequest(
                    post_id=str(post.id), comment_id=str(top.id), actor=None
                )
            )
