"""Comment domain service."""

from datetime import datetime, timezone

import logfire

from canopy.config import CommentSettings
from canopy.domain.error import ForbiddenError, NotFoundError
from canopy.domain.model import (
    CommentForest,
    CommentMatch,
    CommentNode,
    clone_forest,
    find_by_id,
)
from canopy.domain.model.comment import validate_content
from canopy.domain.value import (
    AuthorSnapshot,
    CommentId,
    Identity,
    LikeState,
    NotificationType,
    PostId,
)

from .base import Service
from .forest_service import ForestService
from .notification_service import NotificationService


class CommentService(Service):
    """Domain service for comment operations.

    Each mutation clones the loaded forest, locates its target, applies the
    change to the clone, writes the whole forest back and then fires any
    notification. Validation and authorization run before the write.
    """

    def __init__(
        self,
        forest_service: ForestService,
        notification_service: NotificationService,
        settings: CommentSettings | None = None,
    ) -> None:
        """Initialize comment service.

        Args:
            forest_service: Forest persistence service
            notification_service: Notification service
            settings: Comment settings (defaults apply when omitted)
        """
        self.forest_service = forest_service
        self.notification_service = notification_service
        self.settings = settings or CommentSettings()

    async def get_comments(self, post_id: PostId) -> tuple[CommentNode, ...]:
        """Get the nested comment forest of a post.

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("comment_service.get_comments", post_id=str(post_id)):
            forest = await self.forest_service.load_forest(post_id)
            logfire.info("Comments retrieved", post_id=str(post_id), count=len(forest))
            return forest.to_nodes()

    async def add_comment(
        self, post_id: PostId, actor: AuthorSnapshot, content: str
    ) -> CommentNode:
        """Add a top-level comment to a post.

        Increments the post's replies counter and notifies the post author.

        Raises:
            ValidationError: If content is empty after trimming
            NotFoundError: If the post does not exist
        """
        with logfire.span(
            "comment_service.add_comment",
            post_id=str(post_id),
            identity=actor.identity,
        ):
            node = CommentNode.create(content, actor, self.settings.max_content_length)
            post, loaded = await self.forest_service.load(post_id)

            forest = clone_forest(loaded)
            forest.add(node)
            await self.forest_service.save_forest(post_id, forest, counter_delta=1)
            logfire.info("Comment added", post_id=str(post_id), comment_id=str(node.id))

            await self.notification_service.notify(
                NotificationType.COMMENT,
                actor=actor,
                to_identity=post.author.identity,
                post_id=post_id,
                comment_id=node.id,
                message=f"{actor.name} commented on your post",
            )
            return node

    async def add_reply(
        self,
        post_id: PostId,
        parent_id: CommentId,
        actor: AuthorSnapshot,
        content: str,
    ) -> CommentNode:
        """Reply to an existing comment at any depth.

        The post's replies counter is left alone for replies.

        Raises:
            ValidationError: If content is empty after trimming
            NotFoundError: If the post or parent comment does not exist
        """
        with logfire.span(
            "comment_service.add_reply",
            post_id=str(post_id),
            parent_id=str(parent_id),
            identity=actor.identity,
        ):
            node = CommentNode.create(content, actor, self.settings.max_content_length)
            loaded = await self.forest_service.load_forest(post_id)

            match = find_by_id(loaded, parent_id)
            if match is None:
                logfire.warn(
                    "Parent comment not found",
                    post_id=str(post_id),
                    parent_id=str(parent_id),
                )
                raise NotFoundError("Comment", str(parent_id))

            forest = clone_forest(loaded)
            forest.add(node, parent_id=parent_id)
            await self.forest_service.save_forest(post_id, forest)
            logfire.info(
                "Reply added",
                post_id=str(post_id),
                parent_id=str(parent_id),
                comment_id=str(node.id),
            )

            await self.notification_service.notify(
                NotificationType.COMMENT_REPLY,
                actor=actor,
                to_identity=match.node.author.identity,
                post_id=post_id,
                comment_id=node.id,
                message=f"{actor.name} replied to your comment",
            )
            return node

    async def edit_comment(
        self,
        post_id: PostId,
        comment_id: CommentId,
        identity: Identity,
        content: str,
    ) -> CommentNode:
        """Replace a comment's content. Only its author may edit.

        Returns:
            The edited node

        Raises:
            NotFoundError: If the post or comment does not exist
            ForbiddenError: If identity is not the comment's author
            ValidationError: If content is empty after trimming
        """
        with logfire.span(
            "comment_service.edit_comment",
            post_id=str(post_id),
            comment_id=str(comment_id),
            identity=identity,
        ):
            loaded = await self.forest_service.load_forest(post_id)
            match = self._find_owned(loaded, post_id, comment_id, identity)
            text = validate_content(content, self.settings.max_content_length)

            forest = clone_forest(loaded)
            forest.edit(comment_id, text, edited_at=datetime.now(timezone.utc))
            await self.forest_service.save_forest(post_id, forest)
            logfire.info(
                "Comment edited",
                post_id=str(post_id),
                comment_id=str(comment_id),
                previous_length=len(match.node.content),
                length=len(text),
            )
            return forest.subtree(comment_id)

    async def delete_comment(
        self, post_id: PostId, comment_id: CommentId, identity: Identity
    ) -> int:
        """Delete a comment together with its entire reply subtree.

        Deleting a top-level comment decrements the post's replies counter
        by exactly one, regardless of how many replies go with it.

        Returns:
            Number of nodes removed (the comment plus its descendants)

        Raises:
            NotFoundError: If the post or comment does not exist
            ForbiddenError: If identity is not the comment's author
        """
        with logfire.span(
            "comment_service.delete_comment",
            post_id=str(post_id),
            comment_id=str(comment_id),
            identity=identity,
        ):
            loaded = await self.forest_service.load_forest(post_id)
            match = self._find_owned(loaded, post_id, comment_id, identity)

            forest = clone_forest(loaded)
            removed = forest.remove(comment_id)
            counter_delta = -1 if match.is_top_level else 0
            await self.forest_service.save_forest(
                post_id, forest, counter_delta=counter_delta
            )
            logfire.info(
                "Comment deleted",
                post_id=str(post_id),
                comment_id=str(comment_id),
                removed=len(removed),
                top_level=match.is_top_level,
            )
            return len(removed)

    async def toggle_like(
        self, post_id: PostId, comment_id: CommentId, actor: AuthorSnapshot
    ) -> LikeState:
        """Like a comment, or unlike it if the actor already likes it.

        A plain toggle is not idempotent: sending it twice flips twice.
        Only a new like notifies the comment's author.

        Raises:
            NotFoundError: If the post or comment does not exist
        """
        with logfire.span(
            "comment_service.toggle_like",
            post_id=str(post_id),
            comment_id=str(comment_id),
            identity=actor.identity,
        ):
            loaded = await self.forest_service.load_forest(post_id)
            match = find_by_id(loaded, comment_id)
            if match is None:
                logfire.warn(
                    "Comment not found",
                    post_id=str(post_id),
                    comment_id=str(comment_id),
                )
                raise NotFoundError("Comment", str(comment_id))

            forest = clone_forest(loaded)
            state = forest.toggle_like(comment_id, actor.identity)
            await self.forest_service.save_forest(post_id, forest)
            logfire.info(
                "Comment like toggled",
                post_id=str(post_id),
                comment_id=str(comment_id),
                liked=state.liked,
                likes_count=state.likes_count,
            )

            if state.liked:
                await self.notification_service.notify(
                    NotificationType.COMMENT_LIKE,
                    actor=actor,
                    to_identity=match.node.author.identity,
                    post_id=post_id,
                    comment_id=comment_id,
                    message=f"{actor.name} liked your comment",
                )
            return state

    def _find_owned(
        self,
        forest: CommentForest,
        post_id: PostId,
        comment_id: CommentId,
        identity: Identity,
    ) -> CommentMatch:
        match = find_by_id(forest, comment_id)
        if match is None:
            logfire.warn(
                "Comment not found", post_id=str(post_id), comment_id=str(comment_id)
            )
            raise NotFoundError("Comment", str(comment_id))
        if not match.node.is_authored_by(identity):
            logfire.warn(
                "Comment modification by non-author",
                comment_id=str(comment_id),
                identity=identity,
            )
            raise ForbiddenError("comment", str(comment_id), identity)
        return match
