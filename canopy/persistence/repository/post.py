"""PostgreSQL implementation of Post repository."""

from typing import Optional, Sequence

import logfire
from sqlalchemy import func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from canopy.domain.error import PersistenceError
from canopy.domain.model import CommentNode, Post
from canopy.domain.repository.post import PostRepository
from canopy.domain.value import PostId
from canopy.persistence.mappers import comments_to_documents, post_to_dict, row_to_post
from canopy.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            try:
                result = await self.session.execute(stmt)
            except SQLAlchemyError as e:
                logfire.error("Post lookup failed", post_id=str(post_id), error=str(e))
                raise PersistenceError(f"Failed to load post {post_id}: {e}") from e

            row = result.fetchone()
            if not row:
                logfire.warn("Post not found", post_id=str(post_id))
                return None

            return row_to_post(row._asdict())

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        with logfire.span("post_repository.save", post_id=str(post.id)):
            values = post_to_dict(post)
            stmt = insert(posts_table).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=[posts_table.c.id],
                set_={
                    key: stmt.excluded[key]
                    for key in values
                    if key not in ("id", "created_at")
                },
            )
            try:
                await self.session.execute(stmt)
                await self.session.flush()
            except SQLAlchemyError as e:
                logfire.error("Post save failed", post_id=str(post.id), error=str(e))
                raise PersistenceError(f"Failed to save post {post.id}: {e}") from e

            logfire.info("Post saved successfully", post_id=str(post.id))
            return post

    async def update_comments(
        self,
        post_id: PostId,
        comments: Sequence[CommentNode],
        replies_delta: int = 0,
    ) -> bool:
        """Overwrite the comment forest and adjust the counter in one statement."""
        with logfire.span(
            "post_repository.update_comments",
            post_id=str(post_id),
            roots=len(comments),
            replies_delta=replies_delta,
        ):
            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post_id)
                .values(
                    comments=comments_to_documents(comments),
                    replies=posts_table.c.replies + replies_delta,
                    updated_at=func.now(),
                )
            )
            try:
                result = await self.session.execute(stmt)
                await self.session.flush()
            except SQLAlchemyError as e:
                logfire.error(
                    "Comment forest write failed", post_id=str(post_id), error=str(e)
                )
                raise PersistenceError(
                    f"Failed to write comments for post {post_id}: {e}"
                ) from e

            return result.rowcount > 0
