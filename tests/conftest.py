"""Test configuration and shared helpers."""

from uuid import uuid4

from canopy.domain.model import CommentNode, Post
from canopy.domain.value import AuthorSnapshot, Identity, PostId


def make_author(
    identity: str = "alice@example.com", name: str = "Alice"
) -> AuthorSnapshot:
    """Author snapshot for tests."""
    return AuthorSnapshot.from_claims(identity=identity, name=name)


def make_post(
    author: AuthorSnapshot | None = None,
    comments: tuple[CommentNode, ...] = (),
    replies: int = 0,
) -> Post:
    """Post with a fresh id, optionally pre-seeded with comments."""
    return Post(
        id=PostId(uuid4()),
        author=author or make_author("owner@example.com", "Owner"),
        content="A post worth discussing",
        comments=comments,
        replies=replies,
    )


def make_node(
    content: str = "A comment",
    author: AuthorSnapshot | None = None,
    replies: tuple[CommentNode, ...] = (),
    likes: frozenset[Identity] = frozenset(),
) -> CommentNode:
    """Comment node with a fresh id."""
    node = CommentNode.create(content, author or make_author())
    if replies or likes:
        node = node.model_copy(update={"replies": replies, "likes": likes})
    return node
