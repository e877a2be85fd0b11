"""Comment forest held as an arena of nodes.

Stored posts carry their comments as nested ``CommentNode`` trees. For
lookups and edits the tree is flattened into an arena: nodes indexed by id
with ``parent`` / ``children`` adjacency and an ordered list of roots. All
traversal uses explicit stacks, so tree depth is not bounded by the
interpreter's recursion limit.

A forest is owned by whoever built it. Services clone before mutating so
the loaded copy is never touched.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import datetime

from canopy.domain.error import NotFoundError
from canopy.domain.model.comment import CommentNode
from canopy.domain.value import CommentId, Identity, LikeState


@dataclass
class CommentMatch:
    """Result of looking a comment up by id.

    ``node`` and ``parent`` are materialized with their full reply subtrees.
    """

    node: CommentNode
    parent: CommentNode | None
    is_top_level: bool


class CommentForest:
    """Ordered forest of comment nodes."""

    def __init__(self) -> None:
        # Flat copies: replies are always empty here, children live in _children
        self._nodes: dict[CommentId, CommentNode] = {}
        self._parent: dict[CommentId, CommentId | None] = {}
        self._children: dict[CommentId, list[CommentId]] = {}
        self._roots: list[CommentId] = []

    @classmethod
    def from_nodes(cls, nodes: Iterable[CommentNode]) -> "CommentForest":
        """Build a forest from nested nodes.

        Raises:
            ValueError: If the same id appears more than once
        """
        forest = cls()
        for node in nodes:
            forest._graft(node, None)
        return forest

    def to_nodes(self) -> tuple[CommentNode, ...]:
        """Rebuild the nested representation, roots in order."""
        built = self._build(list(self._walk_from(self._roots)))
        return tuple(built[root_id] for root_id in self._roots)

    def copy(self) -> "CommentForest":
        """Independent copy; nodes are immutable so only containers are copied."""
        clone = CommentForest()
        clone._nodes = dict(self._nodes)
        clone._parent = dict(self._parent)
        clone._children = {cid: list(kids) for cid, kids in self._children.items()}
        clone._roots = list(self._roots)
        return clone

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, comment_id: object) -> bool:
        return comment_id in self._nodes

    @property
    def root_ids(self) -> tuple[CommentId, ...]:
        return tuple(self._roots)

    def walk(self) -> Iterator[CommentId]:
        """Yield every id in pre-order: a node before its replies, roots in order."""
        return self._walk_from(self._roots)

    def parent_id(self, comment_id: CommentId) -> CommentId | None:
        """Direct parent id, or None for a top-level comment."""
        self._require(comment_id)
        return self._parent[comment_id]

    def children_ids(self, comment_id: CommentId) -> tuple[CommentId, ...]:
        self._require(comment_id)
        return tuple(self._children[comment_id])

    def subtree(self, comment_id: CommentId) -> CommentNode:
        """Materialize one node with all of its replies."""
        self._require(comment_id)
        built = self._build(list(self._walk_from([comment_id])))
        return built[comment_id]

    def add(self, node: CommentNode, parent_id: CommentId | None = None) -> None:
        """Append a node (and any replies it carries) under a parent or at the root.

        Raises:
            NotFoundError: If parent_id is given but not in the forest
            ValueError: If any id being added already exists
        """
        if parent_id is not None:
            self._require(parent_id)
        self._graft(node, parent_id)

    def edit(
        self, comment_id: CommentId, content: str, edited_at: datetime
    ) -> CommentNode:
        """Replace a node's content and stamp the edit time."""
        self._require(comment_id)
        updated = self._nodes[comment_id].model_copy(
            update={"content": content, "edited_at": edited_at}
        )
        self._nodes[comment_id] = updated
        return updated

    def toggle_like(self, comment_id: CommentId, identity: Identity) -> LikeState:
        """Add the identity to the node's likes, or remove it if present."""
        self._require(comment_id)
        node = self._nodes[comment_id]
        liked = identity not in node.likes
        likes = node.likes | {identity} if liked else node.likes - {identity}
        self._nodes[comment_id] = node.model_copy(update={"likes": likes})
        return LikeState(liked=liked, likes_count=len(likes))

    def remove(self, comment_id: CommentId) -> list[CommentId]:
        """Detach a node and discard its whole reply subtree.

        Returns:
            Ids removed, the node first followed by its descendants in pre-order
        """
        self._require(comment_id)
        removed = list(self._walk_from([comment_id]))

        parent_id = self._parent[comment_id]
        siblings = self._roots if parent_id is None else self._children[parent_id]
        siblings.remove(comment_id)

        for cid in removed:
            del self._nodes[cid]
            del self._parent[cid]
            del self._children[cid]
        return removed

    def _require(self, comment_id: CommentId) -> None:
        if comment_id not in self._nodes:
            raise NotFoundError("Comment", str(comment_id))

    def _walk_from(self, start: Iterable[CommentId]) -> Iterator[CommentId]:
        stack = list(reversed(list(start)))
        while stack:
            comment_id = stack.pop()
            yield comment_id
            stack.extend(reversed(self._children[comment_id]))

    def _graft(self, node: CommentNode, parent_id: CommentId | None) -> None:
        # Validate the whole incoming subtree before touching the arena
        pending: list[tuple[CommentNode, CommentId | None]] = []
        seen: set[CommentId] = set()
        stack = [(node, parent_id)]
        while stack:
            current, current_parent = stack.pop()
            if current.id in self._nodes or current.id in seen:
                raise ValueError(f"Duplicate comment id: {current.id}")
            seen.add(current.id)
            pending.append((current, current_parent))
            stack.extend((reply, current.id) for reply in reversed(current.replies))

        for current, current_parent in pending:
            self._nodes[current.id] = current.model_copy(update={"replies": ()})
            self._parent[current.id] = current_parent
            self._children[current.id] = []
            if current_parent is None:
                self._roots.append(current.id)
            else:
                self._children[current_parent].append(current.id)

    def _build(self, preorder: list[CommentId]) -> dict[CommentId, CommentNode]:
        # Reverse pre-order visits every child before its parent
        built: dict[CommentId, CommentNode] = {}
        for comment_id in reversed(preorder):
            replies = tuple(built[cid] for cid in self._children[comment_id])
            built[comment_id] = self._nodes[comment_id].model_copy(
                update={"replies": replies}
            )
        return built


def clone_forest(forest: CommentForest) -> CommentForest:
    """Deep-enough copy of a forest: mutating the clone never changes the input."""
    return forest.copy()


def find_by_id(forest: CommentForest, comment_id: CommentId) -> CommentMatch | None:
    """Locate a comment anywhere in the forest.

    Ids are unique within a forest, so this is the same node a pre-order
    search would reach first. Does not modify the forest.

    Returns:
        The match with its parent, or None if the id is not present
    """
    if comment_id not in forest:
        return None
    parent_id = forest.parent_id(comment_id)
    return CommentMatch(
        node=forest.subtree(comment_id),
        parent=forest.subtree(parent_id) if parent_id is not None else None,
        is_top_level=parent_id is None,
    )
