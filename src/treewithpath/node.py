# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tree node class."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator, TYPE_CHECKING

from .exceptions import DetachedNodeError, NodeExistsError, RootRemovalError
from .paths import SEPARATOR, join_path, validate_name

if TYPE_CHECKING:
    from .tree import Tree

logger = logging.getLogger(__name__)


class TreeNode:
    """A node in a Tree hierarchy.

    Each node has:
    - name: The node's name, unique among its siblings
    - data: Arbitrary caller payload, never inspected by the tree
    - children: Child nodes in insertion order
    - tree: The owning Tree, or None once the node has been removed

    Nodes are created by Tree.add, TreeNode.add_child or Tree.from_json;
    do not instantiate them directly.

    A node is either attached or detached. remove() detaches the node and
    its whole subtree for good: afterwards only name and data are usable.

    Example:
        >>> tree = Tree({'v': 1})
        >>> node = tree.root.add_child('x', {'v': 2})
        >>> node.path
        '/x'
    """

    __slots__ = ('name', 'data', '_children', '_tree', '_parent', '_attached')

    def __init__(
        self,
        name: str,
        data: Any,
        tree: Tree,
        parent: TreeNode | None = None,
    ) -> None:
        """Initialize a TreeNode.

        Args:
            name: The node's name.
            data: The node's payload.
            tree: The Tree the node belongs to.
            parent: The node holding this one in its children, None for root.
        """
        self.name = name
        self.data = data
        self._children: list[TreeNode] = []
        self._tree = tree
        self._parent = parent
        self._attached = True

    def __repr__(self) -> str:
        if not self._attached:
            return f"TreeNode({self.name!r}, detached)"
        return f"TreeNode({self.name!r}, data={self.data!r}, children={len(self._children)})"

    def _check_attached(self) -> None:
        if not self._attached:
            raise DetachedNodeError(self.name)

    # ==================== Properties ====================

    @property
    def tree(self) -> Tree | None:
        """The Tree this node belongs to, or None if detached."""
        return self._tree if self._attached else None

    @property
    def is_attached(self) -> bool:
        """True until the node is removed."""
        return self._attached

    @property
    def is_root(self) -> bool:
        """True if this node is the root of its tree."""
        self._check_attached()
        return self._parent is None

    @property
    def children(self) -> tuple[TreeNode, ...]:
        """Child nodes in insertion order.

        A snapshot: only add_child() and remove() change the structure.
        """
        self._check_attached()
        return tuple(self._children)

    @property
    def parent(self) -> TreeNode | None:
        """The node whose children contain this one, None for the root.

        Raises:
            DetachedNodeError: If the node has been removed.
        """
        self._check_attached()
        return self._parent

    @property
    def path(self) -> str:
        """Absolute path of this node, such that tree.get(node.path) is node.

        The root's path is '/'.

        Raises:
            DetachedNodeError: If the node has been removed.
        """
        self._check_attached()
        names = []
        node = self
        while node._parent is not None:
            names.append(node.name)
            node = node._parent
        names.reverse()
        return SEPARATOR + SEPARATOR.join(names)

    # ==================== Mutation ====================

    def add_child(self, name: str, data: Any = None) -> TreeNode:
        """Append a new child node and return it.

        Args:
            name: The child's name.
            data: The child's payload.

        Returns:
            The created TreeNode.

        Raises:
            DetachedNodeError: If this node has been removed.
            PathError: If name is empty or contains '/'.
            NodeExistsError: If a node already exists at the child's path.
        """
        self._check_attached()
        validate_name(name)

        child_path = join_path(self.path, name)
        if self._tree.has(child_path):
            raise NodeExistsError(child_path)

        node = TreeNode(name, data, self._tree, parent=self)
        self._children.append(node)
        logger.debug("Added node %s", child_path)
        return node

    def remove(self) -> None:
        """Remove this node from its parent and detach its whole subtree.

        Detached nodes keep name and data; their children are discarded.

        Raises:
            DetachedNodeError: If the node was already removed.
            RootRemovalError: If this node is the root.
        """
        self._check_attached()
        if self._parent is None:
            raise RootRemovalError()

        path = self.path
        siblings = self._parent._children
        for index, sibling in enumerate(siblings):
            if sibling is self:
                del siblings[index]
                break

        for node in list(self._iter_subtree()):
            node._attached = False
            node._children = []
        logger.debug("Removed node %s", path)

    # ==================== Traversal ====================

    def _iter_subtree(self) -> Iterator[TreeNode]:
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node._children))

    def walk(self) -> Iterator[TreeNode]:
        """Iterate over this node and its descendants in pre-order.

        Children are visited in insertion order, each node before its
        descendants. The iteration is lazy and uses no recursion.

        Raises:
            DetachedNodeError: If the node has been removed.

        Example:
            >>> [n.name for n in tree.root.walk()]
            ['root', 'a', 'a1', 'b']
        """
        self._check_attached()
        return self._iter_subtree()

    def traverse(self, callback: Callable[[TreeNode], Any]) -> None:
        """Call callback on this node and every descendant, pre-order."""
        for node in self.walk():
            callback(node)

    # ==================== Conversion ====================

    def to_json(self) -> dict[str, Any]:
        """Convert this node and its subtree to a JSON-ready record.

        Returns:
            {'name': ..., 'data': ..., 'children': [record, ...]}
        """
        self._check_attached()
        record = {'name': self.name, 'data': self.data, 'children': []}
        stack = [(self, record)]
        while stack:
            node, node_record = stack.pop()
            for child in node._children:
                child_record = {'name': child.name, 'data': child.data, 'children': []}
                node_record['children'].append(child_record)
                stack.append((child, child_record))
        return record
