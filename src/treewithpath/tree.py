# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tree - A path-addressable hierarchical container.

This module provides the Tree class, which owns a single root node named
'root' and gives access to every other node through slash-delimited paths.

Path Syntax:
    - '/' is the root
    - '/a/b' is child 'b' of child 'a' of the root
    - A single trailing '/' is ignored ('/a/' == '/a')

Example:
    Basic usage::

        tree = Tree({'v': 1})
        tree.add('x', {'v': 2}, '/')
        tree.add('y', {'v': 3}, '/x')

        print(tree.get('/x/y').data)  # {'v': 3}

        tree.remove('/x')
        print(tree.has('/x/y'))  # False

    JSON round trip::

        text = tree.dumps()
        copy = Tree.loads(text)
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Callable, Iterator

from .exceptions import NodeNotFoundError, PathError, TreeError
from .node import TreeNode
from .paths import ROOT_NAME, join_path, parse_path

logger = logging.getLogger(__name__)


class Tree:
    """A hierarchical data container addressed by paths.

    Tree provides:
    - add(name, data, path): Create a child under the node at path
    - get(path, strict) / tree[path]: Resolve a path to a node
    - has(path) / path in tree: Existence check
    - remove(path): Remove and detach a node with its subtree
    - traverse(callback) / walk(): Pre-order visit of all nodes
    - to_json() / from_json(document): Nested record conversion

    Lookup scans siblings linearly; names are expected to be unique
    among siblings, which add() enforces.

    Attributes:
        root: The root TreeNode, named 'root'. Never replaced or removed.

    Example:
        >>> tree = Tree({'text': 'Hello'})
        >>> tree.add('node1', {'text': 'child'}, '/')
        TreeNode('node1', data={'text': 'child'}, children=0)
        >>> tree.get('/node1').path
        '/node1'
    """

    __slots__ = ('_root',)

    join_path = staticmethod(join_path)

    def __init__(self, data: Any = None) -> None:
        """Initialize a Tree.

        Args:
            data: Payload of the root node.
        """
        self._root = TreeNode(ROOT_NAME, data, self)

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"Tree(nodes={len(self)})"

    def __len__(self) -> int:
        """Return the number of nodes, root included."""
        return sum(1 for _ in self.walk())

    def __iter__(self) -> Iterator[TreeNode]:
        """Iterate over all nodes in pre-order."""
        return self.walk()

    def __contains__(self, path: str) -> bool:
        """Check if path exists. Malformed paths are simply absent."""
        try:
            return self.has(path)
        except PathError:
            return False

    def __getitem__(self, path: str) -> TreeNode:
        """Get node at path (strict).

        Raises:
            NodeNotFoundError: If a path segment is missing.
        """
        return self.get(path)

    @property
    def root(self) -> TreeNode:
        """The root node."""
        return self._root

    # ==================== Core API ====================

    def get(self, path: str, strict: bool = True) -> TreeNode | None:
        """Get the node at the given path.

        Args:
            path: Absolute path to the node (e.g., '/a/b').
            strict: If True (default), raise on a missing segment.
                If False, return None instead.

        Returns:
            The TreeNode at path, or None if not found and strict is False.

        Raises:
            PathError: If path does not start with '/'.
            NodeNotFoundError: If a segment is missing and strict is True.
        """
        current = [self._root]
        node = None

        for segment in parse_path(path):
            node = next((child for child in current if child.name == segment), None)
            if node is None:
                if strict:
                    raise NodeNotFoundError(segment)
                return None
            current = node._children

        return node

    def has(self, path: str) -> bool:
        """Return True if a node exists at path."""
        return self.get(path, strict=False) is not None

    def add(self, name: str, data: Any, path: str) -> TreeNode:
        """Add a node named name under the node at path and return it.

        Args:
            name: The name of the node to add.
            data: The payload of the new node.
            path: Path of the parent node.

        Returns:
            The created TreeNode.

        Raises:
            NodeNotFoundError: If the parent does not exist.
            NodeExistsError: If the parent already has a child named name.
            PathError: If path is malformed or name is not addressable.

        Example:
            >>> tree.add('node2', {'text': 'hi'}, '/node1')
        """
        parent = self.get(path)
        return parent.add_child(name, data)

    def remove(self, path: str) -> TreeNode:
        """Remove the node at path and return it, detached.

        The returned node keeps name and data; its children are gone.

        Raises:
            NodeNotFoundError: If the node does not exist.
            RootRemovalError: If path addresses the root.
        """
        node = self.get(path)
        node.remove()
        return node

    # ==================== Walk ====================

    def walk(self) -> Iterator[TreeNode]:
        """Iterate over every node in pre-order, starting at the root."""
        return self._root.walk()

    def traverse(self, callback: Callable[[TreeNode], Any]) -> None:
        """Call callback on every node in pre-order.

        Example:
            >>> tree.traverse(lambda node: print(node.name))
        """
        self._root.traverse(callback)

    # ==================== Conversion ====================

    def to_json(self) -> dict[str, Any]:
        """Convert the whole tree to nested {'name', 'data', 'children'} records."""
        return self._root.to_json()

    @classmethod
    def from_json(cls, document: Mapping[str, Any]) -> Tree:
        """Create a Tree from the record shape returned by to_json().

        The top-level record is the root: only its data and children are
        used. Children are added in document order. data is taken as is.

        Args:
            document: Root record {'name', 'data', 'children'}.

        Returns:
            The created Tree.

        Raises:
            TreeError: If a record is not a mapping, its children are not a
                list, or a child has no name.
            NodeExistsError: If two siblings share a name.

        Example:
            >>> tree = Tree.from_json({'name': 'root', 'data': 1, 'children': [
            ...     {'name': 'node1', 'data': 2, 'children': []}]})
        """
        if not isinstance(document, Mapping):
            raise TreeError(
                f"Tree document must be a mapping, not {type(document).__name__}"
            )
        tree = cls(document.get('data'))

        stack = [(tree._root, _child_records(document))]
        while stack:
            parent, records = stack.pop()
            for record in records:
                if not isinstance(record, Mapping):
                    raise TreeError(
                        f"Node record must be a mapping, not {type(record).__name__}"
                    )
                if 'name' not in record:
                    raise TreeError(f"Node record without name under {parent.path}")
                node = parent.add_child(record['name'], record.get('data'))
                stack.append((node, _child_records(record)))

        logger.debug("Loaded tree with %d nodes", len(tree))
        return tree

    def dumps(self, **kwargs: Any) -> str:
        """Serialize the tree to JSON text.

        Args:
            **kwargs: Passed to json.dumps (e.g., indent=2).
        """
        return json.dumps(self.to_json(), **kwargs)

    @classmethod
    def loads(cls, text: str | bytes, **kwargs: Any) -> Tree:
        """Create a Tree from JSON text produced by dumps().

        Args:
            text: JSON document.
            **kwargs: Passed to json.loads.
        """
        return cls.from_json(json.loads(text, **kwargs))


def _child_records(record: Mapping[str, Any]) -> list[Any]:
    """Return the children list of a node record, [] when absent."""
    children = record.get('children')
    if children is None:
        return []
    if not isinstance(children, list):
        raise TreeError(
            f"Node children must be a list, not {type(children).__name__}"
        )
    return children
