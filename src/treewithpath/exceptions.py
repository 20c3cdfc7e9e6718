# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tree exceptions.

Every error raised by the library is a TreeError; the subclasses only
narrow down which check failed, so callers may catch either.
"""

from __future__ import annotations


class TreeError(Exception):
    """Base exception for Tree errors."""

    pass


class PathError(TreeError):
    """Raised when a path is malformed or a node name is not addressable."""

    pass


class NodeNotFoundError(TreeError):
    """Raised when strict path resolution hits a missing segment."""

    def __init__(self, segment: str) -> None:
        super().__init__(f"{segment}: Node not exists")
        self.segment = segment


class NodeExistsError(TreeError):
    """Raised when a node is added at a path that is already taken."""

    def __init__(self, path: str) -> None:
        super().__init__(f"This node already exists: {path}")
        self.path = path


class DetachedNodeError(TreeError):
    """Raised when an operation is attempted on a removed node."""

    def __init__(self, name: str) -> None:
        super().__init__(f"This node does not belong to any tree: {name!r}")
        self.name = name


class RootRemovalError(TreeError):
    """Raised when removal of the root node is attempted."""

    def __init__(self) -> None:
        super().__init__("Cannot remove root node")
