# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeWithPath - A hierarchical tree addressed by slash-delimited paths.

A lightweight, zero-dependency library: one root node holding arbitrary
data, named children reachable through filesystem-like paths ('/a/b/c'),
and a JSON-shaped import/export format.
"""

__version__ = "0.1.0"

from .exceptions import (
    DetachedNodeError,
    NodeExistsError,
    NodeNotFoundError,
    PathError,
    RootRemovalError,
    TreeError,
)
from .node import TreeNode
from .paths import ROOT_NAME, SEPARATOR, join_path, parse_path
from .tree import Tree

__all__ = [
    # Core classes
    "Tree",
    "TreeNode",
    # Paths
    "ROOT_NAME",
    "SEPARATOR",
    "join_path",
    "parse_path",
    # Exceptions
    "TreeError",
    "PathError",
    "NodeNotFoundError",
    "NodeExistsError",
    "DetachedNodeError",
    "RootRemovalError",
]
