# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Path utilities.

Paths are slash-delimited and always absolute: '/a/b/c'. The leading
separator stands for the root node, so '/' addresses the root itself.
Segments match node names exactly (case-sensitive); '.' and '..' have no
special meaning and are never normalized.
"""

from __future__ import annotations

from .exceptions import PathError

ROOT_NAME = 'root'
SEPARATOR = '/'


def parse_path(path: str) -> list[str]:
    """Split a path into the list of names to match, root first.

    Args:
        path: Absolute path (must start with '/').

    Returns:
        List of segments; the first one is always ROOT_NAME.

    Raises:
        PathError: If path is not a string starting with '/'.

    Example:
        >>> parse_path('/a/b/')
        ['root', 'a', 'b']
        >>> parse_path('/')
        ['root']
    """
    if not isinstance(path, str) or not path.startswith(SEPARATOR):
        raise PathError(f"Wrong path: {path!r}")

    segments = path.split(SEPARATOR)
    segments[0] = ROOT_NAME
    # only one trailing separator is forgiven
    if len(segments) > 1 and segments[-1] == '':
        segments.pop()
    return segments


def join_path(first: str, second: str) -> str:
    """Join a parent path and a child segment with exactly one separator.

    Example:
        >>> join_path('/a/', 'b')
        '/a/b'
        >>> join_path('/a', '/b')
        '/a/b'
        >>> join_path('/', 'x')
        '/x'
    """
    if first.endswith(SEPARATOR):
        first = first[:-1]
    if second.startswith(SEPARATOR):
        second = second[1:]
    return f"{first}{SEPARATOR}{second}"


def validate_name(name: str) -> None:
    """Check that a node name can be addressed by a path.

    Raises:
        PathError: If name is not a non-empty string or contains '/'.
    """
    if not isinstance(name, str):
        raise PathError(f"Node name must be str, not {type(name).__name__}")
    if not name:
        raise PathError("Node name cannot be empty")
    if SEPARATOR in name:
        raise PathError(f"Node name cannot contain {SEPARATOR!r}: {name!r}")
