#!/usr/bin/env python3
"""
Path resolution for the termquest virtual filesystem.

Every function here is total and pure: paths are plain strings, nothing
touches the tree except `lookup`, which only reads it, and absence is
reported as None rather than raised.
"""

from typing import TYPE_CHECKING, List, Optional, Tuple

if TYPE_CHECKING:
    from .filesystem import Node


HOME_DIR = '/home/user'


def normalize(path: str) -> str:
    """Collapse empty, '.' and '..' segments into a canonical absolute path."""
    normalized = []

    for part in path.split('/'):
        if part == '' or part == '.':
            continue
        elif part == '..':
            # '..' at the root stays at the root
            if normalized:
                normalized.pop()
        else:
            normalized.append(part)

    return '/' + '/'.join(normalized)


def resolve(path: str, current_directory: str) -> str:
    """Resolve a user-typed path expression against the current directory."""
    if path.startswith('/'):
        return normalize(path)
    if path == '~':
        return HOME_DIR
    if path.startswith('~/'):
        return normalize(HOME_DIR + '/' + path[2:])
    return normalize(current_directory + '/' + path)


def split_path(path: str) -> Tuple[str, str]:
    """Split a canonical path into (parent, name). The parent of '/' is '/'."""
    parts = [p for p in path.split('/') if p]
    if not parts:
        return '/', ''
    name = parts.pop()
    return '/' + '/'.join(parts), name


def segments(path: str) -> List[str]:
    """Return the non-empty segments of a canonical path."""
    return [p for p in path.split('/') if p]


def lookup(root: 'Node', path: str) -> Optional['Node']:
    """Walk the tree from root; None if any segment is missing or crosses a file."""
    node = root
    for part in segments(path):
        if not node.is_dir():
            return None
        node = node.children.get(part)
        if node is None:
            return None
    return node
