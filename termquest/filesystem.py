#!/usr/bin/env python3
"""
termquest.filesystem - the in-memory tree the simulated shell operates on.

Core philosophy:
- Every node is immutable; a directory holds its children by name
- Changes create new nodes along the edited path and share everything else
- A root handed out once stays valid forever, so old state snapshots never change
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Union

from . import paths


DIR_SIZE = 4096
FILE_PERMISSIONS = 'rw-r--r--'
DIR_PERMISSIONS = 'rwxr-xr-x'
DEFAULT_OWNER = 'user'


@dataclass(frozen=True)
class FileNode:
    """Regular file node."""
    name: str
    content: str = ''
    executable: bool = False
    permissions: str = FILE_PERMISSIONS
    owner: str = DEFAULT_OWNER

    def is_file(self) -> bool:
        return True

    def is_dir(self) -> bool:
        return False

    @property
    def size(self) -> int:
        return len(self.content)

    def with_content(self, content: str) -> 'FileNode':
        """Return a copy holding new content, keeping mode and owner."""
        return replace(self, content=content)

    def to_dict(self) -> dict:
        return {
            'type': 'file',
            'name': self.name,
            'content': self.content,
            'executable': self.executable,
            'permissions': self.permissions,
            'owner': self.owner,
        }


@dataclass(frozen=True)
class DirNode:
    """Directory node. `children` maps a name to a node and is never mutated."""
    name: str
    children: Dict[str, 'Node'] = field(default_factory=dict)
    owner: str = DEFAULT_OWNER

    def is_file(self) -> bool:
        return False

    def is_dir(self) -> bool:
        return True

    @property
    def size(self) -> int:
        return DIR_SIZE

    def with_child(self, name: str, node: 'Node') -> 'DirNode':
        """Return a new DirNode with `node` stored under `name`."""
        if node.name != name:
            node = replace(node, name=name)
        new_children = dict(self.children)
        new_children[name] = node
        return replace(self, children=new_children)

    def without_child(self, name: str) -> 'DirNode':
        """Return a new DirNode without the specified child."""
        new_children = dict(self.children)
        new_children.pop(name, None)
        return replace(self, children=new_children)

    def to_dict(self) -> dict:
        return {
            'type': 'directory',
            'name': self.name,
            'owner': self.owner,
            'children': {name: child.to_dict() for name, child in self.children.items()},
        }


Node = Union[FileNode, DirNode]


def from_dict(data: Dict[str, Any]) -> Node:
    """
    Build a node tree from the nested-dict form missions are written in.

    Raises ValueError for an unknown node type or a name containing '/'.
    """
    node_type = data.get('type')
    name = data.get('name', '')
    if '/' in name and name != '/':
        raise ValueError(f"Invalid node name: {name!r}")

    if node_type == 'file':
        return FileNode(
            name=name,
            content=data.get('content') or '',
            executable=bool(data.get('executable', False)),
            permissions=data.get('permissions') or FILE_PERMISSIONS,
            owner=data.get('owner') or DEFAULT_OWNER,
        )
    elif node_type == 'directory':
        children = {}
        for child_name, child_data in (data.get('children') or {}).items():
            # The mapping key is authoritative for the child's name
            children[child_name] = from_dict(dict(child_data, name=child_name))
        return DirNode(name=name, children=children, owner=data.get('owner') or DEFAULT_OWNER)
    else:
        raise ValueError(f"Unknown node type: {node_type!r}")


def to_dict(node: Node) -> dict:
    """Serialize a node tree to nested dicts."""
    return node.to_dict()


def create_base_filesystem() -> DirNode:
    """Create the skeleton tree every mission starts from."""
    return from_dict({
        'type': 'directory',
        'name': '/',
        'children': {
            'home': {'type': 'directory', 'children': {
                'user': {'type': 'directory', 'children': {}},
            }},
            'etc': {'type': 'directory', 'children': {}},
            'var': {'type': 'directory', 'children': {
                'log': {'type': 'directory', 'children': {}},
            }},
            'tmp': {'type': 'directory', 'children': {}},
            'bin': {'type': 'directory', 'children': {}},
            'usr': {'type': 'directory', 'children': {
                'bin': {'type': 'directory', 'children': {}},
            }},
        },
    })


# Tree edits. Each returns a new root and shares every untouched subtree.

def _rebuild(directory: DirNode, parts: list, edit) -> DirNode:
    if len(parts) == 1:
        return edit(directory, parts[0])

    child = directory.children.get(parts[0])
    if child is None or not child.is_dir():
        raise FileNotFoundError('/'.join(parts))
    return directory.with_child(parts[0], _rebuild(child, parts[1:], edit))


def set_node(root: DirNode, path: str, node: Node) -> DirNode:
    """Place `node` at canonical `path`. The parent directory must exist."""
    parts = paths.segments(path)
    if not parts:
        if not node.is_dir():
            raise IsADirectoryError('/')
        return replace(node, name='/')
    return _rebuild(root, parts, lambda d, name: d.with_child(name, node))


def remove_node(root: DirNode, path: str) -> DirNode:
    """Drop the node at canonical `path` from its parent."""
    parts = paths.segments(path)
    if not parts:
        raise PermissionError('/')
    return _rebuild(root, parts, lambda d, name: d.without_child(name))


def write_file(root: DirNode, path: str, content: str) -> DirNode:
    """
    Create or overwrite a file at canonical `path`.

    An existing file keeps its permissions and executable flag. Raises
    FileNotFoundError when the parent is missing or not a directory, and
    IsADirectoryError when `path` names a directory.
    """
    parent_path, name = paths.split_path(path)
    if not name:
        raise IsADirectoryError(path)
    parent = paths.lookup(root, parent_path)
    if parent is None or not parent.is_dir():
        raise FileNotFoundError(path)

    existing = parent.children.get(name)
    if existing is not None and existing.is_dir():
        raise IsADirectoryError(path)

    if existing is not None:
        node = existing.with_content(content)
    else:
        node = FileNode(name=name, content=content)
    return set_node(root, path, node)
