"""In-memory file system tree model.

This module implements the tree of directories and files that the shell
navigates. Directories own their children; children point back to their
directory through a weak reference so ownership stays single-rooted.

Lookups never raise: absence is reported as ``None`` or ``False`` and the
caller decides how to react.
"""

from __future__ import annotations

import weakref
from abc import ABC, abstractmethod
from collections.abc import Iterator
from enum import Enum
from typing import Final, override

PATH_SEPARATOR: Final[str] = "/"


class NodeKind(str, Enum):
    """Discriminator for the two node variants."""

    FILE = "file"
    DIRECTORY = "directory"


class Node(ABC):
    """Base class for entries in the tree.

    A node has a name and an optional parent directory. The parent link is
    set only by :meth:`DirectoryNode.add_child` and is held weakly.
    """

    __slots__ = ("_name", "_parent_ref", "__weakref__")

    kind: NodeKind

    def __init__(self, name: str) -> None:
        """Initialize the node.

        Args:
            name: Entry name, non-empty and without path separators

        Raises:
            ValueError: If the name is empty or contains a separator
        """
        if not name:
            msg = "node name must be non-empty"
            raise ValueError(msg)
        if PATH_SEPARATOR in name:
            msg = f"node name must not contain '{PATH_SEPARATOR}': {name!r}"
            raise ValueError(msg)
        self._name: str = name
        self._parent_ref: weakref.ReferenceType[DirectoryNode] | None = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def parent(self) -> DirectoryNode | None:
        """Directory containing this node, or None for a root."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def is_directory(self) -> bool:
        return self.kind is NodeKind.DIRECTORY

    @property
    def path(self) -> str:
        """Absolute path from the root, e.g. ``/documents/projects``.

        The root itself renders as ``/``; its own name is never part of a path.
        """
        segments: list[str] = []
        current: Node | None = self
        while current is not None and current.parent is not None:
            segments.append(current.name)
            current = current.parent
        segments.reverse()
        return PATH_SEPARATOR + PATH_SEPARATOR.join(segments)

    @abstractmethod
    def get_size(self) -> int:
        """Total size in bytes."""
        ...

    def iter_all(self) -> Iterator[Node]:
        """Yield this node and all of its descendants."""
        yield self

    def _attach(self, parent: DirectoryNode) -> None:
        self._parent_ref = weakref.ref(parent)

    def _detach(self) -> None:
        self._parent_ref = None


class FileNode(Node):
    """A file with a fixed size."""

    __slots__ = ("_size",)

    kind = NodeKind.FILE

    def __init__(self, name: str, size: int) -> None:
        """Initialize the file.

        Args:
            name: File name
            size: Size in bytes (non-negative)

        Raises:
            ValueError: If the name is invalid or size is negative
        """
        super().__init__(name)
        if isinstance(size, bool) or not isinstance(size, int):
            msg = f"file size must be an integer, got {type(size).__name__}"
            raise ValueError(msg)
        if size < 0:
            msg = f"file size must be non-negative, got {size}"
            raise ValueError(msg)
        self._size: int = size

    @property
    def size(self) -> int:
        return self._size

    @override
    def get_size(self) -> int:
        return self._size

    @override
    def __repr__(self) -> str:
        return f"FileNode(name={self._name!r}, size={self._size})"


class DirectoryNode(Node):
    """A directory that owns a set of uniquely named children."""

    __slots__ = ("_children",)

    kind = NodeKind.DIRECTORY

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._children: dict[str, Node] = {}

    @property
    def children(self) -> tuple[Node, ...]:
        return tuple(self._children.values())

    def __len__(self) -> int:
        return len(self._children)

    def __contains__(self, name: object) -> bool:
        return name in self._children

    def add_child(self, node: Node) -> Node:
        """Insert a node under this directory, keyed by its name.

        A child with the same name is replaced (last write wins) and detached.

        Args:
            node: Node to insert

        Returns:
            The inserted node, for chaining during tree construction

        Raises:
            ValueError: If the node already belongs to another directory or
                the insertion would create a cycle
        """
        current_parent = node.parent
        if current_parent is not None and current_parent is not self:
            msg = f"{node.name!r} already belongs to {current_parent.path}"
            raise ValueError(msg)
        if isinstance(node, DirectoryNode) and node._is_ancestor_of(self):
            msg = f"adding {node.name!r} under {self.path} would create a cycle"
            raise ValueError(msg)

        replaced = self._children.get(node.name)
        if replaced is not None and replaced is not node:
            replaced._detach()

        self._children[node.name] = node
        node._attach(self)
        return node

    def get_child(self, name: str) -> Node | None:
        """Return the child with this exact name, or None."""
        return self._children.get(name)

    def has_child(self, name: str) -> bool:
        return name in self._children

    @override
    def get_size(self) -> int:
        """Sum of child sizes, recomputed on every call."""
        return sum(child.get_size() for child in self._children.values())

    @override
    def iter_all(self) -> Iterator[Node]:
        yield self
        for child in self._children.values():
            yield from child.iter_all()

    def _is_ancestor_of(self, node: Node) -> bool:
        current: Node | None = node
        while current is not None:
            if current is self:
                return True
            current = current.parent
        return False

    @override
    def __repr__(self) -> str:
        return f"DirectoryNode(name={self._name!r}, children={len(self._children)})"
