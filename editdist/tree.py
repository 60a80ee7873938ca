"""
editdist.tree — Multilevel lists (files and folders)
====================================================

A multilevel list is a small recursive tree with two kinds of node:

    File(content)             a leaf holding a string
    Folder(name, children)    a named, ordered list of nodes

Every list starts as an empty folder named "root" and grows by
appending children to folders.  A node owns its children outright:
there are no back references, no sharing, and no re-parenting, so
cycles cannot occur.

Nodes compare STRUCTURALLY:

    File(a)   == File(b)     iff  a == b
    Folder(n, c₁) == Folder(m, c₂)
                             iff  n == m, len(c₁) == len(c₂), and
                                  c₁[k] == c₂[k] for every k
    File(_)   != Folder(_, _)     always

which makes a folder's children a perfectly good sequence for the
edit distance functions in editdist.core:

    tabulated_distance(children(a), children(b))
"""

from dataclasses import dataclass, field
from typing import Optional


class NotAFolderError(TypeError):
    """Raised when a child is added to a node that is not a folder."""

    def __init__(self, node: "Node"):
        self.node = node
        super().__init__(f"Cannot add a child to {node!r}: not a folder")


class Node:
    """Base class for multilevel list nodes.  Not instantiated directly."""
    __slots__ = ()

    def size(self) -> int:
        """Number of nodes in this subtree, this one included."""
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return structurally_equal(self, other)

    # Nodes are mutable, so they must not be hashable.
    __hash__ = None  # type: ignore[assignment]


@dataclass(eq=False, slots=True)
class File(Node):
    """A leaf holding some content."""
    content: str

    def size(self) -> int:
        return 1

    def __repr__(self) -> str:
        return f"File({self.content!r})"


@dataclass(eq=False, slots=True)
class Folder(Node):
    """
    A named, ordered collection of child nodes.

    Examples:
        Folder("root")
        Folder("bookmarks", [File("Buy milk!")])
    """
    name: str
    children: list[Node] = field(default_factory=list)

    def size(self) -> int:
        return 1 + sum(child.size() for child in self.children)

    def add_file(self, content: str) -> File:
        item = File(content)
        self.children.append(item)
        return item

    def add_folder(self, name: str) -> "Folder":
        item = Folder(name)
        self.children.append(item)
        return item

    def __repr__(self) -> str:
        if len(self.children) <= 3:
            return f"Folder({self.name!r}, {self.children!r})"
        return f"Folder({self.name!r}, [...] len={len(self.children)})"


# ═══════════════════════════════════════════════════════════════════
#  OPERATIONS
# ═══════════════════════════════════════════════════════════════════

def new_list() -> Folder:
    """A new, empty multilevel list: a folder named "root"."""
    return Folder("root")


def is_file(node: Node) -> bool:
    return isinstance(node, File)


def is_folder(node: Node) -> bool:
    return isinstance(node, Folder)


def _require_folder(node: Node) -> Folder:
    if not isinstance(node, Folder):
        raise NotAFolderError(node)
    return node


def add_file(node: Node, content: str) -> File:
    """
    Append a new file to `node` and return it.

    Raises NotAFolderError if `node` is a file.
    """
    return _require_folder(node).add_file(content)


def add_folder(node: Node, name: str) -> Folder:
    """
    Append a new empty folder to `node` and return it.

    Raises NotAFolderError if `node` is a file.
    """
    return _require_folder(node).add_folder(name)


def children(node: Node) -> Optional[list[Node]]:
    """
    The folder's own (mutable) list of children, or None for a file.

    Callers must check for None before indexing.
    """
    if isinstance(node, Folder):
        return node.children
    return None


def structurally_equal(a: Node, b: Node) -> bool:
    """
    Structural equality of two nodes.

    Order- and variant-sensitive; stops at the first mismatching child.
    """
    if a is b:
        return True

    if isinstance(a, File) and isinstance(b, File):
        return a.content == b.content

    # A file is never equal to a folder, whatever their names
    if not (isinstance(a, Folder) and isinstance(b, Folder)):
        return False

    if a.name != b.name or len(a.children) != len(b.children):
        return False

    for left, right in zip(a.children, b.children):
        if not structurally_equal(left, right):
            return False
    return True
