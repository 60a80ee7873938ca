"""
editdist.formats — Convert between plain data and multilevel lists.

Supported conversions:
    • Python objects ↔ Node
          str                    ↔  File(str)
          {name: [children...]}  ↔  Folder(name, children)
          [items...]             →  Folder("root", items)
    • JSON strings ↔ Node
"""

import json
from typing import Any

from .tree import File, Folder, Node, new_list


# ═══════════════════════════════════════════════════════════════════
#  PYTHON OBJECTS ↔ NODES
# ═══════════════════════════════════════════════════════════════════

def from_python(obj: Any) -> Node:
    """
    Convert a Python object to a multilevel list node.

    A bare list becomes the children of a fresh "root" folder, so a
    whole list can be written as e.g. ["Hello", {"bookmarks": ["Buy milk!"]}].

    Raises TypeError for anything that is not a string, a single-key
    dict mapping a name to a list, or a list.
    """
    if isinstance(obj, str):
        return File(obj)
    if isinstance(obj, list):
        root = new_list()
        root.children.extend(from_python(item) for item in obj)
        return root
    if isinstance(obj, dict):
        if len(obj) != 1:
            raise TypeError(
                f"A folder must be a single-key dict, got {len(obj)} keys"
            )
        (name, items), = obj.items()
        if not isinstance(name, str) or not isinstance(items, list):
            raise TypeError(
                f"A folder must map a name to a list of children, got {obj!r}"
            )
        return Folder(name, [from_python(item) for item in items])
    raise TypeError(f"Cannot convert {type(obj).__name__} to a multilevel list node")


def to_python(node: Node) -> Any:
    """
    Convert a node back to plain Python data.

    Inverse of from_python for files and folders:
        to_python(from_python({"docs": ["a"]})) == {"docs": ["a"]}
    """
    if isinstance(node, File):
        return node.content
    if isinstance(node, Folder):
        return {node.name: [to_python(child) for child in node.children]}
    raise TypeError(f"Unknown node type: {type(node)}")


# ═══════════════════════════════════════════════════════════════════
#  JSON STRINGS ↔ NODES
# ═══════════════════════════════════════════════════════════════════

def from_json(text: str) -> Node:
    """Parse a JSON string into a multilevel list node."""
    return from_python(json.loads(text))


def to_json(node: Node, **kwargs) -> str:
    """Convert a multilevel list node to a JSON string."""
    return json.dumps(to_python(node), **kwargs)
