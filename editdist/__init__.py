"""
Edit Distance, Three Ways
=========================

The minimum number of single-element insertions, deletions and
substitutions that turn one sequence into another:

    naive_distance("SATURDAY", "SUNDAY")        → 3   (plain recursion)
    tabulated_distance("SATURDAY", "SUNDAY")    → 3   (bottom-up table)
    memoized_distance("SATURDAY", "SUNDAY")     → 3   (top-down + cache)

Elements are opaque: characters, bytes, tokens, or multilevel list
nodes (files and folders) all work, as long as they support `==`.

    a, b = new_list(), new_list()
    add_file(a, "Hello"); add_file(b, "Hello"); add_file(b, "World")
    tabulated_distance(a.children, b.children)  → 1
"""

from editdist.core import (
    # Table
    DistanceTable,
    # Strategies
    naive_distance,
    tabulated_distance,
    memoized_distance,
    Strategy,
    STRATEGIES,
    DEFAULT_STRATEGY,
    get_strategy,
    edit_distance,
)
from editdist.tree import (
    Node, File, Folder, NotAFolderError,
    new_list, add_file, add_folder, children,
    is_file, is_folder, structurally_equal,
)
from editdist.formats import from_python, to_python, from_json, to_json

__version__ = "0.1.0"
__all__ = [
    "DistanceTable",
    "naive_distance", "tabulated_distance", "memoized_distance",
    "Strategy", "STRATEGIES", "DEFAULT_STRATEGY", "get_strategy", "edit_distance",
    "Node", "File", "Folder", "NotAFolderError",
    "new_list", "add_file", "add_folder", "children",
    "is_file", "is_folder", "structurally_equal",
    "from_python", "to_python", "from_json", "to_json",
]
