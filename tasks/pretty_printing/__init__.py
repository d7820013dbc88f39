"""Document combinators and the binary tree rendered with them."""

from .document import Doc, bracket, group, line, nest, pretty, render, text
from .tree import (
    Branch,
    Leaf,
    NoMatchError,
    Tree,
    TreeTypeError,
    render_tree,
    tree_from_data,
)

__all__ = [
    "Branch",
    "Doc",
    "Leaf",
    "NoMatchError",
    "Tree",
    "TreeTypeError",
    "bracket",
    "group",
    "line",
    "nest",
    "pretty",
    "render",
    "render_tree",
    "text",
    "tree_from_data",
]
