"""Binary tree sum type rendered through document combinators.

``Tree`` is a closed union of two variants:

* ``Leaf`` – carries a single integer value.
* ``Branch`` – owns a left and a right subtree, both of which must be trees.

Both variants are frozen dataclasses, so instances are immutable and work with
structural pattern matching (``case Branch(left, right)``).  ``to_doc``
converts a tree into a document where every branch is a ``bracket`` group, and
``to_string`` renders that document for a target width.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
import logging
from typing import Any, Optional, Tuple

from .document import Doc, bracket, pretty, text

logger = logging.getLogger(__name__)


class TreeTypeError(TypeError):
    """Raised when a tree variant receives an operand of the wrong type."""

    def __init__(self, field: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"Unexpected type for field: Tree.Branch.{field}")
        self.field = field


class NoMatchError(TypeError):
    """Raised when a value cannot be deconstructed as any tree variant."""

    def __init__(self, value: object) -> None:
        super().__init__(f"No match for tree value {value!r}")
        self.value = value


class Tree:
    """Closed base class of the ``Leaf`` and ``Branch`` variants."""

    __slots__ = ()

    @classmethod
    def unapply(cls, value: object) -> Optional[Tuple[Any, ...]]:
        """Return the field values of *value* when it is this variant.

        ``None`` signals that *value* is not an instance of the variant.
        """

        if cls is Tree or not isinstance(value, cls):
            return None
        return tuple(getattr(value, item.name) for item in fields(cls))

    def to_doc(self, indent: int) -> Doc:
        """Convert the tree into a document, nesting branches by *indent*."""

        match self:
            case Leaf(value):
                return text("Leaf(") + text(str(value)) + text(")")
            case Branch(left, right):
                body = left.to_doc(indent) + text(", ") + right.to_doc(indent)
                return bracket(indent, "Branch(", body, ")")
        raise NoMatchError(self)

    def to_string(self, width: int, indent: int) -> str:
        logger.debug("Rendering %s tree (width=%d, indent=%d)", type(self).__name__, width, indent)
        return pretty(width, self.to_doc(indent))

    def depth(self) -> int:
        """Return the number of levels in the tree; a single leaf has depth 1."""

        match self:
            case Leaf():
                return 1
            case Branch(left, right):
                return 1 + max(left.depth(), right.depth())
        raise NoMatchError(self)


@dataclass(frozen=True, slots=True)
class Leaf(Tree):
    value: int


@dataclass(frozen=True, slots=True)
class Branch(Tree):
    left: Tree
    right: Tree

    def __post_init__(self) -> None:
        if not isinstance(self.left, Tree):
            raise TreeTypeError("left")
        if not isinstance(self.right, Tree):
            raise TreeTypeError("right")


def render_tree(tree: Tree, width: int, indent: int) -> str:
    """Render *tree* within *width* columns using *indent* per nesting level."""

    return tree.to_string(width, indent)


def tree_from_data(data: object) -> Tree:
    """Build a tree from plain data.

    Integers become leaves and two-element lists or tuples become branches,
    which makes trees easy to express in JSON or YAML documents::

        [[1, [2, 3]], 4]  ->  Branch(Branch(Leaf(1), Branch(Leaf(2), Leaf(3))), Leaf(4))
    """

    if isinstance(data, int) and not isinstance(data, bool):
        return Leaf(data)
    if isinstance(data, (list, tuple)):
        if len(data) != 2:
            raise TreeTypeError("arity", f"Branches need exactly two subtrees, got {len(data)}")
        return Branch(tree_from_data(data[0]), tree_from_data(data[1]))
    raise TreeTypeError("value", f"Cannot build a tree from {data!r}")


__all__ = [
    "Branch",
    "Leaf",
    "NoMatchError",
    "Tree",
    "TreeTypeError",
    "render_tree",
    "tree_from_data",
]
