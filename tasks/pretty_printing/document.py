"""Wadler-style document combinators.

Documents describe printable text together with the places where a line may
be broken.  They are built from a handful of combinators and rendered to a
string for a given maximum width:

* ``text`` – a literal fragment that never contains a newline.
* ``+`` – concatenation of two documents.
* ``line`` – a break that renders as a single space when its group is laid
  out flat and as a newline plus indentation otherwise.
* ``nest`` – increases the indentation of every break inside a document.
* ``group`` – lays its content out flat when it fits on the current line.
* ``bracket`` – ``prefix``/``suffix`` delimited group whose body is indented
  when the group has to be broken.
* ``pretty`` – renders a document for a maximum line width.

The layout follows Wadler's *A prettier printer*: a group is flattened when
its flat form plus the remainder of the document up to the next break fits in
the space left on the line.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import List, Tuple

logger = logging.getLogger(__name__)


class Doc:
    """Base class for all document nodes."""

    __slots__ = ()

    def __add__(self, other: object) -> "Doc":
        if not isinstance(other, Doc):
            return NotImplemented
        return Concat((self, other))

    def nest(self, indent: int) -> "Doc":
        return Nest(indent, self)

    def group(self) -> "Doc":
        return Group(self)


@dataclass(frozen=True, slots=True)
class Text(Doc):
    value: str

    def __post_init__(self) -> None:
        if "\n" in self.value:
            raise ValueError("Text documents cannot contain newlines")


@dataclass(frozen=True, slots=True)
class Line(Doc):
    pass


@dataclass(frozen=True, slots=True)
class Concat(Doc):
    parts: Tuple[Doc, ...]

    def __add__(self, other: object) -> Doc:
        if not isinstance(other, Doc):
            return NotImplemented
        return Concat(self.parts + (other,))


@dataclass(frozen=True, slots=True)
class Nest(Doc):
    indent: int
    child: Doc


@dataclass(frozen=True, slots=True)
class Group(Doc):
    child: Doc


def text(value: str) -> Doc:
    """Return a literal document for *value*."""

    return Text(value)


def line() -> Doc:
    return Line()


def nest(indent: int, doc: Doc) -> Doc:
    return Nest(indent, doc)


def group(doc: Doc) -> Doc:
    return Group(doc)


def bracket(indent: int, prefix: str, body: Doc, suffix: str) -> Doc:
    """Wrap *body* in ``prefix``/``suffix`` and allow it to break.

    Laid out flat the result reads ``prefix body suffix`` with single spaces
    around the body.  When broken, the body starts on its own line indented by
    *indent* and the suffix returns to the enclosing indentation.
    """

    return group(text(prefix) + nest(indent, line() + body) + line() + text(suffix))


# (indentation, flat, document)
_Frame = Tuple[int, bool, Doc]


def _fits(remaining: int, head: _Frame, rest: List[_Frame]) -> bool:
    """Return ``True`` when *head* followed by *rest* fits in *remaining*.

    Scanning stops at the first break that is rendered as a newline.
    """

    todo: List[_Frame] = [head]
    rest_index = len(rest)
    while remaining >= 0:
        if not todo:
            if rest_index == 0:
                return True
            rest_index -= 1
            todo.append(rest[rest_index])
        indent, flat, doc = todo.pop()
        match doc:
            case Text(value):
                remaining -= len(value)
            case Line():
                if not flat:
                    return True
                remaining -= 1
            case Concat(parts):
                todo.extend((indent, flat, part) for part in reversed(parts))
            case Nest(extra, child):
                todo.append((indent + extra, flat, child))
            case Group(child):
                todo.append((indent, flat, child))
    return False


def pretty(width: int, doc: Doc) -> str:
    """Render *doc* so that lines stay within *width* columns where possible."""

    if not isinstance(width, int) or isinstance(width, bool) or width < 1:
        raise ValueError("Rendering width must be a positive integer")

    outs: List[str] = []
    column = 0
    todo: List[_Frame] = [(0, False, doc)]
    while todo:
        indent, flat, current = todo.pop()
        match current:
            case Text(value):
                outs.append(value)
                column += len(value)
            case Line():
                if flat:
                    outs.append(" ")
                    column += 1
                else:
                    outs.append("\n" + " " * indent)
                    column = indent
            case Concat(parts):
                todo.extend((indent, flat, part) for part in reversed(parts))
            case Nest(extra, child):
                todo.append((indent + extra, flat, child))
            case Group(child):
                if not flat:
                    flat = _fits(width - column, (indent, True, child), todo)
                todo.append((indent, flat, child))
            case _:
                raise TypeError(f"Unsupported document node: {current!r}")
    rendered = "".join(outs)
    logger.debug("Rendered document at width %d into %d line(s)", width, rendered.count("\n") + 1)
    return rendered


render = pretty


__all__ = [
    "Concat",
    "Doc",
    "Group",
    "Line",
    "Nest",
    "Text",
    "bracket",
    "group",
    "line",
    "nest",
    "pretty",
    "render",
    "text",
]
