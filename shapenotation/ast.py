"""
The classes in this module make up the tree produced by the parser.  A
Container holds the top-level shapes; every Shape carries a kind tag
(ShapeKind.SQUARE or ShapeKind.CIRCLE), a label and its ordered children.

Squares are delimited by [...] and must be labelled with ASCII digits.
Circles are delimited by (...) and must be labelled with ASCII uppercase
letters.  A square may only contain squares, whereas a circle may contain
both kinds:

    [12](BALL(INK[1[35]](CHARLIE)))

    Container
      Square '12'
      Circle 'BALL'
        Circle 'INK'
          Square '1'
            Square '35'
          Circle 'CHARLIE'

Shapes are immutable once built and compare structurally, so two parses of
the same input produce equal trees.
"""

from __future__ import annotations

import enum
from typing import Iterable, Iterator

from mypy_extensions import mypyc_attr

from shapenotation import labels
from shapenotation.errors import InvalidCharacter


class ShapeKind(enum.Enum):
    """
    Discriminant of the Shape tagged union.  Each member knows its
    delimiters, the nouns used in error messages, and which kinds it is
    allowed to nest.
    """

    SQUARE = ("square", "[", "]", "bracket")
    CIRCLE = ("circle", "(", ")", "parenthesis")

    noun: str
    opener: str
    closer: str
    delimiter_noun: str

    def __init__(
        self, noun: str, opener: str, closer: str, delimiter_noun: str
    ) -> None:
        self.noun = noun
        self.opener = opener
        self.closer = closer
        self.delimiter_noun = delimiter_noun

    def __repr__(self) -> str:
        return "ShapeKind.%s" % self.name

    def accepts(self, label: str) -> bool:
        """Return whether label is valid for shapes of this kind."""
        if self is ShapeKind.SQUARE:
            return labels.is_valid_square_label(label)
        return labels.is_valid_circle_label(label)

    def may_nest(self, other: ShapeKind) -> bool:
        """Squares nest squares only; circles nest both kinds."""
        if self is ShapeKind.SQUARE:
            return other is ShapeKind.SQUARE
        return True

    @classmethod
    def from_opener(cls, char: str) -> ShapeKind | None:
        return _OPENERS.get(char)


_OPENERS = {kind.opener: kind for kind in ShapeKind}


@mypyc_attr(serializable=True)
class Shape:
    """
    A square or circle node.  The label is validated by the constructor,
    which raises InvalidLabel before any object is created; children that
    the kind may not nest raise InvalidCharacter, reporting the child's
    opening delimiter as the parser would.
    """

    __slots__ = ("_kind", "_label", "_children")

    _kind: ShapeKind
    _label: str
    _children: tuple[Shape, ...]

    def __init__(
        self,
        kind: ShapeKind,
        label: str,
        children: Iterable[Shape] = (),
        *,
        position: int | None = None,
    ) -> None:
        labels.validate_label(kind, label, position)
        kids = tuple(children)
        for child in kids:
            if not kind.may_nest(child.kind):
                raise InvalidCharacter(kind, child.kind.opener)
        self._kind = kind
        self._label = label
        self._children = kids

    @classmethod
    def square(cls, label: str, children: Iterable[Shape] = ()) -> Shape:
        return cls(ShapeKind.SQUARE, label, children)

    @classmethod
    def circle(cls, label: str, children: Iterable[Shape] = ()) -> Shape:
        return cls(ShapeKind.CIRCLE, label, children)

    @property
    def kind(self) -> ShapeKind:
        return self._kind

    @property
    def label(self) -> str:
        return self._label

    @property
    def children(self) -> tuple[Shape, ...]:
        return self._children

    @property
    def is_square(self) -> bool:
        return self._kind is ShapeKind.SQUARE

    @property
    def is_circle(self) -> bool:
        return self._kind is ShapeKind.CIRCLE

    def _attach(self, children: list[Shape]) -> None:
        # Only the parser calls this, once, when the closing delimiter of
        # this shape has been consumed.
        assert not self._children
        self._children = tuple(children)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shape):
            return NotImplemented
        return (
            self._kind is other._kind
            and self._label == other._label
            and self._children == other._children
        )

    def __hash__(self) -> int:
        return hash((self._kind, self._label, self._children))

    def __repr__(self) -> str:
        if self._children:
            return "%s(%r, %r)" % (
                self._kind.noun.capitalize(),
                self._label,
                list(self._children),
            )
        return "%s(%r)" % (self._kind.noun.capitalize(), self._label)


@mypyc_attr(serializable=True)
class Container:
    """
    Root of a parse: the top-level shapes in left-to-right order.
    """

    __slots__ = ("_shapes",)

    _shapes: tuple[Shape, ...]

    def __init__(self, shapes: Iterable[Shape] = ()) -> None:
        self._shapes = tuple(shapes)

    @property
    def shapes(self) -> tuple[Shape, ...]:
        return self._shapes

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self._shapes)

    def __getitem__(self, index: int) -> Shape:
        return self._shapes[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Container):
            return NotImplemented
        return self._shapes == other._shapes

    def __hash__(self) -> int:
        return hash(self._shapes)

    def __repr__(self) -> str:
        return "Container(%r)" % (list(self._shapes),)
