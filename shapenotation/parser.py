"""
Recursive-descent parser for the shape notation.  The grammar is:

    container    := shape*
    shape        := square | circle
    square       := '[' label square-child* ']'
    square-child := square
    circle       := '(' label circle-child* ')'
    circle-child := circle | square
    label        := [A-Za-z0-9_]+

Square labels must additionally be all digits and circle labels all
uppercase letters.  The descent functions return either the node they built
or the ParsingError describing why they could not build it; the first error
aborts the whole parse.
"""

from __future__ import annotations

from typing import List, Union

from shapenotation.ast import Container, Shape, ShapeKind
from shapenotation.errors import (
    InvalidCharacter,
    InvalidLabel,
    NestingTooDeep,
    ParsingError,
    UnclosedDelimiter,
    UnexpectedCharacter,
)
from shapenotation.scanner import Scanner

# Stays well below the interpreter's default recursion limit.
DEPTH_LIMIT_DEFAULT = 256

ParseResult = Union[Container, ParsingError]


class ShapeParser:
    """
    Shape notation parser.  A ShapeParser holds only configuration; each
    call to parse() or parse_result() scans with its own Scanner, so an
    instance can be reused for any number of inputs.

    max_depth : Maximum nesting depth of groups, top-level shapes being at
                depth 1.  None disables the limit.

    verbose : If true, print a trace of every group that is opened and
              closed.
    """

    def __init__(
        self,
        max_depth: int | None = DEPTH_LIMIT_DEFAULT,
        verbose: bool = False,
    ) -> None:
        if max_depth is not None and max_depth < 1:
            raise ValueError("max_depth must be positive, got %r" % max_depth)
        self.max_depth = max_depth
        self.verbose = verbose

    def parse(self, text: str) -> Container:
        """Parse text into a Container, raising a ParsingError subclass on
        malformed input."""
        result = self.parse_result(text)
        if isinstance(result, ParsingError):
            raise result
        return result

    def parse_result(self, text: str) -> ParseResult:
        """Parse text, returning either the Container or the ParsingError
        that stopped the parse."""
        scanner = Scanner(text)
        shapes: List[Shape] = []
        while not scanner.at_end():
            char = scanner.text[scanner.pos]
            kind = ShapeKind.from_opener(char)
            if kind is None:
                return UnexpectedCharacter(char, scanner.pos)
            shape = self._parse_shape(scanner, kind, 1)
            if isinstance(shape, ParsingError):
                return shape
            shapes.append(shape)
        return Container(shapes)

    def _parse_shape(
        self, scanner: Scanner, kind: ShapeKind, depth: int
    ) -> Union[Shape, ParsingError]:
        if self.max_depth is not None and depth > self.max_depth:
            return NestingTooDeep(depth, self.max_depth, scanner.pos)
        opened_at = scanner.pos
        scanner.advance()

        label_at = scanner.pos
        label = scanner.read_label()
        try:
            shape = Shape(kind, label, position=label_at)
        except InvalidLabel as e:
            return e
        if self.verbose:
            self._trace("OPEN ", kind, label, depth, opened_at)

        children: List[Shape] = []
        while True:
            char = scanner.peek()
            if char is None:
                return UnclosedDelimiter(kind, scanner.pos)
            if char == kind.closer:
                break
            inner = ShapeKind.from_opener(char)
            if inner is None or not kind.may_nest(inner):
                return InvalidCharacter(kind, char, scanner.pos)
            child = self._parse_shape(scanner, inner, depth + 1)
            if isinstance(child, ParsingError):
                return child
            children.append(child)

        if self.verbose:
            self._trace("CLOSE", kind, label, depth, scanner.pos)
        scanner.advance()
        shape._attach(children)
        return shape

    def _trace(
        self, what: str, kind: ShapeKind, label: str, depth: int, pos: int
    ) -> None:
        print(
            "%s%s %s %r at offset %d"
            % ("  " * (depth - 1), what, kind.noun, label, pos)
        )


def parse(
    text: str, *, max_depth: int | None = DEPTH_LIMIT_DEFAULT
) -> Container:
    """Parse text with a fresh ShapeParser."""
    return ShapeParser(max_depth=max_depth).parse(text)
