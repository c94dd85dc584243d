# ============================================================================
# Copyright (c) 2024 The shapenotation authors
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
# ============================================================================
"""
The shapenotation module parses a compact textual notation into a tree of
typed shape nodes.  Two kinds of shapes exist:

  Square : Delimited by [ and ], labelled with one or more ASCII digits.
           A square may contain nested squares only.

  Circle : Delimited by ( and ), labelled with one or more ASCII uppercase
           letters.  A circle may contain nested circles and squares.

A parse produces a Container holding the top-level shapes in input order:

    >>> import shapenotation
    >>> c = shapenotation.parse("[12](BALL[3])")
    >>> [(s.kind.noun, s.label) for s in c]
    [('square', '12'), ('circle', 'BALL')]
    >>> c.shapes[1].children
    (Square('3'),)

Malformed input raises a subclass of ParsingError whose message names the
problem, e.g. "Invalid label for square: ABC" or "Unclosed circle
parenthesis".  ShapeParser.parse_result() returns the error instead of
raising it.

Following are the public names:

  * Container, Shape, ShapeKind
  * ShapeParser, parse
  * is_valid_square_label, is_valid_circle_label
  * AnyException, ParsingError and its subclasses
"""

from __future__ import annotations


__all__ = (
    "AnyException",
    "Container",
    "DEPTH_LIMIT_DEFAULT",
    "InvalidCharacter",
    "InvalidLabel",
    "NestingTooDeep",
    "ParsingError",
    "Shape",
    "ShapeKind",
    "ShapeParser",
    "UnclosedDelimiter",
    "UnexpectedCharacter",
    "is_valid_circle_label",
    "is_valid_square_label",
    "parse",
    "__version__",
)

from shapenotation._version import __version__
from shapenotation.ast import Container, Shape, ShapeKind
from shapenotation.errors import (
    AnyException,
    InvalidCharacter,
    InvalidLabel,
    NestingTooDeep,
    ParsingError,
    UnclosedDelimiter,
    UnexpectedCharacter,
)
from shapenotation.labels import is_valid_circle_label, is_valid_square_label
from shapenotation.parser import DEPTH_LIMIT_DEFAULT, ShapeParser, parse
