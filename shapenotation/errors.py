"""
The shapenotation module implements the following exception classes:

  * AnyException
  * ParsingError
    * InvalidLabel
    * UnexpectedCharacter
    * InvalidCharacter
    * UnclosedDelimiter
    * NestingTooDeep
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shapenotation.ast import ShapeKind


# ============================================================================
# Begin exceptions.
#
class AnyException(Exception):
    """
    Top-level class for all exceptions thrown within the shapenotation
    module.
    """


class ParsingError(AnyException):
    """
    Top level parsing exception class, from which we derive all exceptions
    that occur during the parsing of an input string.  The position
    attribute is the zero-based offset into the input at which the failure
    was detected; it is not part of the message text.
    """

    position: int | None

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


class InvalidLabel(ParsingError):
    """
    The label following an opening delimiter does not match the pattern
    required by the shape kind: digits for squares, uppercase letters for
    circles.
    """

    def __init__(
        self, kind: ShapeKind, label: str, position: int | None = None
    ) -> None:
        super().__init__(
            "Invalid label for %s: %s" % (kind.noun, label), position
        )
        self.kind = kind
        self.label = label


class UnexpectedCharacter(ParsingError):
    """
    A top-level character is neither '[' nor '('.
    """

    def __init__(self, char: str, position: int | None = None) -> None:
        super().__init__("Unexpected character: %s" % char, position)
        self.char = char


class InvalidCharacter(ParsingError):
    """
    A character inside an open group is neither the group's closer nor the
    opener of a kind the group may nest.
    """

    def __init__(
        self, kind: ShapeKind, char: str, position: int | None = None
    ) -> None:
        super().__init__(
            "Invalid character in %s: %s" % (kind.noun, char), position
        )
        self.kind = kind
        self.char = char


class UnclosedDelimiter(ParsingError):
    """
    End of input was reached before the group's closing delimiter.
    """

    def __init__(self, kind: ShapeKind, position: int | None = None) -> None:
        super().__init__(
            "Unclosed %s %s" % (kind.noun, kind.delimiter_noun), position
        )
        self.kind = kind


class NestingTooDeep(ParsingError):
    """
    A group was opened deeper than the parser's max_depth allows.
    """

    def __init__(
        self, depth: int, max_depth: int, position: int | None = None
    ) -> None:
        super().__init__(
            "Nesting too deep: %d levels exceeds limit of %d"
            % (depth, max_depth),
            position,
        )
        self.depth = depth
        self.max_depth = max_depth


#
# End exceptions.
# ============================================================================
