from __future__ import annotations

import re
from typing import TYPE_CHECKING

from shapenotation.errors import InvalidLabel

if TYPE_CHECKING:
    from shapenotation.ast import ShapeKind


_SQUARE_LABEL_RE = re.compile(r"[0-9]+")
_CIRCLE_LABEL_RE = re.compile(r"[A-Z]+")


def is_valid_square_label(text: str) -> bool:
    """True iff text is one or more ASCII digits and nothing else."""
    return _SQUARE_LABEL_RE.fullmatch(text) is not None


def is_valid_circle_label(text: str) -> bool:
    """True iff text is one or more ASCII uppercase letters and nothing
    else."""
    return _CIRCLE_LABEL_RE.fullmatch(text) is not None


def validate_label(
    kind: ShapeKind, text: str, position: int | None = None
) -> None:
    if not kind.accepts(text):
        raise InvalidLabel(kind, text, position)
