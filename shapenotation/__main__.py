"""
Demonstration driver.  With no arguments, parses a few built-in samples;
otherwise parses each command-line argument.  Results go to stdout and
errors to stderr.
"""

from __future__ import annotations

import sys
from typing import List, Optional, Tuple

from shapenotation.errors import ParsingError
from shapenotation.parser import ShapeParser

# (input, expected to parse)
SAMPLES: List[Tuple[str, bool]] = [
    ("[12](BALL(INK[1[35]](CHARLIE)))", True),
    ("[13]", True),
    ("(DOG[15])", True),
    ("[72(HELLO)]", False),
]


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if argv:
        samples = [(text, True) for text in argv]
    else:
        samples = SAMPLES

    parser = ShapeParser()
    status = 0
    for text, expected in samples:
        try:
            container = parser.parse(text)
        except ParsingError as e:
            print("Error: %s" % e, file=sys.stderr)
            if expected:
                status = 1
        else:
            print(repr(container))
            if not expected:
                status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())
