from __future__ import annotations

from re import compile as re_compile

_WORD_RE = re_compile(r"[A-Za-z0-9_]*")


class Scanner(object):
    """
    Parse context for a single call: the input text and a cursor into it.
    A new Scanner is created for every parse, so parsers never share
    cursor state between calls.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str | None:
        if self.pos < len(self.text):
            return self.text[self.pos]
        return None

    def advance(self) -> None:
        self.pos += 1

    def read_label(self) -> str:
        """Consume the maximal run of word characters at the cursor.  The
        result may be empty."""
        m = _WORD_RE.match(self.text, self.pos)
        assert m is not None
        self.pos = m.end()
        return m.group()
