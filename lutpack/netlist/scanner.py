"""Cursor based lexical helpers for netlist text."""

import string

WHITESPACE = frozenset(" \t\n\r\v\f")
IDENT_CHARS = frozenset(string.ascii_letters + string.digits + "_$")


class Scanner:
    """A mutable cursor over a text buffer.

    Parameters
    ----------
    text : str
        Buffer to scan.
    pos : int, optional
        Initial cursor position. Default is 0.

    Attributes
    ----------
    text : str
        The scanned buffer.
    pos : int
        Index of the next unread character.
    """

    def __init__(self, text: str, pos: int = 0) -> None:
        self.text = text
        self.pos = pos

    @property
    def at_end(self) -> bool:
        """True once the cursor has reached the end of the buffer."""
        return self.pos >= len(self.text)

    def peek(self) -> str:
        """Return the character under the cursor, or "" at the end."""
        if self.pos < len(self.text):
            return self.text[self.pos]
        return ""

    def advance(self, count: int = 1) -> None:
        self.pos = min(self.pos + count, len(self.text))

    def _skip_spaces_from(self, pos: int) -> int:
        text = self.text
        while pos < len(text) and text[pos] in WHITESPACE:
            pos += 1
        return pos

    def skip_spaces(self) -> None:
        """Advance the cursor past any whitespace."""
        self.pos = self._skip_spaces_from(self.pos)

    def skip_until(self, stops: str) -> str:
        """Advance to the next character in ``stops``.

        Returns the stop character found, or "" if the end was reached.
        """
        text = self.text
        pos = self.pos
        while pos < len(text) and text[pos] not in stops:
            pos += 1
        self.pos = pos
        return self.peek()

    def parse_identifier(self) -> str | None:
        """Parse a plain or escaped identifier after optional whitespace.

        An escaped identifier starts with a backslash and runs up to the first
        whitespace character; the backslash is part of the returned token. A
        plain identifier is a maximal run of letters, digits, ``_`` and ``$``.
        Trailing whitespace is never consumed.

        Returns
        -------
        str | None
            The identifier, or None if there is none at the cursor. On None the
            cursor is left untouched.
        """
        text = self.text
        start = self._skip_spaces_from(self.pos)
        if start >= len(text):
            return None

        end = start
        if text[start] == "\\":
            end += 1
            while end < len(text) and text[end] not in WHITESPACE:
                end += 1
        else:
            while end < len(text) and text[end] in IDENT_CHARS:
                end += 1
            if end == start:
                return None

        self.pos = end
        return text[start:end]
