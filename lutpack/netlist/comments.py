"""Comment removal for netlist text.

Comments are overwritten with spaces rather than removed so that every
character keeps its original offset.
"""

import re

_BLOCK_COMMENT = re.compile(r"/\*.*?(?:\*/|\Z)", re.DOTALL)
_LINE_COMMENT = re.compile(r"//[^\n]*")


def _blank(match: re.Match[str]) -> str:
    return " " * len(match.group(0))


def strip_comments(text: str) -> str:
    """Blank out block and line comments.

    Block comments are removed first, so a ``/*`` inside a line comment still
    opens a block comment. An unterminated block comment runs to the end of
    the text. String literals and escaped identifiers are not special.

    Parameters
    ----------
    text : str
        Raw netlist text.

    Returns
    -------
    str
        Text of the same length with comment characters replaced by spaces.
    """
    text = _BLOCK_COMMENT.sub(_blank, text)
    return _LINE_COMMENT.sub(_blank, text)
