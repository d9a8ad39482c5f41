"""Common combinators for text documents.

Built from textual literals, so each works for text and binary documents
alike. None of them escape content; callers own that.

Example:
    >>> export(double_quotes(literal("alga")) + new_line())
    '"alga"\\n'
    >>> export(indent(2, brackets(literal(b"a=1"))))
    b'  [a=1]'

"""

from __future__ import annotations

from collections.abc import Iterable

from graphdoc.config import get_export_config
from graphdoc.doc import Doc, empty, text
from graphdoc.errors import IndentError
from graphdoc.utils.logger import get_logger

logger = get_logger(__name__)

_NEW_LINE = text("\n")
_OPEN_BRACKET = text("[")
_CLOSE_BRACKET = text("]")
_DOUBLE_QUOTE = text('"')


def new_line() -> Doc:
    """A document comprising a single newline symbol."""
    return _NEW_LINE


def brackets[S](doc: Doc[S]) -> Doc[S]:
    """Wrap a document into square brackets."""
    return _OPEN_BRACKET + doc + _CLOSE_BRACKET


def double_quotes[S](doc: Doc[S]) -> Doc[S]:
    """Wrap a document into double quotes."""
    return _DOUBLE_QUOTE + doc + _DOUBLE_QUOTE


def indent[S](spaces: int, doc: Doc[S]) -> Doc[S]:
    """Prepend a given number of spaces to a document.

    Args:
        spaces: Number of spaces; 0 returns ``doc`` itself
        doc: Document to indent

    Raises:
        TypeError: ``spaces`` is not an int
        IndentError: ``spaces`` is negative and the active ExportConfig
            uses ``negative_indent="error"``

    """
    if not isinstance(spaces, int) or isinstance(spaces, bool):
        raise TypeError(f"indent() count must be int, got {type(spaces).__name__}")
    if spaces < 0:
        if get_export_config().negative_indent == "error":
            raise IndentError(spaces)
        logger.debug("Clamping negative indent %d to 0", spaces)
        return doc
    if spaces == 0:
        return doc
    return text(" " * spaces) + doc


def unlines[S](docs: Iterable[Doc[S]]) -> Doc[S]:
    """Concatenate documents after appending a terminating newline to each.

    Example:
        >>> export(unlines([literal("a"), literal("b")]))
        'a\\nb\\n'
        >>> export(unlines([]))
        ''

    """
    result: Doc = empty()
    for doc in docs:
        result = result + doc + _NEW_LINE
    return result


__all__ = [
    "brackets",
    "double_quotes",
    "indent",
    "new_line",
    "unlines",
]
