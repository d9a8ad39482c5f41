"""Immutable document values with O(1) concatenation.

A ``Doc`` is a rope: a leaf holding one fragment, a leaf holding a textual
literal, or a node joining two documents. ``a + b`` allocates a single node
whatever the size of either side; ``export`` walks the rope once, left to
right, and combines every fragment with a FragmentBuilder.

Fragments may be any concatenable type: ``str``, ``bytes``, ``bytearray``,
``list``, ``tuple``, or anything with an associative ``+`` and an empty value.
Textual literals (``text``) take the fragment type of the document they end
up in, so the same combinators serve text and binary documents.

Example:
    >>> from graphdoc import literal, export
    >>> export(literal("al") + literal("ga"))
    'alga'
    >>> export(literal(b"al") + "ga")
    b'alga'

Thread Safety:
    Documents are immutable; export() keeps all state local to the call.
    Any number of threads may share and export the same Doc.

"""

from __future__ import annotations

import functools
from collections.abc import Iterable, Iterator
from typing import Any

from graphdoc.config import get_export_config
from graphdoc.errors import ExportError
from graphdoc.fragments import FragmentBuilder
from graphdoc.utils.logger import get_logger

logger = get_logger(__name__)

_EMPTY = 0
_FRAGMENT = 1
_TEXT = 2
_CONCAT = 3

# Raw values lifted into documents by ``+`` and comparisons; str lifts
# as a textual literal, the rest as concrete fragments
_LIFTABLE = (bytes, bytearray, list, tuple)


@functools.total_ordering
class Doc[S]:
    """An immutable document over fragments of type ``S``.

    ``Doc()`` is the empty document. Build others with ``literal``, ``text``
    and ``+``. Two documents are equal when they export to equal values;
    ordering compares exports the same way.

    Documents are unhashable: a textual literal only gets its concrete type
    at export, so ``text("a") == literal(b"a")`` while ``"a"`` and ``b"a"``
    hash differently.

    For the same reason equality is not transitive across fragment types:
    ``text("a")`` equals both ``literal("a")`` and ``literal(b"a")``, which
    differ from each other. Keep documents of one fragment type together
    before relying on ``in`` or de-duplication.

    """

    __slots__ = ("_kind", "_payload")

    __hash__ = None  # type: ignore[assignment]

    def __init__(self) -> None:
        object.__setattr__(self, "_kind", _EMPTY)
        object.__setattr__(self, "_payload", None)

    @classmethod
    def _make(cls, kind: int, payload: Any) -> Doc[Any]:
        doc = cls.__new__(cls)
        object.__setattr__(doc, "_kind", kind)
        object.__setattr__(doc, "_payload", payload)
        return doc

    @classmethod
    def from_string(cls, s: str) -> Doc[Any]:
        """Build a document from a textual literal. Same as ``text(s)``."""
        return text(s)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __copy__(self) -> Doc[S]:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Doc[S]:
        return self

    @property
    def is_empty(self) -> bool:
        """True only for the structural empty document.

        ``literal("")`` exports to nothing but is not structurally empty;
        compare with ``==`` for that.
        """
        return self._kind == _EMPTY

    def append(self, other: Doc[S]) -> Doc[S]:
        """Concatenate ``other`` after this document in O(1)."""
        if self._kind == _EMPTY:
            return other
        if other._kind == _EMPTY:
            return self
        return Doc._make(_CONCAT, (self, other))

    def __add__(self, other: object) -> Doc[Any]:
        rhs = _lift(other)
        if rhs is None:
            return NotImplemented
        return self.append(rhs)

    def __radd__(self, other: object) -> Doc[Any]:
        lhs = _lift(other)
        if lhs is None:
            return NotImplemented
        return lhs.append(self)

    def leaves(self) -> Iterator[tuple[bool, Any]]:
        """Yield ``(is_text, value)`` for every leaf, left to right.

        Walks with an explicit stack, so arbitrarily deep documents
        never hit the recursion limit.
        """
        stack: list[Doc[Any]] = [self]
        while stack:
            node = stack.pop()
            kind = node._kind
            if kind == _CONCAT:
                left, right = node._payload
                stack.append(right)
                stack.append(left)
            elif kind == _FRAGMENT:
                yield False, node._payload
            elif kind == _TEXT:
                yield True, node._payload

    def _builder(self) -> FragmentBuilder:
        fb = FragmentBuilder()
        for is_text, value in self.leaves():
            if is_text:
                fb.append_text(value)
            else:
                fb.append(value)
        return fb

    def _compare_pair(self, other: object) -> tuple[Any, Any] | None:
        rhs = _lift(other)
        if rhs is None:
            return None
        left, right = self._builder(), rhs._builder()
        # Textual literals on one side take the concrete type of the other
        if left.unit_type is None and right.unit_type is not None:
            rvalue = _build(right)
            return _build(left, type(rvalue)()), rvalue
        if right.unit_type is None and left.unit_type is not None:
            lvalue = _build(left)
            return lvalue, _build(right, type(lvalue)())
        return _build(left), _build(right)

    def __eq__(self, other: object) -> bool:
        try:
            pair = self._compare_pair(other)
        except ExportError:
            return False
        if pair is None:
            return NotImplemented
        return pair[0] == pair[1]

    def __lt__(self, other: object) -> bool:
        pair = self._compare_pair(other)
        if pair is None:
            return NotImplemented
        return pair[0] < pair[1]

    def __repr__(self) -> str:
        try:
            return f"Doc({export(self)!r})"
        except ExportError:
            return f"Doc(<{len(self._builder())} incompatible fragments>)"


def _lift(value: object) -> Doc[Any] | None:
    if isinstance(value, Doc):
        return value
    if isinstance(value, str):
        return text(value)
    if isinstance(value, _LIFTABLE):
        return literal(value)
    return None


def _build(fb: FragmentBuilder, unit: Any = None) -> Any:
    config = get_export_config()
    return fb.build(unit, encoding=config.encoding, default_unit=config.default_unit)


def empty() -> Doc[Any]:
    """The empty document, identity of ``+``."""
    return _EMPTY_DOC


def literal[S](fragment: S) -> Doc[S]:
    """Construct a document comprising a single fragment.

    Examples:
        >>> literal("Hello, ") + literal("World!") == literal("Hello, World!")
        True
        >>> literal("") == empty()
        True
        >>> export(literal(b"\\x00\\x01"))
        b'\\x00\\x01'

    """
    return Doc._make(_FRAGMENT, fragment)


def text(s: str) -> Doc[Any]:
    """Construct a document from a textual literal.

    The literal becomes ``str`` in text documents and is encoded with the
    configured codec in binary ones.

    Example:
        >>> export(text("[") + literal(b"x") + text("]"))
        b'[x]'

    """
    if not isinstance(s, str):
        raise TypeError(f"text() expects str, got {type(s).__name__}")
    return Doc._make(_TEXT, s)


def concat[S](docs: Iterable[Doc[S]]) -> Doc[S]:
    """Concatenate documents in order. Empty input gives ``empty()``."""
    result: Doc[Any] = _EMPTY_DOC
    for doc in docs:
        result = result.append(doc)
    return result


def export[S](doc: Doc[S], unit: S | None = None) -> S:
    """Export a document as a single value, the inverse of ``literal``.

    Args:
        doc: Document to materialize
        unit: Empty value of the fragment type. Inferred from the first
            concrete fragment when omitted; documents without one use
            ``ExportConfig.default_unit``.

    Returns:
        Every fragment of ``doc`` concatenated in construction order

    Raises:
        ExportError: Fragments of incompatible types

    Examples:
        >>> export(literal("al") + literal("ga"))
        'alga'
        >>> export(empty())
        ''
        >>> export(empty(), unit=b"")
        b''

    """
    fb = doc._builder()
    result = _build(fb, unit)
    logger.debug("Exported document: %d fragments, %s", len(fb), type(result).__name__)
    return result


_EMPTY_DOC: Doc[Any] = Doc()


__all__ = [
    "Doc",
    "concat",
    "empty",
    "export",
    "literal",
    "text",
]
