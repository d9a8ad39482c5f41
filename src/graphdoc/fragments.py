"""FragmentBuilder for O(n) document materialization.

Appends fragments to a list, combines them once at the end: O(n) total vs
O(n²) for repeated concatenation. Generalizes the join-once StringBuilder
pattern from ``str`` to any fragment type.

Textual literals (added with ``append_text``) are kept unresolved until
``build`` knows the fragment type, then converted: kept as-is for text,
encoded for bytes, passed to the type's constructor otherwise.

Thread Safety:
FragmentBuilder instances are local to each export() call.
No shared mutable state.

"""

from __future__ import annotations

import functools
import itertools
import operator
from typing import Any

from graphdoc.errors import ExportError


class FragmentBuilder:
    """Efficient fragment accumulator.

    Usage:
            >>> fb = FragmentBuilder()
            >>> _ = fb.append(b"al").append_text("-").append(b"ga")
            >>> fb.build(encoding="ascii")
            b'al-ga'

    """

    __slots__ = ("_parts", "_texts", "_unit_type")

    def __init__(self) -> None:
        self._parts: list[Any] = []
        # Indexes into _parts holding unresolved textual literals
        self._texts: list[int] = []
        self._unit_type: type | None = None

    def append(self, fragment: Any) -> FragmentBuilder:
        """Append a concrete fragment.

        The first concrete fragment fixes the inferred fragment type, even
        when it is empty. Empty fragments are otherwise skipped.

        Returns:
            self for method chaining
        """
        if self._unit_type is None:
            self._unit_type = type(fragment)
        if _nonempty(fragment):
            self._parts.append(fragment)
        return self

    def append_text(self, s: str) -> FragmentBuilder:
        """Append a textual literal whose type is resolved by ``build``.

        Returns:
            self for method chaining
        """
        if s:
            self._texts.append(len(self._parts))
            self._parts.append(s)
        return self

    @property
    def unit_type(self) -> type | None:
        """Fragment type inferred from the first concrete fragment, if any."""
        return self._unit_type

    def build(self, unit: Any = None, *, encoding: str = "utf-8", default_unit: Any = "") -> Any:
        """Combine all parts into the final value.

        Args:
            unit: Empty value of the fragment type; inferred when None
            encoding: Codec for textual literals in bytes-like documents
            default_unit: Unit used when nothing fixes the fragment type

        Returns:
            Concatenation of every appended part, in order

        Raises:
            ExportError: Parts cannot be combined with the unit's type
        """
        if unit is None:
            unit = self._infer_unit(default_unit)
        elif _nonempty(unit):
            raise ExportError("Export unit must be an empty value", unit_type=type(unit))

        parts = self._resolve_texts(type(unit), encoding)
        if not parts:
            # Never hand out a shared mutable unit (e.g. the configured default)
            return unit.copy() if isinstance(unit, (list, bytearray)) else unit
        if isinstance(unit, (str, bytes, bytearray)):
            try:
                return unit.join(parts)
            except TypeError as e:
                bad = next((p for p in parts if not _joinable(unit, p)), None)
                raise ExportError(
                    "Cannot combine fragments",
                    type(bad) if bad is not None else None,
                    type(unit),
                ) from e
        if isinstance(unit, (list, tuple)):
            for part in parts:
                if not isinstance(part, (list, tuple)):
                    raise ExportError("Cannot combine fragments", type(part), type(unit))
            return type(unit)(itertools.chain.from_iterable(parts))
        try:
            return functools.reduce(operator.add, parts, unit)
        except TypeError as e:
            raise ExportError("Cannot combine fragments", unit_type=type(unit)) from e

    def _infer_unit(self, default_unit: Any) -> Any:
        if self._unit_type is None:
            return default_unit
        try:
            return self._unit_type()
        except TypeError as e:
            raise ExportError(
                f"Cannot infer an empty {self._unit_type.__name__}; pass unit explicitly"
            ) from e

    def _resolve_texts(self, unit_type: type, encoding: str) -> list[Any]:
        if not self._texts or issubclass(unit_type, str):
            return self._parts
        parts = list(self._parts)
        for index in self._texts:
            s = parts[index]
            try:
                if issubclass(unit_type, (bytes, bytearray)):
                    parts[index] = unit_type(s, encoding)
                else:
                    parts[index] = unit_type(s)
            except (LookupError, TypeError, ValueError) as e:
                raise ExportError("Cannot convert textual literal", str, unit_type) from e
        return parts

    def __len__(self) -> int:
        """Return number of non-empty parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        """Return True if any non-empty parts have been appended."""
        return bool(self._parts)


def _nonempty(value: Any) -> bool:
    # Containers are empty by length; other monoids by equality with their unit
    try:
        return len(value) > 0
    except TypeError:
        pass
    try:
        return value != type(value)()
    except TypeError:
        return True


def _joinable(unit: str | bytes | bytearray, part: Any) -> bool:
    if isinstance(unit, str):
        return isinstance(part, str)
    return isinstance(part, (bytes, bytearray, memoryview))
