"""Property-based tests for documents using Hypothesis.

These tests verify the algebra every document must obey:
1. Concatenation is associative with empty() as two-sided identity
2. export inverts literal
3. literal turns fragment concatenation into document concatenation
4. Re-wrapping an export changes nothing
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from graphdoc import Doc, brackets, double_quotes, empty, export, indent, literal, text, unlines

fragments = st.text(max_size=8)

# Documents built from random concatenation trees of literals and textual literals
leaves = st.one_of(st.just(empty()), fragments.map(literal), fragments.map(text))
docs = st.recursive(
    leaves,
    lambda children: st.tuples(children, children).map(lambda pair: pair[0] + pair[1]),
    max_leaves=16,
)


def _fragments_of(doc: Doc) -> str:
    return "".join(value for _, value in doc.leaves())


class TestMonoidLaws:
    """Concatenation forms a monoid under export equality."""

    @given(a=docs, b=docs, c=docs)
    @settings(max_examples=100)
    def test_associativity(self, a: Doc, b: Doc, c: Doc) -> None:
        assert export((a + b) + c) == export(a + (b + c))

    @given(a=docs)
    def test_left_identity(self, a: Doc) -> None:
        assert export(empty() + a) == export(a)

    @given(a=docs)
    def test_right_identity(self, a: Doc) -> None:
        assert export(a + empty()) == export(a)


class TestLiteralExport:
    """export and literal are inverses."""

    @given(value=st.text())
    def test_export_inverts_literal_text(self, value: str) -> None:
        assert export(literal(value)) == value

    @given(value=st.binary())
    def test_export_inverts_literal_bytes(self, value: bytes) -> None:
        assert export(literal(value)) == value

    @given(value=st.lists(st.integers()))
    def test_export_inverts_literal_lists(self, value: list[int]) -> None:
        assert export(literal(value)) == value

    @given(x=st.text(), y=st.text())
    def test_homomorphism_text(self, x: str, y: str) -> None:
        assert export(literal(x) + literal(y)) == x + y

    @given(x=st.binary(), y=st.binary())
    def test_homomorphism_bytes(self, x: bytes, y: bytes) -> None:
        assert export(literal(x) + literal(y)) == x + y

    @given(d=docs)
    def test_round_trip(self, d: Doc) -> None:
        assert export(literal(export(d))) == export(d)
        assert literal(export(d)) == d


class TestExportOrder:
    """Export reproduces the fragments in construction order."""

    @given(d=docs)
    def test_export_matches_leaves(self, d: Doc) -> None:
        assert export(d) == _fragments_of(d)

    @given(values=st.lists(fragments, max_size=20))
    def test_left_fold_order(self, values: list[str]) -> None:
        doc = empty()
        for value in values:
            doc = doc + literal(value)
        assert export(doc) == "".join(values)

    @given(values=st.lists(fragments, max_size=20))
    def test_right_fold_order(self, values: list[str]) -> None:
        doc = empty()
        for value in reversed(values):
            doc = literal(value) + doc
        assert export(doc) == "".join(values)


class TestCombinatorProperties:
    @given(d=docs)
    def test_brackets(self, d: Doc) -> None:
        assert export(brackets(d)) == f"[{export(d)}]"

    @given(d=docs)
    def test_double_quotes(self, d: Doc) -> None:
        assert export(double_quotes(d)) == f'"{export(d)}"'

    @given(n=st.integers(min_value=0, max_value=64), d=docs)
    def test_indent(self, n: int, d: Doc) -> None:
        assert export(indent(n, d)) == " " * n + export(d)

    @given(ds=st.lists(docs, max_size=8))
    def test_unlines(self, ds: list[Doc]) -> None:
        assert export(unlines(ds)) == "".join(export(d) + "\n" for d in ds)

    @given(d=docs)
    def test_combinators_leave_argument_unchanged(self, d: Doc) -> None:
        before = export(d)
        brackets(d)
        double_quotes(d)
        indent(2, d)
        unlines([d, d])
        assert export(d) == before
