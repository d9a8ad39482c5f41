"""Benchmark document concatenation vs repeated string appends.

Compares building a DOT-like body with graphdoc combinators against naive
``+=`` string concatenation and a join-once list.

Run with:
    pytest benchmarks/benchmark_concat.py -v --benchmark-only
"""

try:
    import pytest

    from graphdoc import double_quotes, export, indent, literal, unlines

    @pytest.mark.benchmark(group="concat")
    def test_benchmark_doc_build_and_export(benchmark, edge_pairs):
        """Build with combinators, export once."""

        def build():
            lines = (
                indent(2, double_quotes(literal(a)) + literal(" -> ") + double_quotes(literal(b)))
                for a, b in edge_pairs
            )
            return export(unlines(lines))

        benchmark(build)

    @pytest.mark.benchmark(group="concat")
    def test_benchmark_naive_string_append(benchmark, edge_pairs):
        """Baseline: repeated += on a str."""

        def build():
            out = ""
            for a, b in edge_pairs:
                out += '  "' + a + '" -> "' + b + '"\n'
            return out

        benchmark(build)

    @pytest.mark.benchmark(group="concat")
    def test_benchmark_join_once(benchmark, edge_pairs):
        """Baseline: append to a list, join once."""

        def build():
            parts = []
            for a, b in edge_pairs:
                parts.append(f'  "{a}" -> "{b}"\n')
            return "".join(parts)

        benchmark(build)

    @pytest.mark.benchmark(group="export")
    def test_benchmark_export_deep_document(benchmark, vertex_names):
        """Export a left-nested document built one literal at a time."""
        doc = literal("")
        for name in vertex_names:
            doc = doc + literal(name)

        benchmark(export, doc)

except ImportError:
    pass  # pytest not available
