"""Tests for graphdoc utility modules."""

import logging

from graphdoc import export, literal
from graphdoc.utils import get_logger


class TestGetLogger:
    """Tests for get_logger namespacing."""

    def test_prefixes_bare_names(self) -> None:
        assert get_logger("combinators").name == "graphdoc.combinators"

    def test_keeps_package_names(self) -> None:
        assert get_logger("graphdoc.doc").name == "graphdoc.doc"
        assert get_logger("graphdoc").name == "graphdoc"

    def test_does_not_match_lookalike_prefix(self) -> None:
        assert get_logger("graphdocx").name == "graphdoc.graphdocx"

    def test_returns_stdlib_logger(self) -> None:
        assert isinstance(get_logger("x"), logging.Logger)

    def test_namespace_root_has_null_handler(self) -> None:
        get_logger("doc")
        handlers = logging.getLogger("graphdoc").handlers
        assert sum(isinstance(h, logging.NullHandler) for h in handlers) == 1

    def test_null_handler_installed_once(self) -> None:
        for _ in range(3):
            get_logger("combinators")
        handlers = logging.getLogger("graphdoc").handlers
        assert sum(isinstance(h, logging.NullHandler) for h in handlers) == 1


class TestExportLogging:
    """export() reports its work at DEBUG."""

    def test_export_logs_fragment_count(self, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger="graphdoc")

        export(literal("a") + literal("b") + literal(""))

        messages = [r.getMessage() for r in caplog.records if r.name == "graphdoc.doc"]
        assert "Exported document: 2 fragments, str" in messages

    def test_nothing_logged_above_debug(self, caplog) -> None:
        caplog.set_level(logging.INFO, logger="graphdoc")

        export(literal("a"))

        assert not [r for r in caplog.records if r.name.startswith("graphdoc")]
