"""
graphdoc — Documents for Graph Export

Immutable text and binary documents with O(1) concatenation, for the
routines that serialize graphs (DOT and friends). Zero runtime dependencies.

Quick Start:
    >>> from graphdoc import brackets, double_quotes, export, literal, new_line
    >>> doc = double_quotes(literal("alga")) + new_line()
    >>> export(doc)
    '"alga"\\n'

    >>> # The same combinators build binary documents
    >>> export(brackets(literal(b"label")))
    b'[label]'

Documents are values: ``+`` concatenates, ``==`` compares exports, and
``export`` may be called any number of times on the same document.
"""

from graphdoc.combinators import brackets, double_quotes, indent, new_line, unlines
from graphdoc.config import (
    ExportConfig,
    export_config_context,
    get_export_config,
    reset_export_config,
    set_export_config,
)
from graphdoc.doc import Doc, concat, empty, export, literal, text
from graphdoc.errors import ConfigError, ExportError, GraphDocError, IndentError

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "Doc",
    "ExportConfig",
    "ExportError",
    "GraphDocError",
    "IndentError",
    "__version__",
    "brackets",
    "concat",
    "double_quotes",
    "empty",
    "export",
    "export_config_context",
    "get_export_config",
    "indent",
    "literal",
    "new_line",
    "reset_export_config",
    "set_export_config",
    "text",
    "unlines",
]
