"""Exception classes for graphdoc.

Provides standardized exceptions for error handling throughout graphdoc.
"""

from __future__ import annotations


class GraphDocError(Exception):
    """Base exception for all graphdoc errors.
    
    Subclass this for specific error categories.
    """

    pass


class ExportError(GraphDocError):
    """Error while materializing a document.
    
    Raised when the fragments of a document cannot be combined into a
    single value, e.g. ``str`` and ``bytes`` fragments in one document.
    """

    def __init__(
        self,
        message: str,
        fragment_type: type | None = None,
        unit_type: type | None = None,
    ) -> None:
        """Initialize export error with the offending types.
        
        Args:
            message: Error description
            fragment_type: Type of the fragment that could not be combined
            unit_type: Type of the empty value the export was building
        """
        self.message = message
        self.fragment_type = fragment_type
        self.unit_type = unit_type

        detail = ""
        if fragment_type is not None and unit_type is not None:
            detail = f" ({fragment_type.__name__} fragment in {unit_type.__name__} document)"

        super().__init__(f"{message}{detail}")


class IndentError(GraphDocError, ValueError):
    """Negative indentation count.
    
    Raised by ``indent`` when the active config uses the ``"error"``
    policy for negative counts.
    """

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Indent count must be non-negative, got {count}")


class ConfigError(GraphDocError, ValueError):
    """Invalid export configuration value."""

    def __init__(self, field: str, message: str) -> None:
        """Initialize config error.
        
        Args:
            field: Name of the ExportConfig field
            message: Description of the problem
        """
        self.field = field
        super().__init__(f"ExportConfig.{field}: {message}")
