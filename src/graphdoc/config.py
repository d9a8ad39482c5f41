"""ContextVar-based export configuration for graphdoc.

Provides per-context configuration using Python's ContextVars (PEP 567).
Read by ``export`` when resolving textual literals and by ``indent`` when
it meets a negative count.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and one thread's config never leaks into another.

Usage:
    from graphdoc.config import ExportConfig, export_config_context

    with export_config_context(ExportConfig(encoding="latin-1")):
        data = export(literal(b"") + text("é"))

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Literal

from graphdoc.errors import ConfigError

type NegativeIndentPolicy = Literal["error", "clamp"]

_NEGATIVE_INDENT_POLICIES: frozenset[str] = frozenset({"error", "clamp"})


@dataclass(frozen=True, slots=True)
class ExportConfig:
    """Immutable export configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        encoding: Codec used to turn textual literals (``text``, ``new_line``,
            ``brackets``...) into bytes inside binary documents
        negative_indent: ``"error"`` raises IndentError for a negative count,
            ``"clamp"`` treats it as zero padding
        default_unit: Empty value returned for documents with no concrete
            fragment to fix their type

    """

    encoding: str = "utf-8"
    negative_indent: NegativeIndentPolicy = "error"
    default_unit: Any = ""

    def __post_init__(self) -> None:
        # Trial encode: rejects unknown names and bytes-to-bytes codecs (hex, rot13...)
        try:
            "".encode(self.encoding)
        except (LookupError, TypeError) as e:
            raise ConfigError("encoding", f"not a text codec: {self.encoding!r}") from e
        if self.negative_indent not in _NEGATIVE_INDENT_POLICIES:
            raise ConfigError(
                "negative_indent",
                f"expected 'error' or 'clamp', got {self.negative_indent!r}",
            )
        if not isinstance(self.default_unit, (str, bytes, bytearray, list, tuple)):
            raise ConfigError(
                "default_unit",
                f"unsupported type {type(self.default_unit).__name__}",
            )
        if self.default_unit:
            raise ConfigError("default_unit", "must be an empty value")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ExportConfig":
        """Create ExportConfig from dictionary.

        Only includes keys that are valid ExportConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> ExportConfig.from_dict({"encoding": "ascii", "other": 1}).encoding
            'ascii'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ExportConfig = ExportConfig()

_export_config: ContextVar[ExportConfig] = ContextVar(
    "export_config",
    default=_DEFAULT_CONFIG,
)


def get_export_config() -> ExportConfig:
    """Get the export configuration active in this context."""
    return _export_config.get()


def set_export_config(config: ExportConfig) -> None:
    """Set export configuration for current context.

    Args:
        config: ExportConfig instance to use for this context.

    """
    _export_config.set(config)


def reset_export_config() -> None:
    """Reset to the module-level default configuration."""
    _export_config.set(_DEFAULT_CONFIG)


@contextmanager
def export_config_context(config: ExportConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with export_config_context(ExportConfig(negative_indent="clamp")):
        ...     export(indent(-2, literal("x")))
        'x'

    """
    previous = _export_config.get()
    _export_config.set(config)
    try:
        yield
    finally:
        _export_config.set(previous)


__all__ = [
    "ExportConfig",
    "NegativeIndentPolicy",
    "export_config_context",
    "get_export_config",
    "reset_export_config",
    "set_export_config",
]
