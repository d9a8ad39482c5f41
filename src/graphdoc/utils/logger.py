"""Library logging for graphdoc.

Every graphdoc logger lives under the ``graphdoc`` namespace. The namespace
root carries a NullHandler, so applications that never configure logging
see no "No handlers could be found" noise or stray stderr output from the
DEBUG records emitted during export. Applications that do configure logging
receive the records through normal propagation.

Example:
    >>> from graphdoc.utils.logger import get_logger
    >>> get_logger("combinators").name
    'graphdoc.combinators'
"""

from __future__ import annotations

import logging

_ROOT = "graphdoc"


def _install_null_handler() -> None:
    root = logging.getLogger(_ROOT)
    if not any(isinstance(h, logging.NullHandler) for h in root.handlers):
        root.addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``graphdoc`` namespace.

    Bare names are prefixed (``"doc"`` becomes ``"graphdoc.doc"``); names
    already in the namespace are used as-is.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance
    """
    _install_null_handler()
    if not (name == _ROOT or name.startswith(f"{_ROOT}.")):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
