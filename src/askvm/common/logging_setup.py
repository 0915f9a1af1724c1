"""Central logging setup for the project."""
from __future__ import annotations
import logging
import sys
from typing import TextIO

def setup_logging(level: int = logging.WARNING, stream: TextIO | None = None) -> None:
    """
    Configure root logger with sane defaults.

    Logs go to stderr so stdout carries only the answer.

    Args:
        level: Logging level.
        stream: Target stream, defaults to sys.stderr.
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    fmt = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
    handler.setFormatter(logging.Formatter(fmt))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

def level_for(verbosity: int) -> int:
    """Map a -v count to a logging level."""
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING
