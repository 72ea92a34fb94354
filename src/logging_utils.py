"""Centralized logging for the course store.

Modules ask for a logger with ``get_logger(__name__)`` and never attach
handlers themselves. The command-line entry point calls ``configure_logging``
once per run: console output is message-only on stderr so diagnostics never
mix with command output on stdout, and a rotating file is added only when a
log directory is configured.
"""
from __future__ import annotations
import logging
import logging.handlers
from pathlib import Path
from typing import List, Optional

ROOT_NAME = "coursedb"

_INSTALLED: List[logging.Handler] = []


def get_logger(name: str = ROOT_NAME) -> logging.Logger:
    """Return the logger ``name`` placed under the ``coursedb`` namespace."""
    if name != ROOT_NAME and not name.startswith(ROOT_NAME + "."):
        name = f"{ROOT_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: str = "WARNING", log_dir: Optional[str] = None) -> logging.Logger:
    """Install console (and optional rotating file) handlers on the root
    ``coursedb`` logger.

    Calling it again replaces the handlers from the previous call instead of
    stacking duplicates.
    """
    root = get_logger(ROOT_NAME)
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    for handler in _INSTALLED:
        root.removeHandler(handler)
        handler.close()
    _INSTALLED.clear()

    ch = logging.StreamHandler()
    ch.setFormatter(logging.Formatter("%(message)s"))
    _INSTALLED.append(ch)

    if log_dir:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        fh = logging.handlers.RotatingFileHandler(
            Path(log_dir) / f"{ROOT_NAME}.log",
            maxBytes=5_000_000, backupCount=5, encoding="utf-8",
        )
        fh.setFormatter(
            logging.Formatter("%(asctime)s - %(levelname)s - %(name)s - %(message)s")
        )
        _INSTALLED.append(fh)

    for handler in _INSTALLED:
        root.addHandler(handler)
    return root
