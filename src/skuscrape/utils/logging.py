"""Centralized logging configuration for skuscrape.

Usage in any module:
    from skuscrape.utils.logging import get_logger
    logger = get_logger(__name__)
    logger.info("Scraping SKU: %s", sku)
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

_CONFIGURED = False

LOG_DIR = Path.cwd() / "logs"
LOG_FILE = LOG_DIR / "skuscrape.log"


class SafeStreamHandler(logging.StreamHandler):
    """StreamHandler that survives consoles unable to encode product titles."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            stream = self.stream
            encoding = getattr(stream, "encoding", None) or "utf-8"
            try:
                stream.write(msg + self.terminator)
            except UnicodeEncodeError:
                safe_msg = msg.encode(encoding, errors="backslashreplace").decode(
                    encoding, errors="backslashreplace"
                )
                stream.write(safe_msg + self.terminator)
            self.flush()
        except Exception:
            self.handleError(record)


class LazyFileHandler(logging.FileHandler):
    """FileHandler that creates its directory with the first record, not at setup."""

    def __init__(self, filename: Path, encoding: str = "utf-8") -> None:
        super().__init__(filename, encoding=encoding, delay=True)
        self._unwritable = False

    def _open(self):
        Path(self.baseFilename).parent.mkdir(parents=True, exist_ok=True)
        return super()._open()

    def emit(self, record: logging.LogRecord) -> None:
        if self._unwritable:
            return
        try:
            super().emit(record)
        except OSError:
            # read-only working directory: console only from here on
            self._unwritable = True
            self.handleError(record)


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
) -> None:
    """Configure the root ``skuscrape`` logger (console + file).

    Only the first call takes effect.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return
    _CONFIGURED = True

    root = logging.getLogger("skuscrape")
    root.setLevel(level)

    fmt = logging.Formatter(
        "%(asctime)s [%(levelname)-7s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = SafeStreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(fmt)
    root.addHandler(console)

    fh = LazyFileHandler(log_file or LOG_FILE)
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(fmt)
    root.addHandler(fh)


def set_level(level: int) -> None:
    """Change the level of the ``skuscrape`` logger and its console handler."""
    setup_logging()
    root = logging.getLogger("skuscrape")
    root.setLevel(level)
    for handler in root.handlers:
        if isinstance(handler, SafeStreamHandler):
            handler.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return a child logger under the ``skuscrape`` namespace.

    Calls :func:`setup_logging` on first use so callers never need to worry
    about initialization order.
    """
    setup_logging()
    return logging.getLogger(name)
