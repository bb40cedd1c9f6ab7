from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Union

from ..config.settings import ERROR_LOG_FILE
from ..utils.logging import get_logger

logger = get_logger(__name__)


class ErrorLog:
    """Plain-text failure ledger: one timestamped line per skipped SKU."""

    def __init__(self, path: Union[str, Path] = ERROR_LOG_FILE) -> None:
        self.path = Path(path)
        self._fp = None
        self.entries = 0

    def __enter__(self) -> "ErrorLog":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def write(self, message: str) -> None:
        logger.error(message)
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {message}".replace("\n", " ")
        try:
            if self._fp is None:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self._fp = self.path.open("a", encoding="utf-8")
            self._fp.write(line + "\n")
            self._fp.flush()
        except OSError as e:
            logger.warning("Could not write to %s: %s", self.path.name, e)
            return
        self.entries += 1

    def close(self) -> None:
        if self._fp is not None:
            self._fp.close()
            self._fp = None
