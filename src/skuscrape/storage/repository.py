from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Union

import pandas as pd

from ..config.settings import OUTPUT_COLUMNS, OUTPUT_CSV
from ..errors import WriteFailure
from ..models import Record
from ..utils.logging import get_logger

logger = get_logger(__name__)


def records_to_frame(records: Iterable[Record]) -> pd.DataFrame:
    rows = [r.to_csv_row() for r in records]
    return pd.DataFrame(rows, columns=OUTPUT_COLUMNS, dtype=str)


class RecordWriter:
    """Append-only CSV table of scraped products.

    The header goes in only when the file is new or empty, so earlier rows
    (from this run or previous ones) are never rewritten.
    """

    def __init__(self, path: Union[str, Path] = OUTPUT_CSV) -> None:
        self.path = Path(path)
        self._handle = None
        self._needs_header = True
        self.rows_written = 0

    def __enter__(self) -> "RecordWriter":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _open(self):
        if self._handle is None:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._needs_header = not self.path.exists() or self.path.stat().st_size == 0
            self._handle = self.path.open("a", newline="", encoding="utf-8")
        return self._handle

    def append(self, records: Iterable[Record]) -> int:
        """Write ``records`` and flush. Returns the number of rows added."""
        df = records_to_frame(records)
        if df.empty:
            return 0
        try:
            handle = self._open()
            df.to_csv(handle, index=False, header=self._needs_header, lineterminator="\n")
            handle.flush()
        except OSError as e:
            raise WriteFailure(f"could not append to {self.path}: {e}") from e
        self._needs_header = False
        self.rows_written += len(df)
        return len(df)

    def close(self) -> None:
        if self._handle is not None:
            try:
                self._handle.close()
            except OSError as e:
                logger.error("Could not close %s: %s", self.path.name, e)
            self._handle = None


def read_records(path: Union[str, Path, None] = None) -> Optional[pd.DataFrame]:
    """Load a product table back as strings; None when it does not exist."""
    path = Path(path) if path is not None else OUTPUT_CSV
    if not path.exists():
        return None
    return pd.read_csv(path, dtype=str, keep_default_na=False, encoding="utf-8")
