"""Unit tests for skuscrape.utils.logging."""

import io
import logging

from skuscrape.utils.logging import (
    LazyFileHandler,
    SafeStreamHandler,
    get_logger,
    set_level,
    setup_logging,
)


class TestGetLogger:
    def test_returns_logger(self):
        logger = get_logger("skuscrape.test_module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "skuscrape.test_module"

    def test_consistent_logger(self):
        assert get_logger("skuscrape.same") is get_logger("skuscrape.same")

    def test_setup_logging_idempotent(self):
        setup_logging()
        before = len(logging.getLogger("skuscrape").handlers)
        setup_logging()
        assert len(logging.getLogger("skuscrape").handlers) == before


class TestSetLevel:
    def test_debug_then_back(self):
        set_level(logging.DEBUG)
        root = logging.getLogger("skuscrape")
        assert root.level == logging.DEBUG
        consoles = [h for h in root.handlers if isinstance(h, SafeStreamHandler)]
        assert consoles and all(h.level == logging.DEBUG for h in consoles)
        set_level(logging.INFO)
        assert root.level == logging.INFO


class TestSafeStreamHandler:
    def _record(self, msg):
        return logging.LogRecord(
            name="test", level=logging.INFO, pathname="test.py",
            lineno=1, msg=msg, args=(), exc_info=None,
        )

    def test_emits_message(self):
        stream = io.StringIO()
        SafeStreamHandler(stream).emit(self._record("Scraping SKU: B000123 from Amazon"))
        assert "B000123" in stream.getvalue()

    def test_unencodable_title(self):
        raw = io.BytesIO()
        stream = io.TextIOWrapper(raw, encoding="ascii")
        SafeStreamHandler(stream).emit(self._record("Widget ™ café"))
        stream.flush()
        assert b"\\u2122" in raw.getvalue()


class TestLazyFileHandler:
    def _record(self, msg):
        return logging.LogRecord(
            name="test", level=logging.INFO, pathname="test.py",
            lineno=1, msg=msg, args=(), exc_info=None,
        )

    def test_directory_created_on_first_record(self, tmp_path):
        target = tmp_path / "logs" / "skuscrape.log"
        handler = LazyFileHandler(target)
        try:
            assert not target.parent.exists()
            handler.emit(self._record("Scraping SKU: B1 from Amazon"))
            assert "B1" in target.read_text(encoding="utf-8")
        finally:
            handler.close()

    def test_configured_file_handler_is_lazy(self):
        get_logger("skuscrape.lazy")
        handlers = [
            h for h in logging.getLogger("skuscrape").handlers
            if isinstance(h, logging.FileHandler)
        ]
        assert handlers
        assert all(isinstance(h, LazyFileHandler) for h in handlers)

    def test_unwritable_directory_is_skipped(self, tmp_path, monkeypatch):
        monkeypatch.setattr(logging, "raiseExceptions", False)
        blocker = tmp_path / "logs"
        blocker.write_text("not a directory", encoding="utf-8")
        handler = LazyFileHandler(blocker / "skuscrape.log")
        try:
            handler.emit(self._record("first"))
            handler.emit(self._record("second"))
        finally:
            handler.close()
        assert blocker.read_text(encoding="utf-8") == "not a directory"
