"""Sequential scraping run: one tab, one SKU at a time, randomized spacing."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence

from ..config.settings import MAX_DELAY_MS, MIN_DELAY_MS
from ..config.sites import site_for
from ..errors import (
    BrowserSessionError,
    CaptchaDetectedError,
    ItemError,
    WriteFailure,
)
from ..models import InputItem, Record
from ..processing.extract import build_record, extract_fields
from ..scraping.captcha import is_captcha
from ..scraping.fetcher import PageFetcher
from ..scraping.user_agents import UserAgentRotator
from ..storage.error_log import ErrorLog
from ..storage.repository import RecordWriter
from ..utils.logging import get_logger

logger = get_logger(__name__)


def _close_quietly(what: str, close: Callable[[], None]) -> None:
    try:
        close()
    except Exception as exc:
        logger.error("Could not close %s: %s", what, exc)


class RunState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    DRAINING = "draining"
    DONE = "done"


@dataclass
class RunSummary:
    processed: int = 0
    written: int = 0
    failed: int = 0
    aborted: bool = False


class Orchestrator:
    def __init__(
        self,
        fetcher: PageFetcher,
        writer: RecordWriter,
        error_log: ErrorLog,
        rng: Optional[random.Random] = None,
        sleep: Optional[Callable[[float], None]] = None,
        user_agents: Optional[UserAgentRotator] = None,
    ) -> None:
        self.fetcher = fetcher
        self.writer = writer
        self.error_log = error_log
        self.rng = rng or random.Random()
        self.sleep = sleep or time.sleep
        self.user_agents = user_agents or UserAgentRotator(rng=self.rng)
        self.state = RunState.IDLE
        self.pending: List[Record] = []

    def next_delay(self) -> float:
        """Seconds to wait before the next SKU, uniform in [2, 4)."""
        span = MAX_DELAY_MS - MIN_DELAY_MS
        return (MIN_DELAY_MS + int(self.rng.random() * span)) / 1000.0

    def scrape_item(self, item: InputItem) -> Record:
        site = site_for(item.source)
        self.fetcher.set_user_agent(self.user_agents.choose())
        self.fetcher.load(item, site)

        if is_captcha(self.fetcher.page, site.captcha_selector):
            raise CaptchaDetectedError(item.identifier, item.source.value)

        fields = extract_fields(self.fetcher.content(), site)
        return build_record(item, fields)

    def _process(self, item: InputItem) -> Optional[Record]:
        try:
            return self.scrape_item(item)
        except BrowserSessionError:
            raise
        except ItemError as exc:
            self.error_log.write(str(exc))
        except Exception as exc:
            logger.debug("Unhandled error for SKU %s", item.identifier, exc_info=True)
            self.error_log.write(f"Error scraping SKU {item.identifier}: {exc}")
        return None

    def flush(self) -> int:
        if not self.pending:
            return 0
        try:
            added = self.writer.append(self.pending)
        except WriteFailure as exc:
            logger.error("Error writing to CSV: %s", exc)
            return 0
        self.pending = []
        return added

    def run(self, items: Sequence[InputItem]) -> RunSummary:
        summary = RunSummary()
        self.state = RunState.RUNNING
        try:
            self.fetcher.open()
            for item in items:
                logger.info("Scraping SKU: %s from %s", item.identifier, item.source.value)
                summary.processed += 1
                record = self._process(item)
                if record is None:
                    summary.failed += 1
                else:
                    self.pending.append(record)
                    summary.written += self.flush()
                self.sleep(self.next_delay())
        except Exception as exc:
            summary.aborted = True
            self.error_log.write(f"Error during scraping: {exc}")
        finally:
            self.state = RunState.DRAINING
            try:
                summary.written += self.flush()
                if self.pending:
                    logger.error("%d records could not be written", len(self.pending))
                _close_quietly("output table", self.writer.close)
                _close_quietly("error log", self.error_log.close)
                _close_quietly("browser", self.fetcher.close)
            finally:
                self.state = RunState.DONE

        logger.info("%d records written to %s", summary.written, self.writer.path.name)
        return summary
