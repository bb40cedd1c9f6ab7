"""Exception hierarchy for a scraping run.

``InputFormatError`` and ``BrowserSessionError`` end the run. The per-item
errors are caught by the orchestrator and turned into one error-log line
each; their ``str()`` is that line.
"""

from __future__ import annotations

from typing import Optional


class ScrapeError(Exception):
    """Base class for every error raised by skuscrape."""


class InputFormatError(ScrapeError):
    """The SKU input file is missing or malformed."""


class BrowserSessionError(ScrapeError):
    """The browser, context or tab is no longer usable."""


class WriteFailure(ScrapeError):
    """Records could not be appended to the output table."""


class ItemError(ScrapeError):
    """A recoverable failure tied to one SKU."""

    def __init__(self, identifier: str, source: str, detail: Optional[str] = None) -> None:
        self.identifier = identifier
        self.source = source
        self.detail = detail
        super().__init__(self.describe())

    def describe(self) -> str:
        return f"Error scraping SKU {self.identifier}: {self.detail}"


class NavigationTimeoutError(ItemError):
    """The ready selector did not show up before the site's timeout."""

    def __init__(
        self,
        identifier: str,
        source: str,
        detail: Optional[str] = None,
        screenshot_path=None,
    ) -> None:
        self.screenshot_path = screenshot_path
        super().__init__(identifier, source, detail)

    def describe(self) -> str:
        return f"Element not found for SKU {self.identifier}"


class CaptchaDetectedError(ItemError):
    def describe(self) -> str:
        return f"CAPTCHA detected on {self.source} for SKU {self.identifier}"


class FieldExtractionFault(ItemError):
    """Title or price came back empty, so no record can be built."""

    def describe(self) -> str:
        missing = self.detail or "title or price"
        return f"Missing {missing} for SKU {self.identifier}"
