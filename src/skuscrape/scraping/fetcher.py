from __future__ import annotations

import re
from pathlib import Path
from typing import Optional, Union

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError
from playwright.sync_api import sync_playwright

from ..config.settings import SCREENSHOT_DIR
from ..config.sites import SiteProfile
from ..errors import BrowserSessionError, NavigationTimeoutError
from ..models import InputItem
from ..utils.logging import get_logger

logger = get_logger(__name__)

_UNSAFE_NAME_RE = re.compile(r"[^\w.-]")


class PageFetcher:
    """One Chromium tab reused for every SKU of a run."""

    def __init__(
        self,
        headless: bool = True,
        screenshot_dir: Union[str, Path] = SCREENSHOT_DIR,
        page=None,
    ) -> None:
        self.headless = headless
        self.screenshot_dir = Path(screenshot_dir)
        self._pw = None
        self._browser = None
        self._page = page
        self._cdp = None

    def __enter__(self) -> "PageFetcher":
        return self.open()

    def __exit__(self, *exc) -> None:
        self.close()

    def open(self) -> "PageFetcher":
        if self._page is not None:
            return self
        try:
            self._pw = sync_playwright().start()
            self._browser = self._pw.chromium.launch(headless=self.headless)
            self._page = self._browser.new_page()
        except PlaywrightError as exc:
            self.close()
            raise BrowserSessionError(f"browser failed to start: {exc}") from exc
        logger.debug("Browser tab opened (headless=%s)", self.headless)
        return self

    def close(self) -> None:
        try:
            if self._browser is not None:
                self._browser.close()
            elif self._page is not None and not self._page.is_closed():
                self._page.close()
        except PlaywrightError as exc:
            logger.warning("Browser did not close cleanly: %s", exc)
        finally:
            pw, self._pw = self._pw, None
            self._browser = None
            self._page = None
            self._cdp = None
            if pw is not None:
                pw.stop()

    def is_alive(self) -> bool:
        if self._page is None or self._page.is_closed():
            return False
        if self._browser is not None and not self._browser.is_connected():
            return False
        return True

    @property
    def page(self):
        if not self.is_alive():
            raise BrowserSessionError("browser tab is closed")
        return self._page

    def set_user_agent(self, user_agent: str) -> None:
        """Switch the tab's identity: request header and navigator.userAgent alike."""
        page = self.page
        if self._cdp is None:
            self._cdp = page.context.new_cdp_session(page)
        self._cdp.send("Network.setUserAgentOverride", {"userAgent": user_agent})

    def screenshot_path(self, identifier: str) -> Path:
        return self.screenshot_dir / f"error_{_UNSAFE_NAME_RE.sub('_', identifier)}.png"

    def screenshot(self, identifier: str) -> Optional[Path]:
        path = self.screenshot_path(identifier)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            self._page.screenshot(path=str(path))
        except (PlaywrightError, OSError) as exc:
            logger.warning("Screenshot for SKU %s failed: %s", identifier, exc)
            return None
        return path

    def load(self, item: InputItem, site: SiteProfile) -> None:
        """Navigate to ``item``'s product page and wait until it is ready.

        Raises NavigationTimeoutError (after saving a screenshot) when the
        ready selector does not appear in time.
        """
        page = self.page
        url = site.url_for(item.identifier)
        try:
            page.goto(url, wait_until="domcontentloaded", timeout=site.ready_timeout_ms)
            page.wait_for_selector(site.ready_selector, timeout=site.ready_timeout_ms)
        except PlaywrightTimeoutError as exc:
            shot = self.screenshot(item.identifier)
            raise NavigationTimeoutError(
                item.identifier, site.source.value, detail=str(exc), screenshot_path=shot
            ) from exc
        except PlaywrightError as exc:
            if not self.is_alive():
                raise BrowserSessionError(f"browser tab lost while loading {url}: {exc}") from exc
            raise

    def content(self) -> str:
        return self.page.content()
