"""Shared fixtures for the skuscrape test suite."""

import json
import random
import sys
from pathlib import Path

import pytest
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

# Ensure src/ is on the path so "import skuscrape" works when running from repo root.
repo_root = Path(__file__).resolve().parents[1]
src_path = repo_root / "src"
src_str = str(src_path)
if src_str not in sys.path:
    sys.path.insert(0, src_str)


# ---------------------------------------------------------------------------
# Fake Playwright page
# ---------------------------------------------------------------------------

class FakeCDPSession:
    """Records CDP commands sent through ``context.new_cdp_session(page)``."""

    def __init__(self):
        self.sent = []

    def send(self, method, params=None):
        self.sent.append((method, params or {}))
        return {}


class FakeContext:
    def __init__(self):
        self.sessions = []

    def new_cdp_session(self, page):
        session = FakeCDPSession()
        self.sessions.append(session)
        return session


class FakePage:
    """Stand-in for ``playwright.sync_api.Page`` serving canned responses per URL.

    ``routes`` maps a URL to ``{"html": str, "ready": bool, "captcha": bool}``.
    Unknown URLs never become ready.
    """

    def __init__(self, routes=None, query_error=None):
        self.routes = routes or {}
        self.query_error = query_error
        self.current = {}
        self.visited = []
        self.context = FakeContext()
        self.goto_timeouts = []
        self.selector_waits = []
        self.screenshots = []
        self.closed = False

    def goto(self, url, wait_until=None, timeout=None):
        self.visited.append(url)
        self.goto_timeouts.append(timeout)
        self.current = self.routes.get(url, {"ready": False})

    def wait_for_selector(self, selector, timeout=None):
        self.selector_waits.append((selector, timeout))
        if not self.current.get("ready", True):
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for {selector}")

    def query_selector(self, selector):
        if self.query_error is not None:
            raise self.query_error
        if self.current.get("captcha") and selector == "#captcha":
            return object()
        return None

    def content(self):
        return self.current.get("html", "")

    def screenshot(self, path):
        Path(path).write_bytes(b"\x89PNG\r\n\x1a\n")
        self.screenshots.append(path)

    def is_closed(self):
        return self.closed

    def close(self):
        self.closed = True

    @property
    def user_agents_seen(self):
        return [
            params["userAgent"]
            for session in self.context.sessions
            for method, params in session.sent
            if method == "Network.setUserAgentOverride"
        ]


# ---------------------------------------------------------------------------
# HTML builders
# ---------------------------------------------------------------------------

def amazon_html(title="", price="", description=None, reviews=None, rating=None):
    parts = [f'<span id="productTitle">  {title}  </span>']
    if price is not None:
        parts.append(f'<span class="a-price"><span class="a-offscreen">{price}</span></span>')
    if description is not None:
        parts.append(f'<div id="productDescription"><p>{description}</p></div>')
    if reviews is not None:
        parts.append(f'<span id="acrCustomerReviewText">{reviews}</span>')
    if rating is not None:
        parts.append(f'<span class="a-icon-alt">{rating}</span>')
    return "<html><body>" + "\n".join(parts) + "</body></html>"


def walmart_html(title="", price="", description=None, reviews=None, rating=None):
    parts = [f'<h1 data-testid="product-title">{title}</h1>']
    if price is not None:
        parts.append(f'<span class="price-characteristic">{price}</span>')
    if description is not None:
        parts.append(f'<div class="about-desc">{description}</div>')
    if reviews is not None:
        parts.append(
            f'<span class="reviews-header"><span class="visuallyhidden">{reviews}</span></span>'
        )
    if rating is not None:
        parts.append(f'<span class="average-rating">{rating}</span>')
    return "<html><body>" + "\n".join(parts) + "</body></html>"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def fake_page_factory():
    return FakePage


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def recorded_sleeps():
    """A sleep replacement that only records the requested durations."""
    calls = []

    def _sleep(seconds):
        calls.append(seconds)

    _sleep.calls = calls
    return _sleep


@pytest.fixture
def skus_file(tmp_path):
    """Write a ``skus.json`` payload and return its path."""

    def _write(entries, name="skus.json"):
        path = tmp_path / name
        path.write_text(json.dumps({"skus": entries}), encoding="utf-8")
        return path

    return _write
