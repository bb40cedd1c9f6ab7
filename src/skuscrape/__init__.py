"""skuscrape: Amazon / Walmart product-page scraper driven by a SKU list.

Public API surface; import submodules directly for full access:
  skuscrape.config.sites           per-site URL templates and field locators
  skuscrape.processing.read        SKU list loading
  skuscrape.processing.extract     field extraction from page HTML
  skuscrape.scraping.fetcher       the single Playwright tab
  skuscrape.storage.repository     append-only product CSV
  skuscrape.ingestion.orchestrator  the sequential run
  skuscrape.app.cli                CLI entry point
"""

from .processing.read import read_skus
from .processing.extract import extract_fields
from .ingestion.orchestrator import Orchestrator, RunState, RunSummary


def main():
    """CLI entry point."""
    from .app.main import main as _main
    return _main()


__all__ = [
    "read_skus",
    "extract_fields",
    "Orchestrator",
    "RunState",
    "RunSummary",
    "main",
]
