import argparse
import logging
from pathlib import Path
from typing import List, Optional

from ..config.settings import ERROR_LOG_FILE, OUTPUT_CSV, SCREENSHOT_DIR, SKUS_FILE
from ..errors import InputFormatError
from ..ingestion.orchestrator import Orchestrator
from ..processing.read import read_skus
from ..scraping.fetcher import PageFetcher
from ..storage.error_log import ErrorLog
from ..storage.repository import RecordWriter
from ..utils.logging import get_logger, set_level

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skuscrape",
        description="Scrape Amazon / Walmart product pages listed in a SKU file into a CSV",
    )
    parser.add_argument("--input", type=Path, default=SKUS_FILE, help="SKU list (JSON)")
    parser.add_argument("--output", type=Path, default=OUTPUT_CSV, help="CSV to append products to")
    parser.add_argument("--error-log", type=Path, default=ERROR_LOG_FILE, help="Plain-text failure log")
    parser.add_argument(
        "--screenshot-dir", type=Path, default=SCREENSHOT_DIR, help="Where error_<sku>.png files go"
    )
    parser.add_argument("--headful", action="store_true", help="Show the browser window")
    parser.add_argument("--verbose", action="store_true", help="Debug logging on the console")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        set_level(logging.DEBUG)

    try:
        items = read_skus(args.input)
    except InputFormatError as e:
        logger.error("Cannot read SKU list: %s", e)
        return 1

    orchestrator = Orchestrator(
        fetcher=PageFetcher(headless=not args.headful, screenshot_dir=args.screenshot_dir),
        writer=RecordWriter(args.output),
        error_log=ErrorLog(args.error_log),
    )
    summary = orchestrator.run(items)
    return 1 if summary.aborted else 0
