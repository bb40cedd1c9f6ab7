from pathlib import Path

BASE_DIR = Path.cwd()

SKUS_FILE = BASE_DIR / "skus.json"
OUTPUT_CSV = BASE_DIR / "product_data.csv"
ERROR_LOG_FILE = BASE_DIR / "errors.log"
SCREENSHOT_DIR = BASE_DIR

OUTPUT_COLUMNS = ["SKU", "Source", "Title", "Description", "Price", "Reviews", "Rating"]

# Inter-request delay, milliseconds, half-open range [min, max)
MIN_DELAY_MS = 2000
MAX_DELAY_MS = 4000

CAPTCHA_SELECTOR = "#captcha"

USER_AGENTS = [
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_3) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/80.0.3987.122 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36 Edge/91.0.864.59",
]
