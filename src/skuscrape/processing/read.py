import json
from pathlib import Path
from typing import Any, List, Union

from ..config.settings import SKUS_FILE
from ..config.sites import Source
from ..errors import InputFormatError
from ..models import InputItem
from ..utils.logging import get_logger

logger = get_logger(__name__)


def _clean_sku(value: Any) -> str:
    if value is None or isinstance(value, bool):
        return ""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def parse_skus(payload: Any) -> List[InputItem]:
    """Turn a decoded ``{"skus": [{"Type": ..., "SKU": ...}]}`` document into items."""
    if not isinstance(payload, dict) or not isinstance(payload.get("skus"), list):
        raise InputFormatError('expected an object with a "skus" list')

    items: List[InputItem] = []
    for idx, entry in enumerate(payload["skus"]):
        if not isinstance(entry, dict):
            raise InputFormatError(f"skus[{idx}] is not an object")

        raw_type = entry.get("Type")
        sku = _clean_sku(entry.get("SKU"))
        if not raw_type or not str(raw_type).strip():
            raise InputFormatError(f'skus[{idx}] has no "Type"')
        if not sku:
            raise InputFormatError(f'skus[{idx}] has no "SKU"')

        source = Source.parse(raw_type)
        if source is None:
            logger.warning("Unsupported source %r for SKU %s, skipping", raw_type, sku)
            continue
        items.append(InputItem(source=source, identifier=sku))
    return items


def read_skus(path: Union[str, Path, None] = None) -> List[InputItem]:
    """Load the SKU work list, in file order."""
    path = Path(path) if path is not None else SKUS_FILE
    try:
        text = path.read_text(encoding="utf-8-sig")
    except FileNotFoundError as e:
        raise InputFormatError(f"SKU file not found: {path}") from e
    except OSError as e:
        raise InputFormatError(f"SKU file unreadable: {path} ({e})") from e

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise InputFormatError(f"SKU file is not valid JSON: {path} ({e})") from e

    items = parse_skus(payload)
    logger.info("Loaded %d SKUs from %s", len(items), path.name)
    return items
