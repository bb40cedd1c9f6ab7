"""Field extraction from a loaded product page.

Every field is read on its own: a missing element, an element with no text
and a selector that blows up all end in the field's default. Only title and
price decide whether the page produced a record.
"""

from __future__ import annotations

from typing import Dict, Optional

from bs4 import BeautifulSoup

from ..config.sites import FIELDS, FieldLocator, SiteProfile
from ..errors import FieldExtractionFault
from ..models import InputItem, Record
from ..utils.logging import get_logger

logger = get_logger(__name__)

REQUIRED_FIELDS = ("title", "price")


def _text_of(soup: BeautifulSoup, locator: FieldLocator) -> Optional[str]:
    el = soup.select_one(locator.selector)
    if el is None:
        return None
    return el.get_text().strip()


def extract_field(soup: BeautifulSoup, name: str, locator: FieldLocator) -> str:
    try:
        text = _text_of(soup, locator)
    except Exception as exc:
        logger.debug("Locator %r for %s failed: %s", locator.selector, name, exc)
        text = None
    return text or locator.default


def extract_fields(html: str, site: SiteProfile) -> Dict[str, str]:
    """Return ``{field: text}`` for every field of ``site``'s locator table."""
    soup = BeautifulSoup(html or "", "lxml")
    return {name: extract_field(soup, name, site.fields[name]) for name in FIELDS}


def build_record(item: InputItem, fields: Dict[str, str]) -> Record:
    missing = [name for name in REQUIRED_FIELDS if not fields.get(name)]
    if missing:
        raise FieldExtractionFault(
            item.identifier, item.source.value, detail=" and ".join(missing)
        )

    return Record(
        identifier=item.identifier,
        source=item.source.value,
        title=fields["title"],
        description=fields.get("description", ""),
        price=fields["price"],
        review_count=fields.get("review_count", "0 reviews"),
        rating=fields.get("rating", "0 stars"),
    )
