from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from .config.sites import Source


@dataclass(frozen=True)
class InputItem:
    source: Source
    identifier: str


@dataclass(frozen=True)
class Record:
    """One scraped product, every value kept as the page displays it."""

    identifier: str
    source: str
    title: str
    description: str
    price: str
    review_count: str
    rating: str

    def to_csv_row(self) -> Dict[str, str]:
        return {
            "SKU": self.identifier,
            "Source": self.source,
            "Title": self.title,
            "Description": self.description,
            "Price": self.price,
            "Reviews": self.review_count,
            "Rating": self.rating,
        }
