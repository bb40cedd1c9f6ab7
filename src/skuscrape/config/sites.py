"""Per-site page layouts: URL template, readiness selector and field locators."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional

from .settings import CAPTCHA_SELECTOR

FIELDS = ("title", "description", "price", "review_count", "rating")


class Source(str, Enum):
    AMAZON = "Amazon"
    WALMART = "Walmart"

    @classmethod
    def parse(cls, value) -> Optional["Source"]:
        """Map an input ``Type`` value to a Source, or None when unsupported."""
        if value is None:
            return None
        text = str(value).strip().lower()
        for member in cls:
            if member.value.lower() == text:
                return member
        return None


@dataclass(frozen=True)
class FieldLocator:
    selector: str
    default: str = ""


@dataclass(frozen=True)
class SiteProfile:
    source: Source
    url_template: str
    ready_selector: str
    ready_timeout_ms: int
    fields: Dict[str, FieldLocator] = field(default_factory=dict)
    captcha_selector: str = CAPTCHA_SELECTOR

    def url_for(self, identifier: str) -> str:
        return self.url_template.format(sku=identifier)


AMAZON = SiteProfile(
    source=Source.AMAZON,
    url_template="https://www.amazon.com/dp/{sku}",
    ready_selector="span#productTitle",
    ready_timeout_ms=30000,
    fields={
        "title": FieldLocator("span#productTitle"),
        "description": FieldLocator("#productDescription"),
        "price": FieldLocator("span.a-price span.a-offscreen"),
        "review_count": FieldLocator("#acrCustomerReviewText", "0 reviews"),
        "rating": FieldLocator("span.a-icon-alt", "0 stars"),
    },
)

WALMART = SiteProfile(
    source=Source.WALMART,
    url_template="https://www.walmart.com/ip/{sku}",
    ready_selector='[data-testid="product-title"]',
    ready_timeout_ms=60000,
    fields={
        "title": FieldLocator('[data-testid="product-title"]'),
        "description": FieldLocator("div.about-desc"),
        "price": FieldLocator("span.price-characteristic"),
        "review_count": FieldLocator("span.reviews-header span.visuallyhidden", "0 reviews"),
        "rating": FieldLocator("span.average-rating", "0 stars"),
    },
)

SITES: Dict[Source, SiteProfile] = {
    Source.AMAZON: AMAZON,
    Source.WALMART: WALMART,
}


def site_for(source: Source) -> SiteProfile:
    return SITES[source]
