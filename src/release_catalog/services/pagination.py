"""Page-boundary math and navigation links for collection endpoints."""

import math
import re
from dataclasses import dataclass

from starlette.datastructures import URL

DEFAULT_PER_PAGE = 10
MAX_PER_PAGE = 100

_LEADING_INT = re.compile(r"\s*([+-]?)(\d+)")

# Largest value a SQLite INTEGER can hold; longer digit runs saturate here
MAX_COERCED_INT = 2**63 - 1


def coerce_int(value: str | None) -> int:
    """Convert a raw query value to an integer, leniently.

    Uses the leading signed integer of the string and falls back to 0 when
    there is none, so "12abc" is 12 and "abc" is 0. Magnitudes beyond
    MAX_COERCED_INT saturate at it, keeping the sign.
    """
    if value is None:
        return 0
    match = _LEADING_INT.match(value)
    if match is None:
        return 0
    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    if len(digits) > len(str(MAX_COERCED_INT)):
        magnitude = MAX_COERCED_INT
    else:
        magnitude = min(int(digits), MAX_COERCED_INT)
    return -magnitude if sign == "-" else magnitude


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


@dataclass(frozen=True)
class PageRequest:
    """Normalized page and page size requested by a caller."""

    page: int
    per_page: int

    @classmethod
    def from_params(
        cls,
        page: str | None,
        per_page: str | None,
        default_per_page: int = DEFAULT_PER_PAGE,
        max_per_page: int = MAX_PER_PAGE,
    ) -> "PageRequest":
        """Clamp raw page parameters.

        Non-positive or missing pages become 1. A missing or blank per_page
        uses the default; anything else is clamped to [1, max_per_page].
        """
        effective_page = max(coerce_int(page), 1)
        if _is_blank(per_page):
            effective_per_page = default_per_page
        else:
            effective_per_page = min(max(coerce_int(per_page), 1), max_per_page)
        return cls(page=effective_page, per_page=effective_per_page)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page

    @property
    def limit(self) -> int:
        return self.per_page

    def with_total(self, total_count: int) -> "PageInfo":
        """Attach the filtered record count to this request."""
        return PageInfo(page=self.page, per_page=self.per_page, total_count=total_count)


@dataclass(frozen=True)
class PageInfo:
    """Page metadata for one response, computed against the full filtered set."""

    page: int
    per_page: int
    total_count: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.per_page)

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def last_page(self) -> int:
        return max(self.total_pages, 1)

    def links(self, url: URL | str) -> dict[str, str]:
        """Build navigation links from the request URL.

        Every query parameter of the original URL is preserved; only page and
        per_page are overridden.
        """
        if not isinstance(url, URL):
            url = URL(url)

        def page_url(page: int) -> str:
            return str(url.include_query_params(page=page, per_page=self.per_page))

        links = {
            "self": page_url(self.page),
            "first": page_url(1),
            "last": page_url(self.last_page),
        }
        if self.has_prev:
            links["prev"] = page_url(self.page - 1)
        if self.has_next:
            links["next"] = page_url(self.page + 1)
        return links
