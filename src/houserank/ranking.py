"""Search filter and sort ordering over a scored collection.

Both stages return new lists; the input order is the tie-break for equal
sort keys because ``sorted`` is stable.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from src.houserank.models import ScoredListing
from src.houserank.scoring.normalizers import SORT_DISTANCE_DEFAULT, extract_minutes

logger = logging.getLogger(__name__)

_SEARCH_FIELDS = ("address", "city", "style")


def matches_search(item: ScoredListing, term: str) -> bool:
    needle = term.strip().lower()
    if not needle:
        return True
    return any(
        needle in (getattr(item.listing, field) or "").lower()
        for field in _SEARCH_FIELDS
    )


def filter_listings(items: list[ScoredListing], term: str | None) -> list[ScoredListing]:
    if not term or not term.strip():
        return list(items)
    return [item for item in items if matches_search(item, term)]


def _by_score(item: ScoredListing) -> float:
    return -item.score


def _by_price(item: ScoredListing) -> float:
    return item.listing.price or 0


def _by_distance(item: ScoredListing) -> int:
    return extract_minutes(item.listing.distance, SORT_DISTANCE_DEFAULT)


def _by_sold(item: ScoredListing) -> bool:
    return item.listing.sold


_SORT_KEYS: dict[str, Callable[[ScoredListing], Any]] = {
    "score": _by_score,
    "price": _by_price,
    "distance": _by_distance,
    "sold": _by_sold,
}


def sort_key_for(sort_by: str) -> Callable[[ScoredListing], Any]:
    try:
        return _SORT_KEYS[sort_by]
    except KeyError:
        raise ValueError(
            f"Unknown sort key {sort_by!r}; expected one of {sorted(_SORT_KEYS)}"
        ) from None


def sort_listings(items: list[ScoredListing], sort_by: str) -> list[ScoredListing]:
    return sorted(items, key=sort_key_for(sort_by))


def rank(
    items: list[ScoredListing], search_term: str | None, sort_by: str,
) -> list[ScoredListing]:
    filtered = filter_listings(items, search_term)
    logger.debug(
        "Search %r kept %d of %d listings; sorting by %s",
        search_term, len(filtered), len(items), sort_by,
    )
    return sort_listings(filtered, sort_by)
