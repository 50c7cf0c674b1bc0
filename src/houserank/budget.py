"""Budget flag — display annotation only, never part of the score."""

from __future__ import annotations

from src.houserank.models import Listing


def is_over_budget(listing: Listing, budget_limit: float) -> bool:
    return (listing.price or 0) > budget_limit
