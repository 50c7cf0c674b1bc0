"""Per-attribute normalization rules.

Each rule maps one raw listing attribute to a sub-score in [0, 100].  Every
rule is total: missing data (absent, ``None`` or a falsy zero for numeric
fields) falls back to a neutral default rather than to zero, so incomplete
records are not punished for what they leave out.

    attribute          rule                                    missing
    garage spaces      >=2 -> 100, ==1 -> 50, else 0           0
    walk-in closet     True -> 100                             False
    kitchen island     True -> 100                             False
    distance           100 - 2 * minutes, floor 0              50 min
    yard maintenance   high maintenance -> 0, else 100         False
    HOA fee            0 -> 100, else 100 - fee / 5, floor 0   0
    size               (size - 1000) / 2500, clamped           1500
    year built         (year - 1920) / 105, clamped            1950
    price              1 - (price - 400k) / 300k, clamped      600000
"""

from __future__ import annotations

import re

from src.houserank.models import AttributeScores, Listing

SCORE_DISTANCE_DEFAULT = 50
SORT_DISTANCE_DEFAULT = 99

DEFAULT_SIZE = 1500.0
DEFAULT_YEAR_BUILT = 1950
DEFAULT_PRICE = 600_000.0

_DIGITS_RE = re.compile(r"\d+", re.ASCII)

# Longer digit runs saturate; anything past 50 minutes already scores 0.
_MAX_MINUTE_DIGITS = 9
_SATURATED_MINUTES = 10**9


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return min(high, max(low, value))


def extract_minutes(text: object, default: int) -> int:
    """Return the first run of digits found anywhere in *text*, else *default*."""
    m = _DIGITS_RE.search(str(text or ""))
    if not m:
        return default
    digits = m.group(0).lstrip("0") or "0"
    if len(digits) > _MAX_MINUTE_DIGITS:
        return _SATURATED_MINUTES
    return int(digits)


def garage_score(listing: Listing) -> float:
    spaces = listing.garage_spaces or 0
    if spaces >= 2:
        return 100.0
    if spaces == 1:
        return 50.0
    return 0.0


def walk_in_closet_score(listing: Listing) -> float:
    return 100.0 if listing.walk_in_closet else 0.0


def kitchen_island_score(listing: Listing) -> float:
    return 100.0 if listing.kitchen_island else 0.0


def distance_score(listing: Listing) -> float:
    minutes = extract_minutes(listing.distance, SCORE_DISTANCE_DEFAULT)
    return float(max(0, 100 - minutes * 2))


def yard_score(listing: Listing) -> float:
    # Inverted: a low-maintenance yard earns the full sub-score.
    return 0.0 if listing.yard_maintenance else 100.0


def hoa_score(listing: Listing) -> float:
    fee = listing.hoa_fee or 0
    if fee == 0:
        return 100.0
    return _clamp(100 - fee / 5)


def size_score(listing: Listing) -> float:
    size = listing.size or DEFAULT_SIZE
    return _clamp((size - 1000) / 2500 * 100)


def year_built_score(listing: Listing) -> float:
    year = listing.year_built or DEFAULT_YEAR_BUILT
    return _clamp((year - 1920) / 105 * 100)


def price_score(listing: Listing) -> float:
    price = listing.price or DEFAULT_PRICE
    return _clamp(100 - (price - 400_000) / 300_000 * 100)


RULES = {
    "garage_spaces": garage_score,
    "walk_in_closet": walk_in_closet_score,
    "kitchen_island": kitchen_island_score,
    "distance": distance_score,
    "yard_maintenance": yard_score,
    "hoa_fees": hoa_score,
    "size": size_score,
    "year_built": year_built_score,
    "price": price_score,
}


def attribute_scores(listing: Listing) -> AttributeScores:
    return AttributeScores(**{name: rule(listing) for name, rule in RULES.items()})
