"""Weighted aggregation of attribute sub-scores into one 0-100 score."""

from __future__ import annotations

import logging

from src.houserank.config import WeightConfiguration
from src.houserank.models import AttributeScores, Listing
from src.houserank.scoring.normalizers import attribute_scores

logger = logging.getLogger(__name__)


def weighted_contributions(
    scores: AttributeScores, weights: WeightConfiguration,
) -> dict[str, float]:
    """Each attribute contributes ``sub_score / 100 * weight``.

    Binary features have a sub-score of exactly 0 or 100, so they contribute
    either nothing or their full weight.
    """
    w = weights.model_dump()
    return {
        name: sub_score / 100 * w[name]
        for name, sub_score in scores.model_dump().items()
    }


def aggregate(scores: AttributeScores, weights: WeightConfiguration) -> float:
    total_weight = weights.total
    if total_weight <= 0:
        return 0.0
    earned = sum(weighted_contributions(scores, weights).values())
    return earned / total_weight * 100


def score_listing(
    listing: Listing, weights: WeightConfiguration,
) -> tuple[float, AttributeScores]:
    """Score one listing.  Returns (score, per-attribute breakdown)."""
    breakdown = attribute_scores(listing)
    result = aggregate(breakdown, weights)
    logger.debug(
        "Listing %s (%s): garage=%.0f closet=%.0f island=%.0f dist=%.0f "
        "yard=%.0f hoa=%.1f size=%.1f year=%.1f price=%.1f -> %.2f",
        listing.id, listing.address,
        breakdown.garage_spaces, breakdown.walk_in_closet,
        breakdown.kitchen_island, breakdown.distance,
        breakdown.yard_maintenance, breakdown.hoa_fees, breakdown.size,
        breakdown.year_built, breakdown.price, result,
    )
    return result, breakdown
