"""Top-level orchestrator — ties all components together.

Pipeline (re-run in full on every call, nothing is cached):
  1. Score every listing against the current weights
  2. Attach the over-budget display flag
  3. Keep listings matching the search term (address / city / style)
  4. Order by the selected sort key
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable

from src.houserank.budget import is_over_budget
from src.houserank.config import WeightConfiguration, settings
from src.houserank.models import (
    DashboardSummary,
    EvaluationOptions,
    Listing,
    ScoredListing,
)
from src.houserank.ranking import rank
from src.houserank.scoring.aggregate import score_listing

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent.parent / "data"


def load_listings_from_json(data: list[dict]) -> list[Listing]:
    return [Listing.model_validate(item) for item in data]


def load_sample_listings() -> list[Listing]:
    path = DATA_DIR / "sample_listings.json"
    with open(path) as f:
        raw = json.load(f)
    return load_listings_from_json(raw)


def default_options() -> EvaluationOptions:
    return EvaluationOptions(
        sort_by=settings.default_sort,
        budget_limit=settings.budget_limit,
    )


def score_all(
    listings: Iterable[Listing],
    weights: WeightConfiguration,
    budget_limit: float,
) -> list[ScoredListing]:
    scored: list[ScoredListing] = []
    for listing in listings:
        value, breakdown = score_listing(listing, weights)
        scored.append(ScoredListing(
            listing=listing,
            score=value,
            over_budget=is_over_budget(listing, budget_limit),
            breakdown=breakdown,
        ))
    return scored


def evaluate(
    listings: Iterable[Listing],
    weights: WeightConfiguration | None = None,
    options: EvaluationOptions | None = None,
) -> list[ScoredListing]:
    """Score, filter and order *listings*.  Pure: inputs are never mutated."""
    if weights is None:
        weights = settings.weights
    if options is None:
        options = default_options()

    scored = score_all(listings, weights, options.budget_limit)
    ranked = rank(scored, options.search_term, options.sort_by)

    logger.info(
        "Evaluated %d listings (total weight %.1f): %d shown, sorted by %s",
        len(scored), weights.total, len(ranked), options.sort_by,
    )
    return ranked


def summarize(
    listings: list[Listing],
    ranked: list[ScoredListing],
    weights: WeightConfiguration,
) -> DashboardSummary:
    """Headline numbers: collection size, top row's score, total weight."""
    return DashboardSummary(
        total_listings=len(listings),
        top_score=ranked[0].score if ranked else None,
        total_weight=weights.total,
        over_budget_count=sum(1 for s in ranked if s.over_budget),
        sold_count=sum(1 for s in ranked if s.listing.sold),
    )
