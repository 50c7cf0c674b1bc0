"""Integration-level tests — full evaluate() passes over sample data."""

from __future__ import annotations

import json
import math

import pytest
from pydantic import ValidationError

from src.houserank.config import WeightConfiguration
from src.houserank.engine import (
    DATA_DIR,
    evaluate,
    load_listings_from_json,
    load_sample_listings,
    summarize,
)
from src.houserank.models import EvaluationOptions, Listing


def _options(**kwargs) -> EvaluationOptions:
    kwargs.setdefault("budget_limit", 600000)
    return EvaluationOptions(**kwargs)


def test_sample_listings_load():
    path = DATA_DIR / "sample_listings.json"
    assert path.exists(), f"Missing {path}"
    with open(path) as f:
        raw = json.load(f)
    listings = load_sample_listings()
    assert len(listings) == len(raw) == 5
    assert all(h.address for h in listings)
    assert len({h.id for h in listings}) == 5


def test_score_sort_descending():
    ranked = evaluate(load_sample_listings(), WeightConfiguration(), _options())
    scores = [r.score for r in ranked]
    assert scores == sorted(scores, reverse=True)
    assert ranked[0].listing.id == "maple-ridge-412"
    assert ranked[-1].listing.id == "old-mill-88"


def test_scores_in_range():
    for r in evaluate(load_sample_listings(), WeightConfiguration(), _options()):
        assert 0.0 <= r.score <= 100.0


def test_zero_weights_score_zero():
    zero = WeightConfiguration(**{name: 0 for name in WeightConfiguration.model_fields})
    ranked = evaluate(load_sample_listings(), zero, _options())
    assert all(r.score == 0.0 for r in ranked)
    assert not any(math.isnan(r.score) for r in ranked)
    # all keys equal: input order is kept
    assert [r.listing.id for r in ranked] == [h.id for h in load_sample_listings()]


def test_weight_change_rescores():
    listings = load_sample_listings()
    only_price = WeightConfiguration(**{
        name: (10 if name == "price" else 0) for name in WeightConfiguration.model_fields
    })
    first = evaluate(listings, WeightConfiguration(), _options())
    second = evaluate(listings, only_price, _options())
    assert [r.score for r in first] != [r.score for r in second]
    # cheapest non-missing price wins when price is the only weight
    assert second[0].listing.id == "maple-ridge-412"
    assert math.isclose(second[0].score, 250 / 3)


def test_distance_defaults_differ_between_score_and_sort():
    listings = [
        Listing(id="far", address="a", distance="45 min"),
        Listing(id="unknown", address="b", distance="n/a"),
        Listing(id="near", address="c", distance="5 min"),
    ]
    only_distance = WeightConfiguration(**{
        name: (1 if name == "distance" else 0) for name in WeightConfiguration.model_fields
    })
    by_distance = evaluate(listings, only_distance, _options(sort_by="distance"))
    assert [r.listing.id for r in by_distance] == ["near", "far", "unknown"]
    unknown = next(r for r in by_distance if r.listing.id == "unknown")
    assert unknown.score == 0.0  # scored as 50 minutes


def test_search_and_budget_annotation():
    ranked = evaluate(
        load_sample_listings(), WeightConfiguration(),
        _options(search_term="  AUSTIN ", budget_limit=600000),
    )
    assert [r.listing.id for r in ranked] == ["lakeview-9"]
    assert ranked[0].over_budget


def test_budget_does_not_change_score():
    listings = load_sample_listings()
    low = evaluate(listings, WeightConfiguration(), _options(budget_limit=1))
    high = evaluate(listings, WeightConfiguration(), _options(budget_limit=10**9))
    assert [r.score for r in low] == [r.score for r in high]
    assert any(r.over_budget for r in low)
    assert not any(r.over_budget for r in high)


def test_sold_sort():
    ranked = evaluate(load_sample_listings(), WeightConfiguration(), _options(sort_by="sold"))
    assert ranked[-1].listing.sold
    assert not any(r.listing.sold for r in ranked[:-1])


def test_idempotent():
    listings = load_sample_listings()
    opts = _options(sort_by="distance", search_term="r")
    a = evaluate(listings, WeightConfiguration(), opts)
    b = evaluate(listings, WeightConfiguration(), opts)
    assert [r.model_dump() for r in a] == [r.model_dump() for r in b]


def test_inputs_not_mutated():
    listings = load_sample_listings()
    before = [h.model_dump() for h in listings]
    evaluate(listings, WeightConfiguration(), _options(sort_by="price"))
    assert [h.model_dump() for h in listings] == before


def test_defaults_from_settings():
    ranked = evaluate(load_sample_listings())
    assert len(ranked) == 5


def test_summary():
    listings = load_sample_listings()
    weights = WeightConfiguration()
    ranked = evaluate(listings, weights, _options(search_term="ranch"))
    summary = summarize(listings, ranked, weights)
    assert summary.total_listings == 5
    assert summary.total_weight == 56
    assert summary.top_score == ranked[0].score


def test_summary_empty_view():
    summary = summarize([], [], WeightConfiguration())
    assert summary.top_score is None
    assert summary.total_listings == 0


def test_huge_distance_text_sorts_last():
    listings = [
        Listing(id="huge", address="a", distance="9" * 5000 + " min"),
        Listing(id="near", address="b", distance="5 min"),
    ]
    ranked = evaluate(listings, WeightConfiguration(), _options(sort_by="distance"))
    assert [r.listing.id for r in ranked] == ["near", "huge"]
    assert 0.0 <= ranked[1].score <= 100.0


def test_non_finite_price_rejected():
    with pytest.raises(ValidationError):
        load_listings_from_json([{"address": "a", "price": float("nan")}])
    with pytest.raises(ValidationError):
        Listing(address="a", size=float("inf"))
