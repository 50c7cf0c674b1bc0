"""Pydantic v2 data models — the data contracts flowing through the system."""

from __future__ import annotations

import uuid
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator


# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------

SortKey = Literal["score", "price", "distance", "sold"]

SORT_KEYS: tuple[str, ...] = ("score", "price", "distance", "sold")


def _new_id() -> str:
    return str(uuid.uuid4())


# ---------------------------------------------------------------------------
# Listing
# ---------------------------------------------------------------------------

class Listing(BaseModel):
    id: str = Field(default_factory=_new_id)
    address: str = ""
    city: str = ""
    price: float | None = None
    bedrooms: int | None = None
    bathrooms: float | None = None
    size: float | None = None
    style: str = ""
    year_built: int | None = None
    garage_spaces: float | None = None
    walk_in_closet: bool = False
    kitchen_island: bool = False
    yard_maintenance: bool = False
    hoa_fee: float | None = None
    # Free text, usually "<n> min"; parsed only by the scoring/sort rules.
    distance: str = ""
    sold: bool = False
    thumbnail_url: str | None = None

    model_config = {"frozen": True, "extra": "ignore", "allow_inf_nan": False}

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v: Any) -> str:
        if v is None or (isinstance(v, str) and not v.strip()):
            return _new_id()
        return str(v)

    @field_validator("address", "city", "style", "distance", mode="before")
    @classmethod
    def _coerce_text(cls, v: Any) -> str:
        if v is None:
            return ""
        return v if isinstance(v, str) else str(v)

    @field_validator(
        "walk_in_closet", "kitchen_island", "yard_maintenance", "sold",
        mode="before",
    )
    @classmethod
    def _missing_flag_is_false(cls, v: Any) -> Any:
        return False if v is None else v

    @field_validator("thumbnail_url", mode="before")
    @classmethod
    def _blank_thumbnail(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v


# ---------------------------------------------------------------------------
# Scoring / output types
# ---------------------------------------------------------------------------

class AttributeScores(BaseModel):
    """Per-attribute sub-scores, each in [0, 100] and independent of weight."""

    garage_spaces: float = 0.0
    walk_in_closet: float = 0.0
    kitchen_island: float = 0.0
    distance: float = 0.0
    yard_maintenance: float = 0.0
    hoa_fees: float = 0.0
    size: float = 0.0
    year_built: float = 0.0
    price: float = 0.0


class ScoredListing(BaseModel):
    listing: Listing
    score: float = 0.0
    over_budget: bool = False
    breakdown: AttributeScores = Field(default_factory=AttributeScores)


class EvaluationOptions(BaseModel):
    search_term: str = ""
    sort_by: SortKey = "score"
    budget_limit: float = 600_000.0

    model_config = {"frozen": True}

    @field_validator("search_term", mode="before")
    @classmethod
    def _none_is_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class DashboardSummary(BaseModel):
    total_listings: int = 0
    top_score: float | None = None
    total_weight: float = 0.0
    over_budget_count: int = 0
    sold_count: int = 0
