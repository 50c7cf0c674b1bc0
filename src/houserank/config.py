"""Configuration — preference weights, budget threshold, storage location."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings

from src.houserank.models import SortKey

WEIGHT_MIN = 0.0
WEIGHT_MAX = 10.0
WEIGHT_STEP = 1.0


class WeightConfiguration(BaseModel):
    """Importance of each scored attribute.

    The dashboard sliders keep every weight in [0, 10], but nothing here
    depends on that range: any finite value flows through the same linear
    aggregation.
    """

    garage_spaces: float = 9.0
    walk_in_closet: float = 8.0
    kitchen_island: float = 8.0
    distance: float = 9.0
    yard_maintenance: float = 8.0
    hoa_fees: float = 6.0
    size: float = 4.0
    year_built: float = 2.0
    price: float = 2.0

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
        "allow_inf_nan": False,
    }

    @property
    def total(self) -> float:
        return sum(self.model_dump().values())


class Settings(BaseSettings):
    weights: WeightConfiguration = WeightConfiguration()
    budget_limit: float = 600_000.0
    default_sort: SortKey = "score"
    data_file: str = "data/listings.json"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "HOUSERANK_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }


settings = Settings()
