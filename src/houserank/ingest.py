"""CSV bulk import — turns spreadsheet rows into validated listings.

Rows without a non-empty address are skipped, as are rows that fail model
validation.  The scoring core only ever sees the listings that survive.
"""

from __future__ import annotations

import logging
from typing import IO, Any

import pandas as pd
from pydantic import ValidationError

from src.houserank.models import Listing

logger = logging.getLogger(__name__)


class IngestError(ValueError):
    """Raised when an import yields no usable listings."""


def _clean_record(record: dict[str, Any]) -> dict[str, Any]:
    cleaned = {}
    for key, value in record.items():
        name = str(key).strip()
        if not name:
            continue
        if isinstance(value, str):
            value = value.strip()
        cleaned[name] = value
    return cleaned


def listing_from_record(record: dict[str, Any]) -> Listing | None:
    record = _clean_record(record)
    address = record.get("address")
    if address is None or not str(address).strip():
        logger.debug("Skipping row without address: %s", record)
        return None
    try:
        return Listing.model_validate(record)
    except ValidationError as e:
        logger.warning(
            "Skipping invalid row for %r: %d validation error(s)",
            address, e.error_count(),
        )
        return None


def read_listings_csv(source: str | IO[Any]) -> list[Listing]:
    """Parse a CSV file (path or file-like) with a header row."""
    df = pd.read_csv(source, skip_blank_lines=True)
    df = df.astype(object).where(df.notna(), None)

    listings = []
    for record in df.to_dict(orient="records"):
        listing = listing_from_record(record)
        if listing is not None:
            listings.append(listing)

    if not listings:
        raise IngestError("No valid listings found in CSV")

    logger.info("Imported %d of %d CSV rows", len(listings), len(df))
    return listings
