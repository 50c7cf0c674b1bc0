"""Local JSON-file listing store.

Create / update / delete report success as a boolean and never raise for a
missing or duplicate id; the caller decides what to show.  The scoring core
does not depend on this module.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from src.houserank.models import Listing

logger = logging.getLogger(__name__)


class ListingStore:
    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> list[Listing]:
        if not self.path.exists():
            return []
        with open(self.path) as f:
            raw = json.load(f)
        return [Listing.model_validate(item) for item in raw]

    def _save(self, listings: list[Listing]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = [item.model_dump(mode="json") for item in listings]
        tmp = self.path.with_name(self.path.name + ".tmp")
        with open(tmp, "w") as f:
            json.dump(payload, f, indent=2)
        tmp.replace(self.path)

    def add(self, listing: Listing) -> bool:
        listings = self.load()
        if any(item.id == listing.id for item in listings):
            logger.warning("Listing %s already exists; not added", listing.id)
            return False
        listings.append(listing)
        self._save(listings)
        logger.info("Added listing %s (%s)", listing.id, listing.address)
        return True

    def add_many(self, new: list[Listing]) -> int:
        """Add each listing in turn.  Returns how many were stored."""
        return sum(1 for listing in new if self.add(listing))

    def update(self, listing_id: str, listing: Listing) -> bool:
        listings = self.load()
        for i, item in enumerate(listings):
            if item.id == listing_id:
                listings[i] = listing
                self._save(listings)
                logger.info("Updated listing %s", listing_id)
                return True
        logger.warning("Listing %s not found; nothing updated", listing_id)
        return False

    def delete(self, listing_id: str) -> bool:
        listings = self.load()
        remaining = [item for item in listings if item.id != listing_id]
        if len(remaining) == len(listings):
            logger.warning("Listing %s not found; nothing deleted", listing_id)
            return False
        self._save(remaining)
        logger.info("Deleted listing %s", listing_id)
        return True
