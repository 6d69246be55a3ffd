import logging
from dataclasses import dataclass, field
from typing import Optional

from catalog import DESIGN_ITEMS
from db import DESIGN_ITEMS_COLLECTION, get_db

logger = logging.getLogger(__name__)


@dataclass
class SeedResult:
    inserted_ids: list = field(default_factory=list)
    error: Optional[Exception] = None

    @property
    def inserted_count(self):
        return len(self.inserted_ids)

    @property
    def ok(self):
        return self.error is None


def seed_design_items(db=None):
    """
    Insert every catalog entry as a new document in the designItems collection.

    Writes go out one at a time in catalog order. The first failed write stops
    the run; documents already written stay in place. Failures are logged and
    reported through the returned SeedResult, never raised. Running it twice
    inserts the catalog twice.
    """
    if db is None:
        db = get_db()

    result = SeedResult()
    try:
        for item in DESIGN_ITEMS:
            inserted = db[DESIGN_ITEMS_COLLECTION].insert_one(item.to_document())
            result.inserted_ids.append(inserted.inserted_id)
        logger.info("✅ All design items uploaded to MongoDB.")
    except Exception as e:
        result.error = e
        logger.error("❌ Failed to seed design items: %s", e)
    return result


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    result = seed_design_items()
    print("Seeded design items count:", result.inserted_count)
