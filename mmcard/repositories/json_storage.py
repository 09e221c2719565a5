"""
JSON-file persistence adapter.

The file maps slugs to profile records, each with an optional "links" list:

    {"profiles": {"alice": {"full_name": "Alice Lee", "links": [...]}}}
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from mmcard.domain.profile import Profile

logger = logging.getLogger(__name__)


def load(path: Path) -> dict:
    if path.exists():
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    return {"profiles": {}}


class JSONProfileRepository:
    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def get_profile(self, slug: str) -> Optional[Profile]:
        try:
            db = load(self.path)
        except (OSError, json.JSONDecodeError):
            logger.exception("Failed to read profiles file %s", self.path)
            raise
        profiles = db.get("profiles") if isinstance(db, dict) else None
        record = profiles.get(slug) if isinstance(profiles, dict) else None
        if not isinstance(record, dict):
            return None
        links = [item for item in (record.get("links") or []) if isinstance(item, dict)]
        return Profile.from_record({**record, "slug": slug}, links)
