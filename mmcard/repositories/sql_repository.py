"""Profile lookups backed by SQLAlchemy."""
from __future__ import annotations

from typing import Iterable, Optional

from sqlalchemy import select

from mmcard.db.models import LinkRecord, ProfileRecord
from mmcard.db.session import get_session
from mmcard.domain.profile import Profile


class SQLProfileRepository:
    """Read access for the card pages plus the writes used by seeding scripts."""

    def get_profile(self, slug: str) -> Optional[Profile]:
        with get_session() as session:
            entity = session.execute(
                select(ProfileRecord).where(ProfileRecord.slug == slug)
            ).scalar_one_or_none()
            if not entity:
                return None
            return Profile.from_record(entity.as_record(), [link.as_record() for link in entity.links])

    def slug_exists(self, slug: str) -> bool:
        with get_session() as session:
            return session.get(ProfileRecord, slug) is not None

    # ------------------------- seeding -------------------------
    def create_profile(self, slug: str, **fields) -> ProfileRecord:
        entity = ProfileRecord(slug=slug, **fields)
        with get_session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return entity

    def add_links(self, slug: str, links: Iterable[dict]) -> list[LinkRecord]:
        created = []
        with get_session() as session:
            for item in links:
                link = LinkRecord(
                    profile_slug=slug,
                    label=item.get("label"),
                    url=item["url"],
                    sort_order=item.get("sort_order"),
                )
                session.add(link)
                created.append(link)
            session.commit()
            return created
