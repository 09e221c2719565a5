"""
Persistence adapters.

Each adapter answers the single lookup the card service needs: given a slug,
return at most one Profile with its links. Services depend on the
ProfileRepository protocol rather than on a concrete store.
"""
from __future__ import annotations

from typing import Optional, Protocol

from mmcard.domain.profile import Profile


class ProfileRepository(Protocol):
    def get_profile(self, slug: str) -> Optional[Profile]:
        ...
