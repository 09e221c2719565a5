"""
Card lookups shared across routers.
"""

from __future__ import annotations

import logging

from mmcard.core.errors import InputError, NotFoundError
from mmcard.domain.profile import Profile
from mmcard.repositories import ProfileRepository

logger = logging.getLogger(__name__)


def require_slug(slug: str | None) -> str:
    value = (slug or "").strip()
    if not value:
        raise InputError("Missing slug")
    return value


def find_profile(repository: ProfileRepository, slug: str) -> Profile:
    """Locate a profile by slug or raise NotFoundError."""
    profile = repository.get_profile(slug)
    if profile is None:
        logger.info("No profile for slug %r", slug)
        raise NotFoundError()
    return profile
