"""Domain types for profiles, links and theme identifiers."""

from .profile import LinkEntry, Profile, ThemeName

__all__ = ["LinkEntry", "Profile", "ThemeName"]
