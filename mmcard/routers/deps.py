"""Accessors for objects the application stores on app.state."""
from __future__ import annotations

from fastapi import Request
from fastapi.templating import Jinja2Templates

from mmcard.core.config import Settings, get_settings
from mmcard.repositories import ProfileRepository


def get_repository(request: Request) -> ProfileRepository:
    repo = getattr(getattr(request.app, "state", None), "profile_repository", None)
    if not repo:
        raise RuntimeError("Profile repository not configured")
    return repo


def get_templates(request: Request) -> Jinja2Templates:
    tpl = getattr(getattr(request.app, "state", None), "templates", None)
    if tpl:
        return tpl
    raise RuntimeError("Templates not configured")


def css_href(request: Request) -> str:
    return getattr(getattr(request.app, "state", None), "css_href", None) or "/static/card.css"


def get_app_settings(request: Request) -> Settings:
    return getattr(getattr(request.app, "state", None), "settings", None) or get_settings()
