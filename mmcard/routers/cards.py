from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from mmcard.core.errors import NotFoundError
from mmcard.routers.deps import css_href, get_app_settings, get_repository, get_templates
from mmcard.services.card_display import build_card_view
from mmcard.services.card_service import find_profile
from mmcard.services.target_url import canonical_url, public_base

router = APIRouter(prefix="", tags=["cards"])

@router.get("/{slug}", response_class=HTMLResponse)
def card_page(slug: str, request: Request):
    templates = get_templates(request)
    try:
        profile = find_profile(get_repository(request), slug)
    except NotFoundError:
        return templates.TemplateResponse(
            request,
            "not_found.html",
            {"slug": slug, "css_href": css_href(request)},
            status_code=404,
        )
    settings = get_app_settings(request)
    view = build_card_view(
        profile,
        canonical_url(profile.slug, public_base(request, settings)),
        default_logo=settings.default_logo_url,
    )
    return templates.TemplateResponse(
        request,
        "card.html",
        {"card": view, "css_href": css_href(request)},
    )
