from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import Response

from mmcard.routers.deps import get_app_settings, get_repository
from mmcard.services import qr_service, vcard
from mmcard.services.card_service import find_profile, require_slug
from mmcard.services.qr_service import QRFormat
from mmcard.services.target_url import canonical_url, public_base

router = APIRouter(prefix="/api", tags=["exports"])


@router.get("/qr")
def qr(request: Request, slug: str = "", format: str = ""):
    slug_value = require_slug(slug)
    settings = get_app_settings(request)
    fmt = QRFormat.parse(format, default=QRFormat(settings.qr_format))
    target = canonical_url(slug_value, public_base(request, settings))
    payload = qr_service.encode(target, fmt, size=settings.qr_size, margin=settings.qr_margin)
    return Response(
        payload,
        media_type=qr_service.media_type(fmt),
        headers={"Cache-Control": qr_service.CACHE_CONTROL[fmt]},
    )


@router.get("/vcf")
def vcf(request: Request, slug: str = ""):
    slug_value = require_slug(slug)
    profile = find_profile(get_repository(request), slug_value)
    return Response(
        vcard.serialize(profile),
        media_type=vcard.MEDIA_TYPE,
        headers={
            "Content-Disposition": vcard.content_disposition(slug_value),
            "Cache-Control": "no-store",
        },
    )
