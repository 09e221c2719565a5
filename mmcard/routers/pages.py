from __future__ import annotations

import os

from fastapi import APIRouter
from fastapi.responses import FileResponse, PlainTextResponse, Response

router = APIRouter(prefix="", tags=["pages"])

WEB_DIR = ""


def configure_pages(*, web_dir: str) -> None:
    """Configure the static directory used for the favicon."""
    global WEB_DIR
    WEB_DIR = web_dir or ""


@router.get("/favicon.ico")
def favicon():
    ico_path = os.path.join(WEB_DIR, "favicon.ico")
    if os.path.exists(ico_path):
        return FileResponse(ico_path, media_type="image/x-icon")
    svg_fallback = os.path.join(WEB_DIR, "img", "mm.svg")
    if os.path.exists(svg_fallback):
        return FileResponse(svg_fallback, media_type="image/svg+xml")
    return Response(status_code=204)


# Chrome devtools well-known request; answer 204 instead of a noisy 404
@router.get("/.well-known/appspecific/com.chrome.devtools.json")
def chrome_devtools_wellknown():
    return PlainTextResponse("", status_code=204)
