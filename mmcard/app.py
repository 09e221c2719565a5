import hashlib
import logging
import os
import pathlib
import shutil

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.middleware.base import BaseHTTPMiddleware

from mmcard.core.config import Settings, get_settings
from mmcard.core.errors import CardError
from mmcard.core.logging_config import configure_logging
from mmcard.repositories import ProfileRepository
from mmcard.repositories.json_storage import JSONProfileRepository
from mmcard.repositories.sql_repository import SQLProfileRepository
from mmcard.routers import cards as cards_router
from mmcard.routers import exports as exports_router
from mmcard.routers import pages as pages_router

logger = logging.getLogger("mmcard.app")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers (CSP, anti clickjacking, referrer policy)."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault(
            "Content-Security-Policy",
            "default-src 'self'; "
            "img-src 'self' data: https:; "
            "style-src 'self' 'unsafe-inline'; "
            "script-src 'self'",
        )
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer-when-downgrade")
        if self._enforce_hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response


class CachedStaticFiles(StaticFiles):
    def set_headers(self, scope, resp, path, stat_result):
        # Strong cache for fingerprinted assets
        resp.headers["Cache-Control"] = "public, max-age=31536000, immutable"


BASE = os.path.dirname(__file__)
WEB = os.path.join(BASE, "..", "web")
TEMPLATES = os.path.join(BASE, "..", "templates")


def _fingerprint_asset(rel_path: str) -> str:
    """
    Create a copy with a short hash in its name: "card.css" -> "card.<hash8>.css".
    Returns the versioned file name (without /static).
    """
    src = pathlib.Path(WEB) / rel_path
    if not src.exists():
        return rel_path.replace("\\", "/")
    data = src.read_bytes()
    h = hashlib.sha1(data).hexdigest()[:8]
    dst = src.with_name(f"{src.stem}.{h}{src.suffix}")
    if not dst.exists():
        shutil.copy2(src, dst)
    return dst.name


def build_repository(settings: Settings) -> ProfileRepository:
    """SQL store when DATABASE_URL is set, otherwise the JSON profiles file."""
    if settings.database_url:
        logger.info("Using SQL profile repository")
        return SQLProfileRepository()
    logger.info("Using JSON profile repository at %s", settings.profiles_file)
    return JSONProfileRepository(settings.profiles_file)


async def card_error_handler(request: Request, exc: CardError):
    if exc.status_code >= 500:
        logger.error("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    else:
        logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    return PlainTextResponse(exc.message, status_code=exc.status_code)


def create_app(settings: Settings | None = None, repository: ProfileRepository | None = None) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn (--factory)."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Digital Card API")
    app.mount("/static", CachedStaticFiles(directory=WEB, check_dir=False), name="static")
    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")
    app.add_exception_handler(CardError, card_error_handler)

    try:
        css_fp = _fingerprint_asset("card.css")
    except OSError:
        css_fp = "card.css"
    app.state.settings = settings
    app.state.css_href = f"/static/{css_fp}"
    app.state.templates = Jinja2Templates(directory=TEMPLATES)
    app.state.profile_repository = repository or build_repository(settings)

    pages_router.configure_pages(web_dir=WEB)
    app.include_router(pages_router.router)
    app.include_router(exports_router.router)
    app.include_router(cards_router.router)
    return app


app = create_app()
