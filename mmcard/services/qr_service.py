"""QR code rendering for card URLs (PNG raster or SVG vector)."""
from __future__ import annotations

import io
import logging
from enum import Enum

import qrcode
import qrcode.image.svg as qsvg
from PIL import Image
from qrcode.exceptions import DataOverflowError

from mmcard.core.errors import EncodingError, InputError

logger = logging.getLogger(__name__)

ERROR_CORRECTION = qrcode.constants.ERROR_CORRECT_M


class QRFormat(str, Enum):
    PNG = "png"
    SVG = "svg"

    @classmethod
    def parse(cls, value: str | None, default: "QRFormat | None" = None) -> "QRFormat":
        key = (value or "").strip().lower()
        if not key:
            return default or cls.PNG
        try:
            return cls(key)
        except ValueError:
            raise InputError(f"Unsupported QR format: {key}") from None


MEDIA_TYPES = {
    QRFormat.PNG: "image/png",
    QRFormat.SVG: "image/svg+xml; charset=utf-8",
}

CACHE_CONTROL = {
    QRFormat.PNG: "public, max-age=3600",
    QRFormat.SVG: "no-store",
}


def media_type(fmt: QRFormat) -> str:
    return MEDIA_TYPES[fmt]


def _build(url: str, margin: int, image_factory=None) -> qrcode.QRCode:
    qr = qrcode.QRCode(
        version=None,
        error_correction=ERROR_CORRECTION,
        box_size=10,
        border=margin,
        image_factory=image_factory,
    )
    qr.add_data(url)
    try:
        qr.make(fit=True)
    except (DataOverflowError, ValueError) as exc:
        # older qrcode raises DataOverflowError, 8.x a ValueError on version 41
        raise EncodingError("QR payload too long") from exc
    return qr


def _png(url: str, size: int, margin: int) -> bytes:
    qr = _build(url, margin)
    modules = qr.modules_count + 2 * margin
    qr.box_size = max(1, size // modules)
    img = qr.make_image(fill_color="black", back_color="white").convert("RGB")
    if img.size != (size, size):
        img = img.resize((size, size), Image.NEAREST)
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def _svg(url: str, margin: int) -> bytes:
    qr = _build(url, margin, image_factory=qsvg.SvgPathImage)
    buf = io.BytesIO()
    qr.make_image().save(buf)
    return buf.getvalue()


def encode(url: str, fmt: QRFormat = QRFormat.PNG, size: int = 320, margin: int = 1) -> bytes:
    """
    Encode url into a QR image with error-correction level M.

    PNG output is exactly size x size pixels; SVG output is a single path
    scaled by the viewer. Raises EncodingError for an empty url.
    """
    if not url or not url.strip():
        logger.error("QR encoding requested with an empty payload")
        raise EncodingError("Empty QR payload")
    fmt = QRFormat(fmt)
    margin = max(0, int(margin))
    if fmt is QRFormat.SVG:
        return _svg(url, margin)
    return _png(url, max(21, int(size)), margin)
