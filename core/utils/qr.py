"""
QR code rendering for public menu links.

Codes use error-correction level H and a four-module quiet zone.
"""

import io

import qrcode
from qrcode.constants import ERROR_CORRECT_H
from qrcode.image.pil import PilImage
from qrcode.image.svg import SvgPathImage

from domain.enums import QrImageFormat

MEDIA_TYPES = {
    QrImageFormat.SVG: "image/svg+xml",
    QrImageFormat.PNG: "image/png",
}

_IMAGE_FACTORIES = {
    QrImageFormat.SVG: SvgPathImage,
    QrImageFormat.PNG: PilImage,
}


def render_qr(data: str, image_format: QrImageFormat = QrImageFormat.SVG, box_size: int = 10, border: int = 4) -> bytes:
    """Encode ``data`` as a QR code image and return the file bytes."""
    qr = qrcode.QRCode(
        error_correction=ERROR_CORRECT_H,
        box_size=box_size,
        border=border,
        image_factory=_IMAGE_FACTORIES[image_format],
    )
    qr.add_data(data)
    qr.make(fit=True)
    buffer = io.BytesIO()
    qr.make_image().save(buffer)
    return buffer.getvalue()
