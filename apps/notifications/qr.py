"""QR code rendering for check-in tokens."""

from __future__ import annotations

import base64
from io import BytesIO

import qrcode  # type: ignore
from qrcode.constants import ERROR_CORRECT_Q  # type: ignore
from qrcode.image.pil import PilImage  # type: ignore


def generate_qr_base64(payload: str) -> str:
    """Render ``payload`` as a PNG QR code and return it base64-encoded."""
    qr = qrcode.QRCode(error_correction=ERROR_CORRECT_Q, box_size=10, border=4)
    qr.add_data(payload)
    qr.make(fit=True)
    img = qr.make_image(image_factory=PilImage)
    buf = BytesIO()
    img.save(buf, format="PNG")
    return base64.b64encode(buf.getvalue()).decode("utf-8")
