from __future__ import annotations

import io
from typing import Optional

import qrcode

from ..core.constants import STUDENT_QR_PREFIX


def student_qr_payload(student_id: str) -> str:
    return f"{STUDENT_QR_PREFIX}{student_id}"


def parse_student_qr(payload: str) -> Optional[str]:
    """Return the student id encoded by a scanned code, or None."""
    value = (payload or "").strip()
    if not value.startswith(STUDENT_QR_PREFIX):
        return None
    student_id = value[len(STUDENT_QR_PREFIX):].strip()
    return student_id or None


def render_qr_png(data: str) -> io.BytesIO:
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=10,
        border=2,
    )
    qr.add_data(data)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    buf.seek(0)
    return buf
