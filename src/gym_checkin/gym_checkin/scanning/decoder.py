from __future__ import annotations

from typing import Any, Optional

from PIL import Image
from pyzbar.pyzbar import ZBarSymbol
from pyzbar.pyzbar import decode as pyzbar_decode


def decode_qr(frame: Any) -> Optional[str]:
    """Decode the first QR code in a PIL image or numpy frame.

    Returns None when the frame holds no readable QR code.
    """
    decoded = pyzbar_decode(frame, symbols=[ZBarSymbol.QRCODE])
    if not decoded:
        return None
    return decoded[0].data.decode("utf-8").strip()


def decode_image_file(stream) -> Optional[str]:
    img = Image.open(stream).convert("RGB")
    return decode_qr(img)
