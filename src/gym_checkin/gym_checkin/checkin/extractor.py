from __future__ import annotations

import re
from typing import Optional

from ..core.constants import QR_URI_SCHEME

_TOKEN = r"0x[0-9a-f]{40}"

_ADDRESS_RE = re.compile(_TOKEN, re.IGNORECASE)
_URI_RE = re.compile(re.escape(QR_URI_SCHEME) + r"(" + _TOKEN + r")", re.IGNORECASE)


def extract_identifier(text: Optional[str]) -> Optional[str]:
    """Pull a member address out of scanned QR text.

    Tried in order: the bare address, an ``ethereum:<address>`` URI, then the
    leftmost address embedded anywhere in the text. Returns None when the
    text carries no address.
    """
    if not text:
        return None
    text = text.strip()

    if _ADDRESS_RE.fullmatch(text):
        return text

    m = _URI_RE.fullmatch(text)
    if m:
        return m.group(1)

    m = _ADDRESS_RE.search(text)
    if m:
        return m.group(0)
    return None


def is_identifier(value: Optional[str]) -> bool:
    return bool(value) and _ADDRESS_RE.fullmatch(value) is not None
