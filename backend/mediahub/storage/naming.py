"""Collision-resistant, filesystem-safe names for stored files."""

import re
import secrets
import time
from typing import Optional

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9]")
MAX_NAME_LENGTH = 20
FALLBACK_NAME = "file"


def sanitize_name(original: Optional[str]) -> str:
    """Strip *original* down to at most 20 ASCII alphanumerics.

    Returns ``"file"`` when nothing usable is left.
    """
    if not original:
        return FALLBACK_NAME
    cleaned = _UNSAFE_CHARS.sub("", original)[:MAX_NAME_LENGTH]
    return cleaned or FALLBACK_NAME


def generate_filename(original: Optional[str], extension: str) -> str:
    """Return ``<name>-<unixMillis>-<16 hex chars><extension>``.

    *extension* includes its leading dot.  The random suffix comes from
    ``secrets`` so uploads landing in the same millisecond never collide.
    """
    timestamp = time.time_ns() // 1_000_000
    return f"{sanitize_name(original)}-{timestamp}-{secrets.token_hex(8)}{extension}"
