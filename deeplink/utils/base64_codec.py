import base64
import binascii
from typing import Optional


def decode_base64(value: Optional[str]) -> str:
    """
    Decode a base64 deep-link argument into text.

    Query-string parsing turns '+' into ' ', so spaces are put back before
    decoding. Padding may be omitted and the URL-safe alphabet is accepted.
    Anything that does not decode to UTF-8 text is returned unchanged.

    Args:
        value: Base64 text, or None when the argument was absent

    Returns:
        Decoded text, the original value on failure, or "" for None
    """
    if value is None:
        return ""
    candidate = value.replace(" ", "+").strip()
    if not candidate:
        return ""
    candidate += "=" * (-len(candidate) % 4)
    altchars = b"-_" if ("-" in candidate or "_" in candidate) else None
    try:
        raw = base64.b64decode(candidate, altchars=altchars, validate=True)
        return raw.decode("utf-8")
    except (binascii.Error, ValueError):
        return value
