"""Receipt identifiers and processing."""

from __future__ import annotations

import hashlib
import json
import re
import uuid

from .models import Receipt
from .points import calculate_points

_NAMESPACE = uuid.UUID("6ba7b810-9dad-11d1-80b4-00c04fd430c8")
_HTML_ESCAPES = {
    ord("<"): "\\u003c",
    ord(">"): "\\u003e",
    ord("&"): "\\u0026",
    0x2028: "\\u2028",
    0x2029: "\\u2029",
}
_LONE_SURROGATE_RE = re.compile("[\ud800-\udfff]")


def _marshal(receipt: Receipt) -> bytes:
    """Compact JSON of the receipt with HTML-sensitive characters escaped."""
    text = json.dumps(receipt.to_dict(), ensure_ascii=False, separators=(",", ":"))
    text = _LONE_SURROGATE_RE.sub("\ufffd", text.translate(_HTML_ESCAPES))
    return text.encode("utf-8")


def deterministic_uuid(receipt: Receipt) -> str:
    """Name-based (SHA-1, version 5) UUID derived from the receipt's JSON form."""
    digest = hashlib.sha1(_NAMESPACE.bytes + _marshal(receipt)).digest()
    return str(uuid.UUID(bytes=digest[:16], version=5))


def process_receipt(receipt: Receipt) -> tuple[str, int]:
    """Return the receipt's identifier and its points."""
    receipt_id = deterministic_uuid(receipt)
    points, _ = calculate_points(receipt)
    return receipt_id, points