"""Field-level validation of submitted receipts."""

from __future__ import annotations

import datetime
import re
from dataclasses import dataclass

from .models import Receipt

_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")
_REQUIRED = "is required"


@dataclass(frozen=True)
class FieldError:
    """One validation failure."""

    field: str
    error: str

    def to_dict(self) -> dict[str, str]:
        """Return the JSON form of the error."""
        return {"field": self.field, "error": self.error}


def _is_date(text: str) -> bool:
    match = _DATE_RE.fullmatch(text)
    if match is None:
        return False
    year, month, day = (int(part) for part in match.groups())
    try:
        # Year 0 is a leap year, like 2000.
        datetime.date(year or 2000, month, day)
    except ValueError:
        return False
    return True


def validate_receipt(receipt: Receipt) -> list[FieldError]:
    """Return the receipt's validation errors in field order; empty when valid."""
    errors: list[FieldError] = []
    if not receipt.retailer:
        errors.append(FieldError("Retailer", _REQUIRED))
    if not receipt.purchase_date:
        errors.append(FieldError("PurchaseDate", _REQUIRED))
    elif not _is_date(receipt.purchase_date):
        errors.append(FieldError("PurchaseDate", "must match format YYYY-MM-DD"))
    if not receipt.purchase_time:
        errors.append(FieldError("PurchaseTime", _REQUIRED))
    if receipt.items is None:
        errors.append(FieldError("Items", _REQUIRED))
    else:
        for item in receipt.items:
            if not item.short_description:
                errors.append(FieldError("ShortDescription", _REQUIRED))
            if not item.price:
                errors.append(FieldError("Price", _REQUIRED))
    if not receipt.total:
        errors.append(FieldError("Total", _REQUIRED))
    return errors