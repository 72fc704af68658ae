"""Receipt scoring rules."""

from __future__ import annotations

import calendar
import math
import re
from collections.abc import Iterable

from .models import Item, Receipt

_WHITESPACE = (
    "\t\n\v\f\r \u0085\u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)
_ALNUM_RE = re.compile(r"[A-Za-z0-9]")
_INT_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_RE = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+(?:\.[0-9a-fA-F]*)?|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)
_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")
_TIME_RE = re.compile(r"([0-9]{1,2}):([0-9]{2})")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _trim_space(text: str) -> str:
    """Strip leading and trailing Unicode white space."""
    return text.strip(_WHITESPACE)


def _atoi(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid integer syntax: {text!r}")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _parse_float(text: str) -> float:
    try:
        if _DECIMAL_RE.fullmatch(text):
            value = float(text)
        elif _HEX_RE.fullmatch(text):
            value = float.fromhex(text)
        else:
            raise ValueError(f"invalid number syntax: {text!r}")
    except OverflowError as exc:
        raise ValueError(f"number out of range: {text!r}") from exc
    if not math.isfinite(value):
        raise ValueError(f"number out of range: {text!r}")
    return value


def parse_cents(amount: str) -> int:
    """Convert a dollar amount such as "9.15" to whole cents (915).

    Only the first two fraction digits count; one digit is read as tenths.
    Raises ValueError when either part is not an integer.
    """
    dollars_text, separator, fraction = amount.partition(".")
    dollars = _atoi(dollars_text)
    cents = 0
    if separator:
        if not fraction.isascii():
            raise ValueError(f"invalid integer syntax: {fraction!r}")
        if len(fraction) == 1:
            fraction += "0"
        elif len(fraction) > 2:
            fraction = fraction[:2]
        cents = _atoi(fraction)
    return dollars * 100 + cents


def retailer_points(retailer: str) -> int:
    """One point per ASCII letter or digit in the retailer name."""
    return len(_ALNUM_RE.findall(retailer))


def round_dollar_points(total: str) -> int:
    """50 points when the total has no cents."""
    try:
        cents = parse_cents(total)
    except ValueError:
        return 0
    return 50 if cents % 100 == 0 else 0


def quarter_multiple_points(total: str) -> int:
    """25 points when the total is a multiple of 0.25."""
    try:
        cents = parse_cents(total)
    except ValueError:
        return 0
    return 25 if cents % 25 == 0 else 0


def item_count_points(items: Iterable[Item] | None) -> int:
    """5 points for every two items."""
    return len(list(items or ())) // 2 * 5


def item_description_points(items: Iterable[Item] | None) -> int:
    """For each item whose trimmed description length (in UTF-8 bytes) is a
    multiple of 3, the price times 0.2 rounded up; unreadable prices score nothing."""
    points = 0
    for item in items or ():
        description = _trim_space(item.short_description)
        if len(description.encode("utf-8")) % 3 != 0:
            continue
        try:
            price = _parse_float(item.price)
        except ValueError:
            continue
        points += math.ceil(price * 0.2)
    return points


def odd_day_points(date: str) -> int:
    """6 points when the YYYY-MM-DD purchase date falls on an odd day."""
    match = _DATE_RE.fullmatch(date)
    if match is None:
        return 0
    year, month, day = (int(part) for part in match.groups())
    if not 1 <= month <= 12:
        return 0
    days_in_month = (31, 29 if calendar.isleap(year) else 28, 31, 30, 31, 30,
                     31, 31, 30, 31, 30, 31)[month - 1]
    if not 1 <= day <= days_in_month:
        return 0
    return 6 if day % 2 == 1 else 0


def purchase_time_points(time_text: str) -> int:
    """10 points when the HH:MM purchase time falls within the 14:00 hour."""
    match = _TIME_RE.fullmatch(time_text)
    if match is None:
        return 0
    hour, minute = (int(part) for part in match.groups())
    if hour >= 24 or minute >= 60:
        return 0
    return 10 if hour == 14 else 0


def calculate_points(receipt: Receipt) -> tuple[int, str]:
    """Apply every rule and return the total with a line-per-rule breakdown."""
    rules = (
        (retailer_points(receipt.retailer), "Retailer Name"),
        (round_dollar_points(receipt.total), "Round Dollar Total"),
        (quarter_multiple_points(receipt.total), "Multiple of $0.25"),
        (item_count_points(receipt.items), "Item Count every 2 items"),
        (item_description_points(receipt.items), "Item Descriptions mult of 3"),
        (odd_day_points(receipt.purchase_date), "Odd Purchase Date"),
        (purchase_time_points(receipt.purchase_time), "Purchase Time"),
    )
    lines = [""] + [f"{points} pts - {label}" for points, label in rules]
    return sum(points for points, _ in rules), "\n".join(lines)