"""Receipt records, decoded from JSON objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Item:
    """One purchased item."""

    short_description: str = ""
    price: str = ""


@dataclass
class Receipt:
    """A submitted receipt; ``items`` is None when absent or null."""

    retailer: str = ""
    purchase_date: str = ""
    purchase_time: str = ""
    items: list[Item] | None = None
    total: str = ""

    def sanitize(self) -> None:
        """Trim white space from every text field, in place."""
        self.retailer = self.retailer.strip()
        self.purchase_date = self.purchase_date.strip()
        self.purchase_time = self.purchase_time.strip()
        self.total = self.total.strip()
        for item in self.items or ():
            item.short_description = item.short_description.strip()
            item.price = item.price.strip()

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form, keys in wire order."""
        items = None
        if self.items is not None:
            items = [
                {"shortDescription": item.short_description, "price": item.price}
                for item in self.items
            ]
        return {
            "retailer": self.retailer,
            "purchaseDate": self.purchase_date,
            "purchaseTime": self.purchase_time,
            "items": items,
            "total": self.total,
        }


def _fields(data: Any, what: str) -> dict[str, Any]:
    """Lower-case the keys of a JSON object; null values are dropped except for items."""
    if not isinstance(data, dict):
        raise ValueError(f"{what} must be an object")
    return {
        str(key).lower(): value
        for key, value in data.items()
        if value is not None or str(key).lower() == "items"
    }


def _text(fields: dict[str, Any], key: str) -> str:
    value = fields.get(key, "")
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def _decode_item(value: Any) -> Item:
    if value is None:
        return Item()
    fields = _fields(value, "each item")
    return Item(_text(fields, "shortdescription"), _text(fields, "price"))


def parse_receipt(data: Any) -> Receipt:
    """Build a Receipt from decoded JSON.

    Keys match without regard to case, unknown keys are ignored and null
    leaves a field at its default. Raises ValueError on a wrong JSON type.
    """
    if data is None:
        return Receipt()
    fields = _fields(data, "receipt")
    items = fields.get("items")
    if items is not None and not isinstance(items, (list, tuple)):
        raise ValueError("field 'items' must be an array")
    return Receipt(
        retailer=_text(fields, "retailer"),
        purchase_date=_text(fields, "purchasedate"),
        purchase_time=_text(fields, "purchasetime"),
        items=None if items is None else [_decode_item(item) for item in items],
        total=_text(fields, "total"),
    )