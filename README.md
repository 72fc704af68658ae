# receiptpoints

A small HTTP service that accepts shopping receipts, scores them by a fixed
set of rules, and lets you look up the points later by receipt ID.

## Installing

    pip install .

## Running the server

    receiptpoints

This starts the application on all interfaces, port 8080, using Flask's
built-in server. The command takes no options other than `--help`. Each
request is logged with its method, path and remote address.

## Endpoints

### `POST /receipts/process`

Send a receipt as JSON:

```json
{
  "retailer": "Target",
  "purchaseDate": "2022-01-01",
  "purchaseTime": "13:01",
  "items": [
    {"shortDescription": "Mountain Dew 12PK", "price": "6.49"}
  ],
  "total": "6.49"
}
```

Keys are matched without regard to case and unknown keys are ignored.
Leading and trailing whitespace is trimmed from every string field. On
success the reply is `{"id": "<uuid>"}`. The ID is a name-based (SHA-1,
version 5) UUID derived from the receipt's contents, so the same receipt
always gets the same ID.

A receipt that fails validation gets status 400 and a list of field errors:

```json
[{"field": "Retailer", "error": "is required"},
 {"field": "PurchaseDate", "error": "must match format YYYY-MM-DD"}]
```

Every field is required, including `shortDescription` and `price` on each
item; `purchaseDate` must also be a real `YYYY-MM-DD` date. An empty `items`
list is accepted, a missing or null one is not.

A body that is not valid JSON, or has a value of the wrong JSON type, gets
status 400 with `{"error": "Invalid JSON: ..."}`.

### `GET /receipts/{id}/points`

Returns `{"points": <int>}`, or status 404 with `{"error": "ID not found"}`.

## Scoring rules

- 1 point for each ASCII letter or digit in the retailer name.
- 50 points if the total is a round dollar amount.
- 25 points if the total is a multiple of 0.25.
- 5 points for every two items.
- For each item whose trimmed description length (in UTF-8 bytes) is a
  multiple of 3, the price times 0.2, rounded up.
- 6 points if the day of the purchase date is odd.
- 10 points if the purchase time falls in the 14:00 hour.

A rule whose input cannot be read scores 0.

## Using it as a library

```python
from receiptpoints.models import parse_receipt
from receiptpoints.points import calculate_points
from receiptpoints.service import process_receipt

receipt = parse_receipt({
    "retailer": "M&M Corner Market",
    "purchaseDate": "2022-03-20",
    "purchaseTime": "14:33",
    "items": [{"shortDescription": "Gatorade", "price": "2.25"}] * 4,
    "total": "9.00",
})
receipt_id, points = process_receipt(receipt)   # points == 109
total, breakdown = calculate_points(receipt)     # breakdown: one line per rule
```

`receiptpoints.validate.validate_receipt(receipt)` returns a list of
`FieldError` objects, empty when the receipt is valid. Each rule in
`receiptpoints.points` (`retailer_points`, `round_dollar_points`,
`quarter_multiple_points`, `item_count_points`, `item_description_points`,
`odd_day_points`, `purchase_time_points`) can also be called on its own.

To embed the web application elsewhere, build it with
`receiptpoints.app.create_app(store)`, passing a
`receiptpoints.store.Store`, a thread-safe in-memory store that holds a
fixed number of entries and drops the least recently used first.

## What it does not do

Points are kept in memory only. The server keeps at most 10,000 receipts and
forgets them all when it stops; there is no database or file storage. The
port and store size are fixed, and the built-in Flask server is meant for
development rather than production traffic.

## Running the tests

    pip install ".[test]"
    pytest