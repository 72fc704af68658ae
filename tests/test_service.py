import uuid

from receiptpoints.models import Item, Receipt
from receiptpoints.points import calculate_points
from receiptpoints.service import deterministic_uuid, process_receipt


def _receipt(**changes):
    values = dict(
        retailer="M&M Corner Market",
        purchase_date="2022-03-20",
        purchase_time="14:33",
        items=[Item("Gatorade", "2.25"), Item("Gatorade", "2.25")],
        total="4.50",
    )
    values.update(changes)
    return Receipt(**values)


def test_uuid_is_deterministic():
    ids = {deterministic_uuid(_receipt()) for _ in range(3)}
    assert len(ids) == 1
    (receipt_id,) = ids
    assert len(receipt_id) == 36
    assert [len(part) for part in receipt_id.split("-")] == [8, 4, 4, 4, 12]
    assert receipt_id == receipt_id.lower()


def test_uuid_is_name_based_sha1():
    parsed = uuid.UUID(deterministic_uuid(_receipt()))
    assert parsed.version == 5
    assert parsed.variant == uuid.RFC_4122
    assert str(parsed) == deterministic_uuid(_receipt())


def test_uuid_depends_on_every_field():
    base = deterministic_uuid(_receipt())
    variants = [
        _receipt(retailer="Target"),
        _receipt(purchase_date="2022-03-21"),
        _receipt(purchase_time="14:34"),
        _receipt(items=[Item("Gatorade", "2.25")]),
        _receipt(total="4.51"),
    ]
    ids = {deterministic_uuid(receipt) for receipt in variants}
    assert base not in ids
    assert len(ids) == len(variants)


def test_uuid_distinguishes_missing_and_empty_items():
    assert deterministic_uuid(_receipt(items=None)) != deterministic_uuid(_receipt(items=[]))


def test_uuid_sees_surrounding_whitespace():
    padded = _receipt(retailer="  M&M Corner Market  ")
    assert deterministic_uuid(padded) != deterministic_uuid(_receipt())
    padded.sanitize()
    assert deterministic_uuid(padded) == deterministic_uuid(_receipt())


def test_uuid_handles_unusual_text():
    first = deterministic_uuid(_receipt(retailer="<b>\u2028\ud800"))
    second = deterministic_uuid(_receipt(retailer="<b>\u2028\ud800"))
    assert first == second
    assert uuid.UUID(first).version == 5


def test_process_receipt_returns_id_and_points():
    receipt = _receipt()
    receipt_id, points = process_receipt(receipt)
    assert receipt_id == deterministic_uuid(receipt)
    assert points == calculate_points(receipt)[0]


def test_process_receipt_is_repeatable():
    first_id, first_points = process_receipt(_receipt())
    second_id, second_points = process_receipt(_receipt())
    assert first_id == second_id
    assert uuid.UUID(first_id).version == 5
    assert first_points == 54
    assert second_points == 54