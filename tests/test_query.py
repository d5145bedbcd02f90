import pytest
from flat_json_db.query import match

REC = {
    "name": "Alice",
    "age": 30,
    "tags": ["fitness", "books"],
    "address": {"city": "Wien", "zip": "1010"},
    "bio": None,
}


def test_equality_and_nested():
    assert match(REC, {})
    assert match(REC, {"name": "Alice"})
    assert not match(REC, {"name": "Bob"})
    assert match(REC, {"address": {"city": "Wien"}})
    assert not match(REC, {"address": {"city": "Graz"}})
    assert not match(REC, {"name": {"first": "Alice"}})


def test_comparison_ops():
    assert match(REC, {"age": {"$gte": 30, "$lt": 31}})
    assert not match(REC, {"age": {"$gt": 30}})
    assert match(REC, {"age": {"$ne": 31}})
    assert match(REC, {"age": {"$eq": 30}})
    # incomparable / missing values never match
    assert not match(REC, {"name": {"$gt": 3}})
    assert not match(REC, {"missing": {"$lte": 3}})
    assert not match(REC, {"bio": {"$gt": 0}})


def test_contains_and_in():
    assert match(REC, {"tags": {"$contains": "books"}})
    assert not match(REC, {"tags": {"$contains": "chess"}})
    assert match(REC, {"name": {"$contains": "lic"}})
    assert not match(REC, {"age": {"$contains": 3}})
    assert match(REC, {"age": {"$in": [10, 30]}})
    assert not match(REC, {"age": {"$in": [10, 20]}})


def test_unsupported_operators():
    with pytest.raises(ValueError):
        match(REC, {"$or": []})
    with pytest.raises(ValueError):
        match(REC, {"name": {"$regex": "A.*"}})
