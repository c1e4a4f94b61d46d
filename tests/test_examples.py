"""End-to-end examples of checking API-style payloads."""

from __future__ import annotations

from jsonshape import (
    Array,
    Bool,
    Email,
    Integer,
    Number,
    NumberGreater,
    Object,
    OneOf,
    StrictObject,
    String,
    Timestamp,
    UnorderedArray,
    UUID,
    assert_json,
    check_json,
)


USER_PROFILE = """{
    "id": "550e8400-e29b-41d4-a716-446655440000",
    "username": "jdoe",
    "email": "jdoe@example.com",
    "age": 30,
    "active": true,
    "created_at": "2023-10-27T10:00:00Z",
    "address": {
        "street": "123 Main St",
        "city": "Anytown",
        "zip": "12345"
    },
    "tags": ["golang", "testing", "api"]
}"""


def _user_shape(city: str = "Anytown") -> Object:
    return Object({
        "id": UUID(),
        "username": "jdoe",
        "email": Email(),
        "age": NumberGreater(18),
        "active": Bool(),
        "created_at": Timestamp(),
        "address": Object({
            "street": String(),
            "city": city,
            "zip": String(),
        }),
        "tags": Array("golang", String(), "api"),
    })


def test_user_profile() -> None:
    assert_json(_user_shape(), USER_PROFILE)


def test_user_profile_reports_nested_path() -> None:
    result = check_json(_user_shape(city="Elsewhere"), USER_PROFILE)
    assert result.describe() == (
        "at $.address.city: expected 'Elsewhere' (str), got 'Anytown' (string)"
    )


def test_api_response() -> None:
    payload = """{
        "meta": {"page": 1, "total_pages": 5, "total_items": 42},
        "data": [
            {"id": 1, "name": "Widget A", "price": 19.99},
            {"id": 2, "name": "Widget B", "price": 25.50}
        ]
    }"""

    assert_json(Object({
        "meta": Object({
            "page": 1,
            "total_pages": Integer(),
            "total_items": NumberGreater(0),
        }),
        "data": Array(
            Object({"id": Number(), "name": String(), "price": 19.99}),
            Object({"id": Number(), "name": String(), "price": Number()}),
        ),
    }), payload)


def test_strict_validation() -> None:
    assert_json(StrictObject({"id": 1, "name": "Strict Item"}), '{"id": 1, "name": "Strict Item"}')


def test_unordered_list() -> None:
    assert_json(
        UnorderedArray("cherry", "apple", OneOf("banana", "kiwi")),
        b'["apple", "banana", "cherry"]',
    )


def test_shapes_are_reusable_across_documents() -> None:
    shape = _user_shape()
    assert check_json(shape, USER_PROFILE).passed
    assert check_json(shape, USER_PROFILE.replace('"age": 30', '"age": 12')).failed
    assert check_json(shape, USER_PROFILE).passed
