from __future__ import annotations

import json

import pytest

from jsonshape import (
    DEFAULT_MAX_DEPTH,
    UUID,
    Array,
    AssertionResult,
    AssertionStatus,
    JSONDecodeFailure,
    MismatchKind,
    Number,
    NumberGreater,
    Object,
    ShapeAssertionError,
    ShapeDecodeError,
    ShapeMismatchError,
    StrictObject,
    String,
    UnorderedArray,
    assert_json,
    check_json,
    decode_body,
    match,
)
from jsonshape.assertions import document_depth


# ─────────────────────────────────────────────────────────────────────────────
# Decoding
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("body", ['{"a": 1}', b'{"a": 1}', bytearray(b'{"a": 1}')])
def test_decode_accepts_text_and_bytes(body: object) -> None:
    assert decode_body(body) == {"a": 1}


def test_decode_utf8_bytes() -> None:
    assert decode_body('"héllo"'.encode("utf-8")) == "héllo"


@pytest.mark.parametrize(
    "body",
    ["{", "", "[1, 2,]", "NaN", "[Infinity]", b"\xff\xfe", "{'a': 1}"],
)
def test_decode_rejects_invalid_json(body: object) -> None:
    with pytest.raises(JSONDecodeFailure, match="^invalid json: "):
        decode_body(body)


@pytest.mark.parametrize("body", [None, 123, {"a": 1}, ["[]"]])
def test_decode_rejects_other_types(body: object) -> None:
    with pytest.raises(JSONDecodeFailure, match="body must be str or bytes"):
        decode_body(body)


def test_decode_failure_is_an_error_result() -> None:
    result = check_json(1, "{not json")
    assert result.status == AssertionStatus.ERROR
    assert result.details["stage"] == "decode"
    assert result.describe().startswith("invalid json: ")


def test_decode_failure_raises_decode_error() -> None:
    with pytest.raises(ShapeDecodeError) as excinfo:
        assert_json(1, "{not json")
    assert str(excinfo.value).startswith("invalid json: ")
    assert excinfo.value.result.status == AssertionStatus.ERROR


# ─────────────────────────────────────────────────────────────────────────────
# Depth guard
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "value, depth",
    [(1, 0), ([], 1), ({"a": [1, {"b": []}]}, 4), ([[1], [[2]]], 3)],
)
def test_document_depth(value: object, depth: int) -> None:
    assert document_depth(value) == depth


def test_deep_document_is_rejected() -> None:
    body = "[" * 50 + "]" * 50
    result = check_json(Array(), body, max_depth=10)
    assert result.status == AssertionStatus.ERROR
    assert result.describe() == "document nesting depth 50 exceeds limit of 10"


def test_default_depth_allows_ordinary_documents() -> None:
    body = "[" * DEFAULT_MAX_DEPTH + "]" * DEFAULT_MAX_DEPTH
    assert check_json(Array(String()), body).status == AssertionStatus.FAILED


def test_pathologically_deep_body_is_a_decode_error() -> None:
    body = "[" * 1_000_000 + "]" * 1_000_000
    result = check_json(Array(), body)
    assert result.status == AssertionStatus.ERROR


# ─────────────────────────────────────────────────────────────────────────────
# Scenarios
# ─────────────────────────────────────────────────────────────────────────────

def test_object_with_predicates_passes() -> None:
    body = '{"id":"550e8400-e29b-41d4-a716-446655440000","age":30}'
    assert_json(Object({"id": UUID(), "age": NumberGreater(18)}), body)


def test_unordered_array_passes() -> None:
    assert_json(UnorderedArray(1, 2, 3), "[3,1,2]")


def test_strict_object_reports_unexpected_key() -> None:
    with pytest.raises(ShapeMismatchError, match="unexpected key 'b'"):
        assert_json(StrictObject({"a": 1}), '{"a":1,"b":2}')


def test_array_length_failure() -> None:
    with pytest.raises(ShapeMismatchError, match="expected array length 3, got 2"):
        assert_json(Array(1, 2, 3), "[1,2]")


def test_literal_failure() -> None:
    with pytest.raises(ShapeMismatchError) as excinfo:
        assert_json(456, "123")
    assert str(excinfo.value) == "at $: expected 456 (int), got 123 (number)"


def test_failure_path_is_reported() -> None:
    shape = Object({"a": Object({"b": Array(1, 2, 9)})})
    result = check_json(shape, '{"a":{"b":[1,2,3]}}')
    assert result.failed
    assert result.path == "$.a.b[2]"
    assert result.kind == MismatchKind.VALUE
    assert result.expected == 9
    assert result.actual == 3


def test_mismatch_errors_are_assertion_errors() -> None:
    with pytest.raises(AssertionError):
        assert_json(True, "false")
    assert issubclass(ShapeMismatchError, ShapeAssertionError)
    assert issubclass(ShapeDecodeError, ShapeAssertionError)


def test_passing_assertion_returns_nothing() -> None:
    assert assert_json(None, "null") is None
    result = check_json(None, "null")
    assert result.passed
    assert str(result) == "✅ PASS: Document matches expected shape"


def test_passed_result_carries_no_comparison_values() -> None:
    result = check_json(Object({"id": Number()}), '{"id": 7}')
    assert result.passed
    assert result.path == "$"
    assert result.expected is None and result.actual is None
    with pytest.raises(TypeError):
        AssertionResult.passed_result("ok", actual=7)


def test_result_string_form_for_failures() -> None:
    result = check_json(Object({"a": 1}), '{"a": 2}')
    text = str(result)
    assert text.splitlines()[0] == "❌ FAILED: expected 1 (int), got 2 (number)"
    assert "   Path: $.a" in text
    assert "   Kind: value" in text


def test_match_on_decoded_value() -> None:
    assert match(Object({"a": Number()}), {"a": 1.5}) is None
    mismatch = match(Object({"a": Number()}), {"a": "x"}, path="$.body")
    assert str(mismatch) == "at $.body.a: expected number, got string"


# ─────────────────────────────────────────────────────────────────────────────
# JSONPath selection
# ─────────────────────────────────────────────────────────────────────────────

PAYLOAD = json.dumps(
    {
        "meta": {"page": 1},
        "data": [
            {"id": 1, "name": "Widget A"},
            {"id": 2, "name": "Widget B"},
        ],
    }
)


def test_select_sub_document() -> None:
    assert check_json(Object({"page": 1}), PAYLOAD, at="$.meta").passed


def test_select_roots_reported_paths_at_expression() -> None:
    result = check_json(Object({"name": "Widget C"}), PAYLOAD, at="$.data[1]")
    assert result.describe() == (
        "at $.data[1].name: expected 'Widget C' (str), got 'Widget B' (string)"
    )


def test_select_nothing_is_an_error() -> None:
    result = check_json(Object({}), PAYLOAD, at="$.missing")
    assert result.status == AssertionStatus.ERROR
    assert result.details["stage"] == "select"
    with pytest.raises(ShapeDecodeError, match="selected nothing"):
        assert_json(Object({}), PAYLOAD, at="$.missing")


def test_select_invalid_expression_is_an_error() -> None:
    result = check_json(Object({}), PAYLOAD, at="$.[[[")
    assert result.status == AssertionStatus.ERROR
    assert result.describe().startswith("invalid JSONPath expression")
