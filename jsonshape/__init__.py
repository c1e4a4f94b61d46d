"""
jsonshape - Structural Assertions for JSON Documents

This package checks decoded JSON documents against an expected shape
made of exact literals and composable predicates, reporting the first
mismatch with a path to its location.

Subpackages:
    - matchers: Predicate catalog and matching engine
    - assertions: Decoding, top-level assertions and result models

Usage:
    from jsonshape import assert_json, Object, Array, String, UUID, NumberGreater, Timestamp

    assert_json(
        Object({
            "id": UUID(),
            "age": NumberGreater(18),
            "created_at": Timestamp(),
            "tags": Array("golang", String(), "api"),
        }),
        response.text,
    )
    # AssertionError: at $.tags[1]: expected string, got number
"""

__version__ = "0.1.0"

# Re-export matchers for convenience
from .matchers import (
    # Models
    ROOT_PATH,
    Matcher,
    MatcherFunc,
    Mismatch,
    MismatchKind,
    # Engine
    match_value,
    # Containers
    Object,
    StrictObject,
    Array,
    UnorderedArray,
    # Type predicates
    Null,
    Bool,
    String,
    Number,
    Integer,
    # String predicates
    UUID,
    Email,
    Regexp,
    StringLength,
    URL,
    OneOf,
    StringWithFormat,
    # Time predicates
    Timestamp,
    Date,
    TimeWithinDuration,
    TimeWithinRange,
    TimeBefore,
    TimeAfter,
    # Number predicates
    NumberWithinDelta,
    NumberWithinRange,
    NumberGreater,
    NumberSmaller,
    Positive,
    Negative,
)

# Re-export assertions for convenience
from .assertions import (
    # Models
    AssertionResult,
    AssertionStatus,
    # Exceptions
    JSONDecodeFailure,
    ShapeAssertionError,
    ShapeDecodeError,
    ShapeMismatchError,
    # Engine
    DEFAULT_MAX_DEPTH,
    assert_json,
    check_json,
    decode_body,
    match,
)

__all__ = [
    # Package info
    "__version__",
    # Matchers - Models
    "ROOT_PATH",
    "Matcher",
    "MatcherFunc",
    "Mismatch",
    "MismatchKind",
    # Matchers - Engine
    "match_value",
    # Matchers - Containers
    "Object",
    "StrictObject",
    "Array",
    "UnorderedArray",
    # Matchers - Type predicates
    "Null",
    "Bool",
    "String",
    "Number",
    "Integer",
    # Matchers - String predicates
    "UUID",
    "Email",
    "Regexp",
    "StringLength",
    "URL",
    "OneOf",
    "StringWithFormat",
    # Matchers - Time predicates
    "Timestamp",
    "Date",
    "TimeWithinDuration",
    "TimeWithinRange",
    "TimeBefore",
    "TimeAfter",
    # Matchers - Number predicates
    "NumberWithinDelta",
    "NumberWithinRange",
    "NumberGreater",
    "NumberSmaller",
    "Positive",
    "Negative",
    # Assertions - Models
    "AssertionResult",
    "AssertionStatus",
    # Assertions - Exceptions
    "JSONDecodeFailure",
    "ShapeAssertionError",
    "ShapeDecodeError",
    "ShapeMismatchError",
    # Assertions - Engine
    "DEFAULT_MAX_DEPTH",
    "assert_json",
    "check_json",
    "decode_body",
    "match",
]
