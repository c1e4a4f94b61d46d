"""
Matchers for Expected JSON Shapes

This package provides the predicate catalog and the matching engine
used to compare decoded JSON values against an expected shape.

Predicates:
    - Type: Null, Bool, String, Number, Integer
    - String formats: UUID, Email, Regexp, StringLength, URL, OneOf,
      StringWithFormat
    - Time: Timestamp, Date, TimeWithinDuration, TimeWithinRange,
      TimeBefore, TimeAfter
    - Numbers: NumberWithinDelta, NumberWithinRange, NumberGreater,
      NumberSmaller, Positive, Negative

Containers:
    - Object / StrictObject: partial or exact key matching
    - Array / UnorderedArray: positional or greedy any-order matching

Usage:
    from jsonshape.matchers import Object, UUID, NumberGreater, match_value

    shape = Object({"id": UUID(), "age": NumberGreater(18)})
    mismatch = match_value(shape, "$", {"id": "...", "age": 30})
    if mismatch:
        print(mismatch)  # at $.id: expected UUID, got '...'
"""

# Models
from .models import (
    ROOT_PATH,
    Matcher,
    MatcherFunc,
    Mismatch,
    MismatchKind,
    json_kind,
)

# Engine and containers
from .engine import (
    Array,
    Object,
    StrictObject,
    UnorderedArray,
    literal_equal,
    match_value,
)

# Predicates
from .kinds import Bool, Integer, Null, Number, String
from .numbers import (
    Negative,
    NumberGreater,
    NumberSmaller,
    NumberWithinDelta,
    NumberWithinRange,
    Positive,
)
from .strings import (
    URL,
    UUID,
    Email,
    OneOf,
    Regexp,
    StringLength,
    StringWithFormat,
)
from .temporal import (
    Date,
    TimeAfter,
    TimeBefore,
    TimeParseError,
    TimeWithinDuration,
    TimeWithinRange,
    Timestamp,
    parse_date,
    parse_rfc3339,
)

__all__ = [
    # Models
    "ROOT_PATH",
    "Matcher",
    "MatcherFunc",
    "Mismatch",
    "MismatchKind",
    "json_kind",
    # Engine
    "match_value",
    "literal_equal",
    # Containers
    "Object",
    "StrictObject",
    "Array",
    "UnorderedArray",
    # Type predicates
    "Null",
    "Bool",
    "String",
    "Number",
    "Integer",
    # String predicates
    "UUID",
    "Email",
    "Regexp",
    "StringLength",
    "URL",
    "OneOf",
    "StringWithFormat",
    # Time predicates
    "Timestamp",
    "Date",
    "TimeWithinDuration",
    "TimeWithinRange",
    "TimeBefore",
    "TimeAfter",
    "TimeParseError",
    "parse_rfc3339",
    "parse_date",
    # Number predicates
    "NumberWithinDelta",
    "NumberWithinRange",
    "NumberGreater",
    "NumberSmaller",
    "Positive",
    "Negative",
]
