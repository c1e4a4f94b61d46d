"""
Assertions on Raw JSON Documents

This package decodes JSON bodies and checks them against an expected
shape built from jsonshape.matchers.

Entry points:
    - check_json: Return an AssertionResult (passed, failed, error)
    - assert_json: Raise a ShapeAssertionError unless the body matches
    - match: Run the engine on an already-decoded value

Usage:
    from jsonshape.assertions import assert_json, check_json
    from jsonshape.matchers import Object, UUID, NumberGreater

    shape = Object({"id": UUID(), "age": NumberGreater(18)})

    # In a test: raises AssertionError on mismatch
    assert_json(shape, response.text)

    # Or inspect the outcome
    result = check_json(shape, response.content)
    if not result.passed:
        print(result)  # Detailed failure message
"""

# Models
from .models import (
    AssertionResult,
    AssertionStatus,
    JSONDecodeFailure,
    ShapeAssertionError,
    ShapeDecodeError,
    ShapeMismatchError,
)

# Engine
from .engine import (
    DEFAULT_MAX_DEPTH,
    assert_json,
    check_json,
    decode_body,
    document_depth,
    match,
)

__all__ = [
    # Models
    "AssertionResult",
    "AssertionStatus",
    # Exceptions
    "JSONDecodeFailure",
    "ShapeAssertionError",
    "ShapeDecodeError",
    "ShapeMismatchError",
    # Engine
    "DEFAULT_MAX_DEPTH",
    "assert_json",
    "check_json",
    "decode_body",
    "document_depth",
    "match",
]
