"""
Top-level assertions on raw JSON documents.

This module decodes a JSON body, optionally narrows it to a
sub-document with JSONPath, and runs the matching engine against an
expected shape, reporting the first mismatch found.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from jsonpath_ng import parse as parse_jsonpath
from jsonpath_ng.exceptions import JSONPathError

from ..matchers.engine import match_value
from ..matchers.models import ROOT_PATH, Mismatch
from .models import (
    AssertionResult,
    AssertionStatus,
    JSONDecodeFailure,
    ShapeDecodeError,
    ShapeMismatchError,
)

logger = logging.getLogger(__name__)

# Each nesting level costs a few interpreter frames while matching.
DEFAULT_MAX_DEPTH = 200


def decode_body(body: str | bytes | bytearray) -> Any:
    """
    Decode a raw JSON body.

    Args:
        body: UTF-8 JSON text as str, bytes or bytearray

    Returns:
        The decoded value

    Raises:
        JSONDecodeFailure: If the body has the wrong type, is not UTF-8,
            or is not valid standard JSON
    """
    if isinstance(body, (bytes, bytearray)):
        try:
            text = bytes(body).decode("utf-8")
        except UnicodeDecodeError as e:
            raise JSONDecodeFailure(f"invalid json: {e}") from e
    elif isinstance(body, str):
        text = body
    else:
        raise JSONDecodeFailure(
            f"body must be str or bytes, got {type(body).__name__}"
        )

    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        raise JSONDecodeFailure(f"invalid json: {e}") from e
    except RecursionError as e:
        raise JSONDecodeFailure("invalid json: document nested too deeply") from e


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard constant {name}")


def document_depth(value: Any) -> int:
    """
    Measure the container nesting depth of a decoded value.

    Scalars have depth 0, a flat array or object depth 1. Walks the
    tree iteratively so arbitrarily deep documents can be measured.
    """
    deepest = 0
    stack = [(value, 0)]
    while stack:
        node, depth = stack.pop()
        if isinstance(node, dict):
            children = node.values()
        elif isinstance(node, list):
            children = node
        else:
            deepest = max(deepest, depth)
            continue
        deepest = max(deepest, depth + 1)
        stack.extend((child, depth + 1) for child in children)
    return deepest


def match(expected: Any, value: Any, path: str = ROOT_PATH) -> Optional[Mismatch]:
    """
    Match an already-decoded value against an expected shape.

    Args:
        expected: A Matcher or literal
        value: Decoded JSON value (e.g. the result of response.json())
        path: Root path used in mismatch messages

    Returns:
        None on success, otherwise the first Mismatch found
    """
    return match_value(expected, path, value)


def check_json(
    expected: Any,
    body: str | bytes | bytearray,
    *,
    at: str | None = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> AssertionResult:
    """
    Check a raw JSON body against an expected shape.

    Args:
        expected: A Matcher or literal describing the expected document
        body: Raw JSON text or UTF-8 bytes
        at: Optional JSONPath selecting the sub-document to check
        max_depth: Maximum container nesting accepted in the document

    Returns:
        AssertionResult: PASSED, FAILED with the first mismatch, or
        ERROR when the body cannot be decoded or selected

    Example:
        result = check_json(Array(1, 2, 3), "[1, 2]")
        result.failed       # True
        result.describe()   # "at $: expected array length 3, got 2"
    """
    try:
        actual = decode_body(body)
    except JSONDecodeFailure as e:
        logger.debug(f"Body rejected before matching: {e}")
        return AssertionResult.error_result(
            message=str(e),
            path=ROOT_PATH,
            details={"stage": "decode"},
        )

    depth = document_depth(actual)
    if depth > max_depth:
        return AssertionResult.error_result(
            message=f"document nesting depth {depth} exceeds limit of {max_depth}",
            path=ROOT_PATH,
            details={"stage": "decode", "depth": depth, "max_depth": max_depth},
        )

    root = ROOT_PATH
    if at is not None:
        actual, error = _select(actual, at)
        if error:
            return error
        root = at

    mismatch = match_value(expected, root, actual)
    if mismatch is not None:
        return AssertionResult.failed_result(
            message=mismatch.message,
            path=mismatch.path,
            expected=mismatch.expected,
            actual=mismatch.actual,
            kind=mismatch.kind,
        )

    return AssertionResult.passed_result(
        message="Document matches expected shape",
        path=root,
    )


def assert_json(
    expected: Any,
    body: str | bytes | bytearray,
    *,
    at: str | None = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> None:
    """
    Assert that a raw JSON body matches an expected shape.

    Raises:
        ShapeDecodeError: If the body cannot be decoded or selected
        ShapeMismatchError: If the document does not match; the message
            names the path of the first mismatch
    """
    result = check_json(expected, body, at=at, max_depth=max_depth)
    if result.status == AssertionStatus.ERROR:
        raise ShapeDecodeError(result)
    if result.status == AssertionStatus.FAILED:
        raise ShapeMismatchError(result)


def _select(data: Any, path: str) -> tuple[Any, AssertionResult | None]:
    """
    Evaluate a JSONPath expression and return its first match.

    Returns:
        Tuple of (value, error). If error is not None, value is None.
    """
    try:
        jsonpath_expr = parse_jsonpath(path)
    except JSONPathError as e:
        return None, AssertionResult.error_result(
            message=f"invalid JSONPath expression {path!r}: {e}",
            path=path,
            details={"stage": "select", "error": str(e)},
        )

    matches = jsonpath_expr.find(data)
    if not matches:
        return None, AssertionResult.error_result(
            message=f"JSONPath {path!r} selected nothing",
            path=path,
            details={"stage": "select"},
        )

    if len(matches) > 1:
        logger.debug(f"JSONPath {path} matched {len(matches)} values, using the first")
    return matches[0].value, None
