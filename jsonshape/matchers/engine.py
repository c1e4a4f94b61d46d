"""
Matching engine for expected shapes against decoded JSON.

This module holds the dispatcher that decides between predicate
invocation and literal comparison, plus the container matchers that
recurse back through it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .models import Matcher, Mismatch, MismatchKind, format_value, is_number, json_kind

logger = logging.getLogger(__name__)

PROBE_PATH = "<probe>"


def match_value(expected: Any, path: str, actual: Any) -> Optional[Mismatch]:
    """
    Match a decoded value against an expected node.

    Matchers are invoked directly. Anything else is a literal, compared
    by deep equality with integer/float coercion.

    Args:
        expected: A Matcher or a literal value
        path: Location of actual in the document
        actual: The decoded JSON value

    Returns:
        None on success, otherwise the first Mismatch found
    """
    if isinstance(expected, Matcher):
        return expected.match(path, actual)

    if literal_equal(expected, actual):
        return None

    return Mismatch(
        path=path,
        message=(
            f"expected {format_value(expected)} ({type(expected).__name__}), "
            f"got {format_value(actual)} ({json_kind(actual)})"
        ),
        kind=MismatchKind.VALUE if _same_kind(expected, actual) else MismatchKind.TYPE,
        expected=expected,
        actual=actual,
    )


def literal_equal(expected: Any, actual: Any) -> bool:
    """
    Deep equality between a literal and a decoded value.

    Booleans never equal numbers. Two ints compare exactly; when either
    side is a float both are compared as floats, with no tolerance.
    """
    if isinstance(expected, bool) or isinstance(actual, bool):
        return isinstance(expected, bool) and isinstance(actual, bool) and expected == actual

    if is_number(expected) or is_number(actual):
        if not (is_number(expected) and is_number(actual)):
            return False
        if isinstance(expected, int) and isinstance(actual, int):
            return expected == actual
        try:
            return float(expected) == float(actual)
        except OverflowError:
            return False

    if isinstance(expected, Mapping):
        if not isinstance(actual, Mapping) or expected.keys() != actual.keys():
            return False
        return all(literal_equal(value, actual[key]) for key, value in expected.items())

    if isinstance(expected, (list, tuple)):
        if not isinstance(actual, (list, tuple)) or len(expected) != len(actual):
            return False
        return all(literal_equal(e, a) for e, a in zip(expected, actual))

    if expected is None or actual is None:
        return expected is actual

    return type(expected) is type(actual) and expected == actual


def _same_kind(expected: Any, actual: Any) -> bool:
    if isinstance(expected, Mapping):
        return isinstance(actual, dict)
    return json_kind(expected) == json_kind(actual)


# ─────────────────────────────────────────────────────────────────────────────
# Object Matchers
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True, init=False)
class Object(Matcher):
    """
    Partial object match.

    Every expected key must be present and match; extra keys in the
    actual object are ignored.
    """
    expected: Mapping[str, Any]

    def __init__(self, expected: Mapping[str, Any]):
        object.__setattr__(self, "expected", MappingProxyType(dict(expected)))

    def match(self, path: str, value: Any) -> Optional[Mismatch]:
        if not isinstance(value, dict):
            return Mismatch.type_error(path, "object", value)
        return _match_members(self.expected, path, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.expected)!r})"


@dataclass(frozen=True, init=False, repr=False)
class StrictObject(Object):
    """
    Exact object match.

    The actual key set must equal the expected key set and every value
    must match.
    """

    def match(self, path: str, value: Any) -> Optional[Mismatch]:
        if not isinstance(value, dict):
            return Mismatch.type_error(path, "object", value)

        for key in value:
            if key not in self.expected:
                return Mismatch(
                    path=path,
                    message=f"unexpected key {key!r}",
                    kind=MismatchKind.STRUCTURE,
                    actual=key,
                )

        return _match_members(self.expected, path, value)


def _match_members(
    expected: Mapping[str, Any], path: str, actual: dict[str, Any]
) -> Optional[Mismatch]:
    for key, expected_value in expected.items():
        if key not in actual:
            return Mismatch(
                path=path,
                message=f"missing key {key!r}",
                kind=MismatchKind.STRUCTURE,
                expected=key,
            )

        mismatch = match_value(expected_value, f"{path}.{key}", actual[key])
        if mismatch is not None:
            return mismatch

    return None


# ─────────────────────────────────────────────────────────────────────────────
# Array Matchers
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True, init=False)
class Array(Matcher):
    """Array whose elements match the expected elements in order."""
    elements: tuple[Any, ...]

    def __init__(self, *elements: Any):
        object.__setattr__(self, "elements", tuple(elements))

    def match(self, path: str, value: Any) -> Optional[Mismatch]:
        mismatch = self._check_shape(path, value)
        if mismatch is not None:
            return mismatch

        for i, expected in enumerate(self.elements):
            mismatch = match_value(expected, f"{path}[{i}]", value[i])
            if mismatch is not None:
                return mismatch

        return None

    def _check_shape(self, path: str, value: Any) -> Optional[Mismatch]:
        if not isinstance(value, list):
            return Mismatch.type_error(path, "array", value)

        if len(value) != len(self.elements):
            return Mismatch(
                path=path,
                message=f"expected array length {len(self.elements)}, got {len(value)}",
                kind=MismatchKind.STRUCTURE,
                expected=len(self.elements),
                actual=len(value),
            )
        return None

    def __repr__(self) -> str:
        inner = ", ".join(repr(e) for e in self.elements)
        return f"{type(self).__name__}({inner})"


@dataclass(frozen=True, init=False, repr=False)
class UnorderedArray(Array):
    """
    Array holding the expected elements in any order.

    Assignment is greedy: each expected element, in order, takes the
    first unconsumed actual element it matches, with no backtracking.
    Overlapping matchers can therefore fail even when some other
    assignment would succeed.
    """

    def match(self, path: str, value: Any) -> Optional[Mismatch]:
        mismatch = self._check_shape(path, value)
        if mismatch is not None:
            return mismatch

        used = [False] * len(value)

        for i, expected in enumerate(self.elements):
            for j, actual in enumerate(value):
                if used[j]:
                    continue
                if match_value(expected, PROBE_PATH, actual) is None:
                    logger.debug(f"{path}: expected element {i} matched actual element {j}")
                    used[j] = True
                    break
            else:
                return Mismatch(
                    path=path,
                    message=(
                        f"expected element {format_value(expected)} (index {i}) "
                        f"not found in remaining actual elements"
                    ),
                    kind=MismatchKind.STRUCTURE,
                    expected=expected,
                    actual=value,
                )

        return None
