"""
Core matcher interface and mismatch models.

This module defines the abstract Matcher capability shared by every
predicate and container matcher, plus the Mismatch record returned
when a value does not fit its expected shape.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional


ROOT_PATH = "$"


class MismatchKind(str, Enum):
    """Category of a failed match."""
    TYPE = "type"  # value is of the wrong JSON kind
    STRUCTURE = "structure"  # length, missing/unexpected key, unmatched element
    VALUE = "value"  # right kind, wrong value
    CONFIGURATION = "configuration"  # predicate built with bad parameters


@dataclass(frozen=True)
class Mismatch:
    """
    A single reason why an actual value does not match.

    Attributes:
        path: Location of the offending value, e.g. "$.address.zip"
        message: Human-readable description of the failure
        kind: Category of the failure
        expected: What was expected, when there is a concrete value to show
        actual: What was found
    """
    path: str
    message: str
    kind: MismatchKind = MismatchKind.VALUE
    expected: Any = None
    actual: Any = None

    def __str__(self) -> str:
        return f"at {self.path}: {self.message}"

    @classmethod
    def type_error(cls, path: str, expected: str, actual: Any) -> Mismatch:
        """Create a mismatch for a value of the wrong JSON kind."""
        return cls(
            path=path,
            message=f"expected {expected}, got {json_kind(actual)}",
            kind=MismatchKind.TYPE,
            expected=expected,
            actual=actual,
        )


class Matcher(ABC):
    """
    Abstract base class for expected-shape predicates.

    A matcher inspects one decoded JSON value at one path. It returns
    None when the value fits, or a Mismatch describing the first problem.
    Matchers hold no mutable state and can be reused across assertions.
    """

    @abstractmethod
    def match(self, path: str, value: Any) -> Optional[Mismatch]:
        """
        Check a decoded value.

        Args:
            path: Location of the value in the document
            value: The decoded JSON value

        Returns:
            None on success, otherwise a Mismatch
        """
        pass


@dataclass(frozen=True)
class MatcherFunc(Matcher):
    """Adapts a plain function into a Matcher."""
    fn: Callable[[str, Any], Optional[Mismatch]]

    def match(self, path: str, value: Any) -> Optional[Mismatch]:
        return self.fn(path, value)


def json_kind(value: Any) -> str:
    """Name the JSON kind of a decoded value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def is_number(value: Any) -> bool:
    """Return True for JSON numbers (bool is not a number here)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def format_value(value: Any, max_length: int = 100) -> str:
    """Format a value for display, truncating if too long."""
    if value is None:
        return "null"

    if isinstance(value, bool):
        formatted = "true" if value else "false"
    elif isinstance(value, str):
        formatted = repr(value)
    elif isinstance(value, (list, dict)):
        try:
            formatted = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError):
            formatted = repr(value)
    else:
        formatted = repr(value)

    if len(formatted) > max_length:
        return formatted[: max_length - 3] + "..."

    return formatted
