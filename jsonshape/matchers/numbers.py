"""
Numeric predicates.

All matchers here require a JSON number (booleans are rejected) and
then compare it against their configured bounds.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .models import Matcher, Mismatch, format_value, is_number


class NumberMatcher(Matcher):
    """Base class for matchers that compare a numeric value."""

    def match(self, path: str, value: Any) -> Optional[Mismatch]:
        if not is_number(value):
            return Mismatch.type_error(path, "number", value)
        return self.check(path, value)

    def check(self, path: str, value: float) -> Optional[Mismatch]:
        return None


def _bound_failure(path: str, expected: str, value: float) -> Mismatch:
    return Mismatch(
        path=path,
        message=f"expected number {expected}, got {format_value(value)}",
        expected=expected,
        actual=value,
    )


@dataclass(frozen=True)
class NumberWithinDelta(NumberMatcher):
    """|value - expected| <= delta"""
    expected: float
    delta: float

    def check(self, path: str, value: float) -> Optional[Mismatch]:
        try:
            outside = abs(value - self.expected) > self.delta
        except OverflowError:
            outside = True  # int too large to mix with a float
        if outside:
            return _bound_failure(
                path, f"within {self.delta} of {self.expected}", value
            )
        return None


@dataclass(frozen=True)
class NumberWithinRange(NumberMatcher):
    """minimum <= value <= maximum"""
    minimum: float
    maximum: float

    def check(self, path: str, value: float) -> Optional[Mismatch]:
        if value < self.minimum or value > self.maximum:
            return _bound_failure(
                path, f"within range {self.minimum} to {self.maximum}", value
            )
        return None


@dataclass(frozen=True)
class NumberGreater(NumberMatcher):
    """value > minimum"""
    minimum: float

    def check(self, path: str, value: float) -> Optional[Mismatch]:
        if value <= self.minimum:
            return _bound_failure(path, f"greater than {self.minimum}", value)
        return None


@dataclass(frozen=True)
class NumberSmaller(NumberMatcher):
    """value < maximum"""
    maximum: float

    def check(self, path: str, value: float) -> Optional[Mismatch]:
        if value >= self.maximum:
            return _bound_failure(path, f"smaller than {self.maximum}", value)
        return None


@dataclass(frozen=True, init=False)
class Positive(NumberGreater):
    """value > 0; the bound is fixed."""

    def __init__(self) -> None:
        object.__setattr__(self, "minimum", 0)


@dataclass(frozen=True, init=False)
class Negative(NumberSmaller):
    """value < 0; the bound is fixed."""

    def __init__(self) -> None:
        object.__setattr__(self, "maximum", 0)
