"""
Type predicates for decoded JSON values.

These matchers only check the JSON kind of a value (null, boolean,
string, number) without looking at its content.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .models import Matcher, Mismatch, MismatchKind, format_value, is_number


@dataclass(frozen=True)
class Null(Matcher):
    """Value must be null."""

    def match(self, path: str, value: Any) -> Optional[Mismatch]:
        if value is not None:
            return Mismatch(
                path=path,
                message=f"expected null, got {format_value(value)}",
                kind=MismatchKind.TYPE,
                expected=None,
                actual=value,
            )
        return None


@dataclass(frozen=True)
class Bool(Matcher):
    """Value must be true or false."""

    def match(self, path: str, value: Any) -> Optional[Mismatch]:
        if not isinstance(value, bool):
            return Mismatch.type_error(path, "boolean", value)
        return None


@dataclass(frozen=True)
class String(Matcher):
    """Value must be a string."""

    def match(self, path: str, value: Any) -> Optional[Mismatch]:
        if not isinstance(value, str):
            return Mismatch.type_error(path, "string", value)
        return None


@dataclass(frozen=True)
class Number(Matcher):
    """Value must be a number, integral or not."""

    def match(self, path: str, value: Any) -> Optional[Mismatch]:
        if not is_number(value):
            return Mismatch.type_error(path, "number", value)
        return None


@dataclass(frozen=True)
class Integer(Matcher):
    """Value must be a number with no fractional part."""

    def match(self, path: str, value: Any) -> Optional[Mismatch]:
        if not is_number(value):
            return Mismatch.type_error(path, "number", value)
        if isinstance(value, float) and not value.is_integer():
            return Mismatch(
                path=path,
                message=f"expected integer, got {format_value(value)}",
                expected="integer",
                actual=value,
            )
        return None
