"""
String-format predicates.

Every matcher here first requires the value to be a string, then
applies its own format check to the string content.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .models import Matcher, Mismatch, MismatchKind, format_value


UUID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)
EMAIL_PATTERN = re.compile(r"^[a-z0-9._%+\-]+@[a-z0-9.\-]+\.[a-z]{2,4}$")
URL_PATTERN = re.compile(r"^https?://[^\s/$.?#].[^\s]*$")


class StringMatcher(Matcher):
    """
    Base class for matchers that operate on string content.

    Subclasses implement check(), which only ever sees strings.
    """

    def match(self, path: str, value: Any) -> Optional[Mismatch]:
        if not isinstance(value, str):
            return Mismatch.type_error(path, "string", value)
        return self.check(path, value)

    def check(self, path: str, value: str) -> Optional[Mismatch]:
        return None


def _format_failure(path: str, expected: str, value: str) -> Mismatch:
    return Mismatch(
        path=path,
        message=f"expected {expected}, got {format_value(value)}",
        expected=expected,
        actual=value,
    )


@dataclass(frozen=True)
class UUID(StringMatcher):
    """String in canonical 8-4-4-4-12 hex form, any case."""

    def check(self, path: str, value: str) -> Optional[Mismatch]:
        if not UUID_PATTERN.fullmatch(value):
            return _format_failure(path, "UUID", value)
        return None


@dataclass(frozen=True)
class Email(StringMatcher):
    """
    String that looks like local@domain.tld.

    Deliberately loose: lowercase only, 2-4 letter TLD, no RFC 5322.
    """

    def check(self, path: str, value: str) -> Optional[Mismatch]:
        if not EMAIL_PATTERN.fullmatch(value):
            return _format_failure(path, "email", value)
        return None


@dataclass(frozen=True)
class Regexp(StringMatcher):
    """
    String containing a match for a regular expression.

    The pattern is compiled when matching, so an invalid pattern is
    reported as a mismatch of kind CONFIGURATION rather than raised
    from the constructor.
    """
    pattern: str

    def check(self, path: str, value: str) -> Optional[Mismatch]:
        try:
            compiled = re.compile(self.pattern)
        except re.error as e:
            return Mismatch(
                path=path,
                message=f"invalid regexp pattern {self.pattern!r}: {e}",
                kind=MismatchKind.CONFIGURATION,
                expected=self.pattern,
                actual=value,
            )

        if not compiled.search(value):
            return _format_failure(path, f"to match {self.pattern!r}", value)
        return None


@dataclass(frozen=True)
class StringLength(StringMatcher):
    """String whose length lies in [minimum, maximum]."""
    minimum: int
    maximum: int

    def check(self, path: str, value: str) -> Optional[Mismatch]:
        length = len(value)
        if length < self.minimum or length > self.maximum:
            return Mismatch(
                path=path,
                message=(
                    f"expected string length between {self.minimum} and "
                    f"{self.maximum}, got {length}"
                ),
                expected=(self.minimum, self.maximum),
                actual=value,
            )
        return None


@dataclass(frozen=True)
class URL(StringMatcher):
    """An http:// or https:// URL."""

    def check(self, path: str, value: str) -> Optional[Mismatch]:
        if not URL_PATTERN.fullmatch(value):
            return _format_failure(path, "valid URL", value)
        return None


@dataclass(frozen=True, init=False)
class OneOf(StringMatcher):
    """String equal to one of the given options."""
    options: tuple[str, ...]

    def __init__(self, *options: str):
        object.__setattr__(self, "options", tuple(options))

    def check(self, path: str, value: str) -> Optional[Mismatch]:
        if value in self.options:
            return None
        return Mismatch(
            path=path,
            message=f"expected one of {list(self.options)}, got {format_value(value)}",
            expected=list(self.options),
            actual=value,
        )


@dataclass(frozen=True)
class StringWithFormat(StringMatcher):
    """
    String accepted by a caller-supplied validator.

    The validator rejects a string by raising ValueError (whose message
    is reported) or by returning False. Any other return value accepts.
    """
    validator: Callable[[str], Any]

    def check(self, path: str, value: str) -> Optional[Mismatch]:
        try:
            accepted = self.validator(value)
        except ValueError as e:
            return Mismatch(path=path, message=str(e), actual=value)

        if accepted is False:
            name = getattr(self.validator, "__name__", repr(self.validator))
            return _format_failure(path, f"string accepted by {name}", value)
        return None
