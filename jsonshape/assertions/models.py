"""
Assertion result models.

This module defines data structures for assertion outcomes,
including detailed failure information, and the exceptions raised
when an assertion does not pass.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..matchers.models import MismatchKind, format_value


class AssertionStatus(str, Enum):
    """Status of an assertion check."""
    PASSED = "passed"
    FAILED = "failed"  # document decoded but does not match the shape
    ERROR = "error"  # e.g., invalid JSON, bad JSONPath selection


@dataclass
class AssertionResult:
    """
    Result of checking a JSON document against an expected shape.

    Attributes:
        status: Whether the assertion passed, failed, or errored
        message: Human-readable description of the result
        path: Location of the first mismatch, e.g. "$.address.zip"
        expected: What was expected (for comparison failures)
        actual: What was actually found
        kind: Category of the mismatch, for FAILED results
        details: Additional context for debugging
    """
    status: AssertionStatus
    message: str
    path: str | None = None
    expected: Any = None
    actual: Any = None
    kind: MismatchKind | None = None
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def passed(self) -> bool:
        return self.status == AssertionStatus.PASSED

    @property
    def failed(self) -> bool:
        return self.status == AssertionStatus.FAILED

    def describe(self) -> str:
        """Single-line form, e.g. "at $.a.b[2]: expected 9 (int), got 3 (number)"."""
        if self.status == AssertionStatus.FAILED and self.path:
            return f"at {self.path}: {self.message}"
        return self.message

    def __str__(self) -> str:
        """Format as a human-readable string."""
        if self.status == AssertionStatus.PASSED:
            return f"✅ PASS: {self.message}"

        icon = "❌" if self.status == AssertionStatus.FAILED else "⚠️"
        lines = [f"{icon} {self.status.value.upper()}: {self.message}"]

        if self.path:
            lines.append(f"   Path: {self.path}")

        if self.kind is not None:
            lines.append(f"   Kind: {self.kind.value}")

        if self.expected is not None:
            lines.append(f"   Expected: {format_value(self.expected)}")

        if self.actual is not None:
            lines.append(f"   Actual:   {format_value(self.actual)}")

        for key, value in self.details.items():
            lines.append(f"   {key}: {format_value(value)}")

        return "\n".join(lines)

    @classmethod
    def passed_result(
        cls,
        message: str,
        path: str | None = None,
    ) -> AssertionResult:
        """Create a passing result."""
        return cls(
            status=AssertionStatus.PASSED,
            message=message,
            path=path,
        )

    @classmethod
    def failed_result(
        cls,
        message: str,
        path: str | None = None,
        expected: Any = None,
        actual: Any = None,
        kind: MismatchKind | None = None,
        details: dict[str, Any] | None = None,
    ) -> AssertionResult:
        """Create a failing result."""
        return cls(
            status=AssertionStatus.FAILED,
            message=message,
            path=path,
            expected=expected,
            actual=actual,
            kind=kind,
            details=details or {},
        )

    @classmethod
    def error_result(
        cls,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> AssertionResult:
        """Create an error result (the document couldn't be checked)."""
        return cls(
            status=AssertionStatus.ERROR,
            message=message,
            path=path,
            details=details or {},
        )


# ─────────────────────────────────────────────────────────────────────────────
# Exceptions
# ─────────────────────────────────────────────────────────────────────────────

class JSONDecodeFailure(ValueError):
    """Raised when a body is not valid JSON or not str/bytes."""


class ShapeAssertionError(AssertionError):
    """Base class for failed shape assertions; carries the result."""

    def __init__(self, result: AssertionResult):
        super().__init__(result.describe())
        self.result = result


class ShapeMismatchError(ShapeAssertionError):
    """The document decoded but did not match the expected shape."""


class ShapeDecodeError(ShapeAssertionError):
    """The document could not be decoded or selected."""
