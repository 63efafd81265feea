"""Error Hierarchy — typed, categorized exceptions for exercise failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - str(error) is exactly the human message (no code prefix)
    - to_dict() produces the uniform error envelope used by service handlers

Design Decisions:
    - Single hierarchy with DrillsError base: callers can catch one type
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and caller handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories."""
    VALIDATION = "validation"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and envelopes."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    exercise: str | None = None
    input_repr: str | None = None
    debug_info: dict[str, Any] | None = None


class DrillsError(Exception):
    """Base exception for all exercise errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_dict(self) -> dict:
        """Convert to the standard error envelope."""
        return {
            "status": "error",
            "error_code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
            "exercise": self.context.exercise,
        }


# ─── Validation Errors ───────────────────────────────────────────

NEGATIVE_NUMBER_MESSAGE = "Negative number not allowed"


class InvalidInputError(DrillsError):
    """Input rejected by an exercise (e.g. negative number to square)."""
    def __init__(
        self, message: str = NEGATIVE_NUMBER_MESSAGE,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "INVALID_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context,
        )


class SchemaValidationError(DrillsError):
    """Raw boundary input failed schema validation."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )
        self.field = field

    def to_dict(self) -> dict:
        envelope = super().to_dict()
        envelope["field"] = self.field
        return envelope
