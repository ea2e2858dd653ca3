"""Error Hierarchy — typed, categorized exceptions for docstore failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Ordinary misses are never errors: lookups return None, removals are no-ops
    - Exceptions raised by teardown collaborators are never wrapped or translated
    - to_response() produces the REST envelope used by the HTTP shell

Design Decisions:
    - Single hierarchy with DocStoreError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    collection: str | None = None
    doc_id: str | None = None
    path: str | None = None
    debug_info: dict[str, Any] | None = None


class DocStoreError(Exception):
    """Base exception for all docstore errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "collection": self.context.collection,
                    "doc_id": self.context.doc_id,
                    "path": self.context.path,
                },
            }
        }


# ─── Caller Errors (400-level) ──────────────────────────────────

class InvalidPathError(DocStoreError):
    """Path given to the tokenizer is not a string."""
    def __init__(self, path: object, context: ErrorContext | None = None):
        super().__init__(
            f"Path must be a string, got {type(path).__name__}",
            "INVALID_PATH", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.path = path


class ResourceNotFoundError(DocStoreError):
    """Requested resource does not exist (HTTP shell only)."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


# ─── Configuration Errors (500-level) ───────────────────────────

class UnknownDocStrategyError(DocStoreError):
    """A collection was configured with an unregistered document strategy."""
    def __init__(self, strategy: str, context: ErrorContext | None = None):
        super().__init__(
            f"No document strategy registered under '{strategy}'",
            "UNKNOWN_DOC_STRATEGY", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.strategy = strategy
