"""Error Hierarchy — typed, categorized exceptions for every hydration failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Errors are raised at the point of failure and unwind the whole load/update call
    - No rollback: fields mutated before the failure stay mutated
    - to_dict() produces a structured envelope for callers that report rejected payloads

Design Decisions:
    - Single hierarchy with HydrationError base: callers catch one type to reject a payload
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    CONFIGURATION = "configuration"
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    type_name: str | None = None
    field: str | None = None
    discriminator_value: str | None = None
    debug_info: dict[str, Any] | None = None


class HydrationError(Exception):
    """Base exception for all hydration errors."""

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
        """Convert to a structured error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "type_name": self.context.type_name,
                    "field": self.context.field,
                    "discriminator_value": self.context.discriminator_value,
                    "debug_info": self.context.debug_info,
                },
            }
        }


# ─── Configuration Errors ───────────────────────────────────────

class DiscriminatorConfigError(HydrationError):
    """Base type carries a descriptor without a discriminator field."""
    def __init__(self, type_name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.type_name = type_name
        super().__init__(
            f"Cannot use the discriminator map for '{type_name}'. "
            f"No discriminator field was configured.",
            "DISCRIMINATOR_CONFIG_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, ctx,
        )


class ModelNotRegisteredError(HydrationError):
    """Object cannot be described by a capability table."""
    def __init__(self, type_name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.type_name = type_name
        super().__init__(
            f"'{type_name}' is not a class and cannot be registered as a model",
            "MODEL_NOT_REGISTERED", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, ctx,
        )


# ─── Data Errors ────────────────────────────────────────────────

class DiscriminatorDataError(HydrationError):
    """Discriminator field is absent or empty in the data under discrimination."""
    def __init__(self, field_name: str, type_name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.type_name = type_name
        ctx.field = field_name
        super().__init__(
            f"The discriminator field '{field_name}' for '{type_name}' "
            f"was not found in the data set.",
            "DISCRIMINATOR_FIELD_MISSING", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx,
        )
        self.field_name = field_name


class TypeNotFoundError(HydrationError):
    """Neither the bare nor the namespaced candidate type name is registered."""
    def __init__(
        self,
        candidates: list[str],
        type_name: str,
        discriminator_value: str | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.type_name = type_name
        ctx.discriminator_value = discriminator_value
        super().__init__(
            f"No registered subtype of '{type_name}' matches "
            f"{' or '.join(repr(c) for c in candidates)}",
            "TYPE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx,
        )
        self.candidates = candidates


class UnboundKeyError(HydrationError):
    """Strict mode only: input key binds to no setter or declared field."""
    def __init__(self, key: str, type_name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.type_name = type_name
        ctx.field = key
        super().__init__(
            f"Key '{key}' has no setter or declared field on '{type_name}'",
            "UNBOUND_KEY", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx,
        )
        self.key = key
