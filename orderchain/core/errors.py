"""Error Hierarchy — typed exceptions for comparator misuse.

Invariants:
    - Every error has a code (str) and a category (ErrorCategory)
    - Well-typed chains never raise; these errors only surface caller misuse
    - Every concrete error is also a TypeError, matching how Python reports misuse

Design Decisions:
    - Single hierarchy with OrderchainError base: one except clause catches all
    - ErrorContext as dataclass: debugging detail without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    RESULT = "result"
    KEY = "key"
    USAGE = "usage"


@dataclass
class ErrorContext:
    """Where in a chain the failure happened."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    step: str | None = None
    debug_info: dict[str, Any] | None = None


class OrderchainError(Exception):
    """Base exception for all orderchain errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.context = context or ErrorContext()

    def to_dict(self) -> dict:
        """Flat envelope, suitable for structured logging."""
        return {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "timestamp": self.context.timestamp.isoformat(),
            "step": self.context.step,
            "debug_info": self.context.debug_info,
        }


class InvalidOrderingError(OrderchainError, TypeError):
    """A caller-supplied comparator returned something that is not an ordering."""
    def __init__(self, value: Any, context: ErrorContext | None = None):
        super().__init__(
            f"Comparator must return an Ordering, got {type(value).__name__}: {value!r}",
            "INVALID_ORDERING", ErrorCategory.RESULT, context,
        )
        self.value = value


class IncomparableKeysError(OrderchainError, TypeError):
    """Natural comparison of two extracted keys is not supported."""
    def __init__(self, left: Any, right: Any, context: ErrorContext | None = None):
        super().__init__(
            f"Cannot order {type(left).__name__} against {type(right).__name__}",
            "INCOMPARABLE_KEYS", ErrorCategory.KEY, context,
        )
        self.left = left
        self.right = right


class UnterminatedChainError(OrderchainError, TypeError):
    """A chain was used as a comparator before ascending()/descending()."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Chain is not terminated. Apply ascending or descending "
            "to obtain a comparator.",
            "UNTERMINATED_CHAIN", ErrorCategory.USAGE, context,
        )


class MissingCriterionError(OrderchainError, TypeError):
    """A builder step was given None instead of a key or comparator."""
    def __init__(self, context: ErrorContext | None = None):
        step = context.step if context else None
        super().__init__(
            f"{step or 'Chain step'} requires a key extractor or comparator, got None",
            "MISSING_CRITERION", ErrorCategory.USAGE, context,
        )
