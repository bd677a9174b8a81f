"""Non-raising results for fixed-point operations.

The operations in ``fpcore.math`` raise on failure. Callers that would
rather branch on a value (a ledger batching many postings, for example)
can run any operation through ``capture`` and get a MathResult back.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import structlog

from fpcore.errors import ERRORS_BY_KIND, MathError, MathErrorKind

logger = structlog.get_logger()


@dataclass(frozen=True)
class MathResult:
    """Result of a fixed-point operation.

    Attributes:
        value: The computed magnitude, or None if the operation failed.
        error: If the operation failed, the kind of failure.
        error_detail: Optional human-readable detail about the failure.

    Examples:
        # Success
        result = MathResult.ok(2275)
        assert result.is_ok
        assert result.unwrap() == 2275

        # Failure
        result = MathResult.failure(MathErrorKind.DIVIDE_BY_ZERO)
        assert result.is_error
        assert result.unwrap_or(0) == 0
    """

    value: int | None
    error: MathErrorKind | None = None
    error_detail: str | None = None

    @property
    def is_ok(self) -> bool:
        """True if the operation succeeded."""
        return self.error is None

    @property
    def is_error(self) -> bool:
        """True if the operation failed."""
        return self.error is not None

    def unwrap(self) -> int:
        """Return the value, re-raising the failure as its exception class.

        Raises:
            MathError: The subclass matching ``error``
        """
        if self.error is not None:
            raise ERRORS_BY_KIND[self.error](self.error_detail or self.error.value)
        if self.value is None:
            raise ValueError("MathResult has neither a value nor an error")
        return self.value

    def unwrap_or(self, default: int) -> int:
        """Return the value, or ``default`` if the operation failed."""
        if self.error is not None or self.value is None:
            return default
        return self.value

    @classmethod
    def ok(cls, value: int) -> MathResult:
        """Create a successful result."""
        return cls(value=value)

    @classmethod
    def failure(cls, error: MathErrorKind, detail: str | None = None) -> MathResult:
        """Create a failed result."""
        return cls(value=None, error=error, error_detail=detail)

    @classmethod
    def from_error(cls, err: MathError) -> MathResult:
        """Create a failed result from a raised MathError."""
        return cls.failure(err.kind, str(err) or None)


def capture(operation: Callable[..., int], *args: Any, **kwargs: Any) -> MathResult:
    """Run a fixed-point operation and return its outcome as a MathResult.

    Only MathError is converted; anything else (TypeError for a non-int
    argument, say) still propagates.

    Example:
        result = capture(div, 4550, 0, 2)
        assert result.error is MathErrorKind.DIVIDE_BY_ZERO
    """
    try:
        return MathResult.ok(operation(*args, **kwargs))
    except MathError as err:
        logger.debug(
            "fixed_point_operation_failed",
            operation=getattr(operation, "__name__", repr(operation)),
            kind=err.kind.value,
            detail=str(err),
        )
        return MathResult.from_error(err)
